"""
composition.py

Suit and rank tallies over a card collection.

A wild card counts toward every suit at once: for "how many cards help
suit X" it must be counted everywhere, not split across suits. Ranks get no
such fan-out.
"""
from collections import Counter
from typing import Dict, Iterable, Optional

from deck_odds.card_types import (
    RANKS, SUITS, Card, DeckState, Edition, Enhancement, Seal, Suit
)
from deck_odds.probability_models import DeckComposition, SuitProbabilities


def suit_counts(cards: Iterable[Card]) -> Dict[Suit, int]:
    counts = {suit: 0 for suit in SUITS}
    for card in cards:
        if card.is_wild:
            for suit in SUITS:
                counts[suit] += 1
        else:
            counts[card.suit] += 1
    return counts


def rank_counts(cards: Iterable[Card]) -> Dict[str, int]:
    return dict(Counter(card.rank for card in cards))


def wild_card_count(cards: Iterable[Card]) -> int:
    return sum(1 for card in cards if card.is_wild)


def suit_probabilities(deck: Optional[DeckState]) -> SuitProbabilities:
    """
    Chance the next draw helps each suit. Clamped to 1 because wilds are
    counted under every suit, so an all-wild deck gives exactly 1 per suit.
    """
    if deck is None or deck.cards_remaining == 0:
        return SuitProbabilities()

    total = deck.cards_remaining
    counts = suit_counts(deck.remaining)
    return SuitProbabilities(**{suit.value: min(1.0, counts[suit] / total) for suit in SUITS})


def deck_composition(cards: Iterable[Card]) -> DeckComposition:
    """Full tally of a card collection; every suit/rank/enum member is present."""
    by_suit = {suit.value: 0 for suit in SUITS}
    by_rank = {rank: 0 for rank in RANKS}
    enhancements = {enhancement.value: 0 for enhancement in Enhancement}
    editions = {edition.value: 0 for edition in Edition}
    seals = {seal.value: 0 for seal in Seal}

    for card in cards:
        by_suit[card.suit.value] += 1
        by_rank[card.rank] += 1
        enhancements[card.enhancement.value] += 1
        editions[card.edition.value] += 1
        seals[card.seal.value] += 1

    return DeckComposition(
        by_suit=by_suit,
        by_rank=by_rank,
        enhancements=enhancements,
        editions=editions,
        seals=seals,
    )
