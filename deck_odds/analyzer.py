"""
analyzer.py

Probability queries against one deck snapshot: outs analysis, flush odds,
the aggregate analysis and custom hypergeometric queries.

analyzer = ProbabilityAnalyzer(DeckState.from_dict(feed['deck']))
analyzer.calculate_outs(OutsCalculationParams(hand_cards, TargetHand.FLUSH, draws_remaining=2))
"""
from typing import Optional, Union

from deck_odds.card_types import SUITS, DeckState, Suit
from deck_odds.combinatorics import calculate_hypergeometric, hypergeometric_at_least
from deck_odds.composition import rank_counts, suit_counts, suit_probabilities, wild_card_count
from deck_odds.config import config
from deck_odds.logging_config import get_logger
from deck_odds.outs import find_outs_with_cards
from deck_odds.probability_models import (
    FlushProbabilities, HypergeometricResult, OutsAnalysis,
    OutsCalculationParams, ProbabilityAnalysis, SuitProbabilities
)

logger = get_logger("analyzer")


def _coerce_suit(suit: Union[Suit, str, None]) -> Optional[Suit]:
    if suit is None or isinstance(suit, Suit):
        return suit
    try:
        return Suit(str(suit).lower())
    except ValueError:
        logger.warning(f"Ignoring unknown preferred suit {suit!r}")
        return None


def calculate_outs(deck: Optional[DeckState], params: OutsCalculationParams) -> OutsAnalysis:
    if deck is None or deck.cards_remaining == 0:
        logger.debug("No cards remaining; empty outs analysis")
        return OutsAnalysis()

    out_cards, outs = find_outs_with_cards(params.hand_cards, params.target_hand, deck.remaining)

    # Wilds the shape filter did not already list still complete the hand
    listed = {card.id for card in out_cards}
    additional_wilds = sum(1 for card in deck.remaining if card.is_wild and card.id not in listed)
    effective_outs = len(outs) + additional_wilds

    remaining = deck.cards_remaining
    draw_one = effective_outs / remaining

    if params.draws_remaining > 0:
        draws = min(params.draws_remaining, remaining)
        draw_multiple = hypergeometric_at_least(remaining, effective_outs, draws, 1)
    else:
        draw_multiple = 0.0

    logger.debug(
        f"Outs for {params.target_hand}: {len(outs)} listed, {effective_outs} effective, "
        f"P(next)={draw_one:.4f}, P({params.draws_remaining} draws)={draw_multiple:.4f}"
    )

    return OutsAnalysis(
        outs=outs,
        outs_count=len(outs),
        draw_one_out_probability=draw_one,
        draw_with_multiple_chances=draw_multiple,
        effective_outs=effective_outs,
    )


def flush_probabilities(deck: Optional[DeckState],
                        preferred_suit: Union[Suit, str, None] = None) -> FlushProbabilities:
    """
    Chance of completing a flush in each suit by filling the hand up to flush
    size from the remaining deck. Wilds count toward every suit, in hand and
    in the deck.

    The best suit is the highest probability; ties keep canonical order
    (hearts, diamonds, clubs, spades) unless the preferred suit is among them.
    """
    if deck is None:
        return FlushProbabilities()

    if preferred_suit is None:
        preferred_suit = config['flush'].get('preferred_suit')
    preferred = _coerce_suit(preferred_suit)

    flush_size = config['flush']['size']
    hand_counts = suit_counts(deck.hand)
    deck_counts = suit_counts(deck.remaining)
    draws = max(0, flush_size - len(deck.hand))

    results = {}
    for suit in SUITS:
        needed = max(0, flush_size - hand_counts[suit])
        probability = 0.0

        if needed == 0:
            probability = 1.0
        elif deck.cards_remaining > 0:
            available = deck_counts[suit]
            if draws >= needed and available >= needed:
                probability = hypergeometric_at_least(deck.cards_remaining, available, draws, needed)

        results[suit] = probability

    best_suit = None
    best_probability = 0.0
    for suit in SUITS:
        probability = results[suit]
        if probability > best_probability or (
            probability > 0 and probability == best_probability and suit == preferred
        ):
            best_suit = suit
            best_probability = probability

    return FlushProbabilities(
        **{suit.value: results[suit] for suit in SUITS},
        best_suit=best_suit,
        best_probability=best_probability,
    )


def analysis(deck: Optional[DeckState]) -> Optional[ProbabilityAnalysis]:
    if deck is None:
        return None

    return ProbabilityAnalysis(
        deck_size=deck.total_cards,
        cards_remaining=deck.cards_remaining,
        suit_probabilities=suit_probabilities(deck),
        flush_odds=flush_probabilities(deck),
        rank_distribution=rank_counts(deck.remaining),
        wild_card_count=wild_card_count(deck.remaining),
    )


def calculate_probability(deck: Optional[DeckState], success_cards: int, draws: int,
                          desired_successes: int) -> HypergeometricResult:
    """Hypergeometric query where the population is the remaining deck."""
    total_cards = deck.cards_remaining if deck is not None else 0
    if total_cards == 0:
        return HypergeometricResult()
    return calculate_hypergeometric(total_cards, success_cards, draws, desired_successes)


class ProbabilityAnalyzer:
    """Binds one deck snapshot; the host swaps it wholesale with update()."""

    def __init__(self, deck: Optional[DeckState] = None):
        self.deck = deck

    def update(self, deck: Optional[DeckState]):
        self.deck = deck

    def suit_probabilities(self) -> SuitProbabilities:
        return suit_probabilities(self.deck)

    def flush_probabilities(self, preferred_suit: Union[Suit, str, None] = None) -> FlushProbabilities:
        return flush_probabilities(self.deck, preferred_suit)

    def analysis(self) -> Optional[ProbabilityAnalysis]:
        return analysis(self.deck)

    def calculate_outs(self, params: OutsCalculationParams) -> OutsAnalysis:
        return calculate_outs(self.deck, params)

    def calculate_probability(self, success_cards: int, draws: int,
                              desired_successes: int) -> HypergeometricResult:
        return calculate_probability(self.deck, success_cards, draws, desired_successes)
