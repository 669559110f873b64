"""
outs.py

Find the remaining cards ("outs") that complete a target hand shape.

A wild card left in the deck is always an out, whatever the shape, since it
can stand in for the rank or suit that is missing. It is listed once.
"""
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from deck_odds.card_types import SUITS, Card, Suit, TargetHand
from deck_odds.composition import suit_counts
from deck_odds.config import config
from deck_odds.logging_config import get_logger
from deck_odds.probability_models import Out

logger = get_logger("outs")

# (low, ..., high) rank values for every 5-card straight; Ace is 14 except in the wheel
STRAIGHT_WINDOWS = [tuple(range(start, start + 5)) for start in range(2, 11)]
WHEEL = (14, 2, 3, 4, 5)


def _matching(remaining: Iterable[Card], predicate) -> List[Card]:
    return [card for card in remaining if predicate(card) or card.is_wild]


def flush_out_cards(hand: Sequence[Card], remaining: Iterable[Card],
                    draw_threshold: Optional[int] = None) -> List[Card]:
    if draw_threshold is None:
        draw_threshold = config['flush']['draw_threshold']

    counts = suit_counts(hand)
    flush_suits: Set[Suit] = {suit for suit in SUITS if counts[suit] >= draw_threshold}
    if not flush_suits:
        return []

    return _matching(remaining, lambda card: card.suit in flush_suits)


def straight_needed_ranks(hand: Sequence[Card]) -> Set[int]:
    """Rank values that would turn a four-card window into a straight."""
    hand_ranks = {card.rank_value for card in hand}

    needed: Set[int] = set()
    for window in STRAIGHT_WINDOWS + [WHEEL]:
        missing = [value for value in window if value not in hand_ranks]
        if len(missing) == 1:
            needed.add(missing[0])
    return needed


def straight_out_cards(hand: Sequence[Card], remaining: Iterable[Card]) -> List[Card]:
    needed = straight_needed_ranks(hand)
    return _matching(remaining, lambda card: card.rank_value in needed)


def _ranks_held(hand: Sequence[Card], count: int) -> Set[str]:
    held = Counter(card.rank for card in hand)
    return {rank for rank, n in held.items() if n == count}


def pair_out_cards(hand: Sequence[Card], remaining: Iterable[Card]) -> List[Card]:
    singles = _ranks_held(hand, 1)
    return _matching(remaining, lambda card: card.rank in singles)


def three_of_a_kind_out_cards(hand: Sequence[Card], remaining: Iterable[Card]) -> List[Card]:
    pairs = _ranks_held(hand, 2)
    return _matching(remaining, lambda card: card.rank in pairs)


def full_house_out_cards(hand: Sequence[Card], remaining: Iterable[Card]) -> List[Card]:
    """
    Full house needs one of two intermediate shapes first: a triplet (then
    pair up a single) or a pair (then upgrade it). Neither or both: no outs.
    """
    held = Counter(card.rank for card in hand).values()
    has_triplet = 3 in held
    has_pair = 2 in held

    if has_triplet and not has_pair:
        needed = _ranks_held(hand, 1)
    elif has_pair and not has_triplet:
        needed = _ranks_held(hand, 2)
    else:
        return []

    return _matching(remaining, lambda card: card.rank in needed)


_OUT_FINDERS = {
    TargetHand.FLUSH: flush_out_cards,
    TargetHand.STRAIGHT: straight_out_cards,
    TargetHand.PAIR: pair_out_cards,
    TargetHand.THREE_OF_A_KIND: three_of_a_kind_out_cards,
    TargetHand.FULL_HOUSE: full_house_out_cards,
}


def coerce_target_hand(target_hand: Union[TargetHand, str]) -> Optional[TargetHand]:
    if isinstance(target_hand, TargetHand):
        return target_hand
    try:
        return TargetHand(str(target_hand).lower())
    except ValueError:
        return None


def find_out_cards(hand: Sequence[Card], target_hand: Union[TargetHand, str],
                   remaining: Iterable[Card]) -> List[Card]:
    """The remaining Card objects that complete target_hand."""
    target = coerce_target_hand(target_hand)
    if target is None:
        logger.warning(f"Unknown target hand {target_hand!r}; no outs")
        return []
    return _OUT_FINDERS[target](list(hand), list(remaining))


def find_outs_with_cards(hand: Sequence[Card], target_hand: Union[TargetHand, str],
                         remaining: Iterable[Card]) -> Tuple[List[Card], List[Out]]:
    """Matching remaining cards alongside the Out records built from them."""
    target = coerce_target_hand(target_hand)
    label = target.value if target else str(target_hand)
    cards = find_out_cards(hand, target_hand, remaining)
    outs = [Out(suit=card.suit, rank=card.rank, completes_hand=label) for card in cards]
    return cards, outs


def find_outs(hand: Sequence[Card], target_hand: Union[TargetHand, str],
              remaining: Iterable[Card]) -> List[Out]:
    return find_outs_with_cards(hand, target_hand, remaining)[1]
