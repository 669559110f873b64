"""
probability_models.py

Result records returned by the probability layers, broken out to avoid circular imports
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from deck_odds.card_types import Card, Suit, TargetHand


@dataclass(frozen=True)
class HypergeometricResult:
    exact_probability: float = 0.0     # P(X = k)
    at_least_probability: float = 0.0  # P(X >= k)
    at_most_probability: float = 0.0   # P(X <= k)
    expected_value: float = 0.0        # E[X]

    def to_dict(self) -> Dict[str, float]:
        return {
            'exactProbability': self.exact_probability,
            'atLeastProbability': self.at_least_probability,
            'atMostProbability': self.at_most_probability,
            'expectedValue': self.expected_value,
        }


@dataclass(frozen=True)
class SuitProbabilities:
    hearts: float = 0.0
    diamonds: float = 0.0
    clubs: float = 0.0
    spades: float = 0.0

    def for_suit(self, suit: Suit) -> float:
        return getattr(self, suit.value)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FlushProbabilities(SuitProbabilities):
    best_suit: Optional[Suit] = None
    best_probability: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hearts': self.hearts,
            'diamonds': self.diamonds,
            'clubs': self.clubs,
            'spades': self.spades,
            'bestSuit': self.best_suit.value if self.best_suit else None,
            'bestProbability': self.best_probability,
        }


@dataclass(frozen=True)
class Out:
    suit: Suit
    rank: str
    completes_hand: str

    def __str__(self):
        return f"{self.rank} of {self.suit.value} -> {self.completes_hand}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'card': {'suit': self.suit.value, 'rank': self.rank},
            'completesHand': self.completes_hand,
        }


@dataclass(frozen=True)
class OutsAnalysis:
    outs: List[Out] = field(default_factory=list)
    outs_count: int = 0
    draw_one_out_probability: float = 0.0
    draw_with_multiple_chances: float = 0.0
    effective_outs: int = 0  # outs plus wilds not already listed

    def to_dict(self) -> Dict[str, Any]:
        return {
            'outs': [out.to_dict() for out in self.outs],
            'outsCount': self.outs_count,
            'drawOneOutProbability': self.draw_one_out_probability,
            'drawWithMultipleChances': self.draw_with_multiple_chances,
            'effectiveOuts': self.effective_outs,
        }


@dataclass
class OutsCalculationParams:
    hand_cards: List[Card]
    target_hand: TargetHand
    draws_remaining: int = 1


@dataclass(frozen=True)
class ProbabilityAnalysis:
    deck_size: int
    cards_remaining: int
    suit_probabilities: SuitProbabilities
    flush_odds: FlushProbabilities
    rank_distribution: Dict[str, int]
    wild_card_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'deckSize': self.deck_size,
            'cardsRemaining': self.cards_remaining,
            'suitProbabilities': self.suit_probabilities.to_dict(),
            'flushOdds': self.flush_odds.to_dict(),
            'rankDistribution': dict(self.rank_distribution),
            'wildCardCount': self.wild_card_count,
        }


@dataclass(frozen=True)
class DeckComposition:
    by_suit: Dict[str, int]
    by_rank: Dict[str, int]
    enhancements: Dict[str, int]
    editions: Dict[str, int]
    seals: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'bySuit': dict(self.by_suit),
            'byRank': dict(self.by_rank),
            'enhancements': dict(self.enhancements),
            'editions': dict(self.editions),
            'seals': dict(self.seals),
        }
