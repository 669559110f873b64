"""
deck_odds

Hypergeometric draw odds and outs analysis over a partially known deck.
"""
from deck_odds.analyzer import (
    ProbabilityAnalyzer, analysis, calculate_outs, calculate_probability, flush_probabilities
)
from deck_odds.card_types import (
    Card, DeckState, Edition, Enhancement, Seal, Suit, TargetHand, parse_card, parse_cards
)
from deck_odds.combinatorics import (
    calculate_hypergeometric, choose, hypergeometric_at_least, hypergeometric_cdf,
    hypergeometric_distribution, hypergeometric_expected_value, hypergeometric_pmf
)
from deck_odds.composition import (
    deck_composition, rank_counts, suit_counts, suit_probabilities, wild_card_count
)
from deck_odds.outs import find_outs
from deck_odds.probability_models import (
    DeckComposition, FlushProbabilities, HypergeometricResult, Out, OutsAnalysis,
    OutsCalculationParams, ProbabilityAnalysis, SuitProbabilities
)
