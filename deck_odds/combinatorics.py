"""
combinatorics.py

Exact combinatorial math for drawing without replacement. No knowledge of cards.

N - population size (cards left in the deck)
K - success states in the population (e.g. hearts left)
n - number of draws
k - number of observed successes

Every function is total: degenerate input (N = 0, infeasible k) gives 0.
"""
import numpy as np

from deck_odds.probability_models import HypergeometricResult


def choose(n: int, k: int) -> int:
    """
    Binomial coefficient C(n, k) via the multiplicative formula.
    Uses C(n, k) = C(n, n-k) to keep the loop short; the result is rounded
    to absorb drift from the incremental division.
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)

    result = 1.0
    for i in range(k):
        result = result * (n - i) / (i + 1)
    return int(round(result))


def hypergeometric_pmf(N: int, K: int, n: int, k: int) -> float:
    """P(X = k): exactly k successes in n draws."""
    if N == 0:
        return 0.0

    # Support of the distribution: max(0, n-(N-K)) <= k <= min(K, n)
    min_k = max(0, n - (N - K))
    max_k = min(K, n)
    if k < min_k or k > max_k:
        return 0.0

    numerator = choose(K, k) * choose(N - K, n - k)
    denominator = choose(N, n)
    if denominator == 0:
        return 0.0
    return numerator / denominator


def hypergeometric_distribution(N: int, K: int, n: int) -> np.ndarray:
    """PMF for every k in 0..n as one array."""
    if n < 0:
        return np.zeros(0, dtype=np.float64)
    return np.array([hypergeometric_pmf(N, K, n, k) for k in range(n + 1)], dtype=np.float64)


def hypergeometric_cdf(N: int, K: int, n: int, k: int) -> float:
    """P(X <= k), clamped to [0, 1] against summation error."""
    # Terms above min(K, n) are zero, so the sum stops there
    upper = min(k, K, n)
    if upper < 0:
        return 0.0
    pmfs = np.fromiter((hypergeometric_pmf(N, K, n, i) for i in range(upper + 1)),
                       dtype=np.float64, count=upper + 1)
    return float(np.clip(pmfs.sum(), 0.0, 1.0))


def hypergeometric_at_least(N: int, K: int, n: int, k: int) -> float:
    """P(X >= k) = 1 - P(X <= k-1). Trivially 1 for k <= 0."""
    if k <= 0:
        return 1.0
    return 1.0 - hypergeometric_cdf(N, K, n, k - 1)


def hypergeometric_expected_value(N: int, K: int, n: int) -> float:
    """E[X] = n * K / N."""
    if N == 0:
        return 0.0
    return n * K / N


def calculate_hypergeometric(total_cards: int, success_cards: int, draws: int,
                             desired_successes: int) -> HypergeometricResult:
    return HypergeometricResult(
        exact_probability=hypergeometric_pmf(total_cards, success_cards, draws, desired_successes),
        at_least_probability=hypergeometric_at_least(total_cards, success_cards, draws, desired_successes),
        at_most_probability=hypergeometric_cdf(total_cards, success_cards, draws, desired_successes),
        expected_value=hypergeometric_expected_value(total_cards, success_cards, draws),
    )
