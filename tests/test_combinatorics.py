"""
Unit tests for deck_odds/combinatorics.py
"""
import time
import unittest
import numpy as np

from deck_odds.combinatorics import (
    choose, hypergeometric_pmf, hypergeometric_cdf, hypergeometric_at_least,
    hypergeometric_expected_value, hypergeometric_distribution, calculate_hypergeometric
)
from deck_odds.probability_models import HypergeometricResult


# (N, K, n) triples covering full decks, small decks and boundary draws
QUERIES = [
    (52, 13, 5),
    (20, 7, 12),
    (10, 4, 2),
    (8, 8, 3),
    (8, 0, 3),
    (6, 2, 6),
    (44, 9, 1),
]


class TestChoose(unittest.TestCase):
    def test_five_card_hands_from_full_deck(self):
        self.assertEqual(choose(52, 5), 2598960)

    def test_edges(self):
        """C(n, 0) = C(n, n) = 1 and C(n, 1) = n"""
        for n in range(0, 60):
            self.assertEqual(choose(n, 0), 1)
            self.assertEqual(choose(n, n), 1)
            if n >= 1:
                self.assertEqual(choose(n, 1), n)

    def test_symmetry(self):
        for n in range(0, 60):
            for k in range(0, n + 1):
                self.assertEqual(choose(n, k), choose(n, n - k))

    def test_out_of_range_is_zero(self):
        self.assertEqual(choose(5, -1), 0)
        self.assertEqual(choose(5, 6), 0)
        self.assertEqual(choose(0, 1), 0)

    def test_returns_int(self):
        self.assertIsInstance(choose(13, 4), int)
        self.assertEqual(choose(13, 4), 715)
        self.assertEqual(choose(39, 4), 82251)


class TestHypergeometricPMF(unittest.TestCase):
    def test_exactly_one_heart_in_five(self):
        """One heart in a 5-card draw from a full deck"""
        self.assertAlmostEqual(hypergeometric_pmf(52, 13, 5, 1), 0.4114, places=4)

    def test_classic_urn(self):
        self.assertAlmostEqual(hypergeometric_pmf(20, 7, 12, 4), 0.3576, places=4)

    def test_empty_population(self):
        self.assertEqual(hypergeometric_pmf(0, 0, 0, 0), 0.0)
        self.assertEqual(hypergeometric_pmf(0, 0, 3, 1), 0.0)

    def test_outside_support_is_zero(self):
        # 6 of 8 are successes, drawing 5 forces at least 3 successes
        self.assertEqual(hypergeometric_pmf(8, 6, 5, 2), 0.0)
        self.assertEqual(hypergeometric_pmf(8, 6, 5, 6), 0.0)
        self.assertEqual(hypergeometric_pmf(10, 4, 2, 3), 0.0)
        self.assertEqual(hypergeometric_pmf(10, 4, 2, -1), 0.0)

    def test_all_successes(self):
        self.assertEqual(hypergeometric_pmf(8, 8, 3, 3), 1.0)

    def test_sums_to_one(self):
        for N, K, n in QUERIES:
            total = hypergeometric_distribution(N, K, n).sum()
            self.assertTrue(np.isclose(total, 1.0), f"PMF over ({N}, {K}, {n}) sums to {total}")


class TestHypergeometricCDF(unittest.TestCase):
    def test_non_decreasing(self):
        for N, K, n in QUERIES:
            values = [hypergeometric_cdf(N, K, n, k) for k in range(-1, n + 2)]
            self.assertTrue(all(b >= a for a, b in zip(values, values[1:])))

    def test_reaches_one_at_max_feasible_k(self):
        for N, K, n in QUERIES:
            self.assertTrue(np.isclose(hypergeometric_cdf(N, K, n, min(K, n)), 1.0))

    def test_clamped_to_unit_interval(self):
        for N, K, n in QUERIES:
            for k in range(0, n + 1):
                value = hypergeometric_cdf(N, K, n, k)
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 1.0)

    def test_negative_k(self):
        self.assertEqual(hypergeometric_cdf(52, 13, 5, -1), 0.0)


class TestHypergeometricAtLeast(unittest.TestCase):
    def test_complements_cdf(self):
        for N, K, n in QUERIES:
            for k in range(1, n + 1):
                total = hypergeometric_at_least(N, K, n, k) + hypergeometric_cdf(N, K, n, k - 1)
                self.assertTrue(np.isclose(total, 1.0))

    def test_trivial_for_non_positive_k(self):
        self.assertEqual(hypergeometric_at_least(52, 13, 5, 0), 1.0)
        self.assertEqual(hypergeometric_at_least(52, 13, 5, -2), 1.0)

    def test_at_least_one_ace_in_two(self):
        expected = 1 - (48 / 52) * (47 / 51)
        self.assertAlmostEqual(hypergeometric_at_least(52, 4, 2, 1), expected, places=10)

    def test_more_than_available_is_zero(self):
        self.assertAlmostEqual(hypergeometric_at_least(10, 2, 5, 3), 0.0, places=12)

    def test_huge_k_is_bounded_by_draws(self):
        """A desired count far beyond min(K, n) answers without summing up to k"""
        start = time.perf_counter()
        self.assertAlmostEqual(hypergeometric_cdf(52, 13, 5, 10**12), 1.0, places=12)
        self.assertAlmostEqual(hypergeometric_at_least(52, 13, 5, 10**12), 0.0, places=12)
        result = calculate_hypergeometric(52, 13, 5, 10**12)
        self.assertEqual(result.exact_probability, 0.0)
        self.assertAlmostEqual(result.at_most_probability, 1.0, places=12)
        self.assertLess(time.perf_counter() - start, 1.0)

    def test_huge_k_on_empty_population(self):
        self.assertEqual(hypergeometric_cdf(0, 0, 0, 10**12), 0.0)


class TestExpectedValue(unittest.TestCase):
    def test_formula(self):
        self.assertAlmostEqual(hypergeometric_expected_value(52, 13, 5), 1.25)
        self.assertAlmostEqual(hypergeometric_expected_value(20, 7, 12), 4.2)

    def test_linear_in_draws(self):
        one = hypergeometric_expected_value(40, 10, 1)
        for n in range(0, 10):
            self.assertAlmostEqual(hypergeometric_expected_value(40, 10, n), n * one)

    def test_empty_population(self):
        self.assertEqual(hypergeometric_expected_value(0, 0, 5), 0.0)

    def test_matches_distribution_mean(self):
        dist = hypergeometric_distribution(20, 7, 12)
        mean = float(np.dot(np.arange(len(dist)), dist))
        self.assertAlmostEqual(mean, hypergeometric_expected_value(20, 7, 12), places=10)


class TestCalculateHypergeometric(unittest.TestCase):
    def test_bundles_all_four(self):
        result = calculate_hypergeometric(52, 13, 5, 2)
        self.assertIsInstance(result, HypergeometricResult)
        self.assertEqual(result.exact_probability, hypergeometric_pmf(52, 13, 5, 2))
        self.assertEqual(result.at_least_probability, hypergeometric_at_least(52, 13, 5, 2))
        self.assertEqual(result.at_most_probability, hypergeometric_cdf(52, 13, 5, 2))
        self.assertEqual(result.expected_value, 1.25)

    def test_at_least_and_at_most_overlap_at_k(self):
        """P(X >= k) + P(X <= k) double counts exactly P(X = k)"""
        result = calculate_hypergeometric(20, 7, 12, 4)
        self.assertAlmostEqual(
            result.at_least_probability + result.at_most_probability,
            1.0 + result.exact_probability,
            places=10
        )

    def test_degenerate_population(self):
        result = calculate_hypergeometric(0, 0, 0, 1)
        self.assertEqual(result.exact_probability, 0.0)
        self.assertEqual(result.at_most_probability, 0.0)
        self.assertEqual(result.expected_value, 0.0)

    def test_to_dict_uses_feed_keys(self):
        data = calculate_hypergeometric(10, 4, 2, 1).to_dict()
        self.assertEqual(
            set(data),
            {'exactProbability', 'atLeastProbability', 'atMostProbability', 'expectedValue'}
        )


if __name__ == '__main__':
    unittest.main()
