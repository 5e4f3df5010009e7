"""Tests for celebrity/utils/algorithms/sets.py"""

from collections import Counter

import pytest
from celebrity.utils.algorithms.sets import binomial, power_set


class TestBinomial:
    @pytest.mark.parametrize(
        "n, k, expected",
        [(0, 0, 1), (3, 0, 1), (3, 3, 1), (4, 2, 6), (5, 2, 10), (10, 3, 120), (7, 4, 35)],
    )
    def test_known_values(self, n, k, expected):
        assert binomial(n, k) == expected

    def test_k_greater_than_n(self):
        assert binomial(2, 3) == 0
        assert binomial(0, 1) == 0

    def test_negative_k(self):
        assert binomial(3, -1) == 0

    def test_pascal_identity(self):
        """C(n, k) = C(n - 1, k - 1) + C(n - 1, k)"""
        for n in range(1, 12):
            for k in range(1, n):
                assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)

    def test_row_sums_to_power_of_two(self):
        for n in range(12):
            assert sum(binomial(n, k) for k in range(n + 1)) == 2**n


class TestPowerSet:
    def test_empty_set(self):
        """The power set of the empty set only holds the empty set."""
        assert power_set(frozenset()) == (frozenset(),)

    def test_singleton(self):
        assert set(power_set({1})) == {frozenset(), frozenset({1})}

    def test_three_elements(self):
        result = power_set({1, 2, 3})
        assert set(result) == {
            frozenset(),
            frozenset({1}),
            frozenset({2}),
            frozenset({3}),
            frozenset({1, 2}),
            frozenset({1, 3}),
            frozenset({2, 3}),
            frozenset({1, 2, 3}),
        }

    @pytest.mark.parametrize("n", range(8))
    def test_size_and_uniqueness(self, n):
        elements = frozenset(range(n))
        result = power_set(elements)

        assert len(result) == 2**n
        assert len(set(result)) == 2**n
        assert result.count(frozenset()) == 1
        assert result.count(elements) == 1
        assert all(subset <= elements for subset in result)

    @pytest.mark.parametrize("n", range(8))
    def test_cardinality_counts(self, n):
        result = power_set(set(range(n)))
        counts = Counter(len(subset) for subset in result)
        for k in range(n + 1):
            assert counts[k] == binomial(n, k)

    def test_grouped_by_cardinality(self):
        """Subsets come out by non-decreasing size, starting with the empty set."""
        sizes = [len(subset) for subset in power_set(set("abcde"))]
        assert sizes == sorted(sizes)
        assert sizes[0] == 0
        assert sizes[-1] == 5

    def test_input_not_modified(self):
        elements = {1, 2, 3}
        power_set(elements)
        assert elements == {1, 2, 3}
