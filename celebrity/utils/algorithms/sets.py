"""
Functions for working with sets.

Functions:
    binomial(n, k)      - Exact binomial coefficient C(n, k)
    power_set(elements) - Every subset, grouped by increasing cardinality
"""

import logging
from collections.abc import Set
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def binomial(n: int, k: int) -> int:
    """
    Number of ways to choose k elements among n.

    Uses the multiplicative formula prod_{v<k} (n - v) / (v + 1). The running
    product is C(n, v) * (n - v) = C(n, v + 1) * (v + 1), so every
    division is exact.
    """
    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    result = 1
    for v in range(k):
        result = result * (n - v) // (v + 1)
    return result


def power_set(elements: Set[T]) -> tuple[frozenset[T], ...]:
    """
    Build every subset of `elements`, each exactly once.

    Subsets come out grouped by cardinality: the empty set first, then all
    singletons, then all pairs, and so on up to `elements` itself. The order
    inside a cardinality level is unspecified.

    Algorithm (O(2^n × n) time and space):
        1. Presize one level per cardinality 0..n with C(n, k) slots
        2. For each element, extend every subset of level k into level k + 1,
           scanning k from n - 1 down to 0
        3. Concatenate the levels

    The scan must be descending: an ascending scan would extend subsets that
    already received the current element during the same pass.

    Args:
        elements: Finite set of hashable elements.

    Returns:
        Tuple of 2^n frozensets.
    """
    n = len(elements)

    levels: list[list[frozenset[T]]] = [
        [frozenset()] * binomial(n, k) for k in range(n + 1)
    ]
    # Number of subsets already stored in each level
    filled = [1] + [0] * n

    for element in elements:
        for k in range(n - 1, -1, -1):
            lower, upper = levels[k], levels[k + 1]
            for i in range(filled[k]):
                upper[filled[k + 1]] = lower[i] | {element}
                filled[k + 1] += 1

    logger.debug(f"Power set of {n} elements: {sum(filled)} subsets")
    return tuple(subset for level in levels for subset in level)
