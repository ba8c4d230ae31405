"""Convenience constructors for the knapsack solvers."""

from collections.abc import Iterable

from knap.greedy import GreedyKnapsackIterator
from knap.optimal import KnapsackIterator
from knap.protocols import Item


def to_knapsack_iter(items: Iterable[Item], capacity: int) -> KnapsackIterator:
    """Return an iterator over the optimal selection from ``items``."""
    return KnapsackIterator(items, capacity)


def to_greedy_knapsack_iter(
    items: Iterable[Item], capacity: int
) -> GreedyKnapsackIterator:
    """Return an iterator over the greedy selection from ``items``."""
    return GreedyKnapsackIterator(items, capacity)