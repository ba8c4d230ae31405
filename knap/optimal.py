"""Exact 0/1 knapsack solver based on dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from knap.protocols import Item

T = TypeVar("T", bound=Item)


def _optimal_selection(items: list[T], capacity: int) -> list[T]:
    if not items or capacity == 0:
        return []

    table: list[list[int]] = [[0] * (capacity + 1)]
    for item in items:
        weight = item.weight()
        value = item.value()
        previous = table[-1]
        table.append(
            [
                max(best, previous[w - weight] + value) if weight <= w else best
                for w, best in enumerate(previous)
            ]
        )

    chosen: list[T] = []
    remaining = capacity
    for row in reversed(range(1, len(items) + 1)):
        item = items[row - 1]
        weight = item.weight()
        if remaining >= weight and table[row][remaining] != table[row - 1][remaining]:
            chosen.append(item)
            remaining -= weight

    chosen.reverse()
    return chosen


class KnapsackIterator(Generic[T]):
    """Iterates over an optimal selection of items for the given capacity.

    The solution is computed on the first request for an item and yielded
    in input order.
    """

    def __init__(self, items: Iterable[T], capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._items = list(items)
        self._capacity = capacity
        self._solution: Iterator[T] | None = None

    def __iter__(self) -> KnapsackIterator[T]:
        return self

    def __next__(self) -> T:
        if self._solution is None:
            self._solution = iter(_optimal_selection(self._items, self._capacity))
        return next(self._solution)