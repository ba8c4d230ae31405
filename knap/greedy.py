"""Greedy approximation of the 0/1 knapsack problem."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from knap.protocols import Item

T = TypeVar("T", bound=Item)


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")


def _ratio(item: Item) -> float:
    weight = item.weight()
    value = item.value()
    if weight > 0:
        return value / weight
    if value > 0:
        return math.inf
    return -1.0


def _greedy_selection(items: list[T], capacity: int) -> list[T]:
    if not items or capacity == 0:
        return []

    def sort_key(item: T) -> tuple[float, int]:
        ratio = _ratio(item)
        # Free items with value are ranked by value; everything else keeps
        # its input order among equal ratios (the sort is stable).
        tie_break = -item.value() if ratio == math.inf else 0
        return (-ratio, tie_break)

    selected: list[T] = []
    remaining = capacity
    for item in sorted(items, key=sort_key):
        weight = item.weight()
        if weight <= remaining:
            selected.append(item)
            remaining -= weight
    return selected


class GreedyKnapsackIterator(Generic[T]):
    """Iterates over the items picked by a value-to-weight greedy heuristic.

    The selection is computed when the iterator is created. Items are taken
    in decreasing order of value per unit of weight while they still fit;
    weightless items with positive value come first, highest value first.
    """

    def __init__(self, items: Iterable[T], capacity: int) -> None:
        _check_capacity(capacity)
        self._solution = _greedy_selection(list(items), capacity)
        self._position: Iterator[T] = iter(self._solution)

    def __iter__(self) -> GreedyKnapsackIterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._position)