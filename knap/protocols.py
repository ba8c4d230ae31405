"""Structural types for items that can be packed into a knapsack."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Weight(Protocol):
    """Anything with a non-negative integer weight."""

    def weight(self) -> int:
        """Return the weight of the item."""
        ...


@runtime_checkable
class Value(Protocol):
    """Anything with a non-negative integer value."""

    def value(self) -> int:
        """Return the value of the item."""
        ...


@runtime_checkable
class Item(Weight, Value, Protocol):
    """An object that has both a weight and a value."""