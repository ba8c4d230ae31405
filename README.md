# knap

Solvers for the 0/1 knapsack problem. Each solver is an iterator that yields
the items it puts in the knapsack.

- `knap.optimal.KnapsackIterator` finds an optimal selection by dynamic
  programming.
- `knap.greedy.GreedyKnapsackIterator` takes items in order of
  value-to-weight ratio while they still fit. It is fast, but its answer is
  only approximate.

An item can be an object of any kind. It needs a `weight()` method and a
`value()` method, and both must return non-negative integers. The `Weight`
and `Value` protocols in `knap.protocols` describe these two methods, and
`Item` combines them. All three can be checked at runtime with
`isinstance`.

## Installation

```
pip install knap
```

## Usage

```python
from dataclasses import dataclass

from knap.optimal import KnapsackIterator
from knap.greedy import GreedyKnapsackIterator
from knap.extensions import to_knapsack_iter, to_greedy_knapsack_iter


@dataclass(frozen=True)
class Thing:
    name: str
    w: int
    v: int

    def weight(self) -> int:
        return self.w

    def value(self) -> int:
        return self.v


things = [Thing("A", 10, 60), Thing("B", 20, 100), Thing("C", 30, 120)]

print([t.name for t in KnapsackIterator(things, 50)])        # ['B', 'C']
print([t.name for t in GreedyKnapsackIterator(things, 50)])  # ['A', 'B']

# The same solvers, built by a function call from any iterable
best = list(to_knapsack_iter(things, 50))
quick = list(to_greedy_knapsack_iter(iter(things), 50))
```

Both solvers accept any iterable of items and read it once, when the solver
is created. A negative capacity raises `ValueError` at that point. An empty
item list or a capacity of zero yields nothing. Each iterator can be run
through only once.

### Optimal solver

`KnapsackIterator` yields the items it chooses in the order they came in.
The table is built the first time the iterator is advanced. The table has
one row per item and one column per unit of capacity, so memory and time
grow with the number of items times the capacity.

### Greedy solver

`GreedyKnapsackIterator` makes its selection as soon as it is created. It
ranks the items as follows:

- Items with zero weight and a positive value come first, highest value
  first.
- The other items follow by value-to-weight ratio, highest first. Items
  with equal ratios keep their input order.
- Items with zero weight and zero value come last.

It goes through the items in this order and takes each one that still fits
in the remaining capacity. The items are yielded in the order they were
taken.

### Convenience functions

`knap.extensions.to_knapsack_iter(items, capacity)` and
`knap.extensions.to_greedy_knapsack_iter(items, capacity)` return a
`KnapsackIterator` and a `GreedyKnapsackIterator` for the given items and
capacity.

## Running the tests

```
pip install -e ".[test]"
pytest
```