from typing import NamedTuple

import pytest

from knap.extensions import to_greedy_knapsack_iter, to_knapsack_iter


class Goods(NamedTuple):
    id: str
    w: int
    v: int

    def weight(self) -> int:
        return self.w

    def value(self) -> int:
        return self.v


def _goods(*specs):
    return [Goods(*spec) for spec in specs]


BASIC = (("A", 10, 60), ("B", 20, 100), ("C", 30, 120))

GREEDY = {
    "empty": ((), 10, []),
    "zero_capacity": ((("A", 10, 100),), 0, []),
    "basic": (BASIC, 50, ["A", "B"]),
    "zero_weights": (
        (
            ("ItemA", 20, 100),
            ("ItemB", 30, 120),
            ("FreeValuable", 0, 50),
            ("ItemC", 10, 65),
            ("FreeWorthless", 0, 0),
        ),
        50,
        ["FreeValuable", "ItemC", "ItemA", "FreeWorthless"],
    ),
}

OPTIMAL = {
    "basic": (
        (("item1", 2, 3), ("item2", 3, 4), ("item3", 4, 5), ("item4", 5, 6)),
        7,
        ["item2", "item3"],
        7,
        9,
    ),
    "empty": ((), 10, [], 0, 0),
    "zero_capacity": ((("itemA", 1, 10),), 0, [], 0, 0),
    "too_heavy": ((("heavy1", 10, 100), ("heavy2", 12, 120)), 5, [], 0, 0),
    "complex": (BASIC, 50, ["B", "C"], 50, 220),
    "zero_value_item": (
        (("valuable", 5, 10), ("zero_val", 2, 0)),
        7,
        ["valuable"],
        5,
        10,
    ),
}


@pytest.mark.parametrize(
    ("items", "capacity", "expected_ids"), list(GREEDY.values()), ids=list(GREEDY)
)
def test_greedy(items, capacity, expected_ids):
    it = to_greedy_knapsack_iter(_goods(*items), capacity)
    assert [g.id for g in it] == expected_ids
    assert next(it, None) is None


@pytest.mark.parametrize(
    ("items", "capacity", "expected_ids", "total_weight", "total_value"),
    list(OPTIMAL.values()),
    ids=list(OPTIMAL),
)
def test_optimal(items, capacity, expected_ids, total_weight, total_value):
    chosen = list(to_knapsack_iter(_goods(*items), capacity))
    assert sorted(g.id for g in chosen) == expected_ids
    assert sum(g.weight() for g in chosen) == total_weight
    assert sum(g.value() for g in chosen) == total_value