"""Optimal and greedy 0/1 knapsack solvers that yield the selected items."""

__version__ = "0.1.0"
__all__ = ["extensions", "greedy", "optimal", "protocols"]