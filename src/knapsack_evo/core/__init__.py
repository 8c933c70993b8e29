"""
Core data structures for the knapsack solver.
"""

from .item import Item, KnapsackInstance, make_items
from .solution import Solution
from .population import Population
from .fitness import FitnessEvaluator

__all__ = [
    "Item",
    "KnapsackInstance",
    "make_items",
    "Solution",
    "Population",
    "FitnessEvaluator",
]
