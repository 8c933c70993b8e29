"""
Fitness function module for the knapsack solver.

This module defines the fitness evaluator: the total value of the included
items, or 0 as soon as the running weight exceeds the capacity.
"""

from typing import List, Sequence
import numpy as np

from .item import Item
from .population import Population


class FitnessEvaluator:
    """
    Scores chromosomes against a fixed item set and capacity.

    Infeasible chromosomes score exactly as badly as the empty chromosome (0),
    never partially. Evaluation is pure and consumes no randomness.

    Attributes:
        items: Ordered item set, one item per gene
        capacity: Maximum total weight
    """

    def __init__(self, items: Sequence[Item], capacity: int):
        """
        Initialize the fitness evaluator.

        Args:
            items: Ordered item set
            capacity: Knapsack capacity (non-negative)
        """
        if not items:
            raise ValueError("FitnessEvaluator requires at least one item")
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self.items = list(items)
        self.capacity = capacity

    @property
    def n_items(self) -> int:
        """Chromosome length expected by this evaluator."""
        return len(self.items)

    def evaluate(self, chromosome: np.ndarray) -> int:
        """
        Evaluate the fitness of a chromosome.

        Args:
            chromosome: Boolean gene vector

        Returns:
            Total value of the included items, or 0 if they exceed the capacity
        """
        self._check_length(chromosome)

        weight = 0
        value = 0
        for item, included in zip(self.items, chromosome):
            if included:
                weight += item.weight
                value += item.value
                if weight > self.capacity:
                    return 0
        return value

    def evaluate_population(self, population: Population) -> List[int]:
        """Evaluate every chromosome, in population order."""
        return [self.evaluate(chromosome) for chromosome in population]

    def total_weight(self, chromosome: np.ndarray) -> int:
        """Total weight of the included items (no capacity cutoff)."""
        self._check_length(chromosome)
        return sum(item.weight for item, included in zip(self.items, chromosome) if included)

    def is_feasible(self, chromosome: np.ndarray) -> bool:
        """Check whether the included items fit in the knapsack."""
        return self.total_weight(chromosome) <= self.capacity

    def _check_length(self, chromosome: np.ndarray) -> None:
        if len(chromosome) != len(self.items):
            raise ValueError(
                f"Chromosome has {len(chromosome)} genes, expected {len(self.items)}"
            )
