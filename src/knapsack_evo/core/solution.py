"""
Best-solution record for the knapsack solver.

This module defines the Solution class, the engine's sole durable output:
the best chromosome observed across all generations and its fitness.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Sequence
import numpy as np

from .item import Item


@dataclass(eq=False)
class Solution:
    """
    Best chromosome ever observed during a run.

    Attributes:
        chromosome: Boolean gene vector, one gene per item
        fitness: Fitness of the chromosome (total value, 0 if infeasible)
        generation: Generation index at which it was found (-1 if never updated)
    """

    chromosome: np.ndarray
    fitness: int = 0
    generation: int = -1

    @classmethod
    def empty(cls, n_items: int) -> "Solution":
        """Create the initial all-false solution with fitness 0."""
        return cls(chromosome=np.zeros(n_items, dtype=bool), fitness=0)

    def update(self, chromosome: np.ndarray, fitness: int, generation: int) -> None:
        """Overwrite the record with a copy of a better chromosome."""
        self.chromosome = np.array(chromosome, dtype=bool, copy=True)
        self.fitness = int(fitness)
        self.generation = generation

    def selected_items(self) -> List[int]:
        """Indices of the items included by this solution."""
        return [int(i) for i in np.flatnonzero(self.chromosome)]

    def total_weight(self, items: Sequence[Item]) -> int:
        """Total weight of the included items."""
        return sum(item.weight for item, gene in zip(items, self.chromosome) if gene)

    def bitstring(self) -> str:
        """Render the chromosome as a string of 0/1 characters."""
        return "".join("1" if gene else "0" for gene in self.chromosome)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "chromosome": self.bitstring(),
            "fitness": self.fitness,
            "generation": self.generation,
            "selected_items": self.selected_items(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Solution":
        """Create a Solution from a dictionary produced by ``to_dict``."""
        chromosome = np.array([c == "1" for c in data["chromosome"]], dtype=bool)
        return cls(
            chromosome=chromosome,
            fitness=int(data["fitness"]),
            generation=int(data.get("generation", -1)),
        )

    def __repr__(self) -> str:
        return f"Solution(fitness={self.fitness}, chromosome={self.bitstring()}, generation={self.generation})"
