"""
Population management for the knapsack solver.

This module defines the Population class, an ordered, fixed-size collection
of chromosomes. Fitness values are never stored on the chromosomes; helpers
that need them take the fitness list computed for the current generation.
"""

from typing import List, Dict, Optional, Sequence, Tuple, Any
import numpy as np


class Population:
    """
    Ordered collection of chromosomes for one generation.

    Attributes:
        chromosomes: List of boolean numpy arrays, in population order
    """

    def __init__(self, chromosomes: Optional[List[np.ndarray]] = None):
        """
        Initialize a Population.

        Args:
            chromosomes: Initial list of chromosomes (empty if None)
        """
        self.chromosomes = chromosomes if chromosomes is not None else []

    @property
    def size(self) -> int:
        """Get the current population size."""
        return len(self.chromosomes)

    def is_empty(self) -> bool:
        """Check if the population is empty."""
        return len(self.chromosomes) == 0

    def add(self, chromosome: np.ndarray) -> None:
        """Append a single chromosome."""
        self.chromosomes.append(chromosome)

    def extend(self, chromosomes: List[np.ndarray]) -> None:
        """Append multiple chromosomes."""
        self.chromosomes.extend(chromosomes)

    def contains(self, chromosome: np.ndarray) -> bool:
        """Check whether this exact chromosome object is a member."""
        return any(member is chromosome for member in self.chromosomes)

    def best(self, fitnesses: Sequence[int]) -> Tuple[int, int]:
        """
        Locate the fittest chromosome.

        Args:
            fitnesses: Fitness of each chromosome, in population order

        Returns:
            Tuple of (index, fitness) of the first chromosome with the maximum fitness
        """
        if len(fitnesses) != len(self.chromosomes):
            raise ValueError(
                f"Got {len(fitnesses)} fitness values for a population of {len(self.chromosomes)}"
            )
        if len(fitnesses) == 0:
            raise ValueError("Cannot find the best chromosome of an empty population")

        # np.argmax returns the first occurrence on ties
        best_idx = int(np.argmax(fitnesses))
        return best_idx, int(fitnesses[best_idx])

    def statistics(self, fitnesses: Sequence[int]) -> Dict[str, Any]:
        """
        Compute population statistics.

        Args:
            fitnesses: Fitness of each chromosome, in population order

        Returns:
            Dictionary containing population statistics
        """
        if not self.chromosomes:
            return {
                "size": 0,
                "scoring": 0,
                "avg_fitness": None,
                "best_fitness": None,
                "worst_fitness": None,
            }

        scores = np.asarray(fitnesses, dtype=np.int64)

        return {
            "size": len(self.chromosomes),
            "scoring": int(np.count_nonzero(scores)),
            "avg_fitness": float(np.mean(scores)),
            "best_fitness": int(np.max(scores)),
            "worst_fitness": int(np.min(scores)),
        }

    def __repr__(self) -> str:
        return f"Population(size={self.size})"

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __iter__(self):
        return iter(self.chromosomes)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.chromosomes[index]
