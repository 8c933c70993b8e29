"""
Single-point crossover for the knapsack solver.

The child takes the genes before a random cut point from the first parent
and the genes from the cut point onward from the second parent.
"""

import numpy as np


class SinglePointCrossover:
    """
    Single-point crossover operator.

    The cut point is drawn uniformly from ``[0, length]`` inclusive, so a
    child may be an exact copy of either parent.
    """

    def __init__(self, rng: np.random.Generator):
        """
        Initialize the crossover operator.

        Args:
            rng: Random generator used for the cut point draw
        """
        self.rng = rng

    def crossover(self, parent1: np.ndarray, parent2: np.ndarray) -> np.ndarray:
        """
        Combine two parents into a new child.

        Args:
            parent1: Provides genes ``[0, cut)``
            parent2: Provides genes ``[cut, length)``

        Returns:
            New chromosome of the same length as the parents
        """
        cut = int(self.rng.integers(0, len(parent1), endpoint=True))
        return self.crossover_at(parent1, parent2, cut)

    @staticmethod
    def crossover_at(parent1: np.ndarray, parent2: np.ndarray, cut: int) -> np.ndarray:
        """
        Splice two parents at a given cut point.

        Args:
            parent1: Provides genes ``[0, cut)``
            parent2: Provides genes ``[cut, length)``
            cut: Cut point in ``[0, length]``

        Returns:
            New chromosome; the parents are left untouched
        """
        if len(parent1) != len(parent2):
            raise ValueError(
                f"Parents differ in length: {len(parent1)} vs {len(parent2)}"
            )
        if not 0 <= cut <= len(parent1):
            raise ValueError(f"Cut point {cut} outside [0, {len(parent1)}]")

        return np.concatenate([parent1[:cut], parent2[cut:]]).astype(bool)
