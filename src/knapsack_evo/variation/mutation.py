"""
Bit-flip mutation for the knapsack solver.
"""

import numpy as np


class BitFlipMutation:
    """
    Flips each gene independently with probability ``mutation_rate``.

    Attributes:
        mutation_rate: Per-gene flip probability in [0, 1]
        rng: Shared random generator owned by the engine
    """

    def __init__(self, mutation_rate: float, rng: np.random.Generator):
        """
        Initialize the mutation operator.

        Args:
            mutation_rate: Per-gene flip probability in [0, 1]
            rng: Random generator used for the per-gene draws
        """
        if not 0.0 <= mutation_rate <= 1.0:
            raise ValueError(f"mutation_rate must be between 0 and 1, got {mutation_rate}")

        self.mutation_rate = mutation_rate
        self.rng = rng

    def mutate(self, chromosome: np.ndarray) -> int:
        """
        Mutate a chromosome in place.

        One uniform draw in [0, 1) is made per gene, in gene order; a gene
        flips when its draw is below the mutation rate.

        Args:
            chromosome: Boolean gene vector, modified in place

        Returns:
            Number of flipped genes
        """
        flips = self.rng.random(len(chromosome)) < self.mutation_rate
        chromosome ^= flips
        return int(np.count_nonzero(flips))
