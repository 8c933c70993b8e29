"""
Random chromosome generator for the knapsack solver.

This module builds generation 0: every gene of every chromosome is an
independent fair coin flip drawn from the engine's shared RNG.
"""

import logging
import numpy as np

from ..core.population import Population


logger = logging.getLogger(__name__)


class ChromosomeFactory:
    """
    Produces random candidate encodings of a fixed length.

    Attributes:
        n_genes: Chromosome length (number of items)
        rng: Shared random generator owned by the engine
    """

    def __init__(self, n_genes: int, rng: np.random.Generator):
        """
        Initialize the chromosome factory.

        Args:
            n_genes: Number of genes per chromosome (item count)
            rng: Random generator to draw genes from
        """
        if n_genes < 1:
            raise ValueError(f"n_genes must be at least 1, got {n_genes}")

        self.n_genes = n_genes
        self.rng = rng

    def generate(self) -> np.ndarray:
        """
        Generate one random chromosome.

        Returns:
            Boolean array where each gene is true with probability 0.5
        """
        return self.rng.random(self.n_genes) < 0.5

    def generate_population(self, size: int) -> Population:
        """
        Generate an initial population of independent chromosomes.

        Args:
            size: Number of chromosomes

        Returns:
            Population with ``size`` freshly generated chromosomes
        """
        population = Population([self.generate() for _ in range(size)])
        logger.debug(f"Generated initial population with {population.size} chromosomes")
        return population
