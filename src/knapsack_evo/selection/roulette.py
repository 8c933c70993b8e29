"""
Roulette-wheel selection for the knapsack solver.

Fitness-proportional parent choice via a cumulative-sum scan. The scan
never looks at the last chromosome: whenever no scanned prefix sum exceeds
the draw, the last chromosome is returned. When every fitness is 0 the draw
is always 0 and the last chromosome is therefore always picked.
"""

import logging
from typing import Sequence
import numpy as np

from ..core.population import Population


logger = logging.getLogger(__name__)


class RouletteWheelSelector:
    """
    Fitness-proportional (roulette-wheel) selector.

    Attributes:
        rng: Shared random generator owned by the engine
    """

    def __init__(self, rng: np.random.Generator):
        """
        Initialize the roulette-wheel selector.

        Args:
            rng: Random generator used for the wheel draw
        """
        self.rng = rng

    def select(
        self,
        population: Population,
        fitnesses: Sequence[int],
        fitness_sum: int
    ) -> np.ndarray:
        """
        Select one parent chromosome.

        Args:
            population: Current population
            fitnesses: Fitness of each chromosome, in population order
            fitness_sum: Sum of ``fitnesses``

        Returns:
            The selected chromosome (a reference into the population)
        """
        return population[self.select_index(fitnesses, fitness_sum)]

    def select_index(self, fitnesses: Sequence[int], fitness_sum: int) -> int:
        """
        Spin the wheel and return the index of the selected chromosome.

        Args:
            fitnesses: Fitness of each chromosome, in population order
            fitness_sum: Sum of ``fitnesses``

        Returns:
            Index into the population
        """
        if len(fitnesses) == 0:
            raise ValueError("Cannot select from an empty population")

        pick = int(self.rng.integers(0, fitness_sum, endpoint=True))
        return self.scan(fitnesses, pick)

    @staticmethod
    def scan(fitnesses: Sequence[int], pick: int) -> int:
        """
        Find the first chromosome whose cumulative fitness exceeds ``pick``.

        The last chromosome is excluded from the scan and returned when the
        scan falls through.

        Args:
            fitnesses: Fitness of each chromosome, in population order
            pick: Wheel position in ``[0, sum(fitnesses)]``

        Returns:
            Index into the population
        """
        offsets = np.cumsum(np.asarray(fitnesses[:-1], dtype=np.int64))
        # side="right" finds the first offset strictly greater than pick;
        # falling off the end yields len(fitnesses) - 1, the last chromosome
        return int(np.searchsorted(offsets, pick, side="right"))
