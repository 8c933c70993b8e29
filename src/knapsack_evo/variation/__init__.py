"""
Variation operators (crossover and mutation) for the knapsack solver.
"""

from .crossover import SinglePointCrossover
from .mutation import BitFlipMutation

__all__ = ["SinglePointCrossover", "BitFlipMutation"]
