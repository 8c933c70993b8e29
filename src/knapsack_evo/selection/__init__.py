"""
Parent selection for the knapsack solver.
"""

from .roulette import RouletteWheelSelector

__all__ = ["RouletteWheelSelector"]
