"""
Initial population generation for the knapsack solver.
"""

from .generators import ChromosomeFactory

__all__ = ["ChromosomeFactory"]
