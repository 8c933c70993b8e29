"""
Optimization module for the knapsack solver.

This module contains the evolution engine that integrates the core algorithm
modules (initialization, selection, variation) into the generational loop.
"""

from .engine import EvolutionEngine
from .config import EvolutionEngineConfig, GenerationHistory, parse_seed

__all__ = [
    "EvolutionEngine",
    "EvolutionEngineConfig",
    "GenerationHistory",
    "parse_seed",
]
