"""
knapsack-evo: a genetic-algorithm solver for the 0/1 knapsack problem.
"""

from .core import Item, KnapsackInstance, make_items, Solution, Population, FitnessEvaluator
from .optimization import EvolutionEngine, EvolutionEngineConfig, GenerationHistory
from .utils import EvolutionListener, LoggingReporter, EvolutionLogger

__version__ = "0.1.0"

__all__ = [
    "Item",
    "KnapsackInstance",
    "make_items",
    "Solution",
    "Population",
    "FitnessEvaluator",
    "EvolutionEngine",
    "EvolutionEngineConfig",
    "GenerationHistory",
    "EvolutionListener",
    "LoggingReporter",
    "EvolutionLogger",
]
