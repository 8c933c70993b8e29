"""
Utility modules for the knapsack solver.

This package provides the engine's observer interface and the reporters
that consume it.
"""

from .listeners import EvolutionListener, LoggingReporter
from .evolution_logger import EvolutionLogger

__all__ = [
    "EvolutionListener",
    "LoggingReporter",
    "EvolutionLogger",
]
