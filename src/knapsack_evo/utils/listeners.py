"""
Observer interface for the evolution engine.

The engine performs no output of its own. Reporters subclass
EvolutionListener and override the hooks they care about.
"""

import logging
from typing import Any, Dict

from ..core.solution import Solution


logger = logging.getLogger(__name__)


class EvolutionListener:
    """
    Receives progress and improvement events from the evolution engine.

    All hooks are no-ops by default.
    """

    def on_start(self, seed: int, config: Dict[str, Any]) -> None:
        """Called once before generation 0 is created."""

    def on_generation(self, generation: int, total: int) -> None:
        """Called at the start of every generation, before evaluation."""

    def on_improvement(self, fitness: int, generation: int) -> None:
        """Called exactly when the best-known solution is overwritten."""

    def on_finish(self, solution: Solution) -> None:
        """Called once after the last generation."""


class LoggingReporter(EvolutionListener):
    """
    Reports progress and improvements through the logging module.

    Attributes:
        progress_interval: Log progress every N generations
    """

    def __init__(self, progress_interval: int = 100, log: logging.Logger = logger):
        """
        Initialize the reporter.

        Args:
            progress_interval: Log progress every N generations
            log: Logger to report to
        """
        if progress_interval < 1:
            raise ValueError("progress_interval must be at least 1")

        self.progress_interval = progress_interval
        self.log = log

    def on_start(self, seed: int, config: Dict[str, Any]) -> None:
        self.log.info(f"Seed={seed}")

    def on_generation(self, generation: int, total: int) -> None:
        if generation % self.progress_interval == 0:
            self.log.info(f"Generation: {generation}/{total}")

    def on_improvement(self, fitness: int, generation: int) -> None:
        self.log.info(f"New solution found: {fitness} iteration={generation}")

    def on_finish(self, solution: Solution) -> None:
        self.log.info(f"Current solution: {solution.fitness}, Chromosome: {solution.bitstring()}")
