"""
Configuration and data classes for the knapsack evolution engine.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Any
from pathlib import Path
import yaml
from datetime import datetime

logger = logging.getLogger(__name__)


def parse_seed(value: Any) -> Optional[int]:
    """
    Parse an RNG seed from a config value.

    Args:
        value: None, an empty string, an integer or a decimal string

    Returns:
        Non-negative integer seed, or None when no seed is given

    Examples:
        >>> parse_seed("42")
        42
        >>> parse_seed("") is None
        True
    """
    if value is None:
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = int(value)
        except ValueError:
            raise ValueError(f"Invalid seed: {value!r}")

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"seed must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"seed must be non-negative, got {value}")

    return value


@dataclass
class EvolutionEngineConfig:
    """
    Configuration for the evolution engine.

    Contains all hyperparameters controlling the genetic search. The defaults
    are the benchmark run parameters.
    """

    # Evolution hyperparameters
    iterations: int = 1000
    population_size: int = 1000
    mutation_rate: float = 0.001

    # Reproducibility (None draws a fresh seed from system entropy)
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_generation_stats: bool = False
    progress_interval: int = 100

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("iterations", "population_size", "progress_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {type(value).__name__}")

        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if self.population_size < 1:
            raise ValueError("population_size must be at least 1")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be between 0 and 1")
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

        self.log_level = self.log_level.upper()
        self.seed = parse_seed(self.seed)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "EvolutionEngineConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            EvolutionEngineConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file holds unknown keys or invalid values
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Evolution config not found: {config_path}")

        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        # Extract nested parameters if present
        evolution_config = config.get("evolution", config) or {}

        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(evolution_config) - known)
        if unknown:
            raise ValueError(
                f"Unknown keys in {config_path}: {', '.join(unknown)}. "
                f"Valid keys: {', '.join(sorted(known))}"
            )

        return cls(**evolution_config)

    @classmethod
    def from_env(cls) -> "EvolutionEngineConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - ITERATIONS: iterations
        - POPULATION_SIZE: population_size
        - MUTATION_RATE: mutation_rate
        - SEED: seed (unset or empty for a random seed)
        - LOG_LEVEL: log_level

        Returns:
            EvolutionEngineConfig instance
        """
        return cls(
            iterations=int(os.getenv("ITERATIONS", "1000")),
            population_size=int(os.getenv("POPULATION_SIZE", "1000")),
            mutation_rate=float(os.getenv("MUTATION_RATE", "0.001")),
            seed=os.getenv("SEED"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "iterations": self.iterations,
            "population_size": self.population_size,
            "mutation_rate": self.mutation_rate,
            "seed": self.seed,
            "log_level": self.log_level,
            "log_generation_stats": self.log_generation_stats,
            "progress_interval": self.progress_interval,
        }

    def to_yaml(self, save_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, 'w') as f:
            yaml.dump({"evolution": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")


@dataclass
class GenerationHistory:
    """
    Statistics for a single generation of evolution.

    Tracks key metrics to monitor evolution progress.
    """

    generation: int
    population_size: int
    avg_fitness: float
    best_fitness: int
    worst_fitness: int
    n_scoring: int
    solution_fitness: int
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "generation": self.generation,
            "population_size": self.population_size,
            "avg_fitness": self.avg_fitness,
            "best_fitness": self.best_fitness,
            "worst_fitness": self.worst_fitness,
            "n_scoring": self.n_scoring,
            "solution_fitness": self.solution_fitness,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationHistory":
        """Create instance from dictionary."""
        return cls(**data)
