"""
Command-line entry point for the knapsack solver.

Usage:
    knapsack-evo --instance p08
    knapsack-evo --instance config/instances/small.yaml --iterations 200 --seed 7
    knapsack-evo --config config/evolution.yaml --output-dir outputs/
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from datetime import datetime

from .core.item import KnapsackInstance
from .data import get_instance, list_instances, DEFAULT_INSTANCE
from .optimization.config import EvolutionEngineConfig
from .optimization.engine import EvolutionEngine
from .utils.evolution_logger import EvolutionLogger
from .utils.listeners import LoggingReporter

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Solve a 0/1 knapsack instance with a genetic algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the built-in 24-item benchmark with its default parameters
  knapsack-evo --instance p08

  # Reproduce a run
  knapsack-evo --instance p08 --seed 1234

  # Solve an instance file with a custom evolution config
  knapsack-evo --instance my_items.yaml --config config/evolution.yaml
        """
    )

    parser.add_argument(
        "--instance",
        type=str,
        default=DEFAULT_INSTANCE,
        help=f"Built-in instance ({', '.join(list_instances())}) or path to a YAML instance file "
             f"(default: {DEFAULT_INSTANCE})"
    )

    parser.add_argument(
        "--config",
        type=str,
        default="config/evolution.yaml",
        help="Path to evolution engine config YAML (default: config/evolution.yaml)"
    )

    parser.add_argument("--iterations", type=int, default=None, help="Number of generations")
    parser.add_argument("--population-size", type=int, default=None, help="Population size")
    parser.add_argument("--mutation-rate", type=float, default=None, help="Per-gene flip probability")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Write JSON run logs to this directory (disabled by default)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides the config file)"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EvolutionEngineConfig:
    """
    Load the evolution config and apply command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        EvolutionEngineConfig instance
    """
    config_path = Path(args.config)
    if config_path.exists():
        config = EvolutionEngineConfig.from_yaml(config_path)
        logger.info(f"Loaded evolution config from: {config_path}")
    else:
        logger.warning(f"Config file not found: {config_path}, using defaults")
        config = EvolutionEngineConfig()

    overrides = {
        "iterations": args.iterations,
        "population_size": args.population_size,
        "mutation_rate": args.mutation_rate,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    # replace() re-runs validation
    return dataclasses.replace(config, **overrides)


def run(instance: KnapsackInstance, config: EvolutionEngineConfig,
        output_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Solve an instance and report the result.

    Args:
        instance: Knapsack instance to solve
        config: Evolution engine configuration
        output_dir: Optional directory for JSON run logs

    Returns:
        Result dictionary
    """
    engine = EvolutionEngine.from_instance(
        instance,
        config=config,
        listeners=[LoggingReporter(progress_interval=config.progress_interval)]
    )

    if output_dir is not None:
        run_id = f"{instance.name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        engine.add_listener(EvolutionLogger(output_dir, run_id, items=instance.items, history_source=engine))

    # The attached reporter logs the final solution itself
    solution = engine.solve()

    if instance.optimum is not None:
        chromosome = instance.optimum_chromosome or "unknown"
        logger.info("=" * 70)
        logger.info(f"Global solution:  {instance.optimum}, Chromosome: {chromosome}")
        logger.info("=" * 70)

    return {
        "instance": instance.name,
        "seed": engine.seed,
        "fitness": solution.fitness,
        "chromosome": solution.bitstring(),
        "weight": solution.total_weight(instance.items),
        "capacity": instance.capacity,
        "optimum": instance.optimum,
        "found_at_generation": solution.generation,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    try:
        config = build_config(args)
        instance = get_instance(args.instance)

        logger.info("=" * 70)
        logger.info("knapsack-evo: genetic search for the 0/1 knapsack problem")
        logger.info("=" * 70)
        logger.info(f"Instance: {instance.name} ({instance.n_items} items, capacity {instance.capacity})")
        logger.info(f"Iterations: {config.iterations}")
        logger.info(f"Population size: {config.population_size}")
        logger.info(f"Mutation rate: {config.mutation_rate}")

        run(instance, config, Path(args.output_dir) if args.output_dir else None)
        return 0

    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
