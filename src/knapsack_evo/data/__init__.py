"""
Knapsack instances: built-in benchmarks and YAML instance files.
"""

from .benchmark import BENCHMARK_INSTANCES, DEFAULT_INSTANCE
from .instance_loader import load_instance, save_instance, get_instance, list_instances

__all__ = [
    "BENCHMARK_INSTANCES",
    "DEFAULT_INSTANCE",
    "load_instance",
    "save_instance",
    "get_instance",
    "list_instances",
]
