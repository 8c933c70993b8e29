"""
Instance loader for the knapsack solver.

This module loads knapsack instances from YAML files and exposes the
built-in benchmark instances by name.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union
import yaml

from ..core.item import KnapsackInstance
from .benchmark import BENCHMARK_INSTANCES

logger = logging.getLogger(__name__)


def load_instance(path: Union[str, Path]) -> KnapsackInstance:
    """
    Load a knapsack instance from a YAML file.

    The file holds a mapping with ``capacity`` and ``items`` (a list of
    ``{weight, value}`` mappings or ``[weight, value]`` pairs), and
    optionally ``name``, ``optimum`` and ``optimum_chromosome``.

    Args:
        path: Path to the YAML file

    Returns:
        KnapsackInstance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not describe a valid instance
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Instance file {path} must contain a mapping")

    data.setdefault("name", path.stem)
    instance = KnapsackInstance.from_dict(data)

    logger.info(f"Loaded instance '{instance.name}' from {path}: "
                f"{instance.n_items} items, capacity {instance.capacity}")
    return instance


def list_instances() -> List[str]:
    """
    List the built-in instance names.

    Returns:
        Names accepted by ``get_instance``
    """
    return list(BENCHMARK_INSTANCES.keys())


def get_instance(name_or_path: Union[str, Path]) -> KnapsackInstance:
    """
    Resolve a built-in instance name or a YAML file path.

    Args:
        name_or_path: Built-in instance name or path to a YAML file

    Returns:
        KnapsackInstance

    Raises:
        ValueError: If the name is neither built in nor an existing file
    """
    if str(name_or_path) in BENCHMARK_INSTANCES:
        return KnapsackInstance.from_dict(BENCHMARK_INSTANCES[str(name_or_path)])

    path = Path(name_or_path)
    if path.exists():
        return load_instance(path)

    available = ", ".join(list_instances())
    raise ValueError(
        f"Instance '{name_or_path}' not found. "
        f"Available instances: {available} (or a path to a YAML file)"
    )


def save_instance(instance: KnapsackInstance, path: Union[str, Path]) -> None:
    """
    Save a knapsack instance to a YAML file.

    Args:
        instance: Instance to save
        path: Destination path
    """
    data: Dict = instance.to_dict()

    with open(path, 'w') as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved instance '{instance.name}' to {path}")
