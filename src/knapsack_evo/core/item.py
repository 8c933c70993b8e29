"""
Item definitions for the knapsack solver.

This module defines the immutable Item record and the KnapsackInstance that
bundles the fixed, ordered item set with the knapsack capacity.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Dict, Any


@dataclass(frozen=True)
class Item:
    """
    A single item that may be packed into the knapsack.

    Attributes:
        weight: Non-negative integer weight
        value: Non-negative integer value
    """

    weight: int
    value: int

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Item weight must be non-negative, got {self.weight}")
        if self.value < 0:
            raise ValueError(f"Item value must be non-negative, got {self.value}")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"weight": self.weight, "value": self.value}


def make_items(pairs: Sequence[Tuple[int, int]]) -> List[Item]:
    """
    Build a list of items from (weight, value) pairs.

    Args:
        pairs: Sequence of (weight, value) tuples

    Returns:
        List of Item objects in the same order
    """
    return [Item(weight=int(w), value=int(v)) for w, v in pairs]


@dataclass
class KnapsackInstance:
    """
    A knapsack problem instance: fixed item set plus capacity.

    Attributes:
        items: Ordered list of items (defines chromosome length)
        capacity: Maximum total weight
        name: Human readable name of the instance
        optimum: Known optimal value, if any
        optimum_chromosome: Known optimal bit string, if any
    """

    items: List[Item]
    capacity: int
    name: str = "unnamed"
    optimum: Optional[int] = None
    optimum_chromosome: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.items:
            raise ValueError("Knapsack instance must contain at least one item")
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")
        if self.optimum_chromosome is not None and len(self.optimum_chromosome) != len(self.items):
            raise ValueError(
                f"optimum_chromosome has {len(self.optimum_chromosome)} genes, "
                f"expected {len(self.items)}"
            )

    @property
    def n_items(self) -> int:
        """Number of items (the chromosome length)."""
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "capacity": self.capacity,
            "items": [item.to_dict() for item in self.items],
            "optimum": self.optimum,
            "optimum_chromosome": self.optimum_chromosome,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnapsackInstance":
        """
        Create an instance from a dictionary.

        Items may be given as mappings with ``weight``/``value`` keys or as
        two-element lists.
        """
        if "capacity" not in data:
            raise ValueError("Instance definition is missing 'capacity'")
        if "items" not in data:
            raise ValueError("Instance definition is missing 'items'")

        items = []
        for raw in data["items"]:
            if isinstance(raw, dict):
                items.append(Item(weight=int(raw["weight"]), value=int(raw["value"])))
            else:
                weight, value = raw
                items.append(Item(weight=int(weight), value=int(value)))

        optimum = data.get("optimum")
        return cls(
            items=items,
            capacity=int(data["capacity"]),
            name=data.get("name", "unnamed"),
            optimum=int(optimum) if optimum is not None else None,
            optimum_chromosome=data.get("optimum_chromosome"),
        )

    def __repr__(self) -> str:
        return f"KnapsackInstance(name={self.name}, items={self.n_items}, capacity={self.capacity})"
