"""
Unit tests for the instance loader and built-in benchmarks.
"""

import itertools
import pytest
import numpy as np
from knapsack_evo.data import (
    BENCHMARK_INSTANCES,
    load_instance,
    save_instance,
    get_instance,
    list_instances,
)
from knapsack_evo.core.fitness import FitnessEvaluator
from knapsack_evo.core.item import Item


def bits_to_chromosome(bits: str) -> np.ndarray:
    return np.array([b == "1" for b in bits], dtype=bool)


class TestBenchmarkInstances:
    """Test suite for the built-in instances."""

    def test_list_instances(self):
        """Test both built-in instances are listed."""
        assert set(list_instances()) == {"p08", "tiny"}

    def test_p08_shape(self):
        """Test the 24-item benchmark definition."""
        instance = get_instance("p08")

        assert instance.n_items == 24
        assert instance.capacity == 6404180
        assert instance.items[0] == Item(382745, 825594)
        assert instance.items[-1] == Item(169684, 369261)

    def test_p08_known_optimum_scores(self):
        """Test the known optimum chromosome is feasible and scores the optimum."""
        instance = get_instance("p08")
        evaluator = FitnessEvaluator(instance.items, instance.capacity)
        chromosome = bits_to_chromosome(instance.optimum_chromosome)

        assert evaluator.is_feasible(chromosome)
        assert evaluator.evaluate(chromosome) == 13549094 == instance.optimum

    def test_tiny_optimum_is_brute_force_optimum(self):
        """Test the tiny instance's optimum by exhaustive search."""
        instance = get_instance("tiny")
        evaluator = FitnessEvaluator(instance.items, instance.capacity)

        best = max(
            itertools.product([False, True], repeat=instance.n_items),
            key=lambda genes: evaluator.evaluate(np.array(genes))
        )

        assert evaluator.evaluate(np.array(best)) == instance.optimum == 7
        assert "".join("1" if g else "0" for g in best) == instance.optimum_chromosome

    def test_instances_are_independent_copies(self):
        """Test resolving an instance twice gives separate objects."""
        assert get_instance("p08") is not get_instance("p08")
        assert BENCHMARK_INSTANCES["p08"]["capacity"] == 6404180


class TestInstanceLoader:
    """Test suite for YAML instance files."""

    def test_load_instance(self, tmp_path):
        """Test loading an instance file."""
        path = tmp_path / "pair.yaml"
        path.write_text("""
capacity: 10
optimum: 9
items:
  - {weight: 4, value: 5}
  - [6, 4]
""")

        instance = load_instance(path)

        assert instance.name == "pair"
        assert instance.capacity == 10
        assert instance.items == [Item(4, 5), Item(6, 4)]
        assert instance.optimum == 9

    def test_load_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_instance(tmp_path / "missing.yaml")

    def test_load_non_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_instance(path)

    def test_load_missing_items(self, tmp_path):
        """Test a file without items is rejected."""
        path = tmp_path / "noitems.yaml"
        path.write_text("capacity: 3\n")

        with pytest.raises(ValueError, match="items"):
            load_instance(path)

    def test_save_and_load(self, tmp_path):
        """Test a saved instance loads back unchanged."""
        instance = get_instance("tiny")
        path = tmp_path / "tiny.yaml"

        save_instance(instance, path)
        loaded = load_instance(path)

        assert loaded.items == instance.items
        assert loaded.capacity == instance.capacity
        assert loaded.optimum_chromosome == "110"

    def test_get_instance_by_path(self, tmp_path):
        """Test get_instance accepts a file path."""
        path = tmp_path / "one.yaml"
        path.write_text("capacity: 1\nitems: [[1, 1]]\n")

        assert get_instance(str(path)).n_items == 1

    def test_get_unknown_instance(self):
        """Test unknown names list the available instances."""
        with pytest.raises(ValueError, match="Available instances: p08, tiny"):
            get_instance("p99")
