"""
Unit tests for the reporters consuming engine events.
"""

import json
import logging
import pytest
import numpy as np

from knapsack_evo.core.item import make_items
from knapsack_evo.core.solution import Solution
from knapsack_evo.optimization.config import EvolutionEngineConfig
from knapsack_evo.optimization.engine import EvolutionEngine
from knapsack_evo.utils.evolution_logger import EvolutionLogger
from knapsack_evo.utils.listeners import EvolutionListener, LoggingReporter


class TestEvolutionListener:
    """Test suite for the listener base class."""

    def test_hooks_are_noops(self):
        """Test the default hooks accept events and do nothing."""
        listener = EvolutionListener()

        listener.on_start(1, {})
        listener.on_generation(0, 10)
        listener.on_improvement(5, 0)
        listener.on_finish(Solution.empty(2))


class TestLoggingReporter:
    """Test suite for LoggingReporter class."""

    def test_progress_interval(self, caplog):
        """Test progress is logged every N generations."""
        caplog.set_level(logging.INFO)
        reporter = LoggingReporter(progress_interval=5)

        for generation in range(12):
            reporter.on_generation(generation, 12)

        messages = [r.message for r in caplog.records]
        assert messages == ["Generation: 0/12", "Generation: 5/12", "Generation: 10/12"]

    def test_improvement_message(self, caplog):
        """Test improvements are logged with fitness and generation."""
        caplog.set_level(logging.INFO)
        reporter = LoggingReporter()

        reporter.on_improvement(1234, 7)

        assert "New solution found: 1234 iteration=7" in caplog.text

    def test_finish_message(self, caplog):
        """Test the final solution is logged as a bit string."""
        caplog.set_level(logging.INFO)
        reporter = LoggingReporter()

        reporter.on_finish(Solution(chromosome=np.array([True, False, True]), fitness=8))

        assert "Current solution: 8, Chromosome: 101" in caplog.text

    def test_invalid_interval(self):
        """Test a zero interval is rejected."""
        with pytest.raises(ValueError, match="progress_interval"):
            LoggingReporter(progress_interval=0)


class TestEvolutionLogger:
    """Test suite for EvolutionLogger class."""

    @pytest.fixture
    def solved_run(self, tmp_path):
        """Solve the three-item instance with a JSON logger attached."""
        items = make_items([(2, 3), (3, 4), (4, 5)])
        config = EvolutionEngineConfig(iterations=10, population_size=10, mutation_rate=0.01, seed=42)
        engine = EvolutionEngine(items, 5, config=config)
        run_logger = EvolutionLogger(tmp_path, "test", items=items, history_source=engine)
        engine.add_listener(run_logger)

        engine.solve()
        return engine, run_logger

    def test_output_directory(self, tmp_path):
        """Test one directory per run."""
        run_logger = EvolutionLogger(tmp_path, "abc")

        assert run_logger.output_dir == tmp_path / "run_abc"
        assert run_logger.output_dir.is_dir()

    def test_run_start(self, solved_run):
        """Test the seed and configuration are recorded."""
        _, run_logger = solved_run

        data = json.loads((run_logger.output_dir / "run_start.json").read_text())

        assert data["seed"] == 42
        assert data["config"]["population_size"] == 10

    def test_improvements(self, solved_run):
        """Test every improvement event is recorded in order."""
        engine, run_logger = solved_run

        data = json.loads((run_logger.output_dir / "improvements.json").read_text())
        fitnesses = [event["fitness"] for event in data["improvements"]]

        assert data["total_improvements"] == len(fitnesses) >= 1
        assert fitnesses == sorted(set(fitnesses))
        assert fitnesses[-1] == engine.solution.fitness

    def test_history(self, solved_run):
        """Test generation statistics are dumped on finish."""
        _, run_logger = solved_run

        data = json.loads((run_logger.output_dir / "history.json").read_text())

        assert [g["generation"] for g in data["generations"]] == list(range(10))

    def test_final_best(self, solved_run):
        """Test the final solution summary."""
        engine, run_logger = solved_run

        data = json.loads((run_logger.output_dir / "final_best.json").read_text())

        assert data["best_solution"]["chromosome"] == engine.solution.bitstring()
        assert data["summary"]["fitness"] == engine.solution.fitness
        assert data["summary"]["weight"] == engine.solution.total_weight(engine.items)
