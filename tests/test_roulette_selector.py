"""
Unit tests for roulette-wheel selection.
"""

import pytest
import numpy as np
from unittest.mock import MagicMock
from knapsack_evo.selection.roulette import RouletteWheelSelector
from knapsack_evo.core.population import Population


class TestRouletteWheelSelector:
    """Test suite for RouletteWheelSelector class."""

    @pytest.fixture
    def population(self):
        """Create a population of four distinguishable chromosomes."""
        return Population([
            np.array([True, False, False, False]),
            np.array([False, True, False, False]),
            np.array([False, False, True, False]),
            np.array([False, False, False, True]),
        ])

    @pytest.fixture
    def selector(self):
        """Create a seeded selector."""
        return RouletteWheelSelector(np.random.default_rng(0))

    def test_scan_picks_first_prefix_exceeding_draw(self):
        """Test the cumulative-sum scan boundaries."""
        fitnesses = [5, 3, 2]

        # offsets over all but the last element: [5, 8]
        assert [RouletteWheelSelector.scan(fitnesses, pick) for pick in range(11)] == [
            0, 0, 0, 0, 0,
            1, 1, 1,
            2, 2, 2,
        ]

    def test_scan_skips_zero_fitness(self):
        """Test zero-fitness chromosomes are never picked by the scan itself."""
        assert RouletteWheelSelector.scan([0, 5, 0], 0) == 1
        assert RouletteWheelSelector.scan([0, 5, 0], 4) == 1

    def test_scan_falls_through_to_last(self):
        """Test the last chromosome is returned when the scan is exhausted."""
        assert RouletteWheelSelector.scan([4, 0, 0, 9], 4) == 3
        assert RouletteWheelSelector.scan([4, 0, 0, 0], 4) == 3

    def test_all_zero_fitness_selects_last(self, selector, population):
        """Test an all-zero generation always selects the last chromosome."""
        fitnesses = [0, 0, 0, 0]

        for _ in range(50):
            chosen = selector.select(population, fitnesses, 0)
            assert chosen is population[3]

    def test_single_chromosome_population(self, selector):
        """Test selection from a population of one."""
        population = Population([np.array([True, True])])

        assert selector.select(population, [3], 3) is population[0]
        assert selector.select(population, [0], 0) is population[0]

    def test_select_returns_population_member(self, selector, population):
        """Test selection always returns a chromosome of the population."""
        fitnesses = [1, 10, 0, 4]

        for _ in range(200):
            chosen = selector.select(population, fitnesses, sum(fitnesses))
            assert population.contains(chosen)

    def test_draw_range_is_closed(self, population):
        """Test the draw covers [0, fitness_sum] inclusive."""
        rng = MagicMock()
        rng.integers.return_value = 15
        selector = RouletteWheelSelector(rng)

        idx = selector.select_index([5, 5, 5, 0], 15)

        rng.integers.assert_called_once_with(0, 15, endpoint=True)
        assert idx == 3

    def test_selection_is_fitness_proportional(self, population):
        """Test selection frequencies follow fitness shares."""
        selector = RouletteWheelSelector(np.random.default_rng(123))
        fitnesses = [10, 30, 60, 0]
        counts = np.zeros(4, dtype=int)

        for _ in range(5000):
            counts[selector.select_index(fitnesses, 100)] += 1

        shares = counts / counts.sum()
        assert shares[0] == pytest.approx(0.1, abs=0.03)
        assert shares[1] == pytest.approx(0.3, abs=0.03)
        assert shares[2] == pytest.approx(0.6, abs=0.03)
        # the last slot only wins the pick == sum draw (1 in 101)
        assert shares[3] < 0.02

    def test_empty_population_rejected(self, selector):
        """Test selection from no fitness values is rejected."""
        with pytest.raises(ValueError, match="empty population"):
            selector.select_index([], 0)
