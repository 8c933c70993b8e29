"""
Fixtures for unit tests.
"""

import pytest
import numpy as np
from knapsack_evo.core.item import make_items
from knapsack_evo.core.population import Population


@pytest.fixture
def tiny_items():
    """Three-item instance: optimum 7 (items 0 and 1) at capacity 5."""
    return make_items([(2, 3), (3, 4), (4, 5)])


@pytest.fixture
def sample_population():
    """Create a sample population of 3-gene chromosomes."""
    return Population([
        np.array([False, False, False]),
        np.array([True, False, False]),
        np.array([True, True, False]),
        np.array([True, True, True]),
        np.array([False, True, True]),
    ])


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)
