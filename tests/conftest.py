"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """The worked example used throughout: [[1, 2], [3, 4]]."""
    return [[1.0, 2.0], [3.0, 4.0]]


@pytest.fixture
def rank_deficient_2x2():
    """Second row is twice the first."""
    return [[1.0, 2.0], [2.0, 4.0]]
