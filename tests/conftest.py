"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def values():
    """The 2x3 grid used throughout the access tests."""
    return [[1.0, 2.0, 3.0], [3.0, 2.0, 1.0]]


@pytest.fixture
def matrix(values):
    """Matrix wrapping the 2x3 grid."""
    return Matrix.from_grid(values)


@pytest.fixture
def product_pair():
    """a, b and a @ b for the 2x2 textbook product."""
    a = Matrix.from_grid([[1.0, 2.0], [3.0, 4.0]])
    b = Matrix.from_grid([[5.0, 6.0], [7.0, 8.0]])
    expected = Matrix.from_grid([[19.0, 22.0], [43.0, 50.0]])
    return a, b, expected
