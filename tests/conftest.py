"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densemat import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a2():
    """2x2 [[1, 2], [3, 4]]."""
    return Matrix(2, 2, [1, 2, 3, 4])


@pytest.fixture
def b2():
    """2x2 [[2, 0], [1, 2]]."""
    return Matrix(2, 2, [2, 0, 1, 2])


@pytest.fixture
def seq3x3():
    """3x3 holding 1..9 row by row."""
    return Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])


@pytest.fixture
def random_int_pair(rng):
    """Two compatible random integer matrices (3x4 and 4x2) as numpy arrays."""
    a = rng.integers(-9, 10, size=(3, 4))
    b = rng.integers(-9, 10, size=(4, 2))
    return a, b
