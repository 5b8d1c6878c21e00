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
def diag_dominant(rng):
    """
    5x5 strictly diagonally dominant matrix.

    Crout without pivoting never meets a zero pivot on these.
    """
    n = 5
    A = rng.standard_normal((n, n))
    A += np.diag(np.sum(np.abs(A), axis=1) + 1.0)
    return A


@pytest.fixture
def crout_2x2():
    """[[4, 3], [6, 3]] with its known Crout factors and determinant."""
    A = [[4.0, 3.0], [6.0, 3.0]]
    L = [[4.0, 0.0], [6.0, -1.5]]
    U = [[1.0, 0.75], [0.0, 1.0]]
    return A, L, U, -6.0
