"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_matrix(rng):
    """
    Factory for integer-valued random matrices.

    Small integers keep every sum and product exactly representable in
    float32, so results can be compared with exact equality.
    """
    def make(n: int, low: int = -9, high: int = 10) -> Matrix:
        return Matrix[n].from_rows(rng.integers(low, high, size=(n, n)))
    return make


@pytest.fixture
def m1():
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def m2():
    return Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])
