"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinear import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sequential_3x3():
    """[[1, 2, 3], [4, 5, 6], [7, 8, 9]] over int (singular, rank 2)."""
    return Matrix.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def sequential_3x3_float():
    """Same entries as sequential_3x3 over float."""
    return Matrix.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=float)


@pytest.fixture
def vectors_123_456():
    """Column vectors [1, 2, 3] and [4, 5, 6] over int."""
    return Vector([1, 2, 3]), Vector([4, 5, 6])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for random integer matrices with entries in [-9, 9]."""
    def make(rows, columns):
        return Matrix.from_array(rng.integers(-9, 10, size=(rows, columns)).tolist())
    return make


class Scaled:
    """User-defined numeric type: unregistered, unhashable, no numeric tower."""

    def __init__(self, value):
        self.value = value

    def __add__(self, other):
        return Scaled(self.value + other.value)

    def __sub__(self, other):
        return Scaled(self.value - other.value)

    def __mul__(self, other):
        return Scaled(self.value * other.value)

    def __truediv__(self, other):
        return Scaled(self.value / other.value)

    def __neg__(self):
        return Scaled(-self.value)

    def __eq__(self, other):
        return isinstance(other, Scaled) and self.value == other.value

    __hash__ = None

    def __repr__(self):
        return f"Scaled({self.value!r})"


@pytest.fixture
def scaled():
    """The Scaled user numeric type."""
    return Scaled
