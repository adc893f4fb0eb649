"""
Pytest configuration and fixtures for math_testutils tests.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def quartiles():
    """Quartile cut points [q1, q2, q3]."""
    return np.array([2.0, 5.0, 8.0])
