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
def two_groups():
    """Two clearly separated groups (n=5 each)."""
    group_a = [10, 12, 14, 12, 13]
    group_b = [20, 22, 19, 21, 23]
    return group_a, group_b


@pytest.fixture
def three_groups(rng):
    """3-group unbalanced design (n=5, 8, 11) with means 10, 12, 15."""
    return {
        'low': rng.normal(10.0, 2.0, 5),
        'mid': rng.normal(12.0, 2.0, 8),
        'high': rng.normal(15.0, 2.0, 11),
    }
