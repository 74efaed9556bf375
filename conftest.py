"""Shared pytest fixtures."""

from fractions import Fraction

import numpy as np
import pytest


def random_rationals(seed: int, count: int, bound: int = 1000, nonzero: bool = False):
    """Seeded rationals p/q with q > 0 (numpy draws converted to Python ints)."""
    rng = np.random.default_rng(seed=seed)
    values = []
    while len(values) < count:
        p = int(rng.integers(-bound, bound))
        q = int(rng.integers(1, bound))
        if nonzero and p == 0:
            continue
        values.append(Fraction(p, q))
    return values


@pytest.fixture
def rationals():
    return random_rationals(seed=42, count=40)


@pytest.fixture
def nonzero_rationals():
    return random_rationals(seed=7, count=40, nonzero=True)
