"""Tests for Brent's repetition detector."""

import itertools

from cfrac.constants import PHI, SQRT2
from cfrac.cycles import brent


def test_empty():
    assert brent([]) is False


def test_distinct_finite():
    assert brent([1, 2, 3, 4]) is False
    assert brent(range(100)) is False


def test_repeat_of_checkpoint():
    assert brent([1, 2, 1]) is True


def test_periodic_infinite():
    assert brent(itertools.cycle([1, 2, 3])) is True
    assert brent(itertools.cycle(range(37))) is True


def test_eventually_periodic():
    assert brent(itertools.chain(range(10), itertools.cycle([7, 8, 9]))) is True


def test_periodic_expansions():
    assert brent(PHI) is True
    assert brent(SQRT2) is True
