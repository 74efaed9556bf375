"""
Arithmetic on continued fractions as fixed instantiations of the engines.

    x + y   bihom(0, 1,  1, 0,  0, 0, 0, 1)
    x - y   bihom(0, 1, -1, 0,  0, 0, 0, 1)
    x * y   bihom(1, 0,  0, 0,  0, 0, 0, 1)
    x / y   bihom(0, 1,  0, 0,  0, 0, 1, 0)
    x + 1   hom(1,  1, 0, 1)
    x - 1   hom(1, -1, 0, 1)

Negation, absolute value and reciprocal act on the coefficients directly.
"""

import numbers
from fractions import Fraction
from typing import Iterator, Union

from .bihomographic import bihom
from .homographic import hom, quot
from .ordering import sign_of
from .stream import CF, INFINITY

Number = Union[CF, int, Fraction]


# ── Construction ─────────────────────────────────────────────────────────

def from_int(n: int) -> CF:
    return CF((n,))


def _expand(numerator: int, denominator: int) -> Iterator[int]:
    while denominator != 0:
        q = quot(numerator, denominator)
        r = numerator - q * denominator
        yield q
        numerator, denominator = denominator, r


def from_fraction(numerator: int, denominator: int = 1) -> CF:
    """Expansion of numerator/denominator by truncating quotient/remainder.

    A zero denominator gives INFINITY.
    """
    if denominator == 0:
        return INFINITY
    return CF(_expand(numerator, denominator))


def coerce(value: Number) -> CF:
    """Accept a CF, an int or any exact rational."""
    if isinstance(value, CF):
        return value
    if isinstance(value, numbers.Integral):
        return from_int(int(value))
    if isinstance(value, numbers.Rational):
        return from_fraction(int(value.numerator), int(value.denominator))
    raise TypeError(f"Cannot convert {type(value).__name__} to a continued fraction")


# ── Binary operations ────────────────────────────────────────────────────

def add(x: CF, y: CF) -> CF:
    return bihom(0, 1, 1, 0,
                 0, 0, 0, 1, x, y)


def sub(x: CF, y: CF) -> CF:
    return bihom(0, 1, -1, 0,
                 0, 0, 0, 1, x, y)


def mul(x: CF, y: CF) -> CF:
    return bihom(1, 0, 0, 0,
                 0, 0, 0, 1, x, y)


def div(x: CF, y: CF) -> CF:
    return bihom(0, 1, 0, 0,
                 0, 0, 1, 0, x, y)


# ── Unary operations ─────────────────────────────────────────────────────

def neg(x: CF) -> CF:
    return CF(-c for c in x)


def absolute(x: CF) -> CF:
    return CF(abs(c) for c in x)


def sign(x: CF) -> CF:
    """-1, 0 or 1 as a single-coefficient CF; infinity counts as positive."""
    return from_int(sign_of(x))


def reciprocal(x: CF) -> CF:
    """1/x: drop a leading zero, or push one in front."""
    if x.term(0) == 0:
        return x.drop(1)
    return CF(_prepend(0, x))


def _prepend(head: int, x: CF) -> Iterator[int]:
    yield head
    yield from x


def succ(x: CF) -> CF:
    return hom(1, 1, 0, 1, x)


def pred(x: CF) -> CF:
    return hom(1, -1, 0, 1, x)
