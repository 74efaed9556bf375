"""
Convergents of a continued fraction.

Same two-term recurrence as a 2x2 companion-matrix walk:

    h(n) = a(n) * h(n-1) + h(n-2),   h(-1) = 1, h(-2) = 0
    k(n) = a(n) * k(n-1) + k(n-2),   k(-1) = 0, k(-2) = 1

Each h(n)/k(n) is a best rational approximation: the convergents alternate
above and below the value with non-decreasing |k|, and any rational closer
to the value than h(n)/k(n) has a larger denominator.
"""

from fractions import Fraction
from typing import Iterable, Iterator


def convergents(coefficients: Iterable[int]) -> Iterator[Fraction]:
    """Lazily yield one convergent per coefficient."""
    h, h_prev = 1, 0
    k, k_prev = 0, 1
    for a in coefficients:
        h, h_prev = a * h + h_prev, h
        k, k_prev = a * k + k_prev, k
        yield Fraction(h, k)
