"""
Homographic (Mobius) transformation of a continued fraction:

    z = (a*x + b) / (c*x + d)

The engine holds (a, b, c, d) and a cursor into x.  Each call to next()
either emits a coefficient of z that is fixed whatever the rest of x is, or
absorbs one coefficient of x.  The emit test compares the two bounds a/c
(x -> inf) and b/d (x -> 0) with truncating division.
"""

from .stream import CF, INFINITY


def quot(n: int, d: int) -> int:
    """Integer quotient rounded toward zero (not floor)."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


class Homographic:
    """Iterator over the coefficients of (a*x + b) / (c*x + d)."""

    def __init__(self, a: int, b: int, c: int, d: int, x: CF):
        self.state = (a, b, c, d)
        self.x = x.cursor()
        self._passthrough = None

    def __iter__(self):
        return self

    def __next__(self) -> int:
        while True:
            if self._passthrough is not None:
                return next(self._passthrough)

            a, b, c, d = self.state
            if (a, b, c, d) == (1, 0, 0, 1):
                self._passthrough = iter(self.x.rest())
                continue
            if c == 0 and d == 0:
                raise StopIteration

            # Emit
            if c != 0 and d != 0:
                q = quot(a, c)
                if q == quot(b, d):
                    self.state = (c, d, a - c * q, b - d * q)
                    return q

            # Absorb
            y = self.x.advance()
            if y is None:
                self.state = (a, a, c, c)
            else:
                self.state = (a * y + b, a, c * y + d, c)


def hom(a: int, b: int, c: int, d: int, x: CF) -> CF:
    """CF of (a*x + b) / (c*x + d), reading x only as needed."""
    if (a, b, c, d) == (1, 0, 0, 1):
        return x
    if c == 0 and d == 0:
        return INFINITY
    return CF(Homographic(a, b, c, d, x))
