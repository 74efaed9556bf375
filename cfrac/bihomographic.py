"""
Gosper-style bihomographic transformation of two continued fractions:

        a*x*y + b*x + c*y + d
    z = ---------------------
        e*x*y + f*x + g*y + h

The eight coefficients are the corners of the output bound: with the
unread tails of x and y each ranging over [0, inf], z lies between

    a/e  (x, y -> inf)      b/f  (x -> inf, y -> 0)
    c/g  (x -> 0, y -> inf) d/h  (x, y -> 0)

A coefficient is emitted once all four corners truncate to the same integer.
Otherwise one operand is absorbed: the one along which the corners are
further apart.
"""

from .homographic import hom, quot
from .stream import CF, INFINITY

_IDENTITY_X = (0, 1, 0, 0, 0, 0, 0, 1)
_IDENTITY_Y = (0, 0, 1, 0, 0, 0, 0, 1)


class Bihomographic:
    """Iterator over the coefficients of z(x, y)."""

    def __init__(self, a: int, b: int, c: int, d: int,
                 e: int, f: int, g: int, h: int, x: CF, y: CF):
        self.state = (a, b, c, d, e, f, g, h)
        self.x = x.cursor()
        self.y = y.cursor()
        self._delegate = None

    def __iter__(self):
        return self

    def _absorb_y_next(self) -> bool:
        a, b, c, d, e, f, g, h = self.state
        if e == 0 and f == 0:
            return False
        if e == 0 and g == 0:
            return True
        return abs(g * e * b - g * a * f) > abs(f * e * c - g * a * f)

    def __next__(self) -> int:
        while True:
            if self._delegate is not None:
                return next(self._delegate)

            a, b, c, d, e, f, g, h = self.state

            # An exhausted operand is infinite: fall back to one variable.
            if self.y.exhausted():
                self._delegate = iter(hom(a, c, e, g, self.x.rest()))
                continue
            if self.x.exhausted():
                self._delegate = iter(hom(a, b, e, f, self.y.rest()))
                continue
            if self.state == _IDENTITY_X:
                self._delegate = iter(self.x.rest())
                continue
            if self.state == _IDENTITY_Y:
                self._delegate = iter(self.y.rest())
                continue
            if e == 0 and f == 0 and g == 0 and h == 0:
                raise StopIteration

            # Emit
            if e != 0 and f != 0 and g != 0 and h != 0:
                q = quot(a, e)
                if q == quot(b, f) and q == quot(c, g) and q == quot(d, h):
                    self.state = (e, f, g, h,
                                  a - q * e, b - q * f, c - q * g, d - q * h)
                    return q

            # Absorb
            if self._absorb_y_next():
                w = self.y.advance()
                self.state = (a * w + b, a, c * w + d, c,
                              e * w + f, e, g * w + h, g)
            else:
                v = self.x.advance()
                self.state = (a * v + c, b * v + d, a, b,
                              e * v + g, f * v + h, e, f)


def bihom(a: int, b: int, c: int, d: int,
          e: int, f: int, g: int, h: int, x: CF, y: CF) -> CF:
    """CF of (axy + bx + cy + d) / (exy + fx + gy + h)."""
    coefficients = (a, b, c, d, e, f, g, h)
    if coefficients == _IDENTITY_X:
        return x
    if coefficients == _IDENTITY_Y:
        return y
    if e == 0 and f == 0 and g == 0 and h == 0:
        return INFINITY
    return CF(Bihomographic(a, b, c, d, e, f, g, h, x, y))
