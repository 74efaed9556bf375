"""
Lazy continued-fraction data model.

A continued fraction [a0; a1, a2, ...] stands for

    a0 + 1/(a1 + 1/(a2 + ...))

and is stored as a stream of Python ints.  Termination of the stream is a
value in itself: the missing coefficient is infinite, so the empty stream is
+infinity and [a0, ..., an] is exactly the finite expansion.

Coefficients a1, a2, ... are strictly positive for positive values; a0 may
be zero or negative.  Negative values negate every coefficient:

    -[a0; a1, a2, ...]  ->  CF([-a0, -a1, -a2, ...])

A CF wraps a single-pass iterator and memoises what it pulls, so the same
value can be fed to several engines (x * x, x + -x) while every coefficient
is still produced exactly once.
"""

from itertools import islice
from typing import Iterable, Iterator, List, Optional


class CF:
    """Immutable, lazily evaluated continued fraction."""

    __slots__ = ("_source", "_terms")

    # Value-based equality over possibly infinite streams has no usable hash.
    __hash__ = None

    def __init__(self, coefficients: Iterable[int] = ()):
        self._source: Optional[Iterator[int]] = iter(coefficients)
        self._terms: List[int] = []

    def term(self, index: int) -> Optional[int]:
        """Coefficient at ``index``, or None past the end of the expansion."""
        terms = self._terms
        while len(terms) <= index:
            if self._source is None:
                return None
            try:
                terms.append(next(self._source))
            except StopIteration:
                self._source = None
                return None
        return terms[index]

    def __iter__(self) -> Iterator[int]:
        index = 0
        while True:
            t = self.term(index)
            if t is None:
                return
            yield t
            index += 1

    def take(self, n: int) -> List[int]:
        """First ``n`` coefficients (fewer if the expansion is shorter)."""
        return list(islice(self, n))

    def cursor(self) -> "Cursor":
        return Cursor(self)

    def drop(self, n: int) -> "CF":
        """The tail [an; an+1, ...] as a CF sharing this one's memo."""
        if n == 0:
            return self
        return CF(islice(self, n, None))

    # ── Ordering (see ordering.py) ───────────────────────────────────────

    def _cmp(self, other):
        from .arithmetic import coerce
        from .ordering import compare
        try:
            other = coerce(other)
        except TypeError:
            return NotImplemented
        return compare(self, other)

    def __eq__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r == 0

    def __ne__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r != 0

    def __lt__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r < 0

    def __le__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r <= 0

    def __gt__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r > 0

    def __ge__(self, other):
        r = self._cmp(other)
        return r if r is NotImplemented else r >= 0

    # ── Arithmetic (see arithmetic.py) ───────────────────────────────────

    def _binary(self, other, op, reflected=False):
        from . import arithmetic
        try:
            other = arithmetic.coerce(other)
        except TypeError:
            return NotImplemented
        fn = getattr(arithmetic, op)
        return fn(other, self) if reflected else fn(self, other)

    def __add__(self, other):
        return self._binary(other, "add")

    def __radd__(self, other):
        return self._binary(other, "add", reflected=True)

    def __sub__(self, other):
        return self._binary(other, "sub")

    def __rsub__(self, other):
        return self._binary(other, "sub", reflected=True)

    def __mul__(self, other):
        return self._binary(other, "mul")

    def __rmul__(self, other):
        return self._binary(other, "mul", reflected=True)

    def __truediv__(self, other):
        return self._binary(other, "div")

    def __rtruediv__(self, other):
        return self._binary(other, "div", reflected=True)

    def __neg__(self):
        from .arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __abs__(self):
        from .arithmetic import absolute
        return absolute(self)

    def __int__(self):
        """Truncate toward zero: the leading coefficient."""
        a0 = self.term(0)
        if a0 is None:
            raise OverflowError("cannot convert continued fraction infinity to integer")
        return a0


class Cursor:
    """Read position into a CF's unconsumed suffix."""

    __slots__ = ("cf", "position")

    def __init__(self, cf: CF, position: int = 0):
        self.cf = cf
        self.position = position

    def peek(self) -> Optional[int]:
        return self.cf.term(self.position)

    def advance(self) -> Optional[int]:
        t = self.cf.term(self.position)
        if t is not None:
            self.position += 1
        return t

    def exhausted(self) -> bool:
        return self.peek() is None

    def rest(self) -> CF:
        return self.cf.drop(self.position)


INFINITY = CF(())
