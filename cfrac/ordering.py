"""
Total order over continued fractions.

Successive convergents alternate above and below the value, so two
expansions that agree on a prefix are decided one level deeper with the
sense of "larger" flipped:

    [2; 3] vs [2; 4]  ->  3 < 4 at depth 1, flipped  ->  [2; 3] > [2; 4]

An exhausted stream is an infinite coefficient at that depth.  Before the
walk both sides are split by sign (negatives compare through their
magnitudes) and a trailing coefficient 1 is folded into its predecessor,
so [1; 1] == [2].
"""

from typing import Iterable, Iterator

from .stream import CF


def sign_of(cf: CF) -> int:
    """Sign from the first one or two coefficients; infinity is positive."""
    a0 = cf.term(0)
    if a0 is None:
        return 1
    if a0 != 0:
        return 1 if a0 > 0 else -1
    a1 = cf.term(1)
    if a1 is None:
        return 0
    return 1 if a1 > 0 else -1


def _normalized(coefficients: Iterable[int]) -> Iterator[int]:
    """Fold a final coefficient 1 into the one before it."""
    held = []
    for c in coefficients:
        held.append(c)
        if len(held) > 2:
            yield held.pop(0)
    if len(held) == 2 and held[1] == 1:
        held = [held[0] + 1]
    yield from held


def _alternating(xs: Iterable[int], ys: Iterable[int]) -> int:
    left, right = iter(xs), iter(ys)
    sense = 1
    while True:
        a = next(left, None)
        b = next(right, None)
        if a is None and b is None:
            return 0
        if a is None:
            return sense
        if b is None:
            return -sense
        if a != b:
            return sense if a > b else -sense
        sense = -sense


def compare(x: CF, y: CF) -> int:
    """Return -1, 0 or 1 as x is less than, equal to or greater than y.

    Does not terminate for two equal infinite expansions.
    """
    sx, sy = sign_of(x), sign_of(y)
    if sx != sy:
        return -1 if sx < sy else 1
    if sx < 0:
        return -_alternating(_normalized(abs(c) for c in x),
                             _normalized(abs(c) for c in y))
    return _alternating(_normalized(x), _normalized(y))
