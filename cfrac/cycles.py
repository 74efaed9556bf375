"""
Repetition detection over lazy sequences (Brent's teleporting turtle).

Not used by the arithmetic engines.
"""

from typing import Any, Iterable

_MISSING = object()


def brent(sequence: Iterable[Any]) -> bool:
    """True as soon as an element equals the current checkpoint.

    The checkpoint teleports to the current element each time the step
    counter reaches a power of two.  Terminates on finite input and on
    eventually periodic input; loops forever on infinite aperiodic input.
    """
    it = iter(sequence)
    turtle = next(it, _MISSING)
    if turtle is _MISSING:
        return False
    steps, power = 1, 2
    for hare in it:
        if hare == turtle:
            return True
        if steps == power:
            turtle = hare
            steps, power = 1, power * 2
        else:
            steps += 1
    return False
