"""
cfrac: exact, lazy arithmetic on continued fractions.

Representation (negatives negate every coefficient, [] is +infinity):
  CF([a0, a1, a2, ...]) = a0 + 1/(a1 + 1/(a2 + ...))

Gosper transformations, pulled one coefficient at a time:
  hom(a, b, c, d, x)            = (a*x + b) / (c*x + d)
  bihom(a, ..., h, x, y)        = (a*x*y + b*x + c*y + d) / (e*x*y + f*x + g*y + h)
"""

from .stream import CF, Cursor, INFINITY
from .ordering import compare, sign_of
from .convergents import convergents
from .homographic import Homographic, hom, quot
from .bihomographic import Bihomographic, bihom
from .arithmetic import (
    from_int,
    from_fraction,
    coerce,
    add,
    sub,
    mul,
    div,
    neg,
    absolute,
    sign,
    reciprocal,
    succ,
    pred,
)
from .cycles import brent
from .constants import (
    E,
    PHI,
    SQRT2,
    CONSTANTS_REGISTRY,
    constant_cf,
    euler,
    from_sympy,
    golden_ratio,
    sqrt2,
)

__version__ = "0.1.0"
__all__ = [
    "CF",
    "Cursor",
    "INFINITY",
    "compare",
    "sign_of",
    "convergents",
    "Homographic",
    "hom",
    "quot",
    "Bihomographic",
    "bihom",
    "from_int",
    "from_fraction",
    "coerce",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "absolute",
    "sign",
    "reciprocal",
    "succ",
    "pred",
    "brent",
    "E",
    "PHI",
    "SQRT2",
    "CONSTANTS_REGISTRY",
    "from_sympy",
    "constant_cf",
    "euler",
    "golden_ratio",
    "sqrt2",
]
