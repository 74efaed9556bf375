"""
Named continued-fraction constants and a symbolic constants bank.

Native expansions (infinite generators, memoised by CF):
  - E:     [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]
  - PHI:   [1; 1, 1, 1, ...]          golden ratio
  - SQRT2: [1; 2, 2, 2, ...]

The module-level E, PHI and SQRT2 are shared, and every coefficient read from
them stays cached for the life of the process. They suit short prefixes;
long-running or deep computations should take a fresh stream from euler(),
golden_ratio(), sqrt2() or constant_cf().

Registry entries have:
  - name: short identifier, usable inside expression strings ('e + phi')
  - sympy_expr: symbolic expression for exact expansion / evaluation
  - description: human-readable name
  - cf: factory for the native expansion, or None (expanded through sympy)
"""

from itertools import repeat
from typing import Any, Callable, Dict, Iterator, List, Optional

from .stream import CF


def _e_coefficients() -> Iterator[int]:
    yield 2
    n = 2
    while True:
        yield 1
        yield n
        yield 1
        n += 2


def _sqrt2_coefficients() -> Iterator[int]:
    yield 1
    yield from repeat(2)


def euler() -> CF:
    return CF(_e_coefficients())


def golden_ratio() -> CF:
    return CF(repeat(1))


def sqrt2() -> CF:
    return CF(_sqrt2_coefficients())


E = euler()
PHI = golden_ratio()
SQRT2 = sqrt2()


CONSTANTS_REGISTRY: List[Dict[str, Any]] = [
    # Native expansions
    {"name": "e",       "sympy_expr": "E",             "description": "Euler's number e",  "cf": euler},
    {"name": "phi",     "sympy_expr": "(1+sqrt(5))/2", "description": "Golden ratio φ",    "cf": golden_ratio},
    {"name": "sqrt2",   "sympy_expr": "sqrt(2)",       "description": "√2",                "cf": sqrt2},

    # Expanded through sympy
    {"name": "pi",      "sympy_expr": "pi",            "description": "π",                 "cf": None},
    {"name": "sqrt3",   "sympy_expr": "sqrt(3)",       "description": "√3",                "cf": None},
    {"name": "ln2",     "sympy_expr": "log(2)",        "description": "ln(2)",             "cf": None},
]


def get_constant(name: str) -> Dict[str, Any]:
    for entry in CONSTANTS_REGISTRY:
        if entry["name"] == name:
            return entry
    raise ValueError(f"Unknown constant: {name}")


def _namespace() -> Dict[str, Any]:
    """sympify locals: the base functions plus every registry name."""
    import sympy as sp
    base = {"pi": sp.pi, "E": sp.E, "log": sp.log, "sqrt": sp.sqrt}
    names = dict(base)
    for entry in CONSTANTS_REGISTRY:
        names[entry["name"]] = sp.sympify(entry["sympy_expr"], locals=base)
    return names


def sympify_constant(expr) -> Any:
    """Parse an expression string into sympy; registry names may appear in it.

    'e + phi' and 'E + (1+sqrt(5))/2' give the same expression.
    """
    import sympy as sp
    if isinstance(expr, str):
        return sp.sympify(expr, locals=_namespace())
    return sp.sympify(expr)


def _sympy_coefficients(expr) -> Iterator[int]:
    from sympy.ntheory.continued_fraction import continued_fraction_iterator

    if expr.is_negative:
        for c in continued_fraction_iterator(-expr):
            yield -int(c)
    else:
        for c in continued_fraction_iterator(expr):
            yield int(c)


def from_sympy(expr) -> CF:
    """Lazy CF of an exact real sympy expression (or expression string).

    sympy expands with floor; negative values are expanded through their
    magnitude so the result follows the negated-coefficient convention.
    """
    return CF(_sympy_coefficients(sympify_constant(expr)))


def constant_cf(name: str) -> CF:
    """Fresh CF for a registry constant, native if available."""
    entry = get_constant(name)
    factory: Optional[Callable[[], CF]] = entry["cf"]
    if factory is not None:
        return factory()
    return from_sympy(entry["sympy_expr"])
