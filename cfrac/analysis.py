"""
Analysis utilities for continued-fraction results.

Checks a lazily computed CF against an exact symbolic value: coefficient
prefixes are compared with sympy's expansion, and every convergent p/q is
scored with the irrationality-measure style delta

    delta = -(1 + log|p/q - L| / log|q|)

computed with mpmath.  Convergents of a correct expansion satisfy
|p/q - L| < 1/q^2, so their delta stays above 1 once |q| > 1.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from itertools import islice
from typing import Any, Dict, Optional

import numpy as np

from .constants import from_sympy, sympify_constant
from .convergents import convergents
from .stream import CF


@dataclass
class VerifyConfig:
    """Configuration for expansion checks."""
    depth: int = 24                 # Coefficients / convergents examined
    dps: int = 200                  # mpmath decimal precision
    delta_threshold: float = 0.9    # Lowest acceptable convergent delta
    verbose: bool = True            # Print a report


def target_value(expr, dps: int = 200):
    """Evaluate a sympy expression (or registry string) to an mpmath mpf."""
    import sympy as sp
    import mpmath as mp
    mp.mp.dps = dps
    return mp.mpf(str(sp.N(sympify_constant(expr), dps + 10)))


def compute_delta(convergent: Fraction, constant_mp, dps: int = 200) -> float:
    """Delta of one convergent p/q against ``constant_mp``.

    An exact hit scores +inf.  Integer convergents (q == 1) have log q == 0
    and score -inf.
    """
    import mpmath as mp
    mp.mp.dps = dps

    q = convergent.denominator
    err = abs(mp.mpf(convergent.numerator) / q - constant_mp)
    if not err:
        return float('inf')
    if q == 1:
        return float('-inf')
    return float(-(1 + mp.log(err) / mp.log(q)))


def convergence_profile(cf: CF, constant_mp, depth: int = 24,
                        dps: int = 200) -> Dict[str, np.ndarray]:
    """Score the first ``depth`` convergents of ``cf`` against a constant.

    Returns:
        dict of equal-length arrays: 'index', 'p', 'q' (object dtype, exact),
        'log_q' and 'delta' (float64)
    """
    if depth <= 0:
        raise ValueError(f"depth must be positive, got {depth}")

    index, ps, qs, log_qs, deltas = [], [], [], [], []
    for n, conv in enumerate(islice(convergents(cf), depth)):
        p, q = conv.numerator, conv.denominator
        index.append(n)
        ps.append(p)
        qs.append(q)
        log_qs.append(math.log(q))
        deltas.append(compute_delta(conv, constant_mp, dps))

    return {
        'index': np.array(index, dtype=np.int64),
        'p': np.array(ps, dtype=object),
        'q': np.array(qs, dtype=object),
        'log_q': np.array(log_qs, dtype=np.float64),
        'delta': np.array(deltas, dtype=np.float64),
    }


def common_prefix_length(x: CF, y: CF, limit: int) -> int:
    """Number of leading coefficients x and y share, at most ``limit``."""
    n = 0
    for a, b in zip(islice(x, limit), islice(y, limit)):
        if a != b:
            break
        n += 1
    return n


def analyze_expansion(cf: CF, sympy_expr, config: Optional[VerifyConfig] = None) -> Dict[str, Any]:
    """
    Check a computed CF against the exact value it should represent.

    Args:
        cf: Continued fraction to check
        sympy_expr: Expected value (sympy expression or registry string)
        config: Check configuration

    Returns:
        Dictionary with analysis results
    """
    config = config or VerifyConfig()
    depth = config.depth

    computed = cf.take(depth)
    expected = from_sympy(sympy_expr).take(depth)
    prefix = common_prefix_length(CF(computed), CF(expected), depth)

    target = target_value(sympy_expr, config.dps)
    profile = convergence_profile(CF(computed), target, depth, config.dps)

    # Skip |q| == 1 convergents, whose delta is undefined
    scored = profile['delta'][profile['log_q'] > 0]
    delta_min = float(scored.min()) if scored.size else float('inf')

    results = {
        'depth': depth,
        'terms': len(computed),
        'prefix_match': prefix,
        'coefficients_match': computed == expected,
        'delta_min': delta_min,
        'delta_final': float(profile['delta'][-1]) if len(computed) else float('nan'),
        'log_q_final': float(profile['log_q'][-1]) if len(computed) else float('nan'),
        'computed': computed,
        'expected': expected,
    }
    results['ok'] = results['coefficients_match'] and delta_min >= config.delta_threshold

    if config.verbose:
        print(f"\n{'='*60}")
        print(f"Expansion Analysis")
        print(f"{'='*60}")
        print(f"Target:              {sympy_expr}")
        print(f"Coefficients read:   {results['terms']}/{depth}")
        print(f"Matching prefix:     {prefix}")
        print(f"Coefficients match:  {'✓' if results['coefficients_match'] else '✗'}")
        print(f"Min delta (|q|>1):   {delta_min:.4f}")
        print(f"Final log(q):        {results['log_q_final']:.2f}")
        print(f"{'='*60}\n")

    return results
