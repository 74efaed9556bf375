"""
Example arithmetic identities for checking the cfrac engines.

Each case pairs a lazily computed CF with the exact sympy expression it
must equal.  Operands come from the constants registry, and the expected
expressions name the same registry constants.  Cases whose exact result is
rational while the operands are irrational (sqrt2 * sqrt2) are left out: the
bihomographic engine never narrows their bound down to a single integer.
"""

from fractions import Fraction
from typing import List, Dict


def get_example_identities() -> List[Dict]:
    """
    Get a list of example identities.

    Each identity is defined as a dictionary with:
    - 'name': Human-readable name
    - 'build': Zero-argument callable returning the computed CF
    - 'sympy_expr': Exact value of the result
    """
    from cfrac.arithmetic import from_fraction
    from cfrac.constants import constant_cf

    cases = []

    cases.append({
        'name': 'E_plus_Phi',
        'build': lambda: constant_cf('e') + constant_cf('phi'),
        'sympy_expr': 'e + phi',
    })

    cases.append({
        'name': 'E_minus_Phi',
        'build': lambda: constant_cf('e') - constant_cf('phi'),
        'sympy_expr': 'e - phi',
    })

    cases.append({
        'name': 'E_times_Phi',
        'build': lambda: constant_cf('e') * constant_cf('phi'),
        'sympy_expr': 'e * phi',
    })

    cases.append({
        'name': 'Phi_over_E',
        'build': lambda: constant_cf('phi') / constant_cf('e'),
        'sympy_expr': 'phi / e',
    })

    # phi^2 = phi + 1
    cases.append({
        'name': 'Phi_squared',
        'build': lambda: constant_cf('phi') * constant_cf('phi'),
        'sympy_expr': 'phi + 1',
    })

    cases.append({
        'name': 'Sqrt2_plus_half',
        'build': lambda: constant_cf('sqrt2') + Fraction(1, 2),
        'sympy_expr': 'sqrt2 + 1/2',
    })

    # sqrt(3) * sqrt(2) = sqrt(6) = [2; 2, 4, 2, 4, ...]
    cases.append({
        'name': 'Sqrt3_times_Sqrt2',
        'build': lambda: constant_cf('sqrt3') * constant_cf('sqrt2'),
        'sympy_expr': 'sqrt3 * sqrt2',
    })

    cases.append({
        'name': 'One_minus_E',
        'build': lambda: 1 - constant_cf('e'),
        'sympy_expr': '1 - e',
    })

    cases.append({
        'name': 'Pi_minus_3',
        'build': lambda: constant_cf('pi') - 3,
        'sympy_expr': 'pi - 3',
    })

    cases.append({
        'name': 'Ln2_plus_half',
        'build': lambda: constant_cf('ln2') + Fraction(1, 2),
        'sympy_expr': 'ln2 + 1/2',
    })

    cases.append({
        'name': 'Rational_quotient',
        'build': lambda: from_fraction(355, 113) / Fraction(22, 7),
        'sympy_expr': '(355/113) / (22/7)',
    })

    return cases


if __name__ == '__main__':
    from cfrac.analysis import VerifyConfig, analyze_expansion

    print("cfrac example identities")
    print("=" * 40)

    cases = get_example_identities()
    print(f"\nAvailable identities: {len(cases)}")
    for i, case in enumerate(cases):
        print(f"  {i}: {case['name']} = {case['sympy_expr']}")

    config = VerifyConfig(depth=12)
    for case in cases[:2]:
        print(f"\nChecking: {case['name']}")
        analyze_expansion(case['build'](), case['sympy_expr'], config)
