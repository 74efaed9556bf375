#!/usr/bin/env python3
"""
Continued-fraction arithmetic verification.

Computes each example identity with the lazy Gosper engines, compares the
first --depth coefficients with sympy's exact expansion of the expected
value, and scores every convergent against it with mpmath.

Usage:
    python cf_verify.py --depth 24
    python cf_verify.py --depth 40 --dps 300 --output verify_report.csv
"""
import argparse
import csv
import math
import sys
import time
from pathlib import Path

from tqdm import tqdm

# Make the examples directory importable when run from a checkout
sys.path.insert(0, str(Path(__file__).parent))
from cfrac.analysis import VerifyConfig, analyze_expansion
from examples.example_identities import get_example_identities


def main():
    parser = argparse.ArgumentParser(description="Continued-fraction arithmetic verification")
    parser.add_argument("--depth", type=int, default=24,
                        help="Coefficients compared per identity")
    parser.add_argument("--dps", type=int, default=200,
                        help="mpmath decimal precision")
    parser.add_argument("--delta-threshold", type=float, default=0.9,
                        help="Lowest acceptable convergent delta")
    parser.add_argument("--only", type=str, default="",
                        help="Comma-separated identity names (default: all)")
    parser.add_argument("--output", type=str, default="",
                        help="Optional CSV report path")
    args = parser.parse_args()

    config = VerifyConfig(depth=args.depth, dps=args.dps,
                          delta_threshold=args.delta_threshold, verbose=False)

    cases = get_example_identities()
    if args.only:
        wanted = set(args.only.split(","))
        cases = [c for c in cases if c['name'] in wanted]

    print(f"Loaded {len(cases)} identities")
    print(f"Depth={config.depth}, dps={config.dps}")
    print()

    rows = []
    n_ok = 0
    t0 = time.time()

    for idx, case in enumerate(tqdm(cases, desc="Identities")):
        res = analyze_expansion(case['build'](), case['sympy_expr'], config)

        rows.append({
            'idx': idx,
            'name': case['name'],
            'sympy_expr': case['sympy_expr'],
            'terms': res['terms'],
            'prefix_match': res['prefix_match'],
            'coefficients_match': res['coefficients_match'],
            'delta_min': res['delta_min'],
            'log_q_final': res['log_q_final'],
            'ok': res['ok'],
        })
        if res['ok']:
            n_ok += 1

        tqdm.write(
            f"  [{idx}] {case['name']:<20} "
            f"prefix={res['prefix_match']}/{res['terms']}  "
            f"δ_min={res['delta_min']:.4f}  "
            f"{'✓' if res['ok'] else '✗'}"
        )
        if not res['coefficients_match']:
            tqdm.write(f"       computed: {res['computed']}")
            tqdm.write(f"       expected: {res['expected']}")

    elapsed = time.time() - t0

    if args.output and rows:
        with open(args.output, 'w', newline='') as f:
            w = csv.DictWriter(f, fieldnames=rows[0].keys())
            w.writeheader()
            w.writerows(rows)
        print(f"\nWrote {len(rows)} rows to {args.output}")

    # Summary
    print(f"\n{'='*60}")
    print(f"SUMMARY")
    print(f"{'='*60}")
    print(f"  Identities:      {len(rows)}")
    print(f"  Passed:          {n_ok}/{len(rows)}")
    print(f"  Failed:          {len(rows) - n_ok}/{len(rows)}")
    print(f"  Elapsed:         {elapsed:.1f}s")

    deltas = [r['delta_min'] for r in rows if math.isfinite(r['delta_min'])]
    if deltas:
        print(f"  Min delta range: [{min(deltas):.4f}, {max(deltas):.4f}]")

    return 0 if n_ok == len(rows) else 1


if __name__ == "__main__":
    sys.exit(main())
