"""Polynomial reconstruction and share-consistency checking: entry point.

Two front ends over the same exact-arithmetic core:
  solve     print the coefficients of the polynomial through the first k points
  check     print the keys of points that do not lie on that polynomial
plus `generate`, which writes a (optionally tampered) sample dataset.
"""

import argparse
import json
import logging
import sys

from core import rng
from core.errors import ReconstructionError
from core.polynomial import Polynomial
from core.reconstruction import find_inconsistent, reconstruct
from dataset import DatasetError, load_dataset
from logging_config import setup_logging
from sim.generator import generate_dataset
from sim.metrics import SolveMetrics

logger = logging.getLogger(__name__)

CONSISTENT_MESSAGE = ("No wrong data points. All provided points are consistent "
                      "with the polynomial built from the first k points.")


def print_metrics(metrics: SolveMetrics):
    stats = metrics.summary()
    print(f"\n--- Metrics ---")
    print(f"  Row swaps: {stats['row_swaps']}")
    print(f"  Row eliminations: {stats['row_eliminations']}")
    if stats["points_checked"]:
        print(f"  Points checked: {stats['points_checked']}")
    print(f"  Time: {stats['elapsed']:.3f}s")


def run_solve(args) -> int:
    data = load_dataset(args.input)
    metrics = SolveMetrics()
    poly = reconstruct(data.points, data.k, metrics)
    k = data.k

    print(f"Coefficients (a0 ... a{k - 1}):")
    print(" ".join(str(c) for c in poly.coeffs))
    print("\nPolynomial:")
    print(poly)
    if args.stats:
        print_metrics(metrics)
    return 0


def run_check(args) -> int:
    data = load_dataset(args.input)
    metrics = SolveMetrics()
    _, wrong = find_inconsistent(data.points, data.k, metrics)

    if not wrong:
        print(CONSISTENT_MESSAGE)
    else:
        print("Wrong Data Set Points (x values): "
              + ", ".join(str(x) for x in sorted(wrong)))
    if args.stats:
        print_metrics(metrics)
    return 0


def run_generate(args) -> int:
    if args.k < 1:
        raise ValueError(f"k must be > 0, got {args.k}")
    if args.seed is not None:
        rng.set_seed(args.seed)
    if args.coeffs:
        poly = Polynomial(args.coeffs)
        if poly.degree + 1 != args.k:
            raise ValueError(f"--coeffs gives {poly.degree + 1} coefficients, expected k={args.k}")
    else:
        poly = Polynomial.random(degree=args.k - 1, constant=args.secret)
    xs = args.xs or list(range(1, args.k + 1))
    doc = generate_dataset(poly, xs, base=args.base, tampered=args.tamper)
    json.dump(doc, sys.stdout, indent=2)
    print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Exact polynomial reconstruction from base-encoded points")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="shorthand for --log-level DEBUG")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_solve = sub.add_parser("solve", help="Print polynomial coefficients")
    p_solve.add_argument("input", nargs="?", default="-")
    p_solve.add_argument("--stats", action="store_true")
    p_solve.set_defaults(func=run_solve)

    p_check = sub.add_parser("check", help="Print points inconsistent with the polynomial")
    p_check.add_argument("input", nargs="?", default="-")
    p_check.add_argument("--stats", action="store_true")
    p_check.set_defaults(func=run_check)

    p_gen = sub.add_parser("generate", help="Write a sample dataset to stdout")
    p_gen.add_argument("--k", type=int, required=True)
    p_gen.add_argument("--xs", type=int, nargs="+")
    p_gen.add_argument("--coeffs", type=int, nargs="+")
    p_gen.add_argument("--secret", type=int, default=0)
    p_gen.add_argument("--base", type=int, default=10)
    p_gen.add_argument("--tamper", type=int, nargs="*", default=[])
    p_gen.add_argument("--seed", type=int, default=None)
    p_gen.set_defaults(func=run_generate)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    setup_logging(level, args.log_file)

    try:
        return args.func(args)
    except (ReconstructionError, DatasetError, ValueError, KeyError, OSError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
