"""Command-line interface.

Usage::

    superperm create 4
    superperm create 5 --strategy naive
    superperm check 3 1 2 3 1 2 1 3 2 1
    superperm bench 5 6 7 --repeats 3

``check`` exits with status 1 when the sequence is not a
superpermutation.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ._strategies import available_strategies
from .benchmark import benchmark_strategies
from .core import check_superperm, create_superperm


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="superperm",
        description="Construct and verify superpermutations.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    strategies = available_strategies()
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Build a superpermutation of 1..N.")
    create.add_argument("n", type=int, help="Number of tokens.")
    create.add_argument("--strategy", choices=strategies, default=None)

    check = sub.add_parser("check", help="Verify a token sequence.")
    check.add_argument("n", type=int, help="Number of tokens.")
    check.add_argument("tokens", type=int, nargs="*", help="Sequence to verify.")
    check.add_argument("--strategy", choices=strategies, default=None)

    bench = sub.add_parser("bench", help="Time every strategy.")
    bench.add_argument("n", type=int, nargs="+", help="Token counts to time.")
    bench.add_argument("--repeats", type=int, default=3)
    bench.add_argument(
        "--strategy",
        dest="strategies",
        action="append",
        choices=strategies,
        help="Strategy to time (repeatable; default: all).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.command == "create":
            superperm = create_superperm(args.n, strategy=args.strategy)
            print(" ".join(str(token) for token in superperm))
            print(f"length: {len(superperm)}")
            return 0

        if args.command == "check":
            valid = check_superperm(args.tokens, args.n, strategy=args.strategy)
            print("valid" if valid else "invalid")
            return 0 if valid else 1

        results = benchmark_strategies(
            args.n, strategies=args.strategies, repeats=args.repeats
        )
        print(results.to_string(index=False))
        return 0
    except ValueError as exc:
        print(f"superperm: error: {exc}", file=sys.stderr)
        return 2
