"""Command line front end for a few of the algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from arraykit.arrays import rotate
from arraykit.number_theory import primes_up_to
from arraykit.sorting import quicksort


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arraykit", description="Run array algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    rotate_cmd = commands.add_parser("rotate", help="rotate values right by k steps")
    rotate_cmd.add_argument("-k", type=int, required=True, help="number of steps")
    rotate_cmd.add_argument("values", type=int, nargs="*")

    primes_cmd = commands.add_parser("primes", help="list primes up to n")
    primes_cmd.add_argument("n", type=int)

    sort_cmd = commands.add_parser("sort", help="sort values with quicksort")
    sort_cmd.add_argument("values", type=int, nargs="*")
    return parser


def _join(values: Sequence[int], sep: str = " ") -> str:
    return sep.join(str(value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and print the result of the chosen command."""
    args = _build_parser().parse_args(argv)
    if args.command == "rotate":
        print(f"Rotated array: {_join(rotate(args.values, args.k))}")
    elif args.command == "primes":
        primes = primes_up_to(args.n)
        print(_join(primes, ", "))
        print(f"Count of primes = {len(primes)}")
    else:
        print(_join(quicksort(args.values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())