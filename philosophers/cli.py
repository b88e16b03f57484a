"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys

from .parsing import ArgumentError, check_args, parse_settings
from .simulation import run_simulation
from .table import build_table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation from arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print("ERROR: INVALID ARGUMENTS", end="")
        return 1
    try:
        check_args(args)
    except ArgumentError as error:
        print(error)
        print("ERROR: INVALID INPUT", end="")
        return 1
    try:
        table = build_table(parse_settings(args))
    except ArgumentError as error:
        print(error)
        print("ERROR: PROBLEM IN TABLE", end="")
        return 1
    run_simulation(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())