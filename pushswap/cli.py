"""Command line entry point: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .sorting import solve


def run(args: Iterable[str]) -> list[str]:
    """The instructions that sort the numbers named by ``args``.

    Raises InputError when the arguments are not distinct 32-bit integers.
    Blank input, and input that is already sorted, give no instructions.
    """
    return solve(parse_arguments(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; report bad input as ``Error`` on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        operations = run(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    for operation in operations:
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())