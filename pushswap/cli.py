"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sort import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, print one operation per line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())