"""Command line: print the instructions that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_arguments
from .sorter import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (default: the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except InputError as error:
        sys.stderr.write("Error\n")
        return error.exit_status
    for instruction in push_swap(values):
        sys.stdout.write(f"{instruction}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())