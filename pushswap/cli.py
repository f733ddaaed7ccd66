"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .algorithm import push_swap
from .parsing import InputError, parse_arguments, split_words


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, print one operation per line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        args = split_words(args[0], " ")
        if not args:
            return 1
    try:
        values = parse_arguments(args)
    except InputError:
        print("Error")
        return 1
    for op in push_swap(values):
        print(op)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())