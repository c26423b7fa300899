"""Command line: print the moves that sort the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from pushswap.libft.output import putendl_fd
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def run(args: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Write the sorting moves for ``args`` to ``out``, one per line.

    Invalid input writes ``Error`` to ``err``. The exit status is always 0.
    """
    arguments = list(args)
    if not arguments:
        return 0
    try:
        values = parse_arguments(arguments)
        if not values:
            return 0
        moves = solve(values)
    except InputError:
        putendl_fd("Error", err)
        return 0
    for move in moves:
        putendl_fd(move, out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the command."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())