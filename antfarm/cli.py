"""Command line entry point: read a farm on standard input and print the moves."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from antfarm.ants import get_ant
from antfarm.model import LemInError, Options
from antfarm.parser import get_antfarm
from antfarm.paths import get_path
from antfarm.reader import read_input

USAGE = "Usage: lem-in [--paths] [--solution] < antfarm_map"

_SWITCHES = {
    "--paths": Options.SHOW_PATH,
    "--solution": Options.ONLY_SOLUTION,
}


def parse_options(args: Sequence[str]) -> Options:
    """Turn the command line switches into Options.

    Unknown arguments are ignored, but raise ValueError when arguments
    are given and none of them is a known switch.
    """
    options = Options.NONE
    for arg in args:
        options |= _SWITCHES.get(arg, Options.NONE)
    if args and not options:
        raise ValueError(USAGE)
    return options


def run(stream: TextIO, options: Options, out: TextIO, err: TextIO) -> int:
    """Solve the farm read from ``stream``; return 0 on success, -1 on error."""
    try:
        lines = read_input(stream)
        farm = get_antfarm(lines, options)
        paths = get_path(farm, out)
        get_ant(farm, lines, paths, out)
    except LemInError:
        err.write("ERROR\n")
        return -1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except ValueError as error:
        print(error)
        return 0
    return run(sys.stdin, options, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())