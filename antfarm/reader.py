"""Reading the farm description and checking its overall shape."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from antfarm.model import LemInError

START = "##start"
END = "##end"


def is_comment(line: str) -> bool:
    """True for comments and for commands (lines starting with '#')."""
    return line.startswith("#")


def is_start_end(line: str) -> bool:
    return line in (START, END)


def is_number(text: str) -> bool:
    """True when ``text`` is an optionally signed run of decimal digits."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    return digits.isascii() and digits.isdigit()


def word_count(text: str) -> int:
    """Number of whitespace separated words in ``text``."""
    return len(text.split())


def _legal_terminal(lines: Sequence[str], index: int) -> int:
    """1 when the line after a start/end command looks like a room."""
    if index + 1 >= len(lines):
        return 0
    following = lines[index + 1]
    return int(following.count(" ") == 2 and "-" not in following)


def _is_link_or_room(line: str) -> bool:
    words = word_count(line)
    return (words == 1 and line.count("-") == 1) or (
        words == 3 and line.count(" ") == 2
    )


def check_input(lines: Sequence[str]) -> bool:
    """Run the basic format checks over the raw input lines."""
    if not lines:
        return False
    starts = ends = 0
    ants = 0
    for index, line in enumerate(lines):
        if starts > 1 or ends > 1:
            break
        if not line or line[0] == "L":
            return False
        if ants and line == START:
            starts += _legal_terminal(lines, index)
        elif ants and line == END:
            ends += _legal_terminal(lines, index)
        elif is_number(line):
            ants = int(line)
        elif is_comment(line):
            if not ants:
                return False
        elif ants and not _is_link_or_room(line):
            return False
    return starts == 1 and ends == 1 and bool(ants)


def read_input(stream: TextIO) -> list[str]:
    """Read all lines of ``stream``; raise LemInError if they look malformed."""
    lines = stream.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not check_input(lines):
        raise LemInError("ERROR")
    return lines