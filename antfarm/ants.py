"""Moving the ants along the chosen paths and printing their moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from antfarm.model import Ant, Antfarm, LemInError, Options, Path, Room


def _output(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def make_ants(farm: Antfarm) -> list[Ant]:
    """Place ``farm.ant_qty`` ants, numbered from 1, in the start room."""
    if farm.start is None:
        raise LemInError("start room is missing")
    farm.ants = [Ant(number, farm.start) for number in range(1, farm.ant_qty + 1)]
    return farm.ants


def _step(current: Room, dest: Room) -> None:
    current.population -= 1
    dest.population += 1
    dest.ant_id = current.ant_id


def _move_all_at_once(farm: Antfarm) -> str:
    assert farm.start is not None and farm.end is not None
    end = farm.end
    line = " ".join(f"L{number}-{end.name}" for number in range(1, farm.ant_qty + 1))
    end.population += farm.ant_qty
    farm.start.population -= farm.ant_qty
    for ant in farm.ants:
        ant.at_room = end
    return line


def _move_on_the_way(ants: list[Ant]) -> tuple[str, int]:
    """Advance the ants that left the start; return the text and the first ant still at start."""
    parts: list[str] = []
    for index, ant in enumerate(ants):
        current = ant.at_room
        if current.is_start():
            return "".join(parts), index
        following = current.next
        if following is None:
            continue
        _step(current, following)
        separator = "" if index == len(ants) - 1 else " "
        parts.append(f"L{current.ant_id}-{following.name}{separator}")
        current.ant_id = 0
        ant.at_room = following
    return "".join(parts), len(ants)


def _move_from_start(ants: list[Ant], start: Room, paths: list[Path]) -> str:
    """Send one waiting ant onto each path that still expects ants."""
    parts: list[str] = []
    for (position, path), ant in zip(enumerate(paths), ants):
        if path.pending <= 0:
            break
        dest = path.room
        _step(start, dest)
        start.ant_id += 1
        last = position == len(paths) - 1 or paths[position + 1].pending == 0
        parts.append(f"L{dest.ant_id}-{dest.name}{'' if last else ' '}")
        ant.at_room = dest
        path.pending -= 1
    return "".join(parts)


def ant_moves(farm: Antfarm, paths: list[Path]) -> Iterator[str]:
    """Yield one line of moves per round until every ant has reached the end.

    The paths must be ordered shortest first; their ``pending`` counts are
    consumed as ants are dispatched.
    """
    if farm.start is None or farm.end is None:
        raise LemInError("start or end room is missing")
    if not farm.ants:
        make_ants(farm)
    start, end = farm.start, farm.end
    start.ant_id = 1
    start.population = farm.ant_qty
    if len(paths) == 1 and paths[0].len == 1:
        yield _move_all_at_once(farm)
        return
    while end.population < farm.ant_qty:
        moved, first_waiting = _move_on_the_way(farm.ants)
        dispatched = _move_from_start(farm.ants[first_waiting:], start, paths)
        line = moved + dispatched
        if not line:
            raise LemInError("ants cannot reach the end room")
        yield line


def print_antfarm(lines: Iterable[str], out: TextIO | None = None) -> None:
    """Echo the farm description, one input line per output line."""
    stream = _output(out)
    for line in lines:
        stream.write(f"{line}\n")


def get_ant(
    farm: Antfarm, lines: Iterable[str], paths: list[Path], out: TextIO | None = None
) -> None:
    """Create the ants, echo the map unless an option is set, then print every round."""
    stream = _output(out)
    make_ants(farm)
    if not farm.options:
        print_antfarm(lines, stream)
    if not farm.options & Options.ONLY_SOLUTION:
        stream.write("\n")
    for line in ant_moves(farm, paths):
        stream.write(f"{line}\n")