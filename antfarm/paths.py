"""Choosing the set of paths that brings every ant to the end room soonest."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterator
from typing import TextIO

from antfarm.model import LONG_MAX, Antfarm, LemInError, Options, Path, Room
from antfarm.routing import bfs_route, set_links_usage


def _output(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def start_connected_to_end(start: Room, end: Room) -> bool:
    """True when ``end`` is a direct neighbour of ``start``."""
    return start.link_to(end) is not None


def init_unique_path(farm: Antfarm, out: TextIO | None = None) -> list[Path]:
    """Build the single path used when start and end are directly linked."""
    assert farm.end is not None
    path = Path(id=1, room=farm.end, len=1, pending=farm.ant_qty, complete=True)
    farm.rounds = 1
    if farm.options & Options.SHOW_PATH:
        stream = _output(out)
        stream.write("Initialized 1 path:\n")
        stream.write("# 1: End\n")
    return [path]


def _follow_path(path: Path) -> None:
    """Walk the forward links from the path's first room, recording the route."""
    room = path.room
    while True:
        if room.is_end():
            path.complete = True
        link = next((link for link in room.links if link.is_forward()), None)
        if link is None:
            return
        path.len += 1
        room.new_next = link.room
        room.new_path_id = path.id
        room = link.room


def finish_path(paths: list[Path]) -> list[Path]:
    """Trace every path through the used links; return them longest first."""
    for path in paths:
        _follow_path(path)
    return sorted(paths, key=lambda path: path.len, reverse=True)


def select_paths(paths: list[Path], ant_qty: int) -> list[Path]:
    """Drop the longest paths while the shorter ones can absorb ``ant_qty`` ants.

    ``paths`` must be ordered longest first; a tail of it is returned.
    """
    while len(paths) > 1:
        head_len = paths[0].len
        capacity = sum(head_len - path.len + 1 for path in paths[1:])
        if capacity < ant_qty:
            break
        paths = paths[1:]
    return paths


def solution_rounds(
    farm: Antfarm, paths: list[Path], ant_qty: int, out: TextIO | None = None
) -> int:
    """Share the ants among ``paths`` and return how many rounds they need.

    Each path's ``pending`` count is increased by the ants it receives.
    """
    rounds = 0
    used = paths
    while ant_qty > 0:
        used = select_paths(used, ant_qty)
        for path in used:
            path.pending += 1
        ant_qty -= len(used)
        rounds += 1
    rounds += used[0].len - 1
    if farm.options & Options.SHOW_PATH:
        _output(out).write(f"This solution would take {rounds} rounds\n")
    return rounds


def format_steps(room: Room) -> str:
    """One line listing a committed path, starting at ``room``."""
    names = []
    current: Room | None = room
    while current is not None:
        names.append(current.name)
        current = current.next
    return f"# {room.path_id:2d}: {'-'.join(names)}\n"


def commit_paths(
    farm: Antfarm, paths: list[Path], rounds: int, out: TextIO | None = None
) -> list[Path]:
    """Adopt the traced paths as the current solution.

    Rooms take their new successor and path id and lose their search state.
    Returns the paths shortest first and records ``rounds`` on the farm.
    """
    for room in farm.rooms:
        room.next = room.new_next
        room.path_id = room.new_path_id
        room.reset_search()
        room.dead_end = False
        room.new_next = None
        room.new_path_id = 0
    committed = list(reversed(paths))
    if farm.options & Options.SHOW_PATH:
        stream = _output(out)
        for path in committed:
            stream.write(format_steps(path.room))
    farm.rounds = rounds
    return committed


def _init_paths(farm: Antfarm, ids: Iterator[int], out: TextIO | None) -> list[Path]:
    assert farm.start is not None and farm.end is not None
    set_links_usage(farm.end)
    paths: list[Path] = []
    for link in farm.start.links:
        if link.is_forward():
            paths.insert(0, Path(id=next(ids), room=link.room))
    if farm.options & Options.SHOW_PATH:
        count = len(paths)
        suffix = "s:\n" if count > 1 else ":\n"
        _output(out).write(f"Initialized {count} path{suffix}")
    return finish_path(paths)


def _find_paths(farm: Antfarm, out: TextIO | None) -> list[Path]:
    assert farm.start is not None and farm.end is not None
    ids = itertools.count(1)
    paths: list[Path] = []
    rounds = 0
    while bfs_route(farm.start, farm.end)[0]:
        candidate = _init_paths(farm, ids, out)
        rounds = solution_rounds(farm, candidate, farm.ant_qty, out)
        if rounds >= farm.rounds or rounds == 0:
            break
        paths = commit_paths(farm, candidate, rounds, out)
    if farm.rounds == LONG_MAX or rounds == 0:
        raise LemInError("no path from start to end")
    return paths


def get_path(farm: Antfarm, out: TextIO | None = None) -> list[Path]:
    """Find the paths the ants will follow, shortest first.

    Raises LemInError when the end room cannot be reached from the start.
    """
    if farm.start is None or farm.end is None:
        raise LemInError("start or end room is missing")
    if start_connected_to_end(farm.start, farm.end):
        return init_unique_path(farm, out)
    return _find_paths(farm, out)