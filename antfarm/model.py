"""Core data structures describing an ant farm: rooms, links, paths and ants."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

LONG_MAX = 2**63 - 1


class LemInError(Exception):
    """Raised when the ant farm description or its solution is invalid."""


class Options(enum.IntFlag):
    """Command line switches that alter what is printed."""

    NONE = 0
    ONLY_SOLUTION = 2
    SHOW_PATH = 4


class RoomRole(enum.IntEnum):
    """Role of a room in the farm."""

    COMMON = -1
    START = 0
    END = 1


@dataclass(eq=False)
class Link:
    """One direction of an edge between two rooms.

    ``usage`` is -1 when the edge is walked in this direction by a path,
    1 when it is walked in the opposite direction, and 0 when unused.
    """

    room: Room
    usage: int = 0

    def is_forward(self) -> bool:
        """True when a path goes through this link in its direction."""
        return self.usage == -1


@dataclass(eq=False)
class Room:
    """A room of the farm together with its search and path state."""

    name: str
    x: int = 0
    y: int = 0
    role: RoomRole = RoomRole.COMMON
    path_id: int = 0
    new_path_id: int = 0
    ant_id: int = 0
    population: int = 0
    deviation: bool = False
    visited: bool = False
    dead_end: bool = False
    next: Room | None = None
    new_next: Room | None = None
    previous: Room | None = None
    links: list[Link] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Room({self.name!r}, {self.x}, {self.y}, {self.role.name})"

    def is_start(self) -> bool:
        return self.role is RoomRole.START

    def is_end(self) -> bool:
        return self.role is RoomRole.END

    def in_path(self) -> bool:
        """True when the room already belongs to a path."""
        return self.path_id != 0

    def same_path(self, other: Room) -> bool:
        return self.path_id == other.path_id

    def link_to(self, other: Room) -> Link | None:
        """Return the link from this room to ``other``, if there is one."""
        return next((link for link in self.links if link.room is other), None)

    def add_link(self, other: Room) -> bool:
        """Add a link towards ``other``; False if it was already present."""
        if self.link_to(other) is not None:
            return False
        self.links.append(Link(other))
        return True

    def reset_search(self) -> None:
        """Forget the state left by a breadth-first search."""
        self.visited = False
        self.deviation = False
        self.previous = None


@dataclass(eq=False)
class Path:
    """A path from the start room; ``room`` is its first room after start."""

    id: int
    room: Room
    len: int = 1
    pending: int = 0
    complete: bool = False


@dataclass(eq=False)
class Ant:
    id: int
    at_room: Room


@dataclass(eq=False)
class Antfarm:
    """The whole graph plus global solving state."""

    ant_qty: int = 0
    rounds: int = LONG_MAX
    options: Options = Options.NONE
    rooms: list[Room] = field(default_factory=list)
    start: Room | None = None
    end: Room | None = None
    ants: list[Ant] = field(default_factory=list)

    def find_room(self, name: str) -> Room | None:
        return next((room for room in self.rooms if room.name == name), None)