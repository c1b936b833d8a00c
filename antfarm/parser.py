"""Building an :class:`Antfarm` from the checked input lines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from antfarm.model import Antfarm, LemInError, Options, Room, RoomRole
from antfarm.reader import END, START, is_comment, is_number, is_start_end

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_int(text: str) -> int:
    """Parse a signed decimal that fits a 32-bit int, else raise LemInError."""
    if not is_number(text):
        raise LemInError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise LemInError(f"integer out of range: {text!r}")
    return value


def add_room(farm: Antfarm, line: str, role: RoomRole = RoomRole.COMMON) -> Room | None:
    """Create the room described by ``line`` and append it to the farm.

    Comment lines are ignored and give None. A line that is not exactly
    ``name x y`` with integer coordinates, or that repeats the name or the
    coordinates of a known room, raises LemInError.
    """
    if is_comment(line):
        return None
    words = line.split()
    if len(words) != 3:
        raise LemInError(f"bad room description: {line!r}")
    name, x_text, y_text = words
    room = Room(name, parse_int(x_text), parse_int(y_text), role)
    for other in farm.rooms:
        if (other.x, other.y) == (room.x, room.y) or other.name == room.name:
            raise LemInError(f"repeated room: {line!r}")
    if role is RoomRole.START:
        farm.start = room
        room.population = farm.ant_qty
        room.ant_id = 1
    elif role is RoomRole.END:
        farm.end = room
    farm.rooms.append(room)
    return room


def add_link(farm: Antfarm, line: str) -> None:
    """Connect the two rooms named in ``name1-name2`` in both directions.

    Comments are ignored and links already known are left as they are.
    Raises LemInError when the line is malformed or names an unknown room.
    """
    if is_comment(line):
        return
    if line.count("-") != 1:
        raise LemInError(f"bad link description: {line!r}")
    names = [part for part in line.split("-") if part]
    if not names:
        raise LemInError(f"bad link description: {line!r}")
    if names[0].startswith("#"):
        return
    if len(names) != 2:
        raise LemInError(f"bad link description: {line!r}")
    first = farm.find_room(names[0])
    second = farm.find_room(names[1])
    if first is None or second is None:
        raise LemInError(f"link to an unknown room: {line!r}")
    first.add_link(second)
    second.add_link(first)


def _read_ant_qty(farm: Antfarm, queue: deque[str]) -> None:
    while queue and is_comment(queue[0]):
        queue.popleft()
    if not queue or not is_number(queue[0]):
        raise LemInError("missing number of ants")
    farm.ant_qty = parse_int(queue.popleft())
    if farm.ant_qty <= 0 or not queue:
        raise LemInError("invalid number of ants")


def _in_room_section(line: str) -> bool:
    return is_comment(line) or "-" not in line


def get_antfarm(lines: Iterable[str], options: Options = Options.NONE) -> Antfarm:
    """Build the farm graph from the input lines; raise LemInError if invalid."""
    farm = Antfarm(options=options)
    queue = deque(lines)
    _read_ant_qty(farm, queue)

    seen: set[RoomRole] = set()
    while queue and _in_room_section(queue[0]):
        line = queue.popleft()
        role = RoomRole.COMMON
        if line in (START, END):
            role = RoomRole.START if line == START else RoomRole.END
            if role in seen:
                raise LemInError(f"repeated command: {line!r}")
            seen.add(role)
            if not queue:
                raise LemInError(f"nothing follows {line!r}")
            line = queue.popleft()
        add_room(farm, line, role)

    if farm.start is None or farm.end is None:
        raise LemInError("start or end room is missing")
    if not queue:
        raise LemInError("no links")
    add_link(farm, queue.popleft())
    for line in queue:
        if is_start_end(line):
            raise LemInError(f"command among the links: {line!r}")
        if not is_comment(line):
            add_link(farm, line)
    return farm