import pytest

from antfarm.model import (
    LONG_MAX,
    Ant,
    Antfarm,
    LemInError,
    Link,
    Options,
    Path,
    Room,
    RoomRole,
)


def test_add_link_once_only():
    a, b = Room("a"), Room("b")
    assert a.add_link(b) is True
    assert a.add_link(b) is False
    assert len(a.links) == 1
    assert a.link_to(b).room is b
    assert a.link_to(b).usage == 0


def test_link_to_missing_returns_none():
    a, b = Room("a"), Room("b")
    assert a.link_to(b) is None


def test_link_is_forward_only_for_minus_one():
    room = Room("x")
    assert Link(room, usage=-1).is_forward() is True
    assert Link(room, usage=1).is_forward() is False
    assert Link(room).is_forward() is False


def test_roles():
    start = Room("s", role=RoomRole.START)
    end = Room("e", role=RoomRole.END)
    common = Room("c")
    assert start.is_start() and not start.is_end()
    assert end.is_end() and not end.is_start()
    assert not common.is_start() and not common.is_end()


def test_path_membership():
    a = Room("a", path_id=3)
    b = Room("b", path_id=3)
    c = Room("c")
    assert a.in_path()
    assert not c.in_path()
    assert a.same_path(b)
    assert not a.same_path(c)


def test_reset_search_clears_state():
    a, b = Room("a"), Room("b")
    b.visited = True
    b.deviation = True
    b.previous = a
    b.dead_end = True
    b.reset_search()
    assert (b.visited, b.deviation, b.previous) == (False, False, None)
    assert b.dead_end is True


def test_find_room():
    farm = Antfarm(ant_qty=2)
    a, b = Room("a", 1, 2), Room("b", 3, 4)
    farm.rooms.extend([a, b])
    assert farm.find_room("b") is b
    assert farm.find_room("zz") is None


def test_antfarm_defaults():
    farm = Antfarm()
    assert farm.rounds == LONG_MAX
    assert farm.options == Options.NONE
    assert farm.rooms == [] and farm.ants == []


def test_options_combine():
    farm = Antfarm(options=Options.SHOW_PATH | Options.ONLY_SOLUTION)
    assert farm.options & Options.SHOW_PATH
    assert farm.options & Options.ONLY_SOLUTION
    assert Options(6) == farm.options
    assert Options(4) is Options.SHOW_PATH
    assert Options(2) is Options.ONLY_SOLUTION


def test_path_and_ant_defaults():
    room = Room("r")
    path = Path(id=1, room=room)
    assert (path.len, path.pending, path.complete) == (1, 0, False)
    ant = Ant(1, room)
    assert ant.at_room is room


def test_error_carries_message():
    error = LemInError("ERROR")
    assert str(error) == "ERROR"
    with pytest.raises(LemInError, match="^ERROR$"):
        raise error