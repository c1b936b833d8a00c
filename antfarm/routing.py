"""Breadth-first search for augmenting routes between the start and end rooms."""

from __future__ import annotations

from antfarm.model import Link, Room


def _room_viable(link: Link, adj: Room) -> bool:
    """An adjacent room may be queued if unvisited, not start, and not on a used link."""
    return not adj.visited and not link.is_forward() and not adj.is_start()


def _pending_detour(current: Room, usage: int) -> bool:
    """A room reached by a detour must leave along its own path."""
    return current.deviation and usage == 0


def _route_viable(current: Room, link: Link, end: Room) -> bool:
    adj = link.room
    if _room_viable(link, adj) and adj_part_of_path(current, adj):
        return detour_src_of_adj(adj, end)
    return _room_viable(link, adj) and not _pending_detour(current, link.usage)


def _add_to_route(queue: list[Room], adj: Room, current: Room) -> None:
    queue.append(adj)
    adj.previous = current
    adj.visited = True


def explore_route(queue: list[Room], current: Room, end: Room) -> None:
    """Queue every reachable neighbour of ``current``; stop once ``end`` is queued."""
    for link in current.links:
        target = link.room
        if not _route_viable(current, link, end):
            continue
        _add_to_route(queue, target, current)
        if target.is_end():
            return
        if adj_part_of_path(current, target):
            target.deviation = True
    current.deviation = False


def bfs_route(start: Room, end: Room) -> tuple[bool, list[Room]]:
    """Search a route from ``start`` to ``end``.

    Returns whether ``end`` was reached and the queue of rooms visited, in
    the order they were queued. Each visited room's ``previous`` points back
    along the route that reached it.
    """
    queue = [start]
    start.visited = True
    # The queue grows while it is walked; list iteration picks up new items.
    for current in queue:
        explore_route(queue, current, end)
        if end.visited:
            return True, queue
    return False, queue


def adj_part_of_path(current: Room, adj: Room) -> bool:
    """True when ``adj`` lies on a path other than the one ``current`` is on."""
    taken = any(link.usage == 1 for link in adj.links)
    return (
        not current.deviation
        and adj.in_path()
        and not current.same_path(adj)
        and taken
    )


def _src_of_adj(adj: Room) -> Room | None:
    """The room a path enters ``adj`` from, unless that room is start."""
    for link in adj.links:
        if link.usage == 1:
            return None if link.room.is_start() else link.room
    return None


def detour_src_of_adj(adj: Room, end: Room) -> bool:
    """Check whether the room feeding ``adj`` on its path can reach ``end`` another way.

    When it cannot, ``adj`` is marked as a dead end. The search state left by
    the trial search is cleared afterwards.
    """
    src = _src_of_adj(adj)
    if src is None:
        return False
    if src.visited or adj.dead_end:
        return False
    src.visited = True
    adj.visited = True
    found, queue = bfs_route(src, end)
    if not found:
        adj.dead_end = True
    for room in (*queue, adj, src, end):
        room.reset_search()
    return found


def _toggle_usage(src: Room, dest: Room, is_previous: bool) -> None:
    link = src.link_to(dest)
    if link is None:
        return
    if link.usage == 0:
        link.usage = -1 if is_previous else 1
    else:
        link.usage = 0


def set_links_usage(end: Room) -> None:
    """Mark the links of the route ending at ``end`` as used.

    Walking back through ``previous``, the forward direction gets usage -1
    and the backward direction 1; a link that was already used is released.
    """
    room: Room | None = end
    while room is not None:
        previous = room.previous
        if previous is not None:
            _toggle_usage(previous, room, True)
            _toggle_usage(room, previous, False)
        room = previous