"""Container for the rooms of a built maze."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from map_sites import Door, Room
from maze_errors import InvalidStateError


class Maze:
    """Owns its rooms in insertion order."""

    def __init__(self) -> None:
        self._rooms: List[Room] = []

    def add_room(self, room: Room) -> Room:
        if not isinstance(room, Room):
            raise TypeError(f"Maze can only hold rooms, got {room!r}")
        self._rooms.append(room)
        return room

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(tuple(self._rooms))

    def __len__(self) -> int:
        return len(self._rooms)

    def room(self, room_id: int) -> Optional[Room]:
        """Return the first room registered with the given id, if any."""
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None

    def doors(self) -> Tuple[Door, ...]:
        """Distinct doors referenced by the rooms' sides, in first-seen order."""
        doors: List[Door] = []
        seen_ids = set()
        for room in self._rooms:
            for site in room.sides.values():
                if isinstance(site, Door) and id(site) not in seen_ids:
                    seen_ids.add(id(site))
                    doors.append(site)
        return tuple(doors)

    def validate(self) -> None:
        for room in self._rooms:
            missing = room.missing_sides()
            if missing:
                raise InvalidStateError.missing_side(room.room_id, missing[0])

    def render(self) -> str:
        return "\n".join(room.render() for room in self._rooms)

    def __repr__(self) -> str:
        return f"Maze(rooms={[room.room_id for room in self._rooms]})"
