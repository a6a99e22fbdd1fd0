"""Map sites: the rooms, walls, and doors a maze is wired from."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from maze_errors import InvalidStateError, UnsupportedOperationError
from maze_geometry import ALL_DIRECTIONS, Direction


class MapSite:
    """Anything that can occupy the side of a room and describe itself."""

    def render(self) -> str:
        raise NotImplementedError

    @property
    def variant(self) -> str:
        return type(self).__name__

    def add_child(self, site: MapSite) -> None:
        # No map site composes other sites; rooms hold neighbours, not children.
        raise UnsupportedOperationError(self.variant, "add_child")

    def children(self) -> Tuple[MapSite, ...]:
        return ()

    def __str__(self) -> str:
        return self.render()


class Spell:
    """Opaque marker carried by enchanted rooms."""

    def __repr__(self) -> str:
        return "Spell()"


class Wall(MapSite):
    def render(self) -> str:
        return "Wall"

    def __repr__(self) -> str:
        return f"{self.variant}()"


class BombedWall(Wall):
    """A wall that may have been blown open."""

    def __init__(self, bombed: bool = False) -> None:
        self.bombed = bool(bombed)

    def render(self) -> str:
        return "Bombed Wall" if self.bombed else "Cracked Wall"

    def __repr__(self) -> str:
        return f"BombedWall(bombed={self.bombed})"


class Room(MapSite):
    """Graph node with one occupant slot per direction.

    Sides start empty and are wired after construction. A room with an empty
    side is a construction mistake; rendering it raises InvalidStateError.
    """

    def __init__(self, room_id: int) -> None:
        if isinstance(room_id, bool) or not isinstance(room_id, int):
            raise TypeError(f"Room ids must be integers, got {room_id!r}")
        self.room_id = room_id
        self._rendering = False
        self._sides: Dict[Direction, Optional[MapSite]] = {direction: None for direction in ALL_DIRECTIONS}

    def set_side(self, direction: Direction, site: MapSite) -> None:
        if not isinstance(direction, Direction):
            raise TypeError(f"Room sides are indexed by Direction, got {direction!r}")
        if not isinstance(site, MapSite):
            raise TypeError(f"Room {self.room_id} sides must hold a MapSite, got {site!r}")
        self._sides[direction] = site

    def get_side(self, direction: Direction) -> Optional[MapSite]:
        return self._sides[direction]

    @property
    def sides(self) -> Mapping[Direction, Optional[MapSite]]:
        return dict(self._sides)

    def missing_sides(self) -> Tuple[Direction, ...]:
        return tuple(direction for direction in ALL_DIRECTIONS if self._sides[direction] is None)

    def is_fully_wired(self) -> bool:
        return not self.missing_sides()

    def contents_lines(self) -> Tuple[str, ...]:
        """Extra lines appended after the four sides; plain rooms have none."""
        return ()

    def render(self) -> str:
        # Re-entry means the room is reachable from one of its own sides.
        if self._rendering:
            raise InvalidStateError(f"Room {self.room_id} contains itself", room_id=self.room_id)
        self._rendering = True
        try:
            lines = [f"Room {self.room_id}"]
            for direction in ALL_DIRECTIONS:
                site = self._sides[direction]
                if site is None:
                    raise InvalidStateError.missing_side(self.room_id, direction)
                lines.append(f"  {direction.label}: {site.render()}")
            lines.extend(self.contents_lines())
            return "\n".join(lines)
        finally:
            self._rendering = False

    def __repr__(self) -> str:
        return f"{self.variant}(room_id={self.room_id})"


class EnchantedRoom(Room):
    def __init__(self, room_id: int, spell: Optional[Spell] = None) -> None:
        super().__init__(room_id)
        self.spell = spell

    def contents_lines(self) -> Tuple[str, ...]:
        return ("  Contents: Spell" if self.spell is not None else "  Contents: Nothing",)


class RoomWithABomb(Room):
    def __init__(self, room_id: int, bomb: bool = False) -> None:
        super().__init__(room_id)
        self.bomb = bool(bomb)

    def contents_lines(self) -> Tuple[str, ...]:
        return ("  Contents: Bomb" if self.bomb else "  Contents: No bomb",)


class Door(MapSite):
    """Connects two rooms; both rooms hold the same Door instance."""

    def __init__(self, room1: Room, room2: Room) -> None:
        self.room1 = room1
        self.room2 = room2

    @property
    def rooms(self) -> Tuple[Room, Room]:
        return self.room1, self.room2

    def connects(self, room: Room) -> bool:
        return room is self.room1 or room is self.room2

    def other_side(self, room: Room) -> Room:
        if room is self.room1:
            return self.room2
        if room is self.room2:
            return self.room1
        raise ValueError(f"Room {room.room_id} is not connected by {self!r}")

    def render(self) -> str:
        return f"Door between rooms {self.room1.room_id} and {self.room2.room_id}"

    def __repr__(self) -> str:
        return f"{self.variant}({self.room1.room_id}, {self.room2.room_id})"


class DoorNeedingSpell(Door):
    def render(self) -> str:
        # Rewrites the first "Door" anywhere in the text, not only the leading label.
        return super().render().replace("Door", "Door Needing Spell", 1)
