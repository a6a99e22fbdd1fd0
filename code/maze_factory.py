"""Maze kits: families of map sites that are built together."""

from __future__ import annotations

from typing import Dict, Type

from map_sites import (
    BombedWall,
    Door,
    DoorNeedingSpell,
    EnchantedRoom,
    MapSite,
    Room,
    RoomWithABomb,
    Spell,
    Wall,
)
from maze import Maze


class MazeFactory:
    """Standard kit. Subclasses override only the products they change."""

    name = "standard"

    def make_maze(self) -> Maze:
        return Maze()

    def make_wall(self) -> MapSite:
        return Wall()

    def make_room(self, room_id: int) -> Room:
        return Room(room_id)

    def make_door(self, room1: Room, room2: Room) -> MapSite:
        return Door(room1, room2)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BombedMazeKit(MazeFactory):
    name = "bombed"

    def make_wall(self) -> MapSite:
        return BombedWall()

    def make_room(self, room_id: int) -> Room:
        return RoomWithABomb(room_id)


class EnchantedMazeKit(MazeFactory):
    name = "enchanted"

    def cast_spell(self) -> Spell:
        return Spell()

    def make_room(self, room_id: int) -> Room:
        return EnchantedRoom(room_id, self.cast_spell())

    def make_door(self, room1: Room, room2: Room) -> MapSite:
        return DoorNeedingSpell(room1, room2)


KIT_REGISTRY: Dict[str, Type[MazeFactory]] = {
    kit.name: kit for kit in (MazeFactory, BombedMazeKit, EnchantedMazeKit)
}


def kit_for_name(name: str) -> MazeFactory:
    try:
        kit_cls = KIT_REGISTRY[name]
    except KeyError as exc:
        known = ", ".join(sorted(KIT_REGISTRY))
        raise ValueError(f"Unknown maze kit {name!r}; expected one of: {known}") from exc
    return kit_cls()
