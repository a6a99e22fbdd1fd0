"""Symbolic directions used to index the sides of a room."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cardinal directions in their fixed display order."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def ordered(cls) -> Tuple[Direction, ...]:
        return tuple(cls)

    @classmethod
    def from_label(cls, value: str) -> Direction:
        try:
            return cls[value.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported direction {value!r}") from exc


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

ALL_DIRECTIONS = Direction.ordered()
