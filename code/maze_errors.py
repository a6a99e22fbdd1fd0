"""Exceptions raised while building or rendering a maze."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from maze_geometry import Direction


class MazeError(Exception):
    """Base class for maze construction and rendering failures."""


class InvalidStateError(MazeError):
    """A room was rendered or validated while its graph was malformed."""

    def __init__(self, message: str, room_id: Optional[int] = None, direction: Optional[Direction] = None) -> None:
        super().__init__(message)
        self.room_id = room_id
        self.direction = direction

    @classmethod
    def missing_side(cls, room_id: int, direction: Direction) -> InvalidStateError:
        return cls(
            f"Room {room_id} has no occupant on its {direction.label} side",
            room_id=room_id,
            direction=direction,
        )


class UnsupportedOperationError(MazeError):
    """A map site was asked to do something its variant cannot do."""

    def __init__(self, variant: str, operation: str) -> None:
        super().__init__(f"{variant} does not support {operation}")
        self.variant = variant
        self.operation = operation


class MazeConstructionError(MazeError):
    """A kit operation failed part way through building a maze."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Maze construction aborted in {operation}: {message}")
        self.operation = operation
