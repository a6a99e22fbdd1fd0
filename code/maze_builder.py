"""MazeBuilder assembles a two-room maze from whichever kit it is given."""

from __future__ import annotations

from time import perf_counter
from typing import Callable, Optional, TypeVar

from maze import Maze
from maze_config import MazeConfig
from maze_errors import MazeConstructionError
from maze_factory import MazeFactory
from maze_geometry import Direction
from maze_metrics import BuildMetrics

T = TypeVar("T")


class MazeBuilder:
    """Runs the fixed construction procedure against a kit.

    The procedure never inspects the kit's type: every difference between
    the mazes it produces comes from the four kit operations. A kit failure
    aborts the build, so callers either get a fully wired maze or an
    exception.
    """

    def __init__(self, config: Optional[MazeConfig] = None) -> None:
        self.config = config if config is not None else MazeConfig()
        self.metrics = BuildMetrics() if self.config.collect_metrics else None

    def _run_kit_operation(self, name: str, func: Callable[..., T], *args) -> T:
        start = perf_counter()
        try:
            return func(*args)
        except Exception as exc:
            raise MazeConstructionError(name, f"{type(exc).__name__}: {exc}") from exc
        finally:
            if self.metrics is not None:
                self.metrics.record_operation(name, perf_counter() - start)

    def build(self, kit: MazeFactory) -> Maze:
        succeeded = False
        try:
            maze = self._assemble(kit)
            if self.config.validate_after_build:
                maze.validate()
            succeeded = True
            return maze
        finally:
            if self.metrics is not None:
                self.metrics.record_build(succeeded)

    def _assemble(self, kit: MazeFactory) -> Maze:
        def wall():
            return self._run_kit_operation("make_wall", kit.make_wall)

        maze = self._run_kit_operation("make_maze", kit.make_maze)
        room1 = self._run_kit_operation("make_room", kit.make_room, 1)
        room2 = self._run_kit_operation("make_room", kit.make_room, 2)
        door = self._run_kit_operation("make_door", kit.make_door, room1, room2)

        maze.add_room(room1)
        maze.add_room(room2)

        room1.set_side(Direction.NORTH, wall())
        room1.set_side(Direction.EAST, door)
        room1.set_side(Direction.SOUTH, wall())
        room1.set_side(Direction.WEST, wall())

        room2.set_side(Direction.NORTH, wall())
        room2.set_side(Direction.EAST, wall())
        room2.set_side(Direction.SOUTH, wall())
        room2.set_side(Direction.WEST, door)

        return maze


def build_maze(kit: MazeFactory, config: Optional[MazeConfig] = None) -> Maze:
    return MazeBuilder(config).build(kit)
