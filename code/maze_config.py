"""Configuration container for maze construction."""

from __future__ import annotations

from dataclasses import dataclass

from maze_factory import KIT_REGISTRY, MazeFactory, kit_for_name


@dataclass
class MazeConfig:
    """Aggregates the options that steer a MazeBuilder run."""

    # Registry key of the kit the CLI and helpers build with.
    kit_name: str = "standard"
    # Time and count each kit operation during build.
    collect_metrics: bool = False
    # Check every room has all four sides wired before returning the maze.
    validate_after_build: bool = True

    def __post_init__(self) -> None:
        self.kit_name = str(self.kit_name).strip().lower()
        if self.kit_name not in KIT_REGISTRY:
            known = ", ".join(sorted(KIT_REGISTRY))
            raise ValueError(f"MazeConfig kit_name must be one of: {known}")
        self.collect_metrics = bool(self.collect_metrics)
        self.validate_after_build = bool(self.validate_after_build)

    def kit(self) -> MazeFactory:
        return kit_for_name(self.kit_name)
