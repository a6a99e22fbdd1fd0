#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
from typing import List, Optional, Sequence

from maze_builder import MazeBuilder
from maze_config import MazeConfig
from maze_factory import KIT_REGISTRY
from maze_graph import summarize_maze_graph


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a two-room maze with one of the maze kits and print it."
    )
    parser.add_argument(
        "--kit",
        choices=sorted(KIT_REGISTRY),
        default="standard",
        help="Kit used to manufacture the maze's rooms, walls, and doors.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Build one maze per registered kit, ignoring --kit.",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="Print a room-graph summary after each maze.",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print kit operation timings as JSON after building.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    kit_names: List[str] = sorted(KIT_REGISTRY) if args.all else [args.kit]

    for index, kit_name in enumerate(kit_names):
        config = MazeConfig(kit_name=kit_name, collect_metrics=args.metrics)
        builder = MazeBuilder(config)
        maze = builder.build(config.kit())

        if index:
            print()
        print(f"Maze built with the {kit_name} kit:")
        print(maze.render())
        if args.graph:
            print("Room graph: " + json.dumps(summarize_maze_graph(maze), sort_keys=True))
        if builder.metrics is not None:
            print("Kit operations: " + json.dumps(builder.metrics.snapshot(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
