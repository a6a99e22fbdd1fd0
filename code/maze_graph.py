"""Room adjacency analysis for built mazes, backed by networkx."""

from __future__ import annotations

from typing import Any, Dict

import networkx as nx

from maze import Maze


def build_room_graph(maze: Maze) -> nx.MultiGraph:
    """Node per room (keyed by insertion index), edge per door inside the maze."""
    graph = nx.MultiGraph()
    index_by_room = {}
    for index, room in enumerate(maze.rooms):
        graph.add_node(index, room_id=room.room_id, variant=room.variant)
        index_by_room[id(room)] = index

    for door in maze.doors():
        end_a = index_by_room.get(id(door.room1))
        end_b = index_by_room.get(id(door.room2))
        # Doors leading to rooms the maze does not own have no edge.
        if end_a is None or end_b is None:
            continue
        graph.add_edge(end_a, end_b, door=door, variant=door.variant)
    return graph


def summarize_maze_graph(maze: Maze) -> Dict[str, Any]:
    graph = build_room_graph(maze)
    simple = nx.Graph(graph)
    components = list(nx.connected_components(simple)) if graph.number_of_nodes() else []

    diameter = 0
    if components:
        largest = max(components, key=len)
        subgraph = simple.subgraph(largest)
        try:
            diameter = int(nx.diameter(subgraph))
        except nx.NetworkXError:
            diameter = 0

    return {
        "rooms": graph.number_of_nodes(),
        "doors": graph.number_of_edges(),
        "components": len(components),
        "cycles": len(nx.cycle_basis(simple)),
        "largest_component_diameter": diameter,
    }
