"""Topology analysis for floor plan designs.

This module provides functionality to analyze the topological relationships
between rooms, doors and room contents, including room adjacency and
resolution of the weak room references carried by fixtures and furniture.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx
from shapely.geometry import Point

from ..geom.rect import EPSILON, contains_point, rect_box, shared_edge_length
from .model import Door, Fixture, Furniture, Room


def rooms_at_door(door: Door, rooms: Iterable[Room], tolerance: float = 1e-6) -> List[str]:
    """Find the rooms whose walls carry a door.

    A room carries the door when the door's attachment point lies on the
    room's boundary.

    Args:
        door: The door to resolve.
        rooms: Candidate rooms.
        tolerance: Distance from the boundary still counted as "on" it.

    Returns:
        IDs of the rooms the door opens into, in input order.
    """
    point = Point(door.x, door.y)
    return [
        room.id
        for room in rooms
        if rect_box(room).exterior.distance(point) <= tolerance
    ]


def build_room_graph(rooms: Sequence[Room], doors: Iterable[Door] = ()) -> nx.Graph:
    """Build a graph representing room adjacency.

    Creates a NetworkX graph where nodes are rooms and edges join rooms
    that share a stretch of wall. Edges carry the shared wall length and
    the IDs of doors sitting on the shared wall.

    Args:
        rooms: Rooms of a design.
        doors: Doors of the same design.

    Returns:
        NetworkX Graph with room adjacency.
    """
    G = nx.Graph()

    for room in rooms:
        G.add_node(room.id, name=room.name, type=room.type)

    for i, a in enumerate(rooms):
        for b in rooms[i + 1:]:
            length = shared_edge_length(a, b)
            if length > EPSILON:
                G.add_edge(a.id, b.id, shared_length=length, doors=[])

    # Only doors touching exactly two adjacent rooms connect them
    for door in doors:
        touched = rooms_at_door(door, rooms)
        if len(touched) == 2 and G.has_edge(*touched):
            G.edges[touched[0], touched[1]]["doors"].append(door.id)

    return G


def door_connections(graph: nx.Graph) -> Dict[str, Tuple[str, str]]:
    """Map each door ID to the pair of rooms it connects."""
    connections = {}
    for a, b, data in graph.edges(data=True):
        for door_id in data.get("doors", []):
            connections[door_id] = (a, b)
    return connections


def find_misplaced_contents(
    rooms: Iterable[Room],
    fixtures: Iterable[Fixture] = (),
    furniture: Iterable[Furniture] = (),
) -> List[Tuple[str, str | None]]:
    """Check fixtures and furniture against their weak room references.

    A fixture must have its anchor point inside its room; a furniture item
    must have the center of its footprint inside its room. Items without
    a ``room_id`` are not checked.

    Returns:
        (item id, referenced room id) for every item outside its room or
        referencing an unknown room.
    """
    rooms_by_id = {room.id: room for room in rooms}
    misplaced = []

    for fixture in fixtures:
        if fixture.room_id is None:
            continue
        room = rooms_by_id.get(fixture.room_id)
        if room is None or not contains_point(room, fixture.x, fixture.y):
            misplaced.append((fixture.id, fixture.room_id))

    for item in furniture:
        if item.room_id is None:
            continue
        room = rooms_by_id.get(item.room_id)
        center_x = item.x + item.width / 2
        center_y = item.y + item.height / 2
        if room is None or not contains_point(room, center_x, center_y):
            misplaced.append((item.id, item.room_id))

    return misplaced
