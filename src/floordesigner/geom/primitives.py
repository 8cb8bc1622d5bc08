"""Geometry primitives over room lists.

Bounds, area, area formatting and unit conversion. Every function here
accepts any object with ``x``, ``y``, ``width`` and ``height`` attributes.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

METERS_TO_FEET = 3.28084

UNIT_LABELS = {
    "meters": "m²",
    "feet": "sq ft",
}


class Bounds(NamedTuple):
    """Footprint bounding box anchored at the origin."""

    width: float
    height: float


def calculate_bounds(rooms: Iterable) -> Bounds:
    """Return the bounding box of a room list.

    The box is anchored at (0, 0): its width and height are the maximum
    right and bottom edges over all rooms.

    Args:
        rooms: Rooms (or any rectangles) to measure.

    Returns:
        Bounds of the rooms, or ``Bounds(0, 0)`` for an empty list.
    """
    rooms = list(rooms)
    if not rooms:
        return Bounds(0.0, 0.0)

    max_x = max(room.x + room.width for room in rooms)
    max_y = max(room.y + room.height for room in rooms)
    return Bounds(max_x, max_y)


def calculate_total_area(rooms: Iterable) -> float:
    """Sum of width x height over all rooms.

    Overlapping rooms are counted twice.
    """
    return sum((room.width * room.height for room in rooms), 0.0)


def format_area(area: float, unit: str = "meters") -> str:
    """Format an area with two decimals and its unit label.

    Examples:
        >>> format_area(12.345, "meters")
        '12.35 m²'
        >>> format_area(10, "feet")
        '10.00 sq ft'
    """
    label = UNIT_LABELS["meters"] if unit == "meters" else UNIT_LABELS["feet"]
    return f"{area:.2f} {label}"


def convert_units(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length between meters and feet."""
    if from_unit == to_unit:
        return value
    if from_unit == "meters" and to_unit == "feet":
        return value * METERS_TO_FEET
    return value / METERS_TO_FEET
