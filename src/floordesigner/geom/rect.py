"""Rectangle geometry backed by shapely.

Rooms, sections and furniture footprints are axis-aligned rectangles;
this module converts them to shapely boxes for overlap and containment
tests.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Tuple

from shapely.geometry import Point, Polygon, box

# Tolerance for floating point noise in overlap and containment tests
EPSILON = 1e-9


def rect_box(rect) -> Polygon:
    """Build a shapely box from an object with x, y, width and height."""
    return box(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)


def overlap_area(a, b) -> float:
    """Area shared by two rectangles (0.0 when they only touch)."""
    return rect_box(a).intersection(rect_box(b)).area


def contains(outer, inner, tolerance: float = EPSILON) -> bool:
    """Check whether ``inner`` lies fully inside ``outer``.

    Edges may coincide. ``tolerance`` grows ``outer`` slightly so that
    rounding in computed coordinates does not reject a room that sits
    exactly on a section edge.
    """
    outer_box = box(
        outer.x - tolerance,
        outer.y - tolerance,
        outer.x + outer.width + tolerance,
        outer.y + outer.height + tolerance,
    )
    return outer_box.covers(rect_box(inner))


def contains_point(rect, x: float, y: float, tolerance: float = EPSILON) -> bool:
    """Check whether the point (x, y) lies inside or on the edge of ``rect``."""
    return rect_box(rect).buffer(tolerance, join_style=2).covers(Point(x, y))


def find_overlaps(rects: Iterable, tolerance: float = EPSILON) -> List[Tuple[str, str, float]]:
    """List every pair of rectangles whose interiors overlap.

    Args:
        rects: Objects with ``id``, ``x``, ``y``, ``width`` and ``height``.
        tolerance: Overlap areas at or below this value are ignored.

    Returns:
        Tuples of (first id, second id, overlap area).
    """
    overlaps = []
    for a, b in combinations(list(rects), 2):
        area = overlap_area(a, b)
        if area > tolerance:
            overlaps.append((a.id, b.id, area))
    return overlaps


def shared_edge_length(a, b) -> float:
    """Length of the boundary two rectangles have in common."""
    shared = rect_box(a).intersection(rect_box(b))
    if shared.is_empty or shared.area > EPSILON:
        return 0.0
    return shared.length
