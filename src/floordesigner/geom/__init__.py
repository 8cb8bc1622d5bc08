"""Geometry utilities for floor plan design.

This module provides bounds, area and unit helpers over room lists,
plus shapely-backed rectangle overlap and containment tests.
"""

from .primitives import Bounds, calculate_bounds, calculate_total_area, convert_units, format_area
from .rect import contains, find_overlaps, overlap_area, rect_box

__all__ = [
    "Bounds",
    "calculate_bounds",
    "calculate_total_area",
    "convert_units",
    "format_area",
    "contains",
    "find_overlaps",
    "overlap_area",
    "rect_box",
]
