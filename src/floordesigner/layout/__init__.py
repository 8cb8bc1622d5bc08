"""Shape-driven layout of the required rooms.

This module turns an outline shape and overall dimensions into sections
and places the required rooms inside them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.model import Room, Section
from ..geom.primitives import calculate_bounds, calculate_total_area
from .placement import SHAPE_LAYOUTS, place_rooms_in_shape
from .sections import calculate_shape_area, generate_sections, list_shapes, normalize_shape
from .sizing import calculate_room_dimensions
from .validators import LayoutIssue, find_layout_issues, validate_all, validate_shape_layout


@dataclass(frozen=True)
class ShapeLayout:
    """Sections and placed rooms of one outline shape at one size."""

    shape: str
    sections: Tuple[Section, ...]
    rooms: Tuple[Room, ...]

    def to_dict(self) -> Dict[str, Any]:
        bounds = calculate_bounds(self.rooms)
        issues = find_layout_issues(self.rooms, self.sections)
        return {
            "shape": self.shape,
            "sections": [section.to_dict() for section in self.sections],
            "rooms": [room.to_dict() for room in self.rooms],
            "valid": validate_shape_layout(self.rooms, self.sections),
            "issues": [
                {"kind": issue.kind, "roomIds": list(issue.room_ids), "message": issue.message}
                for issue in issues
            ],
            "bounds": {"width": bounds.width, "height": bounds.height},
            "totalArea": calculate_total_area(self.rooms),
            "shapeArea": calculate_shape_area(self.sections),
        }


def build_shape_layout(shape: str, total_width: float, total_height: float) -> ShapeLayout:
    """Generate sections for a shape and place the required rooms in them."""
    canonical = normalize_shape(shape)
    sections = generate_sections(canonical, total_width, total_height)
    rooms = place_rooms_in_shape(canonical, sections, total_width, total_height)
    return ShapeLayout(canonical, tuple(sections), tuple(rooms))


__all__ = [
    "SHAPE_LAYOUTS",
    "LayoutIssue",
    "ShapeLayout",
    "build_shape_layout",
    "calculate_room_dimensions",
    "calculate_shape_area",
    "find_layout_issues",
    "generate_sections",
    "list_shapes",
    "normalize_shape",
    "place_rooms_in_shape",
    "validate_all",
    "validate_shape_layout",
]
