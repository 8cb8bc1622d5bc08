"""Section generation for outline shapes.

An outline shape is approximated by a handful of named, axis-aligned
rectangular sections. All proportions are fixed; nothing is searched or
optimized.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from ..core.model import Section

SHAPE_ALIASES = {
    "Regular": "Rectangular",
}

# L-Shaped: horizontal wing height, vertical wing width (fractions of total)
L_WING_HEIGHT = 0.6
L_STEM_WIDTH = 0.6

# H-Shaped
H_WING_WIDTH = 0.3
H_BRIDGE_WIDTH = 0.4
H_BRIDGE_HEIGHT = 0.3
H_BRIDGE_OFFSET = 0.35

# M-Shaped
M_WING_WIDTH = 0.25
M_CENTER_WIDTH = 0.5
M_WING_HEIGHT = 0.6


def normalize_shape(shape: str) -> str:
    """Map shape aliases to their canonical tag.

    Raises:
        ValueError: If the shape is not a known outline shape.
    """
    canonical = SHAPE_ALIASES.get(shape, shape)
    if canonical not in _GENERATORS:
        raise ValueError(f"Unknown floor plan shape: {shape}")
    return canonical


def generate_sections(shape: str, total_width: float, total_height: float) -> List[Section]:
    """Generate the sections approximating an outline shape.

    Args:
        shape: Outline shape tag ("Rectangular"/"Regular", "L-Shaped",
            "H-Shaped" or "M-Shaped").
        total_width: Overall footprint width.
        total_height: Overall footprint height.

    Returns:
        The shape's sections, in a fixed per-shape order.

    Raises:
        ValueError: If the shape is unknown or a dimension is not positive.
    """
    if total_width <= 0 or total_height <= 0:
        raise ValueError(
            f"Overall dimensions must be positive, got {total_width} x {total_height}"
        )
    return _GENERATORS[normalize_shape(shape)](total_width, total_height)


def _rectangular_sections(width: float, height: float) -> List[Section]:
    return [Section("main", "Main Section", 0.0, 0.0, width, height)]


def _l_shaped_sections(total_width: float, total_height: float) -> List[Section]:
    horizontal_height = total_height * L_WING_HEIGHT
    vertical_width = total_width * L_STEM_WIDTH
    vertical_height = total_height * (1 - L_WING_HEIGHT)

    return [
        Section("horizontal", "Horizontal Wing", 0.0, 0.0, total_width, horizontal_height),
        Section("vertical", "Vertical Wing", 0.0, horizontal_height, vertical_width, vertical_height),
    ]


def _h_shaped_sections(total_width: float, total_height: float) -> List[Section]:
    wing_width = total_width * H_WING_WIDTH
    bridge_width = total_width * H_BRIDGE_WIDTH
    bridge_height = total_height * H_BRIDGE_HEIGHT
    bridge_offset = total_height * H_BRIDGE_OFFSET

    return [
        Section("left-wing", "Left Wing", 0.0, 0.0, wing_width, total_height),
        Section("bridge", "Central Bridge", wing_width, bridge_offset, bridge_width, bridge_height),
        Section("right-wing", "Right Wing", wing_width + bridge_width, 0.0, wing_width, total_height),
    ]


def _m_shaped_sections(total_width: float, total_height: float) -> List[Section]:
    wing_width = total_width * M_WING_WIDTH
    center_width = total_width * M_CENTER_WIDTH
    wing_height = total_height * M_WING_HEIGHT

    return [
        Section("center", "Central Section", wing_width, 0.0, center_width, total_height),
        Section("left-wing", "Left Wing", 0.0, 0.0, wing_width, wing_height),
        Section("right-wing", "Right Wing", wing_width + center_width, 0.0, wing_width, wing_height),
    ]


_GENERATORS: Dict[str, Callable[[float, float], List[Section]]] = {
    "Rectangular": _rectangular_sections,
    "L-Shaped": _l_shaped_sections,
    "H-Shaped": _h_shaped_sections,
    "M-Shaped": _m_shaped_sections,
}


def list_shapes() -> List[str]:
    """List the canonical outline shape tags."""
    return list(_GENERATORS.keys())


def calculate_shape_area(sections: Iterable[Section]) -> float:
    """Sum of section areas (overlapping sections are counted twice)."""
    return sum((section.width * section.height for section in sections), 0.0)
