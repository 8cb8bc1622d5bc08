"""Room placement within outline sections.

Each outline shape is described by a declarative table: which required
room goes into which section, along which axis rooms in that section are
lined up, and what fraction of the section's free extent each one may
claim. A single interpreter turns a table plus the generated sections
into concrete rooms.

Within a section rooms are placed with a running cursor that advances by
each room's actual extent plus the padding, so rooms never overlap and
never leave their section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Mapping, Sequence, Tuple

from ..core.catalogue import LAYOUT_COLORS, REQUIRED_ROOMS
from ..core.errors import LayoutError
from ..core.model import Room, Section
from .sections import normalize_shape
from .sizing import calculate_room_dimensions

LOGGER = logging.getLogger(__name__)

Axis = Literal["x", "y"]


@dataclass(frozen=True)
class SlotRule:
    """One room's slot in a shape layout.

    Attributes:
        room_key: Catalogue key of the room.
        section_id: ID of the section holding the room.
        axis: "x" to line rooms up side by side, "y" to stack them.
        fraction: Share of the section's free extent along ``axis``.
    """

    room_key: str
    section_id: str
    axis: Axis
    fraction: float


@dataclass(frozen=True)
class ShapeLayoutRules:
    padding: float
    slots: Tuple[SlotRule, ...]


# Fractions are shares of the free extent: the section extent minus padding at
# both ends and between neighbouring rooms.
SHAPE_LAYOUTS: Mapping[str, ShapeLayoutRules] = {
    "Rectangular": ShapeLayoutRules(
        padding=0.5,
        slots=(
            SlotRule("garage", "main", "x", 0.28),
            SlotRule("kitchen", "main", "x", 0.22),
            SlotRule("living", "main", "x", 0.32),
            SlotRule("maid", "main", "x", 0.18),
        ),
    ),
    "L-Shaped": ShapeLayoutRules(
        padding=0.5,
        slots=(
            SlotRule("living", "horizontal", "x", 0.55),
            SlotRule("kitchen", "horizontal", "x", 0.40),
            SlotRule("garage", "vertical", "x", 0.65),
            SlotRule("maid", "vertical", "x", 0.30),
        ),
    ),
    "H-Shaped": ShapeLayoutRules(
        padding=0.3,
        slots=(
            SlotRule("living", "left-wing", "y", 0.60),
            SlotRule("kitchen", "left-wing", "y", 0.35),
            SlotRule("garage", "right-wing", "y", 0.55),
            SlotRule("maid", "right-wing", "y", 0.40),
        ),
    ),
    "M-Shaped": ShapeLayoutRules(
        padding=0.3,
        slots=(
            SlotRule("living", "center", "y", 0.55),
            SlotRule("kitchen", "center", "y", 0.40),
            SlotRule("garage", "left-wing", "x", 1.0),
            SlotRule("maid", "right-wing", "x", 1.0),
        ),
    ),
}


def place_rooms_in_shape(
    shape: str,
    sections: Sequence[Section],
    total_width: float,
    total_height: float,
) -> List[Room]:
    """Place the required rooms inside a shape's sections.

    Args:
        shape: Outline shape tag.
        sections: Sections produced by ``generate_sections`` for the shape.
        total_width: Overall footprint width.
        total_height: Overall footprint height.

    Returns:
        One room per slot of the shape's table, with IDs ``room-1``,
        ``room-2``... in table order.

    Raises:
        ValueError: If the shape is unknown.
        LayoutError: If a section the table refers to is missing or too
            small to hold its padding.
    """
    rules = SHAPE_LAYOUTS[normalize_shape(shape)]
    sections_by_id = {section.id: section for section in sections}

    # Group slots by section, keeping table order
    grouped: Dict[str, List[int]] = {}
    for index, slot in enumerate(rules.slots):
        grouped.setdefault(slot.section_id, []).append(index)

    placed: Dict[int, Tuple[float, float, float, float]] = {}
    for section_id, indices in grouped.items():
        section = sections_by_id.get(section_id)
        if section is None:
            raise LayoutError(f"Shape '{shape}' has no section '{section_id}'")
        slots = [rules.slots[i] for i in indices]
        for index, rect in zip(indices, _fill_section(section, slots, rules.padding)):
            placed[index] = rect

    rooms = []
    for index, slot in enumerate(rules.slots):
        x, y, width, height = placed[index]
        requirement = REQUIRED_ROOMS[slot.room_key]
        rooms.append(
            Room(
                id=f"room-{index + 1}",
                name=requirement.name,
                type=requirement.type,
                x=x,
                y=y,
                width=width,
                height=height,
                color=LAYOUT_COLORS.get(requirement.type, "#F0F0F0"),
            )
        )

    LOGGER.debug(
        "Placed %d rooms for %s outline %.2f x %.2f",
        len(rooms), shape, total_width, total_height,
    )
    return rooms


def _fill_section(
    section: Section, slots: Sequence[SlotRule], padding: float
) -> List[Tuple[float, float, float, float]]:
    """Lay out a section's slots and return (x, y, width, height) per slot."""
    axis = slots[0].axis
    count = len(slots)

    along_extent = section.width if axis == "x" else section.height
    across_extent = section.height if axis == "x" else section.width

    # Padding on both sides and between neighbouring rooms
    free_along = along_extent - padding * 2 - padding * (count - 1)
    free_across = across_extent - padding * 2
    if free_along <= 0 or free_across <= 0:
        raise LayoutError(
            f"Section '{section.id}' ({section.width:.2f} x {section.height:.2f}) "
            f"is too small for padding {padding}"
        )

    along_origin = section.x if axis == "x" else section.y
    across_origin = section.y if axis == "x" else section.x

    cursor = along_origin + padding
    rects = []
    for slot in slots:
        slot_along = free_along * slot.fraction
        if axis == "x":
            dims = calculate_room_dimensions(slot.room_key, slot_along, free_across)
            along, across = dims.width, dims.height
        else:
            dims = calculate_room_dimensions(slot.room_key, free_across, slot_along)
            along, across = dims.height, dims.width

        along = min(along, slot_along)
        across = min(across, free_across)

        if axis == "x":
            rects.append((cursor, across_origin + padding, along, across))
        else:
            rects.append((across_origin + padding, cursor, across, along))
        cursor += along + padding

    return rects
