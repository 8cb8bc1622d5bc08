"""Validation of generated shape layouts.

This module provides validation functions that check a generated layout
against its sections and the room catalogue. A failing layout points at
inconsistent per-shape proportions; it is reported, never repaired.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..core.catalogue import REQUIRED_ROOM_TYPES, requirement_for_type
from ..core.errors import InvalidLayout
from ..core.model import Room, Section
from ..geom.rect import EPSILON, contains, find_overlaps


@dataclass(frozen=True)
class LayoutIssue:
    """A single layout violation.

    Attributes:
        kind: One of "missing-room", "outside-sections", "overlap",
            "below-minimum".
        room_ids: Rooms involved (empty for missing rooms).
        message: Human readable description.
    """

    kind: str
    room_ids: tuple
    message: str


def missing_room_types(rooms: Iterable[Room]) -> List[str]:
    """Required room types absent from ``rooms``, sorted."""
    present = {room.type for room in rooms}
    return sorted(REQUIRED_ROOM_TYPES - present)


def room_in_any_section(room: Room, sections: Iterable[Section]) -> bool:
    return any(contains(section, room) for section in sections)


def validate_shape_layout(rooms: Sequence[Room], sections: Sequence[Section]) -> bool:
    """Check that a layout is complete and contained.

    Args:
        rooms: Rooms produced by the placement engine.
        sections: Sections generated for the same shape and size.

    Returns:
        True if every required room type is present and every room lies
        fully within at least one section, False otherwise.
    """
    if missing_room_types(rooms):
        return False
    return all(room_in_any_section(room, sections) for room in rooms)


def find_layout_issues(
    rooms: Sequence[Room], sections: Sequence[Section], tolerance: float = EPSILON
) -> List[LayoutIssue]:
    """Collect every layout violation.

    Besides completeness and containment, this reports overlapping rooms
    and rooms that ended up smaller than their catalogue minimum after
    being clamped to their slot.
    """
    issues = []

    for room_type in missing_room_types(rooms):
        issues.append(
            LayoutIssue("missing-room", (), f"Required room type '{room_type}' is missing")
        )

    for room in rooms:
        if not room_in_any_section(room, sections):
            issues.append(
                LayoutIssue(
                    "outside-sections",
                    (room.id,),
                    f"Room '{room.id}' ({room.name}) is not inside any section",
                )
            )

    for first, second, area in find_overlaps(rooms, tolerance):
        issues.append(
            LayoutIssue(
                "overlap",
                (first, second),
                f"Rooms '{first}' and '{second}' overlap by {area:.3f}",
            )
        )

    for room in rooms:
        requirement = requirement_for_type(room.type)
        if requirement is None:
            continue
        if (
            room.width + tolerance < requirement.min_width
            or room.height + tolerance < requirement.min_height
        ):
            issues.append(
                LayoutIssue(
                    "below-minimum",
                    (room.id,),
                    f"Room '{room.id}' ({room.name}) is {room.width:.2f} x "
                    f"{room.height:.2f}, below the minimum "
                    f"{requirement.min_width} x {requirement.min_height}",
                )
            )

    return issues


def validate_all(
    rooms: Sequence[Room], sections: Sequence[Section], allow_undersized: bool = True
) -> bool:
    """Run all validators on a layout.

    Args:
        rooms: Rooms produced by the placement engine.
        sections: Sections generated for the same shape and size.
        allow_undersized: If True, rooms below their catalogue minimum
            are not treated as failures.

    Returns:
        True if all validations pass.

    Raises:
        InvalidLayout: If any validation fails, with every issue attached.
    """
    issues = find_layout_issues(rooms, sections)
    if allow_undersized:
        issues = [issue for issue in issues if issue.kind != "below-minimum"]
    if issues:
        raise InvalidLayout(issues)
    return True
