"""Room sizing policy.

Derives a room's width and height from the rectangle available to it,
favoring the catalogue's preferred aspect ratio when space is ample and
falling back to the minimum size when it is tight.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from ..core.catalogue import REQUIRED_ROOMS

# Below this multiple of the minimum area the minimum size is used as is
TIGHT_SPACE_FACTOR = 1.2
# Share of the available area a room may claim
AVAILABLE_AREA_SHARE = 0.8
# Cap on the target area, as a multiple of the minimum area
MAX_AREA_FACTOR = 1.5
# Share of the available extent kept when the preferred shape does not fit
CLAMP_SHARE = 0.9


class RoomDimensions(NamedTuple):
    width: float
    height: float
    area: float


def calculate_room_dimensions(
    room_key: str, available_width: float, available_height: float
) -> RoomDimensions:
    """Calculate a room's dimensions for an available rectangle.

    The result is floored at the room's minimum size even when that
    exceeds the available rectangle; callers clamp against the actual
    slot when placing.

    Args:
        room_key: Catalogue key ("living", "kitchen", "maid", "garage").
        available_width: Width of the rectangle offered to the room.
        available_height: Height of the rectangle offered to the room.

    Returns:
        The room's width, height and area. An unknown key yields the full
        available rectangle with area 0, meaning "unsized".
    """
    requirement = REQUIRED_ROOMS.get(room_key)
    if requirement is None:
        return RoomDimensions(available_width, available_height, 0.0)

    available_area = available_width * available_height
    min_area = requirement.min_area

    if available_area <= min_area * TIGHT_SPACE_FACTOR:
        return RoomDimensions(requirement.min_width, requirement.min_height, min_area)

    target_area = min(available_area * AVAILABLE_AREA_SHARE, min_area * MAX_AREA_FACTOR)
    width = math.sqrt(target_area * requirement.preferred_aspect_ratio)
    height = target_area / width

    if width > available_width:
        width = available_width * CLAMP_SHARE
        height = target_area / width
    if height > available_height:
        height = available_height * CLAMP_SHARE
        width = target_area / height

    return RoomDimensions(
        max(width, requirement.min_width),
        max(height, requirement.min_height),
        width * height,
    )
