"""Room catalogue for the shape-driven layout.

The catalogue lists the rooms every generated outline must contain,
together with their minimum size and preferred proportions, and the
display colors used for each room type.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class RoomRequirement:
    """Minimum size policy for one required room.

    Attributes:
        name: Display name given to the placed room.
        type: Room type tag of the placed room.
        min_width: Smallest acceptable width.
        min_height: Smallest acceptable height.
        preferred_aspect_ratio: Preferred width / height ratio.
    """

    name: str
    type: str
    min_width: float
    min_height: float
    preferred_aspect_ratio: float

    @property
    def min_area(self) -> float:
        return self.min_width * self.min_height


REQUIRED_ROOMS: Mapping[str, RoomRequirement] = MappingProxyType(
    {
        "living": RoomRequirement("Living Room", "living", 3.0, 4.0, 1.5),
        "kitchen": RoomRequirement("Kitchen", "kitchen", 2.5, 3.2, 1.2),
        "maid": RoomRequirement("Maid's Room", "maid-room", 2.8, 2.8, 1.0),
        "garage": RoomRequirement("Garage", "garage", 5.0, 3.0, 1.8),
    }
)

REQUIRED_ROOM_TYPES = frozenset(req.type for req in REQUIRED_ROOMS.values())

# Colors for rooms produced by the shape-driven layout
LAYOUT_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "living": "#BFDBFE",
        "kitchen": "#FDE68A",
        "maid-room": "#E9D5FF",
        "garage": "#9CA3AF",
    }
)

ROOM_TYPE_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "entrance": "#E8F4F8",
        "foyer": "#E8F4F8",
        "living": "#D4E6F1",
        "dining": "#D6EAF8",
        "kitchen": "#FCF3CF",
        "bedroom": "#E8DAEF",
        "master-bedroom": "#E8DAEF",
        "bathroom": "#D5F4E6",
        "master-bathroom": "#D5F4E6",
        "balcony": "#FADBD8",
        "study": "#FAD7A0",
        "utility": "#F9E79F",
    }
)

DEFAULT_ROOM_COLOR = "#F0F0F0"


def room_type_color(room_type: str) -> str:
    """Return the display color for a room type."""
    return ROOM_TYPE_COLORS.get(room_type, DEFAULT_ROOM_COLOR)


def requirement_for_type(room_type: str) -> RoomRequirement | None:
    """Find the catalogue entry whose placed rooms carry ``room_type``."""
    for requirement in REQUIRED_ROOMS.values():
        if requirement.type == room_type:
            return requirement
    return None
