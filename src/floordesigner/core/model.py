"""Core data models for floor plan design.

This module defines the fundamental data structures used to represent
a floor plan design: rooms, openings (doors and windows), fixtures,
furniture, layout sections and the templates they are bundled into.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Literal, Optional, Tuple

from ..geom.primitives import Bounds, calculate_bounds, calculate_total_area

RoomType = Literal[
    "living",
    "bedroom",
    "master-bedroom",
    "kitchen",
    "bathroom",
    "master-bathroom",
    "balcony",
    "entrance",
    "foyer",
    "study",
    "dining",
    "utility",
    "corridor",
    "storage",
    "maid-room",
    "garage",
]

BHKType = Literal["Studio", "1BHK", "2BHK", "3BHK", "4BHK", "5BHK+"]

PropertyType = Literal[
    "Apartment",
    "Condo",
    "Villa",
    "Townhouse",
    "Duplex",
    "Penthouse",
    "Studio",
    "Bungalow",
]

FloorPlanShape = Literal["Rectangular", "Regular", "L-Shaped", "H-Shaped", "M-Shaped"]

WallSide = Literal["north", "south", "east", "west"]
DoorType = Literal["single", "double", "sliding", "bifold", "pocket"]
WindowType = Literal["fixed", "sliding", "casement", "bay"]
FixtureType = Literal["toilet", "sink", "shower", "bathtub", "kitchen-sink"]
FurnitureType = Literal["bed", "sofa", "dining-table", "desk", "chair"]
Unit = Literal["meters", "feet"]


@dataclass(frozen=True)
class Room:
    """Represents a room of a design.

    Attributes:
        id: Unique identifier for the room within its design.
        name: Human-readable name of the room.
        type: Room type tag (e.g. "living", "maid-room").
        x: X coordinate of the top-left corner.
        y: Y coordinate of the top-left corner.
        width: Extent along the x axis.
        height: Extent along the y axis.
        color: Display color hint (e.g. "#D4E6F1").
        floor: Floor index, 0 for the ground floor.
    """

    id: str
    name: str
    type: RoomType
    x: float
    y: float
    width: float
    height: float
    color: str = "#F0F0F0"
    floor: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Room '{self.id}' must have positive size, got "
                f"{self.width} x {self.height}"
            )

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "floor": self.floor,
        }


@dataclass(frozen=True)
class Section:
    """Rectangular sub-region of the footprint used while laying out rooms.

    Sections only scaffold the outline shape; they are never rendered
    or persisted.
    """

    id: str
    name: str
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Door:
    """Represents a door attached to a wall.

    Attributes:
        id: Unique identifier for the door.
        type: Door type tag.
        x: X coordinate of the wall attachment point.
        y: Y coordinate of the wall attachment point.
        width: Opening span.
        wall_side: Cardinal wall the door sits on.
        opens_inward: Swing direction.
    """

    id: str
    type: DoorType
    x: float
    y: float
    width: float
    wall_side: WallSide
    opens_inward: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "wallSide": self.wall_side,
            "opensInward": self.opens_inward,
        }


@dataclass(frozen=True)
class Window:
    """Represents a window attached to a wall."""

    id: str
    type: WindowType
    x: float
    y: float
    width: float
    wall_side: WallSide

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "wallSide": self.wall_side,
        }


@dataclass(frozen=True)
class Fixture:
    """Represents a bathroom or kitchen fixture.

    Fixtures are repositioned but never resized. ``room_id`` is a weak
    reference to the room the fixture is meant to sit in; the absolute
    coordinates stay the source of truth.
    """

    id: str
    type: FixtureType
    x: float
    y: float
    rotation: float = 0.0
    room_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "rotation": self.rotation,
        }
        if self.room_id is not None:
            data["roomId"] = self.room_id
        return data


@dataclass(frozen=True)
class Furniture:
    """Represents a piece of furniture.

    Attributes:
        id: Unique identifier.
        type: Furniture type tag.
        x: X coordinate of the top-left corner.
        y: Y coordinate of the top-left corner.
        width: Extent along the x axis.
        height: Extent along the y axis.
        rotation: Rotation in degrees around the footprint center.
        label: Optional free text (e.g. bed size).
        room_id: Weak reference to the containing room.
    """

    id: str
    type: FurnitureType
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    label: Optional[str] = None
    room_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
        }
        if self.label is not None:
            data["label"] = self.label
        if self.room_id is not None:
            data["roomId"] = self.room_id
        return data


@dataclass(frozen=True)
class DesignSpecifications:
    """User-editable overall specifications of a design.

    Attributes:
        overall_width: Requested footprint width.
        overall_height: Requested footprint height (length).
        wall_thickness: Wall thickness in centimeters.
        ceiling_height: Ceiling height in the design unit.
        unit: Length unit of every coordinate in the design.
    """

    overall_width: float = 12.0
    overall_height: float = 10.0
    wall_thickness: float = 15.0
    ceiling_height: float = 3.0
    unit: Unit = "meters"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallWidth": self.overall_width,
            "overallHeight": self.overall_height,
            "wallThickness": self.wall_thickness,
            "ceilingHeight": self.ceiling_height,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class Template:
    """Named, read-only bundle of a design's geometry.

    Templates are created by seed data and fetched by BHK and property
    type, most recent first.
    """

    id: str
    name: str
    bhk_type: str
    property_type: str
    shape: str
    description: str
    rooms: Tuple[Room, ...]
    doors: Tuple[Door, ...] = ()
    windows: Tuple[Window, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    furniture: Tuple[Furniture, ...] = ()
    default_width: Optional[float] = None
    default_height: Optional[float] = None
    created_at: datetime = field(default_factory=lambda: datetime.min)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "bhkType": self.bhk_type,
            "propertyType": self.property_type,
            "shape": self.shape,
            "description": self.description,
            "roomsData": [room.to_dict() for room in self.rooms],
            "doorsData": [door.to_dict() for door in self.doors],
            "windowsData": [window.to_dict() for window in self.windows],
            "fixturesData": [fixture.to_dict() for fixture in self.fixtures],
            "furnitureData": [item.to_dict() for item in self.furniture],
            "defaultWidth": self.default_width,
            "defaultHeight": self.default_height,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Design:
    """A rendered design: everything the presentation layer consumes.

    All entities share one coordinate space with the origin at the
    top-left corner and the unit of ``specifications``.
    """

    rooms: Tuple[Room, ...]
    doors: Tuple[Door, ...] = ()
    windows: Tuple[Window, ...] = ()
    fixtures: Tuple[Fixture, ...] = ()
    furniture: Tuple[Furniture, ...] = ()
    specifications: DesignSpecifications = field(default_factory=DesignSpecifications)
    template_id: Optional[str] = None

    @property
    def bounds(self) -> Bounds:
        return calculate_bounds(self.rooms)

    @property
    def total_area(self) -> float:
        return calculate_total_area(self.rooms)

    def to_dict(self) -> Dict[str, Any]:
        bounds = self.bounds
        return {
            "templateId": self.template_id,
            "specifications": self.specifications.to_dict(),
            "rooms": [room.to_dict() for room in self.rooms],
            "doors": [door.to_dict() for door in self.doors],
            "windows": [window.to_dict() for window in self.windows],
            "fixtures": [fixture.to_dict() for fixture in self.fixtures],
            "furniture": [item.to_dict() for item in self.furniture],
            "bounds": {"width": bounds.width, "height": bounds.height},
            "totalArea": self.total_area,
        }
