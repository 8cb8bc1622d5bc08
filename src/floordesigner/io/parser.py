"""Parser for floor plan template JSON files.

This module provides functionality to parse JSON files containing
template records and convert them into Template objects. Records use
the camelCase field names of the template API (``bhkType``,
``roomsData``, ``wallSide``...).
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from ..core.catalogue import room_type_color
from ..core.errors import TemplateFormatError, TemplateStoreError
from ..core.model import Door, Fixture, Furniture, Room, Template, Window


def _parse_datetime(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp; a missing value sorts oldest."""
    if not value:
        return datetime.min
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    # Stored as naive UTC so offsets and bare timestamps order together
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def room_from_dict(data: Dict[str, Any]) -> Room:
    room_type = data["type"]
    return Room(
        id=str(data["id"]),
        name=data.get("name", room_type),
        type=room_type,
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        height=float(data["height"]),
        color=data.get("color") or room_type_color(room_type),
        floor=int(data.get("floor", 0)),
    )


def door_from_dict(data: Dict[str, Any]) -> Door:
    return Door(
        id=str(data["id"]),
        type=data.get("type", "single"),
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        wall_side=data["wallSide"],
        opens_inward=bool(data.get("opensInward", True)),
    )


def window_from_dict(data: Dict[str, Any]) -> Window:
    return Window(
        id=str(data["id"]),
        type=data.get("type", "fixed"),
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        wall_side=data["wallSide"],
    )


def fixture_from_dict(data: Dict[str, Any]) -> Fixture:
    return Fixture(
        id=str(data["id"]),
        type=data["type"],
        x=float(data["x"]),
        y=float(data["y"]),
        rotation=float(data.get("rotation", 0.0)),
        room_id=data.get("roomId"),
    )


def furniture_from_dict(data: Dict[str, Any]) -> Furniture:
    return Furniture(
        id=str(data["id"]),
        type=data["type"],
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        height=float(data["height"]),
        rotation=float(data.get("rotation", 0.0)),
        label=data.get("label"),
        room_id=data.get("roomId"),
    )


def template_from_dict(data: Dict[str, Any]) -> Template:
    """Build a Template from a template record.

    Args:
        data: Template record as stored in JSON.

    Returns:
        The parsed Template.

    Raises:
        TemplateFormatError: If a required field is missing or malformed.
    """
    template_id = data.get("id", "<unknown>")
    try:
        default_width = data.get("defaultWidth")
        default_height = data.get("defaultHeight")
        return Template(
            id=str(data["id"]),
            name=data["name"],
            bhk_type=data["bhkType"],
            property_type=data.get("propertyType", "Apartment"),
            shape=data.get("shape", "Rectangular"),
            description=data.get("description", ""),
            rooms=tuple(room_from_dict(item) for item in data.get("roomsData", [])),
            doors=tuple(door_from_dict(item) for item in data.get("doorsData") or []),
            windows=tuple(window_from_dict(item) for item in data.get("windowsData") or []),
            fixtures=tuple(fixture_from_dict(item) for item in data.get("fixturesData") or []),
            furniture=tuple(
                furniture_from_dict(item) for item in data.get("furnitureData") or []
            ),
            default_width=float(default_width) if default_width is not None else None,
            default_height=float(default_height) if default_height is not None else None,
            created_at=_parse_datetime(data.get("createdAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise TemplateFormatError(f"Invalid template data for {template_id}: {e}") from e


def load_templates(path: str | Path) -> List[Template]:
    """Load template records from a JSON file.

    The file holds either a list of template records or an object with a
    ``templates`` list.

    Args:
        path: Path to the JSON file.

    Returns:
        Templates in file order.

    Raises:
        TemplateStoreError: If the file is missing or is not valid JSON.
        TemplateFormatError: If a record is malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise TemplateStoreError(f"Template file not found: {path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TemplateStoreError(f"Invalid JSON in template file {path}: {e}") from e

    records = data.get("templates", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise TemplateFormatError(f"Template file {path} must hold a list of templates")

    return [template_from_dict(record) for record in records]


def save_design(design, output_path: str | Path) -> None:
    """Write a design record to a JSON file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(design.to_dict(), f, indent=2, ensure_ascii=False)
