"""Floor Designer - shape-driven room layout and template scaling for floor plans."""

__version__ = "0.1.0"

from .core.model import Design, DesignSpecifications, Room, Section, Template
from .engine.scaling import scale_template
from .layout import build_shape_layout, generate_sections, place_rooms_in_shape

__all__ = [
    "Design",
    "DesignSpecifications",
    "Room",
    "Section",
    "Template",
    "build_shape_layout",
    "generate_sections",
    "place_rooms_in_shape",
    "scale_template",
]
