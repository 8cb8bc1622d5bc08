"""Core functionality for floor plan design."""

from .model import Design, DesignSpecifications, Door, Fixture, Furniture, Room, Section, Template, Window

__all__ = [
    "Design",
    "DesignSpecifications",
    "Door",
    "Fixture",
    "Furniture",
    "Room",
    "Section",
    "Template",
    "Window",
]
