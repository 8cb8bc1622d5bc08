"""Visualization module for floor plan designs.

This module provides SVG rendering of designs with architectural symbols
and PNG previews drawn with matplotlib.
"""

from .generator import generate_design_image
from .svg import get_renderer, register_renderer, render_design_svg, save_design_svg

__all__ = [
    "generate_design_image",
    "get_renderer",
    "register_renderer",
    "render_design_svg",
    "save_design_svg",
]
