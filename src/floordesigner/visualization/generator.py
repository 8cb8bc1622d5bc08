"""PNG preview generation for floor plan designs.

This module draws a design with matplotlib: filled rooms with their name
and area, door positions, and dashed links between the rooms each door
connects.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..core.model import Design  # noqa: E402
from ..core.topology import build_room_graph, door_connections  # noqa: E402
from ..geom.primitives import format_area  # noqa: E402

LOGGER = logging.getLogger(__name__)

WALL_COLOR = "#334155"
DOOR_COLOR = "#F97316"
WINDOW_COLOR = "#38BDF8"
CONNECTION_COLOR = "#64748B"
FIXTURE_COLOR = "#64748B"
WALL_WIDTH = 2
DOOR_MARKER_SIZE = 6


def generate_design_image(design: Design, output_path: Path, dpi: int = 140) -> bool:
    """Generate a PNG image of a design.

    Args:
        design: The design to visualize.
        output_path: Path where to save the PNG image.
        dpi: Output resolution.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        figure = _draw_design(design)
        try:
            figure.savefig(output_path, dpi=dpi)
        finally:
            plt.close(figure)
    except (OSError, ValueError) as e:
        LOGGER.error("Error in image generation for %s: %s", output_path, e)
        return False
    LOGGER.debug("Wrote design preview to %s", output_path)
    return True


def _draw_design(design: Design):
    bounds = design.bounds
    unit = design.specifications.unit
    figure = plt.figure(figsize=(12, 12))
    axes = figure.gca()

    # Design coordinates grow downwards; flip y for the plot
    def invert_y(y: float) -> float:
        return bounds.height - y

    centers = {}
    for room in design.rooms:
        xs = [room.x, room.x + room.width, room.x + room.width, room.x]
        ys = [invert_y(y) for y in (room.y, room.y, room.y + room.height, room.y + room.height)]
        axes.fill(xs, ys, facecolor=room.color, alpha=0.9, edgecolor=WALL_COLOR, linewidth=WALL_WIDTH)
        cx, cy = room.x + room.width / 2, room.y + room.height / 2
        centers[room.id] = (cx, invert_y(cy))
        axes.text(
            cx, invert_y(cy), f"{room.name}\n{format_area(room.area, unit)}",
            ha="center", va="center", fontsize=9, fontweight="bold",
            bbox=dict(boxstyle="round,pad=0.3", facecolor="white", alpha=0.8),
        )

    for window in design.windows:
        if window.wall_side in ("north", "south"):
            xs, ys = [window.x, window.x + window.width], [window.y, window.y]
        else:
            xs, ys = [window.x, window.x], [window.y, window.y + window.width]
        axes.plot(xs, [invert_y(y) for y in ys], color=WINDOW_COLOR, linewidth=WALL_WIDTH * 2)

    for fixture in design.fixtures:
        axes.plot(fixture.x, invert_y(fixture.y), "s", color=FIXTURE_COLOR, markersize=4)

    for item in design.furniture:
        xs = [item.x, item.x + item.width, item.x + item.width, item.x, item.x]
        ys = [invert_y(y) for y in (item.y, item.y, item.y + item.height, item.y + item.height, item.y)]
        axes.plot(xs, ys, color=CONNECTION_COLOR, linewidth=0.8)

    graph = build_room_graph(design.rooms, design.doors)
    connections = door_connections(graph)
    for door in design.doors:
        door_y = invert_y(door.y)
        pair = connections.get(door.id)
        if pair is not None:
            for room_id in pair:
                rx, ry = centers[room_id]
                axes.plot([rx, door.x], [ry, door_y], color=CONNECTION_COLOR,
                          linewidth=1, linestyle="--", alpha=0.7)
        axes.plot(door.x, door_y, "o", color=DOOR_COLOR, markersize=DOOR_MARKER_SIZE,
                  markerfacecolor="white", markeredgecolor=DOOR_COLOR, markeredgewidth=2)

    axes.set_aspect("equal", adjustable="box")
    axes.axis("off")
    figure.tight_layout()
    return figure
