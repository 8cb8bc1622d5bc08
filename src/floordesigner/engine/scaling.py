"""Proportional scaling of template geometry.

A template records absolute coordinates for its rooms, openings,
fixtures and furniture. When the user changes the overall dimensions the
whole set is rescaled with independent X and Y factors derived from the
template's room bounds.

Scaling is always applied to the template's recorded geometry, never to
a previously scaled result, so repeated edits do not accumulate error.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, NamedTuple, Optional, Tuple

from ..core.model import Design, DesignSpecifications, Door, Fixture, Furniture, Room, Template, Window
from ..geom.primitives import calculate_bounds


class ScaleFactors(NamedTuple):
    x: float
    y: float

    @property
    def opening(self) -> float:
        """Factor for door and window spans: the smaller of the two axes."""
        return min(self.x, self.y)

    def inverse(self) -> "ScaleFactors":
        return ScaleFactors(1.0 / self.x, 1.0 / self.y)


IDENTITY = ScaleFactors(1.0, 1.0)


def compute_scale_factors(
    base_rooms: Iterable[Room], target_width: float, target_height: float
) -> ScaleFactors:
    """Compute per-axis scale factors from room bounds to a target size.

    Args:
        base_rooms: The template's rooms.
        target_width: Requested overall width.
        target_height: Requested overall height.

    Returns:
        Scale factors; an axis with no extent (e.g. an empty room list)
        gets a neutral factor of 1.0.
    """
    bounds = calculate_bounds(base_rooms)
    scale_x = target_width / bounds.width if bounds.width > 0 else 1.0
    scale_y = target_height / bounds.height if bounds.height > 0 else 1.0
    return ScaleFactors(scale_x, scale_y)


def scale_rooms(rooms: Iterable[Room], factors: ScaleFactors) -> Tuple[Room, ...]:
    return tuple(
        replace(
            room,
            x=room.x * factors.x,
            y=room.y * factors.y,
            width=room.width * factors.x,
            height=room.height * factors.y,
        )
        for room in rooms
    )


def scale_doors(doors: Iterable[Door], factors: ScaleFactors) -> Tuple[Door, ...]:
    return tuple(
        replace(
            door,
            x=door.x * factors.x,
            y=door.y * factors.y,
            width=door.width * factors.opening,
        )
        for door in doors
    )


def scale_windows(windows: Iterable[Window], factors: ScaleFactors) -> Tuple[Window, ...]:
    return tuple(
        replace(
            window,
            x=window.x * factors.x,
            y=window.y * factors.y,
            width=window.width * factors.opening,
        )
        for window in windows
    )


def scale_fixtures(fixtures: Iterable[Fixture], factors: ScaleFactors) -> Tuple[Fixture, ...]:
    # Fixtures are repositioned only; their size and rotation are fixed.
    return tuple(
        replace(fixture, x=fixture.x * factors.x, y=fixture.y * factors.y)
        for fixture in fixtures
    )


def scale_furniture(furniture: Iterable[Furniture], factors: ScaleFactors) -> Tuple[Furniture, ...]:
    return tuple(
        replace(
            item,
            x=item.x * factors.x,
            y=item.y * factors.y,
            width=item.width * factors.x,
            height=item.height * factors.y,
        )
        for item in furniture
    )


def scale_template(
    template: Template,
    target_width: float,
    target_height: float,
    specifications: Optional[DesignSpecifications] = None,
) -> Design:
    """Scale a template's geometry to the requested overall dimensions.

    Args:
        template: Template holding the original geometry.
        target_width: Requested overall width.
        target_height: Requested overall height.
        specifications: Specifications attached to the resulting design.
            Defaults to the target size with default wall and ceiling
            values.

    Returns:
        A new Design; the template is left untouched.

    Raises:
        ValueError: If a target dimension is not positive.
    """
    if target_width <= 0 or target_height <= 0:
        raise ValueError(
            f"Overall dimensions must be positive, got {target_width} x {target_height}"
        )
    if specifications is None:
        specifications = DesignSpecifications(
            overall_width=target_width, overall_height=target_height
        )

    factors = compute_scale_factors(template.rooms, target_width, target_height)
    return Design(
        rooms=scale_rooms(template.rooms, factors),
        doors=scale_doors(template.doors, factors),
        windows=scale_windows(template.windows, factors),
        fixtures=scale_fixtures(template.fixtures, factors),
        furniture=scale_furniture(template.furniture, factors),
        specifications=specifications,
        template_id=template.id,
    )
