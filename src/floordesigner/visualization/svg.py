"""SVG rendering of floor plan designs.

Architectural symbols are drawn by per-kind renderers held in a registry.
Each renderer appends its drawable elements to a parent ``<g>`` and
returns the group it created, so new symbol kinds can be plugged in with
``register_renderer`` without touching the canvas code.

Coordinates are written in design units (meters or feet); the canvas
viewBox adds one unit of padding around the footprint.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Dict, NamedTuple

from ..core.model import Design, Door, Fixture, Furniture, Room, Window
from ..geom.primitives import format_area

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

CANVAS_PADDING = 1.0
GRID_COLOR = "#e2e8f0"
WALL_COLOR = "#334155"
BOUNDARY_COLOR = "#0f172a"
ARC_COLOR = "#94A3B8"
GLASS_COLOR = "#E0F2FE"
FIXTURE_STROKE = "#64748B"
FURNITURE_STROKE = "#94A3B8"
LABEL_COLOR = "#1e293b"
MUTED_COLOR = "#64748b"

LENGTH_LABELS = {"meters": "m", "feet": "ft"}


class RenderContext(NamedTuple):
    """Drawing parameters shared by all renderers.

    Attributes:
        wall_thickness: Wall thickness in design units.
        unit: Design unit, used for labels.
    """

    wall_thickness: float
    unit: str = "meters"


Renderer = Callable[[ET.Element, Any, RenderContext], ET.Element]


def _tag(name: str) -> str:
    return "{%s}%s" % (SVG_NS, name)


def _num(value: float) -> str:
    """Format a coordinate compactly (no trailing zeros)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _element(parent: ET.Element, name: str, **attrib: Any) -> ET.Element:
    # Attribute names use underscores for dashes (stroke_width -> stroke-width)
    attributes = {
        key.replace("_", "-"): _num(value) if isinstance(value, float) else str(value)
        for key, value in attrib.items()
    }
    return ET.SubElement(parent, _tag(name), attrib=attributes)


def _group(parent: ET.Element, css_class: str, **attrib: Any) -> ET.Element:
    return _element(parent, "g", **{"class": css_class}, **attrib)


def render_room(parent: ET.Element, room: Room, ctx: RenderContext) -> ET.Element:
    group = _group(parent, "room", id=room.id)
    _element(
        group, "rect",
        x=float(room.x), y=float(room.y),
        width=float(room.width), height=float(room.height),
        fill=room.color, stroke=WALL_COLOR, stroke_width=float(ctx.wall_thickness),
    )
    cx = room.x + room.width / 2
    cy = room.y + room.height / 2
    length_label = LENGTH_LABELS.get(ctx.unit, "m")

    name = _element(
        group, "text", x=cx, y=cy - 0.2, text_anchor="middle",
        font_size="0.35", font_weight="600", fill=LABEL_COLOR,
    )
    name.text = room.name
    dims = _element(
        group, "text", x=cx, y=cy + 0.3, text_anchor="middle",
        font_size="0.25", fill=MUTED_COLOR,
    )
    dims.text = f"{room.width:.1f} × {room.height:.1f} {length_label}"
    area = _element(
        group, "text", x=cx, y=cy + 0.65, text_anchor="middle",
        font_size="0.22", fill=MUTED_COLOR,
    )
    area.text = format_area(room.area, ctx.unit)
    return group


def _door_paths(door: Door) -> tuple:
    x, y, w = door.x, door.y, door.width
    if door.wall_side in ("north", "south"):
        opening = f"M {_num(x)} {_num(y)} L {_num(x + w)} {_num(y)}"
        # North doors swing down when opening inward, south doors swing up
        swing_down = (door.wall_side == "north") == door.opens_inward
        sweep, end_y = ("1", y + w) if swing_down else ("0", y - w)
        arc = (
            f"M {_num(x)} {_num(y)} A {_num(w)} {_num(w)} 0 0 {sweep} "
            f"{_num(x + w)} {_num(end_y)} L {_num(x + w)} {_num(y)}"
        )
    else:
        opening = f"M {_num(x)} {_num(y)} L {_num(x)} {_num(y + w)}"
        # West doors swing right when opening inward, east doors swing left
        swing_right = (door.wall_side == "west") == door.opens_inward
        sweep, end_x = ("1", x + w) if swing_right else ("0", x - w)
        arc = (
            f"M {_num(x)} {_num(y)} A {_num(w)} {_num(w)} 0 0 {sweep} "
            f"{_num(end_x)} {_num(y + w)} L {_num(x)} {_num(y + w)}"
        )
    return opening, arc


def render_door(parent: ET.Element, door: Door, ctx: RenderContext) -> ET.Element:
    group = _group(parent, "door", id=door.id)
    opening, arc = _door_paths(door)
    _element(
        group, "path", d=opening, stroke="#FFFFFF",
        stroke_width=float(ctx.wall_thickness * 0.8), fill="none",
    )
    _element(
        group, "path", d=arc, stroke=ARC_COLOR, stroke_width="0.02",
        fill="none", stroke_dasharray="0.1 0.05",
    )
    return group


def render_window(parent: ET.Element, window: Window, ctx: RenderContext) -> ET.Element:
    group = _group(parent, "window", id=window.id)
    glass = ctx.wall_thickness * 0.3
    frame = "0.05"
    x, y, w = window.x, window.y, window.width

    if window.wall_side in ("north", "south"):
        _element(
            group, "rect", x=float(x), y=y - glass / 2, width=float(w), height=float(glass),
            fill=GLASS_COLOR, stroke=WALL_COLOR, stroke_width=frame,
        )
        if window.type == "sliding":
            _element(
                group, "line", x1=x + w / 2, y1=y - glass / 2, x2=x + w / 2, y2=y + glass / 2,
                stroke=WALL_COLOR, stroke_width=frame,
            )
    else:
        _element(
            group, "rect", x=x - glass / 2, y=float(y), width=float(glass), height=float(w),
            fill=GLASS_COLOR, stroke=WALL_COLOR, stroke_width=frame,
        )
        if window.type == "sliding":
            _element(
                group, "line", x1=x - glass / 2, y1=y + w / 2, x2=x + glass / 2, y2=y + w / 2,
                stroke=WALL_COLOR, stroke_width=frame,
            )
    return group


def render_fixture(parent: ET.Element, fixture: Fixture, ctx: RenderContext) -> ET.Element:
    group = _group(parent, "fixture", id=fixture.id)
    body = _element(
        group, "g",
        transform=f"translate({_num(fixture.x)},{_num(fixture.y)}) rotate({_num(fixture.rotation)})",
    )
    line = {"stroke": FIXTURE_STROKE, "stroke_width": "0.02"}

    if fixture.type == "toilet":
        _element(body, "ellipse", cx="0", cy="-0.15", rx="0.25", ry="0.35", fill="#FFFFFF", **line)
        _element(body, "rect", x="-0.2", y="0.15", width="0.4", height="0.25", rx="0.05",
                 fill="#FFFFFF", **line)
    elif fixture.type in ("sink", "kitchen-sink"):
        sink_width = 0.8 if fixture.type == "kitchen-sink" else 0.5
        _element(body, "rect", x=-sink_width / 2, y="-0.3", width=sink_width, height="0.6",
                 rx="0.05", fill="#FFFFFF", **line)
        _element(body, "ellipse", cx="0", cy="0", rx=sink_width * 0.3, ry="0.2",
                 fill="#E2E8F0", **line)
    elif fixture.type == "shower":
        _element(body, "rect", x="-0.45", y="-0.45", width="0.9", height="0.9", fill="#F1F5F9", **line)
        _element(body, "circle", cx="0", cy="-0.3", r="0.08", fill=ARC_COLOR)
        _element(body, "line", x1="-0.05", y1="-0.25", x2="0.05", y2="-0.15",
                 stroke=ARC_COLOR, stroke_width="0.02")
        _element(body, "line", x1="0.05", y1="-0.25", x2="-0.05", y2="-0.15",
                 stroke=ARC_COLOR, stroke_width="0.02")
    elif fixture.type == "bathtub":
        _element(body, "rect", x="-0.4", y="-0.85", width="0.8", height="1.7", rx="0.1",
                 fill="#FFFFFF", stroke=FIXTURE_STROKE, stroke_width="0.03")
        _element(body, "ellipse", cx="0", cy="0.6", rx="0.1", ry="0.15", fill=ARC_COLOR)
    return group


def render_furniture(parent: ET.Element, item: Furniture, ctx: RenderContext) -> ET.Element:
    group = _group(parent, "furniture", id=item.id)
    w, h = item.width, item.height
    cx, cy = item.x + w / 2, item.y + h / 2
    body = _element(
        group, "g", transform=f"translate({_num(cx)},{_num(cy)}) rotate({_num(item.rotation)})"
    )
    outline = {"stroke": FURNITURE_STROKE, "stroke_width": "0.03"}

    if item.type == "bed":
        _element(body, "rect", x=-w / 2, y=-h / 2, width=float(w), height=float(h),
                 fill="#F1F5F9", rx="0.05", **outline)
        for pillow_x in (-w / 2 + 0.1, w / 2 - w * 0.35 - 0.1):
            _element(body, "rect", x=pillow_x, y=-h / 2 + 0.1, width=w * 0.35, height=h * 0.2,
                     fill="#E2E8F0", stroke=FURNITURE_STROKE, stroke_width="0.02", rx="0.03")
    elif item.type in ("sofa", "chair"):
        stroke_width = "0.03" if item.type == "sofa" else "0.02"
        # Back rest then seat
        _element(body, "rect", x=-w / 2, y=-h / 2, width=float(w), height=h * 0.2,
                 fill="#CBD5E1", stroke=FURNITURE_STROKE, stroke_width=stroke_width)
        _element(body, "rect", x=-w / 2, y=-h / 2 + h * 0.2, width=float(w), height=h * 0.8,
                 fill="#E2E8F0", stroke=FURNITURE_STROKE, stroke_width=stroke_width)
    elif item.type == "dining-table":
        _element(body, "rect", x=-w / 2, y=-h / 2, width=float(w), height=float(h),
                 fill="#F8FAFC", rx="0.08", **outline)
    elif item.type == "desk":
        _element(body, "rect", x=-w / 2, y=-h / 2, width=float(w), height=float(h),
                 fill="#F1F5F9", **outline)

    if item.label:
        label = _element(group, "text", x=cx, y=cy, text_anchor="middle", font_size="0.15",
                         fill=MUTED_COLOR, dominant_baseline="middle")
        label.text = item.label
    return group


def render_north_arrow(parent: ET.Element, x: float, y: float, size: float = 0.8) -> ET.Element:
    group = _group(parent, "north-arrow", transform=f"translate({_num(x)},{_num(y)})")
    _element(group, "circle", cx="0", cy="0", r=size / 2, fill="#FFFFFF",
             stroke=WALL_COLOR, stroke_width="0.04")
    _element(
        group, "path",
        d=f"M 0,{_num(-size / 2.5)} L {_num(-size / 6)},{_num(size / 6)} "
          f"L 0,{_num(-size / 8)} L {_num(size / 6)},{_num(size / 6)} Z",
        fill="#EF4444", stroke="#991B1B", stroke_width="0.02",
    )
    _element(
        group, "path",
        d=f"M 0,{_num(size / 2.5)} L {_num(-size / 6)},{_num(-size / 6)} "
          f"L 0,{_num(size / 8)} L {_num(size / 6)},{_num(-size / 6)} Z",
        fill="#F1F5F9", stroke=WALL_COLOR, stroke_width="0.02",
    )
    text = _element(group, "text", x="0", y=-size / 1.5, text_anchor="middle", font_size="0.3",
                    font_weight="bold", fill=LABEL_COLOR, dominant_baseline="middle")
    text.text = "N"
    return group


def render_dimension_line(
    parent: ET.Element,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    label: str,
    offset: float = 0.3,
) -> ET.Element:
    """Draw a dimension line with extension lines, arrows and a label.

    Horizontal measurements are drawn ``offset`` above the measured line,
    vertical ones ``offset`` to its left.
    """
    group = _group(parent, "dimension-line")
    thin = {"stroke": FIXTURE_STROKE, "stroke_width": "0.01", "stroke_dasharray": "0.05 0.05"}
    mid_x, mid_y = (x1 + x2) / 2, (y1 + y2) / 2

    if abs(y2 - y1) < abs(x2 - x1):
        dim_y = y1 - offset
        _element(group, "line", x1=float(x1), y1=float(y1), x2=float(x1), y2=dim_y - 0.1, **thin)
        _element(group, "line", x1=float(x2), y1=float(y2), x2=float(x2), y2=dim_y - 0.1, **thin)
        _element(group, "line", x1=float(x1), y1=dim_y, x2=float(x2), y2=dim_y,
                 stroke=FIXTURE_STROKE, stroke_width="0.02")
        _element(group, "path", d=f"M {_num(x1)},{_num(dim_y)} l 0.1,-0.05 l 0,0.1 Z", fill=FIXTURE_STROKE)
        _element(group, "path", d=f"M {_num(x2)},{_num(dim_y)} l -0.1,-0.05 l 0,0.1 Z", fill=FIXTURE_STROKE)
        text = _element(group, "text", x=mid_x, y=dim_y - 0.15, text_anchor="middle",
                        font_size="0.18", fill=LABEL_COLOR, font_weight="500")
    else:
        dim_x = x1 - offset
        _element(group, "line", x1=float(x1), y1=float(y1), x2=dim_x - 0.1, y2=float(y1), **thin)
        _element(group, "line", x1=float(x2), y1=float(y2), x2=dim_x - 0.1, y2=float(y2), **thin)
        _element(group, "line", x1=dim_x, y1=float(y1), x2=dim_x, y2=float(y2),
                 stroke=FIXTURE_STROKE, stroke_width="0.02")
        _element(group, "path", d=f"M {_num(dim_x)},{_num(y1)} l -0.05,0.1 l 0.1,0 Z", fill=FIXTURE_STROKE)
        _element(group, "path", d=f"M {_num(dim_x)},{_num(y2)} l -0.05,-0.1 l 0.1,0 Z", fill=FIXTURE_STROKE)
        text_x = dim_x - 0.25
        text = _element(group, "text", x=text_x, y=mid_y, text_anchor="middle",
                        font_size="0.18", fill=LABEL_COLOR, font_weight="500",
                        transform=f"rotate(-90 {_num(text_x)} {_num(mid_y)})")
    text.text = label
    return group


_RENDERERS: Dict[str, Renderer] = {
    "room": render_room,
    "door": render_door,
    "window": render_window,
    "fixture": render_fixture,
    "furniture": render_furniture,
}


def register_renderer(kind: str, renderer: Renderer) -> None:
    """Register a renderer for an entity kind.

    Args:
        kind: Entity kind (e.g. "door").
        renderer: Callable drawing one entity into a parent element.
    """
    _RENDERERS[kind] = renderer


def get_renderer(kind: str) -> Renderer:
    """Get the renderer of an entity kind.

    Raises:
        KeyError: If no renderer is registered for the kind.
    """
    if kind not in _RENDERERS:
        raise KeyError(f"No renderer registered for '{kind}'")
    return _RENDERERS[kind]


def list_renderers() -> list[str]:
    return list(_RENDERERS.keys())


def build_design_svg(design: Design, show_annotations: bool = True) -> ET.Element:
    """Build the SVG element tree of a design.

    Args:
        design: The design to draw.
        show_annotations: Draw the north arrow and overall dimension lines.

    Returns:
        The root ``<svg>`` element.
    """
    specs = design.specifications
    bounds = design.bounds
    # Wall thickness is specified in centimeters
    ctx = RenderContext(wall_thickness=specs.wall_thickness / 100, unit=specs.unit)
    pad = CANVAS_PADDING

    svg = ET.Element(_tag("svg"), attrib={
        "viewBox": f"{_num(-pad)} {_num(-pad)} {_num(bounds.width + pad * 2)} "
                   f"{_num(bounds.height + pad * 2)}",
        "width": _num((bounds.width + pad * 2) * 50),
        "height": _num((bounds.height + pad * 2) * 50),
    })

    defs = _element(svg, "defs")
    pattern = _element(defs, "pattern", id="grid", width="1", height="1",
                       patternUnits="userSpaceOnUse")
    _element(pattern, "path", d="M 1 0 L 0 0 0 1", fill="none", stroke=GRID_COLOR,
             stroke_width="0.02")
    _element(svg, "rect", x="0", y="0", width=float(bounds.width), height=float(bounds.height),
             fill="url(#grid)")

    layers = (
        ("rooms", "room", design.rooms),
        ("furniture", "furniture", design.furniture),
        ("fixtures", "fixture", design.fixtures),
        ("windows", "window", design.windows),
        ("doors", "door", design.doors),
    )
    for layer_name, kind, entities in layers:
        layer = _group(svg, f"layer-{layer_name}")
        renderer = get_renderer(kind)
        for entity in entities:
            renderer(layer, entity, ctx)

    _element(svg, "rect", x="0", y="0", width=float(bounds.width), height=float(bounds.height),
             fill="none", stroke=BOUNDARY_COLOR, stroke_width=float(ctx.wall_thickness * 1.5))

    if show_annotations and design.rooms:
        length_label = LENGTH_LABELS.get(specs.unit, "m")
        render_dimension_line(svg, 0.0, 0.0, bounds.width, 0.0,
                              f"{bounds.width:.1f} {length_label}")
        render_dimension_line(svg, 0.0, 0.0, 0.0, bounds.height,
                              f"{bounds.height:.1f} {length_label}")
        render_north_arrow(svg, bounds.width + pad / 2, -pad / 2, size=0.6)

    return svg


def render_design_svg(design: Design, show_annotations: bool = True) -> str:
    """Render a design as an SVG document string."""
    return ET.tostring(build_design_svg(design, show_annotations), encoding="unicode")


def save_design_svg(design: Design, output_path: Path) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    ET.ElementTree(build_design_svg(design)).write(output_path, encoding="utf-8", xml_declaration=True)
