"""Command Line Interface for Floor Designer.

This module provides a simple CLI for generating shape layouts, browsing
templates, scaling a template to new overall dimensions and rendering the
result.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import config
from .core.errors import FloorDesignerError, InvalidLayout
from .core.model import DesignSpecifications
from .engine.scaling import scale_template
from .geom.primitives import format_area
from .io.parser import save_design
from .io.store import (
    InMemoryTemplateStore,
    JsonTemplateStore,
    TemplateService,
    default_fallback_templates,
)
from .layout import build_shape_layout, generate_sections, validate_all
from .visualization.generator import generate_design_image
from .visualization.svg import save_design_svg

app = typer.Typer(
    name="floordesigner",
    help="A CLI tool for floor plan layout, template scaling and rendering",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Floor plan designer."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _service(templates: Optional[Path]) -> TemplateService:
    fallback = default_fallback_templates()
    path = templates or (Path(config.TEMPLATES_PATH) if config.TEMPLATES_PATH else None)
    if path is None:
        return TemplateService(InMemoryTemplateStore(fallback), fallback=fallback)
    return TemplateService(JsonTemplateStore(path), fallback=fallback)


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.command()
def sections(
    shape: str = typer.Option(config.DEFAULT_SHAPE, "--shape", "-s", help="Outline shape"),
    width: float = typer.Option(config.DEFAULT_OVERALL_WIDTH, "--width", "-w", help="Overall width"),
    height: float = typer.Option(config.DEFAULT_OVERALL_HEIGHT, "--height", "-h", help="Overall height"),
):
    """Show the sections approximating an outline shape."""
    try:
        generated = generate_sections(shape, width, height)
    except ValueError as e:
        _fail(str(e))

    table = Table(title=f"{shape} {width:g} x {height:g}")
    table.add_column("Section", style="cyan")
    table.add_column("Name")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")
    for section in generated:
        table.add_row(
            section.id, section.name,
            f"{section.x:.2f}", f"{section.y:.2f}",
            f"{section.width:.2f}", f"{section.height:.2f}",
        )
    console.print(table)


@app.command()
def layout(
    shape: str = typer.Option(config.DEFAULT_SHAPE, "--shape", "-s", help="Outline shape"),
    width: float = typer.Option(config.DEFAULT_OVERALL_WIDTH, "--width", "-w", help="Overall width"),
    height: float = typer.Option(config.DEFAULT_OVERALL_HEIGHT, "--height", "-h", help="Overall height"),
    strict: bool = typer.Option(False, "--strict", help="Fail on rooms below their minimum size"),
    output: Optional[Path] = typer.Option(None, "--out", help="Write the layout as JSON"),
):
    """Place the required rooms inside an outline shape."""
    try:
        shape_layout = build_shape_layout(shape, width, height)
    except ValueError as e:
        _fail(str(e))

    table = Table(title=f"{shape_layout.shape} layout {width:g} x {height:g}")
    table.add_column("Room", style="cyan")
    table.add_column("Type")
    table.add_column("Position", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Area", justify="right")
    for room in shape_layout.rooms:
        table.add_row(
            room.name, room.type,
            f"({room.x:.2f}, {room.y:.2f})",
            f"{room.width:.2f} x {room.height:.2f}",
            format_area(room.area),
        )
    console.print(table)

    data = shape_layout.to_dict()
    for issue in data["issues"]:
        console.print(f"[yellow]![/yellow] {issue['message']}")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        console.print(f"[green]✓[/green] Layout saved to {output}")

    try:
        validate_all(shape_layout.rooms, shape_layout.sections, allow_undersized=not strict)
    except InvalidLayout as e:
        _fail(str(e))
    console.print("[bold green]✓ Layout is valid[/bold green]")


@app.command()
def templates(
    bhk_type: Optional[str] = typer.Option(None, "--bhk", "-b", help="Filter by BHK type"),
    property_type: Optional[str] = typer.Option(None, "--property", "-p", help="Filter by property type"),
    source: Optional[Path] = typer.Option(None, "--templates", "-t", help="Path to templates JSON file"),
):
    """List available templates, newest first."""
    found = _service(source).list_templates(bhk_type, property_type)
    if not found:
        console.print("[yellow]No templates found[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("BHK")
    table.add_column("Property")
    table.add_column("Rooms", justify="right")
    table.add_column("Created")
    for template in found:
        table.add_row(
            template.id, template.name, template.bhk_type, template.property_type,
            str(len(template.rooms)), template.created_at.date().isoformat(),
        )
    console.print(table)


def _scaled(bhk_type, width, height, unit, wall_thickness, source):
    try:
        template = _service(source).latest_for_bhk(bhk_type)
    except FloorDesignerError as e:
        _fail(str(e))
    if template is None:
        _fail(f"Template not found for {bhk_type}")
    specifications = DesignSpecifications(
        overall_width=width, overall_height=height, wall_thickness=wall_thickness, unit=unit
    )
    try:
        return scale_template(template, width, height, specifications)
    except ValueError as e:
        _fail(str(e))


@app.command()
def scale(
    bhk_type: str = typer.Option(config.DEFAULT_BHK_TYPE, "--bhk", "-b", help="BHK type"),
    width: float = typer.Option(config.DEFAULT_OVERALL_WIDTH, "--width", "-w", help="Overall width"),
    height: float = typer.Option(config.DEFAULT_OVERALL_HEIGHT, "--height", "-h", help="Overall height"),
    unit: str = typer.Option(config.DEFAULT_UNIT, "--unit", "-u", help="meters or feet"),
    source: Optional[Path] = typer.Option(None, "--templates", "-t", help="Path to templates JSON file"),
    output: Optional[Path] = typer.Option(None, "--out", help="Write the design as JSON"),
):
    """Scale the latest template of a BHK type to new overall dimensions."""
    design = _scaled(bhk_type, width, height, unit, config.DEFAULT_WALL_THICKNESS, source)

    table = Table(title=f"{bhk_type} scaled to {width:g} x {height:g} {unit}")
    table.add_column("Room", style="cyan")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Area", justify="right")
    for room in design.rooms:
        table.add_row(
            room.name, room.type, f"{room.width:.2f} x {room.height:.2f}",
            format_area(room.area, unit),
        )
    console.print(table)
    console.print(f"Total area: {format_area(design.total_area, unit)}")

    if output:
        save_design(design, output)
        console.print(f"[green]✓[/green] Design saved to {output}")


@app.command()
def render(
    bhk_type: str = typer.Option(config.DEFAULT_BHK_TYPE, "--bhk", "-b", help="BHK type"),
    width: float = typer.Option(config.DEFAULT_OVERALL_WIDTH, "--width", "-w", help="Overall width"),
    height: float = typer.Option(config.DEFAULT_OVERALL_HEIGHT, "--height", "-h", help="Overall height"),
    unit: str = typer.Option(config.DEFAULT_UNIT, "--unit", "-u", help="meters or feet"),
    wall_thickness: float = typer.Option(
        config.DEFAULT_WALL_THICKNESS, "--wall", help="Wall thickness in centimeters"
    ),
    source: Optional[Path] = typer.Option(None, "--templates", "-t", help="Path to templates JSON file"),
    output: Path = typer.Option(
        config.OUTPUT_DIR / "design.svg", "--out", help="Output file (.svg or .png)"
    ),
):
    """Render a scaled template as SVG or PNG."""
    design = _scaled(bhk_type, width, height, unit, wall_thickness, source)

    if output.suffix.lower() == ".png":
        if not generate_design_image(design, output):
            _fail(f"Could not write {output}")
    else:
        save_design_svg(design, output)
    console.print(f"[green]✓[/green] Rendered {bhk_type} to {output}")


@app.command()
def serve(
    host: str = typer.Option(config.HOST, "--host", help="Bind address"),
    port: int = typer.Option(config.PORT, "--port", help="Port"),
    source: Optional[Path] = typer.Option(None, "--templates", "-t", help="Path to templates JSON file"),
):
    """Run the HTTP API."""
    from .web import create_app

    service = _service(source) if source else None
    create_app(service).run(host=host, port=port)


if __name__ == "__main__":
    app()
