"""
Web API for the floor designer
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from . import __version__, config
from .core.errors import FloorDesignerError, LayoutError, TemplateStoreError
from .core.model import DesignSpecifications
from .engine.scaling import scale_template
from .io.store import (
    InMemoryTemplateStore,
    JsonTemplateStore,
    TemplateService,
    default_fallback_templates,
)
from .layout import build_shape_layout
from .visualization.svg import render_design_svg

LOGGER = logging.getLogger(__name__)

UNITS = ("meters", "feet")


def build_default_service() -> TemplateService:
    """Template service from the configured store, falling back to packaged data."""
    fallback = default_fallback_templates()
    if config.TEMPLATES_PATH:
        store = JsonTemplateStore(config.TEMPLATES_PATH)
    else:
        store = InMemoryTemplateStore(fallback)
    return TemplateService(store, fallback=fallback)


def _positive_number(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"'{key}' must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{key}' must be a number") from e
    if number <= 0:
        raise ValueError(f"'{key}' must be positive")
    return number


def specifications_from_request(data: Dict[str, Any]) -> DesignSpecifications:
    """Read design specifications from a camelCase request body.

    Raises:
        ValueError: If a value is missing its type or out of range.
    """
    unit = data.get("unit", config.DEFAULT_UNIT)
    if unit not in UNITS:
        raise ValueError(f"'unit' must be one of {', '.join(UNITS)}")
    return DesignSpecifications(
        overall_width=_positive_number(data, "overallWidth", config.DEFAULT_OVERALL_WIDTH),
        overall_height=_positive_number(data, "overallHeight", config.DEFAULT_OVERALL_HEIGHT),
        wall_thickness=_positive_number(data, "wallThickness", config.DEFAULT_WALL_THICKNESS),
        ceiling_height=_positive_number(data, "ceilingHeight", config.DEFAULT_CEILING_HEIGHT),
        unit=unit,
    )


def create_app(service: Optional[TemplateService] = None) -> Flask:
    """Create the Flask application.

    Args:
        service: Template service to answer template queries. Defaults to
            the configured store with the packaged templates as fallback.

    Returns:
        The configured Flask app.
    """
    app = Flask(__name__)
    CORS(app)
    templates = service if service is not None else build_default_service()

    def _scaled_design():
        data = request.get_json(silent=True) or {}
        bhk_type = data.get("bhkType")
        if not bhk_type:
            return None, (jsonify({"error": "BHK type is required"}), 400)
        try:
            specifications = specifications_from_request(data)
        except ValueError as e:
            return None, (jsonify({"error": str(e)}), 400)
        try:
            template = templates.latest_for_bhk(bhk_type)
        except TemplateStoreError as e:
            LOGGER.error("Error fetching template %s: %s", bhk_type, e)
            return None, (jsonify({"error": "Failed to fetch template"}), 500)
        if template is None:
            return None, (jsonify({"error": "Template not found"}), 404)
        design = scale_template(
            template,
            specifications.overall_width,
            specifications.overall_height,
            specifications,
        )
        return design, None

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok", "version": __version__})

    @app.route("/api/templates", methods=["GET"])
    def list_templates():
        """List templates, newest first, optionally filtered"""
        bhk_type = request.args.get("bhkType") or None
        property_type = request.args.get("propertyType") or None
        found = templates.list_templates(bhk_type, property_type)
        return jsonify([template.to_dict() for template in found])

    @app.route("/api/templates/<bhk_type>", methods=["GET"])
    def get_template(bhk_type: str):
        """Latest template of a BHK type"""
        try:
            template = templates.latest_for_bhk(bhk_type)
        except TemplateStoreError as e:
            LOGGER.error("Error fetching template %s: %s", bhk_type, e)
            return jsonify({"error": "Failed to fetch template"}), 500
        if template is None:
            return jsonify({"error": "Template not found"}), 404
        return jsonify(template.to_dict())

    @app.route("/api/layout", methods=["POST"])
    def layout():
        """Sections and required rooms for an outline shape"""
        data = request.get_json(silent=True) or {}
        try:
            width = _positive_number(data, "overallWidth", config.DEFAULT_OVERALL_WIDTH)
            height = _positive_number(data, "overallHeight", config.DEFAULT_OVERALL_HEIGHT)
            shape = data.get("shape", config.DEFAULT_SHAPE)
            if not isinstance(shape, str):
                raise ValueError("'shape' must be a string")
            shape_layout = build_shape_layout(shape, width, height)
        except LayoutError as e:
            return jsonify({"error": str(e)}), 422
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(shape_layout.to_dict())

    @app.route("/api/design", methods=["POST"])
    def design():
        """Latest template of a BHK type scaled to the requested size"""
        scaled, error = _scaled_design()
        if error is not None:
            return error
        return jsonify(scaled.to_dict())

    @app.route("/api/design/svg", methods=["POST"])
    def design_svg():
        scaled, error = _scaled_design()
        if error is not None:
            return error
        return Response(render_design_svg(scaled), mimetype="image/svg+xml")

    @app.route("/api/designs", methods=["POST"])
    def save_design():
        return jsonify({"error": "Saving designs is not available"}), 501

    @app.route("/api/designs/<design_id>/export", methods=["GET"])
    def export_design(design_id: str):
        return jsonify({"error": "Exporting designs is not available"}), 501

    @app.errorhandler(FloorDesignerError)
    def handle_floor_designer_error(error):
        LOGGER.error("Unhandled floor designer error: %s", error)
        return jsonify({"error": str(error)}), 500

    return app


def main() -> None:
    """Run the development server"""
    logging.basicConfig(level=config.LOG_LEVEL)
    app = create_app()
    app.run(host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
