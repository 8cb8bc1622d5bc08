"""Shared test fixtures for floor designer tests."""
from datetime import datetime

import pytest

from floordesigner.core.model import Door, Fixture, Furniture, Room, Template, Window
from floordesigner.io.store import InMemoryTemplateStore, TemplateService, default_fallback_templates


@pytest.fixture(scope="session")
def packaged_templates():
    """Templates shipped in floordesigner/data/templates.json."""
    return default_fallback_templates()


@pytest.fixture(scope="session")
def template_2bhk(packaged_templates):
    """Latest 2BHK template (fully furnished)."""
    return next(t for t in packaged_templates if t.id == "fallback-2bhk-1")


@pytest.fixture
def service(packaged_templates):
    """Service over the packaged templates, with the same fallback."""
    return TemplateService(InMemoryTemplateStore(packaged_templates), fallback=packaged_templates)


@pytest.fixture
def small_template():
    """10 x 5 template with one of each entity kind."""
    return Template(
        id="small-1",
        name="Small",
        bhk_type="1BHK",
        property_type="Studio",
        shape="Rectangular",
        description="Two rooms side by side",
        rooms=(
            Room("living-1", "Living Room", "living", 0, 0, 6, 5),
            Room("bedroom-1", "Bedroom", "bedroom", 6, 0, 4, 5),
        ),
        doors=(Door("door-1", "single", 6, 2, 1.0, "west"),),
        windows=(Window("win-1", "sliding", 2, 0, 2.0, "north"),),
        fixtures=(Fixture("fix-1", "sink", 8, 4, 90, room_id="bedroom-1"),),
        furniture=(Furniture("furn-1", "sofa", 1, 1, 2, 1, room_id="living-1"),),
        created_at=datetime(2024, 1, 1),
    )
