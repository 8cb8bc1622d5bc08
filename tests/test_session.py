"""Tests for engine/session.py."""
import asyncio
import threading

import pytest

from floordesigner.engine.session import DesignSession
from floordesigner.io.store import InMemoryTemplateStore, TemplateService


class GatedStore(InMemoryTemplateStore):
    """In-memory store whose lookups block until their BHK type is released."""

    def __init__(self, templates, gated=()):
        super().__init__(templates)
        self.gates = {bhk: threading.Event() for bhk in gated}

    def latest_by_bhk(self, bhk_type):
        gate = self.gates.get(bhk_type)
        if gate is not None:
            gate.wait(timeout=5)
        return super().latest_by_bhk(bhk_type)


class TestTemplateLoading:
    def test_load_template(self, service):
        session = DesignSession(service)
        template = asyncio.run(session.load_template("3BHK"))
        assert template.id == "fallback-3bhk-1"
        assert session.bhk_type == "3BHK"
        assert session.loading is False

    def test_missing_template_clears_canvas(self, service):
        session = DesignSession(service)
        asyncio.run(session.load_template("2BHK"))
        asyncio.run(session.load_template("5BHK+"))
        assert session.template is None
        assert session.design.rooms == ()

    def test_stale_response_discarded(self, packaged_templates):
        store = GatedStore(packaged_templates, gated=["2BHK"])
        session = DesignSession(TemplateService(store))

        async def scenario():
            slow = asyncio.create_task(session.load_template("2BHK"))
            await asyncio.sleep(0)
            await session.load_template("3BHK")
            store.gates["2BHK"].set()
            await slow

        asyncio.run(scenario())
        assert session.template.id == "fallback-3bhk-1"

    def test_resolve_with_old_token(self, template_2bhk, service):
        session = DesignSession(service)
        first = session.begin_template_request()
        second = session.begin_template_request()
        assert session.resolve_template_request(first, template_2bhk) is False
        assert session.template is None
        assert session.loading is True
        assert session.resolve_template_request(second, template_2bhk) is True
        assert session.loading is False


class TestDesign:
    def test_scaled_to_specifications(self, template_2bhk, service):
        session = DesignSession(service)
        session.template = template_2bhk
        session.update_specifications(overall_width=22, overall_height=19)
        assert session.design.bounds.width == pytest.approx(22)
        assert session.design.bounds.height == pytest.approx(19)

    def test_unit_change_does_not_rescale(self, template_2bhk, service):
        session = DesignSession(service)
        session.template = template_2bhk
        before = session.design
        session.update_specifications(unit="feet", wall_thickness=20, ceiling_height=2.7)
        after = session.design
        assert after.rooms is before.rooms
        assert after.specifications.unit == "feet"

    def test_cached_while_unchanged(self, template_2bhk, service):
        session = DesignSession(service)
        session.template = template_2bhk
        assert session.design is session.design

    def test_invalid_dimensions_rejected(self, service):
        session = DesignSession(service)
        with pytest.raises(ValueError):
            session.update_specifications(overall_width=0)
        assert session.specifications.overall_width == 12.0

    def test_shape_layout_follows_selection(self, service):
        session = DesignSession(service, shape="L-Shaped")
        layout = session.shape_layout()
        assert layout.shape == "L-Shaped"
        assert len(layout.rooms) == 4
