"""Tests for web.py (Flask test client)."""
import pytest

from floordesigner.core.errors import TemplateStoreError
from floordesigner.io.store import InMemoryTemplateStore, TemplateService
from floordesigner.web import create_app


class BrokenStore:
    def latest_by_bhk(self, bhk_type):
        raise TemplateStoreError("connection refused")

    def find(self, bhk_type=None, property_type=None):
        raise TemplateStoreError("connection refused")


@pytest.fixture
def client(service):
    app = create_app(service)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def broken_client(packaged_templates):
    app = create_app(TemplateService(BrokenStore(), fallback=packaged_templates))
    app.config["TESTING"] = True
    return app.test_client()


class TestTemplates:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "ok"

    def test_list_filtered(self, client):
        response = client.get("/api/templates?bhkType=2BHK")
        assert response.status_code == 200
        ids = [t["id"] for t in response.get_json()]
        assert ids == ["fallback-2bhk-1", "seed-2bhk-standard"]

    def test_list_falls_back_when_store_fails(self, broken_client):
        response = broken_client.get("/api/templates?bhkType=3BHK")
        assert response.status_code == 200
        assert [t["id"] for t in response.get_json()] == ["fallback-3bhk-1"]

    def test_latest(self, client):
        response = client.get("/api/templates/3BHK")
        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == "fallback-3bhk-1"
        assert len(data["roomsData"]) == 12
        assert data["doorsData"][0]["wallSide"] == "north"

    def test_latest_not_found(self, client):
        response = client.get("/api/templates/5BHK+")
        assert response.status_code == 404
        assert response.get_json() == {"error": "Template not found"}

    def test_latest_store_failure(self, broken_client):
        response = broken_client.get("/api/templates/2BHK")
        assert response.status_code == 500
        assert response.get_json() == {"error": "Failed to fetch template"}


class TestLayout:
    def test_layout(self, client):
        response = client.post("/api/layout", json={"shape": "H-Shaped", "overallWidth": 12, "overallHeight": 10})
        assert response.status_code == 200
        data = response.get_json()
        assert data["valid"] is True
        assert [s["id"] for s in data["sections"]] == ["left-wing", "bridge", "right-wing"]
        assert len(data["rooms"]) == 4

    def test_unknown_shape(self, client):
        response = client.post("/api/layout", json={"shape": "Star"})
        assert response.status_code == 400

    def test_non_string_shape(self, client):
        response = client.post("/api/layout", json={"shape": ["L-Shaped"]})
        assert response.status_code == 400
        assert "shape" in response.get_json()["error"]

    def test_bad_dimension(self, client):
        response = client.post("/api/layout", json={"shape": "L-Shaped", "overallWidth": "wide"})
        assert response.status_code == 400

    def test_too_small(self, client):
        response = client.post("/api/layout", json={"overallWidth": 2, "overallHeight": 2})
        assert response.status_code == 422


class TestDesign:
    def test_scaled_design(self, client):
        response = client.post("/api/design", json={"bhkType": "2BHK", "overallWidth": 22, "overallHeight": 19})
        assert response.status_code == 200
        data = response.get_json()
        assert data["templateId"] == "fallback-2bhk-1"
        assert data["bounds"]["width"] == pytest.approx(22)
        assert data["bounds"]["height"] == pytest.approx(19)
        assert data["specifications"]["unit"] == "meters"

    def test_missing_bhk(self, client):
        assert client.post("/api/design", json={}).status_code == 400

    def test_bad_unit(self, client):
        response = client.post("/api/design", json={"bhkType": "2BHK", "unit": "cubits"})
        assert response.status_code == 400

    def test_not_found(self, client):
        response = client.post("/api/design", json={"bhkType": "4BHK"})
        assert response.status_code == 404

    def test_svg(self, client):
        response = client.post("/api/design/svg", json={"bhkType": "3BHK"})
        assert response.status_code == 200
        assert response.mimetype == "image/svg+xml"
        assert b"<svg" in response.data

    def test_save_and_export_disabled(self, client):
        assert client.post("/api/designs", json={}).status_code == 501
        assert client.get("/api/designs/abc/export").status_code == 501


def test_empty_store_lists_nothing_without_fallback():
    app = create_app(TemplateService(InMemoryTemplateStore([])))
    response = app.test_client().get("/api/templates")
    assert response.status_code == 200
    assert response.get_json() == []
