"""Tests for core/topology.py."""
import pytest

from floordesigner.core.model import Door, Fixture, Furniture, Room
from floordesigner.core.topology import (
    build_room_graph,
    door_connections,
    find_misplaced_contents,
    rooms_at_door,
)
from floordesigner.engine.scaling import scale_template


class TestPackagedTemplates:
    def test_contents_inside_their_rooms(self, packaged_templates):
        for template in packaged_templates:
            misplaced = find_misplaced_contents(template.rooms, template.fixtures, template.furniture)
            assert misplaced == [], template.id

    def test_contents_stay_inside_after_scaling(self, template_2bhk):
        design = scale_template(template_2bhk, 16, 8)
        assert find_misplaced_contents(design.rooms, design.fixtures, design.furniture) == []

    def test_living_to_kitchen_door(self, template_2bhk):
        graph = build_room_graph(template_2bhk.rooms, template_2bhk.doors)
        assert graph.has_edge("living-1", "kitchen-1")
        assert set(door_connections(graph)["door-2"]) == {"living-1", "kitchen-1"}

    def test_every_room_is_a_node(self, template_2bhk):
        graph = build_room_graph(template_2bhk.rooms)
        assert set(graph.nodes) == {room.id for room in template_2bhk.rooms}
        assert graph.nodes["kitchen-1"]["type"] == "kitchen"


class TestAdjacency:
    def test_shared_wall_length(self):
        rooms = [Room("a", "A", "living", 0, 0, 4, 4), Room("b", "B", "kitchen", 4, 1, 3, 2)]
        graph = build_room_graph(rooms)
        assert graph.edges["a", "b"]["shared_length"] == pytest.approx(2.0)

    def test_corner_contact_is_not_adjacent(self):
        rooms = [Room("a", "A", "living", 0, 0, 2, 2), Room("b", "B", "kitchen", 2, 2, 2, 2)]
        assert build_room_graph(rooms).number_of_edges() == 0

    def test_exterior_door_connects_nothing(self):
        rooms = [Room("a", "A", "living", 0, 0, 4, 4), Room("b", "B", "kitchen", 4, 0, 3, 4)]
        door = Door("front", "single", 1, 0, 1, "north")
        assert rooms_at_door(door, rooms) == ["a"]
        assert door_connections(build_room_graph(rooms, [door])) == {}


class TestMisplaced:
    def test_fixture_outside_room(self):
        rooms = [Room("bath", "Bath", "bathroom", 0, 0, 2, 2)]
        fixtures = [Fixture("f", "toilet", 3, 1, room_id="bath")]
        assert find_misplaced_contents(rooms, fixtures) == [("f", "bath")]

    def test_unknown_room_reference(self):
        furniture = [Furniture("b", "bed", 0, 0, 1, 1, room_id="ghost")]
        assert find_misplaced_contents([], furniture=furniture) == [("b", "ghost")]

    def test_unreferenced_items_ignored(self):
        fixtures = [Fixture("f", "sink", 50, 50)]
        assert find_misplaced_contents([], fixtures) == []
