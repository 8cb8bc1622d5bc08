"""Tests for layout/placement.py and layout/validators.py."""
import math

import pytest

from floordesigner.core.catalogue import REQUIRED_ROOM_TYPES
from floordesigner.core.errors import InvalidLayout, LayoutError
from floordesigner.core.model import Room, Section
from floordesigner.geom.rect import contains, find_overlaps
from floordesigner.layout import (
    SHAPE_LAYOUTS,
    build_shape_layout,
    find_layout_issues,
    generate_sections,
    place_rooms_in_shape,
    validate_all,
    validate_shape_layout,
)

SHAPES = ["Rectangular", "Regular", "L-Shaped", "H-Shaped", "M-Shaped"]
SIZES = [(12, 10), (8, 6), (20, 15), (30, 25), (10, 20)]


def _layout(shape, width, height):
    sections = generate_sections(shape, width, height)
    return sections, place_rooms_in_shape(shape, sections, width, height)


# ============================================================
# Properties over every shape and size
# ============================================================

@pytest.mark.parametrize("shape", SHAPES)
@pytest.mark.parametrize("width,height", SIZES)
class TestLayoutProperties:
    def test_no_overlap(self, shape, width, height):
        _, rooms = _layout(shape, width, height)
        assert find_overlaps(rooms) == []

    def test_every_room_inside_a_section(self, shape, width, height):
        sections, rooms = _layout(shape, width, height)
        for room in rooms:
            assert any(contains(section, room) for section in sections), room

    def test_complete(self, shape, width, height):
        _, rooms = _layout(shape, width, height)
        assert {room.type for room in rooms} == REQUIRED_ROOM_TYPES

    def test_valid(self, shape, width, height):
        sections, rooms = _layout(shape, width, height)
        assert validate_shape_layout(rooms, sections)
        assert validate_all(rooms, sections)


# ============================================================
# Concrete scenarios
# ============================================================

class TestRectangular12x10:
    def test_table_order_and_ids(self):
        _, rooms = _layout("Rectangular", 12, 10)
        assert [room.id for room in rooms] == ["room-1", "room-2", "room-3", "room-4"]
        assert [room.type for room in rooms] == ["garage", "kitchen", "living", "maid-room"]

    def test_rooms_lined_up_left_to_right(self):
        _, rooms = _layout("Rectangular", 12, 10)
        garage = rooms[0]
        assert (garage.x, garage.y) == (0.5, 0.5)
        for left, right in zip(rooms, rooms[1:]):
            assert right.x == pytest.approx(left.x + left.width + 0.5)
        assert rooms[-1].x + rooms[-1].width <= 11.5 + 1e-9

    def test_living_room_gets_its_minimum_width(self):
        _, rooms = _layout("Rectangular", 12, 10)
        living = rooms[2]
        assert living.name == "Living Room"
        assert living.width == pytest.approx(3.0)

    def test_colors_from_catalogue(self):
        _, rooms = _layout("Rectangular", 12, 10)
        assert rooms[0].color == "#9CA3AF"
        assert rooms[2].color == "#BFDBFE"

    def test_narrow_slots_reported_below_minimum(self):
        sections, rooms = _layout("Rectangular", 12, 10)
        issues = find_layout_issues(rooms, sections)
        assert issues
        assert {issue.kind for issue in issues} == {"below-minimum"}
        assert "room-1" in {room_id for issue in issues for room_id in issue.room_ids}


class TestLShaped12x10:
    def test_living_room_in_horizontal_wing(self):
        _, rooms = _layout("L-Shaped", 12, 10)
        living = next(room for room in rooms if room.type == "living")
        assert (living.x, living.y) == (0.5, 0.5)
        assert living.width == pytest.approx(math.sqrt(27))
        assert living.height == pytest.approx(4.0)

    def test_garage_and_maid_in_vertical_wing(self):
        sections, rooms = _layout("L-Shaped", 12, 10)
        vertical = next(section for section in sections if section.id == "vertical")
        for room in rooms:
            if room.type in ("garage", "maid-room"):
                assert contains(vertical, room)

    def test_kitchen_follows_living_room(self):
        _, rooms = _layout("L-Shaped", 12, 10)
        living, kitchen = rooms[0], rooms[1]
        assert kitchen.x == pytest.approx(living.x + living.width + 0.5)


class TestHShaped12x10:
    def test_living_slot_is_share_of_free_extent(self):
        _, rooms = _layout("H-Shaped", 12, 10)
        living, kitchen = rooms[0], rooms[1]
        assert (living.x, living.y) == (pytest.approx(0.3), pytest.approx(0.3))
        # Slot is 60% of 10 - 3 x 0.3; the target width is clamped to 90% of the free 3.0
        assert living.width == pytest.approx(3.0)
        assert living.height == pytest.approx(0.8 * 3.0 * 0.6 * 9.1 / 2.7)
        assert kitchen.y == pytest.approx(living.y + living.height + 0.3)


class TestErrors:
    def test_unknown_shape(self):
        with pytest.raises(ValueError):
            place_rooms_in_shape("Star", [], 12, 10)

    def test_missing_section(self):
        sections = [Section("main", "Main Section", 0, 0, 12, 10)]
        with pytest.raises(LayoutError, match="no section"):
            place_rooms_in_shape("L-Shaped", sections, 12, 10)

    def test_too_small_for_padding(self):
        with pytest.raises(LayoutError):
            build_shape_layout("Rectangular", 2, 2)

    def test_layout_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_shape_layout("Rectangular", 2, 2)


class TestValidators:
    def test_missing_room_type(self):
        sections, rooms = _layout("Rectangular", 12, 10)
        assert not validate_shape_layout(rooms[:3], sections)
        issues = find_layout_issues(rooms[:3], sections)
        assert "missing-room" in {issue.kind for issue in issues}

    def test_room_outside_sections(self):
        sections, rooms = _layout("Rectangular", 12, 10)
        stray = Room("room-9", "Shed", "storage", 11, 9, 3, 3)
        assert not validate_shape_layout(rooms + [stray], sections)

    def test_overlap_detected(self):
        sections, rooms = _layout("Rectangular", 12, 10)
        duplicate = Room("room-9", "Copy", "garage", rooms[0].x, rooms[0].y, 1, 1)
        with pytest.raises(InvalidLayout) as excinfo:
            validate_all(rooms + [duplicate], sections)
        kinds = {issue.kind for issue in excinfo.value.issues}
        assert "overlap" in kinds

    def test_strict_rejects_undersized(self):
        sections, rooms = _layout("Rectangular", 12, 10)
        with pytest.raises(InvalidLayout):
            validate_all(rooms, sections, allow_undersized=False)


class TestShapeLayout:
    def test_to_dict(self):
        data = build_shape_layout("Regular", 12, 10).to_dict()
        assert data["shape"] == "Rectangular"
        assert data["valid"] is True
        assert len(data["rooms"]) == 4
        assert data["shapeArea"] == pytest.approx(120)
        assert data["totalArea"] == pytest.approx(sum(r["width"] * r["height"] for r in data["rooms"]))

    def test_every_shape_has_a_table(self):
        assert set(SHAPE_LAYOUTS) == {"Rectangular", "L-Shaped", "H-Shaped", "M-Shaped"}
