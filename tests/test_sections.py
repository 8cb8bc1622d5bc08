"""Tests for layout/sections.py."""
import pytest

from floordesigner.layout.sections import (
    calculate_shape_area,
    generate_sections,
    list_shapes,
    normalize_shape,
)


def _by_id(sections):
    return {section.id: section for section in sections}


class TestRectangular:
    def test_single_main_section(self):
        sections = generate_sections("Rectangular", 12, 10)
        assert len(sections) == 1
        main = sections[0]
        assert (main.id, main.x, main.y, main.width, main.height) == ("main", 0, 0, 12, 10)

    def test_regular_is_alias(self):
        assert generate_sections("Regular", 12, 10) == generate_sections("Rectangular", 12, 10)
        assert normalize_shape("Regular") == "Rectangular"


class TestLShaped:
    def test_wings(self):
        sections = _by_id(generate_sections("L-Shaped", 12, 10))
        horizontal, vertical = sections["horizontal"], sections["vertical"]
        assert (horizontal.x, horizontal.y) == (0, 0)
        assert horizontal.width == pytest.approx(12)
        assert horizontal.height == pytest.approx(6)
        assert (vertical.x, vertical.y) == (0, pytest.approx(6))
        assert vertical.width == pytest.approx(7.2)
        assert vertical.height == pytest.approx(4)

    def test_shape_area(self):
        sections = generate_sections("L-Shaped", 12, 10)
        assert calculate_shape_area(sections) == pytest.approx(72 + 28.8)


class TestHShaped:
    def test_wings_and_bridge(self):
        sections = _by_id(generate_sections("H-Shaped", 10, 20))
        left, bridge, right = sections["left-wing"], sections["bridge"], sections["right-wing"]
        assert (left.x, left.y, left.width, left.height) == (0, 0, pytest.approx(3), 20)
        assert bridge.x == pytest.approx(3)
        assert bridge.y == pytest.approx(7)
        assert bridge.width == pytest.approx(4)
        assert bridge.height == pytest.approx(6)
        assert right.x == pytest.approx(7)
        assert right.width == pytest.approx(3)
        assert right.height == 20


class TestMShaped:
    def test_center_and_wings(self):
        sections = _by_id(generate_sections("M-Shaped", 12, 10))
        center, left, right = sections["center"], sections["left-wing"], sections["right-wing"]
        assert (center.x, center.width, center.height) == (pytest.approx(3), pytest.approx(6), 10)
        assert (left.x, left.y, left.width) == (0, 0, pytest.approx(3))
        assert left.height == pytest.approx(6)
        assert right.x == pytest.approx(9)
        assert right.height == pytest.approx(6)


class TestErrors:
    def test_unknown_shape(self):
        with pytest.raises(ValueError, match="Unknown floor plan shape"):
            generate_sections("U-Shaped", 12, 10)

    @pytest.mark.parametrize("width,height", [(0, 10), (12, 0), (-1, 5)])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ValueError):
            generate_sections("Rectangular", width, height)


def test_list_shapes():
    assert list_shapes() == ["Rectangular", "L-Shaped", "H-Shaped", "M-Shaped"]
