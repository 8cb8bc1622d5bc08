"""Tests for layout/sizing.py."""
import math

import pytest

from floordesigner.core.catalogue import REQUIRED_ROOMS
from floordesigner.layout.sizing import calculate_room_dimensions


class TestRoomDimensions:
    def test_unknown_key_returns_available_space(self):
        dims = calculate_room_dimensions("sauna", 4.0, 3.0)
        assert dims == (4.0, 3.0, 0.0)

    def test_tight_space_uses_minimum(self):
        # 3 x 4 = 12 is below 1.2 x the living room minimum area
        dims = calculate_room_dimensions("living", 3.0, 4.0)
        assert dims.width == 3.0
        assert dims.height == 4.0
        assert dims.area == 12.0

    def test_ample_space_follows_aspect_ratio(self):
        dims = calculate_room_dimensions("living", 10.0, 10.0)
        # target = min(0.8 * 100, 1.5 * 12) = 18
        assert dims.width == pytest.approx(math.sqrt(18 * 1.5))
        # 18 / sqrt(27) is below the minimum height of 4
        assert dims.height == pytest.approx(4.0)
        assert dims.area == pytest.approx(18.0)

    def test_width_clamped_to_available(self):
        dims = calculate_room_dimensions("garage", 4.0, 10.0)
        # Preferred width sqrt(22.5 * 1.8) does not fit; 90% of 4 is used
        # and then floored back up to the garage minimum width
        assert dims.width == 5.0
        assert dims.height == pytest.approx(22.5 / 3.6)
        assert dims.area == pytest.approx(22.5)

    def test_height_clamped_to_available(self):
        dims = calculate_room_dimensions("maid", 20.0, 3.0)
        # target = min(48, 11.76); sqrt(11.76) > 3 so height is 2.7 before flooring
        assert dims.height == pytest.approx(2.8)
        assert dims.width == pytest.approx(11.76 / 2.7)

    @pytest.mark.parametrize("key", sorted(REQUIRED_ROOMS))
    def test_never_below_minimum(self, key):
        requirement = REQUIRED_ROOMS[key]
        for available in [(1.0, 1.0), (3.0, 3.0), (6.0, 2.0), (20.0, 20.0)]:
            dims = calculate_room_dimensions(key, *available)
            assert dims.width >= requirement.min_width
            assert dims.height >= requirement.min_height
