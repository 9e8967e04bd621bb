"""Tests for strength-based carrying capacity."""

import pytest

from beefbrain.sheet.capacity import HEAVY_LOAD_TABLE, carrying_capacity, heavy_load


class TestHeavyLoad:
    """Tests for the heavy load lookup and extrapolation."""

    @pytest.mark.parametrize(
        "strength,expected",
        [(1, 10), (10, 100), (11, 115), (16, 230), (18, 300), (20, 400), (29, 1400)],
    )
    def test_table_values(self, strength, expected):
        assert heavy_load(strength) == expected

    def test_table_is_monotonic(self):
        assert list(HEAVY_LOAD_TABLE) == sorted(HEAVY_LOAD_TABLE)
        assert len(HEAVY_LOAD_TABLE) == 29

    def test_zero_and_negative_strength(self):
        """Scores below 1 fall back to the minimum load."""
        assert heavy_load(0) == 10
        assert heavy_load(-3) == 10

    def test_doubling_every_ten_points(self):
        """Each +10 strength doubles the strength 20 baseline."""
        assert heavy_load(30) == 800
        assert heavy_load(40) == 1600
        assert heavy_load(50) == 3200

    def test_interpolation_between_doublings(self):
        assert heavy_load(35) == 1200
        assert heavy_load(31) == 880
        assert heavy_load(39) == 1520


class TestCarryingCapacity:
    """Tests for the full capacity table."""

    def test_strength_18(self):
        assert carrying_capacity(18) == {
            "light": "100 lbs",
            "medium": "200 lbs",
            "heavy": "300 lbs",
            "lift": "600 lbs",
            "drag": "1500 lbs",
        }

    def test_thresholds_floor(self):
        """Light and medium loads are floored thirds of the heavy load."""
        capacity = carrying_capacity(16)
        assert capacity["light"] == "76 lbs"
        assert capacity["medium"] == "153 lbs"

    def test_key_order(self):
        assert list(carrying_capacity(10)) == ["light", "medium", "heavy", "lift", "drag"]
