"""
Tests for flat area leveling.
"""

import math

import pytest

from py_peaks.config.mountain_config import FlatAlign, FlatSpec
from py_peaks.core.coordinates import map_points_to_coords
from py_peaks.core.flats import define_flats, level_area


@pytest.fixture
def coords(stage):
    """Nine coordinates at x = 0, 10, ..., 80 with y = 90, 80, ..., 10."""
    return map_points_to_coords(stage, [10, 20, 30, 40, 50, 60, 70, 80, 90])


def ys(coords):
    return [c.y for c in coords]


class TestLevelArea:
    """Test leveling a single flat."""

    def test_left_align(self, coords):
        """The anchor is the first coordinate past the position; leveling runs forward."""
        result = level_area(coords, 0.5, 20, FlatAlign.LEFT, "hut")

        assert ys(result) == [90, 80, 70, 60, 50, 40, 40, 40, 10]
        assert [c.flat_name for c in result] == [None] * 5 + ["hut"] + [None] * 3

    def test_right_align(self, coords):
        result = level_area(coords, 0.5, 20, "right", "hut")

        assert ys(result) == [90, 80, 70, 60, 60, 60, 30, 20, 10]
        assert result[3].flat_name == "hut"

    def test_center_align(self, coords):
        result = level_area(coords, 0.5, 20, "center", "hut")

        assert ys(result) == [90, 80, 70, 60, 50, 50, 50, 20, 10]
        assert result[4].flat_name == "hut"

    def test_x_spacing_unchanged(self, coords):
        result = level_area(coords, 0.3, 40, "left", "hut")
        assert [c.x for c in result] == [c.x for c in coords]

    def test_run_length_matches_width(self, coords):
        """A flat covers width / spacing coordinates after its anchor."""
        width = 30
        result = level_area(coords, 0.1, width, "left", "hut")
        anchor = next(i for i, c in enumerate(result) if c.flat_name == "hut")

        run = [c for c in result[anchor:] if c.y == result[anchor].y]
        assert len(run) == math.floor(width / 10) + 1

    def test_never_levels_backward(self, coords):
        result = level_area(coords, 0.5, 80, "left", "hut")

        assert ys(result)[:6] == ys(coords)[:6]
        assert set(ys(result)[5:]) == {40}

    def test_zero_width_only_tags_anchor(self, coords):
        result = level_area(coords, 0.5, 0, "left", "sign")

        assert ys(result) == ys(coords)
        assert result[5].flat_name == "sign"

    def test_anchor_at_left_edge(self, coords):
        """A desired x left of the skyline anchors on the first coordinate."""
        result = level_area(coords, 0, 20, "right", "edge")

        assert result[0].flat_name == "edge"
        assert ys(result)[:4] == [90, 90, 90, 60]

    def test_unnamed_flat_tags_anchor(self, coords):
        """A flat without a name still marks its anchor with an empty label."""
        result = level_area(coords, 0.5, 20)

        tagged = [i for i, c in enumerate(result) if c.flat_name is not None]
        assert tagged == [5]
        assert result[5].flat_name == ""

    def test_position_beyond_skyline(self, coords):
        """No coordinate lies right of the desired x: nothing changes."""
        result = level_area(coords, 1.0, 20, "left", "late")

        assert result == coords
        assert all(c.flat_name is None for c in result)

    def test_input_not_modified(self, coords):
        before = list(coords)
        level_area(coords, 0.5, 20, "left", "hut")
        assert list(coords) == before


class TestDefineFlats:
    """Test applying several flats in order."""

    def test_applied_in_order(self, coords):
        flats = [
            FlatSpec(position=0.2, width=30, name="a"),
            FlatSpec(position=0.25, width=30, name="b"),
        ]

        result = define_flats(coords, flats)

        # the second anchor's y wins across the overlap and extends the run
        assert ys(result) == [90, 80, 70, 70, 70, 70, 70, 20, 10]
        assert result[2].flat_name == "a"
        assert result[3].flat_name == "b"
        assert all(result[i].y == result[3].y for i in range(3, 7))

    def test_order_sensitive(self, coords):
        flats = [
            FlatSpec(position=0.2, width=30, name="a"),
            FlatSpec(position=0.25, width=30, name="b"),
        ]

        forward = define_flats(coords, flats)
        backward = define_flats(coords, list(reversed(flats)))

        assert ys(backward) == [90, 80, 70, 70, 70, 70, 60, 20, 10]
        assert ys(forward) != ys(backward)

    def test_pos_alias(self, coords):
        flat = FlatSpec.model_validate({"pos": 0.5, "width": 20, "align": "left", "name": "hut"})
        assert ys(define_flats(coords, [flat])) == [90, 80, 70, 60, 50, 40, 40, 40, 10]

    def test_no_flats(self, coords):
        assert define_flats(coords, []) == coords
