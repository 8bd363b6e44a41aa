"""
End-to-end tests for generating and creating mountain peaks.
"""

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from py_peaks.core.coordinates import Coordinate
from py_peaks.core.mountain_peaks import MountainPeaks, create, generate
from py_peaks.core.skyline_generator import PeakSkylineGenerator
from py_peaks.exceptions import ConfigError


def elevations(coords, height):
    return [height - c.y for c in coords]


class TestGenerate:
    """Test coordinate generation."""

    def test_defaults(self):
        coords = generate(seed="defaults")

        # 3 coarse points, 4 passes
        assert len(coords) == 33
        assert coords[0].x == 0
        assert coords[-1].x == 600

    @pytest.mark.parametrize("count,start_with_peak,detail", [
        (1, False, 0), (1, True, 1), (3, False, 4), (5, True, 3), (0, True, 2), (8, False, 6),
    ])
    def test_length_formula(self, count, start_with_peak, detail):
        config = {"peaks": {"count": count, "detail": detail, "startWithPeak": start_with_peak}}
        coarse = 2 * count + (2 if start_with_peak else 0) + 1

        coords = generate(config, seed=f"len-{count}-{detail}")

        assert len(coords) == (coarse - 1) * 2**detail + 1

    @pytest.mark.parametrize("seed", ["a", "b", "c"])
    def test_x_strictly_increasing(self, seed):
        coords = generate({"stage": {"width": 750}, "peaks": {"count": 4, "detail": 5}}, seed=seed)
        xs = np.array([c.x for c in coords])

        assert xs[0] == 0
        assert xs[-1] == 750
        assert np.all(np.diff(xs) > 0)

    def test_init_peaks_length(self):
        coords = generate({"initPeaks": [60, 200, 120, 250], "peaks": {"detail": 3}}, seed="init")
        assert len(coords) == (4 - 1) * 2**3 + 1

    def test_init_peaks_kept_at_coarse_positions(self):
        coords = generate({"initPeaks": [60, 200, 120], "peaks": {"detail": 2}}, seed="init")
        assert elevations(coords, 300)[::4] == [60, 200, 120]

    def test_empty_init_peaks_ignored(self):
        coords = generate({"initPeaks": [], "peaks": {"detail": 1}}, seed="empty")
        assert len(coords) == 5

    def test_zero_detail_returns_coarse_skyline(self):
        config = {"peaks": {"count": 3, "detail": 0}}

        coords = generate(config, seed="coarse")
        expected = PeakSkylineGenerator(seed="coarse").define_peaks(3, 50, 200, 300)

        assert elevations(coords, 300) == expected

    def test_single_point_skyline(self):
        config = {
            "stage": {"width": 4, "height": 10},
            "peaks": {"count": 0, "detail": 0, "minY": 5, "maxY": 5},
            "valleys": {"minY": 2},
        }
        assert generate(config, seed="one") == (Coordinate(x=0, y=8),)

    def test_same_seed_same_skyline(self):
        config = {"peaks": {"count": 4, "detail": 5}}
        assert generate(config, seed="repeat") == generate(config, seed="repeat")

    def test_injected_prng(self, scripted):
        prng = scripted([0.5])
        coords = generate({"peaks": {"count": 1, "detail": 1}}, prng=prng)

        # midpoints 150 with delta 75, negated by the sign draw
        assert elevations(coords, 300) == [50, 75, 250, 75, 50]
        assert prng.call_count == 2 + 4

    def test_flats(self):
        config = {
            "peaks": {"count": 2, "detail": 4},
            "flats": [{"position": 0.5, "width": 60, "align": "center", "name": "lodge"}],
        }

        coords = generate(config, seed="flat")
        tagged = [i for i, c in enumerate(coords) if c.flat_name]

        assert [coords[i].flat_name for i in tagged] == ["lodge"]
        anchor = tagged[0]
        run = [c for c in coords[anchor:] if c.x - coords[anchor].x <= 60]
        assert len({c.y for c in run}) == 1

    def test_invalid_config(self, scripted):
        prng = scripted([0.5])
        with pytest.raises(ConfigError):
            generate({"peaks": {"minY": 320}}, prng=prng)
        assert prng.call_count == 0


class TestCreate:
    """Test generating and rendering together."""

    def test_create(self):
        peaks = create({"ridge": {"color": "#fff", "thickness": 1}, "shadow": {"color": "#000"}}, seed="svg")

        assert isinstance(peaks, MountainPeaks)
        assert peaks.config.ridge.thickness == 1
        assert len(peaks.coordinates) == 33
        assert [c.tag for c in peaks.document.children] == ["polygon", "path", "path"]

        root = ET.fromstring(peaks.to_svg())
        assert root.get("width") == "600"

    def test_create_is_reproducible(self):
        config = {"shadow": {"color": "#000"}}
        assert create(config, seed="same").to_svg() == create(config, seed="same").to_svg()

    def test_coordinates_match_generate(self):
        config = {"peaks": {"count": 2, "detail": 3}}
        assert create(config, seed="match").coordinates == generate(config, seed="match")
