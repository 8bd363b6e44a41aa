"""
Skyline generation for mountain peak silhouettes.

A coarse run of alternating valleys and tall peaks is roughened by midpoint
displacement, mapped onto the stage and optionally flattened in places.
Every random draw goes through one injected ``RandomSource`` so a seed fully
determines the result.
"""

import math
from typing import List, Optional, Sequence

import structlog

from ..config.mountain_config import MountainConfig
from ..config.settings import settings
from ..exceptions import ConfigError
from ..utils.random import make_prng
from .alea_prng import RandomSource
from .coordinates import CoordinateSequence, map_points_to_coords
from .flats import define_flats

logger = structlog.get_logger()


def subdivided_length(n_points: int, passes: int) -> int:
    """Number of points after ``passes`` rounds of subdivision."""
    if n_points < 2:
        return n_points
    return (n_points - 1) * 2**passes + 1


class PeakSkylineGenerator:
    """
    Generates skyline elevations and maps them to stage coordinates.

    Bounded draws retry up to ``retry_limit`` times and then keep the last
    value even if it is out of band. Those fallbacks are counted in
    ``bound_exhaustions`` rather than raised.
    """

    def __init__(
        self,
        prng: Optional[RandomSource] = None,
        seed: Optional[str] = None,
        retry_limit: Optional[int] = None,
    ):
        """
        Initialize the skyline generator.

        Args:
            prng: Random source to draw from; takes precedence over seed
            seed: Seed for a new Alea PRNG when no source is given
            retry_limit: Attempts per bounded draw, defaults to settings
        """
        self._prng = prng if prng is not None else make_prng(seed)
        self.retry_limit = retry_limit if retry_limit is not None else settings.retry_limit
        if self.retry_limit < 1:
            raise ValueError(f"retry_limit must be at least 1, got {self.retry_limit}")
        self.bound_exhaustions = 0

    def _random(self) -> float:
        return self._prng.random()

    def _exhausted(self, kind: str, value: float) -> None:
        self.bound_exhaustions += 1
        logger.debug("Retry limit reached, keeping out-of-band value", kind=kind, value=value)

    def define_peak_y(self, peak_min_y: float, peak_max_y: float) -> int:
        """Random elevation in the peak band [peak_min_y, peak_max_y)."""
        return math.floor(self._random() * (peak_max_y - peak_min_y) + peak_min_y)

    def define_valley_y(self, peak_min_y: float, valley_min_y: float) -> int:
        """Random elevation between the valley floor and the peak band."""
        return math.floor(self._random() * (peak_min_y - valley_min_y) + valley_min_y)

    def _draw_peak_y(self, peak_min_y: float, peak_max_y: float) -> int:
        for _ in range(self.retry_limit):
            peak_y = self.define_peak_y(peak_min_y, peak_max_y)
            if peak_y <= peak_max_y:
                return peak_y
        self._exhausted("peak", peak_y)
        return peak_y

    def _draw_valley_y(self, peak_min_y: float, valley_min_y: float) -> int:
        for _ in range(self.retry_limit):
            valley_y = self.define_valley_y(peak_min_y, valley_min_y)
            if valley_y >= valley_min_y:
                return valley_y
        self._exhausted("valley", valley_y)
        return valley_y

    def define_peaks(
        self,
        count: int,
        valley_min_y: float,
        peak_min_y: float,
        peak_max_y: float,
        start_with_peak: bool = False,
    ) -> List[float]:
        """
        Build the coarse skyline of alternating valleys and tall peaks.

        Args:
            count: Number of tall peaks
            valley_min_y: Valley floor elevation
            peak_min_y: Lowest tall peak elevation
            peak_max_y: Highest tall peak elevation
            start_with_peak: Begin with a peak, valley, peak run on the left edge

        Returns:
            ``2 * count + 1`` elevations, or ``2 * count + 3`` when starting
            with a peak
        """
        if start_with_peak:
            points = [
                peak_min_y,
                self._draw_valley_y(peak_min_y, valley_min_y),
                peak_min_y,
            ]
        else:
            points = [valley_min_y]

        for _ in range(count):
            points.append(self._draw_peak_y(peak_min_y, peak_max_y))
            # the draw keeps the random stream in step; valleys sit on the floor
            self._draw_valley_y(peak_min_y, valley_min_y)
            points.append(valley_min_y)

        return points

    def subdivide(
        self, point1: float, point2: float, passes: int, min_y: float, max_y: float
    ) -> float:
        """
        Displaced midpoint between two elevations.

        The displacement range shrinks with the total number of passes
        requested, not with the current pass.
        """
        midpoint = math.floor(abs(point1 - point2) / 2) + min(point1, point2)
        spread = math.floor(midpoint / passes) if passes > 0 else 0

        for _ in range(self.retry_limit):
            delta = math.floor(self._random() * spread)
            if min_y <= midpoint + delta <= max_y:
                break
        else:
            self._exhausted("midpoint", midpoint + delta)

        if math.floor(self._random() * 2) == 1:
            delta = -delta

        return midpoint + delta

    def subdivide_peaks(
        self, points: Sequence[float], passes: int, min_y: float, max_y: float
    ) -> List[float]:
        """
        Insert a displaced midpoint between every neighbouring pair, ``passes`` times.

        Args:
            points: Coarse elevations
            passes: Number of subdivision passes
            min_y: Lower clamp for inserted midpoints
            max_y: Upper clamp for inserted midpoints

        Returns:
            ``(len(points) - 1) * 2**passes + 1`` elevations
        """
        result = list(points)
        if passes == 0:
            logger.debug("No subdivision passes requested", points=len(result))
            return result

        for _ in range(passes):
            refined = result[:1]
            for left, right in zip(result, result[1:]):
                refined.append(self.subdivide(left, right, passes, min_y, max_y))
                refined.append(right)
            result = refined

        return result

    def check_output_size(self, n_points: int, passes: int) -> None:
        """Reject configurations that would produce runaway skylines."""
        if passes > settings.max_detail:
            raise ConfigError(
                f"peaks.detail ({passes}) exceeds the maximum of {settings.max_detail}"
            )
        total = subdivided_length(n_points, passes)
        if total > settings.max_points:
            raise ConfigError(
                f"Skyline would have {total} points, more than the maximum of {settings.max_points}"
            )

    def generate(self, config: MountainConfig) -> CoordinateSequence:
        """
        Generate the full coordinate sequence for a resolved configuration.

        Args:
            config: Validated mountain configuration

        Returns:
            Coordinates from x=0 to x=stage.width
        """
        peaks = config.peaks
        valleys = config.valleys

        if config.init_peaks:
            n_coarse = len(config.init_peaks)
        else:
            n_coarse = 2 * peaks.count + (3 if peaks.start_with_peak else 1)
        self.check_output_size(n_coarse, peaks.detail)

        logger.info(
            "Generating skyline",
            coarse_points=n_coarse,
            detail=peaks.detail,
            predefined=bool(config.init_peaks),
        )

        if config.init_peaks:
            points = list(config.init_peaks)
        else:
            points = self.define_peaks(
                peaks.count,
                valleys.min_y,
                peaks.min_y,
                peaks.max_y,
                peaks.start_with_peak,
            )

        points = self.subdivide_peaks(points, peaks.detail, valleys.min_y, peaks.max_y)
        coords = map_points_to_coords(config.stage, points)

        if config.flats:
            coords = define_flats(coords, config.flats)

        if self.bound_exhaustions:
            logger.warning(
                "Some draws kept out-of-band values after exhausting retries",
                count=self.bound_exhaustions,
            )

        logger.info("Skyline generated", points=len(coords))
        return coords
