"""
Stage-space coordinates for a generated skyline.

Elevations are measured up from the stage floor; stage y grows downwards, so
a point's y is ``stage.height - elevation``.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from ..config.mountain_config import StageSpec


@dataclass(frozen=True)
class Coordinate:
    """One skyline vertex."""

    x: float
    y: float
    flat_name: Optional[str] = None  # set only on a flat region's anchor

    def to_dict(self) -> dict:
        data = {"x": self.x, "y": self.y}
        if self.flat_name is not None:
            data["flatName"] = self.flat_name
        return data


CoordinateSequence = Tuple[Coordinate, ...]


def map_points_to_coords(stage: StageSpec, points: Sequence[float]) -> CoordinateSequence:
    """
    Spread elevation points evenly across the stage width.

    Args:
        stage: Stage dimensions
        points: Elevations, left to right

    Returns:
        Coordinates from x=0 to x=stage.width. A single point maps to x=0.

    Raises:
        ValueError: If there are no points
    """
    n_points = len(points)
    if n_points == 0:
        raise ValueError("Cannot map an empty skyline to coordinates")

    if n_points == 1:
        xs = np.zeros(1)
    else:
        x_inc = stage.width / (n_points - 1)
        xs = np.arange(n_points) * x_inc
        # pin the right edge against accumulated rounding
        xs[-1] = stage.width

    return tuple(
        Coordinate(x=float(x), y=stage.height - elevation)
        for x, elevation in zip(xs, points)
    )
