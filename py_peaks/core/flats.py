"""
Flat area leveling.

A flat forces a run of coordinates to the elevation of its anchor, the first
coordinate to the right of the requested position. Leveling only runs
forward from the anchor. Flats are applied in order and are not checked for
overlap, so a later flat can re-level coordinates an earlier one touched.
"""

import math
from dataclasses import replace
from typing import Iterable, Union

import numpy as np
import structlog

from ..config.mountain_config import FlatAlign, FlatSpec
from .coordinates import CoordinateSequence

logger = structlog.get_logger()


def _desired_x(span: float, position: float, width: float, align: FlatAlign) -> float:
    desired_x = math.floor(span * position)
    if align == FlatAlign.RIGHT:
        desired_x -= width
    elif align == FlatAlign.CENTER:
        desired_x -= math.floor(width / 2)
    return desired_x


def level_area(
    coords: CoordinateSequence,
    position: float,
    width: float,
    align: Union[FlatAlign, str] = FlatAlign.LEFT,
    name: str = "",
) -> CoordinateSequence:
    """
    Level ``width`` x-units of skyline starting at ``position``.

    Args:
        coords: Coordinates in x order
        position: Fraction of the skyline span, 0 to 1
        width: Run length to level, in x units
        align: Whether position marks the left edge, right edge or center
        name: Label for the anchor coordinate

    Returns:
        New coordinate sequence with the anchor tagged ``flat_name=name`` and
        every following coordinate within ``width`` of it set to its y
    """
    if not coords:
        return coords

    align = FlatAlign(align)
    xs = np.array([coord.x for coord in coords])
    desired_x = _desired_x(xs[-1] - xs[0], position, width, align)

    candidates = np.flatnonzero(xs > desired_x)
    if candidates.size == 0:
        logger.warning(
            "Flat area starts beyond the skyline", name=name, desired_x=float(desired_x)
        )
        return coords

    anchor = int(candidates[0])
    anchor_x = xs[anchor]
    anchor_y = coords[anchor].y

    leveled = list(coords)
    leveled[anchor] = replace(coords[anchor], flat_name=name)
    end = anchor + 1
    while end < len(coords) and xs[end] - anchor_x <= width:
        leveled[end] = replace(coords[end], y=anchor_y)
        end += 1

    logger.debug("Leveled flat area", name=name, anchor=anchor, points=end - anchor)
    return tuple(leveled)


def define_flats(coords: CoordinateSequence, flats: Iterable[FlatSpec]) -> CoordinateSequence:
    """Apply each flat in order."""
    for flat in flats:
        coords = level_area(coords, flat.position, flat.width, flat.align, flat.name)
    return coords
