"""
Core skyline generation functionality.

The public ``generate``/``create`` entry points live in
``py_peaks.core.mountain_peaks``.
"""

from .alea_prng import AleaPRNG, RandomSource
from .coordinates import Coordinate, CoordinateSequence, map_points_to_coords
from .flats import define_flats, level_area
from .skyline_generator import PeakSkylineGenerator, subdivided_length

__all__ = ['AleaPRNG', 'RandomSource', 'Coordinate', 'CoordinateSequence',
           'map_points_to_coords', 'define_flats', 'level_area',
           'PeakSkylineGenerator', 'subdivided_length']
