"""
Public entry points.

``generate`` resolves a configuration and returns the skyline coordinates;
``create`` also renders them, drawing the shadow depths from the same random
stream, and hands back the resolved configuration with the result.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import structlog

from ..config.mountain_config import MountainConfig, resolve_config
from ..render.drawable import DrawableElement, to_svg
from ..render.svg_renderer import SilhouetteRenderer
from ..utils.random import make_prng
from .alea_prng import RandomSource
from .coordinates import CoordinateSequence
from .skyline_generator import PeakSkylineGenerator

logger = structlog.get_logger()

ConfigInput = Optional[Union[Mapping[str, Any], MountainConfig]]


@dataclass(frozen=True)
class MountainPeaks:
    """Result of one ``create`` call."""

    config: MountainConfig
    coordinates: CoordinateSequence
    document: DrawableElement

    def to_svg(self) -> str:
        return to_svg(self.document)


def generate(
    config: ConfigInput = None,
    prng: Optional[RandomSource] = None,
    seed: Optional[str] = None,
) -> CoordinateSequence:
    """
    Generate skyline coordinates.

    Args:
        config: Partial configuration merged onto the defaults
        prng: Random source; takes precedence over seed
        seed: Seed for a new Alea PRNG

    Returns:
        Coordinates from x=0 to x=stage.width

    Raises:
        ConfigError: If the configuration is malformed
    """
    resolved = resolve_config(config)
    generator = PeakSkylineGenerator(prng=prng, seed=seed)
    return generator.generate(resolved)


def create(
    config: ConfigInput = None,
    prng: Optional[RandomSource] = None,
    seed: Optional[str] = None,
) -> MountainPeaks:
    """
    Generate and render a mountain peak silhouette.

    Args:
        config: Partial configuration merged onto the defaults
        prng: Random source; takes precedence over seed
        seed: Seed for a new Alea PRNG

    Returns:
        MountainPeaks with the resolved config, coordinates and SVG tree
    """
    resolved = resolve_config(config)
    if prng is None:
        prng = make_prng(seed)

    coords = PeakSkylineGenerator(prng=prng).generate(resolved)
    document = SilhouetteRenderer(prng=prng).render(
        coords,
        resolved.stage,
        resolved.valleys,
        resolved.fill,
        resolved.shadow,
        resolved.ridge,
    )

    logger.info("Mountain peaks created", points=len(coords))
    return MountainPeaks(config=resolved, coordinates=coords, document=document)
