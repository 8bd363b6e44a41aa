"""
Silhouette rendering.

Turns a skyline coordinate sequence into a drawable SVG tree: the filled
mountain polygon, optional shadow regions on the descending slopes and an
optional ridge stroke. The coordinates are only read, never modified.
"""

import math
from typing import Optional, Sequence

import structlog

from ..config.mountain_config import (
    FillSpec,
    GradientSpec,
    RidgeSpec,
    ShadowSpec,
    StageSpec,
    ValleySpec,
)
from ..core.alea_prng import RandomSource
from ..core.coordinates import Coordinate
from ..utils.random import make_prng
from .drawable import DrawableElement, format_number

logger = structlog.get_logger()

MOUNTAIN_GRADIENT_ID = "mountainGradient"
SHADOW_GRADIENT_ID = "shadowGradient"
SHADOW_START_X_OFFSET = 20


class SilhouetteRenderer:
    """Renders skyline coordinates as SVG primitives."""

    def __init__(self, prng: Optional[RandomSource] = None):
        """
        Args:
            prng: Random source for shadow depths
        """
        self._prng = prng if prng is not None else make_prng()

    def _random(self) -> float:
        return self._prng.random()

    def create_gradient(
        self, svg: DrawableElement, gradient_id: str, gradient: GradientSpec
    ) -> DrawableElement:
        """Add a linear gradient to the document's defs, creating defs if needed."""
        grad = DrawableElement("linearGradient")
        grad.set("id", gradient_id)
        grad.set("x1", gradient.x1)
        grad.set("y1", gradient.y1)
        grad.set("x2", gradient.x2)
        grad.set("y2", gradient.y2)

        for attrs in gradient.stops:
            stop = grad.append(DrawableElement("stop"))
            for name, value in attrs.items():
                stop.set(name, value)

        defs = svg.find("defs") or svg.insert(0, DrawableElement("defs"))
        return defs.append(grad)

    def create_mountain_poly(
        self,
        svg: DrawableElement,
        coords: Sequence[Coordinate],
        stage: StageSpec,
        fill: FillSpec,
    ) -> DrawableElement:
        """Filled polygon closed along the stage floor."""
        points = " ".join(
            f"{format_number(coord.x)},{format_number(coord.y)}" for coord in coords
        )
        points += f" {format_number(stage.width)},{format_number(stage.height)}"
        points += f" 0,{format_number(stage.height)}"

        poly = DrawableElement("polygon")
        if fill.gradient:
            self.create_gradient(svg, MOUNTAIN_GRADIENT_ID, fill.gradient)
            poly.set("fill", f"url(#{MOUNTAIN_GRADIENT_ID})")
        elif fill.color:
            poly.set("fill", fill.color)

        poly.set("points", points)
        return poly

    def create_ridgeline(self, coords: Sequence[Coordinate], ridge: RidgeSpec) -> DrawableElement:
        """Stroked path along the skyline."""
        first = coords[0]
        d = f"M {format_number(first.x)} {format_number(first.y)}"
        for coord in coords[1:]:
            d += f"L {format_number(coord.x)} {format_number(coord.y)}"

        path = DrawableElement("path")
        path.set("fill", "none")
        path.set("stroke", ridge.color)
        path.set("stroke-width", ridge.thickness)
        path.set("d", d)
        return path

    def _shadow_close(self, start_x: float, height: float, lowest_y: float, valley_min_y: float) -> str:
        depth = math.floor(self._random() * (lowest_y - valley_min_y))
        return (
            f" {format_number(start_x + SHADOW_START_X_OFFSET)}"
            f" {format_number(height - depth)} Z"
        )

    def create_shadow_path(
        self,
        svg: DrawableElement,
        coords: Sequence[Coordinate],
        stage: StageSpec,
        valleys: ValleySpec,
        shadow: ShadowSpec,
    ) -> DrawableElement:
        """
        Shadow regions under each descending slope.

        A region opens where the skyline starts to descend and closes where
        it stops, dropping back to a random depth above the valley floor
        just right of where it opened.
        """
        height = stage.height
        start_x = None
        lowest_y = 0.0
        d = ""

        for i in range(1, len(coords)):
            prev, cur = coords[i - 1], coords[i]

            if start_x is None and cur.y > prev.y:
                start_x = prev.x
                d += f"M {format_number(start_x)} {format_number(prev.y)}"
                d += f" {format_number(cur.x)} {format_number(cur.y)}"
                lowest_y = height - cur.y

            if start_x is not None and cur.y <= prev.y:
                if cur.y < lowest_y:
                    lowest_y = height - cur.y
                d += self._shadow_close(start_x, height, lowest_y, valleys.min_y)
                start_x = None

            if start_x is not None:
                d += f" {format_number(cur.x)} {format_number(cur.y)}"
                if cur.y > lowest_y:
                    lowest_y = height - cur.y

                if i == len(coords) - 1:
                    d += self._shadow_close(start_x, height, lowest_y, valleys.min_y)
                    start_x = None

        path = DrawableElement("path")
        if shadow.gradient:
            self.create_gradient(svg, SHADOW_GRADIENT_ID, shadow.gradient)
            path.set("fill", f"url(#{SHADOW_GRADIENT_ID})")
        elif shadow.color:
            path.set("fill", shadow.color)

        path.set("d", d)
        return path

    def render(
        self,
        coords: Sequence[Coordinate],
        stage: StageSpec,
        valleys: ValleySpec,
        fill: Optional[FillSpec] = None,
        shadow: Optional[ShadowSpec] = None,
        ridge: Optional[RidgeSpec] = None,
    ) -> DrawableElement:
        """
        Build the SVG document for a skyline.

        Args:
            coords: Skyline coordinates in x order
            stage: Stage dimensions
            valleys: Valley floor, used for shadow depths
            fill: Mountain paint
            shadow: Shadow paint; no shadow path when omitted
            ridge: Ridge stroke; drawn only when both color and thickness are set

        Returns:
            Root ``svg`` element
        """
        if not coords:
            raise ValueError("Cannot render an empty skyline")

        svg = DrawableElement("svg")
        svg.set("width", stage.width)
        svg.set("height", stage.height)
        svg.append(self.create_mountain_poly(svg, coords, stage, fill or FillSpec()))

        if shadow is not None:
            svg.append(self.create_shadow_path(svg, coords, stage, valleys, shadow))

        if ridge is not None and ridge.color and ridge.thickness:
            svg.append(self.create_ridgeline(coords, ridge))

        logger.debug(
            "Rendered silhouette",
            points=len(coords),
            shadow=shadow is not None,
            elements=len(svg.children),
        )
        return svg
