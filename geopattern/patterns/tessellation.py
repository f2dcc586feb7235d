"""
geopattern/patterns/tessellation.py
Tessellation - fixed 20-piece tile of squares, hexagon gaps and triangles

Unlike the grid patterns the layout is a single hand-placed tile: digit i
styles piece i. Pieces on the tile border are drawn at every border they
touch, so the tile repeats seamlessly.
"""

import math
from typing import Dict, List, Sequence, Tuple

from ..config import DEFAULT_STYLE, StyleConfig
from .base import (
    CellStyle,
    ParamAxis,
    PatternDefinition,
    PatternKind,
    PatternTemplate,
    Primitive,
    Tile,
    fmt,
    points,
    translate,
)

PIECE_COUNT = 20


class TessellationTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.TESSELLATION,
            display_name="Tessellation",
            param_axes=[
                ParamAxis(name="side", offset=0, min_val=5.0, max_val=40.0),
            ],
            # 20 pieces; the layout itself is fixed
            grid=(5, 4),
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        if len(cells) < PIECE_COUNT:
            raise ValueError(f"Tessellation needs {PIECE_COUNT} cell styles, got {len(cells)}")

        l = params["side"]
        hex_width = l * 2
        hex_height = l * math.sqrt(3)
        th = l / 2 * math.sqrt(3)
        tile_width = l * 3 + th * 2
        tile_height = hex_height * 2 + l * 2
        triangle = points(0, 0, th, l / 2, 0, l, 0, 0)
        pivot = f"{fmt(l / 2)}, {fmt(th / 2)}"

        def base(cs: CellStyle) -> Dict[str, object]:
            return {
                "fill": cs.fill,
                "fill-opacity": cs.opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "stroke-width": 1,
            }

        def square(cs: CellStyle, x: float, y: float) -> Primitive:
            attrs = base(cs)
            attrs.update({"x": x, "y": y, "width": l, "height": l})
            return Primitive("rect", attrs)

        def rotated_square(cs: CellStyle, transform: str) -> Primitive:
            attrs = base(cs)
            attrs.update({"x": 0, "y": 0, "width": l, "height": l, "transform": transform})
            return Primitive("rect", attrs)

        def tri(cs: CellStyle, transform: str) -> Primitive:
            attrs = base(cs)
            attrs.update({"points": triangle, "transform": transform})
            return Primitive("polyline", attrs)

        c = cells
        pieces: List[List[Primitive]] = [
            # 0: corner square, drawn on all four corners
            [
                square(c[0], -l / 2, -l / 2),
                square(c[0], tile_width - l / 2, -l / 2),
                square(c[0], -l / 2, tile_height - l / 2),
                square(c[0], tile_width - l / 2, tile_height - l / 2),
            ],
            [square(c[1], hex_width / 2 + th, hex_height / 2)],
            [
                square(c[2], -l / 2, tile_height / 2 - l / 2),
                square(c[2], tile_width - l / 2, tile_height / 2 - l / 2),
            ],
            [square(c[3], hex_width / 2 + th, hex_height * 1.5 + l)],
            [
                tri(c[4], f"{translate(l / 2, -l / 2)} rotate(0, {pivot})"),
                tri(c[4], f"{translate(l / 2, tile_height + l / 2)} rotate(0, {pivot}) scale(1, -1)"),
            ],
            [
                tri(c[5], f"{translate(tile_width - l / 2, -l / 2)} rotate(0, {pivot}) scale(-1, 1)"),
                tri(c[5], f"{translate(tile_width - l / 2, tile_height + l / 2)} rotate(0, {pivot}) scale(-1, -1)"),
            ],
            [tri(c[6], translate(tile_width / 2 + l / 2, hex_height / 2))],
            [tri(c[7], f"{translate(tile_width / 2 - l / 2, hex_height / 2)} scale(-1, 1)")],
            [tri(c[8], f"{translate(tile_width / 2 + l / 2, tile_height - hex_height / 2)} scale(1, -1)")],
            [tri(c[9], f"{translate(tile_width / 2 - l / 2, tile_height - hex_height / 2)} scale(-1, -1)")],
            [tri(c[10], translate(l / 2, tile_height / 2 - l / 2))],
            [tri(c[11], f"{translate(tile_width - l / 2, tile_height / 2 - l / 2)} scale(-1, 1)")],
            [rotated_square(c[12], f"{translate(l / 2, l / 2)} rotate(-30, 0, 0)")],
            [rotated_square(c[13], f"scale(-1, 1) {translate(-tile_width + l / 2, l / 2)} rotate(-30, 0, 0)")],
            [rotated_square(c[14], f"{translate(l / 2, tile_height / 2 - l / 2 - l)} rotate(30, 0, {fmt(l)})")],
            [rotated_square(c[15], f"scale(-1, 1) {translate(-tile_width + l / 2, tile_height / 2 - l / 2 - l)} rotate(30, 0, {fmt(l)})")],
            [rotated_square(c[16], f"scale(1, -1) {translate(l / 2, -tile_height / 2 - l / 2 - l)} rotate(30, 0, {fmt(l)})")],
            [rotated_square(c[17], f"scale(-1, -1) {translate(-tile_width + l / 2, -tile_height / 2 - l / 2 - l)} rotate(30, 0, {fmt(l)})")],
            [rotated_square(c[18], f"scale(1, -1) {translate(l / 2, -tile_height + l / 2)} rotate(-30, 0, 0)")],
            [rotated_square(c[19], f"scale(-1, -1) {translate(-tile_width + l / 2, -tile_height + l / 2)} rotate(-30, 0, 0)")],
        ]

        primitives = [p for piece in pieces for p in piece]
        return Tile(tile_width, tile_height, primitives)
