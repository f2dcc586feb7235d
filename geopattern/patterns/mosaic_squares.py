"""
geopattern/patterns/mosaic_squares.py
Mosaic Squares - checkerboard of triangle quartets

Each 2x2 block holds either an "outer" tile (four triangles pointing
outwards, one style) or an "inner" tile (four triangles meeting at the
centre, two styles). Tiles alternate in a checkerboard.

Cell i reads digit i for its first style and digit i + 1 for its second,
so neighbouring cells share a digit.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..config import DEFAULT_STYLE, StyleConfig
from .base import (
    CellStyle,
    ParamAxis,
    PatternDefinition,
    PatternKind,
    PatternTemplate,
    Primitive,
    Tile,
    points,
    translate,
)
from .tiling import grid_cells


def _triangle(s: float, cs: CellStyle, style: StyleConfig, transform: str) -> Primitive:
    return Primitive("polyline", {
        "points": points(0, 0, s, s, 0, s, 0, 0),
        "fill": cs.fill,
        "fill-opacity": cs.opacity,
        "stroke": style.stroke_color,
        "stroke-opacity": style.stroke_opacity,
        "transform": transform,
    })


def _at(x: float, y: float, sx: int, sy: int) -> str:
    return f"{translate(x, y)} scale({sx}, {sy})"


def outer_tile(x: float, y: float, s: float, cs: CellStyle,
               style: StyleConfig = DEFAULT_STYLE) -> List[Primitive]:
    return [
        _triangle(s, cs, style, _at(x, y + s, 1, -1)),
        _triangle(s, cs, style, _at(x + s * 2, y + s, -1, -1)),
        _triangle(s, cs, style, _at(x, y + s, 1, 1)),
        _triangle(s, cs, style, _at(x + s * 2, y + s, -1, 1)),
    ]


def inner_tile(x: float, y: float, s: float, first: CellStyle, second: CellStyle,
               style: StyleConfig = DEFAULT_STYLE) -> List[Primitive]:
    return [
        _triangle(s, first, style, _at(x + s, y, -1, 1)),
        _triangle(s, first, style, _at(x + s, y + s * 2, 1, -1)),
        _triangle(s, second, style, _at(x + s, y + s * 2, -1, -1)),
        _triangle(s, second, style, _at(x + s, y, 1, 1)),
    ]


class MosaicSquaresTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.MOSAIC_SQUARES,
            display_name="Mosaic Squares",
            param_axes=[
                ParamAxis(name="triangle_size", offset=0, min_val=15.0, max_val=50.0),
            ],
            grid=(4, 4),
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        s = params["triangle_size"]
        gw, gh = grid

        primitives = []
        for index, x, y in grid_cells(gw, gh):
            first = cells[index]
            second = cells[(index + 1) % len(cells)]
            ox, oy = x * s * 2, y * s * 2
            if x % 2 == y % 2:
                primitives.extend(outer_tile(ox, oy, s, first, style))
            else:
                primitives.extend(inner_tile(ox, oy, s, first, second, style))

        return Tile(s * 2 * gw, s * 2 * gh, primitives)

    def draw(self, digest: str, style: Optional[StyleConfig] = None) -> Tile:
        style = style or DEFAULT_STYLE
        d = self.definition
        count = d.grid[0] * d.grid[1]
        # One extra digit for the last cell's second style
        cells = self.cell_styles(digest, count + 1, style)
        return self.render(self.decode_params(digest), d.grid, cells, style)
