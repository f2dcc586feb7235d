"""
geopattern/patterns/hexagons.py
Hexagons - flat-topped honeycomb, odd columns dropped half a hexagon
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
    points,
    translate,
)
from .tiling import tile


def hexagon(side: float) -> List[Tuple[float, float]]:
    a = side / 2
    b = math.sin(math.pi / 3) * side
    return points(0, b, a, 0, a + side, 0, 2 * side, b, a + side, 2 * b, a, 2 * b, 0, b)


class HexagonsTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.HEXAGONS,
            display_name="Hexagons",
            param_axes=[
                ParamAxis(name="side", offset=0, min_val=8.0, max_val=60.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        side = params["side"]
        hex_width = side * 2
        hex_height = side * math.sqrt(3)
        gw, gh = grid
        shape = hexagon(side)

        def cell(index: int, col: int, row: int):
            dy = row * hex_height + (hex_height / 2 if col % 2 == 1 else 0.0)
            return [Primitive("polyline", {
                "points": shape,
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "transform": translate(col * side * 1.5 - hex_width / 2, dy - hex_height / 2),
            })]

        return Tile(side * 1.5 * gw, hex_height * gh, tile(gw, gh, cell))
