"""
geopattern/patterns/octagons.py
Octagons - square grid of corner-clipped squares
"""

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
from .tiling import grid_cells


def octagon(s: float) -> List[Tuple[float, float]]:
    c = 0.33 * s
    return points(c, 0, s - c, 0, s, c, s, s - c, s - c, s, c, s, 0, s - c, 0, c, c, 0)


class OctagonsTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.OCTAGONS,
            display_name="Octagons",
            param_axes=[
                ParamAxis(name="square_size", offset=0, min_val=10.0, max_val=60.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        s = params["square_size"]
        gw, gh = grid
        shape = octagon(s)

        primitives = [
            Primitive("polyline", {
                "points": shape,
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "transform": translate(x * s, y * s),
            })
            for index, x, y in grid_cells(gw, gh)
        ]
        return Tile(s * gw, s * gh, primitives)
