"""
geopattern/patterns/squares.py
Squares - plain square grid
"""

from typing import Dict, Sequence, Tuple

from ..config import DEFAULT_STYLE, StyleConfig
from .base import (
    CellStyle,
    ParamAxis,
    PatternDefinition,
    PatternKind,
    PatternTemplate,
    Primitive,
    Tile,
)
from .tiling import grid_cells


class SquaresTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.SQUARES,
            display_name="Squares",
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

        primitives = [
            Primitive("rect", {
                "x": x * s,
                "y": y * s,
                "width": s,
                "height": s,
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
            })
            for index, x, y in grid_cells(gw, gh)
        ]
        return Tile(s * gw, s * gh, primitives)
