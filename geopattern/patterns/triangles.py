"""
geopattern/patterns/triangles.py
Triangles - rows of alternating up/down equilateral triangles
"""

import math
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
    fmt,
    points,
    translate,
)
from .tiling import tile


class TrianglesTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.TRIANGLES,
            display_name="Triangles",
            param_axes=[
                ParamAxis(name="side", offset=0, min_val=15.0, max_val=80.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        s = params["side"]
        th = math.sqrt(3) * s / 2
        gw, gh = grid
        shape = points(s / 2, 0, s, th, 0, th, s / 2, 0)

        def cell(index: int, col: int, row: int):
            # Flip every other triangle so neighbours share an edge
            rotation = 180 if col % 2 == row % 2 else 0
            return [Primitive("polyline", {
                "points": shape,
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "transform": (
                    f"{translate(col * s * 0.5 - s / 2, th * row)} "
                    f"rotate({rotation}, {fmt(s / 2)}, {fmt(th / 2)})"
                ),
            })]

        # Rows already meet edge to edge, only the left column wraps
        primitives = tile(gw, gh, cell, wrap_rows=False, wrap_columns=True)
        return Tile(s * gw / 2, th * gh, primitives)
