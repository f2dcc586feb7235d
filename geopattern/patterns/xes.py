"""
geopattern/patterns/xes.py
Xes - crosses rotated 45 degrees, odd columns dropped a quarter tile

Besides the usual edge duplication, the bottom row is repeated one row
above the top so the staggered columns close the seam at the top edge.
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
    fmt,
    translate,
)
from .plus_signs import plus_shape
from .tiling import tile

X_RATIO = 0.943


class XesTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.XES,
            display_name="Xes",
            param_axes=[
                ParamAxis(name="square_size", offset=0, min_val=10.0, max_val=25.0),
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
        x_size = s * 3 * X_RATIO
        gw, gh = grid
        shape = plus_shape(s)
        pivot = f"{fmt(x_size / 2)}, {fmt(x_size / 2)}"

        def place(index: int, col: int, row: int) -> Primitive:
            dy = row * x_size / 2 - x_size / 2 + (x_size / 4 if col % 2 == 1 else 0.0)
            return Primitive("g", {
                "fill": cells[index].fill,
                "style": f"opacity:{cells[index].opacity};",
                "transform": f"{translate(col * x_size / 2 - x_size / 2, dy)} rotate(45, {pivot})",
            }, list(shape))

        def cell(index: int, col: int, row: int):
            placed = [place(index, col, row)]
            x, y = index % gw, index // gw
            if y == gh - 1 and (col, row) == (x, y):
                placed.append(place(index, col, -1))
            return placed

        return Tile(x_size * gw / 2, x_size * gh / 2, tile(gw, gh, cell))
