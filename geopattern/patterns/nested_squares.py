"""
geopattern/patterns/nested_squares.py
Nested Squares - outlined square with a smaller outlined square inside

Like concentric circles, the inner square reads its style from a reversed
slice of the digest starting at digit 39.
"""

from typing import Dict, Optional, Sequence, Tuple

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
from .concentric_circles import INNER_START
from .tiling import grid_cells


def _outline(x: float, y: float, size: float, cs: CellStyle, stroke_width: float) -> Primitive:
    return Primitive("rect", {
        "x": x,
        "y": y,
        "width": size,
        "height": size,
        "fill": "none",
        "stroke": cs.fill,
        "style": f"opacity:{cs.opacity};stroke-width:{stroke_width}px;",
    })


class NestedSquaresTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.NESTED_SQUARES,
            display_name="Nested Squares",
            param_axes=[
                ParamAxis(name="block_size", offset=0, min_val=4.0, max_val=12.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
        inner_cells: Optional[Sequence[CellStyle]] = None,
    ) -> Tile:
        s = params["block_size"]
        square = s * 7
        pitch = square + s * 2
        gw, gh = grid
        if inner_cells is None:
            inner_cells = list(reversed(cells[:gw * gh]))

        primitives = []
        for index, x, y in grid_cells(gw, gh):
            ox = x * pitch + s / 2
            oy = y * pitch + s / 2
            primitives.append(_outline(ox, oy, square, cells[index], s))
            primitives.append(_outline(ox + s * 2, oy + s * 2, s * 3, inner_cells[index], s))

        return Tile(pitch * gw, pitch * gh, primitives)

    def draw(self, digest: str, style: Optional[StyleConfig] = None) -> Tile:
        style = style or DEFAULT_STYLE
        d = self.definition
        count = d.grid[0] * d.grid[1]
        return self.render(
            self.decode_params(digest),
            d.grid,
            self.cell_styles(digest, count, style),
            style,
            inner_cells=self.cell_styles(digest, count, style, start=INNER_START, reverse=True),
        )
