"""
geopattern/patterns/concentric_circles.py
Concentric Circles - a stroked ring around a filled disc per cell

The ring and the disc read different digest digits: ring styles run
forward from digit 0, disc styles run backwards from the last digit of a
40-character digest. The two layers therefore never share a digit at the
same cell.
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
from .tiling import grid_cells

# Inner-layer styles read digits 39, 38, 37, ...
INNER_START = 39


class ConcentricCirclesTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.CONCENTRIC_CIRCLES,
            display_name="Concentric Circles",
            param_axes=[
                ParamAxis(name="ring_size", offset=0, min_val=10.0, max_val=60.0),
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
        """
        Args:
            inner_cells: Disc styles; defaults to the ring styles reversed
        """
        ring = params["ring_size"]
        stroke_width = ring / 5
        pitch = ring + stroke_width
        gw, gh = grid
        if inner_cells is None:
            inner_cells = list(reversed(cells[:gw * gh]))

        primitives = []
        for index, x, y in grid_cells(gw, gh):
            cx = x * pitch + pitch / 2
            cy = y * pitch + pitch / 2
            outer = cells[index]
            primitives.append(Primitive("circle", {
                "cx": cx,
                "cy": cy,
                "r": ring / 2,
                "fill": "none",
                "stroke": outer.fill,
                "style": f"opacity:{outer.opacity};stroke-width:{stroke_width}px;",
            }))
            inner = inner_cells[index]
            primitives.append(Primitive("circle", {
                "cx": cx,
                "cy": cy,
                "r": ring / 4,
                "fill": inner.fill,
                "fill-opacity": inner.opacity,
            }))

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
