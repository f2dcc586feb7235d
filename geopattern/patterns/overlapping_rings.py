"""
geopattern/patterns/overlapping_rings.py
Overlapping Rings - stroked circles spaced one ring size apart
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
from .tiling import tile


class OverlappingRingsTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.OVERLAPPING_RINGS,
            display_name="Overlapping Rings",
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
    ) -> Tile:
        s = params["ring_size"]
        stroke_width = s / 4
        gw, gh = grid

        def cell(index: int, col: int, row: int):
            cs = cells[index]
            return [Primitive("circle", {
                "cx": col * s,
                "cy": row * s,
                "r": s - stroke_width / 2,
                "fill": "none",
                "stroke": cs.fill,
                "style": f"opacity:{cs.opacity};stroke-width:{stroke_width}px;",
            })]

        return Tile(s * gw, s * gh, tile(gw, gh, cell))
