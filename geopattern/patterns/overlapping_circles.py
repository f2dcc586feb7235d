"""
geopattern/patterns/overlapping_circles.py
Overlapping Circles - circles spaced one radius apart
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


class OverlappingCirclesTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.OVERLAPPING_CIRCLES,
            display_name="Overlapping Circles",
            param_axes=[
                ParamAxis(name="diameter", offset=0, min_val=25.0, max_val=200.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        r = params["diameter"] / 2
        gw, gh = grid

        def cell(index: int, col: int, row: int):
            return [Primitive("circle", {
                "cx": col * r,
                "cy": row * r,
                "r": r,
                "fill": cells[index].fill,
                "style": f"opacity:{cells[index].opacity};",
            })]

        return Tile(r * gw, r * gh, tile(gw, gh, cell))
