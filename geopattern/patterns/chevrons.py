"""
geopattern/patterns/chevrons.py
Chevrons - stacked V shapes, each built from two mirrored polylines
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
from .tiling import tile

# Vertical overlap between consecutive chevron rows
CHEVRON_RATIO = 0.66


def chevron(w: float, h: float) -> List[Primitive]:
    """Left and right halves of one chevron."""
    e = h * CHEVRON_RATIO
    return [
        Primitive("polyline", {"points": points(0, 0, w / 2, h - e, w / 2, h, 0, e, 0, 0)}),
        Primitive("polyline", {"points": points(w / 2, h - e, w, 0, w, e, w / 2, h, w / 2, h - e)}),
    ]


class ChevronsTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.CHEVRONS,
            display_name="Chevrons",
            param_axes=[
                ParamAxis(name="width", offset=0, min_val=30.0, max_val=80.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        cw = params["width"]
        gw, gh = grid
        shape = chevron(cw, cw)

        def cell(index: int, col: int, row: int):
            return [Primitive("g", {
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "stroke-width": 1,
                "transform": translate(col * cw, row * cw * CHEVRON_RATIO - cw / 2),
            }, list(shape))]

        # Chevrons interlock horizontally, only the top row wraps
        primitives = tile(gw, gh, cell, wrap_rows=True, wrap_columns=False)
        return Tile(cw * gw, cw * gh * CHEVRON_RATIO, primitives)
