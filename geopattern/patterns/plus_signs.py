"""
geopattern/patterns/plus_signs.py
Plus Signs - interlocking crosses, odd rows shifted by one arm width
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
    translate,
)
from .tiling import tile


def plus_shape(s: float) -> List[Primitive]:
    """Vertical and horizontal bars of a cross with arm width s."""
    return [
        Primitive("rect", {"x": s, "y": 0, "width": s, "height": s * 3}),
        Primitive("rect", {"x": 0, "y": s, "width": s * 3, "height": s}),
    ]


class PlusSignsTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.PLUS_SIGNS,
            display_name="Plus Signs",
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
        plus_size = s * 3
        gw, gh = grid
        shape = plus_shape(s)

        def cell(index: int, col: int, row: int):
            dx = s if row % 2 == 1 else 0.0
            return [Primitive("g", {
                "fill": cells[index].fill,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "style": f"fill-opacity:{cells[index].opacity};",
                "transform": translate(
                    col * (plus_size - s) + dx - s,
                    row * (plus_size - s) - plus_size / 2,
                ),
            }, list(shape))]

        return Tile(s * 2 * gw, s * 2 * gh, tile(gw, gh, cell))
