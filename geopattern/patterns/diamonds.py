"""
geopattern/patterns/diamonds.py
Diamonds - staggered rhombus grid

Odd rows are shifted half a tile to the right (brick stagger) so the
rhombi interlock.
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
    points,
    translate,
)
from .tiling import tile


class DiamondsTemplate(PatternTemplate):
    """Rhombus tiles sized width x height."""

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.DIAMONDS,
            display_name="Diamonds",
            param_axes=[
                ParamAxis(name="width", offset=0, min_val=10.0, max_val=50.0),
                ParamAxis(name="height", offset=1, min_val=10.0, max_val=50.0),
            ],
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        w, h = params["width"], params["height"]
        gw, gh = grid
        shape = points(w / 2, 0, w, h / 2, w / 2, h, 0, h / 2)

        def cell(index: int, col: int, row: int):
            dx = w / 2 if row % 2 == 1 else 0.0
            return [Primitive("polyline", {
                "points": shape,
                "fill": cells[index].fill,
                "fill-opacity": cells[index].opacity,
                "stroke": style.stroke_color,
                "stroke-opacity": style.stroke_opacity,
                "transform": translate(dx + col * w - w / 2, h / 2 * row - h / 2),
            })]

        return Tile(w * gw, h * gh / 2, tile(gw, gh, cell))
