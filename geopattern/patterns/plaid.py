"""
geopattern/patterns/plaid.py
Plaid - horizontal stripes crossed by the same stripes vertically

Stripe k reads two digits: digit 2k sets the gap before the stripe and
digit 2k + 1 sets both its thickness and its style. The same sequence is
laid down horizontally, then vertically.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..config import DEFAULT_STYLE, StyleConfig
from ..digest import decode_window
from .base import (
    CellStyle,
    ParamAxis,
    PatternDefinition,
    PatternKind,
    PatternTemplate,
    Primitive,
    Tile,
    cell_style,
)

STRIPE_COUNT = 18
# Gaps and thicknesses are the raw digit plus 5
STRIPE_MIN = 5.0
STRIPE_MAX = 20.0


class PlaidTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        axes: List[ParamAxis] = []
        for k in range(STRIPE_COUNT):
            axes.append(ParamAxis(name=f"gap_{k}", offset=2 * k,
                                  min_val=STRIPE_MIN, max_val=STRIPE_MAX))
            axes.append(ParamAxis(name=f"stripe_{k}", offset=2 * k + 1,
                                  min_val=STRIPE_MIN, max_val=STRIPE_MAX))
        return PatternDefinition(
            kind=PatternKind.PLAID,
            display_name="Plaid",
            param_axes=axes,
            grid=(STRIPE_COUNT, 1),
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        """Stripe k uses params gap_k / stripe_k and cells[k]; grid is (stripes, 1)."""
        count = grid[0] * grid[1]
        primitives = []

        height = 0.0
        for k in range(count):
            height += params[f"gap_{k}"]
            size = params[f"stripe_{k}"]
            primitives.append(Primitive("rect", {
                "x": 0,
                "y": height,
                "width": "100%",
                "height": size,
                "opacity": cells[k].opacity,
                "fill": cells[k].fill,
            }))
            height += size

        width = 0.0
        for k in range(count):
            width += params[f"gap_{k}"]
            size = params[f"stripe_{k}"]
            primitives.append(Primitive("rect", {
                "x": width,
                "y": 0,
                "width": size,
                "height": "100%",
                "opacity": cells[k].opacity,
                "fill": cells[k].fill,
            }))
            width += size

        return Tile(width, height, primitives)

    def draw(self, digest: str, style: Optional[StyleConfig] = None) -> Tile:
        style = style or DEFAULT_STYLE
        d = self.definition
        cells = [
            cell_style(decode_window(digest, 2 * k + 1, 1), style)
            for k in range(STRIPE_COUNT)
        ]
        return self.render(self.decode_params(digest), d.grid, cells, style)
