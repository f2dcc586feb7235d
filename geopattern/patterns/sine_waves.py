"""
geopattern/patterns/sine_waves.py
Sine Waves - stacked stroked wave paths

Every wave is drawn twice, the copy one full canvas height lower, so the
image repeats vertically. Wave width is both the stroke width and the
spacing between waves.
"""

from typing import Dict, Sequence, Tuple

from ..config import DEFAULT_STYLE, GRID_SIZE, StyleConfig
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


def wave_path(period: float, amplitude: float) -> str:
    """One and a half periods of a smooth wave, as SVG path data."""
    xoff = period / 4 * 0.7
    p, a = fmt(period / 2), fmt(amplitude)
    return (
        f"M0 {a} "
        f"C {fmt(xoff)} 0, {fmt(period / 2 - xoff)} 0, {p} {a} "
        f"S {fmt(period - xoff)} {fmt(amplitude * 2)}, {fmt(period)} {a} "
        f"S {fmt(period * 1.5 - xoff)} 0, {fmt(period * 1.5)}, {a}"
    )


class SineWavesTemplate(PatternTemplate):

    @property
    def definition(self) -> PatternDefinition:
        return PatternDefinition(
            kind=PatternKind.SINE_WAVES,
            display_name="Sine Waves",
            param_axes=[
                ParamAxis(name="period", offset=0, min_val=100.0, max_val=400.0),
                ParamAxis(name="amplitude", offset=1, min_val=30.0, max_val=100.0),
                ParamAxis(name="wave_width", offset=2, min_val=3.0, max_val=30.0),
            ],
            # One wave per cell of the usual 6x6 grid
            grid=(1, GRID_SIZE * GRID_SIZE),
        )

    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        period = params["period"]
        amplitude = params["amplitude"]
        wave_width = params["wave_width"]
        count = grid[0] * grid[1]
        height = wave_width * count
        d = wave_path(period, amplitude)

        primitives = []
        for i in range(count):
            path = Primitive("path", {
                "d": d,
                "fill": "none",
                "stroke": cells[i].fill,
                "style": f"opacity:{cells[i].opacity};stroke-width:{wave_width}px;",
            })
            y = wave_width * i - amplitude * 1.5
            primitives.append(path.with_attrs(transform=translate(-period / 4, y)))
            primitives.append(path.with_attrs(transform=translate(-period / 4, y + height)))

        return Tile(period, height, primitives)
