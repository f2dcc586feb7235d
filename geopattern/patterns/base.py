"""
geopattern/patterns/base.py
Base class for pattern templates

Each pattern defines:
- Parameter axes (which digest windows size the tile, and into what range)
- A general-purpose render() that accepts any grid and explicit cell styles
- A hash-driven draw() that decodes everything from the digest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import DEFAULT_STYLE, GRID_SIZE, StyleConfig
from ..digest import decode_scaled, decode_window, rescale


class PatternKind(Enum):
    """Closed set of tile geometries, in catalog order."""
    CHEVRONS = "chevrons"
    CONCENTRIC_CIRCLES = "concentric_circles"
    DIAMONDS = "diamonds"
    HEXAGONS = "hexagons"
    MOSAIC_SQUARES = "mosaic_squares"
    NESTED_SQUARES = "nested_squares"
    OCTAGONS = "octagons"
    OVERLAPPING_CIRCLES = "overlapping_circles"
    OVERLAPPING_RINGS = "overlapping_rings"
    PLAID = "plaid"
    PLUS_SIGNS = "plus_signs"
    SINE_WAVES = "sine_waves"
    SQUARES = "squares"
    TESSELLATION = "tessellation"
    TRIANGLES = "triangles"
    XES = "xes"

    @classmethod
    def from_name(cls, name: str) -> "PatternKind":
        """
        Parse "plus_signs", "plus-signs" or "PlusSigns".

        Raises:
            ValueError: for unknown names
        """
        key = name.strip().replace("-", "_")
        if "_" not in key and not key.isupper() and not key.islower():
            # CamelCase -> snake_case
            key = "".join(
                ("_" + ch) if ch.isupper() and i > 0 else ch
                for i, ch in enumerate(key)
            )
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unknown pattern: {name!r}") from None

    @property
    def display_name(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))


@dataclass(frozen=True)
class CellStyle:
    """Fill swatch and opacity for one grid cell."""
    fill: str
    opacity: float


@dataclass
class Primitive:
    """
    One SVG element: tag name, attributes and (for groups) children.

    Attribute names are SVG names ("fill-opacity", not "fill_opacity").
    """
    tag: str
    attrs: Dict[str, object] = field(default_factory=dict)
    children: List["Primitive"] = field(default_factory=list)

    def with_attrs(self, **attrs) -> "Primitive":
        """Copy with extra attributes; keyword underscores become hyphens."""
        merged = dict(self.attrs)
        for key, value in attrs.items():
            merged[key.replace("_", "-")] = value
        return Primitive(self.tag, merged, list(self.children))


@dataclass
class Tile:
    """Rendered pattern: canvas size plus primitives in paint order."""
    width: float
    height: float
    primitives: List[Primitive] = field(default_factory=list)


@dataclass
class ParamAxis:
    """A geometry parameter decoded from one digest window."""
    name: str
    offset: int
    min_val: float
    max_val: float
    length: int = 1

    def decode(self, digest: str) -> float:
        """Decode the window and rescale it into [min_val, max_val]."""
        return decode_scaled(digest, self.offset, self.length, self.min_val, self.max_val)


@dataclass
class PatternDefinition:
    """Static description of a pattern."""
    kind: PatternKind
    display_name: str
    param_axes: List[ParamAxis] = field(default_factory=list)
    grid: Tuple[int, int] = (GRID_SIZE, GRID_SIZE)


# =============================================================================
# Shared helpers
# =============================================================================

def fmt(v: float) -> str:
    """Format a number for transform and path strings."""
    return repr(float(v))


def translate(x: float, y: float) -> str:
    return f"translate({fmt(x)}, {fmt(y)})"


def points(*coords: float) -> List[Tuple[float, float]]:
    """Flat coordinate list -> [(x, y), ...] for polyline primitives."""
    return [(float(x), float(y)) for x, y in zip(coords[0::2], coords[1::2])]


def cell_opacity(value: float, style: StyleConfig = DEFAULT_STYLE) -> float:
    return rescale(value, 0, 15, style.opacity_min, style.opacity_max)


def cell_fill(value: int, style: StyleConfig = DEFAULT_STYLE) -> str:
    return style.dark_fill if value & 1 else style.light_fill


def cell_style(value: int, style: StyleConfig = DEFAULT_STYLE) -> CellStyle:
    """Style for one digest digit: parity picks the swatch, magnitude the opacity."""
    return CellStyle(cell_fill(value, style), cell_opacity(value, style))


class PatternTemplate(ABC):
    """
    Abstract base class for pattern templates.

    Subclasses implement one tile geometry (e.g. diamonds, hexagons).
    """

    @property
    @abstractmethod
    def definition(self) -> PatternDefinition:
        """Return the pattern definition."""
        pass

    @property
    def kind(self) -> PatternKind:
        return self.definition.kind

    @abstractmethod
    def render(
        self,
        params: Dict[str, float],
        grid: Tuple[int, int],
        cells: Sequence[CellStyle],
        style: StyleConfig = DEFAULT_STYLE,
    ) -> Tile:
        """
        Draw the pattern with explicit geometry and cell styles.

        Args:
            params: Geometry values keyed by param axis name
            grid: (width, height) in cells
            cells: One style per cell, row-major (some patterns read more)
            style: Stroke and swatch settings

        Returns:
            Tile with canvas size and primitives
        """
        pass

    def decode_params(self, digest: str) -> Dict[str, float]:
        """Decode every param axis from the digest."""
        return {axis.name: axis.decode(digest) for axis in self.definition.param_axes}

    def cell_styles(
        self,
        digest: str,
        count: int,
        style: StyleConfig = DEFAULT_STYLE,
        start: int = 0,
        reverse: bool = False,
    ) -> List[CellStyle]:
        """
        Decode one style per cell from consecutive digest digits.

        Cell i reads digit start + i, or start - i when reverse is set.
        """
        styles = []
        for i in range(count):
            index = start - i if reverse else start + i
            styles.append(cell_style(decode_window(digest, index, 1), style))
        return styles

    def draw(self, digest: str, style: Optional[StyleConfig] = None) -> Tile:
        """Draw the hash-driven variant on the definition's fixed grid."""
        style = style or DEFAULT_STYLE
        d = self.definition
        width, height = d.grid
        params = self.decode_params(digest)
        cells = self.cell_styles(digest, width * height, style)
        return self.render(params, d.grid, cells, style)
