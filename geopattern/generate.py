"""
geopattern/generate.py
Pattern generation session

GeoPattern collects a seed and optional overrides, then build() runs the
whole pipeline:

    digest -> background color -> pattern choice -> tile -> SVG document

build() either completes every step or raises; no partial document is
ever stored.
"""

import logging
from typing import Optional, Sequence, Union

import svgwrite

from . import document
from .color import Color
from .config import (
    DEFAULT_BACKGROUND,
    DEFAULT_STYLE,
    DIGEST_LENGTH,
    HUE_WINDOW,
    SATURATION_WINDOW,
    BackgroundConfig,
    StyleConfig,
)
from .digest import Window, compute_digest, rescale, validate_digest
from .errors import EmptyPatternCatalog, GeoPatternError, NotBuilt
from .patterns import DEFAULT_PATTERNS, PatternKind, Tile, draw_pattern
from .select import select_pattern

log = logging.getLogger(__name__)

ColorLike = Union[Color, str]


def _to_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)


def derive_color(digest: str, base_color: Color) -> Color:
    """
    Shift the base color's hue and chroma by digest-derived offsets.

    The hue offset comes from a 3-digit window mapped onto [0, 359]; the
    saturation digit is mapped onto [0, 1] and added to the chroma when
    even, subtracted when odd. Luminance is kept.

    Raises:
        MalformedDigest: if either window cannot be decoded
    """
    h, c, l = base_color.hcl()

    hue_window = Window(*HUE_WINDOW)
    hue_offset = rescale(hue_window.decode(digest), 0, hue_window.max_value, 0, 359)

    sat_window = Window(*SATURATION_WINDOW)
    sat_value = sat_window.decode(digest)
    sat_offset = rescale(sat_value, 0, sat_window.max_value, 0, 1)

    hue = abs(h - hue_offset)
    chroma = c + sat_offset if sat_value % 2 == 0 else c - sat_offset

    log.debug(f"Hue offset {hue_offset:.3f}, saturation digit {sat_value} -> "
              f"HCL ({hue:.3f}, {chroma:.4f}, {l:.4f})")
    return Color.from_hcl(hue, chroma, l)


def background_fill(color: Color, config: BackgroundConfig = DEFAULT_BACKGROUND) -> str:
    """
    Format the background as an rgb() fill.

    Each channel is scaled by config.channel_scale and wrapped into 0-255,
    which also absorbs out-of-gamut values coming back from HCL.
    """
    channels = [
        int(abs(value * scale)) % 256
        for value, scale in zip(color.rgb(), config.channel_scale)
    ]
    return "rgb({}, {}, {})".format(*channels)


class GeoPattern:
    """
    Builder and result holder for one generated pattern.

    Example:
        pattern = GeoPattern("my project").build()
        pattern.to_base64_data_uri()

    Args:
        seed: Any string; hashed with SHA-1
        base_color: Color to derive the background from (Color or hex)
        color: Final background color; skips derivation entirely
        patterns: Ordered candidates to choose from (defaults to all)
        style: Stroke and fill swatches
        background: Base color default and channel scaling
        digest: Precomputed hex digest; replaces hashing the seed
    """

    def __init__(
        self,
        seed: str,
        *,
        base_color: Optional[ColorLike] = None,
        color: Optional[ColorLike] = None,
        patterns: Optional[Sequence[PatternKind]] = None,
        style: Optional[StyleConfig] = None,
        background: Optional[BackgroundConfig] = None,
        digest: Optional[str] = None,
    ):
        self.seed = seed
        self.style = style or DEFAULT_STYLE
        self.background = background or DEFAULT_BACKGROUND
        self.base_color = _to_color(
            base_color if base_color is not None else self.background.base_color
        )
        self.final_color = _to_color(color) if color is not None else None

        if patterns is None:
            patterns = DEFAULT_PATTERNS
        self.patterns = [
            PatternKind.from_name(p) if isinstance(p, str) else p for p in patterns
        ]
        if not self.patterns:
            raise EmptyPatternCatalog()

        self._digest = digest if digest is not None else compute_digest(seed)

        self._color: Optional[Color] = None
        self._pattern: Optional[PatternKind] = None
        self._tile: Optional[Tile] = None
        self._document: Optional[svgwrite.Drawing] = None

    @classmethod
    def from_digest(cls, digest: str, **overrides) -> "GeoPattern":
        """Start a session from a precomputed hex digest instead of a seed."""
        return cls("", digest=digest, **overrides)

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def build(self) -> "GeoPattern":
        """
        Run the pipeline and store the result.

        Returns:
            self, for chaining

        Raises:
            MalformedDigest: if any digest window cannot be decoded
        """
        try:
            validate_digest(self._digest, DIGEST_LENGTH)
            if self.final_color is not None:
                color = self.final_color
            else:
                color = derive_color(self._digest, self.base_color)
            pattern = select_pattern(self._digest, self.patterns)
            tile = draw_pattern(pattern, self._digest, self.style)
            drawing = document.build_document(tile, background_fill(color, self.background))
        except GeoPatternError as e:
            log.warning(f"Pattern build failed for digest {self._digest!r}: {e}")
            raise

        self._color = color
        self._pattern = pattern
        self._tile = tile
        self._document = drawing
        log.debug(f"Built {pattern.value} ({len(tile.primitives)} primitives) "
                  f"for digest {self._digest}")
        return self

    @property
    def is_built(self) -> bool:
        return self._document is not None

    def _require_built(self) -> None:
        if self._document is None:
            raise NotBuilt()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def digest(self) -> str:
        return self._digest

    @property
    def color(self) -> Color:
        self._require_built()
        return self._color

    @property
    def pattern(self) -> PatternKind:
        self._require_built()
        return self._pattern

    @property
    def tile(self) -> Tile:
        self._require_built()
        return self._tile

    @property
    def document(self) -> svgwrite.Drawing:
        self._require_built()
        return self._document

    # -------------------------------------------------------------------------
    # Outputs
    # -------------------------------------------------------------------------

    def to_svg(self) -> str:
        return document.to_svg(self.document)

    def to_minified_svg(self) -> str:
        return document.minify(self.to_svg())

    def to_data_uri(self) -> str:
        return document.to_data_uri(self.to_minified_svg())

    def to_base64(self) -> str:
        return document.to_base64(self.to_minified_svg())

    def to_base64_data_uri(self) -> str:
        return document.to_base64_data_uri(self.to_minified_svg())


def generate(seed: str, **overrides) -> GeoPattern:
    """Build a pattern for seed in one call."""
    return GeoPattern(seed, **overrides).build()
