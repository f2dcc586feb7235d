"""
geopattern - Deterministic SVG background patterns from strings

The same string always produces the same image: the string is hashed
(SHA-1) and every color, size and shape decision is read from the digest.

Usage:
    from geopattern import generate

    pattern = generate("my project")
    pattern.to_svg()
    pattern.to_base64_data_uri()
"""

__version__ = "0.1.0"

from .color import Color, hex_to_color, color_to_hcl, hcl_to_color
from .config import StyleConfig, BackgroundConfig, DEFAULT_STYLE, DEFAULT_BACKGROUND
from .digest import compute_digest, decode_window, rescale, round_half_away
from .errors import (
    GeoPatternError,
    MalformedDigest,
    InvalidHexColor,
    EmptyPatternCatalog,
    NotBuilt,
)
from .generate import GeoPattern, generate, derive_color, background_fill
from .patterns import PatternKind, DEFAULT_PATTERNS, get_pattern, list_patterns
from .select import select_pattern

__all__ = [
    # Version
    "__version__",
    # Session
    "GeoPattern",
    "generate",
    "derive_color",
    "background_fill",
    # Color
    "Color",
    "hex_to_color",
    "color_to_hcl",
    "hcl_to_color",
    # Digest
    "compute_digest",
    "decode_window",
    "rescale",
    "round_half_away",
    # Patterns
    "PatternKind",
    "DEFAULT_PATTERNS",
    "get_pattern",
    "list_patterns",
    "select_pattern",
    # Config
    "StyleConfig",
    "BackgroundConfig",
    "DEFAULT_STYLE",
    "DEFAULT_BACKGROUND",
    # Errors
    "GeoPatternError",
    "MalformedDigest",
    "InvalidHexColor",
    "EmptyPatternCatalog",
    "NotBuilt",
]
