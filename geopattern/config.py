"""
geopattern/config.py
Configuration constants for pattern generation

Style and background settings are plain dataclasses so callers can pass
overrides straight into GeoPattern instead of patching module globals.
"""

from dataclasses import dataclass
from typing import Tuple

# =============================================================================
# Digest
# =============================================================================

# Changing the algorithm changes every generated image
DIGEST_ALGORITHM = "sha1"
DIGEST_LENGTH = 40

# =============================================================================
# Digest windows (offset, length)
# =============================================================================

HUE_WINDOW: Tuple[int, int] = (14, 3)
SATURATION_WINDOW: Tuple[int, int] = (17, 1)
PATTERN_WINDOW: Tuple[int, int] = (20, 1)

# =============================================================================
# Grid
# =============================================================================

# Logical grid used for hash-driven generation (GRID_SIZE x GRID_SIZE)
GRID_SIZE = 6

# =============================================================================
# Style
# =============================================================================

@dataclass(frozen=True)
class StyleConfig:
    """Stroke and fill swatches shared by every pattern."""
    stroke_color: str = "#000"
    stroke_opacity: float = 0.02
    dark_fill: str = "#222"
    light_fill: str = "#ddd"
    opacity_min: float = 0.02
    opacity_max: float = 0.15


DEFAULT_STYLE = StyleConfig()

# =============================================================================
# Background
# =============================================================================

@dataclass(frozen=True)
class BackgroundConfig:
    """
    Background color settings.

    channel_scale multiplies each RGB channel before wrapping into 0-255.
    The defaults keep the established geopattern colors; (255, 255, 255)
    gives the plain sRGB value.
    """
    base_color: str = "#933c3c"
    channel_scale: Tuple[float, float, float] = (105.0, 105.0, 150.0)


DEFAULT_BACKGROUND = BackgroundConfig()
