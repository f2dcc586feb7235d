"""
geopattern/color.py
Color conversions between sRGB, linear RGB, CIE XYZ, CIE Lab and HCL

Colors are stored as sRGB channels in [0, 1]; every other space is computed
on demand. Conversions follow the D65 reference white.

Matrix products are computed as an elementwise multiply plus a row sum
rather than through BLAS, so results are bit-identical across machines.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import InvalidHexColor

Triple = Tuple[float, float, float]

# Smallest distinguishable color unit
DELTA = 1.0 / 255.0

# Reference white
D65: Triple = (0.95047, 1.00000, 1.08883)

SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

XYZ_TO_SRGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)

_LAB_EPSILON = (6.0 / 29.0) ** 3
_ACHROMATIC = 1e-4
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _apply(matrix: np.ndarray, v: Triple) -> Triple:
    out = (matrix * np.array(v, dtype=np.float64)).sum(axis=1)
    return float(out[0]), float(out[1]), float(out[2])


def linearize(v: float) -> float:
    """sRGB companding -> linear light."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def delinearize(v: float) -> float:
    """Linear light -> sRGB companding."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * math.pow(v, 1.0 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0


def _lab_finv(f: float) -> float:
    if f > 6.0 / 29.0:
        return f * f * f
    return 3.0 * 6.0 / 29.0 * 6.0 / 29.0 * (f - 4.0 / 29.0)


@dataclass(frozen=True)
class Color:
    """
    A single sRGB color.

    Channels are nominally in [0, 1]. Colors produced from HCL may fall
    slightly outside the gamut; they are kept as computed and only clamped
    by to_hex().
    """
    r: float
    g: float
    b: float

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_hex(cls, s: str) -> "Color":
        """
        Parse "#rgb" or "#rrggbb".

        Raises:
            InvalidHexColor: for any other form
        """
        if not isinstance(s, str) or not s.startswith("#") or len(s) not in (4, 7):
            raise InvalidHexColor(s)
        digits = s[1:]
        if not all(ch in _HEX_DIGITS for ch in digits):
            raise InvalidHexColor(s)

        if len(digits) == 3:
            channels = [int(ch * 2, 16) for ch in digits]
        else:
            channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
        return cls(*(c * DELTA for c in channels))

    @classmethod
    def from_hcl(cls, h: float, c: float, l: float) -> "Color":
        """Build a color from HCL (hue in degrees)."""
        lab = cls.hcl_to_lab(h, c, l)
        xyz = cls.lab_to_xyz(*lab)
        return cls(*cls.xyz_to_rgb(*xyz))

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def rgb(self) -> Triple:
        return self.r, self.g, self.b

    def linear_rgb(self) -> Triple:
        return linearize(self.r), linearize(self.g), linearize(self.b)

    def xyz(self) -> Triple:
        return _apply(SRGB_TO_XYZ, self.linear_rgb())

    def lab(self) -> Triple:
        x, y, z = self.xyz()
        fy = _lab_f(y / D65[1])
        return (
            1.16 * fy - 0.16,
            5.0 * (_lab_f(x / D65[0]) - fy),
            2.0 * (fy - _lab_f(z / D65[2])),
        )

    def hcl(self) -> Triple:
        """
        Hue (degrees, [0, 360)), chroma and luminance.

        Hue is 0 for achromatic colors (both a and b below 1e-4).
        """
        l, a, b = self.lab()
        c = math.hypot(a, b)
        if abs(a) < _ACHROMATIC and abs(b) < _ACHROMATIC:
            h = 0.0
        else:
            h = (360.0 + math.degrees(math.atan2(b, a))) % 360.0
        return h, c, l

    def to_hex(self) -> str:
        """Format as #rrggbb, clamping out-of-gamut channels."""
        def channel(v: float) -> int:
            return int(round(max(0.0, min(1.0, v)) * 255.0))
        return "#{:02x}{:02x}{:02x}".format(*(channel(v) for v in self.rgb()))

    def almost_equal(self, other: "Color") -> bool:
        """True if the summed channel difference is below 3/255."""
        return (
            abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)
        ) < 3.0 * DELTA

    # -------------------------------------------------------------------------
    # Inverse chain
    # -------------------------------------------------------------------------

    @staticmethod
    def hcl_to_lab(h: float, c: float, l: float) -> Triple:
        h = math.radians(h)
        return l, c * math.cos(h), c * math.sin(h)

    @staticmethod
    def lab_to_xyz(l: float, a: float, b: float) -> Triple:
        l2 = (l + 0.16) / 1.16
        return (
            D65[0] * _lab_finv(l2 + a / 5.0),
            D65[1] * _lab_finv(l2),
            D65[2] * _lab_finv(l2 - b / 2.0),
        )

    @staticmethod
    def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
        return _apply(XYZ_TO_SRGB, (x, y, z))

    @staticmethod
    def xyz_to_rgb(x: float, y: float, z: float) -> Triple:
        r, g, b = Color.xyz_to_linear_rgb(x, y, z)
        return delinearize(r), delinearize(g), delinearize(b)


# =============================================================================
# Functional aliases
# =============================================================================

def hex_to_color(s: str) -> Color:
    return Color.from_hex(s)


def color_to_hcl(color: Color) -> Triple:
    return color.hcl()


def hcl_to_color(h: float, c: float, l: float) -> Color:
    return Color.from_hcl(h, c, l)
