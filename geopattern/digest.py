"""
geopattern/digest.py
Digest source and parameter extraction

The hex digest is the only source of variation. Every numeric decision
(hue offset, tile size, opacity, pattern choice) reads a fixed window of
hex digits and rescales it linearly into the range it needs.

CRITICAL: Do NOT use Python's built-in hash() - it's salted per-process.
"""

import hashlib
import math
from dataclasses import dataclass

from .config import DIGEST_ALGORITHM
from .errors import MalformedDigest

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def compute_digest(seed: str) -> str:
    """
    Hash a seed string into a hex digest.

    Uses SHA-1 over the UTF-8 bytes, giving 40 hex characters.

    Example:
        compute_digest("geopattern") -> same 40 characters on every machine
    """
    return hashlib.new(DIGEST_ALGORITHM, seed.encode("utf-8")).hexdigest()


def _is_hex(s: str) -> bool:
    return bool(s) and all(ch in _HEX_DIGITS for ch in s)


def validate_digest(digest: str, min_length: int) -> None:
    """
    Check a whole digest up front.

    Raises:
        MalformedDigest: if the digest is shorter than min_length or holds
            anything other than hex digits
    """
    if not isinstance(digest, str):
        raise MalformedDigest(f"Digest must be a string, got {type(digest).__name__}")
    if len(digest) < min_length:
        raise MalformedDigest(
            f"Digest has {len(digest)} characters, need at least {min_length}",
            offset=0, length=min_length, digest_length=len(digest),
        )
    if not _is_hex(digest):
        raise MalformedDigest(
            "Digest contains non-hex characters",
            offset=0, length=len(digest), digest_length=len(digest),
        )


def decode_window(digest: str, offset: int, length: int) -> int:
    """
    Decode digest[offset:offset + length] as an unsigned hex integer.

    Returns:
        Integer in [0, 16**length - 1]

    Raises:
        MalformedDigest: window out of bounds or non-hex content
    """
    if offset < 0 or length <= 0 or len(digest) < offset + length:
        raise MalformedDigest(
            f"Window ({offset}, {length}) is outside a digest of length {len(digest)}",
            offset=offset, length=length, digest_length=len(digest),
        )
    window = digest[offset:offset + length]
    # int(x, 16) also accepts "_", whitespace and "0x", so check explicitly
    if not _is_hex(window):
        raise MalformedDigest(
            f"Window ({offset}, {length}) holds non-hex content {window!r}",
            offset=offset, length=length, digest_length=len(digest),
        )
    return int(window, 16)


def rescale(v: float, a_min: float, a_max: float, b_min: float, b_max: float) -> float:
    """
    Map v linearly from [a_min, a_max] into [b_min, b_max].

    Written relative to the upper bound so both endpoints map exactly:
    rescale(a_max, ...) is b_max and rescale(a_min, ...) is b_min.
    """
    if a_max == a_min:
        raise ValueError(f"Empty source range [{a_min}, {a_max}]")
    if v == a_min:
        return float(b_min)
    return b_max - (a_max - v) * ((b_max - b_min) / (a_max - a_min))


def round_half_away(v: float) -> int:
    """Round to nearest integer, ties away from zero (round(2.5) would give 2)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def decode_scaled(digest: str, offset: int, length: int,
                  b_min: float, b_max: float) -> float:
    """Decode a window and rescale it from its natural domain into [b_min, b_max]."""
    value = decode_window(digest, offset, length)
    return rescale(value, 0, 16 ** length - 1, b_min, b_max)


@dataclass(frozen=True)
class Window:
    """A fixed (offset, length) slice of the digest."""
    offset: int
    length: int = 1

    @property
    def max_value(self) -> int:
        return 16 ** self.length - 1

    def decode(self, digest: str) -> int:
        return decode_window(digest, self.offset, self.length)

    def scaled(self, digest: str, b_min: float, b_max: float) -> float:
        return decode_scaled(digest, self.offset, self.length, b_min, b_max)
