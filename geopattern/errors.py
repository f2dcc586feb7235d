"""
geopattern/errors.py
Exceptions raised during pattern generation
"""

from typing import Optional


class GeoPatternError(Exception):
    """Base class for all geopattern errors."""


class MalformedDigest(GeoPatternError, ValueError):
    """A digest window is out of bounds or holds non-hex characters."""

    def __init__(self, message: str, offset: Optional[int] = None,
                 length: Optional[int] = None,
                 digest_length: Optional[int] = None):
        super().__init__(message)
        self.offset = offset
        self.length = length
        self.digest_length = digest_length


class InvalidHexColor(GeoPatternError, ValueError):
    """A color string is not in #rgb or #rrggbb form."""

    def __init__(self, value):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class EmptyPatternCatalog(GeoPatternError, ValueError):
    """No patterns were supplied to choose from."""

    def __init__(self, message: str = "Pattern catalog is empty"):
        super().__init__(message)


class NotBuilt(GeoPatternError, RuntimeError):
    """Output was requested before build() completed."""

    def __init__(self, message: str = "Pattern has not been built yet"):
        super().__init__(message)
