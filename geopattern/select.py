"""
geopattern/select.py
Pattern selection

One digest digit picks a pattern from an ordered catalog. The digit is
rescaled from [0, 15] onto the catalog's index range and rounded half away
from zero, so callers that reorder or trim the catalog get a different but
still deterministic choice.
"""

import logging
from typing import Sequence

from .config import PATTERN_WINDOW
from .digest import decode_window, rescale, round_half_away
from .errors import EmptyPatternCatalog
from .patterns import PatternKind

log = logging.getLogger(__name__)


def pattern_index(value: int, count: int) -> int:
    """
    Map a digit value in [0, 15] onto an index in [0, count - 1].

    Raises:
        EmptyPatternCatalog: if count < 1
    """
    if count < 1:
        raise EmptyPatternCatalog()
    if count == 1:
        return 0
    return round_half_away(rescale(value, 0, 15, 0, count - 1))


def select_pattern(digest: str, patterns: Sequence[PatternKind]) -> PatternKind:
    """
    Choose the pattern for a digest.

    Raises:
        EmptyPatternCatalog: if patterns is empty
        MalformedDigest: if the selection window cannot be decoded
    """
    if not patterns:
        raise EmptyPatternCatalog()
    value = decode_window(digest, *PATTERN_WINDOW)
    index = pattern_index(value, len(patterns))
    log.debug(f"Pattern digit {value} -> index {index} of {len(patterns)}")
    return patterns[index]
