"""
Tests for pattern selection
"""

import pytest

from geopattern.errors import EmptyPatternCatalog, MalformedDigest
from geopattern.patterns import DEFAULT_PATTERNS, PatternKind
from geopattern.select import pattern_index, select_pattern


def digest_with_pattern_digit(digit):
    """40-char digest whose selection digit (index 20) is `digit`."""
    return "0" * 20 + digit + "0" * 19


class TestPatternIndex:

    @pytest.mark.parametrize("count", range(1, 21))
    def test_always_in_bounds(self, count):
        for value in range(16):
            assert 0 <= pattern_index(value, count) <= count - 1

    @pytest.mark.parametrize("count", range(1, 21))
    def test_extremes(self, count):
        assert pattern_index(0, count) == 0
        assert pattern_index(15, count) == count - 1

    def test_sixteen_patterns_is_identity(self):
        assert [pattern_index(v, 16) for v in range(16)] == list(range(16))

    def test_two_patterns_split(self):
        assert [pattern_index(v, 2) for v in range(16)] == [0] * 8 + [1] * 8

    def test_single_pattern(self):
        assert all(pattern_index(v, 1) == 0 for v in range(16))

    def test_empty(self):
        with pytest.raises(EmptyPatternCatalog):
            pattern_index(3, 0)


class TestSelectPattern:

    @pytest.mark.parametrize("value", range(16))
    def test_default_catalog(self, value):
        digest = digest_with_pattern_digit(format(value, "x"))
        assert select_pattern(digest, DEFAULT_PATTERNS) is DEFAULT_PATTERNS[value]

    def test_reads_digit_twenty(self, reference_digest):
        expected = DEFAULT_PATTERNS[int(reference_digest[20], 16)]
        assert select_pattern(reference_digest, DEFAULT_PATTERNS) is expected

    def test_single_candidate(self, reference_digest):
        assert select_pattern(reference_digest, [PatternKind.XES]) is PatternKind.XES

    def test_restricted_catalog(self):
        catalog = [PatternKind.SQUARES, PatternKind.PLAID]
        assert select_pattern(digest_with_pattern_digit("0"), catalog) is PatternKind.SQUARES
        assert select_pattern(digest_with_pattern_digit("f"), catalog) is PatternKind.PLAID

    def test_empty_catalog(self, reference_digest):
        with pytest.raises(EmptyPatternCatalog):
            select_pattern(reference_digest, [])

    def test_short_digest(self):
        with pytest.raises(MalformedDigest):
            select_pattern("0" * 20, DEFAULT_PATTERNS)
