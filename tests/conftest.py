"""Pytest configuration - shared digests and cell-style fixtures."""
from __future__ import annotations

import hashlib

import pytest

from geopattern.patterns import CellStyle


# Fixtures used by multiple test files

@pytest.fixture
def reference_digest():
    """SHA-1 of "geopattern", computed independently of the package."""
    return hashlib.sha1(b"geopattern").hexdigest()


@pytest.fixture
def counting_digest():
    """40 digits cycling 0..f so every window is predictable."""
    return ("0123456789abcdef" * 3)[:40]


@pytest.fixture
def zero_digest():
    return "0" * 40


@pytest.fixture
def labelled_cells():
    """
    Factory for cell styles whose fill names the cell index.

    Lets tests count how often each cell is emitted.
    """
    def make(count):
        return [CellStyle(fill=f"cell-{i}", opacity=0.1) for i in range(count)]
    return make
