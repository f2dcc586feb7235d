"""
geopattern/patterns/__init__.py
Pattern registry - maps each PatternKind to its template
"""

from typing import Dict, List, Optional

from ..config import StyleConfig
from .base import (
    CellStyle,
    ParamAxis,
    PatternDefinition,
    PatternKind,
    PatternTemplate,
    Primitive,
    Tile,
)

# Global registry
_REGISTRY: Dict[PatternKind, PatternTemplate] = {}


def register_pattern(template: PatternTemplate) -> None:
    """Register a pattern template."""
    kind = template.definition.kind
    if kind in _REGISTRY:
        raise ValueError(f"Pattern {kind.value} already registered")
    _REGISTRY[kind] = template


def get_pattern(kind: PatternKind) -> PatternTemplate:
    """
    Get the template for a pattern kind.

    Raises:
        KeyError: if no template is registered for kind
    """
    return _REGISTRY[kind]


def list_patterns() -> List[PatternKind]:
    """List registered pattern kinds in registration order."""
    return list(_REGISTRY.keys())


def draw_pattern(kind: PatternKind, digest: str,
                 style: Optional[StyleConfig] = None) -> Tile:
    """Draw the hash-driven variant of a pattern."""
    return get_pattern(kind).draw(digest, style)


# Catalog order; pattern selection indexes into this list
DEFAULT_PATTERNS: List[PatternKind] = list(PatternKind)


# =============================================================================
# Auto-registration of built-in patterns
# =============================================================================

def _register_builtins():
    """Register all built-in pattern templates."""
    # Import here to avoid circular imports
    from .chevrons import ChevronsTemplate
    from .concentric_circles import ConcentricCirclesTemplate
    from .diamonds import DiamondsTemplate
    from .hexagons import HexagonsTemplate
    from .mosaic_squares import MosaicSquaresTemplate
    from .nested_squares import NestedSquaresTemplate
    from .octagons import OctagonsTemplate
    from .overlapping_circles import OverlappingCirclesTemplate
    from .overlapping_rings import OverlappingRingsTemplate
    from .plaid import PlaidTemplate
    from .plus_signs import PlusSignsTemplate
    from .sine_waves import SineWavesTemplate
    from .squares import SquaresTemplate
    from .tessellation import TessellationTemplate
    from .triangles import TrianglesTemplate
    from .xes import XesTemplate

    register_pattern(ChevronsTemplate())
    register_pattern(ConcentricCirclesTemplate())
    register_pattern(DiamondsTemplate())
    register_pattern(HexagonsTemplate())
    register_pattern(MosaicSquaresTemplate())
    register_pattern(NestedSquaresTemplate())
    register_pattern(OctagonsTemplate())
    register_pattern(OverlappingCirclesTemplate())
    register_pattern(OverlappingRingsTemplate())
    register_pattern(PlaidTemplate())
    register_pattern(PlusSignsTemplate())
    register_pattern(SineWavesTemplate())
    register_pattern(SquaresTemplate())
    register_pattern(TessellationTemplate())
    register_pattern(TrianglesTemplate())
    register_pattern(XesTemplate())


# Register on import
_register_builtins()

__all__ = [
    "CellStyle",
    "ParamAxis",
    "PatternDefinition",
    "PatternKind",
    "PatternTemplate",
    "Primitive",
    "Tile",
    "DEFAULT_PATTERNS",
    "register_pattern",
    "get_pattern",
    "list_patterns",
    "draw_pattern",
]
