"""
geopattern/document.py
SVG document assembly and text encodings

Patterns emit Primitive trees; this module is the only place that talks to
svgwrite. Output helpers are pure functions of the serialized document.
"""

import base64
import io
import logging

import svgwrite

from .patterns import Primitive, Tile

log = logging.getLogger(__name__)

SVG_UTF8_PREFIX = "data:image/svg+xml;utf8,"
SVG_BASE64_PREFIX = "data:image/svg+xml;base64,"


def _element(drawing: svgwrite.Drawing, primitive: Primitive):
    """Convert one primitive (and its children) into an svgwrite element."""
    attrs = dict(primitive.attrs)
    tag = primitive.tag

    # Geometry svgwrite serializes itself is passed through the constructor
    if tag == "polyline":
        element = drawing.polyline(points=attrs.pop("points"))
    elif tag == "path":
        element = drawing.path(d=attrs.pop("d"))
    elif tag == "circle":
        element = drawing.circle()
    elif tag == "rect":
        element = drawing.rect()
    elif tag == "g":
        element = drawing.g()
    else:
        raise ValueError(f"Unsupported primitive: {tag!r}")

    element.update(attrs)
    for child in primitive.children:
        element.add(_element(drawing, child))
    return element


def build_document(tile: Tile, background_fill: str) -> svgwrite.Drawing:
    """
    Assemble the final drawing: a full-size background rect followed by the
    tile's primitives in paint order.
    """
    # Primitives are generated internally, skip svgwrite's attribute validation
    drawing = svgwrite.Drawing(size=(tile.width, tile.height), debug=False)
    drawing.add(drawing.rect(insert=(0, 0), size=("100%", "100%"), fill=background_fill))
    for primitive in tile.primitives:
        drawing.add(_element(drawing, primitive))
    log.debug(f"Document {tile.width}x{tile.height} with {len(tile.primitives)} primitives")
    return drawing


def to_svg(drawing: svgwrite.Drawing) -> str:
    """Serialize with an XML declaration and one element per line."""
    buffer = io.StringIO()
    drawing.write(buffer, pretty=True)
    return buffer.getvalue()


def minify(svg_text: str) -> str:
    """Strip indentation and join all lines."""
    return "".join(line.strip() for line in svg_text.splitlines())


def to_data_uri(minified: str) -> str:
    return SVG_UTF8_PREFIX + minified


def to_base64(minified: str) -> str:
    return base64.b64encode(minified.encode("utf-8")).decode("ascii")


def to_base64_data_uri(minified: str) -> str:
    return SVG_BASE64_PREFIX + to_base64(minified)
