"""
Tests for SVG document assembly and encodings
"""

import base64

import pytest

from geopattern.document import (
    SVG_BASE64_PREFIX,
    SVG_UTF8_PREFIX,
    build_document,
    minify,
    to_base64,
    to_base64_data_uri,
    to_data_uri,
    to_svg,
)
from geopattern.patterns import Primitive, Tile


@pytest.fixture
def sample_tile():
    return Tile(60.0, 40.0, [
        Primitive("polyline", {
            "points": [(0.0, 0.0), (1.0, 1.0)],
            "fill": "#ddd",
            "fill-opacity": 0.02,
        }),
        Primitive("g", {"fill": "#222"}, [
            Primitive("rect", {"x": 0, "y": 0, "width": 1, "height": 1}),
        ]),
        Primitive("path", {"d": "M0 0 L1 1", "fill": "none", "stroke": "#222"}),
        Primitive("circle", {"cx": 1, "cy": 2, "r": 3, "fill": "#ddd"}),
    ])


@pytest.fixture
def sample_svg(sample_tile):
    return to_svg(build_document(sample_tile, "rgb(1, 2, 3)"))


class TestBuildDocument:

    def test_xml_declaration(self, sample_svg):
        assert sample_svg.startswith("<?xml")

    def test_background_painted_first(self, sample_svg):
        assert 'fill="rgb(1, 2, 3)"' in sample_svg
        assert sample_svg.index("rgb(1, 2, 3)") < sample_svg.index("<polyline")

    def test_primitives_in_order(self, sample_svg):
        positions = [sample_svg.index(tag) for tag in ("<polyline", "<g", "<path", "<circle")]
        assert positions == sorted(positions)

    def test_polyline_points(self, sample_svg):
        assert 'points="0.0,0.0 1.0,1.0"' in sample_svg

    def test_group_children(self, sample_tile):
        drawing = build_document(sample_tile, "#fff")
        group = drawing.elements[-3]
        assert group.elementname == "g"
        assert len(group.elements) == 1

    def test_hyphenated_attributes_kept(self, sample_svg):
        assert 'fill-opacity="0.02"' in sample_svg

    def test_unsupported_primitive(self):
        with pytest.raises(ValueError):
            build_document(Tile(1, 1, [Primitive("ellipse")]), "#fff")


class TestEncodings:

    def test_minify_single_line(self, sample_svg):
        minified = minify(sample_svg)
        assert "\n" not in minified
        assert minified.startswith("<?xml")
        assert "  <" not in minified

    def test_minify_idempotent(self, sample_svg):
        assert minify(minify(sample_svg)) == minify(sample_svg)

    def test_data_uri(self, sample_svg):
        minified = minify(sample_svg)
        assert to_data_uri(minified) == SVG_UTF8_PREFIX + minified
        assert SVG_UTF8_PREFIX == "data:image/svg+xml;utf8,"

    def test_base64_decodes_to_minified(self, sample_svg):
        minified = minify(sample_svg)
        assert base64.b64decode(to_base64(minified)).decode("utf-8") == minified

    def test_base64_data_uri(self, sample_svg):
        minified = minify(sample_svg)
        uri = to_base64_data_uri(minified)
        assert uri.startswith("data:image/svg+xml;base64,")
        assert uri[len(SVG_BASE64_PREFIX):] == to_base64(minified)
