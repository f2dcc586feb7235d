"""
Tests for pattern templates

Covers:
- Registry and PatternKind name parsing
- Every pattern draws from a digest
- Edge-duplication counts per cell for each wrapping pattern
- Which digest digits style which cells
"""

from collections import Counter

import pytest

from geopattern.config import DEFAULT_STYLE, StyleConfig
from geopattern.errors import MalformedDigest
from geopattern.patterns import (
    DEFAULT_PATTERNS,
    PatternKind,
    PatternTemplate,
    draw_pattern,
    get_pattern,
    list_patterns,
    register_pattern,
)
from geopattern.patterns.base import cell_fill, cell_opacity, cell_style, points, translate
from geopattern.patterns.concentric_circles import INNER_START
from geopattern.patterns.plaid import STRIPE_COUNT
from geopattern.patterns.sine_waves import wave_path


def fill_of(primitive):
    """Cell label of a primitive: its fill, or its stroke for outlines."""
    fill = primitive.attrs.get("fill")
    if fill == "none":
        return primitive.attrs["stroke"]
    return fill


def emitted_counts(template, labelled_cells, grid=(6, 6), params=None):
    gw, gh = grid
    params = params or {axis.name: axis.max_val for axis in template.definition.param_axes}
    result = template.render(params, grid, labelled_cells(gw * gh))
    return Counter(fill_of(p) for p in result.primitives), result


def expected_multiplicity(x, y, wrap_rows=True, wrap_columns=True):
    count = 1
    if wrap_columns and x == 0:
        count += 1
    if wrap_rows and y == 0:
        count += 1
    if wrap_rows and wrap_columns and x == 0 and y == 0:
        count += 1
    return count


# =============================================================================
# Registry
# =============================================================================

class TestRegistry:

    def test_all_kinds_registered(self):
        assert set(list_patterns()) == set(PatternKind)
        assert len(list_patterns()) == 16

    def test_default_catalog_order(self):
        assert [k.value for k in DEFAULT_PATTERNS] == [
            "chevrons", "concentric_circles", "diamonds", "hexagons",
            "mosaic_squares", "nested_squares", "octagons",
            "overlapping_circles", "overlapping_rings", "plaid", "plus_signs",
            "sine_waves", "squares", "tessellation", "triangles", "xes",
        ]

    def test_templates_report_their_kind(self):
        for kind in PatternKind:
            template = get_pattern(kind)
            assert isinstance(template, PatternTemplate)
            assert template.kind is kind

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError):
            register_pattern(get_pattern(PatternKind.SQUARES))

    def test_param_axes_read_leading_digits(self):
        for kind in PatternKind:
            for axis in get_pattern(kind).definition.param_axes:
                assert 0 <= axis.offset < 40
                assert axis.min_val < axis.max_val


class TestPatternKindNames:

    @pytest.mark.parametrize("name", [
        "plus_signs", "plus-signs", "PlusSigns", "PLUS_SIGNS", " plus_signs ",
    ])
    def test_spellings(self, name):
        assert PatternKind.from_name(name) is PatternKind.PLUS_SIGNS

    def test_single_word(self):
        assert PatternKind.from_name("Xes") is PatternKind.XES
        assert PatternKind.from_name("CHEVRONS") is PatternKind.CHEVRONS

    @pytest.mark.parametrize("name", ["", "circles", "joy_division", "plus signs"])
    def test_unknown(self, name):
        with pytest.raises(ValueError):
            PatternKind.from_name(name)

    def test_display_name(self):
        assert PatternKind.CONCENTRIC_CIRCLES.display_name == "ConcentricCircles"


# =============================================================================
# Hash-driven drawing
# =============================================================================

class TestDrawEveryPattern:

    @pytest.mark.parametrize("kind", list(PatternKind), ids=lambda k: k.value)
    def test_draws(self, kind, reference_digest):
        result = draw_pattern(kind, reference_digest)
        assert result.width > 0
        assert result.height > 0
        assert result.primitives

    @pytest.mark.parametrize("kind", list(PatternKind), ids=lambda k: k.value)
    def test_deterministic(self, kind, counting_digest):
        assert draw_pattern(kind, counting_digest) == draw_pattern(kind, counting_digest)

    @pytest.mark.parametrize("kind", list(PatternKind), ids=lambda k: k.value)
    def test_short_digest_rejected(self, kind):
        with pytest.raises(MalformedDigest):
            draw_pattern(kind, "0" * 10)

    @pytest.mark.parametrize("kind,expected", [
        (PatternKind.CHEVRONS, 42),
        (PatternKind.CONCENTRIC_CIRCLES, 72),
        (PatternKind.DIAMONDS, 49),
        (PatternKind.HEXAGONS, 49),
        (PatternKind.MOSAIC_SQUARES, 64),
        (PatternKind.NESTED_SQUARES, 72),
        (PatternKind.OCTAGONS, 36),
        (PatternKind.OVERLAPPING_CIRCLES, 49),
        (PatternKind.OVERLAPPING_RINGS, 49),
        (PatternKind.PLAID, 36),
        (PatternKind.PLUS_SIGNS, 49),
        (PatternKind.SINE_WAVES, 72),
        (PatternKind.SQUARES, 36),
        (PatternKind.TESSELLATION, 26),
        (PatternKind.TRIANGLES, 42),
        (PatternKind.XES, 55),
    ], ids=lambda v: getattr(v, "value", str(v)))
    def test_primitive_counts(self, kind, expected, reference_digest):
        assert len(draw_pattern(kind, reference_digest).primitives) == expected

    def test_custom_style_flows_through(self, counting_digest):
        style = StyleConfig(dark_fill="#010101", light_fill="#fefefe")
        result = draw_pattern(PatternKind.SQUARES, counting_digest, style)
        fills = {p.attrs["fill"] for p in result.primitives}
        assert fills == {"#010101", "#fefefe"}


# =============================================================================
# Edge duplication
# =============================================================================

class TestEdgeDuplication:

    @pytest.mark.parametrize("kind,wrap_rows,wrap_columns", [
        (PatternKind.DIAMONDS, True, True),
        (PatternKind.HEXAGONS, True, True),
        (PatternKind.OVERLAPPING_CIRCLES, True, True),
        (PatternKind.OVERLAPPING_RINGS, True, True),
        (PatternKind.PLUS_SIGNS, True, True),
        (PatternKind.CHEVRONS, True, False),
        (PatternKind.TRIANGLES, False, True),
        (PatternKind.SQUARES, False, False),
        (PatternKind.OCTAGONS, False, False),
    ], ids=lambda v: getattr(v, "value", str(v)))
    def test_per_cell_multiplicity(self, kind, wrap_rows, wrap_columns, labelled_cells):
        counts, _ = emitted_counts(get_pattern(kind), labelled_cells)
        for y in range(6):
            for x in range(6):
                expected = expected_multiplicity(x, y, wrap_rows, wrap_columns)
                assert counts[f"cell-{y * 6 + x}"] == expected, f"cell ({x}, {y})"

    def test_xes_bottom_row_repeated_above(self, labelled_cells):
        counts, result = emitted_counts(get_pattern(PatternKind.XES), labelled_cells)
        for y in range(6):
            for x in range(6):
                expected = expected_multiplicity(x, y) + (1 if y == 5 else 0)
                assert counts[f"cell-{y * 6 + x}"] == expected, f"cell ({x}, {y})"

    def test_non_square_grid(self, labelled_cells):
        counts, _ = emitted_counts(get_pattern(PatternKind.DIAMONDS), labelled_cells, grid=(3, 2))
        assert sum(counts.values()) == 6 + 3 + 2 + 1


# =============================================================================
# Geometry
# =============================================================================

class TestDiamondsGeometry:

    def test_canvas_and_offsets(self, labelled_cells):
        template = get_pattern(PatternKind.DIAMONDS)
        result = template.render({"width": 10.0, "height": 50.0}, (6, 6), labelled_cells(36))
        assert (result.width, result.height) == (60.0, 150.0)

        transforms = [p.attrs["transform"] for p in result.primitives]
        # Corner cell on all four corners
        assert transforms[:4] == [
            translate(-5.0, -25.0),
            translate(55.0, -25.0),
            translate(-5.0, 125.0),
            translate(55.0, 125.0),
        ]
        # First cell of row 1 is staggered by half a tile
        assert transforms[14] == translate(0.0, 0.0)

    def test_shape(self, labelled_cells):
        template = get_pattern(PatternKind.DIAMONDS)
        result = template.render({"width": 10.0, "height": 50.0}, (1, 1), labelled_cells(1))
        assert result.primitives[0].attrs["points"] == points(5, 0, 10, 25, 5, 50, 0, 25)


class TestDecodedSizes:

    def test_zero_digit_gives_minimum(self, zero_digest):
        params = get_pattern(PatternKind.DIAMONDS).decode_params(zero_digest)
        assert params == {"width": 10.0, "height": 10.0}

    def test_f_digit_gives_maximum(self):
        params = get_pattern(PatternKind.DIAMONDS).decode_params("ff" + "0" * 38)
        assert params == {"width": 50.0, "height": 50.0}

    def test_hexagon_canvas(self, zero_digest):
        # side 8: width 8 * 1.5 * 6, height sqrt(3) * 8 * 6
        result = draw_pattern(PatternKind.HEXAGONS, zero_digest)
        assert result.width == pytest.approx(72.0)
        assert result.height == pytest.approx(3 ** 0.5 * 8 * 6)

    def test_plaid_all_zero(self, zero_digest):
        result = draw_pattern(PatternKind.PLAID, zero_digest)
        # 18 gaps + 18 stripes of 5 each way
        assert result.width == 180.0
        assert result.height == 180.0

    def test_sine_wave_height(self, zero_digest):
        result = draw_pattern(PatternKind.SINE_WAVES, zero_digest)
        assert result.width == 100.0
        assert result.height == 3.0 * 36


# =============================================================================
# Digit indexing
# =============================================================================

class TestCellStyles:

    @pytest.mark.parametrize("value", range(16))
    def test_parity_picks_swatch(self, value):
        expected = DEFAULT_STYLE.dark_fill if value % 2 else DEFAULT_STYLE.light_fill
        assert cell_fill(value) == expected

    def test_opacity_range(self):
        assert cell_opacity(0) == DEFAULT_STYLE.opacity_min
        assert cell_opacity(15) == DEFAULT_STYLE.opacity_max

    def test_forward_and_reverse(self, counting_digest):
        template = get_pattern(PatternKind.SQUARES)
        forward = template.cell_styles(counting_digest, 3)
        assert forward == [cell_style(0), cell_style(1), cell_style(2)]
        backward = template.cell_styles(counting_digest, 3, start=39, reverse=True)
        # digits 39, 38, 37 are 7, 6, 5
        assert backward == [cell_style(7), cell_style(6), cell_style(5)]


class TestConcentricCirclesIndexing:

    def test_ring_forward_disc_reversed(self, counting_digest):
        result = draw_pattern(PatternKind.CONCENTRIC_CIRCLES, counting_digest)
        for i in range(36):
            ring, disc = result.primitives[2 * i], result.primitives[2 * i + 1]
            ring_style = cell_style(int(counting_digest[i], 16))
            disc_style = cell_style(int(counting_digest[INNER_START - i], 16))

            assert ring.attrs["fill"] == "none"
            assert ring.attrs["stroke"] == ring_style.fill
            assert f"opacity:{ring_style.opacity};" in ring.attrs["style"]
            assert disc.attrs["fill"] == disc_style.fill
            assert disc.attrs["fill-opacity"] == disc_style.opacity

    def test_stroke_width_in_pixels(self, zero_digest):
        ring = draw_pattern(PatternKind.CONCENTRIC_CIRCLES, zero_digest).primitives[0]
        assert ring.attrs["style"].endswith("stroke-width:2.0px;")

    def test_nested_squares_share_indexing(self, counting_digest):
        result = draw_pattern(PatternKind.NESTED_SQUARES, counting_digest)
        inner = result.primitives[1]
        assert inner.attrs["stroke"] == cell_fill(int(counting_digest[INNER_START], 16))


class TestMosaicSquaresIndexing:

    def test_checkerboard(self, labelled_cells):
        template = get_pattern(PatternKind.MOSAIC_SQUARES)
        result = template.render({"triangle_size": 10.0}, (4, 4), labelled_cells(17))
        first_block = [fill_of(p) for p in result.primitives[:4]]
        second_block = [fill_of(p) for p in result.primitives[4:8]]
        # (0, 0) is an outer tile in one style, (1, 0) an inner tile in two
        assert first_block == ["cell-0"] * 4
        assert second_block == ["cell-1", "cell-1", "cell-2", "cell-2"]

    def test_inner_tile_reads_next_digit(self, counting_digest):
        result = draw_pattern(PatternKind.MOSAIC_SQUARES, counting_digest)
        # cell 15 sits at (3, 3): outer tile, only its own digit
        # cell 14 sits at (2, 3): inner tile, digits 14 and 15
        cell_14 = result.primitives[14 * 4:15 * 4]
        assert cell_14[2].attrs["fill"] == cell_fill(int(counting_digest[15], 16))


class TestPlaidIndexing:

    def test_stripe_reads_odd_digits(self, counting_digest):
        result = draw_pattern(PatternKind.PLAID, counting_digest)
        for k in range(STRIPE_COUNT):
            value = int(counting_digest[2 * k + 1], 16)
            assert result.primitives[k].attrs["fill"] == cell_fill(value)
            assert result.primitives[k].attrs["height"] == 5.0 + value
            assert result.primitives[STRIPE_COUNT + k].attrs["width"] == 5.0 + value


class TestSineWaves:

    def test_path_drawn_twice(self, zero_digest):
        result = draw_pattern(PatternKind.SINE_WAVES, zero_digest)
        first, copy = result.primitives[0], result.primitives[1]
        assert first.attrs["d"] == copy.attrs["d"] == wave_path(100.0, 30.0)
        assert first.attrs["transform"] == translate(-25.0, -45.0)
        assert copy.attrs["transform"] == translate(-25.0, -45.0 + result.height)


class TestTessellation:

    def test_needs_twenty_cells(self, labelled_cells):
        template = get_pattern(PatternKind.TESSELLATION)
        with pytest.raises(ValueError):
            template.render({"side": 10.0}, (5, 4), labelled_cells(19))

    def test_border_pieces_repeated(self, labelled_cells):
        template = get_pattern(PatternKind.TESSELLATION)
        counts, _ = emitted_counts(template, labelled_cells, grid=(5, 4), params={"side": 10.0})
        assert counts["cell-0"] == 4
        assert [counts[f"cell-{i}"] for i in (2, 4, 5)] == [2, 2, 2]
        assert all(counts[f"cell-{i}"] == 1 for i in range(6, 20))
