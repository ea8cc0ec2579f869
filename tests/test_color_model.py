"""
Unit tests for color_model module.

Tests color construction and validation, equality used by the fill
engine, and conversions from RGBA channels and hex strings.
"""

import pytest

from PX_Libs.GridLib.color_model import (
    EMPTY,
    Color,
    colors_equal,
    from_channels,
    from_hex,
    from_rgba_tuple,
    to_hex,
    to_rgba,
)


class TestColorConstruction:
    """Tests for Color validation."""

    def test_opaque_color_channels(self):
        color = Color.opaque(10, 20, 30)

        assert color.rgb == (10, 20, 30)
        assert not color.is_empty

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
    def test_rejects_out_of_range_channels(self, channels):
        """Channels outside 0-255 are rejected at construction."""
        with pytest.raises(ValueError):
            Color.opaque(*channels)

    def test_rejects_non_integer_channels(self):
        with pytest.raises(TypeError):
            Color.opaque(1.5, 0, 0)

    def test_empty_cannot_carry_channels(self):
        with pytest.raises(ValueError):
            Color(1, 2, 3, empty=True)

    def test_colors_are_hashable(self, sample_colors):
        assert len(set(sample_colors + sample_colors)) == len(sample_colors)

    def test_repr(self):
        assert repr(EMPTY) == "Color.EMPTY"
        assert repr(Color.opaque(1, 2, 3)) == "Color.opaque(1, 2, 3)"


class TestColorsEqual:
    """Tests for colors_equal function."""

    def test_empty_equals_empty(self):
        assert colors_equal(EMPTY, Color(empty=True))

    def test_same_rgb_equal(self):
        assert colors_equal(Color.opaque(1, 2, 3), Color.opaque(1, 2, 3))

    def test_different_rgb_not_equal(self):
        assert not colors_equal(Color.opaque(1, 2, 3), Color.opaque(1, 2, 4))

    def test_empty_differs_from_opaque_black(self):
        """Unpainted cells are not the same color as black paint."""
        black = Color.opaque(0, 0, 0)

        assert not colors_equal(EMPTY, black)
        assert not colors_equal(black, EMPTY)

    def test_matches_dataclass_equality(self, sample_colors):
        for a in sample_colors + [EMPTY]:
            for b in sample_colors + [EMPTY]:
                assert colors_equal(a, b) == (a == b)


class TestFromChannels:
    """Tests for from_channels and from_rgba_tuple."""

    def test_zero_alpha_is_empty(self):
        assert from_channels(0, 0, 0, 0) is EMPTY

    def test_transparent_pixels_collapse(self):
        """Every fully transparent pixel is the same color, whatever its hue."""
        assert colors_equal(from_channels(255, 10, 3, 0), from_channels(0, 0, 0, 0))

    def test_alpha_is_discarded(self):
        assert from_channels(9, 8, 7, 128) == Color.opaque(9, 8, 7)
        assert from_channels(9, 8, 7, 255) == Color.opaque(9, 8, 7)

    def test_rejects_invalid_alpha(self):
        with pytest.raises(ValueError):
            from_channels(0, 0, 0, 256)

    def test_from_rgba_tuple(self):
        assert from_rgba_tuple((1, 2, 3, 255)) == Color.opaque(1, 2, 3)
        assert from_rgba_tuple((1, 2, 3, 0)) is EMPTY

    def test_from_rgba_tuple_wrong_length(self):
        with pytest.raises(ValueError):
            from_rgba_tuple((1, 2, 3))


class TestHexConversion:
    """Tests for from_hex and to_hex."""

    def test_parses_picker_value(self):
        assert from_hex("#ff8000") == Color.opaque(255, 128, 0)

    def test_hash_optional_and_case_insensitive(self):
        assert from_hex("FF8000") == from_hex("#ff8000")

    @pytest.mark.parametrize("value", ["", "#fff", "#gg0000", "#12345678", "red"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            from_hex(value)

    def test_to_hex(self):
        assert to_hex(Color.opaque(0, 128, 255)) == "#0080ff"

    def test_to_hex_round_trip(self):
        assert to_hex(from_hex("#a1b2c3")) == "#a1b2c3"

    def test_empty_has_no_hex(self):
        with pytest.raises(ValueError):
            to_hex(EMPTY)


class TestToRgba:
    """Tests for to_rgba function."""

    def test_empty_is_transparent(self):
        assert to_rgba(EMPTY) == (0, 0, 0, 0)

    def test_opaque_has_full_alpha(self):
        assert to_rgba(Color.opaque(4, 5, 6)) == (4, 5, 6, 255)
