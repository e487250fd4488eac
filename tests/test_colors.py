"""Tests for hex colour conversion."""

import pytest

from homepage.colors import hex_to_rgb, hex_to_rgba, is_hex_color


class TestHexToRgba:
    """Test the hover colour conversion."""

    def test_six_digit(self):
        assert hex_to_rgba("ef5350", 80) == "rgba(239,83,80,0.8)"

    def test_leading_hash(self):
        assert hex_to_rgba("#ef5350", 80) == "rgba(239,83,80,0.8)"

    def test_shorthand_expands_each_digit(self):
        for short in ("f0a", "123", "ABC", "#fff"):
            digits = short.lstrip("#")
            expanded = "".join(ch * 2 for ch in digits)
            assert hex_to_rgb(short) == hex_to_rgb(expanded)
            assert hex_to_rgba(short, 50) == hex_to_rgba(expanded, 50)

    def test_shorthand_value(self):
        assert hex_to_rgba("f00", 100) == "rgba(255,0,0,1)"

    def test_opacity_bounds(self):
        assert hex_to_rgba("000000", 0) == "rgba(0,0,0,0)"
        assert hex_to_rgba("000000", 15) == "rgba(0,0,0,0.15)"

    def test_uppercase_digits(self):
        assert hex_to_rgba("1DA1F2", 80) == "rgba(29,161,242,0.8)"


class TestMalformedColours:
    """Malformed input is rejected, never coerced to black."""

    @pytest.mark.parametrize("raw", ["", "#", "ef53", "ef53500", "ggg", "12345z", "#12 45", None])
    def test_rejects(self, raw):
        with pytest.raises(ValueError):
            hex_to_rgba(raw, 80)

    @pytest.mark.parametrize("opacity", [-1, 101, True])
    def test_rejects_opacity(self, opacity):
        with pytest.raises(ValueError):
            hex_to_rgba("ef5350", opacity)

    def test_is_hex_color(self):
        assert is_hex_color("#24292e")
        assert is_hex_color("abc")
        assert not is_hex_color("#24292")
        assert not is_hex_color("blue")
