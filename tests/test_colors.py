"""Tests for wordmaster.ui.colors – palette and hex parsing."""

from __future__ import annotations

import pytest

from wordmaster.ui.colors import GameColors, hex_to_rgb


class TestGameColors:
    @pytest.mark.parametrize("name", ["BACKGROUND", "PANEL", "PANEL_EDGE", "TEXT", "COMPLETED", "ERROR"])
    def test_palette_entries_are_hex(self, name):
        value = getattr(GameColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_background_grey(self):
        assert hex_to_rgb(GameColors.BACKGROUND) == (179, 179, 179)


class TestHexToRgb:
    def test_black(self):
        assert hex_to_rgb("#000000") == (0, 0, 0)

    def test_mixed_case(self):
        assert hex_to_rgb("#FfA500") == (255, 165, 0)

    def test_surrounding_whitespace(self):
        assert hex_to_rgb("  #196a19 ") == (25, 106, 25)

    @pytest.mark.parametrize("bad", ["000000", "#FFF", "rgba(0,0,0,1)", ""])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)
