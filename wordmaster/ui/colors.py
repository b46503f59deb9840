"""Colour palette for the game panel."""

from __future__ import annotations


class GameColors:
    BACKGROUND = "#b3b3b3"
    PANEL = "#80663e"
    PANEL_EDGE = "#3e2f1c"

    TEXT = "#000000"
    COMPLETED = "#196a19"
    ERROR = "#ff0000"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert ``#RRGGBB`` to an (r, g, b) tuple."""
    value = value.strip()
    if not (value.startswith("#") and len(value) == 7):
        raise ValueError(f"Expected #RRGGBB colour, got {value!r}")
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)
