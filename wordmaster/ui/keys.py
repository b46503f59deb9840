"""Translate Qt key events into the engine's key names."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt

from wordmaster.core.engine import BEGIN_KEY, QUIT_KEY

_KEY_ESCAPE = int(Qt.Key.Key_Escape)
_KEY_SPACE = int(Qt.Key.Key_Space)
_KEY_A = int(Qt.Key.Key_A)
_KEY_Z = int(Qt.Key.Key_Z)


def key_name(key: int, text: str = "") -> Optional[str]:
    """Return ``QUIT_KEY``, ``BEGIN_KEY``, an uppercase letter or None."""
    key = int(key)
    if key == _KEY_ESCAPE:
        return QUIT_KEY
    if key == _KEY_SPACE:
        return BEGIN_KEY
    if _KEY_A <= key <= _KEY_Z:
        return chr(key)
    if len(text) == 1 and text.isascii() and text.isalpha():
        return text.upper()
    return None
