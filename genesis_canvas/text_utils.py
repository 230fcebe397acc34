"""Text drawing and measurement using glyph sprites."""

from __future__ import annotations

from .host import get_host
from .sprite_data import get_source_data


def emit_text(font_name, text, x, y, color, scale, rotation, flags) -> None:
    """Send a text draw request to the host."""
    get_host().draw_text(x, y, color, scale, rotation, font_name, text, flags)


def _line_count(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def measure(font: str, scale: float, text: str) -> tuple[float, float]:
    """Return the pixel ``(width, height)`` of ``text`` in ``font``.

    Each glyph is the sprite ``font_{font}_{ch}``; tabs use the space glyph.
    """
    max_line_width = 0.0
    current_width = 0.0
    max_glyph_height = 0.0
    for ch in text:
        if ch == "\n":
            max_line_width = max(max_line_width, current_width)
            current_width = 0.0
            continue
        glyph = get_source_data(f"font_{font}_{' ' if ch == chr(9) else ch}")
        if glyph is not None:
            current_width += glyph.width * scale
            max_glyph_height = max(max_glyph_height, glyph.height * scale)
    max_line_width = max(max_line_width, current_width)
    return max_line_width, max_glyph_height * _line_count(text)