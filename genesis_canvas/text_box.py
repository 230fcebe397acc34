"""A box of wrapped text drawn glyph by glyph from font sprites."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from .colors import apply_opacity
from .flags import DrawFlags
from .host import resolution
from .quad import Quad, to_i32, to_u32
from .sprite_data import emit_sprite, get_source_data
from .text_utils import measure

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _float_to_u32(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_U32_MAX)))


def _float_to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, float(_I32_MIN)), float(_I32_MAX)))


def _wrap_i32(value: int) -> int:
    value &= _U32_MAX
    return value - (1 << 32) if value & 0x80000000 else value


class Align(Enum):
    """Horizontal alignment of lines inside a text box."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def from_str(cls, s: str) -> Optional[Align]:
        """Return the alignment named ``s``, or None for an unknown name."""
        return {a.value: a for a in cls}.get(s)


class TextBox:
    """Text laid out in lines that fit a box, clipped to the box when drawn.

    Every setter changes the box in place and returns it, so calls chain.
    ``start`` and ``end`` are UTF-8 byte offsets into the text.
    """

    def __init__(self, text: str) -> None:
        width, height = resolution()
        self.text = str(text)
        self.font_name = "medium"
        self.text_scale = 1.0
        self.quad = Quad(w=width, h=height)
        self.alignment = Align.LEFT
        self.start_index = 0
        self.end_index = len(self.text.encode("utf-8"))
        self.keep_spaces = True
        self.keep_tabs = True
        self.keep_newlines = True

    def preserve_spaces(self, preserve: bool) -> TextBox:
        """Keep runs of spaces instead of collapsing them."""
        self.keep_spaces = bool(preserve)
        return self

    def preserve_tabs(self, preserve: bool) -> TextBox:
        """Keep runs of tabs instead of collapsing them."""
        self.keep_tabs = bool(preserve)
        return self

    def preserve_newlines(self, preserve: bool) -> TextBox:
        """Break lines at newlines instead of treating them as spaces."""
        self.keep_newlines = bool(preserve)
        return self

    def preserve_whitespace(self, preserve: bool) -> TextBox:
        """Set space, tab and newline preservation together."""
        self.keep_spaces = self.keep_tabs = self.keep_newlines = bool(preserve)
        return self

    def fixed(self, fixed: bool) -> TextBox:
        """Ignore the camera when drawing."""
        self.quad.fixed = bool(fixed)
        return self

    def font(self, font: str) -> TextBox:
        """Set the font name."""
        self.font_name = str(font)
        return self

    def scale(self, scale: float) -> TextBox:
        """Set the font scale."""
        self.text_scale = float(scale)
        return self

    def align(self, align: Align) -> TextBox:
        """Set the line alignment."""
        self.alignment = Align(align)
        return self

    def position(self, x, y) -> TextBox:
        """Set the box position; a value that does not fit keeps the old one."""
        q = self.quad
        q.x, q.y = to_i32(x, q.x), to_i32(y, q.y)
        return self

    def position_x(self, x) -> TextBox:
        """Set the box's x position."""
        self.quad.x = to_i32(x, self.quad.x)
        return self

    def position_y(self, y) -> TextBox:
        """Set the box's y position."""
        self.quad.y = to_i32(y, self.quad.y)
        return self

    def position_xy(self, xy) -> TextBox:
        """Set the box position from an ``(x, y)`` pair."""
        x, y = xy
        return self.position(x, y)

    def size(self, w, h) -> TextBox:
        """Set the box size; a value that does not fit keeps the old one."""
        q = self.quad
        q.w, q.h = to_u32(w, q.w), to_u32(h, q.h)
        return self

    def size_h(self, h) -> TextBox:
        """Set the box height."""
        return self.height(h)

    def size_wh(self, wh) -> TextBox:
        """Set the box size from a ``(w, h)`` pair."""
        w, h = wh
        return self.size(w, h)

    def width(self, w) -> TextBox:
        """Set the box width."""
        self.quad.w = to_u32(w, self.quad.w)
        return self

    def height(self, h) -> TextBox:
        """Set the box height."""
        self.quad.h = to_u32(h, self.quad.h)
        return self

    def offset(self, dx, dy) -> TextBox:
        """Move the box by ``(dx, dy)``; a value that does not fit counts as 0."""
        self.quad.offset(to_i32(dx, 0), to_i32(dy, 0))
        return self

    def color(self, color: int) -> TextBox:
        """Set the text colour."""
        self.quad.color = int(color) & _U32_MAX
        return self

    def opacity(self, opacity: float) -> TextBox:
        """Set the opacity."""
        self.quad.opacity = float(opacity)
        return self

    def start(self, start: int) -> TextBox:
        """Set the first byte offset shown (inclusive)."""
        if start < 0:
            raise ValueError(f"start must not be negative, got {start}")
        self.start_index = int(start)
        return self

    def end(self, end: int) -> TextBox:
        """Set the byte offset where the shown text stops (exclusive)."""
        if end < 0:
            raise ValueError(f"end must not be negative, got {end}")
        self.end_index = min(int(end), len(self.text.encode("utf-8")))
        return self

    def rotation_deg(self, degrees) -> TextBox:
        """Set the rotation in degrees; a value that does not fit becomes 0."""
        self.quad.rotation_deg = to_i32(degrees, 0)
        return self

    def _visible_text(self) -> str:
        chars = []
        offset = 0
        for ch in self.text:
            index = offset
            offset += len(ch.encode("utf-8"))
            if index < self.start_index:
                continue
            if index >= self.end_index:
                break
            chars.append(ch)
        return "".join(chars)

    def _tokens(self, text: str) -> list[str]:
        raw: list[str] = []
        word = ""
        for ch in text:
            if ch in " \t\n":
                if word:
                    raw.append(word)
                    word = ""
                raw.append(" " if ch == "\n" and not self.keep_newlines else ch)
            else:
                word += ch
        if word:
            raw.append(word)

        cleaned: list[str] = []
        prev_space = prev_tab = False
        for token in raw:
            if token == " ":
                if self.keep_spaces or (not prev_space and cleaned):
                    cleaned.append(token)
                prev_space, prev_tab = True, False
            elif token == "\t":
                if self.keep_tabs or (not prev_tab and cleaned):
                    cleaned.append(token)
                prev_space, prev_tab = False, True
            else:
                cleaned.append(token)
                prev_space = prev_tab = False
        return cleaned

    def _trim(self, line: str) -> str:
        strip = {
            Align.LEFT: str.lstrip,
            Align.CENTER: str.strip,
            Align.RIGHT: str.rstrip,
        }[self.alignment]
        if not self.keep_spaces:
            line = strip(line, " ")
        if not self.keep_tabs:
            line = strip(line, "\t")
        return line

    def wrap_lines(self, max_width: float) -> list[str]:
        """Split the shown text into lines no wider than ``max_width``."""
        lines: list[str] = []
        current = ""
        for token in self._tokens(self._visible_text()):
            if token == "\n":
                lines.append(current)
                current = ""
                continue
            candidate = current + token
            width, _ = measure(self.font_name, self.text_scale, candidate)
            if width <= max_width:
                current = candidate
            else:
                if current:
                    lines.append(self._trim(current))
                current = token
        if current:
            lines.append(self._trim(current))
        return lines

    def draw(self) -> None:
        """Send each glyph to the active host, clipped to the box.

        Raises ValueError when a glyph sprite has no animation frames.
        """
        q = self.quad
        flags = DrawFlags.POSITION_FIXED if q.fixed else DrawFlags.NONE
        x0, y0 = q.x, q.y
        box_w = _wrap_i32(q.w)
        box_h = _wrap_i32(q.h)
        font, scale = self.font_name, self.text_scale

        _, line_h = measure(font, scale, "M")
        y = float(y0)
        color = apply_opacity(q.color, q.opacity)

        num_chars = 0
        for line in self.wrap_lines(float(q.w)):
            if y > float(y0) + float(box_h):
                break
            line_w, _ = measure(font, scale, line)
            x = {
                Align.LEFT: float(x0),
                Align.CENTER: x0 + (box_w - line_w) * 0.5,
                Align.RIGHT: x0 + (box_w - line_w),
            }[self.alignment]

            for ch in line:
                if num_chars > self.end_index:
                    break
                num_chars += 1
                key = f"font_{font}_{' ' if ch == chr(9) else ch}"
                glyph = get_source_data(key)
                if glyph is None:
                    continue
                if not glyph.animation_frames:
                    raise ValueError(f"glyph {key!r} has no animation frames")
                frame = glyph.animation_frames[0]
                dw = _float_to_u32(glyph.width * scale)
                dh = _float_to_u32(glyph.height * scale)
                dx = _float_to_i32(x)
                dy = _float_to_i32(y)

                left_over = x0 - dx
                right_over = dx + dw - (x0 + box_w)
                bottom_over = dy + dh - (y0 + box_h)

                emit_sprite(
                    dx + left_over,
                    dy,
                    (dw - right_over - left_over) & _U32_MAX,
                    (dh - bottom_over) & _U32_MAX,
                    frame.x,
                    frame.y,
                    glyph.width,
                    glyph.height,
                    -left_over,
                    0,
                    color,
                    0,
                    0,
                    0,
                    0,
                    q.origin_x,
                    q.origin_y,
                    q.rotation_deg,
                    flags,
                )
                x += dw
            y += line_h