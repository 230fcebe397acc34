"""Rectangle properties, numeric coercion helpers and a chainable shape base."""

from __future__ import annotations

import math
import numbers
import struct
from dataclasses import dataclass
from typing import TypeVar

from .flags import DrawFlags
from .host import camera_offset, get_host

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1
_F32_MAX = 3.4028234663852886e38


def _to_int(value, low: int, high: int, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        result = int(value)
    else:
        if not math.isfinite(float(value)):
            return default
        result = math.trunc(value)
    return result if low <= result <= high else default


def to_i32(value, default: int) -> int:
    """Truncate ``value`` to a 32-bit signed int, or return ``default``."""
    return _to_int(value, _I32_MIN, _I32_MAX, default)


def to_u32(value, default: int) -> int:
    """Truncate ``value`` to a 32-bit unsigned int, or return ``default``."""
    return _to_int(value, 0, _U32_MAX, default)


def to_f32(value, default: float) -> float:
    """Convert ``value`` to single precision, or return ``default``."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    try:
        result = float(value)
    except OverflowError:
        return default
    if not math.isfinite(result):
        return result
    if abs(result) > _F32_MAX:
        return default
    return struct.unpack("<f", struct.pack("<f", result))[0]


def _saturate_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def radians_to_degrees(radians) -> int:
    """Convert radians to whole degrees, rounding half away from zero."""
    degrees = to_f32(radians, 0.0) * 180.0 / math.pi
    if math.isnan(degrees):
        return 0
    return _saturate_i32(math.copysign(math.floor(abs(degrees) + 0.5), degrees))


@dataclass
class Quad:
    """Properties shared by rectangle-like shapes."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    color: int = 0xFFFFFFFF
    border_radius: int = 0
    border_size: int = 0
    border_color: int = 0xFF000000
    rotation_deg: int = 0
    absolute: bool = False
    origin_x: int = 0
    origin_y: int = 0
    opacity: float = 1.0
    fixed: bool = False

    def offset(self, dx: int, dy: int) -> Quad:
        """Move the position by ``(dx, dy)``."""
        self.x += dx
        self.y += dy
        return self


_S = TypeVar("_S", bound="QuadShape")


class QuadShape:
    """Base for shapes backed by a :class:`Quad`; setters return the shape."""

    def __init__(self) -> None:
        self.quad = Quad()

    def fixed(self: _S, fixed: bool) -> _S:
        self.quad.fixed = bool(fixed)
        return self

    def position(self: _S, x, y) -> _S:
        q = self.quad
        q.x, q.y = to_i32(x, q.x), to_i32(y, q.y)
        return self

    def position_x(self: _S, x) -> _S:
        self.quad.x = to_i32(x, self.quad.x)
        return self

    def position_y(self: _S, y) -> _S:
        self.quad.y = to_i32(y, self.quad.y)
        return self

    def position_xy(self: _S, xy) -> _S:
        x, y = xy
        return self.position(x, y)

    def offset(self: _S, dx, dy) -> _S:
        self.quad.offset(to_i32(dx, 0), to_i32(dy, 0))
        return self

    def offset_x(self: _S, dx) -> _S:
        self.quad.offset(to_i32(dx, 0), 0)
        return self

    def offset_y(self: _S, dy) -> _S:
        self.quad.offset(0, to_i32(dy, 0))
        return self

    def color(self: _S, color: int) -> _S:
        self.quad.color = int(color) & _U32_MAX
        return self

    def border_size(self: _S, size: int) -> _S:
        self.quad.border_size = int(size) & _U32_MAX
        return self

    def border_color(self: _S, color: int) -> _S:
        self.quad.border_color = int(color) & _U32_MAX
        return self

    def origin(self: _S, origin_x, origin_y) -> _S:
        q = self.quad
        q.origin_x, q.origin_y = to_i32(origin_x, q.origin_x), to_i32(origin_y, q.origin_y)
        return self

    def origin_x(self: _S, origin_x) -> _S:
        self.quad.origin_x = to_i32(origin_x, self.quad.origin_x)
        return self

    def origin_y(self: _S, origin_y) -> _S:
        self.quad.origin_y = to_i32(origin_y, self.quad.origin_y)
        return self

    def origin_xy(self: _S, origin) -> _S:
        origin_x, origin_y = origin
        return self.origin(origin_x, origin_y)

    def absolute(self: _S, absolute: bool) -> _S:
        self.quad.absolute = bool(absolute)
        return self

    def opacity(self: _S, opacity: float) -> _S:
        self.quad.opacity = float(opacity)
        return self

    def _destination(self) -> tuple[int, int]:
        dx, dy = self.quad.x, self.quad.y
        if self.quad.absolute:
            ox, oy = camera_offset()
            dx, dy = dx + ox, dy + oy
        return dx, dy

    def _position_flags(self) -> DrawFlags:
        return DrawFlags.POSITION_FIXED if self.quad.fixed else DrawFlags.NONE


def _pack(high: int, low: int) -> int:
    return ((int(high) & _U32_MAX) << 32) | (int(low) & _U32_MAX)


def emit_rect(
    color,
    dx,
    dy,
    dw,
    dh,
    border_radius,
    border_size,
    border_color,
    origin_x,
    origin_y,
    rotation_deg,
    flags,
) -> None:
    """Send one untextured quad to the host."""
    get_host().draw_quad(
        _pack(dx, dy),
        _pack(dw, dh),
        0,
        0,
        0,
        (int(color) & _U32_MAX) << 32,
        border_radius,
        border_size,
        border_color,
        _pack(origin_x, origin_y),
        rotation_deg,
        int(flags),
    )