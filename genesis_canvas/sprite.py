"""A chainable sprite that draws a frame of a named image asset."""

from __future__ import annotations

import math
from dataclasses import replace

from .colors import apply_opacity
from .flags import DrawFlags
from .host import camera_offset
from .quad import radians_to_degrees, to_f32, to_i32, to_u32
from .sprite_data import emit_sprite, get_frame_index, get_source_data
from .sprite_props import SpriteProps

_U32_MAX = 2**32 - 1


def _as_u32(value: float) -> int:
    """Convert a float to an unsigned 32-bit int, saturating at the bounds."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_U32_MAX)))


def _swap_bytes_u32(value: int) -> int:
    return int.from_bytes((value & _U32_MAX).to_bytes(4, "little"), "big")


class Sprite:
    """A drawable image asset looked up by name in the host's sprite data.

    Every setter changes the sprite in place and returns it, so calls chain.
    """

    def __init__(self, name: str) -> None:
        self.name = str(name)
        self.props = SpriteProps()

    def fixed(self, fixed: bool) -> Sprite:
        """Ignore the camera when drawing."""
        self.props = self.props.with_fixed(fixed)
        return self

    def cover(self, cover: bool) -> Sprite:
        """Scale the texture to cover the destination rectangle."""
        self.props = replace(self.props, cover=bool(cover))
        return self

    def position(self, x, y) -> Sprite:
        """Set the position; a value that does not fit keeps the old one."""
        p = self.props
        self.props = p.with_position(to_i32(x, p.x), to_i32(y, p.y))
        return self

    def position_x(self, x) -> Sprite:
        """Set the x position."""
        p = self.props
        self.props = p.with_position(to_i32(x, p.x), p.y)
        return self

    def position_y(self, y) -> Sprite:
        """Set the y position."""
        p = self.props
        self.props = p.with_position(p.x, to_i32(y, p.y))
        return self

    def position_xy(self, xy) -> Sprite:
        """Set the position from an ``(x, y)`` pair."""
        x, y = xy
        return self.position(x, y)

    def size(self, w, h) -> Sprite:
        """Set the drawn size; 0 means the size of the source image."""
        p = self.props
        self.props = p.with_size(to_u32(w, p.w), to_u32(h, p.h))
        return self

    def size_h(self, h) -> Sprite:
        """Set the drawn height."""
        return self.height(h)

    def size_wh(self, wh) -> Sprite:
        """Set the drawn size from a ``(w, h)`` pair."""
        w, h = wh
        return self.size(w, h)

    def width(self, w) -> Sprite:
        """Set the drawn width."""
        p = self.props
        self.props = p.with_size(to_u32(w, p.w), p.h)
        return self

    def height(self, h) -> Sprite:
        """Set the drawn height."""
        p = self.props
        self.props = p.with_size(p.w, to_u32(h, p.h))
        return self

    def offset(self, dx, dy) -> Sprite:
        """Move the position by ``(dx, dy)``; a value that does not fit counts as 0."""
        self.props = self.props.with_offset(to_i32(dx, 0), to_i32(dy, 0))
        return self

    def offset_x(self, dx) -> Sprite:
        """Move the position horizontally."""
        self.props = self.props.with_offset(to_i32(dx, 0), 0)
        return self

    def offset_y(self, dy) -> Sprite:
        """Move the position vertically."""
        self.props = self.props.with_offset(0, to_i32(dy, 0))
        return self

    def offset_xy(self, delta) -> Sprite:
        """Move the position by a ``(dx, dy)`` pair."""
        dx, dy = delta
        return self.offset(dx, dy)

    def tex_position(self, texture_x, texture_y) -> Sprite:
        """Set the texture offset inside the sprite."""
        p = self.props
        self.props = p.with_tex_position(
            to_i32(texture_x, p.texture_x), to_i32(texture_y, p.texture_y)
        )
        return self

    def tex_position_x(self, texture_x) -> Sprite:
        """Set the horizontal texture offset."""
        p = self.props
        self.props = p.with_tex_position(to_i32(texture_x, p.texture_x), p.texture_y)
        return self

    def tex_position_y(self, texture_y) -> Sprite:
        """Set the vertical texture offset."""
        p = self.props
        self.props = p.with_tex_position(p.texture_x, to_i32(texture_y, p.texture_y))
        return self

    def tex_position_xy(self, texture_xy) -> Sprite:
        """Set the texture offset from an ``(x, y)`` pair."""
        texture_x, texture_y = texture_xy
        return self.tex_position(texture_x, texture_y)

    def color(self, color: int) -> Sprite:
        """Set the colour blended with the texture."""
        self.props = self.props.with_color(color)
        return self

    def background_color(self, color: int) -> Sprite:
        """Set the background colour."""
        self.props = self.props.with_background_color(color)
        return self

    def border_radius(self, radius) -> Sprite:
        """Set the corner radius; a value that does not fit becomes 0."""
        self.props = self.props.with_border_radius(to_u32(radius, 0))
        return self

    def origin(self, origin_x, origin_y) -> Sprite:
        """Set the rotation pivot."""
        p = self.props
        self.props = p.with_origin(to_i32(origin_x, p.origin_x), to_i32(origin_y, p.origin_y))
        return self

    def origin_x(self, origin_x) -> Sprite:
        """Set the pivot's x coordinate."""
        p = self.props
        self.props = p.with_origin(to_i32(origin_x, p.origin_x), p.origin_y)
        return self

    def origin_y(self, origin_y) -> Sprite:
        """Set the pivot's y coordinate."""
        p = self.props
        self.props = p.with_origin(p.origin_x, to_i32(origin_y, p.origin_y))
        return self

    def origin_xy(self, origin) -> Sprite:
        """Set the pivot from an ``(x, y)`` pair."""
        origin_x, origin_y = origin
        return self.origin(origin_x, origin_y)

    def rotation_deg(self, degrees) -> Sprite:
        """Set the rotation in degrees; a value that does not fit becomes 0."""
        self.props = self.props.with_rotation(to_i32(degrees, 0))
        return self

    def rotation_rad(self, radians) -> Sprite:
        """Set the rotation in radians, rounded to whole degrees."""
        self.props = self.props.with_rotation(radians_to_degrees(radians))
        return self

    def scale(self, scale) -> Sprite:
        """Set the same scale on both axes."""
        s = to_f32(scale, 1.0)
        self.props = self.props.with_scale(s, s)
        return self

    def scale_x(self, scale_x) -> Sprite:
        """Set the horizontal scale."""
        self.props = self.props.with_scale(to_f32(scale_x, 1.0), self.props.scale_y)
        return self

    def scale_y(self, scale_y) -> Sprite:
        """Set the vertical scale."""
        self.props = self.props.with_scale(self.props.scale_x, to_f32(scale_y, 1.0))
        return self

    def scale_xy(self, scale) -> Sprite:
        """Set the scale from an ``(x, y)`` pair."""
        sx, sy = scale
        self.props = self.props.with_scale(to_f32(sx, 1.0), to_f32(sy, 1.0))
        return self

    def flip(self, flip_x: bool, flip_y: bool) -> Sprite:
        """Flip horizontally and/or vertically."""
        self.props = self.props.with_flip(flip_x, flip_y)
        return self

    def flip_x(self, flip_x: bool) -> Sprite:
        """Flip horizontally."""
        self.props = self.props.with_flip(flip_x, self.props.flip_y)
        return self

    def flip_y(self, flip_y: bool) -> Sprite:
        """Flip vertically."""
        self.props = self.props.with_flip(self.props.flip_x, flip_y)
        return self

    def repeat(self, repeat: bool) -> Sprite:
        """Tile the texture instead of covering the destination."""
        self.props = self.props.with_repeat(repeat)
        return self

    def absolute(self, absolute: bool) -> Sprite:
        """Position relative to the screen instead of the world."""
        self.props = self.props.with_absolute(absolute)
        return self

    def opacity(self, opacity: float) -> Sprite:
        """Set the opacity, 0.0 to 1.0."""
        self.props = self.props.with_opacity(opacity)
        return self

    def animation_speed(self, speed: float) -> Sprite:
        """Set the animation playback speed."""
        self.props = self.props.with_animation_speed(speed)
        return self

    def frame(self, frame: int) -> Sprite:
        """Show one fixed animation frame."""
        self.props = self.props.with_frame(frame)
        return self

    def _flags(self) -> DrawFlags:
        p = self.props
        flags = DrawFlags.NONE
        if p.fixed:
            flags |= DrawFlags.POSITION_FIXED
        if p.cover:
            flags &= ~DrawFlags.SPRITE_REPEAT
            flags |= DrawFlags.SPRITE_COVER
        if p.repeat:
            flags &= ~DrawFlags.SPRITE_COVER
            flags |= DrawFlags.SPRITE_REPEAT
        return flags

    def draw(self) -> None:
        """Send the sprite to the active host; unknown sprites draw nothing.

        Raises ValueError when the sprite has no animation frames.
        """
        data = get_source_data(self.name)
        if data is None:
            return
        p = self.props
        flags = self._flags()

        dx, dy = p.x, p.y
        if not p.fixed and p.absolute:
            ox, oy = camera_offset()
            dx, dy = dx + ox, dy + oy

        dw = data.width if p.w == 0 else p.w
        dh = data.height if p.h == 0 else p.h
        sw = -data.width if p.flip_x else data.width
        sh = -data.height if p.flip_y else data.height

        if flags & DrawFlags.SPRITE_COVER:
            dw = _as_u32(dw * p.scale_x)
            dh = _as_u32(dh * p.scale_y)

        color = apply_opacity(p.color, p.opacity)
        background = apply_opacity(p.background_color, p.opacity)

        frames = data.animation_frames
        if not frames:
            raise ValueError(f"sprite {self.name!r} has no animation frames")
        index = p.frame if p.frame is not None else get_frame_index(data, p.animation_speed)
        frame = frames[index % len(frames)]

        repeat_x = _as_u32(p.scale_x * 10000.0) if p.repeat else 0
        repeat_y = _swap_bytes_u32(_as_u32(p.scale_y * 10000.0))

        emit_sprite(
            dx,
            dy,
            dw,
            dh,
            frame.x,
            frame.y,
            sw,
            sh,
            p.texture_x,
            p.texture_y,
            color,
            background,
            p.border_radius,
            repeat_x,
            repeat_y,
            p.origin_x,
            p.origin_y,
            p.rotation,
            flags,
        )