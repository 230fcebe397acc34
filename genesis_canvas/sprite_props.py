"""Drawing properties of a sprite, as an immutable value."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SpriteProps:
    """Position, size, texture and styling of a sprite.

    The ``with_*`` methods return a changed copy and leave the original as it is.
    """

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    texture_x: int = 0
    texture_y: int = 0
    color: int = 0xFFFFFFFF
    background_color: int = 0x00000000
    border_radius: int = 0
    origin_x: int = 0
    origin_y: int = 0
    rotation: int = 0
    scale_x: float = 1.0
    scale_y: float = 1.0
    flip_x: bool = False
    flip_y: bool = False
    repeat: bool = False
    cover: bool = True
    absolute: bool = False
    fixed: bool = False
    opacity: float = 1.0
    animation_speed: float = 1.0
    frame: Optional[int] = None

    def with_fixed(self, fixed: bool) -> SpriteProps:
        """Ignore the camera when drawing."""
        return replace(self, fixed=bool(fixed))

    def with_position(self, x: int, y: int) -> SpriteProps:
        """Set the position."""
        return replace(self, x=int(x), y=int(y))

    def with_size(self, w: int, h: int) -> SpriteProps:
        """Set the drawn size; 0 means the size of the source image."""
        return replace(self, w=int(w), h=int(h))

    def with_offset(self, dx: int, dy: int) -> SpriteProps:
        """Move the position by ``(dx, dy)``."""
        return replace(self, x=self.x + int(dx), y=self.y + int(dy))

    def with_tex_position(self, texture_x: int, texture_y: int) -> SpriteProps:
        """Set the offset of the texture inside the sprite."""
        return replace(self, texture_x=int(texture_x), texture_y=int(texture_y))

    def with_color(self, color: int) -> SpriteProps:
        """Set the colour blended with the texture."""
        return replace(self, color=int(color) & 0xFFFFFFFF)

    def with_background_color(self, color: int) -> SpriteProps:
        """Set the background colour."""
        return replace(self, background_color=int(color) & 0xFFFFFFFF)

    def with_border_radius(self, radius: int) -> SpriteProps:
        """Set the corner radius."""
        return replace(self, border_radius=int(radius))

    def with_origin(self, origin_x: int, origin_y: int) -> SpriteProps:
        """Set the pivot used for rotation."""
        return replace(self, origin_x=int(origin_x), origin_y=int(origin_y))

    def with_rotation(self, angle: int) -> SpriteProps:
        """Set the rotation in degrees."""
        return replace(self, rotation=int(angle))

    def with_scale(self, scale_x: float, scale_y: float) -> SpriteProps:
        """Set the horizontal and vertical scale."""
        return replace(self, scale_x=float(scale_x), scale_y=float(scale_y))

    def with_flip(self, flip_x: bool, flip_y: bool) -> SpriteProps:
        """Set horizontal and vertical flipping."""
        return replace(self, flip_x=bool(flip_x), flip_y=bool(flip_y))

    def with_repeat(self, repeat: bool) -> SpriteProps:
        """Enable or disable texture repeating."""
        return replace(self, repeat=bool(repeat))

    def with_absolute(self, absolute: bool) -> SpriteProps:
        """Position relative to the screen instead of the world."""
        return replace(self, absolute=bool(absolute))

    def with_opacity(self, opacity: float) -> SpriteProps:
        """Set the opacity, 0.0 to 1.0."""
        return replace(self, opacity=float(opacity))

    def with_animation_speed(self, speed: float) -> SpriteProps:
        """Set the animation playback speed."""
        return replace(self, animation_speed=float(speed))

    def with_frame(self, frame: int) -> SpriteProps:
        """Show one fixed animation frame."""
        if frame < 0:
            raise ValueError(f"frame must not be negative, got {frame}")
        return replace(self, frame=int(frame))