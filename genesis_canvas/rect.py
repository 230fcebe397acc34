"""A chainable rectangle shape."""

from __future__ import annotations

from .colors import apply_opacity
from .quad import QuadShape, emit_rect, radians_to_degrees, to_i32, to_u32


class Rectangle(QuadShape):
    """A filled, optionally bordered and rotated rectangle.

    Every setter changes the rectangle in place and returns it, so calls chain.
    """

    def size(self, w, h) -> Rectangle:
        """Set width and height; a value that does not fit keeps the old one."""
        q = self.quad
        q.w, q.h = to_u32(w, q.w), to_u32(h, q.h)
        return self

    def size_h(self, h) -> Rectangle:
        """Set the height."""
        return self.height(h)

    def size_wh(self, wh) -> Rectangle:
        """Set width and height from a ``(w, h)`` pair."""
        w, h = wh
        return self.size(w, h)

    def width(self, w) -> Rectangle:
        """Set the width."""
        self.quad.w = to_u32(w, self.quad.w)
        return self

    def height(self, h) -> Rectangle:
        """Set the height."""
        self.quad.h = to_u32(h, self.quad.h)
        return self

    def border_radius(self, radius) -> Rectangle:
        """Set the corner radius; a value that does not fit becomes 0."""
        self.quad.border_radius = to_u32(radius, 0)
        return self

    def rotation_deg(self, degrees) -> Rectangle:
        """Set the rotation in degrees; a value that does not fit becomes 0."""
        self.quad.rotation_deg = to_i32(degrees, 0)
        return self

    def rotation_rad(self, radians) -> Rectangle:
        """Set the rotation in radians, rounded to whole degrees."""
        self.quad.rotation_deg = radians_to_degrees(radians)
        return self

    def draw(self) -> None:
        """Send the rectangle to the active host."""
        q = self.quad
        dx, dy = self._destination()
        emit_rect(
            apply_opacity(q.color, q.opacity),
            dx,
            dy,
            q.w,
            q.h,
            q.border_radius,
            q.border_size,
            apply_opacity(q.border_color, q.opacity),
            q.origin_x,
            q.origin_y,
            q.rotation_deg,
            self._position_flags(),
        )