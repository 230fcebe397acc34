"""The drawing host: records draw commands and holds runtime state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_U32 = 0xFFFFFFFF
_U64 = (1 << 64) - 1


def _high(value: int) -> int:
    return (value >> 32) & _U32


def _low(value: int) -> int:
    return value & _U32


def _signed(value: int) -> int:
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass(frozen=True)
class QuadCommand:
    """A quad draw request with its fields packed as the host receives them."""

    dest_xy: int
    dest_wh: int
    sprite_xy: int
    sprite_wh: int
    sprite_xy_offset: int
    fill_ab: int
    border_radius: int
    border_size: int
    border_color: int
    origin_xy: int
    rotation_deg: int
    flags: int

    @property
    def dest_x(self) -> int:
        return _signed(_high(self.dest_xy))

    @property
    def dest_y(self) -> int:
        return _signed(_low(self.dest_xy))

    @property
    def dest_w(self) -> int:
        return _high(self.dest_wh)

    @property
    def dest_h(self) -> int:
        return _low(self.dest_wh)

    @property
    def sprite_x(self) -> int:
        return _high(self.sprite_xy)

    @property
    def sprite_y(self) -> int:
        return _low(self.sprite_xy)

    @property
    def sprite_w(self) -> int:
        return _signed(_high(self.sprite_wh))

    @property
    def sprite_h(self) -> int:
        return _signed(_low(self.sprite_wh))

    @property
    def texture_x(self) -> int:
        return _signed(_high(self.sprite_xy_offset))

    @property
    def texture_y(self) -> int:
        return _signed(_low(self.sprite_xy_offset))

    @property
    def fill_a(self) -> int:
        return _high(self.fill_ab)

    @property
    def fill_b(self) -> int:
        return _low(self.fill_ab)

    @property
    def origin_x(self) -> int:
        return _signed(_high(self.origin_xy))

    @property
    def origin_y(self) -> int:
        return _signed(_low(self.origin_xy))


@dataclass(frozen=True)
class TextCommand:
    """A text draw request."""

    x: int
    y: int
    color: int
    scale: float
    rotation: float
    font: str
    text: str
    flags: int


@dataclass(frozen=True)
class ClearCommand:
    """A request to fill the whole canvas with one colour."""

    color: int


Command = Union[QuadCommand, TextCommand, ClearCommand]


class Host:
    """In-memory drawing host with a canvas size, clock, camera and assets."""

    def __init__(self, width: int = 256, height: int = 144) -> None:
        for label, value in (("width", width), ("height", height)):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{label} must be between 0 and 65535, got {value}")
        self._width = int(width)
        self._height = int(height)
        self.commands: list[Command] = []
        self._tick = 0
        self._camera = (0.0, 0.0)
        self._sprite_data = b""
        self._sprite_nonce = 0
        self._shader: str | None = None

    def draw_quad(
        self,
        dest_xy,
        dest_wh,
        sprite_xy,
        sprite_wh,
        sprite_xy_offset,
        fill_ab,
        border_radius,
        border_size,
        border_color,
        origin_xy,
        rotation_deg,
        flags,
    ) -> None:
        """Record a quad draw request."""
        self.commands.append(
            QuadCommand(
                dest_xy=int(dest_xy) & _U64,
                dest_wh=int(dest_wh) & _U64,
                sprite_xy=int(sprite_xy) & _U64,
                sprite_wh=int(sprite_wh) & _U64,
                sprite_xy_offset=int(sprite_xy_offset) & _U64,
                fill_ab=int(fill_ab) & _U64,
                border_radius=int(border_radius) & _U32,
                border_size=int(border_size) & _U32,
                border_color=int(border_color) & _U32,
                origin_xy=int(origin_xy) & _U64,
                rotation_deg=int(rotation_deg),
                flags=int(flags) & _U32,
            )
        )

    def draw_text(self, x, y, color, scale, rotation, font, text, flags) -> None:
        """Record a text draw request."""
        self.commands.append(
            TextCommand(
                x=int(x),
                y=int(y),
                color=int(color) & _U32,
                scale=float(scale),
                rotation=float(rotation),
                font=str(font),
                text=str(text),
                flags=int(flags) & _U32,
            )
        )

    def resolution(self) -> tuple[int, int]:
        """Return the canvas size as ``(width, height)``."""
        return self._width, self._height

    def clear(self, color: int) -> None:
        """Record a full-canvas clear."""
        self.commands.append(ClearCommand(int(color) & _U32))

    def tick(self) -> int:
        """Return the number of frames elapsed."""
        return self._tick

    def advance(self, ticks: int = 1) -> None:
        """Move the frame clock forward."""
        if ticks < 0:
            raise ValueError("cannot advance the clock backwards")
        self._tick += int(ticks)

    def camera_xy(self) -> tuple[float, float]:
        """Return the camera position."""
        return self._camera

    def move_camera(self, x: float, y: float) -> None:
        """Place the camera at ``(x, y)``."""
        self._camera = (float(x), float(y))

    def sprite_data_nonce(self) -> int:
        """Return a counter that grows whenever sprite data changes."""
        return self._sprite_nonce

    def sprite_data(self) -> bytes:
        """Return the encoded sprite data."""
        return self._sprite_data

    def set_sprite_data(self, data) -> None:
        """Replace the encoded sprite data and bump the nonce."""
        self._sprite_data = memoryview(data).tobytes()
        self._sprite_nonce += 1

    def set_surface_shader(self, key: str) -> None:
        """Select the surface shader by name."""
        self._shader = str(key)

    def get_surface_shader(self) -> str | None:
        """Return the active surface shader, or None when none is set."""
        return self._shader

    def reset_surface_shader(self) -> None:
        """Go back to the default surface shader."""
        self._shader = None


_current: Host | None = None


def get_host() -> Host:
    """Return the active host, creating a default one on first use."""
    global _current
    if _current is None:
        _current = Host()
    return _current


def set_host(host: Host) -> None:
    """Make ``host`` the active host."""
    global _current
    _current = host


def resolution() -> tuple[int, int]:
    """Return the active canvas size as ``(width, height)``."""
    return get_host().resolution()


def clear(color: int) -> None:
    """Clear the canvas with a packed 0xRRGGBBAA colour."""
    get_host().clear(color)


def camera_offset() -> tuple[int, int]:
    """Return the shift that maps screen coordinates to world coordinates."""
    host = get_host()
    cx, cy = host.camera_xy()
    width, height = host.resolution()
    return int(cx) - width // 2, int(cy) - height // 2


def set_shader(key: str) -> None:
    """Select the surface shader by name."""
    get_host().set_surface_shader(key)


def get_shader() -> str:
    """Return the active surface shader name, or an empty string."""
    return get_host().get_surface_shader() or ""


def reset_shader() -> None:
    """Go back to the default surface shader."""
    get_host().reset_surface_shader()