"""Sprite source data: its binary encoding, cache and frame timing."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping

from .host import get_host

_log = logging.getLogger(__name__)

_U32 = 0xFFFFFFFF
_MAX_SPRITE_DATA = 1024 * 1024


class SpriteDataError(ValueError):
    """Raised when sprite data cannot be encoded or decoded."""


class SpriteAnimationDirection(IntEnum):
    FORWARD = 0
    REVERSE = 1
    PING_PONG = 2
    PING_PONG_REVERSE = 3


@dataclass(frozen=True)
class SpriteAnimationFrame:
    x: int = 0
    y: int = 0
    duration: float = 0.0


@dataclass(frozen=True)
class SpriteSourceData:
    width: int = 0
    height: int = 0
    animation_loop_count: int = 0
    animation_direction: SpriteAnimationDirection = SpriteAnimationDirection.FORWARD
    animation_frames: tuple[SpriteAnimationFrame, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "animation_frames", tuple(self.animation_frames))


def encode_sprite_data(sprites: Mapping[str, SpriteSourceData]) -> bytes:
    """Encode a name-to-sprite mapping, keys in sorted order."""
    out = bytearray()
    try:
        out += struct.pack("<I", len(sprites))
        for name in sorted(sprites):
            sprite = sprites[name]
            encoded_name = name.encode("utf-8")
            out += struct.pack("<I", len(encoded_name)) + encoded_name
            out += struct.pack(
                "<IIIB",
                sprite.width,
                sprite.height,
                sprite.animation_loop_count,
                int(sprite.animation_direction),
            )
            out += struct.pack("<I", len(sprite.animation_frames))
            for frame in sprite.animation_frames:
                out += struct.pack("<IIf", frame.x, frame.y, frame.duration)
    except (struct.error, OverflowError) as err:
        raise SpriteDataError(f"cannot encode sprite data: {err}") from err
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def unpack(self, fmt: str) -> tuple:
        size = struct.calcsize(fmt)
        if self._pos + size > len(self._data):
            raise SpriteDataError("unexpected end of sprite data")
        values = struct.unpack_from(fmt, self._data, self._pos)
        self._pos += size
        return values

    def string(self) -> str:
        (length,) = self.unpack("<I")
        if self._pos + length > len(self._data):
            raise SpriteDataError("unexpected end of sprite data")
        raw = self._data[self._pos : self._pos + length]
        self._pos += length
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise SpriteDataError("sprite name is not valid UTF-8") from err


def decode_sprite_data(data) -> dict[str, SpriteSourceData]:
    """Decode a sprite mapping; bytes after the mapping are ignored."""
    reader = _Reader(memoryview(data).tobytes())
    (count,) = reader.unpack("<I")
    sprites: dict[str, SpriteSourceData] = {}
    for _ in range(count):
        name = reader.string()
        width, height, loop_count, direction = reader.unpack("<IIIB")
        try:
            direction = SpriteAnimationDirection(direction)
        except ValueError as err:
            raise SpriteDataError(f"invalid animation direction {direction}") from err
        (frame_count,) = reader.unpack("<I")
        frames = tuple(
            SpriteAnimationFrame(*reader.unpack("<IIf")) for _ in range(frame_count)
        )
        sprites[name] = SpriteSourceData(width, height, loop_count, direction, frames)
    return sprites


class _SpriteCache:
    def __init__(self) -> None:
        self.host = None
        self.nonce = 0
        self.sprites: dict[str, SpriteSourceData] = {}


_cache = _SpriteCache()


def _sync() -> None:
    host = get_host()
    if _cache.host is not host:
        _cache.host = host
        _cache.nonce = 0
        _cache.sprites = {}
    nonce = host.sprite_data_nonce()
    if _cache.nonce < nonce:
        try:
            sprites = decode_sprite_data(host.sprite_data()[:_MAX_SPRITE_DATA])
        except SpriteDataError as err:
            _log.warning("Sprite data deserialization failed: %s", err)
        else:
            _cache.nonce = nonce
            _cache.sprites = sprites


def get_source_data_nonce() -> int:
    """Return the nonce of the sprite data currently cached."""
    return _cache.nonce if _cache.host is get_host() else 0


def get_source_data(name: str) -> SpriteSourceData | None:
    """Return the sprite named ``name``, refreshing the cache if needed."""
    _sync()
    return _cache.sprites.get(name)


def _fdiv(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def get_frame_index(sprite_data: SpriteSourceData, speed: float) -> int:
    """Return the frame to show at the host's current tick."""
    elapsed = get_host().tick() / 60.0 * 1000.0
    durations = [frame.duration for frame in sprite_data.animation_frames]
    total = _fdiv(sum(durations), speed)
    try:
        animation_time = math.fmod(elapsed, total)
    except ValueError:
        animation_time = math.nan
    accumulated = 0.0
    for index, duration in enumerate(durations):
        accumulated += _fdiv(duration, speed)
        if animation_time < accumulated:
            return index
    return 0


def _pack(high: int, low: int) -> int:
    return ((int(high) & _U32) << 32) | (int(low) & _U32)


def emit_sprite(
    dx,
    dy,
    dw,
    dh,
    sx,
    sy,
    sw,
    sh,
    texture_x,
    texture_y,
    color,
    background_color,
    border_radius,
    border_size,
    border_color,
    origin_x,
    origin_y,
    rotation_deg,
    flags,
) -> None:
    """Send one textured quad to the host."""
    get_host().draw_quad(
        _pack(dx, dy),
        _pack(dw, dh),
        _pack(sx, sy),
        _pack(sw, sh),
        _pack(texture_x, texture_y),
        _pack(background_color, color),
        border_radius,
        border_size,
        border_color,
        _pack(origin_x, origin_y),
        rotation_deg,
        flags,
    )