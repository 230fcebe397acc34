# genesis-canvas

Chainable drawing primitives for a 2D game canvas. You describe rectangles,
sprites and text boxes with chainable setters. Calling `draw()` turns each
one into draw commands and sends them to a *host*. The host holds the
screen resolution, a tick counter, the camera position, the encoded sprite
atlas and the active surface shader. The default `Host` records every
command it receives, so you can inspect what a frame would draw.

## Installation

```
pip install genesis-canvas
```

The package has no runtime dependencies.

## Modules

- `genesis_canvas.host`: `Host` plus the command records `QuadCommand`,
  `TextCommand` and `ClearCommand`. It also has module-level helpers:
  `get_host`, `set_host`, `resolution`, `clear`, `camera_offset`,
  `set_shader`, `get_shader` and `reset_shader`.
- `genesis_canvas.rect`: `Rectangle`.
- `genesis_canvas.sprite`: `Sprite`.
- `genesis_canvas.sprite_props`: `SpriteProps`, an immutable value with
  `with_*` methods.
- `genesis_canvas.text_box`: `TextBox` and `Align`.
- `genesis_canvas.sprite_data`: the sprite atlas types
  `SpriteSourceData`, `SpriteAnimationFrame` and
  `SpriteAnimationDirection`. It also has `encode_sprite_data`,
  `decode_sprite_data`, `get_source_data`, `get_frame_index`,
  `emit_sprite` and `SpriteDataError`.
- `genesis_canvas.quad`: `Quad`, the `QuadShape` base class, the numeric
  coercion helpers (`to_i32`, `to_u32`, `to_f32`, `radians_to_degrees`)
  and `emit_rect`.
- `genesis_canvas.text_utils`: `measure` and `emit_text`.
- `genesis_canvas.colors`: `apply_opacity`.
- `genesis_canvas.flags`: `DrawFlags`.
- `genesis_canvas.hashing`: 64-bit FNV-1a `fnv1a`, with reverse lookup
  through `lookup_fnv1a`.

## Rectangles

```python
from genesis_canvas.host import clear, get_host
from genesis_canvas.rect import Rectangle

clear(0x000000FF)  # packed 0xRRGGBBAA, opaque black

Rectangle().size(32, 16).position(10, 20).color(0xFF0000FF).border_radius(4).draw()

for command in get_host().commands:
    print(command)
```

Every setter changes the object in place and returns it.

Conversion rules for numeric input:

- Floats are truncated.
- For positions, sizes and origins, a value that does not fit the target
  32-bit type is ignored, and the previous value is kept.
- For offsets, a value that does not fit counts as 0.
- For border radius and rotation, a value that does not fit becomes 0.

Colours are packed `0xRRGGBBAA` integers. `opacity(...)` scales the alpha
byte with gamma correction (see `apply_opacity`).

`absolute(True)` shifts the drawn position by the camera offset, which is
the camera position minus half the resolution. `fixed(True)` sets
`DrawFlags.POSITION_FIXED`.

## Sprites

Sprites are looked up by name in the host's sprite atlas. Register the
atlas as encoded bytes:

```python
from genesis_canvas.host import get_host
from genesis_canvas.sprite import Sprite
from genesis_canvas.sprite_data import (
    SpriteAnimationFrame, SpriteSourceData, encode_sprite_data,
)

atlas = {
    "hero": SpriteSourceData(
        width=16, height=16,
        animation_frames=[SpriteAnimationFrame(0, 0, 100.0),
                          SpriteAnimationFrame(16, 0, 100.0)],
    ),
}
get_host().set_sprite_data(encode_sprite_data(atlas))

Sprite("hero").position(40, 40).flip_x(True).scale(2).draw()
```

Drawing rules:

- Drawing a sprite name that is not in the atlas does nothing.
- Drawing a sprite that has no animation frames raises `ValueError`.
- If no frame is pinned with `frame(...)`, the frame is chosen from the
  host's tick counter (60 ticks per second), the frame durations and
  `animation_speed`.

The atlas is decoded again whenever the host's sprite-data nonce grows. If
the data cannot be decoded, a warning is logged and the previous atlas is
kept.

## Text boxes

```python
from genesis_canvas.text_box import Align, TextBox

TextBox("Hello there, traveller").size(64, 32).align(Align.CENTER).draw()
```

A new box has these defaults:

- It is the size of the host's resolution.
- The font is `"medium"`.
- The scale is 1.0.
- Lines are left-aligned.

Glyphs are sprites named `font_<font>_<char>`, and tabs use the space
glyph. Lines wrap to the box width (see `wrap_lines`). Glyphs that reach
past the box are clipped.

Whitespace handling is controlled by `preserve_spaces`, `preserve_tabs`,
`preserve_newlines` and `preserve_whitespace`. `start` and `end` select a
range of UTF-8 byte offsets of the text to show. `Align.from_str` accepts
`"left"`, `"center"` and `"right"`, and returns `None` for anything else.

## Hosts

`Host(width=256, height=144)` is the recording host. Width and height must
each be between 0 and 65535.

- `advance(ticks)` drives animation.
- `move_camera(x, y)` drives camera-relative positioning.
- `set_sprite_data(...)` replaces the atlas and bumps the nonce.
- `set_host(...)` installs a different host as the active one.
- `get_shader()` returns an empty string when no surface shader is set.

## What this package does not do

- It does not rasterise anything or open a window. The included host only
  records commands, and displaying them is left to a host you provide.
- There is no line, circle, ellipse or nine-slice shape.
- There is no object that draws a plain string in one call. `emit_text`
  only forwards a text request to the host.

## Running the tests

```
pip install -e ".[test]"
pytest
```