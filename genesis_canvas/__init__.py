"""Chainable 2D canvas drawing primitives that emit commands to a pluggable host."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "flags",
    "hashing",
    "host",
    "quad",
    "rect",
    "sprite",
    "sprite_data",
    "sprite_props",
    "text_box",
    "text_utils",
]