"""Bit flags that change how the host draws a quad."""

from enum import IntFlag


class DrawFlags(IntFlag):
    """Drawing flags understood by the host."""

    NONE = 0
    # Repeats the sprite within the containing quad.
    SPRITE_REPEAT = 1 << 0
    # Scales a sprite to fit the dimensions of the containing quad.
    SPRITE_COVER = 1 << 1
    # Ignores camera position and zoom settings.
    POSITION_FIXED = 1 << 2