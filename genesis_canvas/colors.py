"""Colour helpers for packed 0xRRGGBBAA values."""

import math

_GAMMA = 2.2


def apply_opacity(color: int, opacity: float) -> int:
    """Scale the alpha byte of ``color`` by a gamma-corrected ``opacity``."""
    color = int(color) & 0xFFFFFFFF
    opacity = float(opacity)
    original_alpha = color & 0xFF
    if math.isnan(opacity):
        new_alpha = 0
    else:
        opacity = min(max(opacity, 0.0), 1.0)
        scaled = original_alpha * opacity ** (1.0 / _GAMMA)
        new_alpha = int(math.floor(scaled + 0.5))
    return (color & 0xFFFFFF00) | (new_alpha & 0xFF)