"""
Color Model - 8-bit RGB Values and Pixel Arithmetic

Colors are immutable (r, g, b) tuples with every channel in [0, 255].
All arithmetic goes through clamp_channel, so any value that reaches the
canvas has been rounded and clamped.

Blending comes in two flavours:
  - blend:          plain weighted average of two colors
  - blend_knockout: same, but a zero channel in the paint color is treated
                    as transparent and leaves the canvas channel untouched
"""

import math
from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def clamped(cls, r, g, b):
        """Build a Color from real-valued channels, rounding and clamping each."""
        return cls(clamp_channel(r), clamp_channel(g), clamp_channel(b))


BLACK = Color(0, 0, 0)


def clamp_channel(value):
    """Constrain to [0, 255] and round to the nearest int (halves round up)."""
    return int(math.floor(max(0.0, min(255.0, value)) + 0.5))


def perturb(color, r_fac, g_fac, b_fac, rng):
    """Shift each channel by an independent draw on [-fac, fac].

    Draws are taken red, green, blue in that order.
    """
    return Color.clamped(
        color.r + rng.uniform_symmetric(r_fac),
        color.g + rng.uniform_symmetric(g_fac),
        color.b + rng.uniform_symmetric(b_fac),
    )


def blend(c1, c2, w):
    """Weighted average: w of c1 plus (1 - w) of c2, per channel."""
    w2 = 1.0 - w
    return Color.clamped(
        w * c1.r + w2 * c2.r,
        w * c1.g + w2 * c2.g,
        w * c1.b + w2 * c2.b,
    )


def _knockout_channel(paint, base, w):
    if paint == 0:
        return clamp_channel(base)
    return clamp_channel(w * paint + (1.0 - w) * base)


def blend_knockout(paint, base, w):
    """Blend paint onto base, skipping channels where paint is exactly 0.

    A pure-red color space (green = blue = 0) therefore only ever touches
    the red channel of the pixel it lands on.
    """
    return Color(
        _knockout_channel(paint.r, base.r, w),
        _knockout_channel(paint.g, base.g, w),
        _knockout_channel(paint.b, base.b, w),
    )


def scale_to_channel(n, size):
    """Map a coordinate on [0, size) to a channel value on [0, 255)."""
    return (int(n) * 255) // size
