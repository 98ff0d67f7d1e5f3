"""
Bounded 2D Random Walk on a Wrapping Canvas

A RandomWalk holds a real-valued position on a size x size torus. Each
update adds an independent uniform step on [-dx_max, dx_max] and
[-dy_max, dy_max], then wraps both coordinates back into [0, size).

It also knows how to find and write its pixel in a flat (size*size, 3)
pixel buffer. Walkers embed one of these rather than subclassing it.
"""

import math

from .colors import Color, blend_knockout
from .presets import CANVAS_SIZE, X_WALK, Y_WALK


class ConfigError(ValueError):
    """Raised when a walk, walker or canvas is built with unusable settings."""


def wrap(coord, size):
    """True modulus of coord into [0, size), never negative."""
    coord = coord % size
    # Tiny negative floats can round up to exactly size
    if coord >= size:
        coord -= size
    return coord


class RandomWalk:

    def __init__(self, x, y, dx_max=X_WALK, dy_max=Y_WALK, size=CANVAS_SIZE):
        """
        Args:
            x, y: Starting position, each in [0, size)
            dx_max, dy_max: Largest step per update along each axis
            size: Canvas side length
        """
        if size <= 0:
            raise ConfigError(f"canvas size must be positive, got {size}")
        if not (0 <= x < size and 0 <= y < size):
            raise ConfigError(
                f"start position ({x}, {y}) is outside the {size}x{size} canvas"
            )
        if int(dx_max) != dx_max or int(dy_max) != dy_max:
            raise ConfigError(
                f"step magnitudes must be whole numbers, got ({dx_max}, {dy_max})"
            )
        if dx_max < 0 or dy_max < 0:
            raise ConfigError(
                f"step magnitudes must be non-negative, got ({dx_max}, {dy_max})"
            )
        self.x = float(x)
        self.y = float(y)
        self.dx_max = int(dx_max)
        self.dy_max = int(dy_max)
        self.size = size

    @property
    def position(self):
        return (self.x, self.y)

    def update(self, rng):
        """Take one step and wrap around the canvas edges."""
        self.x = wrap(self.x + rng.uniform_symmetric(self.dx_max), self.size)
        self.y = wrap(self.y + rng.uniform_symmetric(self.dy_max), self.size)

    def pixel_index(self):
        """Index into the flat pixel buffer for the current position."""
        return math.floor(self.y) * self.size + math.floor(self.x)

    def current_pixel(self, buffer):
        return Color(*(int(v) for v in buffer[self.pixel_index()]))

    def paint_replace(self, buffer, color):
        buffer[self.pixel_index()] = color

    def paint_blend_knockout(self, buffer, color, alpha):
        """Blend color onto the current pixel, skipping channels where color is 0."""
        buffer[self.pixel_index()] = blend_knockout(color, self.current_pixel(buffer), alpha)

    def __repr__(self):
        return f"RandomWalk(x={self.x}, y={self.y}, size={self.size})"
