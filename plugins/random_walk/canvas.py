"""
Headless Pixel Canvas

A size x size RGB surface backed by a numpy uint8 array. The simulation
writes through a flat (size*size, 3) view so that pixel (x, y) lives at
index y*size + x. The viewer and the snapshot mode read the same memory
as an (H, W, 3) image.

Write access is exclusive: acquire_for_write() hands out the buffer once,
and present() hands it back.
"""

from typing import NamedTuple

import numpy as np

from .colors import BLACK
from .presets import CANVAS_SIZE
from .walk import ConfigError


class PointerState(NamedTuple):
    """Host pointer position in canvas coordinates."""
    x: int
    y: int

    @classmethod
    def from_window(cls, wx, wy, window_w, window_h, size):
        """Map a window pixel to the canvas, clamped into [0, size)."""
        x = int(wx * size / max(window_w, 1))
        y = int(wy * size / max(window_h, 1))
        return cls(min(max(x, 0), size - 1), min(max(y, 0), size - 1))


class Canvas:

    def __init__(self, size=CANVAS_SIZE, background=BLACK):
        if size <= 0:
            raise ConfigError(f"canvas size must be positive, got {size}")
        self.size = size
        self.pixels = np.zeros((size, size, 3), dtype=np.uint8)
        self.pixels[:] = background
        self._acquired = False
        self.frames_presented = 0

    @property
    def acquired(self):
        return self._acquired

    def acquire_for_write(self):
        """Return the flat pixel buffer for exclusive writing."""
        if self._acquired:
            raise RuntimeError("canvas is already acquired for writing")
        self._acquired = True
        return self.pixels.reshape(-1, 3)

    def present(self, buffer):
        """Release the buffer handed out by acquire_for_write()."""
        if not self._acquired:
            raise RuntimeError("present() called without acquire_for_write()")
        if not np.shares_memory(buffer, self.pixels):
            raise RuntimeError("present() was given a buffer this canvas does not own")
        self._acquired = False
        self.frames_presented += 1

    def clear(self, color=BLACK):
        """Fill the whole canvas with one color."""
        self.pixels[:] = color

    def to_image(self):
        """(size, size, 3) uint8 copy of the canvas, rows top to bottom."""
        return self.pixels.copy()

    def save(self, path):
        """Write the canvas to an image file (format from the extension)."""
        from PIL import Image
        Image.fromarray(self.pixels).save(path)
        return path
