"""
Color Spaces - Random Walks Through RGB

A color space is a small stateful generator: every mutate() call takes one
step of its own random walk through RGB and returns the new color.

Variants:
  red / green / blue  Walk a single channel by +-1, others stay at the seed
  yellow              Walk red by +-1 and copy it into green (blue pinned to 0)
  rgb                 Pick one channel uniformly at random and walk it by +-1

All variants share one record type and one dispatch table, so the state
of any color space can be inspected directly in tests.
"""

import enum

from .colors import Color, perturb
from .presets import SEED_LEVEL


class ColorSpaceKind(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    RGB = "rgb"


_SEEDS = {
    ColorSpaceKind.RED: Color(SEED_LEVEL, 0, 0),
    ColorSpaceKind.GREEN: Color(0, SEED_LEVEL, 0),
    ColorSpaceKind.BLUE: Color(0, 0, SEED_LEVEL),
    ColorSpaceKind.YELLOW: Color(SEED_LEVEL, SEED_LEVEL, 0),
    ColorSpaceKind.RGB: Color(SEED_LEVEL, SEED_LEVEL, SEED_LEVEL),
}

# Per-channel step sizes, indexed by the axis RandomAxisWalk picks
_AXIS_STEPS = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


class ColorSpace:
    """Current color plus the kind of walk that advances it."""

    def __init__(self, kind, color=None):
        self.kind = ColorSpaceKind(kind)
        self.color = _SEEDS[self.kind] if color is None else Color.clamped(*color)

    def reset(self):
        """Return to the seed color."""
        self.color = _SEEDS[self.kind]

    def mutate(self, rng):
        return mutate(self, rng)

    def __repr__(self):
        return f"ColorSpace({self.kind.value}, {tuple(self.color)})"


def _walk_red(color, rng):
    return perturb(color, 1, 0, 0, rng)


def _walk_green(color, rng):
    return perturb(color, 0, 1, 0, rng)


def _walk_blue(color, rng):
    return perturb(color, 0, 0, 1, rng)


def _walk_yellow(color, rng):
    stepped = perturb(color, 1, 0, 0, rng)
    return Color(stepped.r, stepped.r, 0)


def _walk_random_axis(color, rng):
    return perturb(color, *_AXIS_STEPS[rng.choice_index(3)], rng)


_MUTATORS = {
    ColorSpaceKind.RED: _walk_red,
    ColorSpaceKind.GREEN: _walk_green,
    ColorSpaceKind.BLUE: _walk_blue,
    ColorSpaceKind.YELLOW: _walk_yellow,
    ColorSpaceKind.RGB: _walk_random_axis,
}


def mutate(space, rng):
    """Advance the color space one step and return its new color."""
    space.color = _MUTATORS[space.kind](space.color, rng)
    return space.color


def red_walk():
    return ColorSpace(ColorSpaceKind.RED)


def green_walk():
    return ColorSpace(ColorSpaceKind.GREEN)


def blue_walk():
    return ColorSpace(ColorSpaceKind.BLUE)


def yellow_walk():
    return ColorSpace(ColorSpaceKind.YELLOW)


def rgb_walk():
    return ColorSpace(ColorSpaceKind.RGB)


# Registry of all color spaces, keyed by preset name
COLOR_SPACES = {
    "red": red_walk,
    "green": green_walk,
    "blue": blue_walk,
    "yellow": yellow_walk,
    "rgb": rgb_walk,
}
