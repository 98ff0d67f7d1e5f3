"""
Walkers - Random Walks That Paint

Each walker embeds one RandomWalk and a pixel-painting policy. Once per
sub-step the driver calls draw(), which moves the walk and then writes
exactly one pixel:

  generic   Replace the pixel with the next color-space sample
  blending  Knockout-blend the next color-space sample onto the pixel
  perturb   Jitter whatever color is already on the canvas at the pixel
  noisy     Jitter the pen's own held color, then replace the pixel with it
  mouse     Replace the pixel with a color taken from the pointer position

perturb reads canvas state while noisy reads private state. The former
compounds with whatever other walkers painted there, which gives a
visibly noisier texture.
"""

import enum

from .colors import Color, perturb, scale_to_channel
from .presets import CANVAS_SIZE, X_WALK, Y_WALK
from .walk import ConfigError, RandomWalk


class WalkerKind(enum.Enum):
    GENERIC = "generic"
    BLENDING = "blending"
    PERTURB = "perturb"
    NOISY = "noisy"
    MOUSE = "mouse"


class Walker:
    """Shared construction for all walker kinds. Holds the embedded walk."""

    kind = None

    def __init__(self, position, size=CANVAS_SIZE, dx_max=X_WALK, dy_max=Y_WALK):
        x, y = position
        self.walk = RandomWalk(x, y, dx_max, dy_max, size)

    @property
    def position(self):
        return self.walk.position

    def draw(self, buffer, rng, pointer=None):
        draw(self, buffer, rng, pointer)

    def __repr__(self):
        return f"{type(self).__name__}(x={self.walk.x}, y={self.walk.y})"


class GenericWalker(Walker):

    kind = WalkerKind.GENERIC

    def __init__(self, position, color_space, **walk_kw):
        super().__init__(position, **walk_kw)
        self.color_space = color_space


class BlendingWalker(Walker):

    kind = WalkerKind.BLENDING

    def __init__(self, position, color_space, alpha, **walk_kw):
        """
        Args:
            position: Starting (x, y)
            color_space: ColorSpace sampled once per draw
            alpha: Weight of the sampled color in the blend, on [0, 1]
        """
        if not 0.0 <= alpha <= 1.0:
            raise ConfigError(f"alpha must be on [0, 1], got {alpha}")
        super().__init__(position, **walk_kw)
        self.color_space = color_space
        self.alpha = float(alpha)


class PerturbWalker(Walker):

    kind = WalkerKind.PERTURB

    def __init__(self, position, perturb_red, perturb_green, perturb_blue,
                 **walk_kw):
        factors = (perturb_red, perturb_green, perturb_blue)
        if min(factors) < 0:
            raise ConfigError(f"perturbation factors must be non-negative, got {factors}")
        super().__init__(position, **walk_kw)
        self.factors = tuple(int(f) for f in factors)


class NoisyPen(Walker):

    kind = WalkerKind.NOISY

    def __init__(self, position, color, noise, **walk_kw):
        if noise < 0:
            raise ConfigError(f"noise must be non-negative, got {noise}")
        super().__init__(position, **walk_kw)
        self.color = Color.clamped(*color)
        self.noise = int(noise)


class MouseTrackingPen(Walker):

    kind = WalkerKind.MOUSE


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _draw_generic(walker, buffer, rng, pointer):
    walker.walk.update(rng)
    walker.walk.paint_replace(buffer, walker.color_space.mutate(rng))


def _draw_blending(walker, buffer, rng, pointer):
    walker.walk.update(rng)
    walker.walk.paint_blend_knockout(
        buffer, walker.color_space.mutate(rng), walker.alpha
    )


def _draw_perturb(walker, buffer, rng, pointer):
    walk = walker.walk
    walk.update(rng)
    walk.paint_replace(buffer, perturb(walk.current_pixel(buffer), *walker.factors, rng))


def _draw_noisy(walker, buffer, rng, pointer):
    walker.walk.update(rng)
    n = walker.noise
    walker.color = perturb(walker.color, n, n, n, rng)
    walker.walk.paint_replace(buffer, walker.color)


def _draw_mouse(walker, buffer, rng, pointer):
    walk = walker.walk
    walk.update(rng)
    px, py = pointer if pointer is not None else (0, 0)
    walk.paint_replace(buffer, Color.clamped(
        0, scale_to_channel(px, walk.size), scale_to_channel(py, walk.size)
    ))


_DRAWERS = {
    WalkerKind.GENERIC: _draw_generic,
    WalkerKind.BLENDING: _draw_blending,
    WalkerKind.PERTURB: _draw_perturb,
    WalkerKind.NOISY: _draw_noisy,
    WalkerKind.MOUSE: _draw_mouse,
}


def draw(walker, buffer, rng, pointer=None):
    """Advance one walker by one sub-step and paint its pixel.

    Args:
        walker: Any walker instance
        buffer: Flat (size*size, 3) uint8 pixel buffer
        rng: RandomSource shared by the whole simulation
        pointer: Host pointer (x, y) in canvas coordinates, used by mouse pens
    """
    _DRAWERS[walker.kind](walker, buffer, rng, pointer)


# Walker class registry, keyed by preset "kind"
WALKER_CLASSES = {
    "generic": GenericWalker,
    "blending": BlendingWalker,
    "perturb": PerturbWalker,
    "noisy": NoisyPen,
    "mouse": MouseTrackingPen,
}
