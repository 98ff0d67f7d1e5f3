"""
WalkSimulator - Per-Frame Driver for the Random Walk Painter

Owns the walker list, the shared RandomSource and the Canvas. The host
calls on_frame() once per display tick; each call takes the canvas
buffer, runs a fixed number of sub-steps (every walker draws once per
sub-step, in list order) and hands the buffer back for presentation.

No pygame dependency, so it runs headless in tests and snapshot mode.

Usage:
    from random_walk.simulator import WalkSimulator
    sim = WalkSimulator.from_preset("rgb_blend", seed=7)
    sim.on_frame()
    image = sim.canvas.to_image()  # (S, S, 3) uint8
"""

import enum

from .canvas import Canvas
from .color_spaces import COLOR_SPACES
from .colors import BLACK
from .presets import CANVAS_SIZE, UPDATES_PER_FRAME, get_preset
from .rng import RandomSource
from .walk import ConfigError
from .walkers import WALKER_CLASSES, draw


class SimState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


def _start_position(frac, size):
    fx, fy = frac
    return (min(int(fx * size), size - 1), min(int(fy * size), size - 1))


def _make_color_space(name):
    try:
        return COLOR_SPACES[name]()
    except KeyError:
        raise ConfigError(f"unknown color space: {name!r}") from None


def create_walker(entry, size=CANVAS_SIZE):
    """Build one walker from a preset entry dict."""
    kind = entry["kind"]
    if kind not in WALKER_CLASSES:
        raise ConfigError(f"unknown walker kind: {kind!r}")
    cls = WALKER_CLASSES[kind]
    position = _start_position(entry.get("start", (0.5, 0.5)), size)

    if kind == "generic":
        return cls(position, _make_color_space(entry["color_space"]), size=size)
    if kind == "blending":
        return cls(position, _make_color_space(entry["color_space"]),
                   entry.get("alpha", 0.3), size=size)
    if kind == "perturb":
        return cls(position, *entry.get("perturb", (1, 1, 1)), size=size)
    if kind == "noisy":
        return cls(position, entry.get("color", (127, 127, 127)),
                   entry.get("noise", 1), size=size)
    return cls(position, size=size)


def build_walkers(preset_key, size=CANVAS_SIZE):
    """Instantiate the walker list for a preset, in paint order."""
    preset = get_preset(preset_key)
    if preset is None:
        raise ConfigError(f"unknown preset: {preset_key!r}")
    return [create_walker(entry, size) for entry in preset["walkers"]]


class WalkSimulator:

    def __init__(self, walkers, rng, canvas, substeps=UPDATES_PER_FRAME):
        """
        Args:
            walkers: Walkers in paint order
            rng: RandomSource shared by every walker
            canvas: Canvas all walkers paint into
            substeps: Sub-steps run per on_frame() call
        """
        if substeps < 0:
            raise ConfigError(f"substeps must be non-negative, got {substeps}")
        for w in walkers:
            self._check_fits(w, canvas)
        self.walkers = list(walkers)
        self.rng = rng
        self.canvas = canvas
        self.substeps = substeps
        self.state = SimState.IDLE
        self.frame_count = 0
        self.substep_count = 0

    @classmethod
    def from_preset(cls, preset_key, size=CANVAS_SIZE, seed=None,
                    substeps=UPDATES_PER_FRAME):
        canvas = Canvas(size)
        return cls(build_walkers(preset_key, size), RandomSource(seed), canvas,
                   substeps=substeps)

    @staticmethod
    def _check_fits(walker, canvas):
        if walker.walk.size != canvas.size:
            raise ConfigError(
                f"walker walks a {walker.walk.size} canvas but the canvas is {canvas.size}"
            )

    def add_walker(self, walker):
        """Append a walker; it paints after all existing walkers."""
        self._check_fits(walker, self.canvas)
        self.walkers.append(walker)

    def remove_walker(self, walker):
        self.walkers.remove(walker)

    def tick(self, buffer, pointer=None):
        """One sub-step: every walker draws once, in list order."""
        rng = self.rng
        for w in self.walkers:
            draw(w, buffer, rng, pointer)
        self.substep_count += 1

    def on_frame(self, pointer=None):
        """Run one frame of sub-steps against the canvas.

        Args:
            pointer: PointerState (or (x, y)) in canvas coordinates, if any
        """
        self.state = SimState.RUNNING
        buffer = self.canvas.acquire_for_write()
        try:
            for _ in range(self.substeps):
                self.tick(buffer, pointer)
        finally:
            self.canvas.present(buffer)
        self.frame_count += 1
        return self.canvas

    def run_frames(self, n, pointer=None):
        """Advance n frames. Returns the canvas."""
        for _ in range(n):
            self.on_frame(pointer)
        return self.canvas

    def on_clear(self, color=BLACK):
        self.canvas.clear(color)

    @property
    def stats(self):
        """Return current simulation statistics."""
        return {
            "state": self.state.value,
            "frames": self.frame_count,
            "substeps": self.substep_count,
            "walkers": len(self.walkers),
        }
