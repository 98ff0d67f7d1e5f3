"""
Random Walk Presets

Module-level settings shared by the whole simulation, plus the fixed set
of walker configurations that can be chosen at startup.

Each preset lists walkers in paint order. A walker entry names its kind
("generic", "blending", "perturb", "noisy", "mouse") and the settings
that kind needs. Positions are fractions of the canvas side so a preset
works at any --size.
"""

CANVAS_SIZE = 1024        # Side length of the square canvas
UPDATES_PER_FRAME = 750   # Sub-steps per displayed frame
X_WALK = 1                # Max walk distance in x per update
Y_WALK = 1                # Max walk distance in y per update
SEED_LEVEL = 127          # Starting level of each active color-space channel

CENTER = (0.5, 0.5)

PRESETS = {
    "rgb_blend": {
        "name": "RGB Blend",
        "description": "One blending walker on a random-axis RGB walk",
        "walkers": [
            {"kind": "blending", "start": CENTER, "color_space": "rgb", "alpha": 0.3},
        ],
    },
    "rgb_pair": {
        "name": "RGB Pair",
        "description": "Two RGB blending walkers sharing a start point",
        "walkers": [
            {"kind": "blending", "start": CENTER, "color_space": "rgb", "alpha": 0.3},
            {"kind": "blending", "start": CENTER, "color_space": "rgb", "alpha": 0.3},
        ],
    },
    "primaries": {
        "name": "Primaries",
        "description": "Red, green and blue walkers mixing by knockout blend",
        "walkers": [
            {"kind": "blending", "start": CENTER, "color_space": "red", "alpha": 0.3},
            {"kind": "blending", "start": CENTER, "color_space": "green", "alpha": 0.15},
            {"kind": "blending", "start": CENTER, "color_space": "blue", "alpha": 0.3},
        ],
    },
    "red_replace": {
        "name": "Red Trail",
        "description": "Opaque red walk that overwrites whatever it crosses",
        "walkers": [
            {"kind": "generic", "start": CENTER, "color_space": "red"},
        ],
    },
    "yellow": {
        "name": "Yellow",
        "description": "Red and green locked together, blended over black",
        "walkers": [
            {"kind": "blending", "start": CENTER, "color_space": "yellow", "alpha": 0.3},
        ],
    },
    "perturb": {
        "name": "Perturb",
        "description": "RGB painter followed by a walker that jitters the canvas",
        "walkers": [
            {"kind": "generic", "start": CENTER, "color_space": "rgb"},
            {"kind": "perturb", "start": CENTER, "perturb": (8, 8, 8)},
        ],
    },
    "noisy": {
        "name": "Noisy Pens",
        "description": "Four pens whose own colors drift with noise",
        "walkers": [
            {"kind": "noisy", "start": (0.25, 0.25), "color": (200, 60, 60), "noise": 3},
            {"kind": "noisy", "start": (0.75, 0.25), "color": (60, 200, 60), "noise": 3},
            {"kind": "noisy", "start": (0.25, 0.75), "color": (60, 60, 200), "noise": 3},
            {"kind": "noisy", "start": (0.75, 0.75), "color": (200, 200, 60), "noise": 3},
        ],
    },
    "mouse": {
        "name": "Mouse Pen",
        "description": "Pen colored by the pointer position",
        "walkers": [
            {"kind": "mouse", "start": CENTER},
        ],
    },
    "menagerie": {
        "name": "Menagerie",
        "description": "One of every walker kind",
        "walkers": [
            {"kind": "generic", "start": (0.3, 0.3), "color_space": "yellow"},
            {"kind": "blending", "start": CENTER, "color_space": "rgb", "alpha": 0.3},
            {"kind": "perturb", "start": CENTER, "perturb": (4, 4, 4)},
            {"kind": "noisy", "start": (0.7, 0.7), "color": (127, 127, 127), "noise": 2},
            {"kind": "mouse", "start": (0.7, 0.3)},
        ],
    },
}

PRESET_ORDER = [
    "rgb_blend", "rgb_pair", "primaries", "red_replace", "yellow",
    "perturb", "noisy", "mouse", "menagerie",
]

DEFAULT_PRESET = "rgb_blend"


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]
