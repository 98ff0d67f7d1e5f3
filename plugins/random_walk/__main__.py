"""
Random Walk Painter - Entry Point

Usage:
    python -m random_walk [preset] [--size N] [--window WxH] [--seed N]
    python -m random_walk [preset] --snap FRAMES

Examples:
    python -m random_walk
    python -m random_walk primaries
    python -m random_walk noisy --size 512 --seed 42
    python -m random_walk menagerie --snap 200

--snap runs headless for the given number of frames, saves a PNG and
exits without opening a window.

Use --list to see all available presets.
"""

import sys
from .presets import CANVAS_SIZE, DEFAULT_PRESET, PRESET_ORDER, list_presets


def snap(preset, sim_size, frames, seed=None):
    """Headless mode: run N frames, save screenshot, exit."""
    import os
    import time
    from .simulator import WalkSimulator

    screenshots_dir = os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
        "screenshots"
    )
    os.makedirs(screenshots_dir, exist_ok=True)

    sim = WalkSimulator.from_preset(preset, size=sim_size, seed=seed)

    print(f"  {preset}: running {frames} frames...", end="", flush=True)
    start = time.perf_counter()
    sim.run_frames(frames)
    elapsed = time.perf_counter() - start

    path = os.path.join(screenshots_dir, f"walk_{preset}.png")
    sim.canvas.save(path)
    sim.canvas.save(os.path.join(screenshots_dir, "latest.png"))
    print(f" saved: {path} ({elapsed:.1f}s)")
    return path


def main(argv=None):
    preset = DEFAULT_PRESET
    sim_size = CANVAS_SIZE
    win_w, win_h = 900, 900
    seed = None
    snap_frames = 0

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--size" and i + 1 < len(args):
            sim_size = int(args[i + 1])
            i += 2
        elif arg == "--window" and i + 1 < len(args):
            parts = args[i + 1].split("x")
            win_w, win_h = int(parts[0]), int(parts[1])
            i += 2
        elif arg == "--seed" and i + 1 < len(args):
            seed = int(args[i + 1])
            i += 2
        elif arg == "--snap" and i + 1 < len(args):
            snap_frames = int(args[i + 1])
            i += 2
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"    {key:16s} {name:20s} {desc}")
            print()
            return
        elif arg in ("--help", "-h"):
            print(__doc__)
            return
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --list to see available presets")
            return

    if snap_frames > 0:
        print(f"Headless snap mode: {preset} @ {sim_size}x{sim_size}, {snap_frames} frames")
        snap(preset, sim_size, snap_frames, seed=seed)
        return

    print("Starting Random Walk Painter")
    print(f"  Preset: {preset}")
    print(f"  Canvas: {sim_size}x{sim_size}")
    print(f"  Window: {win_w}x{win_h}")
    print()

    try:
        from .viewer import Viewer
    except ImportError as e:
        print(f"Interactive viewer unavailable ({e})")
        print("Install pygame or use --snap FRAMES for headless output")
        return

    viewer = Viewer(
        width=win_w,
        height=win_h,
        sim_size=sim_size,
        start_preset=preset,
        seed=seed,
    )
    viewer.run()


if __name__ == "__main__":
    main()
