"""
Interactive Pygame Viewer for the Random Walk Painter

Shows the canvas scaled to the window and advances the simulation one
frame per display tick. The mouse position is passed through to mouse
pens in canvas coordinates.

Controls:
  C           Clear the canvas to black
  S           Save screenshot
  SPACE       Pause / Resume
  Q / ESC     Quit
"""

import os
import time
import numpy as np
import pygame

from .canvas import PointerState
from .presets import CANVAS_SIZE, DEFAULT_PRESET, get_preset
from .simulator import WalkSimulator


class Viewer:
    def __init__(self, width=900, height=900, sim_size=CANVAS_SIZE,
                 start_preset=DEFAULT_PRESET, seed=None):
        self.canvas_w = width
        self.canvas_h = height
        self.sim_size = sim_size
        self.preset_key = start_preset
        self.running = True
        self.paused = False
        self.fps_history = []

        self.sim = WalkSimulator.from_preset(start_preset, size=sim_size, seed=seed)

    def _pointer(self):
        mx, my = pygame.mouse.get_pos()
        return PointerState.from_window(
            mx, my, self.canvas_w, self.canvas_h, self.sim_size
        )

    def _canvas_surface(self):
        rgb = self.sim.canvas.pixels
        # surfarray is (W, H, 3)
        return pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())

    def _save_screenshot(self):
        screenshots_dir = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
            "screenshots"
        )
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir, f"walk_{self.preset_key}_{timestamp}.png")
        latest_path = os.path.join(screenshots_dir, "latest.png")

        # Full-resolution canvas, not the scaled window
        surface = self._canvas_surface()
        pygame.image.save(surface, path)
        pygame.image.save(surface, latest_path)
        print(f"Screenshot saved: {path}")

    def _update_caption(self, fps):
        preset = get_preset(self.preset_key)
        name = preset["name"] if preset else self.preset_key
        st = self.sim.stats
        paused = "  [paused]" if self.paused else ""
        pygame.display.set_caption(
            f"Random Walk - {name}  |  frame {st['frames']}  |  {fps:.0f} fps{paused}"
        )

    def run(self):
        """Main viewer loop."""
        pygame.init()

        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h), pygame.RESIZABLE)
        clock = pygame.time.Clock()

        while self.running:
            frame_start = time.time()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.canvas_w, self.canvas_h = event.w, event.h
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            if not self.paused:
                self.sim.on_frame(self._pointer())

            scaled = pygame.transform.scale(
                self._canvas_surface(), (self.canvas_w, self.canvas_h)
            )
            screen.blit(scaled, (0, 0))

            # FPS
            frame_time = time.time() - frame_start
            self.fps_history.append(frame_time)
            if len(self.fps_history) > 30:
                self.fps_history.pop(0)
            avg_fps = 1.0 / max(np.mean(self.fps_history), 0.001)
            self._update_caption(avg_fps)

            pygame.display.flip()
            clock.tick(60)

        pygame.quit()

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_c:
            self.sim.on_clear()

        elif key == pygame.K_s:
            self._save_screenshot()
