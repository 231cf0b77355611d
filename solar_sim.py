#!/usr/bin/env python3
"""
Solar system simulator entry point: viewport, diagnostics panel and frame loop.

What this module does
- Builds the scene (built-in Sun + eight planets, or a JSON template) and wraps it in a
  SimulationController.
- Runs one frame loop on the main thread. Each frame: handle Pygame input, advance the
  simulation by one step, draw the viewport, then pump the Dear PyGui diagnostics panel.
- Left-clicking the Sun removes it from the simulation; the planets then fly off along
  their current velocities under each other's gravity.

Threading model
- Single-threaded. The controller is only touched from the frame loop, so there is no lock.
- Frame rate is capped by pygame.time.Clock; every frame is one simulated day regardless
  of the frame rate, so playback speed depends on how fast frames are drawn.

Units and conventions
- SI units in the physics: meters [m], kilograms [kg], seconds [s].
- Body radii are in pixels; the camera uses a fixed pixels-per-AU scale centred on the Sun.
- Colors are RGB tuples in 0..255.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python solar_sim.py` (`--help` lists the options)
"""

import argparse
import logging
import sys
from typing import Optional

import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from solarsim.camera import Camera2D, safe_point
from solarsim.constants import (
    AU,
    BACKGROUND_COLOR,
    DEFAULT_SOFTENING,
    HUD_COLOR,
    PIXELS_PER_AU,
    TARGET_FPS,
    TIMESTEP,
    TRAIL_LENGTH,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from solarsim.controller import SimulationController
from solarsim.data_models import SimulationConfig, SimulationState, UpdateMode
from solarsim.errors import SolarSimError
from solarsim.presets import TEMPLATES
from solarsim.presets_loader import load_template

logger = logging.getLogger("solar_sim")

# ============================================================
# Pygame Viewport
# ============================================================

_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if _cached_font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


class PygameRenderer:
    """
    Pygame viewport: draws bodies and trails, turns clicks into anchor removal.
    """
    def __init__(self, sim: SimulationController, camera: Camera2D, fps: int = TARGET_FPS):
        self.sim = sim
        self.camera = camera
        self.fps = fps
        self.surface = None
        self.clock = None
        self.running = False

    def open(self):
        pygame.init()
        pygame.display.set_caption("Solar System - Viewport")
        w, h = self.camera.viewport_size
        self.surface = pygame.display.set_mode((w, h), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.running = True

    def close(self):
        self.running = False
        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.sim.handle_click(event.pos, self.camera)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    self.sim.toggle_play()
                elif event.key == pygame.K_ESCAPE:
                    self.running = False

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        for b in self.sim.visible_bodies():
            # Orbit trail
            if not b.is_anchor and len(b.trail) > 1:
                pts = []
                for p in b.trail:
                    sp = safe_point(self.camera.project(p))
                    if sp:
                        pts.append(sp)
                if len(pts) > 1:
                    pygame.draw.aalines(surf, b.color, False, pts)

            # Body
            sp = safe_point(self.camera.project(b.position))
            if sp:
                gfxdraw.filled_circle(surf, sp[0], sp[1], int(b.radius), b.color)
                gfxdraw.aacircle(surf, sp[0], sp[1], int(b.radius), b.color)

        draw_text(surf, "Left-click the Sun: remove it | Space: Pause/Play | Esc: quit", 10, 10, HUD_COLOR)
        draw_text(surf, self.sim.status_line(), 10, 30, HUD_COLOR)
        if self.sim.last_message:
            draw_text(surf, self.sim.last_message, 10, 50, HUD_COLOR)

        pygame.display.flip()

    def tick(self):
        self.clock.tick(self.fps)

# ============================================================
# Dear PyGui Diagnostics Panel
# ============================================================


class UI:
    """
    Dear PyGui panel: play/pause, single step, remove-Sun button and per-body distance
    to the Sun.
    """
    def __init__(self, sim: SimulationController):
        self.sim = sim
        self.status_id = None
        self.message_id = None
        self.remove_button_id = None
        self.distance_ids = {}

    def open(self):
        dpg.create_context()
        self._build_ui()
        dpg.create_viewport(title="Solar System - Diagnostics", width=380, height=420)
        dpg.setup_dearpygui()
        dpg.show_viewport()

    def close(self):
        dpg.destroy_context()

    def is_running(self) -> bool:
        return dpg.is_dearpygui_running()

    def _build_ui(self):
        with dpg.window(label="Simulation", width=360, height=400, no_close=True):
            self.status_id = dpg.add_text("")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=lambda: self.sim.toggle_play())
                dpg.add_button(label="Step", callback=lambda: self.sim.step_once())
                self.remove_button_id = dpg.add_button(label="Remove Sun", callback=lambda: self.sim.remove_anchor())
            dpg.add_separator()
            dpg.add_text("Distance to Sun (AU)")
            for name, _ in self.sim.distances_to_anchor():
                self.distance_ids[name] = dpg.add_text(f"{name}: -")
            dpg.add_separator()
            self.message_id = dpg.add_text("", color=(180, 220, 180))

    def sync(self):
        dpg.set_value(self.status_id, self.sim.status_line())
        for name, d in self.sim.distances_to_anchor():
            tag = self.distance_ids.get(name)
            if tag is not None:
                dpg.set_value(tag, f"{name}: {d / AU:.3f}")
        if not self.sim.state.anchor_active:
            dpg.configure_item(self.remove_button_id, enabled=False)
        if self.sim.last_message:
            dpg.set_value(self.message_id, self.sim.last_message)
        dpg.render_dearpygui_frame()

# ============================================================
# Application Entry
# ============================================================


def build_state(args) -> SimulationState:
    if args.template in TEMPLATES:
        bodies = TEMPLATES[args.template]()
        logger.info("Using built-in scene %r", args.template)
    else:
        bodies, _ = load_template(args.template)
    config = SimulationConfig(
        timestep=args.timestep,
        trail_length=args.trail_length,
        update_mode=UpdateMode(args.mode),
        softening=args.softening,
    )
    return SimulationState(bodies=bodies, config=config)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sun and planets under mutual Newtonian gravity")
    parser.add_argument("--template", default="solar_system",
                        help="built-in scene (%s) or path to a JSON template" % ", ".join(TEMPLATES))
    parser.add_argument("--mode", choices=[m.value for m in UpdateMode], default=UpdateMode.SEQUENTIAL.value,
                        help="sequential: bodies see earlier bodies' new positions; synchronized: all forces from one snapshot")
    parser.add_argument("--timestep", type=float, default=TIMESTEP, help="simulated seconds per frame")
    parser.add_argument("--trail-length", type=int, default=TRAIL_LENGTH, help="trail points kept per body")
    parser.add_argument("--softening", type=float, default=DEFAULT_SOFTENING, help="gravitational softening length in meters")
    parser.add_argument("--pixels-per-au", type=float, default=PIXELS_PER_AU)
    parser.add_argument("--width", type=int, default=VIEW_WIDTH)
    parser.add_argument("--height", type=int, default=VIEW_HEIGHT)
    parser.add_argument("--fps", type=int, default=TARGET_FPS)
    parser.add_argument("--no-panel", action="store_true", help="do not open the Dear PyGui diagnostics window")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        state = build_state(args)
    except SolarSimError as e:
        logger.error("%s", e)
        return 1

    sim = SimulationController(state)
    camera = Camera2D(scale=args.pixels_per_au / AU, viewport_size=(args.width, args.height))
    renderer = PygameRenderer(sim, camera, fps=args.fps)
    ui: Optional[UI] = None if args.no_panel else UI(sim)

    renderer.open()
    if ui is not None:
        ui.open()
    try:
        while renderer.running and (ui is None or ui.is_running()):
            renderer.handle_events()
            sim.step()
            renderer.draw()
            if ui is not None:
                ui.sync()
            renderer.tick()
    finally:
        renderer.close()
        if ui is not None:
            ui.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
