#!/usr/bin/env python3
"""
Shared constants for the solar system simulator (SI units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physical constants
G = 6.67428e-11  # m^3 kg^-1 s^-2
AU = 149.6e6 * 1000  # m
SUN_MASS = 1.98892e30  # kg

# Physics controls
DAY = 3600 * 24  # s
TIMESTEP = DAY  # seconds of simulation time per step
TRAIL_LENGTH = 500  # positions kept per body
DEFAULT_SOFTENING = 0.0  # m; 0 keeps plain Newtonian gravity

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
TARGET_FPS = 60
PIXELS_PER_AU = 130
SCALE = PIXELS_PER_AU / AU  # pixels per meter
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (200, 200, 200)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
