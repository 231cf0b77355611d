#!/usr/bin/env python3
"""
Data models for the solar system simulator.

This module defines the Body dataclass shared between physics, rendering and input,
plus the explicit simulation state that the controller owns and threads through
every physics call.

Units and usage
- position is in meters [m], velocity in meters per second [m/s], mass in kg.
- radius is a display radius in pixels; it plays no part in the physics.
- trail stores past positions to render orbit paths; it is a bounded deque, so
  appending past capacity evicts the oldest point in O(1).
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple

from .constants import DEFAULT_SOFTENING, TIMESTEP, TRAIL_LENGTH


@dataclass
class Body:
    """
    Represents a celestial body in the simulation.

    Fields:
    - name: Identifier for the body
    - mass: Mass in kilograms (must be positive; not checked here)
    - radius: Display radius in pixels
    - position: 2D position (x, y) in meters
    - velocity: 2D velocity (vx, vy) in meters/second
    - color: RGB tuple used for rendering
    - is_anchor: True only for the central body (the Sun)
    - trail: Deque of past positions for drawing the orbit path
    - distance_to_anchor: Last measured distance to the anchor, in meters
    """
    name: str
    mass: float
    radius: float
    position: Tuple[float, float]
    velocity: Tuple[float, float] = (0.0, 0.0)
    color: Tuple[int, int, int] = (200, 200, 255)
    is_anchor: bool = False
    trail: Deque[Tuple[float, float]] = field(default_factory=lambda: deque(maxlen=TRAIL_LENGTH))
    distance_to_anchor: float = 0.0

    def add_trail_point(self) -> None:
        """Append the current position to the trail."""
        self.trail.append(self.position)


class UpdateMode(str, Enum):
    """How a step applies forces across bodies."""

    # Each body sees the already-updated positions of bodies before it.
    SEQUENTIAL = "sequential"
    # All forces come from the positions at the start of the step.
    SYNCHRONIZED = "synchronized"


@dataclass
class SimulationConfig:
    timestep: float = TIMESTEP
    trail_length: int = TRAIL_LENGTH
    update_mode: UpdateMode = UpdateMode.SEQUENTIAL
    softening: float = DEFAULT_SOFTENING


@dataclass
class SimulationState:
    """
    The body registry and the anchor toggle.

    bodies keeps insertion order, which is both the update and the draw order;
    the anchor comes first. anchor_active starts True and only ever goes False.
    """
    bodies: List[Body]
    config: SimulationConfig = field(default_factory=SimulationConfig)
    anchor_active: bool = True
    step_count: int = 0
    elapsed: float = 0.0

    def __post_init__(self):
        for b in self.bodies:
            if b.trail.maxlen != self.config.trail_length:
                b.trail = deque(b.trail, maxlen=self.config.trail_length)

    @property
    def anchor(self) -> Optional[Body]:
        for b in self.bodies:
            if b.is_anchor:
                return b
        return None
