#!/usr/bin/env python3
"""
Simulation controller: the runner context the frame loop holds on to.

It owns one SimulationState and is the only thing that mutates it. Everything runs on
one thread: the viewer calls step() once per frame, then draws, so no locking is needed.
Frame pacing comes from the display loop, not from the simulated time step; each frame
advances one simulated day whatever the frame rate is.
"""
import logging
from typing import List, Optional, Tuple

from . import physics
from .camera import Camera2D
from .constants import DAY
from .data_models import Body, SimulationState

logger = logging.getLogger(__name__)


class SimulationController:
    """
    Single owner of the simulation state, driven by the viewer.
    """
    def __init__(self, state: SimulationState):
        self.state = state
        self.playing = True
        self.last_message: Optional[str] = None

    @property
    def bodies(self) -> List[Body]:
        return self.state.bodies

    def step(self) -> bool:
        """Advance one simulation step unless paused. Returns whether a step ran."""
        if not self.playing:
            return False
        physics.step(self.state)
        return True

    def step_once(self) -> None:
        """Advance exactly one step, even while paused."""
        physics.step(self.state)

    def toggle_play(self) -> bool:
        self.playing = not self.playing
        return self.playing

    def remove_anchor(self) -> bool:
        changed = physics.remove_anchor(self.state)
        if changed:
            anchor = self.state.anchor
            name = anchor.name if anchor is not None else "anchor"
            self.last_message = f"{name} removed at day {self.elapsed_days():.0f}"
            logger.info(self.last_message)
        return changed

    def handle_click(self, screen_pos: Tuple[float, float], camera: Camera2D) -> bool:
        """Remove the anchor if the click lands inside its drawn circle."""
        anchor = self.state.anchor
        if anchor is None or not self.state.anchor_active:
            return False
        if not camera.hit_test(anchor, screen_pos):
            return False
        return self.remove_anchor()

    def visible_bodies(self) -> List[Body]:
        """Bodies the renderer should draw; the anchor disappears once removed."""
        return physics.active_bodies(self.state)

    def elapsed_days(self) -> float:
        return self.state.elapsed / DAY

    def distances_to_anchor(self) -> List[Tuple[str, float]]:
        """(name, last measured distance to the anchor in meters) for every orbiting body."""
        return [(b.name, b.distance_to_anchor) for b in self.state.bodies if not b.is_anchor]

    def status_line(self) -> str:
        mode = self.state.config.update_mode.value
        run = "Playing" if self.playing else "Paused"
        return f"Day {self.elapsed_days():.0f}  step {self.state.step_count}  [{run}]  mode: {mode}"
