#!/usr/bin/env python3
"""
Core Physics Engine for the solar system simulator

Responsibilities
- Compute pairwise Newtonian attraction between bodies (direct O(N^2) summation).
- Advance non-anchor bodies with a semi-implicit (symplectic) Euler step: velocity is
  updated from the current net force, then position from the updated velocity.
- Keep each body's trail capped, and own the one-way anchor removal toggle.

Units and conventions
- World space positions are in meters [m].
- Velocities are in meters per second [m/s].
- Masses are in kilograms [kg].
- Time steps are in seconds [s]; the default step is one day.
- The gravitational constant G is expressed in SI: m^3 kg^-1 s^-2.

Update modes
- SEQUENTIAL (default): bodies are updated one after another in registry order, and a
  body sees the positions that earlier bodies already reached in this same step. This is
  slightly less accurate than a simultaneous update but it is the reference behaviour.
- SYNCHRONIZED: all net forces are computed from the positions at the start of the step
  before any body moves. Results then do not depend on registry order.

Numerical notes
- No softening by default: two coincident bodies raise DegenerateDistanceError. A positive
  softening switches to the Plummer form G*m1*m2*r / (r^2 + eps^2)^(3/2).
- The anchor is never integrated, so it stays where it started while it is active.
- Symplectic Euler does not conserve energy exactly, but it keeps bound orbits bounded;
  a circular orbit drifts only slowly in radius.
"""

import math
from typing import List, Tuple

from .constants import G, TIMESTEP
from .data_models import Body, SimulationState, UpdateMode
from .errors import DegenerateDistanceError
from .vector_utils import vec_sub


def compute_attraction(body: Body, other: Body, softening: float = 0.0) -> Tuple[float, float]:
    """
    Gravitational force exerted on ``body`` by ``other``.

    Pure function: neither body is modified.

    Args:
        body: The body the force acts on.
        other: The attracting body (must be a different object).
        softening: Softening length in meters; 0 means plain inverse-square gravity.

    Returns:
        (force_x, force_y) in newtons, pointing from ``body`` towards ``other``.

    Raises:
        DegenerateDistanceError: if both bodies share a position and softening is 0.
    """
    dx, dy = vec_sub(other.position, body.position)
    if softening > 0.0:
        r_squared_soft = dx * dx + dy * dy + softening * softening
        inv_r_cubed = 1.0 / (r_squared_soft * math.sqrt(r_squared_soft))
        magnitude = G * body.mass * other.mass * inv_r_cubed
        return (dx * magnitude, dy * magnitude)

    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0.0:
        raise DegenerateDistanceError(body.name, other.name)

    force = G * body.mass * other.mass / (distance * distance)
    theta = math.atan2(dy, dx)
    return (math.cos(theta) * force, math.sin(theta) * force)


def net_force(body: Body, active: List[Body], softening: float = 0.0) -> Tuple[float, float]:
    """
    Sum the attraction of every other active body on ``body``.

    Also records the current distance to the anchor when the anchor is active.
    """
    total_fx = 0.0
    total_fy = 0.0
    for other in active:
        if other is body:
            continue
        if other.is_anchor:
            dx, dy = vec_sub(other.position, body.position)
            body.distance_to_anchor = math.sqrt(dx * dx + dy * dy)
        fx, fy = compute_attraction(body, other, softening)
        total_fx += fx
        total_fy += fy
    return (total_fx, total_fy)


def _integrate(body: Body, force: Tuple[float, float], timestep: float) -> None:
    vx = body.velocity[0] + force[0] / body.mass * timestep
    vy = body.velocity[1] + force[1] / body.mass * timestep
    body.velocity = (vx, vy)
    body.position = (body.position[0] + vx * timestep, body.position[1] + vy * timestep)
    body.add_trail_point()


def update_position(body: Body, active: List[Body], timestep: float = TIMESTEP,
                    softening: float = 0.0) -> None:
    """
    Advance a single non-anchor body by one semi-implicit Euler step.

    velocity += net_force / mass * dt, then position += velocity * dt, then the new
    position is appended to the trail. ``body`` is mutated in place.
    """
    _integrate(body, net_force(body, active, softening), timestep)


def active_bodies(state: SimulationState) -> List[Body]:
    """Bodies that take part in gravity: everything, minus the anchor once removed."""
    if state.anchor_active:
        return list(state.bodies)
    return [b for b in state.bodies if not b.is_anchor]


def step(state: SimulationState) -> None:
    """
    Advance every non-anchor body by one time step.

    In SEQUENTIAL mode each body is moved before the next body's force is computed.
    In SYNCHRONIZED mode every net force is computed first, then all bodies move.
    """
    cfg = state.config
    active = active_bodies(state)
    movers = [b for b in active if not b.is_anchor]

    if cfg.update_mode == UpdateMode.SYNCHRONIZED:
        forces = [net_force(b, active, cfg.softening) for b in movers]
        for b, f in zip(movers, forces):
            _integrate(b, f, cfg.timestep)
    else:
        for b in movers:
            update_position(b, active, cfg.timestep, cfg.softening)

    state.step_count += 1
    state.elapsed += cfg.timestep


def remove_anchor(state: SimulationState) -> bool:
    """
    Take the anchor out of the active set for good.

    Idempotent. Returns True only for the call that actually changed the state.
    """
    if not state.anchor_active:
        return False
    state.anchor_active = False
    return True


def circular_orbit_velocity(central_mass: float, orbital_radius: float) -> float:
    """
    Calculate the velocity needed for a circular orbit.

    For a circular orbit, the gravitational force provides exactly the
    centripetal force needed: G * M / r = v^2 / r, so v = sqrt(G * M / r).

    Args:
        central_mass: Mass of the central body in kg
        orbital_radius: Orbital radius in meters

    Returns:
        Orbital velocity in m/s for a circular orbit
    """
    if orbital_radius <= 0:
        return 0.0

    return math.sqrt(G * central_mass / orbital_radius)


def orbital_period(central_mass: float, orbital_radius: float) -> float:
    """Period in seconds of a circular orbit of the given radius."""
    v = circular_orbit_velocity(central_mass, orbital_radius)
    if v == 0.0:
        return 0.0
    return 2.0 * math.pi * orbital_radius / v
