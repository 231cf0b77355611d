import math

import pytest

from solarsim import physics
from solarsim.constants import AU, G
from solarsim.data_models import Body, SimulationConfig, SimulationState, UpdateMode
from solarsim.errors import DegenerateDistanceError
from solarsim.presets import template_solar_system, template_two_body

DAY = 86400.0


def make_sun_earth():
    sun = Body("Sun", 1.989e30, 30, (0.0, 0.0), is_anchor=True)
    earth = Body("Earth", 5.9742e24, 16, (-AU, 0.0), (0.0, 29783.0))
    return sun, earth


def test_attraction_points_towards_other_body():
    sun, earth = make_sun_earth()
    fx, fy = physics.compute_attraction(earth, sun)
    expected = G * earth.mass * sun.mass / AU ** 2
    assert fx == pytest.approx(expected, rel=1e-12)
    assert fy == pytest.approx(0.0, abs=expected * 1e-12)


def test_attraction_is_pure():
    sun, earth = make_sun_earth()
    physics.compute_attraction(earth, sun)
    assert earth.position == (-AU, 0.0)
    assert earth.velocity == (0.0, 29783.0)
    assert len(earth.trail) == 0


@pytest.mark.parametrize("pa, pb, ma, mb", [
    ((0.0, 0.0), (1.0e11, 0.0), 1e30, 6e24),
    ((3.0e10, -4.0e10), (-2.0e11, 7.5e10), 3.3e23, 1.9e27),
    ((1.0, 1.0), (1.0, -1.0e9), 5.0, 7.0e22),
])
def test_newtons_third_law(pa, pb, ma, mb):
    a = Body("A", ma, 5, pa)
    b = Body("B", mb, 5, pb)
    fab = physics.compute_attraction(a, b)
    fba = physics.compute_attraction(b, a)
    assert math.hypot(*fab) == pytest.approx(math.hypot(*fba), rel=1e-12)
    assert fab[0] == pytest.approx(-fba[0], rel=1e-9, abs=math.hypot(*fab) * 1e-12)
    assert fab[1] == pytest.approx(-fba[1], rel=1e-9, abs=math.hypot(*fab) * 1e-12)


def test_coincident_bodies_raise():
    a = Body("A", 1e24, 5, (1.0e10, 2.0e10))
    b = Body("B", 1e24, 5, (1.0e10, 2.0e10))
    with pytest.raises(DegenerateDistanceError) as exc:
        physics.compute_attraction(a, b)
    assert isinstance(exc.value, ZeroDivisionError)
    assert exc.value.body_name == "A"


def test_softening_removes_singularity():
    a = Body("A", 1e24, 5, (1.0e10, 2.0e10))
    b = Body("B", 1e24, 5, (1.0e10, 2.0e10))
    assert physics.compute_attraction(a, b, softening=1e7) == (0.0, 0.0)


def test_softening_weakens_close_range_force():
    a = Body("A", 1e24, 5, (0.0, 0.0))
    b = Body("B", 1e24, 5, (1.0e7, 0.0))
    plain = physics.compute_attraction(a, b)
    soft = physics.compute_attraction(a, b, softening=1.0e7)
    assert 0.0 < soft[0] < plain[0]


def test_single_step_sun_earth_matches_hand_computation():
    sun, earth = make_sun_earth()
    physics.update_position(earth, [sun, earth], timestep=DAY)

    ax = G * sun.mass / AU ** 2
    vx = ax * DAY
    vy = 29783.0
    assert earth.velocity[0] == pytest.approx(vx, rel=1e-6)
    assert earth.velocity[1] == pytest.approx(vy, rel=1e-6)
    assert earth.position[0] == pytest.approx(-AU + vx * DAY, rel=1e-6)
    assert earth.position[1] == pytest.approx(vy * DAY, rel=1e-6)
    assert list(earth.trail) == [earth.position]
    assert earth.distance_to_anchor == AU
    # the anchor is only read
    assert sun.position == (0.0, 0.0)
    assert sun.velocity == (0.0, 0.0)


def test_update_skips_self():
    lone = Body("Lone", 1e24, 5, (AU, 0.0), (0.0, 1000.0))
    physics.update_position(lone, [lone], timestep=DAY)
    assert lone.velocity == (0.0, 1000.0)
    assert lone.position == (AU, 1000.0 * DAY)


def test_circular_orbit_stays_near_initial_radius():
    state = SimulationState(bodies=template_two_body())
    planet = state.bodies[1]
    period = physics.orbital_period(state.bodies[0].mass, AU)
    steps = int(math.ceil(period / DAY))

    radii = []
    for _ in range(steps):
        physics.step(state)
        radii.append(math.hypot(*planet.position))

    assert max(abs(r - AU) / AU for r in radii) < 0.05
    # the orbit closes: after one period the planet is back near its start
    assert math.hypot(planet.position[0] - AU, planet.position[1]) < 0.1 * AU


def test_anchor_never_moves():
    state = SimulationState(bodies=template_solar_system())
    for _ in range(50):
        physics.step(state)
    sun = state.bodies[0]
    assert sun.position == (0.0, 0.0)
    assert sun.velocity == (0.0, 0.0)
    assert len(sun.trail) == 0


def test_step_counts_steps_and_time():
    state = SimulationState(bodies=template_two_body())
    for _ in range(3):
        physics.step(state)
    assert state.step_count == 3
    assert state.elapsed == 3 * DAY


def test_trail_is_capped_and_keeps_most_recent_points():
    state = SimulationState(bodies=template_two_body())
    planet = state.bodies[1]
    history = []
    for _ in range(600):
        physics.step(state)
        history.append(planet.position)

    assert len(planet.trail) == 500
    # oldest retained point is from step 600 - 499
    assert planet.trail[0] == history[600 - 500]
    assert planet.trail[-1] == history[-1]
    assert list(planet.trail) == history[-500:]


def test_trail_length_follows_config():
    state = SimulationState(bodies=template_two_body(), config=SimulationConfig(trail_length=10))
    for _ in range(25):
        physics.step(state)
    assert len(state.bodies[1].trail) == 10


def test_remove_anchor_is_idempotent():
    state = SimulationState(bodies=template_solar_system())
    assert physics.remove_anchor(state) is True
    once = physics.active_bodies(state)
    assert physics.remove_anchor(state) is False
    twice = physics.active_bodies(state)

    assert state.anchor_active is False
    assert [b.name for b in once] == [b.name for b in twice]
    assert all(not b.is_anchor for b in twice)
    assert len(twice) == len(state.bodies) - 1


def test_removed_anchor_exerts_no_force():
    sun = Body("Sun", 1.989e30, 30, (0.0, 0.0), is_anchor=True)
    planet = Body("Planet", 6e24, 16, (AU, 0.0), (0.0, 30000.0))
    state = SimulationState(bodies=[sun, planet])

    physics.remove_anchor(state)
    physics.step(state)

    # nothing else attracts the planet, so it coasts in a straight line
    assert planet.velocity == (0.0, 30000.0)
    assert planet.position == (AU, 30000.0 * DAY)
    assert planet.distance_to_anchor == 0.0
    assert sun.position == (0.0, 0.0)


def test_replay_is_deterministic():
    a = SimulationState(bodies=template_solar_system())
    b = SimulationState(bodies=template_solar_system())
    for _ in range(200):
        physics.step(a)
        physics.step(b)
    for x, y in zip(a.bodies, b.bodies):
        assert x.position == y.position
        assert x.velocity == y.velocity
        assert list(x.trail) == list(y.trail)


def _three_body(order):
    sun = Body("Sun", 1.989e30, 30, (0.0, 0.0), is_anchor=True)
    inner = Body("Inner", 1.0e27, 10, (0.5 * AU, 0.0), (0.0, 40000.0))
    outer = Body("Outer", 1.0e27, 10, (0.6 * AU, 0.0), (0.0, 35000.0))
    planets = [inner, outer] if order == "forward" else [outer, inner]
    return [sun] + planets


def _run(order, mode, steps=20):
    state = SimulationState(bodies=_three_body(order), config=SimulationConfig(update_mode=mode))
    for _ in range(steps):
        physics.step(state)
    return {b.name: (b.position, b.velocity) for b in state.bodies}


def test_synchronized_mode_is_order_independent():
    fwd = _run("forward", UpdateMode.SYNCHRONIZED)
    rev = _run("reverse", UpdateMode.SYNCHRONIZED)
    assert fwd == rev


def test_sequential_mode_depends_on_order():
    fwd = _run("forward", UpdateMode.SEQUENTIAL)
    rev = _run("reverse", UpdateMode.SEQUENTIAL)
    assert fwd["Inner"] != rev["Inner"]
    assert fwd["Outer"] != rev["Outer"]


def test_first_mover_is_identical_in_both_modes():
    # the first planet sees only start-of-step positions in either mode
    seq = _run("forward", UpdateMode.SEQUENTIAL, steps=1)
    sync = _run("forward", UpdateMode.SYNCHRONIZED, steps=1)
    assert seq["Inner"] == sync["Inner"]
    assert seq["Outer"] != sync["Outer"]


def test_circular_orbit_velocity():
    assert physics.circular_orbit_velocity(1.989e30, AU) == pytest.approx(29780, rel=0.01)
    assert physics.circular_orbit_velocity(1.989e30, 0.0) == 0.0
    assert physics.orbital_period(1.989e30, AU) == pytest.approx(365.25 * DAY, rel=0.01)
