"""Tests for the simulator and run timing."""

import numpy as np
import pytest
from universe_sim.physics.body import Body
from universe_sim.physics.diagnostics import Diagnostics
from universe_sim.physics.integrators import ParallelIntegrator, get_integrator
from universe_sim.physics.simulator import RunTiming, Simulator
from universe_sim.physics.universe import Universe
from universe_sim.presets import create_universe


def _two_body(radius=500.0):
    """Central mass plus one orbiter at the designed circular speed."""
    v_circ = np.sqrt(1_000_000.0 / radius)
    return Universe([
        Body(0, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1_000_000.0),
        Body(1, [radius, 0.0, 0.0], [0.0, v_circ, 0.0], 5.0),
    ])


def test_simulator_basic():
    universe = create_universe(20, seed=0)
    with Simulator(universe, get_integrator("serial"), dt=0.01) as sim:
        timing = sim.run(10)

    assert sim.step_count == 10
    assert sim.time == pytest.approx(0.1)
    assert timing.ticks == 10
    assert timing.total_seconds >= 0.0
    assert timing.per_tick_seconds == pytest.approx(timing.total_seconds / 10)
    assert sim.get_timing()["step_ms"] is not None


def test_run_timing_zero_ticks():
    assert RunTiming(ticks=0, total_seconds=0.0).per_tick_seconds == 0.0


@pytest.mark.parametrize("mode", ["serial", "parallel"])
def test_run_equals_repeated_single_steps(mode):
    """A k-tick run is exactly k single ticks in sequence."""
    batched = create_universe(40, seed=5)
    stepped = batched.copy()

    with get_integrator(mode, workers=3) as integrator, Simulator(batched, integrator, dt=0.01) as sim:
        sim.run(7)

    integrator = get_integrator(mode, workers=3)
    for _ in range(7):
        integrator.step(stepped, 0.01)
    integrator.close()

    assert np.array_equal(batched.positions(), stepped.positions())
    assert np.array_equal(batched.velocities(), stepped.velocities())


def test_step_callback():
    seen = []
    sim = Simulator(create_universe(3, seed=1), get_integrator("serial"))
    sim.on_step_callback = lambda s: seen.append(s.step_count)
    sim.run(3)
    assert seen == [1, 2, 3]


@pytest.mark.parametrize("mode", ["serial", "parallel"])
def test_two_body_orbit_radius_is_bounded(mode):
    """The orbiter stays near its initial radius for a sizeable arc of the orbit."""
    universe = _two_body(radius=500.0)
    r0 = Diagnostics.orbital_radius(universe, 1)

    radii = []
    with get_integrator(mode, workers=2) as integrator, Simulator(universe, integrator, dt=0.01) as sim:
        for _ in range(3000):
            sim.step()
            radii.append(Diagnostics.orbital_radius(universe, 1))

    radii = np.array(radii)
    assert np.all(np.abs(radii - r0) / r0 < 0.01)


def test_two_body_energy_drift_small():
    universe = _two_body(radius=300.0)
    diagnostics = Diagnostics.for_universe(universe)
    _, _, E0 = diagnostics.compute_energies(universe)
    L0 = diagnostics.compute_angular_momentum(universe)

    with Simulator(universe, get_integrator("serial"), dt=0.01) as sim:
        sim.run(2000)

    _, _, E = diagnostics.compute_energies(universe)
    L = diagnostics.compute_angular_momentum(universe)
    assert abs(E - E0) / abs(E0) < 5e-3
    assert np.allclose(L, L0, rtol=1e-9)


def test_simulator_leaves_supplied_integrator_open():
    integrator = ParallelIntegrator(workers=2)
    with Simulator(create_universe(5, seed=1), integrator) as sim:
        sim.run(1)
    assert integrator._executor is not None
    integrator.close()
    assert integrator._executor is None


def test_simulator_closes_its_own_integrator():
    with Simulator(create_universe(5, seed=1)) as sim:
        sim.run(1)
        assert sim.integrator._executor is not None
    assert sim.integrator._executor is None
