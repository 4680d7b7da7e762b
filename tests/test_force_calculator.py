"""Tests for the softened force law."""

import numpy as np
import pytest
from universe_sim.physics.body import Body
from universe_sim.physics.force_calculator import (
    body_acceleration,
    compute_accelerations,
    compute_force,
)
from universe_sim.physics.universe import Universe
from universe_sim.presets import create_universe


def test_compute_force_matches_formula():
    """a = G*m/(r^2+eps) * d/sqrt(r^2+eps)."""
    target = np.array([1.0, 2.0, 3.0])
    source = np.array([4.0, -2.0, 3.0])
    eps = 1e-5
    acc = compute_force(target, source, 10.0, 2.0, eps)

    d = source - target
    dist_sq = 25.0 + eps
    expected = (2.0 * 10.0 / dist_sq) * d / np.sqrt(dist_sq)
    assert np.allclose(acc, expected, rtol=1e-15)


def test_compute_force_vectorized_matches_scalar():
    rng = np.random.default_rng(0)
    target = rng.normal(size=3)
    sources = rng.normal(size=(8, 3))
    masses = rng.uniform(1, 10, 8)

    batch = compute_force(target, sources, masses, 1.0, 1e-5)
    for j in range(8):
        single = compute_force(target, sources[j], masses[j], 1.0, 1e-5)
        assert np.allclose(batch[j], single, rtol=1e-14, atol=0.0)


def test_attraction_points_toward_source():
    universe = Universe([
        Body(0, [0.0, 0.0, 0.0], mass=1.0),
        Body(1, [2.0, 0.0, 0.0], mass=4.0),
    ])
    acc = compute_accelerations(universe.snapshot())

    assert acc[0, 0] > 0 and acc[1, 0] < 0
    assert acc[0, 0] == pytest.approx(4.0 / 4.0, rel=1e-5)
    assert acc[1, 0] == pytest.approx(-1.0 / 4.0, rel=1e-5)
    # Equal and opposite forces
    assert 1.0 * acc[0, 0] == pytest.approx(-4.0 * acc[1, 0])


def test_single_body_has_no_self_force():
    universe = Universe([Body(0, [3.0, -1.0, 2.0], [0.5, 0.0, 0.0], 1e6)])
    assert np.array_equal(body_acceleration(0, universe.snapshot()), np.zeros(3))


def test_self_term_skipped_by_id_not_position():
    """Coincident bodies still pull on each other (zero here) but a body never pulls itself."""
    universe = Universe([
        Body(0, [1.0, 1.0, 1.0], mass=5.0),
        Body(1, [1.0, 1.0, 1.0], mass=5.0),
        Body(2, [4.0, 1.0, 1.0], mass=3.0),
    ])
    snapshot = universe.snapshot()
    acc = body_acceleration(0, snapshot)

    expected = compute_force(snapshot.positions[0], snapshot.positions[2], 3.0, 1.0, 1e-5)
    assert np.allclose(acc, expected)
    assert np.all(np.isfinite(acc))


@pytest.mark.parametrize("offset", [0.0, 1e-12, 1e-8, 1e-6, np.sqrt(1e-5 / 2), 1e-3, 1e-1])
def test_softening_bounds_singularity(offset):
    eps = 1e-5
    mass = 1_000_000.0
    universe = Universe([
        Body(0, [0.0, 0.0, 0.0], mass=mass),
        Body(1, [offset, 0.0, 0.0], mass=mass),
    ], softening=eps)
    acc = compute_accelerations(universe.snapshot())

    assert np.all(np.isfinite(acc))
    assert np.all(np.linalg.norm(acc, axis=1) <= 1.0 * mass / eps)


def test_compute_accelerations_empty():
    assert compute_accelerations(Universe([]).snapshot()).shape == (0, 3)


def test_accelerations_match_pairwise_loop():
    universe = create_universe(30, seed=11)
    snapshot = universe.snapshot()
    acc = compute_accelerations(snapshot)

    for i in range(len(universe)):
        expected = np.zeros(3)
        for j in range(len(universe)):
            if i != j:
                expected += compute_force(
                    snapshot.positions[i], snapshot.positions[j], snapshot.masses[j], 1.0, 1e-5
                )
        assert np.allclose(acc[i], expected, rtol=1e-12, atol=1e-15)
