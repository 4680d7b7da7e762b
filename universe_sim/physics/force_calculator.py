"""Softened direct-summation gravity shared by every integrator.

Both the serial and the parallel integrator evaluate a body's acceleration
through ``body_acceleration``, so for the same snapshot they perform the same
floating-point operations in the same order and agree bit for bit.
"""

from typing import Union
import numpy as np
from universe_sim.physics.universe import Snapshot

ArrayLike = Union[float, np.ndarray]


def compute_force(
    target_pos: np.ndarray,
    source_pos: np.ndarray,
    source_mass: ArrayLike,
    g_const: float,
    softening: float,
) -> np.ndarray:
    """Acceleration on a target caused by one or more sources.

    a = G * m / (r^2 + softening) * d / sqrt(r^2 + softening)

    Args:
        target_pos: (3,) target position
        source_pos: (3,) or (m, 3) source positions
        source_mass: Scalar or (m,) source masses
        g_const: Gravitational constant
        softening: Added to the squared distance (length^2 units)

    Returns:
        (3,) or (m, 3) acceleration contributions, one row per source
    """
    r_diff = source_pos - target_pos
    dist_sq = np.sum(r_diff * r_diff, axis=-1) + softening
    dist = np.sqrt(dist_sq)
    f = (g_const * source_mass) / dist_sq
    return (np.expand_dims(f, -1) * r_diff) / np.expand_dims(dist, -1)


def body_acceleration(index: int, snapshot: Snapshot) -> np.ndarray:
    """Total acceleration on body ``index`` from every other body in the snapshot.

    The self-term is dropped by id comparison, never by position equality.
    Contributions are summed in ascending body index.

    Args:
        index: Target body index
        snapshot: Immutable positions/masses/constants

    Returns:
        (3,) acceleration
    """
    others = snapshot.ids != snapshot.ids[index]
    contributions = compute_force(
        snapshot.positions[index],
        snapshot.positions[others],
        snapshot.masses[others],
        snapshot.g_const,
        snapshot.softening,
    )
    # axis-0 reduction accumulates row by row
    return np.add.reduce(contributions, axis=0)


def compute_accelerations(snapshot: Snapshot) -> np.ndarray:
    """Accelerations for every body, (n, 3)."""
    accelerations = np.zeros((len(snapshot), 3))
    for index in range(len(snapshot)):
        accelerations[index] = body_acceleration(index, snapshot)
    return accelerations
