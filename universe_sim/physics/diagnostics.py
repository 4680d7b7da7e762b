"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Tuple
from universe_sim.physics.universe import Universe


class Diagnostics:
    """Compute energy diagnostics consistent with the softened force law."""

    def __init__(self, g_const: float = 1.0, softening: float = 1e-5):
        """Initialize diagnostics.

        Args:
            g_const: Gravitational constant
            softening: Softening term added to r^2 (must match force calculation)
        """
        self.g_const = g_const
        self.softening = softening

    @classmethod
    def for_universe(cls, universe: Universe) -> "Diagnostics":
        return cls(g_const=universe.g_const, softening=universe.softening)

    def compute_energies(self, universe: Universe) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Potential uses the same softening as the force law:
        U = -G * Σ_{i<j} m_i * m_j / sqrt(r_ij^2 + softening)

        Args:
            universe: State to measure

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions, velocities, masses = universe.get_state()
        n = len(masses)

        # Kinetic energy: K = 0.5 * Σ m_i * v_i^2
        K = 0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1))

        # One row at a time keeps memory O(n)
        U = 0.0
        for i in range(n - 1):
            r_diff = positions[i + 1:] - positions[i]
            r_soft = np.sqrt(np.sum(r_diff ** 2, axis=1) + self.softening)
            U -= self.g_const * masses[i] * np.sum(masses[i + 1:] / r_soft)

        return float(K), float(U), float(K + U)

    def compute_angular_momentum(self, universe: Universe) -> np.ndarray:
        """Total angular momentum vector L = Σ m_i (r_i × v_i)."""
        positions, velocities, masses = universe.get_state()
        if len(masses) == 0:
            return np.zeros(3)
        return np.sum(masses[:, np.newaxis] * np.cross(positions, velocities), axis=0)

    @staticmethod
    def orbital_radius(universe: Universe, index: int, center: int = 0) -> float:
        """Distance between body ``index`` and body ``center``."""
        return float(np.linalg.norm(universe.bodies[index].pos - universe.bodies[center].pos))
