"""Central mass with bodies on quasi-circular orbits in the z=0 plane."""

import logging
from typing import Optional
import numpy as np
from universe_sim.physics.body import Body
from universe_sim.physics.universe import Universe
from universe_sim.presets.base import Preset

logger = logging.getLogger(__name__)


class CentralMassPreset(Preset):
    """One dominant central mass at rest at the origin plus orbiting bodies.

    Orbiters get a uniform radius in [r_min, r_max), a uniform angle in
    [0, 2π), the circular speed v = sqrt(M_center / r) along the tangent, and
    a uniform mass in [mass_min, mass_max).
    """

    def __init__(
        self,
        n_particles: int = 5000,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        M_center: float = 1_000_000.0,
        r_min: float = 100.0,
        r_max: float = 1000.0,
        mass_min: float = 1.0,
        mass_max: float = 10.0,
        g_const: float = Universe.G_DEFAULT,
        softening: float = Universe.SOFTENING_DEFAULT
    ):
        """Initialize central mass preset.

        Args:
            n_particles: Total number of bodies, central mass included
            seed: Random seed
            rng: Injected random generator (takes precedence over seed)
            M_center: Central mass (default: 1e6)
            r_min: Minimum orbital radius (default: 100)
            r_max: Maximum orbital radius, exclusive (default: 1000)
            mass_min: Minimum orbiter mass (default: 1)
            mass_max: Maximum orbiter mass, exclusive (default: 10)
            g_const: Gravitational constant of the universe
            softening: Softening of the universe
        """
        super().__init__(n_particles, seed, rng)
        self.M_center = M_center
        self.r_min = r_min
        self.r_max = r_max
        self.mass_min = mass_min
        self.mass_max = mass_max
        self.g_const = g_const
        self.softening = softening

    @property
    def name(self) -> str:
        return "central_mass"

    def generate(self) -> Universe:
        """Generate the central mass and its orbiters.

        Returns:
            Universe with exactly n_particles bodies
        """
        n = self.n_particles
        if n == 0:
            return Universe([], g_const=self.g_const, softening=self.softening)

        n_orbiters = n - 1
        radii = self.rng.uniform(self.r_min, self.r_max, n_orbiters)
        angles = self.rng.uniform(0.0, 2 * np.pi, n_orbiters)
        masses = self.rng.uniform(self.mass_min, self.mass_max, n_orbiters)

        # Circular speed around the central mass
        v_mag = np.sqrt(self.M_center / radii)

        bodies = [Body(0, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], self.M_center)]
        for i in range(n_orbiters):
            dist, angle = radii[i], angles[i]
            bodies.append(Body(
                id=i + 1,
                pos=[dist * np.cos(angle), dist * np.sin(angle), 0.0],
                vel=[-v_mag[i] * np.sin(angle), v_mag[i] * np.cos(angle), 0.0],
                mass=masses[i],
            ))

        logger.info("Universe created with %d bodies.", n)
        return Universe(bodies, g_const=self.g_const, softening=self.softening)


def create_universe(
    count: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    g_const: float = Universe.G_DEFAULT,
    softening: float = Universe.SOFTENING_DEFAULT
) -> Universe:
    """Build the default scenario: central mass plus ``count - 1`` orbiters."""
    return CentralMassPreset(
        n_particles=count, seed=seed, rng=rng, g_const=g_const, softening=softening
    ).generate()
