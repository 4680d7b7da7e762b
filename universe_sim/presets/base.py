"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from universe_sim.physics.universe import Universe
from universe_sim.utils.reproducibility import make_rng


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(
        self,
        n_particles: int = 1000,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """Initialize preset.

        Args:
            n_particles: Number of bodies
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Injected random generator

        Raises:
            ValueError: If n_particles is negative
        """
        if n_particles < 0:
            raise ValueError(f"n_particles must be non-negative, got {n_particles}")
        self.n_particles = n_particles
        self.seed = seed
        self.rng = rng if rng is not None else make_rng(seed)

    @abstractmethod
    def generate(self) -> Universe:
        """Generate initial conditions.

        Returns:
            Freshly built Universe
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
