"""Abstract base class for integrators."""

from abc import ABC, abstractmethod
import numpy as np
from universe_sim.physics.body import Body
from universe_sim.physics.universe import Universe


def apply_update(body: Body, acceleration: np.ndarray, dt: float) -> None:
    """Semi-implicit Euler: v_new = v + a*dt, r_new = r + v_new*dt.

    Touches only this body's own velocity and position.
    """
    body.vel += acceleration * dt
    body.pos += body.vel * dt


class Integrator(ABC):
    """Abstract interface for a single-tick stepping strategy.

    Every implementation computes all accelerations from a snapshot taken
    before any body moves, then applies the updates.
    """

    @abstractmethod
    def step(self, universe: Universe, dt: float) -> None:
        """Advance the universe by one tick in place.

        Args:
            universe: State to advance
            dt: Time step
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the execution mode name."""
        pass

    def close(self) -> None:
        """Release any resources held by the integrator."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
