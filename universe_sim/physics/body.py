"""Point-mass body record."""

from dataclasses import dataclass, field
import numpy as np


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class Body:
    """A single point mass.

    Bodies never hold references to each other; every interaction is resolved
    by looking up other bodies by ``id`` in the owning universe.

    Attributes:
        id: Stable 0-based identity, equal to the body's index in its universe
        pos: Position (3,) float64
        vel: Velocity (3,) float64
        mass: Positive scalar mass
    """
    id: int
    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    vel: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mass: float = 1.0

    def __post_init__(self):
        self.pos = _vec3(self.pos)
        self.vel = _vec3(self.vel)
        self.mass = float(self.mass)

    def copy(self) -> "Body":
        """Return an independent copy (position and velocity arrays are not shared)."""
        return Body(self.id, self.pos.copy(), self.vel.copy(), self.mass)
