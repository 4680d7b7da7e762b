"""Simulation state: the body collection and its physical constants."""

from dataclasses import dataclass
from typing import Iterable, Tuple
import numpy as np
from universe_sim.physics.body import Body


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of the state needed for force evaluation.

    The arrays are copies taken before any body is mutated and are flagged
    non-writeable, so workers can share them freely.
    """
    ids: np.ndarray
    positions: np.ndarray
    masses: np.ndarray
    g_const: float
    softening: float

    def __len__(self) -> int:
        return self.ids.shape[0]


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class Universe:
    """Ordered collection of bodies plus the gravitational constant and softening.

    Index ``i`` of ``bodies`` always holds the body with ``id == i``. The body
    set is fixed for the lifetime of the universe; only positions and
    velocities change while stepping.
    """

    G_DEFAULT = 1.0
    SOFTENING_DEFAULT = 1e-5  # length^2 units, added to the squared distance

    def __init__(
        self,
        bodies: Iterable[Body],
        g_const: float = G_DEFAULT,
        softening: float = SOFTENING_DEFAULT
    ):
        """Initialize universe.

        Args:
            bodies: Bodies ordered by id (body ``i`` must have ``id == i``)
            g_const: Gravitational constant
            softening: Additive term in the squared-distance denominator (> 0)

        Raises:
            ValueError: If softening is not positive or ids are not 0..n-1 in order
        """
        if not softening > 0:
            raise ValueError(f"softening must be positive, got {softening}")
        self._bodies: Tuple[Body, ...] = tuple(bodies)
        for index, body in enumerate(self._bodies):
            if body.id != index:
                raise ValueError(f"Body at index {index} has id {body.id}")
        self._g_const = float(g_const)
        self._softening = float(softening)

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Bodies ordered by id; the collection itself cannot be replaced."""
        return self._bodies

    @property
    def g_const(self) -> float:
        return self._g_const

    @property
    def softening(self) -> float:
        return self._softening

    def __len__(self) -> int:
        return len(self.bodies)

    def ids(self) -> np.ndarray:
        return np.array([b.id for b in self.bodies], dtype=np.int64)

    def positions(self) -> np.ndarray:
        """Return a (n, 3) copy of all positions."""
        return np.array([b.pos for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        """Return a (n, 3) copy of all velocities."""
        return np.array([b.vel for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def masses(self) -> np.ndarray:
        return np.array([b.mass for b in self.bodies], dtype=np.float64)

    def snapshot(self) -> Snapshot:
        """Materialize an immutable copy of ids, positions and masses."""
        return Snapshot(
            ids=_frozen(self.ids()),
            positions=_frozen(self.positions()),
            masses=_frozen(self.masses()),
            g_const=self._g_const,
            softening=self._softening,
        )

    def copy(self) -> "Universe":
        """Return a deep copy with the same constants."""
        return Universe(
            [b.copy() for b in self.bodies],
            g_const=self._g_const,
            softening=self._softening,
        )

    def get_state(self):
        """Get current state (positions, velocities, masses).

        Returns:
            Tuple of (positions, velocities, masses) as numpy arrays
        """
        return self.positions(), self.velocities(), self.masses()
