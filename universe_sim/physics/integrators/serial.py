"""Single-threaded reference integrator."""

from universe_sim.physics.force_calculator import compute_accelerations
from universe_sim.physics.integrators.base import Integrator, apply_update
from universe_sim.physics.universe import Universe


class SerialIntegrator(Integrator):
    """Two-phase step on the calling thread.

    Phase 1 computes every acceleration against the pre-step snapshot,
    phase 2 applies the updates body by body.
    """

    @property
    def name(self) -> str:
        return "serial"

    def step(self, universe: Universe, dt: float) -> None:
        accelerations = compute_accelerations(universe.snapshot())
        for body, acc in zip(universe.bodies, accelerations):
            apply_update(body, acc, dt)
