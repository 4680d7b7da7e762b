"""Stepping strategies for N-body simulations."""

from universe_sim.physics.integrators.base import Integrator, apply_update
from universe_sim.physics.integrators.serial import SerialIntegrator
from universe_sim.physics.integrators.parallel import ParallelIntegrator
from universe_sim.physics.integrators.factory import get_integrator, list_available_modes

__all__ = [
    "Integrator",
    "apply_update",
    "SerialIntegrator",
    "ParallelIntegrator",
    "get_integrator",
    "list_available_modes",
]
