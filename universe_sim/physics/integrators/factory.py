"""Integrator factory keyed by execution mode name."""

from typing import List, Optional
from universe_sim.physics.integrators.base import Integrator
from universe_sim.physics.integrators.parallel import ParallelIntegrator
from universe_sim.physics.integrators.serial import SerialIntegrator


def list_available_modes() -> List[str]:
    """List all execution modes.

    Returns:
        List of mode names accepted by ``get_integrator``
    """
    return ["serial", "parallel"]


def get_integrator(mode: str = "parallel", workers: Optional[int] = None) -> Integrator:
    """Get an integrator instance.

    Args:
        mode: 'serial' or 'parallel'
        workers: Pool size for the parallel mode (ignored for serial)

    Returns:
        Integrator instance

    Raises:
        ValueError: If the mode is unknown
    """
    mode_lower = mode.lower()

    if mode_lower == "serial":
        return SerialIntegrator()
    elif mode_lower == "parallel":
        return ParallelIntegrator(workers=workers)
    else:
        raise ValueError(f"Unknown mode: {mode}. Available: {list_available_modes()}")
