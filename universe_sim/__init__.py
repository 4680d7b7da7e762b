"""
Universe Simulator - direct-summation N-body kernel with serial and parallel stepping.

Features:
- All-pairs gravity with Plummer-style softening
- Semi-implicit (symplectic) Euler integration
- Serial and thread-parallel integrators with identical trajectories
- Seeded central-mass initial conditions
- Energy and angular momentum diagnostics
- CLI with per-tick timing
"""

__version__ = "0.1.0"

from universe_sim.physics.universe import Universe
from universe_sim.physics.simulator import Simulator
from universe_sim.physics.integrators.factory import get_integrator, list_available_modes
from universe_sim.presets import create_universe

__all__ = [
    "Universe",
    "Simulator",
    "get_integrator",
    "list_available_modes",
    "create_universe",
]
