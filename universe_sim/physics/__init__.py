"""Physics engine for N-body simulations."""

from universe_sim.physics.body import Body
from universe_sim.physics.universe import Universe, Snapshot
from universe_sim.physics.simulator import Simulator, RunTiming

__all__ = ["Body", "Universe", "Snapshot", "Simulator", "RunTiming"]
