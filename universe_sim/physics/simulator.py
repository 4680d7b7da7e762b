"""Main simulator controller."""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Callable
from universe_sim.physics.integrators.base import Integrator
from universe_sim.physics.integrators.parallel import ParallelIntegrator
from universe_sim.physics.universe import Universe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunTiming:
    """Wall-clock measurements for a run of ticks."""
    ticks: int
    total_seconds: float

    @property
    def per_tick_seconds(self) -> float:
        if self.ticks == 0:
            return 0.0
        return self.total_seconds / self.ticks


class Simulator:
    """Main simulation controller.

    Owns the universe, the stepping strategy and the fixed time step; every
    tick is one discrete, timeable call to ``step``.
    """

    def __init__(
        self,
        universe: Universe,
        integrator: Optional[Integrator] = None,
        dt: float = 0.01
    ):
        """Initialize simulator.

        Args:
            universe: State to advance in place
            integrator: Stepping strategy (default: a new parallel integrator).
                A caller-supplied integrator stays owned by the caller and is
                not closed by ``close``.
            dt: Time step
        """
        self.universe = universe
        self._owns_integrator = integrator is None
        self.integrator = integrator or ParallelIntegrator()
        self.dt = dt

        self.time = 0.0
        self.step_count = 0

        self._last_step_ms: Optional[float] = None
        self.on_step_callback: Optional[Callable] = None

    def step(self):
        """Advance the universe by exactly one tick."""
        t0 = time.perf_counter()
        self.integrator.step(self.universe, self.dt)
        self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        self.time += self.dt
        self.step_count += 1
        logger.debug(
            "tick %d (%s) took %.3f ms", self.step_count, self.integrator.name, self._last_step_ms
        )

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, ticks: int) -> RunTiming:
        """Run ``ticks`` sequential steps and time them.

        Args:
            ticks: Number of ticks to run

        Returns:
            RunTiming with total and per-tick wall time
        """
        logger.info(
            "Running %d ticks of %d bodies in %s mode", ticks, len(self.universe), self.integrator.name
        )
        start = time.perf_counter()
        for _ in range(ticks):
            self.step()
        return RunTiming(ticks=ticks, total_seconds=time.perf_counter() - start)

    def get_timing(self) -> dict:
        """Return last step timing in ms."""
        return {"step_ms": self._last_step_ms}

    def close(self):
        """Release the integrator if this simulator created it."""
        if self._owns_integrator:
            self.integrator.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
