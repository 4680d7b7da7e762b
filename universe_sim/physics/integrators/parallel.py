"""Thread-pool integrator with index-partitioned fan-out."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional
import numpy as np
from universe_sim.physics.force_calculator import body_acceleration
from universe_sim.physics.integrators.base import Integrator, apply_update
from universe_sim.physics.universe import Snapshot, Universe

logger = logging.getLogger(__name__)


class ParallelIntegrator(Integrator):
    """Fork-join integrator over a fixed-size worker pool.

    Each tick has two fan-out regions separated by a barrier:

    1. Accelerations. Body indices are split into disjoint chunks; a worker
       reads only the shared immutable snapshot and writes only its own rows
       of a preallocated output array.
    2. Updates. The same chunks are reused; a worker mutates only the bodies
       in its chunk.

    No locks are needed because no two workers ever write the same slot.
    Per-body work is ``body_acceleration``, the function the serial path uses,
    so results match the serial integrator exactly.
    """

    def __init__(self, workers: Optional[int] = None, chunks_per_worker: int = 4):
        """Initialize parallel integrator.

        Args:
            workers: Pool size (default: os.cpu_count())
            chunks_per_worker: Index chunks handed to each worker per phase

        Raises:
            ValueError: If workers or chunks_per_worker is not positive
        """
        if workers is None:
            workers = os.cpu_count() or 1
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        if chunks_per_worker < 1:
            raise ValueError(f"chunks_per_worker must be positive, got {chunks_per_worker}")
        self.workers = workers
        self.chunks_per_worker = chunks_per_worker
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def name(self) -> str:
        return "parallel"

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            logger.debug("Starting worker pool with %d threads", self.workers)
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers, thread_name_prefix="universe-sim"
            )
        return self._executor

    def _partition(self, n: int) -> List[np.ndarray]:
        n_chunks = min(n, self.workers * self.chunks_per_worker)
        return [chunk for chunk in np.array_split(np.arange(n), n_chunks) if len(chunk)]

    def _fan_out(self, task: Callable[[np.ndarray], None], chunks: List[np.ndarray]) -> None:
        """Run ``task`` on every chunk and block until all finish.

        Worker exceptions are re-raised here.
        """
        futures = [self._get_executor().submit(task, chunk) for chunk in chunks]
        for future in futures:
            future.result()

    def step(self, universe: Universe, dt: float) -> None:
        n = len(universe)
        if n == 0:
            return
        snapshot: Snapshot = universe.snapshot()
        accelerations = np.zeros((n, 3))
        chunks = self._partition(n)

        def compute_chunk(indices: np.ndarray) -> None:
            for index in indices:
                accelerations[index] = body_acceleration(index, snapshot)

        def update_chunk(indices: np.ndarray) -> None:
            for index in indices:
                apply_update(universe.bodies[index], accelerations[index], dt)

        self._fan_out(compute_chunk, chunks)
        self._fan_out(update_chunk, chunks)

    def close(self) -> None:
        """Shut down the worker pool; a later step starts a new one."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
