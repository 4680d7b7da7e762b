"""Reproducibility utilities for deterministic simulations."""

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return an independent NumPy generator (unseeded if seed is None).

    Initial conditions draw only from generators made here, never from the
    global ``random`` or ``np.random`` state.
    """
    return np.random.default_rng(seed)
