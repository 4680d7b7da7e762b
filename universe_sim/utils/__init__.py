"""Utility functions for reproducibility and configuration."""

from universe_sim.utils.reproducibility import make_rng
from universe_sim.utils.config import load_config, save_config, Config

__all__ = ["make_rng", "load_config", "save_config", "Config"]
