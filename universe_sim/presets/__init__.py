"""Initial-condition generators for universe simulations."""

from universe_sim.presets.base import Preset
from universe_sim.presets.central_mass import CentralMassPreset, create_universe

__all__ = ["Preset", "CentralMassPreset", "create_universe"]
