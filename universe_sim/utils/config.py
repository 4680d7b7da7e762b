"""Configuration management."""

import json
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from universe_sim.physics.integrators.factory import list_available_modes


@dataclass
class Config:
    """Run configuration."""
    # Simulation parameters
    count: int = 5000
    mode: str = "parallel"
    ticks: int = 100
    dt: float = 0.01
    workers: Optional[int] = None

    # Physical constants
    g_const: float = 1.0
    softening: float = 1e-5

    # Output
    diagnostics: bool = False
    plot: Optional[str] = None

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.mode, str):
            raise ValueError(f"mode must be a string, got {self.mode!r}")
        if self.mode.lower() not in list_available_modes():
            raise ValueError(f"Unknown mode: {self.mode}. Available: {list_available_modes()}")
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")
        if self.ticks < 1:
            raise ValueError(f"ticks must be at least 1, got {self.ticks}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.softening <= 0:
            raise ValueError(f"softening must be positive, got {self.softening}")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object

    Raises:
        ValueError: If the suffix is unsupported or the file has unknown keys
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
