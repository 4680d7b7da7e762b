"""CLI main entry point."""

import argparse
import logging
from dataclasses import asdict
from typing import List, Optional
import yaml
from universe_sim.physics.diagnostics import Diagnostics
from universe_sim.physics.integrators.factory import get_integrator, list_available_modes
from universe_sim.physics.simulator import Simulator
from universe_sim.presets import create_universe
from universe_sim.utils.config import Config, load_config

logger = logging.getLogger(__name__)

# CLI flags that override values loaded from --config
_OVERRIDES = ('count', 'mode', 'ticks', 'dt', 'workers', 'seed', 'plot')


def build_config(args) -> Config:
    """Merge a config file (if any) with explicitly given CLI flags."""
    data = asdict(load_config(args.config)) if args.config else asdict(Config())
    for key in _OVERRIDES:
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    if args.diagnostics:
        data['diagnostics'] = True
    return Config(**data)


def print_results(config: Config, timing):
    print("\n--- RESULTS ---")
    print(f"Mode:       {config.mode}")
    print(f"Bodies:     {config.count}")
    print(f"Total Time: {timing.total_seconds * 1000:.2f}ms")
    print(f"Avg Tick:   {timing.per_tick_seconds * 1000:.2f}ms")
    print("----------------\n")


def run_simulation(config: Config):
    """Run a simulation described by ``config``.

    ``config.seed`` seeds only the initializer's own generator; global
    random state is left untouched.

    Returns:
        Tuple of (universe, timing)
    """
    logger.info("Initializing simulation in %s mode...", config.mode)
    universe = create_universe(
        config.count, seed=config.seed, g_const=config.g_const, softening=config.softening
    )
    integrator = get_integrator(config.mode, workers=config.workers)

    diagnostics = Diagnostics.for_universe(universe) if config.diagnostics else None
    if diagnostics:
        K0, U0, E0 = diagnostics.compute_energies(universe)
        print(f"{'':<8} {'K':<14} {'U':<14} {'E':<14}")
        print(f"{'start':<8} {K0:<14.6g} {U0:<14.6g} {E0:<14.6g}")

    with integrator, Simulator(universe, integrator, dt=config.dt) as sim:
        timing = sim.run(config.ticks)

    if diagnostics:
        K, U, E = diagnostics.compute_energies(universe)
        dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
        print(f"{'end':<8} {K:<14.6g} {U:<14.6g} {E:<14.6g} dE/E0={dE:.4f}%")

    if config.plot:
        from universe_sim.render.renderer_2d import Renderer2D, use_headless_backend
        use_headless_backend()
        renderer = Renderer2D()
        renderer.render(*universe.get_state())
        renderer.save(config.plot)
        renderer.close()
        print(f"Plot saved to {config.plot}")

    print_results(config, timing)
    return universe, timing


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Universe Simulator - direct N-body kernel benchmark")

    # Simulation parameters
    parser.add_argument('-c', '--count', type=_positive_int, default=None,
                        help='Bodies to simulate (default: 5000)')
    parser.add_argument('-m', '--mode', type=str, default=None, choices=list_available_modes(),
                        help='Execution mode (default: parallel)')
    parser.add_argument('-t', '--ticks', type=_positive_int, default=None,
                        help='Number of simulation ticks (default: 100)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.01)')
    parser.add_argument('--workers', type=_positive_int, default=None,
                        help='Worker threads for parallel mode (default: CPU count)')
    parser.add_argument('--config', type=str, default=None,
                        help='Load settings from a .json or .yaml file')

    # Output
    parser.add_argument('--diagnostics', action='store_true',
                        help='Print energies before and after the run')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save an x-y plot of the final state to this path')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    # Info
    parser.add_argument('--list-modes', action='store_true',
                        help='List execution modes and exit')

    args = parser.parse_args(argv)

    if args.list_modes:
        print("Available modes:")
        for mode in list_available_modes():
            print(f"  - {mode}")
        return

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (ValueError, TypeError, OSError, yaml.YAMLError) as e:
        parser.error(str(e))

    run_simulation(config)


if __name__ == '__main__':
    main()
