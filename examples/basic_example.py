"""Basic example comparing serial and parallel stepping."""

import numpy as np
from universe_sim import Simulator, create_universe, get_integrator
from universe_sim.physics.diagnostics import Diagnostics


def main():
    """Run the same universe in both modes and compare the results."""
    universe_serial = create_universe(1000, seed=42)
    universe_parallel = universe_serial.copy()

    diagnostics = Diagnostics.for_universe(universe_serial)
    print(f"Initial energy: {diagnostics.compute_energies(universe_serial)[2]:.6f}")

    for universe, mode in [(universe_serial, "serial"), (universe_parallel, "parallel")]:
        with get_integrator(mode) as integrator, Simulator(universe, integrator, dt=0.01) as sim:
            timing = sim.run(20)
        print(f"{mode:<9} total={timing.total_seconds:.3f}s avg tick={timing.per_tick_seconds * 1000:.2f}ms")

    drift = np.max(np.abs(universe_serial.positions() - universe_parallel.positions()))
    print(f"Max serial/parallel position difference: {drift:.3e}")
    print(f"Final energy: {diagnostics.compute_energies(universe_serial)[2]:.6f}")


if __name__ == "__main__":
    main()
