#!/usr/bin/env python3
"""Fire a projectile and report where it lands.

This script launches a projectile from (0, 1, 0) with velocity
(50, 100, 0) * speed under gravity (0, -9.8, 0) and wind (1, 0, 0), and ticks
it until it reaches the ground. The run is repeated for each timestep so the
effect of integration step size on the final state can be compared.

Usage:
    python -m examples.projectiles [options]

Options:
    --timesteps DT [DT ...]  Timesteps to simulate (default: 1.0 0.5 0.2 0.1 0.01 0.000001)
    --speed SPEED            Launch velocity multiplier (default: 1.0)
    --backend BACKEND        "taichi" (batched kernel) or "python" (host loop)
    --arch ARCH              Taichi backend: "cpu" or "gpu" (default: cpu)
    --max-steps N            Maximum ticks per run (default: 100000000)
    --quiet                  Suppress progress output

Example:
    python -m examples.projectiles --timesteps 0.1 0.01 --backend python
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Ensure the project root is in the Python path for direct execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import taichi as ti  # noqa: E402

from src.python.simulation.projectile import (  # noqa: E402
    DEFAULT_MAX_STEPS,
    DEFAULT_TIMESTEPS,
    SimulationResult,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate a projectile until it lands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--timesteps",
        type=float,
        nargs="+",
        default=list(DEFAULT_TIMESTEPS),
        help="Timesteps to simulate (default: 1.0 0.5 0.2 0.1 0.01 0.000001)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Launch velocity multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--backend",
        choices=["taichi", "python"],
        default="taichi",
        help="Simulation backend (default: taichi)",
    )
    parser.add_argument(
        "--arch",
        choices=["cpu", "gpu"],
        default="cpu",
        help="Taichi architecture for the taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help=f"Maximum ticks per run (default: {DEFAULT_MAX_STEPS})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def run_projectiles(
    timesteps: list[float],
    speed: float = 1.0,
    backend: str = "taichi",
    max_steps: int = DEFAULT_MAX_STEPS,
    quiet: bool = False,
) -> list[SimulationResult]:
    """Simulate the standard launch at each timestep and print the final state.

    Args:
        timesteps: Timesteps to simulate, one run each.
        speed: Launch velocity multiplier.
        backend: "taichi" to run every timestep in one kernel, "python" to
            tick host Tuples one run at a time.
        max_steps: Maximum ticks per run.
        quiet: If True, only the final states are printed.

    Returns:
        One SimulationResult per timestep.
    """
    # Lazy imports so Taichi is initialized before kernels are compiled
    from src.python.simulation.batch import simulate_batch
    from src.python.simulation.projectile import default_environment, launch, simulate

    environment = default_environment()
    projectile = launch(speed)

    if not quiet:
        print(f"Simulating {len(timesteps)} timestep(s) with the {backend} backend...")

    start_time = time.time()

    if backend == "taichi":
        results = simulate_batch(environment, projectile, timesteps, max_steps=max_steps)
    else:
        results = [
            simulate(environment, projectile, timestep, max_steps=max_steps)
            for timestep in timesteps
        ]

    for result in results:
        if not quiet:
            print(f"  dt={result.timestep:g}: {result.steps} steps")
        print(f"final: position: {result.position}, velocity: {result.velocity}")

    if not quiet:
        print(f"Total time: {time.time() - start_time:.2f}s")

    return results


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.backend == "taichi":
        arch = ti.gpu if args.arch == "gpu" else ti.cpu
        ti.init(arch=arch, default_fp=ti.f64, fast_math=False)

    try:
        run_projectiles(
            timesteps=args.timesteps,
            speed=args.speed,
            backend=args.backend,
            max_steps=args.max_steps,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
