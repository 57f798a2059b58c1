"""Batched projectile simulation on Taichi.

Sweeping timesteps down to 1e-6 needs tens of millions of ticks per run,
far too many for the host Tuple loop. This module runs one kernel lane per
timestep, each applying exactly the update of
src.python.simulation.projectile.tick in float64, and converts the final
states back into host Tuples. Start states are rebuilt in the kernel with
make_point4/make_vector4, so their w is exactly 1 or 0.

Taichi must be initialized with a float64-capable backend before calling
simulate_batch(). Pass fast_math=False to ti.init() to keep the kernel
arithmetic in step with the host loop.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.python.simulation.batch import simulate_batch
    >>> from src.python.simulation.projectile import default_environment, launch
    >>> results = simulate_batch(default_environment(), launch(), [1.0, 0.1, 0.01])
    >>> [r.steps for r in results]
"""

from collections.abc import Sequence

import numpy as np
import taichi as ti

from src.python.core.tuple import Tuple
from src.python.core.tuple_funcs import make_point4, make_vector4, vec4
from src.python.simulation.projectile import (
    DEFAULT_MAX_STEPS,
    Environment,
    Projectile,
    SimulationResult,
    validate_inputs,
)

# Row layout of the initial-state buffer passed to the kernel. Only x, y, z
# are read; w is rebuilt by make_point4/make_vector4.
_POSITION_ROW = 0
_VELOCITY_ROW = 1
_ACCELERATION_ROW = 2


@ti.func
def advance(position: vec4, velocity: vec4, acceleration: vec4, dt: ti.f64):
    """Advance one projectile by one timestep.

    Args:
        position: Current position (point).
        velocity: Current velocity (vector).
        acceleration: Combined gravity and wind (vector).
        dt: Timestep.

    Returns:
        Tuple of (new_position, new_velocity), both computed from the
        pre-step state.
    """
    return position + velocity * dt, velocity + acceleration * dt


@ti.kernel
def _simulate_kernel(
    timesteps: ti.types.ndarray(dtype=ti.f64, ndim=1),
    initial: ti.types.ndarray(dtype=ti.f64, ndim=2),
    max_steps: ti.i64,
    positions: ti.types.ndarray(dtype=ti.f64, ndim=2),
    velocities: ti.types.ndarray(dtype=ti.f64, ndim=2),
    steps: ti.types.ndarray(dtype=ti.i64, ndim=1),
):
    for i in range(timesteps.shape[0]):
        dt = timesteps[i]
        position = make_point4(
            initial[_POSITION_ROW, 0], initial[_POSITION_ROW, 1], initial[_POSITION_ROW, 2]
        )
        velocity = make_vector4(
            initial[_VELOCITY_ROW, 0], initial[_VELOCITY_ROW, 1], initial[_VELOCITY_ROW, 2]
        )
        acceleration = make_vector4(
            initial[_ACCELERATION_ROW, 0],
            initial[_ACCELERATION_ROW, 1],
            initial[_ACCELERATION_ROW, 2],
        )

        count = ti.cast(0, ti.i64)
        while position.y > 0.0 and count < max_steps:
            next_position, next_velocity = advance(position, velocity, acceleration, dt)
            position = next_position
            velocity = next_velocity
            count += 1

        for k in ti.static(range(4)):
            positions[i, k] = position[k]
            velocities[i, k] = velocity[k]
        steps[i] = count


def simulate_batch(
    environment: Environment,
    projectile: Projectile,
    timesteps: Sequence[float],
    max_steps: int = DEFAULT_MAX_STEPS,
) -> list[SimulationResult]:
    """Simulate the same launch at several timesteps in parallel.

    Args:
        environment: Forces acting on the projectile.
        projectile: Starting state shared by every run.
        timesteps: One timestep per run (each must be positive).
        max_steps: Maximum number of ticks per run.

    Returns:
        One SimulationResult per timestep, in input order.

    Raises:
        ValueError: If timesteps is empty or holds a non-positive value, or a
            tuple has the wrong role, or max_steps is negative or does not
            fit in 64 bits.
        RuntimeError: If any run is still airborne after max_steps ticks.
    """
    validate_inputs(environment, projectile)

    dts = np.ascontiguousarray(timesteps, dtype=np.float64)
    if dts.ndim != 1 or dts.size == 0:
        raise ValueError(f"Expected a non-empty list of timesteps, got shape {dts.shape}")
    if not np.all(dts > 0.0):
        raise ValueError(f"Timesteps must be positive, got {dts.tolist()}")
    if not 0 <= max_steps <= np.iinfo(np.int64).max:
        raise ValueError(f"max_steps must fit in a 64-bit integer, got {max_steps}")

    initial = np.stack(
        [
            projectile.position.to_numpy(),
            projectile.velocity.to_numpy(),
            environment.acceleration.to_numpy(),
        ]
    )
    count = dts.shape[0]
    positions = np.zeros((count, 4), dtype=np.float64)
    velocities = np.zeros((count, 4), dtype=np.float64)
    steps = np.zeros(count, dtype=np.int64)

    _simulate_kernel(dts, initial, max_steps, positions, velocities, steps)

    results = []
    for i in range(count):
        if positions[i, 1] > 0.0:
            raise RuntimeError(
                f"Projectile still airborne after maximum steps ({max_steps}) "
                f"at timestep {dts[i]}"
            )
        final = Projectile(
            position=Tuple.from_array(positions[i]),
            velocity=Tuple.from_array(velocities[i]),
        )
        results.append(SimulationResult(timestep=float(dts[i]), steps=int(steps[i]), projectile=final))
    return results
