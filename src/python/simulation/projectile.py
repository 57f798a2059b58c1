"""Projectile motion built from Tuple arithmetic.

A projectile is a position (point) and a velocity (vector). Each tick moves
the position by the velocity and bends the velocity by the environment's
gravity and wind, all scaled by the timestep. Simulation runs until the
projectile is at or below the ground plane (y <= 0).

Example:
    >>> from src.python.simulation.projectile import default_environment, launch, simulate
    >>> result = simulate(default_environment(), launch(), timestep=0.1)
    >>> result.position.y <= 0.0
    True
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from dataclasses import dataclass

from src.python.core.tuple import Tuple, make_point, make_vector

# =============================================================================
# Simulation Defaults
# =============================================================================

# Upper bound on ticks before a run is considered non-terminating
DEFAULT_MAX_STEPS = 100_000_000

# Timestep sweep used by the example driver
DEFAULT_TIMESTEPS = (1.0, 0.5, 0.2, 0.1, 0.01, 0.000001)

LAUNCH_POSITION = make_point(0, 1, 0)
LAUNCH_VELOCITY = make_vector(50, 100, 0)
GRAVITY = make_vector(0, -9.8, 0)
WIND = make_vector(1, 0, 0)

# Callback receives (step_number, projectile_after_step)
StepCallback = Callable[[int, "Projectile"], None]


@dataclass(frozen=True)
class Projectile:
    """A moving body.

    Attributes:
        position: Current location (a point).
        velocity: Current velocity (a vector).
    """

    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    """Constant forces acting on every projectile.

    Attributes:
        gravity: Gravitational acceleration (a vector).
        wind: Wind acceleration (a vector).
    """

    gravity: Tuple
    wind: Tuple

    @property
    def acceleration(self) -> Tuple:
        """Combined acceleration from gravity and wind."""
        return self.gravity + self.wind


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of running a projectile until it lands.

    Attributes:
        timestep: The timestep the run used.
        steps: Number of ticks taken.
        projectile: Final projectile state.
    """

    timestep: float
    steps: int
    projectile: Projectile

    @property
    def position(self) -> Tuple:
        return self.projectile.position

    @property
    def velocity(self) -> Tuple:
        return self.projectile.velocity


def default_environment() -> Environment:
    """Create the standard environment: gravity (0, -9.8, 0) and wind (1, 0, 0)."""
    return Environment(gravity=GRAVITY, wind=WIND)


def launch(speed: float = 1.0) -> Projectile:
    """Create the standard projectile at (0, 1, 0).

    Args:
        speed: Multiplier applied to the launch velocity (50, 100, 0).

    Returns:
        A new Projectile.
    """
    return Projectile(position=LAUNCH_POSITION, velocity=LAUNCH_VELOCITY * speed)


def validate_inputs(environment: Environment, projectile: Projectile) -> None:
    """Check that every tuple plays the role the simulation expects.

    Raises:
        ValueError: If the position is not a point, or the velocity, gravity
            or wind is not a vector.
    """
    if not projectile.position.is_point():
        raise ValueError(f"Projectile position must be a point, got {projectile.position}")
    if not projectile.velocity.is_vector():
        raise ValueError(f"Projectile velocity must be a vector, got {projectile.velocity}")
    if not environment.gravity.is_vector():
        raise ValueError(f"Gravity must be a vector, got {environment.gravity}")
    if not environment.wind.is_vector():
        raise ValueError(f"Wind must be a vector, got {environment.wind}")


def _validate_timestep(timestep: float) -> None:
    if not timestep > 0.0:
        raise ValueError(f"Timestep must be positive, got {timestep}")


def tick(environment: Environment, projectile: Projectile, timestep: float) -> Projectile:
    """Advance a projectile by one timestep.

    Both updates use the state from before the step: the new position uses
    the old velocity.

    Args:
        environment: Forces acting on the projectile.
        projectile: Current state.
        timestep: Duration of the step.

    Returns:
        The projectile state after the step.
    """
    position = projectile.position + projectile.velocity * timestep
    velocity = projectile.velocity + (environment.gravity + environment.wind) * timestep
    return Projectile(position=position, velocity=velocity)


def iter_trajectory(
    environment: Environment,
    projectile: Projectile,
    timestep: float,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Generator[Projectile, None, None]:
    """Yield every state of a projectile from launch until it lands.

    The starting state is yielded first. The last state yielded is the first
    one with y <= 0.

    Args:
        environment: Forces acting on the projectile.
        projectile: Starting state.
        timestep: Duration of each step (must be positive).
        max_steps: Maximum number of ticks before giving up.

    Yields:
        Successive Projectile states.

    Raises:
        ValueError: If the timestep is not positive or a tuple has the wrong role.
        RuntimeError: If the projectile is still airborne after max_steps ticks.
    """
    _validate_timestep(timestep)
    validate_inputs(environment, projectile)

    current = projectile
    yield current

    steps = 0
    while current.position.y > 0.0:
        if steps >= max_steps:
            raise RuntimeError(
                f"Projectile still airborne after maximum steps ({max_steps}) "
                f"at timestep {timestep}"
            )
        current = tick(environment, current, timestep)
        steps += 1
        yield current


def simulate(
    environment: Environment,
    projectile: Projectile,
    timestep: float,
    max_steps: int = DEFAULT_MAX_STEPS,
    callback: StepCallback | None = None,
) -> SimulationResult:
    """Run a projectile until it reaches the ground.

    Args:
        environment: Forces acting on the projectile.
        projectile: Starting state.
        timestep: Duration of each step (must be positive).
        max_steps: Maximum number of ticks before giving up.
        callback: Optional function called after every tick with
            (step_number, projectile).

    Returns:
        A SimulationResult with the final state and the number of ticks.

    Raises:
        ValueError: If the timestep is not positive or a tuple has the wrong role.
        RuntimeError: If the projectile is still airborne after max_steps ticks.

    Example:
        >>> def progress(step, state):
        ...     print(f"step {step}: y={state.position.y:.2f}")
        >>> simulate(default_environment(), launch(), 0.5, callback=progress)
    """
    steps = 0
    final = projectile
    for step, state in enumerate(iter_trajectory(environment, projectile, timestep, max_steps)):
        steps, final = step, state
        if step > 0 and callback is not None:
            callback(step, state)

    return SimulationResult(timestep=timestep, steps=steps, projectile=final)
