"""Projectile simulation module.

This module exercises the tuple algebra with simple ballistic motion:

Components:
    projectile: Projectile/Environment records, tick(), and host simulation
    batch: Taichi kernel running one launch at many timesteps in parallel

Each tick moves the position by velocity * dt and changes the velocity by
(gravity + wind) * dt. A run ends once the projectile's y coordinate is at
or below zero.
"""

from .batch import simulate_batch
from .projectile import (
    DEFAULT_MAX_STEPS,
    DEFAULT_TIMESTEPS,
    Environment,
    Projectile,
    SimulationResult,
    default_environment,
    iter_trajectory,
    launch,
    simulate,
    tick,
    validate_inputs,
)

__all__ = [
    "DEFAULT_MAX_STEPS",
    "DEFAULT_TIMESTEPS",
    "Environment",
    "Projectile",
    "SimulationResult",
    "default_environment",
    "launch",
    "tick",
    "iter_trajectory",
    "simulate",
    "simulate_batch",
    "validate_inputs",
]
