"""Python implementation of the ray tracer's geometric primitive layer.

This package provides the tuple algebra every later ray tracing stage builds
on, with Taichi acceleration for bulk simulation:
- A Tuple value type unifying points (w = 1) and vectors (w = 0)
- Component-wise arithmetic, magnitude, normalization, dot and cross products
- Tolerance-based equality for floating-point results
- Projectile motion simulation driven by tuple arithmetic

Subpackages:
    core: Tuple type, approximate equality, and Taichi-side tuple helpers
    simulation: Projectile physics on the host and batched on Taichi
"""

__version__ = "0.1.0"
