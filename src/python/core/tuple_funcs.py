"""Taichi-side tuple helpers for use inside kernels.

Kernels cannot hold host Tuple objects, so this module mirrors the Tuple
semantics on a 4-component float64 Taichi vector. Points carry w = 1.0 and
vectors w = 0.0, magnitude and dot product span all four components, and
equality is tolerance based across every component.

There is no cross product here: it must reject non-vector
operands, and kernels have no way to raise. Take cross products on the host
with Tuple.cross().

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.python.core.tuple_funcs import make_point4, make_vector4, vec4
    >>> @ti.kernel
    ... def moved() -> ti.f64:
    ...     p = make_point4(0.0, 1.0, 0.0) + make_vector4(1.0, 0.0, 0.0)
    ...     return p.x
"""

import taichi as ti

from src.python.core.approx import EPSILON

# 4-component double-precision vector matching the host Tuple layout
vec4 = ti.types.vector(4, ti.f64)


@ti.func
def make_point4(x: ti.f64, y: ti.f64, z: ti.f64) -> vec4:
    """Create a point (w = 1.0) inside a kernel."""
    return vec4(x, y, z, 1.0)


@ti.func
def make_vector4(x: ti.f64, y: ti.f64, z: ti.f64) -> vec4:
    """Create a vector (w = 0.0) inside a kernel."""
    return vec4(x, y, z, 0.0)


@ti.func
def is_point4(t: vec4) -> ti.i32:
    """Check whether w is within epsilon of 1.0.

    Returns:
        1 if the tuple is a point, 0 otherwise.
    """
    return ti.abs(t.w - 1.0) <= EPSILON


@ti.func
def is_vector4(t: vec4) -> ti.i32:
    """Check whether w is within epsilon of 0.0.

    Returns:
        1 if the tuple is a vector, 0 otherwise.
    """
    return ti.abs(t.w) <= EPSILON


@ti.func
def dot4(a: vec4, b: vec4) -> ti.f64:
    """Dot product over all four components."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


@ti.func
def magnitude4(t: vec4) -> ti.f64:
    """Euclidean norm over all four components."""
    return ti.sqrt(dot4(t, t))


@ti.func
def approx_eq4(a: vec4, b: vec4, epsilon: ti.f64) -> ti.i32:
    """Check whether every component pair is within epsilon.

    Args:
        a: First tuple.
        b: Second tuple.
        epsilon: Absolute tolerance per component.

    Returns:
        1 if all four components match within epsilon, 0 otherwise.
    """
    d = ti.abs(a - b)
    return d.x <= epsilon and d.y <= epsilon and d.z <= epsilon and d.w <= epsilon
