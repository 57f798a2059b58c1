"""Core tuple module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuple: Tuple value type with point/vector construction and arithmetic
    approx: Tolerance-based comparison of scalars and tuples
    tuple_funcs: Taichi functions mirroring Tuple semantics inside kernels

A Tuple is a point when w is 1 and a vector when w is 0. Arithmetic is
component-wise and never validates roles, except the cross product which
only accepts vectors. Equality compares all four components within an
absolute epsilon of 1e-6.
"""

from .approx import EPSILON, approx_eq, tuples_approx_eq
from .tuple import Tuple, make_point, make_tuple, make_vector
from .tuple_funcs import (
    approx_eq4,
    dot4,
    is_point4,
    is_vector4,
    magnitude4,
    make_point4,
    make_vector4,
    vec4,
)

__all__ = [
    "EPSILON",
    "approx_eq",
    "tuples_approx_eq",
    "Tuple",
    "make_tuple",
    "make_point",
    "make_vector",
    "vec4",
    "make_point4",
    "make_vector4",
    "is_point4",
    "is_vector4",
    "dot4",
    "magnitude4",
    "approx_eq4",
]
