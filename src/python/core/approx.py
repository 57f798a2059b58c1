"""Tolerance-based floating-point comparison.

Floating-point arithmetic accumulates rounding error, so tuples are compared
component by component against an absolute tolerance rather than bitwise.
Two tuples are equal only when every one of their four components is within
epsilon of its counterpart.

Example:
    >>> from src.python.core.approx import approx_eq, tuples_approx_eq
    >>> approx_eq(0.1 + 0.2, 0.3)
    True
    >>> tuples_approx_eq((5.0, 0.0, 0.0, 0.0), (5.0, 7.0, 8.0, 9.0))
    False
"""

from __future__ import annotations

from collections.abc import Iterable

# Default absolute tolerance for all tuple comparisons
EPSILON = 1e-6


def approx_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Check whether two scalars differ by at most epsilon.

    Args:
        a: First value.
        b: Second value.
        epsilon: Absolute tolerance (default 1e-6).

    Returns:
        True if |a - b| <= epsilon. NaN never compares equal.
    """
    return abs(a - b) <= epsilon


def tuples_approx_eq(
    a: Iterable[float],
    b: Iterable[float],
    epsilon: float = EPSILON,
) -> bool:
    """Check whether two 4-component tuples are equal within epsilon.

    Every component pair must be within tolerance; a single mismatching
    component makes the tuples unequal.

    Args:
        a: First tuple as an iterable of (x, y, z, w).
        b: Second tuple as an iterable of (x, y, z, w).
        epsilon: Absolute tolerance per component (default 1e-6).

    Returns:
        True if all four component pairs are approximately equal.
    """
    return all(approx_eq(p, q, epsilon) for p, q in zip(a, b, strict=True))
