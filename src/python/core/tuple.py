"""Tuple value type unifying points and vectors.

A Tuple is four double-precision components (x, y, z, w). The w component
alone decides its geometric role:

- w == 1 (within epsilon): a Point, a location in space.
- w == 0 (within epsilon): a Vector, a direction with a magnitude.

Any other w is allowed structurally (adding two points gives w == 2) but
classifies as neither. Arithmetic never validates roles; the legality rules
for points and vectors fall out of the component-wise math, with the single
exception of the cross product, which refuses non-vectors.

Tuples are immutable. Every operation returns a new Tuple, and equality is
approximate (see src.python.core.approx), so Tuples are not hashable.

Example:
    >>> from src.python.core.tuple import make_point, make_vector
    >>> p = make_point(3, -2, 5)
    >>> v = make_vector(-2, 3, 1)
    >>> p + v == make_point(1, 1, 6)
    True
    >>> (p - make_point(5, 6, 7)).is_vector()
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from numbers import Real

import numpy as np
import numpy.typing as npt

from src.python.core.approx import EPSILON, approx_eq, tuples_approx_eq


@dataclass(frozen=True, eq=False)
class Tuple:
    """An immutable (x, y, z, w) tuple of floats.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: The homogeneous component. 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    # Approximate equality is not transitive, so no hash can be consistent with it
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # Accept ints and NumPy scalars, store plain floats
        for name in ("x", "y", "z", "w"):
            value = getattr(self, name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"Tuple component {name} must be a real number, got {type(value).__name__}"
                )
            object.__setattr__(self, name, float(value))

    # =========================================================================
    # Conversion
    # =========================================================================

    @classmethod
    def from_array(cls, values: Iterable[float] | npt.NDArray[np.float64]) -> Tuple:
        """Build a Tuple from a length-4 sequence or array.

        Args:
            values: Four numbers in (x, y, z, w) order.

        Returns:
            A new Tuple.

        Raises:
            ValueError: If values does not hold exactly four components.
        """
        if not isinstance(values, np.ndarray):
            values = list(values)
        array = np.asarray(values, dtype=np.float64)
        if array.shape != (4,):
            raise ValueError(f"Expected 4 components, got array of shape {array.shape}")
        return cls(*array.tolist())

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return the components as a float64 array of shape (4,)."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    # =========================================================================
    # Classification
    # =========================================================================

    def is_point(self) -> bool:
        """Check whether w is approximately 1.0.

        Only w is inspected; the other components may hold any value.
        """
        return approx_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        """Check whether w is approximately 0.0.

        Only w is inspected; the other components may hold any value.
        """
        return approx_eq(self.w, 0.0)

    # =========================================================================
    # Arithmetic Operators
    # =========================================================================

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: object) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: object) -> Tuple:
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return Tuple.from_array(self.to_numpy() * np.float64(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Tuple:
        """Divide every component by a scalar.

        Division by zero follows IEEE-754 and yields Inf/NaN components
        instead of raising ZeroDivisionError.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            return Tuple.from_array(self.to_numpy() / np.float64(scalar))

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def magnitude(self) -> float:
        """Compute the Euclidean norm over all four components.

        Returns:
            sqrt(x^2 + y^2 + z^2 + w^2).
        """
        return math.hypot(self.x, self.y, self.z, self.w)

    def normalize(self) -> Tuple:
        """Scale the tuple to unit magnitude.

        All four components, including w, are divided by the magnitude. A
        zero-magnitude tuple is not guarded against: its components come back
        as NaN.

        Returns:
            A new Tuple pointing in the same direction with magnitude 1.
        """
        mag = self.magnitude()
        with np.errstate(divide="ignore", invalid="ignore"):
            return Tuple.from_array(self.to_numpy() / mag)

    get_normalized = normalize

    def dot(self, other: Tuple) -> float:
        """Compute the dot product across all four components.

        For two vectors (w == 0) this reduces to the usual 3D dot product.

        Args:
            other: The tuple to multiply with.

        Returns:
            x1*x2 + y1*y2 + z1*z2 + w1*w2.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Compute the 3D cross product of two vectors.

        Args:
            other: The right-hand vector.

        Returns:
            A new vector (w == 0) perpendicular to both operands.

        Raises:
            ValueError: If either operand is not a vector.
        """
        if not self.is_vector() or not other.is_vector():
            raise ValueError(
                f"Cross product requires two vectors, got w={self.w} and w={other.w}"
            )
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    # =========================================================================
    # Comparison
    # =========================================================================

    def approx_eq(self, other: Tuple, epsilon: float = EPSILON) -> bool:
        """Check whether all four components are within epsilon of other's.

        Args:
            other: The tuple to compare against.
            epsilon: Absolute tolerance per component (default 1e-6).

        Returns:
            True if every component pair is approximately equal.
        """
        return tuples_approx_eq(self, other, epsilon)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.approx_eq(other)


def make_tuple(x: float, y: float, z: float, w: float) -> Tuple:
    """Create a raw tuple. No validation is done on w."""
    return Tuple(x, y, z, w)


def make_point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1.0).

    Args:
        x: The x coordinate.
        y: The y coordinate.
        z: The z coordinate.

    Returns:
        A new Tuple with w == 1.0.
    """
    return Tuple(x, y, z, 1.0)


def make_vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0.0).

    Args:
        x: The x component.
        y: The y component.
        z: The z component.

    Returns:
        A new Tuple with w == 0.0.
    """
    return Tuple(x, y, z, 0.0)
