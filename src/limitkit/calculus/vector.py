"""Three-dimensional vectors and the arithmetic the directional engine needs."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "Vector",
    "as_vector",
    "sum_vectors",
    "scale_vector",
    "vector_length",
]


@dataclass(frozen=True)
class Vector:
    """An immutable triple of real components.

    Non-finite components are not guarded against; they propagate through
    the arithmetic like any other float.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return sum_vectors(self, other)

    def __mul__(self, k: float) -> Vector:
        if isinstance(k, Vector):
            return NotImplemented
        return scale_vector(k, self)

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return vector_length(self)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def as_array(self) -> NDArray[np.float64]:
        """Returns the components as a length-3 NumPy array."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Vector:
        """Builds a vector from any array-like holding exactly three numbers.

        Raises:
            ValueError: If ``values`` does not hold exactly three numbers.
        """
        arr = np.asarray(values, dtype=float).reshape(-1)
        if arr.size != 3:
            raise ValueError(f"expected 3 components; got {arr.size}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))


def as_vector(value: Vector | ArrayLike) -> Vector:
    """Returns ``value`` unchanged if it is a ``Vector``, otherwise converts it."""
    if isinstance(value, Vector):
        return value
    return Vector.from_array(value)


def sum_vectors(a: Vector, b: Vector) -> Vector:
    """Component-wise sum ``a + b``."""
    return Vector(a.x + b.x, a.y + b.y, a.z + b.z)


def scale_vector(k: float, a: Vector) -> Vector:
    """Multiplies every component of ``a`` by ``k``."""
    return Vector(k * a.x, k * a.y, k * a.z)


def vector_length(a: Vector) -> float:
    """Euclidean norm ``sqrt(x² + y² + z²)``."""
    return math.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)
