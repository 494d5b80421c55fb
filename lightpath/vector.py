"""Three-dimensional vectors and the small geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

MAX_T = 10.0
"""Time a ray travels when it hits nothing."""

MIN_EPS = 1e-10
"""Smallest distance treated as non-zero."""

MAX_RAYS = 1000
"""Upper bound on the number of rays in one simulation."""

MIN_ENERGY_DENSITY = 1e-2
"""Rays below this energy density are no longer traced."""

_NAN = float("nan")


@dataclass(frozen=True)
class Vector:
    """An immutable vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def cross(self, other: Vector) -> Vector:
        """Return the cross product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector) -> float:
        """Return the scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector:
        """Return the unit vector in the same direction.

        The zero vector has no direction; its components come back as NaN.
        """
        mag = self.magnitude()
        if mag == 0:
            return Vector(_NAN, _NAN, _NAN)
        return Vector(self.x / mag, self.y / mag, self.z / mag)


def angle(a: Vector, b: Vector) -> float:
    """Return the angle between two vectors in radians (NaN if undefined)."""
    denominator = a.magnitude() * b.magnitude()
    if denominator == 0:
        return _NAN
    ratio = a.dot(b) / denominator
    if math.isnan(ratio) or not -1.0 <= ratio <= 1.0:
        return _NAN
    return math.acos(ratio)


def rotate_about_axis(v: Vector, axis: Vector, theta: float) -> Vector:
    """Rotate ``v`` by ``theta`` radians about the unit vector ``axis``."""
    s = math.sin(theta)
    c = math.cos(theta)
    oc = 1 - c
    ux, uy, uz = axis.x, axis.y, axis.z
    bx = (
        v.x * (ux * ux * oc + c)
        + v.y * (ux * uy * oc - uz * s)
        + v.z * (ux * uz * oc + uy * s)
    )
    by = (
        v.x * (ux * uy * oc + uz * s)
        + v.y * (uy * uy * oc + c)
        + v.z * (uy * uz * oc - ux * s)
    )
    bz = (
        v.x * (ux * uz * oc - uy * s)
        + v.y * (uy * uz * oc + ux * s)
        + v.z * (uz * uz * oc + c)
    )
    return Vector(bx, by, bz)


def smallest_positive_root(a: float, b: float, c: float) -> float:
    """Solve ``a x^2 + b x + c = 0`` and prefer the smaller root above MIN_EPS.

    The smaller root is returned when it exceeds ``MIN_EPS``; otherwise the
    larger one is. Raises ValueError when there is no real root.
    """
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        raise ValueError("polynomial has no real roots")
    delta = math.sqrt(discriminant)
    x0 = (-b + delta) / (2 * a)
    x1 = (-b - delta) / (2 * a)
    if x1 > MIN_EPS:
        return x1
    return x0