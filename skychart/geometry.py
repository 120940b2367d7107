"""Two- and three-dimensional vectors of floating-point coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Point:
    """A point, or 2D vector, with x and y coordinates.

    Points add and subtract componentwise and scale by a number.
    Indexing gives x at 0 and y at 1.
    """

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def transposed(self) -> Point:
        """Return the point with x and y swapped."""
        return Point(self.y, self.x)

    def length_squared(self) -> float:
        """Return the dot product of the vector with itself."""
        return self.dot(self)

    def dot(self, other: Point) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def is_null(self) -> bool:
        """Return True if both coordinates are zero."""
        return self.x == 0 and self.y == 0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Point:
        """Return a unit vector in the same direction, or a null vector for zero length."""
        length = self.length()
        if length > 0:
            return Point(self.x / length, self.y / length)
        return Point()

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Point:
        if not isinstance(factor, Real):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __rmul__(self, factor: object) -> Point:
        if not isinstance(factor, Real):
            return NotImplemented
        return Point(factor * self.x, factor * self.y)

    def __truediv__(self, divisor: object) -> Point:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Point(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __pos__(self) -> Point:
        return self


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3D vector with x, y and z coordinates.

    Vectors add and subtract componentwise, scale by a number and
    have dot and cross products. Indexing gives x, y and z at 0, 1 and 2.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_point(cls, point: Point, z: float = 0.0) -> Vector3:
        """Build a vector from a point's x and y and the given z."""
        return cls(point.x, point.y, z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def to_point(self) -> Point:
        """Return a point made of the x and y coordinates."""
        return Point(self.x, self.y)

    def length_squared(self) -> float:
        """Return the dot product of the vector with itself."""
        return self.dot(self)

    def dot(self, other: Vector3) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product of this vector and another one."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_null(self) -> bool:
        """Return True if all coordinates are zero."""
        return self.x == 0 and self.y == 0 and self.z == 0

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y, self.z)

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction, or a null vector for zero length."""
        length = self.length()
        if length > 0:
            return Vector3(self.x / length, self.y / length, self.z / length)
        return Vector3()

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: object) -> Vector3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def __rmul__(self, factor: object) -> Vector3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector3(factor * self.x, factor * self.y, factor * self.z)

    def __truediv__(self, divisor: object) -> Vector3:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Vector3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vector3:
        return self