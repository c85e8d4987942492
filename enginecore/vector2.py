"""Two-dimensional vector type and vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from enginecore.vector3 import Vector3


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __pos__(self) -> Vector2:
        return self

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, times: object) -> Vector2:
        if not isinstance(times, (int, float)):
            return NotImplemented
        return Vector2(self.x * times, self.y * times)

    __rmul__ = __mul__

    def __truediv__(self, times: object) -> Vector2:
        if not isinstance(times, (int, float)):
            return NotImplemented
        return Vector2(self.x / times, self.y / times)

    def __abs__(self) -> Vector2:
        """Component-wise absolute value."""
        return Vector2(abs(self.x), abs(self.y))

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(dot(self, self))

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def normalize_safe(
        self, tolerance: float = 0.0001, disapproval: Optional[Vector2] = None
    ) -> Vector2:
        """Unit vector, or ``disapproval`` when the length is within ``tolerance``."""
        if tolerance < 0:
            raise ValueError("tolerance must not be negative")
        if disapproval is None:
            disapproval = BASIS_X
        length = self.length()
        if length <= tolerance:
            return disapproval
        return self / length

    def to_vector3(self, z: float) -> Vector3:
        """Extend to a 3D vector with the given z."""
        return Vector3(self.x, self.y, z)


def dot(a: Vector2, b: Vector2) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def cross(a: Vector2, b: Vector2) -> float:
    """Scalar (z-component) cross product."""
    return a.x * b.y - a.y * b.x


def distance(a: Vector2, b: Vector2) -> float:
    """Length of the difference between two points."""
    return (a - b).length()


def direction(vector_from: Vector2, vector_to: Vector2) -> Vector2:
    """Unit vector pointing from one point to another."""
    return (vector_to - vector_from).normalize()


def hadamard(a: Vector2, b: Vector2) -> Vector2:
    """Component-wise product."""
    return Vector2(a.x * b.x, a.y * b.y)


def lerp(start: Vector2, end: Vector2, t: float) -> Vector2:
    """Linear interpolation between two points."""
    return start * (1 - t) + end * t


def bezier(initial: Vector2, control: Vector2, terminal: Vector2, t: float) -> Vector2:
    """Point on a quadratic Bezier curve."""
    return lerp(lerp(initial, control, t), lerp(control, terminal, t), t)


def rotate_sin_cos(vector: Vector2, sin_theta: float, cos_theta: float) -> Vector2:
    """Rotate counter-clockwise given the sine and cosine of the angle."""
    return Vector2(
        vector.x * cos_theta - vector.y * sin_theta,
        vector.x * sin_theta + vector.y * cos_theta,
    )


def rotate(vector: Vector2, radian: float) -> Vector2:
    """Rotate counter-clockwise by ``radian``."""
    return rotate_sin_cos(vector, math.sin(radian), math.cos(radian))


BASIS_X = Vector2(1.0, 0.0)
BASIS_Y = Vector2(0.0, 1.0)
ZERO = Vector2(0.0, 0.0)
BASIS = Vector2(1.0, 1.0)
INFINITY = Vector2(math.inf, math.inf)
INFINITY_X = Vector2(math.inf, 0.0)
INFINITY_Y = Vector2(0.0, math.inf)