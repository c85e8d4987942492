"""Three-dimensional vector type and vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True, slots=True)
class Vector3:
    """Immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __pos__(self) -> Vector3:
        return self

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, times: object) -> Vector3:
        if not isinstance(times, (int, float)):
            return NotImplemented
        return Vector3(self.x * times, self.y * times, self.z * times)

    __rmul__ = __mul__

    def __truediv__(self, times: object) -> Vector3:
        if not isinstance(times, (int, float)):
            return NotImplemented
        return Vector3(self.x / times, self.y / times, self.z / times)

    def __abs__(self) -> Vector3:
        """Component-wise absolute value."""
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(dot(self, self))

    def normalize(self) -> Vector3:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def normalize_safe(
        self, tolerance: float = 0.0001, disapproval: Optional[Vector3] = None
    ) -> Vector3:
        """Unit vector, or ``disapproval`` when the length is within ``tolerance``."""
        if tolerance < 0:
            raise ValueError("tolerance must not be negative")
        if disapproval is None:
            disapproval = BASIS_X
        length = self.length()
        if length <= tolerance:
            return disapproval
        return self / length


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def distance(a: Vector3, b: Vector3) -> float:
    """Length of the difference between two points."""
    return (a - b).length()


def direction(vector_from: Vector3, vector_to: Vector3) -> Vector3:
    """Unit vector pointing from one point to another."""
    return (vector_to - vector_from).normalize()


def hadamard(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise product."""
    return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)


def lerp(start: Vector3, end: Vector3, t: float) -> Vector3:
    """Linear interpolation between two points."""
    return start * (1 - t) + end * t


def bezier(initial: Vector3, control: Vector3, terminal: Vector3, t: float) -> Vector3:
    """Point on a quadratic Bezier curve."""
    return lerp(lerp(initial, control, t), lerp(control, terminal, t), t)


def projection(vector: Vector3, onto: Vector3) -> Vector3:
    """Project ``vector`` onto the unit vector ``onto``."""
    return onto * dot(onto, vector)


def reflect(vector: Vector3, normal: Vector3) -> Vector3:
    """Reflect ``vector`` about a plane with unit ``normal``."""
    return vector - projection(vector, normal) * 2


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


def clamp(vector: Vector3, minimum: Vector3, maximum: Vector3) -> Vector3:
    """Clamp each component into the range given by ``minimum`` and ``maximum``."""
    return Vector3(
        _clamp(vector.x, minimum.x, maximum.x),
        _clamp(vector.y, minimum.y, maximum.y),
        _clamp(vector.z, minimum.z, maximum.z),
    )


def slerp(start: Vector3, end: Vector3, t: float) -> Vector3:
    """Spherical linear interpolation between two unit vectors."""
    cosine = dot(start, end)
    if cosine >= 0.9999:
        return lerp(start, end, t).normalize()
    theta = math.acos(max(cosine, -1.0))
    sin_theta = math.sin(theta)
    factor0 = math.sin((1 - t) * theta) / sin_theta
    factor1 = math.sin(t * theta) / sin_theta
    return start * factor0 + end * factor1


BASIS = Vector3(1.0, 1.0, 1.0)
BASIS_X = Vector3(1.0, 0.0, 0.0)
BASIS_Y = Vector3(0.0, 1.0, 0.0)
BASIS_Z = Vector3(0.0, 0.0, 1.0)
ZERO = Vector3(0.0, 0.0, 0.0)
INFINITY = Vector3(math.inf, math.inf, math.inf)
INFINITY_X = Vector3(math.inf, 0.0, 0.0)
INFINITY_Y = Vector3(0.0, math.inf, 0.0)
INFINITY_Z = Vector3(0.0, 0.0, math.inf)