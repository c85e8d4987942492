"""Rotation quaternion with an imaginary vector part and a real part."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from enginecore.definition import TO_RADIAN
from enginecore.matrix4x4 import Matrix4x4
from enginecore.vector3 import BASIS_X, BASIS_Y, BASIS_Z, ZERO, Vector3, cross, dot

_PERMISSIBLE = 1e-4
_SLERP_LINEAR_THRESHOLD = 1.0 - 0.005


@dataclass(frozen=True, slots=True)
class Quaternion:
    """Immutable quaternion ``xyz`` (imaginary part) plus ``w`` (real part).

    The default value is the identity rotation.
    """

    xyz: Vector3 = field(default=ZERO)
    w: float = 1.0

    @classmethod
    def from_components(cls, x: float, y: float, z: float, w: float) -> Quaternion:
        """Quaternion from its four scalar components."""
        return cls(Vector3(x, y, z), w)

    @classmethod
    def angle_axis(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis``."""
        half = angle / 2
        return cls(axis.normalize_safe() * math.sin(half), math.cos(half))

    @classmethod
    def euler_radian(
        cls,
        pitch: Union[float, Vector3],
        yaw: Optional[float] = None,
        roll: Optional[float] = None,
    ) -> Quaternion:
        """Rotation from Euler angles in radians (X, Y, Z), or from one Vector3."""
        pitch, yaw, roll = _euler_parts(pitch, yaw, roll)
        cos_pitch = math.cos(pitch / 2)
        cos_yaw = math.cos(yaw / 2)
        cos_roll = math.cos(roll / 2)
        sin_pitch = math.sin(pitch / 2)
        sin_yaw = math.sin(yaw / 2)
        sin_roll = math.sin(roll / 2)
        xyz = Vector3(
            sin_pitch * cos_yaw * cos_roll - cos_pitch * sin_yaw * sin_roll,
            cos_pitch * sin_yaw * cos_roll + sin_pitch * cos_yaw * sin_roll,
            cos_pitch * cos_yaw * sin_roll - sin_pitch * sin_yaw * cos_roll,
        )
        w = cos_pitch * cos_yaw * cos_roll + sin_pitch * sin_yaw * sin_roll
        return cls(xyz, w)

    @classmethod
    def euler_degree(
        cls,
        pitch: Union[float, Vector3],
        yaw: Optional[float] = None,
        roll: Optional[float] = None,
    ) -> Quaternion:
        """Rotation from Euler angles in degrees (X, Y, Z), or from one Vector3."""
        pitch, yaw, roll = _euler_parts(pitch, yaw, roll)
        return cls.euler_radian(pitch * TO_RADIAN, yaw * TO_RADIAN, roll * TO_RADIAN)

    @classmethod
    def from_to_rotation(cls, start: Vector3, end: Vector3) -> Quaternion:
        """Rotation taking unit vector ``start`` onto unit vector ``end``."""
        cosine = dot(start, end)
        if cosine >= 1 - _PERMISSIBLE:
            return cls()
        if cosine < -1 + _PERMISSIBLE:
            orthogonal = BASIS_Y if abs(start.x) > 1 - _PERMISSIBLE else BASIS_X
            axis = cross(start, orthogonal).normalize()
            return cls(axis, 0.0)
        axis = cross(start, end)
        return cls.angle_axis(axis, math.acos(cosine))

    @classmethod
    def look_forward(cls, forward: Vector3, upward: Vector3 = BASIS_Y) -> Quaternion:
        """Rotation facing the unit vector ``forward`` with ``upward`` kept up."""
        look_rotation = cls.from_to_rotation(BASIS_Z, forward)
        x_axis_horizontal = cross(upward, forward).normalize_safe()
        y_axis_after = cross(forward, x_axis_horizontal)
        y_axis_before = look_rotation.rotate(BASIS_Y)
        modify_rotation = cls.from_to_rotation(y_axis_before, y_axis_after)
        return modify_rotation * look_rotation

    def __mul__(self, other: object) -> Quaternion:
        if isinstance(other, Quaternion):
            vector = other.xyz * self.w + self.xyz * other.w + cross(self.xyz, other.xyz)
            return Quaternion(vector, self.w * other.w - dot(self.xyz, other.xyz))
        if isinstance(other, (int, float)):
            return Quaternion(self.xyz * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Union[Quaternion, Vector3]:
        if isinstance(other, Vector3):
            return self.rotate(other)
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def to_matrix(self) -> Matrix4x4:
        """Equivalent rotation matrix (row-vector convention)."""
        x, y, z = self.xyz
        w = self.w
        xx, xy, xz, xw = x * x, x * y, x * z, x * w
        yy, yz, yw = y * y, y * z, y * w
        zz, zw = z * z, z * w
        ww = w * w
        return Matrix4x4(
            (
                (ww + xx - yy - zz, 2 * (xy + zw), 2 * (xz - yw), 0),
                (2 * (xy - zw), ww - xx + yy - zz, 2 * (yz + xw), 0),
                (2 * (xz + yw), 2 * (yz - xw), ww - xx - yy + zz, 0),
                (0, 0, 0, 1),
            )
        )

    def length(self) -> float:
        """Norm of the quaternion; 1 for a rotation."""
        x, y, z = self.xyz
        return math.sqrt(x * x + y * y + z * z + self.w * self.w)

    def inverse(self) -> Quaternion:
        """Conjugate, which inverts a unit quaternion."""
        return Quaternion(-self.xyz, self.w)

    def normalize(self) -> Quaternion:
        """Unit quaternion; raises ValueError for a zero quaternion."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length quaternion")
        return self * (1 / length)

    def rotate(self, vector: Vector3) -> Vector3:
        """Apply this rotation to ``vector``."""
        return (self * Quaternion(vector, 0.0) * self.inverse()).xyz


def _euler_parts(
    pitch: Union[float, Vector3], yaw: Optional[float], roll: Optional[float]
) -> tuple[float, float, float]:
    if isinstance(pitch, Vector3):
        if yaw is not None or roll is not None:
            raise TypeError("pass either one Vector3 or three angles")
        return pitch.x, pitch.y, pitch.z
    if yaw is None or roll is None:
        raise TypeError("pitch, yaw and roll are all required")
    return pitch, yaw, roll


def slerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """Spherical linear interpolation along the shorter arc."""
    cosine = dot(start.xyz, end.xyz) + start.w * end.w
    if cosine < 0:
        cosine = -cosine
        start = start * -1
    if cosine >= _SLERP_LINEAR_THRESHOLD:
        left = start * (1.0 - t)
        right = end * t
    else:
        theta = math.acos(min(cosine, 1.0))
        sin_theta = math.sin(theta)
        left = start * (math.sin((1.0 - t) * theta) / sin_theta)
        right = end * (math.sin(t * theta) / sin_theta)
    return Quaternion(left.xyz + right.xyz, left.w + right.w)


IDENTITY = Quaternion.from_components(0, 0, 0, 1)
BACK_X = Quaternion.from_components(1, 0, 0, 0)
BACK_Y = Quaternion.from_components(0, 1, 0, 0)
BACK_Z = Quaternion.from_components(0, 0, 1, 0)