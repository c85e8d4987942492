"""3D scale/rotation/translation transform and 4x4 matrix builders."""

from __future__ import annotations

import math
from typing import Optional, Union

from enginecore.matrix4x4 import Matrix4x4
from enginecore.quaternion import Quaternion
from enginecore.vector3 import BASIS, ZERO, Vector3


class Transform3D:
    """Mutable scale, rotation and translation of an object."""

    __slots__ = ("scale", "_rotation", "translate")

    def __init__(
        self,
        scale: Vector3 = BASIS,
        rotation: Optional[Quaternion] = None,
        translate: Vector3 = ZERO,
    ) -> None:
        self.scale = scale
        self._rotation = rotation if rotation is not None else Quaternion()
        self.translate = translate

    @property
    def rotation(self) -> Quaternion:
        """Rotation; assigned values are normalized."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        self._rotation = value.normalize()

    def __repr__(self) -> str:
        return (
            f"Transform3D(scale={self.scale!r}, rotation={self._rotation!r}, "
            f"translate={self.translate!r})"
        )

    def create_matrix(self) -> Matrix4x4:
        """Affine matrix of this transform."""
        return make_affine_matrix(self.scale, self._rotation, self.translate)

    def plus_translate(self, plus: Vector3) -> None:
        """Move by ``plus``."""
        self.translate = self.translate + plus

    def copy_from(self, other: Transform3D) -> None:
        """Take over scale, rotation and translation of ``other``."""
        self.scale = other.scale
        self._rotation = other._rotation
        self.translate = other.translate


def _xyz(
    x: Union[float, Vector3], y: Optional[float], z: Optional[float]
) -> tuple[float, float, float]:
    if isinstance(x, Vector3):
        if y is not None or z is not None:
            raise TypeError("pass either one Vector3 or three numbers")
        return x.x, x.y, x.z
    if y is None or z is None:
        raise TypeError("x, y and z are all required")
    return x, y, z


def make_rotate_x_matrix(theta: float) -> Matrix4x4:
    """Rotation about the X axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(((1, 0, 0, 0), (0, c, s, 0), (0, -s, c, 0), (0, 0, 0, 1)))


def make_rotate_y_matrix(theta: float) -> Matrix4x4:
    """Rotation about the Y axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(((c, 0, -s, 0), (0, 1, 0, 0), (s, 0, c, 0), (0, 0, 0, 1)))


def make_rotate_z_matrix(theta: float) -> Matrix4x4:
    """Rotation about the Z axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Matrix4x4(((c, s, 0, 0), (-s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))


def make_rotate_matrix(
    x: Union[float, Vector3], y: Optional[float] = None, z: Optional[float] = None
) -> Matrix4x4:
    """Euler rotation applied X, then Y, then Z."""
    x, y, z = _xyz(x, y, z)
    return make_rotate_x_matrix(x) @ make_rotate_y_matrix(y) @ make_rotate_z_matrix(z)


def make_scale_matrix(
    x: Union[float, Vector3], y: Optional[float] = None, z: Optional[float] = None
) -> Matrix4x4:
    """Scale matrix."""
    x, y, z = _xyz(x, y, z)
    return Matrix4x4(((x, 0, 0, 0), (0, y, 0, 0), (0, 0, z, 0), (0, 0, 0, 1)))


def make_translate_matrix(
    x: Union[float, Vector3], y: Optional[float] = None, z: Optional[float] = None
) -> Matrix4x4:
    """Translation matrix (translation in the bottom row)."""
    x, y, z = _xyz(x, y, z)
    return Matrix4x4(((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (x, y, z, 1)))


def make_affine_matrix(
    scale: Vector3, rotate: Union[Quaternion, Vector3], translate: Vector3
) -> Matrix4x4:
    """Scale, then rotate (quaternion or Euler radians), then translate."""
    if isinstance(rotate, Vector3):
        return (
            make_scale_matrix(scale)
            @ make_rotate_matrix(rotate)
            @ make_translate_matrix(translate)
        )
    rows = rotate.to_matrix().to_lists()
    for row, factor in zip(rows, scale):
        row[:3] = [value * factor for value in row[:3]]
    rows[3][:3] = list(translate)
    return Matrix4x4(rows)


def _transform(vector: Vector3, matrix: Matrix4x4, with_translation: bool) -> Vector3:
    x, y, z = vector
    w = x * matrix[0][3] + y * matrix[1][3] + z * matrix[2][3] + matrix[3][3]
    if w == 0:
        raise ValueError("homogeneous coordinate w is zero")
    offset = matrix[3] if with_translation else (0.0, 0.0, 0.0)
    return Vector3(
        *(
            (x * matrix[0][i] + y * matrix[1][i] + z * matrix[2][i] + offset[i]) / w
            for i in range(3)
        )
    )


def homogeneous(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by ``matrix`` in homogeneous coordinates."""
    return _transform(vector, matrix, True)


def homogeneous_vector(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a direction by ``matrix``, ignoring its translation."""
    return _transform(vector, matrix, False)


def extract_position(matrix: Matrix4x4) -> Vector3:
    """Translation part of an affine matrix."""
    return Vector3(matrix[3][0], matrix[3][1], matrix[3][2])