"""2D scale/rotation/translation transform and 3x3 matrix builders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from enginecore.matrix3x3 import Matrix3x3
from enginecore.matrix4x4 import Matrix4x4
from enginecore.quaternion import Quaternion
from enginecore.transform3d import make_affine_matrix as make_affine_matrix_3d
from enginecore.vector2 import BASIS, ZERO, Vector2


@dataclass(slots=True)
class Transform2D:
    """Mutable scale, rotation (radians) and translation in the plane."""

    scale: Vector2 = BASIS
    rotate: float = 0.0
    translate: Vector2 = ZERO

    def matrix(self) -> Matrix3x3:
        """3x3 affine matrix of this transform."""
        return make_affine_matrix(self.scale, self.rotate, self.translate)

    def matrix4x4(self) -> Matrix4x4:
        """Equivalent 4x4 affine matrix, rotating about the Z axis."""
        return make_affine_matrix_3d(
            self.scale.to_vector3(1.0),
            Quaternion.euler_radian(0.0, 0.0, self.rotate),
            self.translate.to_vector3(0.0),
        )

    def matrix4x4_padding(self) -> Matrix4x4:
        """The 3x3 matrix embedded in a 4x4 matrix padded with zeros."""
        return Matrix4x4.from_3x3(self.matrix())

    def plus_translate(self, plus: Vector2) -> None:
        """Move by ``plus``."""
        self.translate = self.translate + plus

    def copy_from(self, other: Transform2D) -> None:
        """Take over scale, rotation and translation of ``other``."""
        self.scale = other.scale
        self.rotate = other.rotate
        self.translate = other.translate


def _xy(x: Union[float, Vector2], y: Optional[float]) -> tuple[float, float]:
    if isinstance(x, Vector2):
        if y is not None:
            raise TypeError("pass either one Vector2 or two numbers")
        return x.x, x.y
    if y is None:
        raise TypeError("x and y are both required")
    return x, y


def make_rotate_matrix_sin_cos(sine: float, cosine: float) -> Matrix3x3:
    """Rotation matrix from the sine and cosine of the angle."""
    return Matrix3x3(((cosine, sine, 0), (-sine, cosine, 0), (0, 0, 1)))


def make_rotate_matrix(theta: float) -> Matrix3x3:
    """Rotation matrix for ``theta`` radians."""
    return make_rotate_matrix_sin_cos(math.sin(theta), math.cos(theta))


def make_scale_matrix(x: Union[float, Vector2], y: Optional[float] = None) -> Matrix3x3:
    """Scale matrix."""
    x, y = _xy(x, y)
    return Matrix3x3(((x, 0, 0), (0, y, 0), (0, 0, 1)))


def make_translate_matrix(
    x: Union[float, Vector2], y: Optional[float] = None
) -> Matrix3x3:
    """Translation matrix (translation in the bottom row)."""
    x, y = _xy(x, y)
    return Matrix3x3(((1, 0, 0), (0, 1, 0), (x, y, 1)))


def make_affine_matrix(scale: Vector2, theta: float, translate: Vector2) -> Matrix3x3:
    """Scale, then rotate by ``theta`` radians, then translate."""
    sine, cosine = math.sin(theta), math.cos(theta)
    return Matrix3x3(
        (
            (scale.x * cosine, scale.x * sine, 0),
            (-scale.y * sine, scale.y * cosine, 0),
            (translate.x, translate.y, 1),
        )
    )


def _transform(vector: Vector2, matrix: Matrix3x3, with_translation: bool) -> Vector2:
    x, y = vector
    w = x * matrix[0][2] + y * matrix[1][2] + matrix[2][2]
    if w == 0:
        raise ValueError("homogeneous coordinate w is zero")
    offset = matrix[2] if with_translation else (0.0, 0.0)
    return Vector2(
        (x * matrix[0][0] + y * matrix[1][0] + offset[0]) / w,
        (x * matrix[0][1] + y * matrix[1][1] + offset[1]) / w,
    )


def homogeneous(vector: Vector2, matrix: Matrix3x3) -> Vector2:
    """Transform a point by ``matrix`` in homogeneous coordinates."""
    return _transform(vector, matrix, True)


def homogeneous_vector(vector: Vector2, matrix: Matrix3x3) -> Vector2:
    """Transform a direction by ``matrix``, ignoring its translation."""
    return _transform(vector, matrix, False)