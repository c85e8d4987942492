"""Orthographic 2D camera producing a view-projection matrix."""

from __future__ import annotations

from enginecore.matrix4x4 import IDENTITY, Matrix4x4
from enginecore.transform2d import Transform2D
from enginecore.vector2 import BASIS, ZERO
from enginecore.vector3 import Vector3

_DEFAULT_NEAR = 0.0
_DEFAULT_FAR = 1000.0


class Camera2D:
    """Screen-space camera; the origin is the top-left corner of the screen."""

    def __init__(self, width: float, height: float) -> None:
        self.transform = Transform2D(BASIS, 0.0, ZERO)
        self.view_matrix: Matrix4x4 = IDENTITY
        self.ortho_matrix: Matrix4x4 = IDENTITY
        self.vp_matrix: Matrix4x4 = IDENTITY
        self.set_ndc(0.0, float(width), float(height), 0.0, _DEFAULT_NEAR, _DEFAULT_FAR)
        self.update()

    def set_ndc(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> None:
        """Set the volume mapped onto normalized device coordinates."""
        if left == right or bottom == top or near == far:
            raise ValueError("orthographic volume must have non-zero extent")
        self._left_bottom_near = Vector3(left, bottom, near)
        self._right_top_far = Vector3(right, top, far)

    def update(self) -> None:
        """Recompute the view, projection and combined matrices."""
        self.view_matrix = self.transform.matrix4x4().inverse()
        self.ortho_matrix = self._make_ortho_matrix()
        self.vp_matrix = self.view_matrix @ self.ortho_matrix

    def _make_ortho_matrix(self) -> Matrix4x4:
        lbn = self._left_bottom_near
        rtf = self._right_top_far
        return Matrix4x4(
            (
                (2 / (rtf.x - lbn.x), 0, 0, 0),
                (0, 2 / (rtf.y - lbn.y), 0, 0),
                (0, 0, 1 / (rtf.z - lbn.z), 0),
                (
                    (lbn.x + rtf.x) / (lbn.x - rtf.x),
                    (lbn.y + rtf.y) / (lbn.y - rtf.y),
                    lbn.z / (lbn.z - rtf.z),
                    1,
                ),
            )
        )