"""Perspective 3D camera producing view and projection matrices."""

from __future__ import annotations

import math

from enginecore.matrix4x4 import IDENTITY, Matrix4x4
from enginecore.vector2 import Vector2
from enginecore.world_instance import WorldInstance

_DEFAULT_FOV_Y = 0.45
_DEFAULT_ASPECT_RATIO = 16 / 9
_DEFAULT_NEAR_CLIP = 0.1
_DEFAULT_FAR_CLIP = 1000.0


class Camera3D(WorldInstance):
    """World-placed camera with a left-handed perspective projection."""

    def __init__(
        self,
        fov_y: float = _DEFAULT_FOV_Y,
        aspect_ratio: float = _DEFAULT_ASPECT_RATIO,
        near_clip: float = _DEFAULT_NEAR_CLIP,
        far_clip: float = _DEFAULT_FAR_CLIP,
    ) -> None:
        super().__init__()
        self.view_matrix: Matrix4x4 = IDENTITY
        self.perspective_matrix: Matrix4x4 = IDENTITY
        self.vp_matrix: Matrix4x4 = IDENTITY
        self.set_perspective_fov(fov_y, aspect_ratio, near_clip, far_clip)
        self.update_matrix()

    @property
    def fov_y(self) -> float:
        """Vertical field of view in radians."""
        return self._fov_y

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self._aspect_ratio

    @property
    def near_clip(self) -> float:
        """Distance to the near clipping plane."""
        return self._near_clip

    @property
    def far_clip(self) -> float:
        """Distance to the far clipping plane."""
        return self._far_clip

    def set_perspective_fov(
        self, fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
    ) -> None:
        """Set the projection parameters; takes effect on the next update_matrix."""
        if math.tan(fov_y / 2) == 0:
            raise ValueError("field of view must not be zero")
        if aspect_ratio == 0:
            raise ValueError("aspect ratio must not be zero")
        if near_clip == far_clip:
            raise ValueError("near and far clip must differ")
        self._fov_y = fov_y
        self._aspect_ratio = aspect_ratio
        self._near_clip = near_clip
        self._far_clip = far_clip

    def update_matrix(self) -> None:
        """Refresh the world matrix, then the view, projection and combined matrices."""
        super().update_matrix()
        self.view_matrix = self.world_matrix.inverse()
        self.perspective_matrix = self._make_perspective_fov_matrix()
        self.vp_matrix = self.view_matrix @ self.perspective_matrix

    def _make_perspective_fov_matrix(self) -> Matrix4x4:
        cot = 1 / math.tan(self._fov_y / 2)
        near, far = self._near_clip, self._far_clip
        return Matrix4x4(
            (
                (cot / self._aspect_ratio, 0, 0, 0),
                (0, cot, 0, 0),
                (0, 0, far / (far - near), 1),
                (0, 0, -near * far / (far - near), 0),
            )
        )


def make_viewport_matrix(
    origin: Vector2, size: Vector2, min_depth: float = 0.0, max_depth: float = 1.0
) -> Matrix4x4:
    """Matrix mapping normalized device coordinates onto a screen rectangle."""
    return Matrix4x4(
        (
            (size.x / 2, 0, 0, 0),
            (0, -size.y / 2, 0, 0),
            (0, 0, max_depth - min_depth, 0),
            (origin.x + size.x / 2, origin.y + size.y / 2, min_depth, 1),
        )
    )