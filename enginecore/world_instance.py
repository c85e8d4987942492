"""Object placed in the world with a transform and an optional parent."""

from __future__ import annotations

from typing import Union

from enginecore.hierarchy import Hierarchy
from enginecore.matrix4x4 import IDENTITY, Matrix4x4
from enginecore.quaternion import Quaternion
from enginecore.transform3d import (
    Transform3D,
    extract_position,
    homogeneous,
    homogeneous_vector,
)
from enginecore.vector3 import BASIS_Y, Vector3


class WorldInstance:
    """Transform plus parent link, with a cached world matrix."""

    def __init__(self) -> None:
        self.transform = Transform3D()
        self.hierarchy = Hierarchy()
        self.is_active = True
        self._world_matrix: Matrix4x4 = IDENTITY

    @property
    def world_matrix(self) -> Matrix4x4:
        """World matrix as of the last update_matrix call."""
        return self._world_matrix

    @property
    def world_position(self) -> Vector3:
        """Translation part of the world matrix."""
        return extract_position(self._world_matrix)

    @property
    def parent(self) -> "WorldInstance | None":
        """Parent instance, if any."""
        return self.hierarchy.parent

    def set_parent(self, parent: WorldInstance) -> None:
        """Make this instance relative to ``parent``."""
        self.hierarchy.parent = parent

    def update_matrix(self) -> None:
        """Recompute the world matrix unless the instance is inactive."""
        if not self.is_active:
            return
        self._world_matrix = self._create_world_matrix()

    def _create_world_matrix(self) -> Matrix4x4:
        result = self.transform.create_matrix()
        if self.hierarchy.has_parent:
            result = result @ self.hierarchy.parent_matrix()
        return result

    def look_at(
        self, target: Union[WorldInstance, Vector3], upward: Vector3 = BASIS_Y
    ) -> None:
        """Turn to face a world-space point or another instance."""
        point = target.world_position if isinstance(target, WorldInstance) else target
        if self.hierarchy.has_parent:
            inverse = self.hierarchy.parent_matrix().inverse()
            local_point = homogeneous(point, inverse)
            local_upward = homogeneous_vector(upward, inverse)
        else:
            local_point = point
            local_upward = upward
        forward = (local_point - self.transform.translate).normalize_safe()
        self.transform.rotation = Quaternion.look_forward(forward, local_upward)