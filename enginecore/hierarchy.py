"""Parent link of an object in the scene graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from enginecore.matrix4x4 import IDENTITY, Matrix4x4

if TYPE_CHECKING:
    from enginecore.world_instance import WorldInstance


class Hierarchy:
    """Holds an optional parent whose world matrix children are relative to."""

    __slots__ = ("parent",)

    def __init__(self, parent: Optional[WorldInstance] = None) -> None:
        self.parent = parent

    @property
    def has_parent(self) -> bool:
        """Whether a parent is set."""
        return self.parent is not None

    def reset_parent(self) -> None:
        """Remove the parent."""
        self.parent = None

    def parent_matrix(self) -> Matrix4x4:
        """World matrix of the parent; raises LookupError without a parent."""
        if self.parent is None:
            raise LookupError("hierarchy has no parent")
        return self.parent.world_matrix

    def parent_matrix_safe(self) -> Matrix4x4:
        """World matrix of the parent, or the identity without a parent."""
        if self.parent is None:
            return IDENTITY
        return self.parent.world_matrix