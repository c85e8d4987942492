"""Colliders that track enter, stay and exit contacts per frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from enginecore.world_instance import WorldInstance

CollisionCallback = Callable[["BaseCollider"], None]

_NOW = 0b01
_BEFORE = 0b10


class BaseCollider(WorldInstance, ABC):
    """Collider base; reports contacts to callbacks.

    ``on_collision_enter`` and ``on_collision_exit`` fire when a contact starts
    or ends; when either is unset, ``on_collision`` is called in its place.
    ``on_collision`` also fires every frame a contact persists.
    """

    def __init__(self) -> None:
        super().__init__()
        self._group_name: Optional[str] = None
        self.on_collision: Optional[CollisionCallback] = None
        self.on_collision_enter: Optional[CollisionCallback] = None
        self.on_collision_exit: Optional[CollisionCallback] = None
        self._contacts: dict[BaseCollider, int] = {}

    @property
    @abstractmethod
    def collider_type(self) -> str:
        """Name of the collider shape."""

    @property
    def group(self) -> str:
        """Group the collider is registered under, or an empty string."""
        return self._group_name if self._group_name is not None else ""

    def set_group_name(self, name: str) -> None:
        """Record the group the collider belongs to."""
        self._group_name = name

    def begin(self) -> None:
        """Start a frame: age contact states and drop those no longer touching."""
        if not self.is_active:
            self._contacts.clear()
            return
        self._contacts = {
            other: (state << 1) & (_BEFORE | _NOW)
            for other, state in self._contacts.items()
            if state
        }

    def update(self) -> None:
        """Refresh the world matrix."""
        self.update_matrix()

    def collision(self, other: BaseCollider, result: bool) -> None:
        """Record this frame's test against ``other`` and fire callbacks."""
        if not self.is_active:
            return
        state = (self._contacts.get(other, 0) & _BEFORE) | (_NOW if result else 0)
        self._contacts[other] = state
        if state == _NOW:
            self._fire(self.on_collision_enter, other)
        elif state == _BEFORE:
            self._fire(self.on_collision_exit, other)
        elif state == _BEFORE | _NOW and self.on_collision is not None:
            self.on_collision(other)

    def _fire(self, specific: Optional[CollisionCallback], other: BaseCollider) -> None:
        if specific is not None:
            specific(other)
        elif self.on_collision is not None:
            self.on_collision(other)


class SphereCollider(BaseCollider):
    """Sphere centred on the collider's world position."""

    def __init__(self, radius: float = 1.0) -> None:
        super().__init__()
        self.radius = radius

    @property
    def collider_type(self) -> str:
        return "Sphere"