"""Group-based collision detection between registered colliders."""

from __future__ import annotations

import weakref
from typing import Iterator

from enginecore.collider import BaseCollider, SphereCollider


def spheres_collide(lhs: SphereCollider, rhs: SphereCollider) -> bool:
    """Whether two spheres touch or overlap."""
    distance = (lhs.world_position - rhs.world_position).length()
    return distance <= lhs.radius + rhs.radius


class CollisionManager:
    """Holds weak references to colliders grouped by name and tests groups."""

    def __init__(self) -> None:
        self._groups: dict[str, list[weakref.ref[BaseCollider]]] = {}

    def register(self, group_name: str, collider: BaseCollider) -> None:
        """Add ``collider`` to ``group_name``; the manager does not keep it alive."""
        self._groups.setdefault(group_name, []).append(weakref.ref(collider))
        collider.set_group_name(group_name)

    def _live(self, group_name: str) -> list[BaseCollider]:
        return [
            collider
            for ref in self._groups.get(group_name, ())
            if (collider := ref()) is not None
        ]

    def _all_live(self) -> Iterator[BaseCollider]:
        for name in self._groups:
            yield from self._live(name)

    def update(self) -> None:
        """Drop released colliders, then start the frame and update the rest."""
        self._groups = {
            name: alive
            for name, refs in self._groups.items()
            if (alive := [ref for ref in refs if ref() is not None])
        }
        for collider in list(self._all_live()):
            collider.begin()
            collider.update()

    def collision(self, group_name1: str, group_name2: str) -> None:
        """Test every active pair between two groups, or within one group."""
        first = self._live(group_name1)
        same_group = group_name1 == group_name2
        second = first if same_group else self._live(group_name2)
        for index, collider1 in enumerate(first):
            if not collider1.is_active:
                continue
            others = second[index + 1 :] if same_group else second
            for collider2 in others:
                if collider2.is_active:
                    self._test_collision(collider1, collider2)

    def group_counts(self) -> dict[str, int]:
        """Number of live colliders in each group."""
        counts = {name: len(self._live(name)) for name in self._groups}
        return {name: count for name, count in counts.items() if count}

    @staticmethod
    def _test_collision(test1: BaseCollider, test2: BaseCollider) -> None:
        if test1 is test2:
            return
        result = False
        if isinstance(test1, SphereCollider) and isinstance(test2, SphereCollider):
            result = spheres_collide(test1, test2)
        test1.collision(test2, result)
        test2.collision(test1, result)