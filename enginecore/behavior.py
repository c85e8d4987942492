"""Keyed state machine with enter and per-frame callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)

_NO_REQUEST = object()


@dataclass(frozen=True)
class _Callbacks:
    on_initialize: Callable[[], None]
    on_update: Callable[[], None]


class Behavior(Generic[T]):
    """Switches between registered states on request, one change per update."""

    def __init__(self) -> None:
        self._state: Optional[T] = None
        self._request: object = _NO_REQUEST
        self._behaviors: dict[T, _Callbacks] = {}

    @property
    def state(self) -> Optional[T]:
        """The current state, or None before the first change."""
        return self._state

    def initialize(self, value: T) -> None:
        """Request the starting state."""
        self.request(value)

    def request(self, value: T) -> None:
        """Ask to switch to ``value`` on the next update."""
        self._request = value

    def add(
        self,
        key: T,
        on_initialize: Callable[[], None],
        on_update: Callable[[], None],
    ) -> None:
        """Register callbacks for ``key``; an existing registration is kept."""
        self._behaviors.setdefault(key, _Callbacks(on_initialize, on_update))

    def update(self) -> None:
        """Apply a pending request, then run the current state's update."""
        if self._request is not _NO_REQUEST:
            requested = self._request
            self._request = _NO_REQUEST
            if requested in self._behaviors:
                self._state = requested  # type: ignore[assignment]
                self._behaviors[requested].on_initialize()  # type: ignore[index]
        if self._state is not None and self._state in self._behaviors:
            self._behaviors[self._state].on_update()