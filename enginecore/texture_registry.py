"""Thread-safe registry of loaded textures by name."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

ERROR_TEXTURE_NAME = "Error.png"

ReleaseCallback = Callable[[Any], None]


class TextureRegistry:
    """Maps names to textures, with a fallback texture for unknown names.

    ``on_release`` is called with a texture whenever the registry gives it up:
    on unload, and when a duplicate is transferred.
    """

    def __init__(
        self,
        error_name: str = ERROR_TEXTURE_NAME,
        on_release: Optional[ReleaseCallback] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._textures: dict[str, Any] = {}
        self.error_name = error_name
        self._on_release = on_release

    def _release(self, texture: Any) -> None:
        if self._on_release is not None:
            self._on_release(texture)

    def get(self, name: str) -> Any:
        """Texture registered as ``name``, else the error texture.

        Raises KeyError when neither is registered.
        """
        with self._lock:
            if name in self._textures:
                return self._textures[name]
            if self.error_name not in self._textures:
                raise KeyError(
                    f"texture '{name}' and fallback '{self.error_name}' are not loaded"
                )
            return self._textures[self.error_name]

    def is_registered(self, name: str) -> bool:
        """Whether a texture is registered as ``name``."""
        with self._lock:
            return name in self._textures

    def unload(self, name: str) -> None:
        """Release and remove the texture registered as ``name``, if any."""
        with self._lock:
            texture = self._textures.pop(name, None)
            if texture is not None:
                self._release(texture)

    def transfer(self, name: str, texture: Any) -> bool:
        """Register ``texture`` as ``name``.

        If the name is taken, ``texture`` is released instead and False is returned.
        """
        with self._lock:
            if name in self._textures:
                self._release(texture)
                return False
            self._textures[name] = texture
            return True

    def names(self) -> list[str]:
        """Names of all registered textures."""
        with self._lock:
            return list(self._textures)