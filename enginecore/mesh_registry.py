"""Thread-safe registry of loaded polygon meshes by name."""

from __future__ import annotations

import threading

from enginecore.polygon_mesh import PolygonMesh

ERROR_MESH_NAME = "ErrorObject.obj"


class MeshRegistry:
    """Maps names to loaded meshes, with a fallback mesh for unknown names."""

    def __init__(self, error_name: str = ERROR_MESH_NAME) -> None:
        self._lock = threading.Lock()
        self._meshes: dict[str, PolygonMesh] = {}
        self.error_name = error_name

    def get(self, name: str) -> PolygonMesh:
        """Mesh registered as ``name``, else the error mesh.

        Raises KeyError when neither is registered.
        """
        with self._lock:
            if name in self._meshes:
                return self._meshes[name]
            if self.error_name not in self._meshes:
                raise KeyError(f"mesh '{name}' and fallback '{self.error_name}' are not loaded")
            return self._meshes[self.error_name]

    def is_registered(self, name: str) -> bool:
        """Whether a mesh is registered as ``name``."""
        with self._lock:
            return name in self._meshes

    def transfer(self, name: str, mesh: PolygonMesh) -> None:
        """Register ``mesh`` as ``name``; an existing entry is kept."""
        with self._lock:
            self._meshes.setdefault(name, mesh)

    def names(self) -> list[str]:
        """Names of all registered meshes."""
        with self._lock:
            return list(self._meshes)