"""Wavefront OBJ/MTL loading into per-object vertex and index lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from enginecore.transform2d import Transform2D
from enginecore.vector2 import Vector2
from enginecore.vector3 import BASIS_X, Vector3

PathLike = Union[str, Path]


@dataclass(frozen=True, slots=True)
class VertexData:
    """One vertex: homogeneous position, texture coordinate and normal."""

    position: Vector3
    w: float
    texcoord: Vector2
    normal: Vector3


@dataclass(slots=True)
class MeshData:
    """Vertices and triangle indices of one object in an OBJ file."""

    object_name: str = ""
    vertices: list[VertexData] = field(default_factory=list)
    indexes: list[int] = field(default_factory=list)
    usemtl: str = ""


@dataclass(slots=True)
class MaterialData:
    """Diffuse texture and its default UV transform from an MTL file."""

    texture_file_name: str = ""
    default_uv: Transform2D = field(default_factory=Transform2D)


def _float(token: Optional[str]) -> Optional[float]:
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _floats(text: str, count: int) -> list[float]:
    """Leading numbers of ``text``; missing or malformed ones read as zero."""
    values: list[float] = []
    for token in text.split()[:count]:
        value = _float(token)
        if value is None:
            break
        values.append(value)
    return values + [0.0] * (count - len(values))


def _element_indexes(element: str) -> list[int]:
    parts = element.split("/")[:3]
    parts += [""] * (3 - len(parts))
    return [int(part) - 1 if part else 0 for part in parts]


def _read_lines(path: Path) -> Iterator[str]:
    if not path.is_file():
        raise FileNotFoundError(f"file '{path}' is not found")
    yield from path.read_text(encoding="utf-8").split("\n")


@dataclass(slots=True)
class PolygonMesh:
    """Geometry and materials read from an OBJ file and its MTL library."""

    directory: str = ""
    object_name: str = ""
    mtl_file_name: str = ""
    meshes: list[MeshData] = field(default_factory=list)
    materials: dict[str, MaterialData] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: PathLike, file_name: str) -> PolygonMesh:
        """Load ``directory/file_name`` and the MTL file it names.

        Raises FileNotFoundError when either file is missing.
        """
        mesh = cls(directory=str(directory), object_name=file_name)
        mesh._load_obj(Path(directory) / file_name)
        mesh._load_mtl(Path(directory) / mesh.mtl_file_name)
        return mesh

    def material_count(self) -> int:
        """Number of objects (one material each) in the mesh."""
        return len(self.meshes)

    def has_mtl(self, index: int) -> bool:
        """Whether the material used by object ``index`` was defined."""
        return self.meshes[index].usemtl in self.materials

    def index_count(self, index: int) -> int:
        """Number of indices of object ``index``."""
        return len(self.meshes[index].indexes)

    def texture_name(self, index: int) -> str:
        """Texture file of object ``index``'s material; KeyError if undefined."""
        return self.materials[self.meshes[index].usemtl].texture_file_name

    def default_uv(self, index: int) -> Transform2D:
        """Default UV transform of object ``index``'s material; KeyError if undefined."""
        return self.materials[self.meshes[index].usemtl].default_uv

    def model_name(self, index: int) -> str:
        """Name given to object ``index`` by its ``o`` line."""
        return self.meshes[index].object_name

    def _new_mesh(self) -> MeshData:
        mesh = MeshData()
        self.meshes.append(mesh)
        return mesh

    def _load_obj(self, path: Path) -> None:
        positions: list[Vector3] = []
        position_ws: list[float] = []
        texcoords: list[Vector2] = []
        normals: list[Vector3] = []
        vertices: list[VertexData] = []
        indexes: list[int] = []
        known: dict[str, int] = {}
        current: Optional[MeshData] = None

        for line in _read_lines(path):
            identifier, _, rest = line.partition(" ")
            if identifier == "v":
                x, y, z = _floats(rest, 3)
                positions.append(Vector3(-x, y, z))
                position_ws.append(1.0)
            elif identifier == "vt":
                u, v = _floats(rest, 2)
                texcoords.append(Vector2(u, 1.0 - v))
            elif identifier == "vn":
                x, y, z = _floats(rest, 3)
                normals.append(Vector3(-x, y, z))
            elif identifier == "f":
                elements = rest.split(" ")
                for face_index in range(3):
                    element = elements[face_index] if face_index < len(elements) else ""
                    if element in known:
                        indexes.append(known[element])
                        continue
                    p, t, n = _element_indexes(element)
                    if not 0 <= p < len(positions):
                        p = 0
                        if not positions:
                            positions.append(Vector3())
                            position_ws.append(0.0)
                    if not 0 <= t < len(texcoords):
                        t = 0
                        if not texcoords:
                            texcoords.append(Vector2())
                    if not 0 <= n < len(normals):
                        n = 0
                        if not normals:
                            normals.append(BASIS_X)
                    vertices.append(
                        VertexData(positions[p], position_ws[p], texcoords[t], normals[n])
                    )
                    indexes.append(len(vertices) - 1)
                    known[element] = len(vertices) - 1
                indexes[-1], indexes[-3] = indexes[-3], indexes[-1]
            elif identifier == "o":
                if vertices and indexes:
                    target = current if current is not None else self._new_mesh()
                    target.vertices = vertices
                    target.indexes = indexes
                current = self._new_mesh()
                current.object_name = rest
                vertices, indexes, known = [], [], {}
            elif identifier == "usemtl":
                if current is None:
                    current = self._new_mesh()
                current.usemtl = rest.split(" ")[0]
            elif identifier == "mtllib":
                self.mtl_file_name = rest.split(" ")[0]

        if current is None:
            current = self._new_mesh()
        current.vertices = vertices
        current.indexes = indexes

    def _load_mtl(self, path: Path) -> None:
        current: Optional[MaterialData] = None
        for line in _read_lines(path):
            identifier, _, rest = line.partition(" ")
            if identifier == "newmtl":
                current = self.materials.setdefault(rest, MaterialData())
            elif identifier == "map_Kd":
                if current is None:
                    raise ValueError("map_Kd appears before any newmtl")
                tokens = iter([token for token in rest.split(" ") if token])
                for option in tokens:
                    if not option.startswith("-"):
                        current.texture_file_name = option
                        continue
                    arguments = [_float(next(tokens, None)) for _ in range(3)]
                    u = arguments[0] if arguments[0] is not None else 0.0
                    v = arguments[1] if arguments[1] is not None else 0.0
                    if option[1:2] == "s":
                        current.default_uv.scale = Vector2(u, v)
                    elif option[1:2] == "o":
                        current.default_uv.translate = Vector2(u, v)