# enginecore

Math and scene building blocks for a small 3D engine, written in plain Python
with no dependencies outside the standard library.

## Modules

- `enginecore.definition`: the constants `PI`, `PI_H`, `PI2`, `TO_RADIAN` and `TO_DEGREE`, and the functions `to_radian` and `to_degree`.
- `enginecore.vector2` and `enginecore.vector3`: the immutable `Vector2` and `Vector3` types. They support `+`, `-`, `*` and `/` by a scalar, unary `-` and `abs()`, and they have the methods `length`, `normalize` and `normalize_safe`. `Vector2.to_vector3(z)` turns a 2D vector into a 3D one. Both modules provide `dot`, `cross`, `distance`, `direction`, `hadamard`, `lerp` and `bezier`. `vector2` adds `rotate` and `rotate_sin_cos`. `vector3` adds `projection`, `reflect`, `clamp` and `slerp`. Each module also defines constants such as `ZERO`, `BASIS`, `BASIS_X` and `INFINITY`.
- `enginecore.matrix`: `Matrix`, an immutable matrix of floats indexed as `m[row][column]`. It supports `+`, `-`, `*` by a scalar and `@` for matrix products, and it has `transpose`, `scaled`, `to_lists` and `Matrix.zeros(rows, columns)`.
- `enginecore.matrix3x3` and `enginecore.matrix4x4`: fixed-size subclasses of `Matrix`. Each has an `identity()` constructor, an `IDENTITY` constant and an `inverse()` method. `Matrix3x3.inverse` uses cofactors and `Matrix4x4.inverse` uses Gauss-Jordan elimination. Both raise `ValueError` for a singular matrix. `Matrix4x4.from_3x3` embeds a 3x3 matrix in a 4x4 matrix padded with zeros.
- `enginecore.quaternion`: the immutable `Quaternion` type, built from an imaginary part `xyz` and a real part `w`. The default value is the identity rotation. The constructors are `from_components`, `angle_axis`, `euler_radian`, `euler_degree`, `from_to_rotation` and `look_forward`. The methods are `to_matrix`, `length`, `inverse`, `normalize` and `rotate`. `q1 * q2` composes two rotations and `vector * q` rotates a `Vector3`. The module also provides `slerp` and the constants `IDENTITY`, `BACK_X`, `BACK_Y` and `BACK_Z`.
- `enginecore.transform3d`: `Transform3D` holds `scale`, `rotation` and `translate`. A rotation assigned to it is normalized. Its methods are `create_matrix`, `plus_translate` and `copy_from`. The module-level functions are `make_rotate_x_matrix`, `make_rotate_y_matrix`, `make_rotate_z_matrix`, `make_rotate_matrix`, `make_scale_matrix`, `make_translate_matrix`, `make_affine_matrix`, `homogeneous`, `homogeneous_vector` and `extract_position`.
- `enginecore.transform2d`: `Transform2D` holds `scale`, `rotate` (in radians) and `translate`. Its methods are `matrix`, `matrix4x4`, `matrix4x4_padding`, `plus_translate` and `copy_from`. The module-level functions are `make_rotate_matrix`, `make_rotate_matrix_sin_cos`, `make_scale_matrix`, `make_translate_matrix`, `make_affine_matrix`, `homogeneous` and `homogeneous_vector`.
- `enginecore.hierarchy` and `enginecore.world_instance`:
  - `Hierarchy` holds an optional parent.
  - `WorldInstance` combines a `Transform3D` with a `Hierarchy`. It caches `world_matrix`, which `update_matrix()` refreshes; inactive instances are skipped. It exposes `world_position`, and `set_parent(parent)` makes it relative to another instance.
  - `look_at(target, upward)` turns the instance towards a point or towards another instance.
- `enginecore.camera2d`: `Camera2D(width, height)` is an orthographic screen camera. After `set_ndc(...)` or a change to its `transform`, call `update()` to recompute `view_matrix`, `ortho_matrix` and `vp_matrix`.
- `enginecore.camera3d`: `Camera3D` is a `WorldInstance` with a perspective projection, configured through `set_perspective_fov`. `update_matrix()` recomputes `view_matrix`, `perspective_matrix` and `vp_matrix`. The module also provides `make_viewport_matrix(origin, size, min_depth=0.0, max_depth=1.0)`.
- `enginecore.collider`: the abstract `BaseCollider` and its subclass `SphereCollider(radius=1.0)`. Each collider tracks its contacts from frame to frame and calls these callbacks:
  - `on_collision_enter` when a contact starts, or `on_collision` if `on_collision_enter` is unset;
  - `on_collision` on every frame that a contact persists;
  - `on_collision_exit` when a contact ends, or `on_collision` if `on_collision_exit` is unset.
- `enginecore.collision_manager`: `CollisionManager` keeps weak references to registered colliders, grouped by name.
  - `update()` drops colliders that have been garbage-collected, then starts the frame for each live collider and refreshes its world matrix.
  - `collision(group1, group2)` tests every active pair between two groups. When both names are the same, it tests every pair within that group.
  - `group_counts()` reports the number of live colliders in each group.
  - `spheres_collide` is the sphere-against-sphere test.
- `enginecore.polygon_mesh`: `PolygonMesh.load(directory, file_name)` reads a Wavefront `.obj` file and the `.mtl` file named by its `mtllib` line. The result holds one `MeshData` per object, each with its `VertexData` list and its triangle indices, and one `MaterialData` per material, holding the diffuse texture name and the default UV scale and offset.
  - X coordinates are mirrored.
  - The V texture coordinate is flipped.
  - The winding of each triangle is reversed.
  - `FileNotFoundError` is raised when either file is missing.
- `enginecore.mesh_registry` and `enginecore.texture_registry`: `MeshRegistry` and `TextureRegistry` are thread-safe name-to-object maps with `get`, `is_registered`, `transfer` and `names`.
  - `get` falls back to an error entry, `"ErrorObject.obj"` or `"Error.png"` by default. It raises `KeyError` if that entry is also missing.
  - `TextureRegistry` also has `unload`.
  - `TextureRegistry` passes each texture it gives up to an optional `on_release` callback.
- `enginecore.color`: `Color` holds float RGBA channels. It has `from_hex`, `from_bytes` and `to_hex`, which use the `0xRRGGBBAA` layout, and the module provides `pack_hex`.
- `enginecore.behavior`: `Behavior` is a state machine keyed by any hashable value. Register states with `add(key, on_initialize, on_update)` and switch between them with `request(value)`. Each call to `update()` applies a pending change and then runs the update callback of the current state.

Matrices use the row-vector convention: a point is multiplied on the left, and translation sits in the last row.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from enginecore.vector3 import Vector3
from enginecore.quaternion import Quaternion
from enginecore.transform3d import Transform3D, homogeneous

rotation = Quaternion.angle_axis(Vector3(0.0, 1.0, 0.0), 1.5707964)
transform = Transform3D(Vector3(1.0, 1.0, 1.0), rotation, Vector3(0.0, 0.0, 5.0))
point = homogeneous(Vector3(1.0, 0.0, 0.0), transform.create_matrix())
```

Collisions between groups:

```python
from enginecore.collider import SphereCollider
from enginecore.collision_manager import CollisionManager
from enginecore.vector3 import Vector3

manager = CollisionManager()
player, enemy = SphereCollider(), SphereCollider(radius=0.5)
enemy.transform.translate = Vector3(1.0, 0.0, 0.0)
player.on_collision_enter = lambda other: print("hit", other.group)

manager.register("player", player)
manager.register("enemy", enemy)
manager.update()
manager.collision("player", "enemy")
```

## What it does not do

The package does no drawing. It has no window, GPU buffers, shaders or debug interface.

- The cameras compute matrices only.
- `PolygonMesh` returns vertex and index lists and does not upload them anywhere.
- The package does not decode image files. `TextureRegistry` stores whatever objects you give it.
- Nothing loads assets in the background. You load meshes yourself and hand them to the registries with `transfer`.