"""Vectors, matrices, quaternions, transforms, cameras, colliders and OBJ mesh loading for a small 3D engine."""

__version__ = "0.1.0"