"""Angle constants and degree/radian conversion."""

from __future__ import annotations

import math

PI: float = math.pi
PI_H: float = math.pi * 0.5
PI2: float = math.pi * 2.0

TO_RADIAN: float = PI / 180.0
TO_DEGREE: float = 180.0 / PI


def to_radian(degree: float) -> float:
    """Convert an angle in degrees to radians."""
    return degree * TO_RADIAN


def to_degree(radian: float) -> float:
    """Convert an angle in radians to degrees."""
    return radian * TO_DEGREE