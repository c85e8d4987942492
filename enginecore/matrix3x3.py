"""3x3 matrix with a closed-form inverse."""

from __future__ import annotations

from enginecore.matrix import Matrix


class Matrix3x3(Matrix):
    """3x3 matrix; defaults to all zeros."""

    __slots__ = ()

    SHAPE = (3, 3)

    @classmethod
    def identity(cls) -> Matrix3x3:
        """The 3x3 identity matrix."""
        return cls(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    def inverse(self) -> Matrix3x3:
        """Inverse by cofactors; raises ValueError for a singular matrix."""
        (a, b, c), (d, e, f), (g, h, i) = self
        det = a * e * i + b * f * g + c * d * h - c * e * g - b * d * i - a * f * h
        if det == 0:
            raise ValueError("matrix is singular and has no inverse")
        return Matrix3x3(
            (
                ((e * i - f * h) / det, -(b * i - c * h) / det, (b * f - c * e) / det),
                (-(d * i - f * g) / det, (a * i - c * g) / det, -(a * f - c * d) / det),
                ((d * h - e * g) / det, -(a * h - b * g) / det, (a * e - b * d) / det),
            )
        )


IDENTITY = Matrix3x3.identity()