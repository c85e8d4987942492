"""4x4 matrix with Gauss-Jordan inverse."""

from __future__ import annotations

from enginecore.matrix import Matrix

_PIVOT_EPSILON = 1e-6


class Matrix4x4(Matrix):
    """4x4 matrix; defaults to all zeros."""

    __slots__ = ()

    SHAPE = (4, 4)

    @classmethod
    def identity(cls) -> Matrix4x4:
        """The 4x4 identity matrix."""
        return cls(
            ((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))
        )

    @classmethod
    def from_3x3(cls, matrix: Matrix) -> Matrix4x4:
        """Embed a 3x3 matrix in the top-left corner; the rest is zero."""
        if matrix.shape != (3, 3):
            raise ValueError("from_3x3 needs a 3x3 matrix")
        return cls([(*row, 0.0) for row in matrix] + [(0.0, 0.0, 0.0, 0.0)])

    def inverse(self) -> Matrix4x4:
        """Inverse by Gauss-Jordan elimination; raises ValueError if no pivot is found."""
        size = self.rows
        augmented = [
            list(row) + [1.0 if j == i else 0.0 for j in range(size)]
            for i, row in enumerate(self)
        ]
        for i in range(size):
            if abs(augmented[i][i]) < _PIVOT_EPSILON:
                swap = next(
                    (k for k in range(i + 1, size) if augmented[k][i] != 0), None
                )
                if swap is None:
                    raise ValueError("matrix is singular and has no inverse")
                augmented[i], augmented[swap] = augmented[swap], augmented[i]
            pivot = augmented[i][i]
            pivot_row = [value / pivot for value in augmented[i]]
            augmented[i] = pivot_row
            for k, row in enumerate(augmented):
                factor = row[i]
                if k != i and factor != 0:
                    augmented[k] = [v - factor * p for v, p in zip(row, pivot_row)]
        return Matrix4x4(row[size:] for row in augmented)


IDENTITY = Matrix4x4.identity()