"""Dense immutable matrix of floats."""

from __future__ import annotations

from typing import ClassVar, Iterable, Iterator, Optional

Rows = tuple[tuple[float, ...], ...]


class Matrix:
    """Immutable matrix of floats, indexed as ``matrix[row][column]``.

    Subclasses may fix ``SHAPE``; results of operations keep the subclass
    whenever their shape matches it.
    """

    __slots__ = ("_rows",)

    SHAPE: ClassVar[Optional[tuple[int, int]]] = None

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None) -> None:
        if rows is None:
            if self.SHAPE is None:
                raise TypeError("a matrix without a fixed shape needs its rows")
            height, width = self.SHAPE
            rows = [[0.0] * width for _ in range(height)]
        data: Rows = tuple(tuple(float(value) for value in row) for row in rows)
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows of a matrix must have the same length")
        if self.SHAPE is not None and (len(data), width) != self.SHAPE:
            raise ValueError(
                f"{type(self).__name__} must be {self.SHAPE[0]}x{self.SHAPE[1]}, "
                f"got {len(data)}x{width}"
            )
        self._rows = data

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """Matrix of the given size filled with zeros."""
        if rows <= 0 or columns <= 0:
            raise ValueError("a matrix needs at least one row and one column")
        return cls([[0.0] * columns for _ in range(rows)])

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def columns(self) -> int:
        """Number of columns."""
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self.rows, self.columns

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._rows]!r})"

    def _like(self, rows: Rows) -> Matrix:
        cls = type(self)
        if cls.SHAPE is None or cls.SHAPE == (len(rows), len(rows[0])):
            return cls(rows)
        return Matrix(rows)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return self._like(
            tuple(
                tuple(a + b for a, b in zip(left, right))
                for left, right in zip(self._rows, other._rows)
            )
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return self._like(
            tuple(
                tuple(a - b for a, b in zip(left, right))
                for left, right in zip(self._rows, other._rows)
            )
        )

    def __mul__(self, times: object) -> Matrix:
        if not isinstance(times, (int, float)):
            return NotImplemented
        return self.scaled(times)

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}"
            )
        other_columns = list(zip(*other._rows))
        return self._like(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in other_columns)
                for row in self._rows
            )
        )

    def transpose(self) -> Matrix:
        """Matrix with rows and columns swapped."""
        return self._like(tuple(zip(*self._rows)))

    def scaled(self, times: float) -> Matrix:
        """Every element multiplied by ``times``."""
        return self._like(tuple(tuple(value * times for value in row) for row in self._rows))

    def to_lists(self) -> list[list[float]]:
        """Elements as a list of row lists."""
        return [list(row) for row in self._rows]