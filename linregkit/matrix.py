"""Dense real matrices with 1-based ``(row, column)`` indexing."""

from __future__ import annotations

import operator
from numbers import Real
from typing import Iterable, Sequence

from .vector import Vector

_PIVOT_EPS = 1e-12


class SingularMatrixError(ValueError):
    """Raised when a matrix that must be inverted is singular."""


class Matrix:
    """A rectangular matrix of floats, indexed as ``m[i, j]`` from 1."""

    __slots__ = ("_data", "_rows", "_cols")

    def __init__(self, num_rows: int, num_cols: int) -> None:
        num_rows = operator.index(num_rows)
        num_cols = operator.index(num_cols)
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError(f"invalid matrix size {num_rows}x{num_cols}")
        self._rows = num_rows
        self._cols = num_cols
        self._data = [[0.0] * num_cols for _ in range(num_rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from a sequence of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("a matrix needs at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def num_rows(self) -> int:
        return self._rows

    @property
    def num_cols(self) -> int:
        return self._cols

    def _position(self, key: object) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("matrix indices must be a (row, column) pair")
        i, j = (operator.index(k) for k in key)
        if not (1 <= i <= self._rows and 1 <= j <= self._cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix"
            )
        return i - 1, j - 1

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._position(key)
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._position(key)
        self._data[i][j] = float(value)

    def rows(self) -> list[list[float]]:
        """Return a copy of the entries as a list of rows."""
        return [list(row) for row in self._data]

    def copy(self) -> "Matrix":
        return Matrix.from_rows(self._data)

    def transpose(self) -> "Matrix":
        return Matrix.from_rows(zip(*self._data))

    def _check_same_shape(self, other: "Matrix", action: str) -> None:
        if (self._rows, self._cols) != (other._rows, other._cols):
            raise ValueError(
                f"cannot {action} {self._rows}x{self._cols} and "
                f"{other._rows}x{other._cols} matrices"
            )

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        return Matrix.from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        return Matrix.from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def __mul__(self, other: object) -> "Matrix | Vector":
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._cols} by "
                    f"{other._rows}x{other._cols} matrix"
                )
            columns = list(zip(*other._data))
            return Matrix.from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._data
            )
        if isinstance(other, Vector):
            if self._cols != len(other):
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._cols} matrix by "
                    f"vector of size {len(other)}"
                )
            return Vector(sum(a * b for a, b in zip(row, other)) for row in self._data)
        if isinstance(other, Real):
            return Matrix.from_rows([value * other for value in row] for row in self._data)
        return NotImplemented

    def __rmul__(self, other: object) -> "Matrix":
        if isinstance(other, Real):
            return Matrix.from_rows([other * value for value in row] for row in self._data)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _require_square(self, what: str) -> int:
        if self._rows != self._cols:
            raise ValueError(f"{what} needs a square matrix, got {self._rows}x{self._cols}")
        return self._rows

    def determinant(self) -> float:
        """Determinant by Gaussian elimination with partial pivoting."""
        n = self._require_square("determinant")
        a = self.rows()
        det = 1.0
        sign = 1
        for i in range(n):
            max_row = max(range(i, n), key=lambda k: abs(a[k][i]))
            if abs(a[max_row][i]) < _PIVOT_EPS:
                return 0.0
            if max_row != i:
                a[i], a[max_row] = a[max_row], a[i]
                sign = -sign
            pivot_row = a[i]
            det *= pivot_row[i]
            for row in a[i + 1:]:
                factor = row[i] / pivot_row[i]
                for j in range(i, n):
                    row[j] -= factor * pivot_row[j]
        return det * sign

    def inverse(self) -> "Matrix":
        """Inverse by Gauss-Jordan elimination with partial pivoting."""
        n = self._require_square("inverse")
        a = self.rows()
        inv = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
        for i in range(n):
            max_row = max(range(i, n), key=lambda k: abs(a[k][i]))
            if abs(a[max_row][i]) < _PIVOT_EPS:
                raise SingularMatrixError("matrix is singular and cannot be inverted")
            if max_row != i:
                a[i], a[max_row] = a[max_row], a[i]
                inv[i], inv[max_row] = inv[max_row], inv[i]
            pivot = a[i][i]
            a[i] = [value / pivot for value in a[i]]
            inv[i] = [value / pivot for value in inv[i]]
            for k in range(n):
                if k == i:
                    continue
                factor = a[k][i]
                a[k] = [x - factor * y for x, y in zip(a[k], a[i])]
                inv[k] = [x - factor * y for x, y in zip(inv[k], inv[i])]
        return Matrix.from_rows(inv)

    def pseudo_inverse(self, tol: float = 1e-10) -> "Matrix":
        """Moore-Penrose pseudo-inverse for full-rank matrices.

        Square matrices are inverted directly; tall ones use
        ``(AᵀA)⁻¹Aᵀ`` and wide ones ``Aᵀ(AAᵀ)⁻¹``.
        """
        if self._rows == self._cols:
            return self.inverse()
        at = self.transpose()
        if self._rows > self._cols:
            return (at * self).inverse() * at
        return at * (self * at).inverse()

    def is_symmetric(self, tol: float = 1e-10) -> bool:
        """Whether the matrix is square and equal to its transpose within ``tol``."""
        if self._rows != self._cols:
            return False
        return all(
            abs(self._data[i][j] - self._data[j][i]) <= tol
            for i in range(self._rows)
            for j in range(i + 1, self._cols)
        )

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{value:g}" for value in row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"