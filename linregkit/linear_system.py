"""Square linear systems solved by elimination or conjugate gradients."""

from __future__ import annotations

import math

from .matrix import Matrix, SingularMatrixError
from .vector import Vector

_CG_TOLERANCE = 1e-10


def _dot(u: Vector, v: Vector) -> float:
    return sum(a * b for a, b in zip(u, v))


class LinearSystem:
    """The system ``A x = b`` for a square matrix ``A``.

    The matrix and right-hand side are copied, so later changes to the
    arguments do not affect the system.
    """

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.num_rows != a.num_cols:
            raise ValueError(
                f"coefficient matrix must be square, got {a.num_rows}x{a.num_cols}"
            )
        if a.num_rows != len(b):
            raise ValueError(
                f"right-hand side has size {len(b)}, expected {a.num_rows}"
            )
        self._a = a.copy()
        self._b = b.copy()

    @property
    def size(self) -> int:
        """Number of unknowns."""
        return self._a.num_rows

    def solve(self) -> Vector:
        """Solve by Gaussian elimination with partial pivoting."""
        n = self.size
        a = self._a.rows()
        b = list(self._b)

        for k in range(n):
            max_row = max(range(k, n), key=lambda i: abs(a[i][k]))
            if a[max_row][k] == 0.0:
                raise SingularMatrixError("coefficient matrix is singular")
            if max_row != k:
                a[k], a[max_row] = a[max_row], a[k]
                b[k], b[max_row] = b[max_row], b[k]
            pivot_row = a[k]
            for i in range(k + 1, n):
                factor = a[i][k] / pivot_row[k]
                a[i][k:] = [x - factor * y for x, y in zip(a[i][k:], pivot_row[k:])]
                b[i] -= factor * b[k]

        x = [0.0] * n
        for i in reversed(range(n)):
            value = b[i]
            for coefficient, known in zip(a[i][i + 1:], x[i + 1:]):
                value -= coefficient * known
            x[i] = value / a[i][i]
        return Vector(x)


class PosSymLinSystem(LinearSystem):
    """A system whose matrix is symmetric positive definite."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        super().__init__(a, b)
        if not a.is_symmetric():
            raise ValueError("coefficient matrix is not symmetric")

    def solve(self) -> Vector:
        """Solve by the conjugate gradient method, starting from zero."""
        n = self.size
        x = Vector.zeros(n)
        r = self._b - self._a * x
        p = r.copy()
        rs_old = _dot(r, r)

        for _ in range(n):
            if rs_old == 0.0:
                break
            ap = self._a * p
            p_ap = _dot(p, ap)
            if p_ap == 0.0:
                raise ValueError("coefficient matrix is not positive definite")
            alpha = rs_old / p_ap
            x = x + alpha * p
            r = r - alpha * ap
            rs_new = _dot(r, r)
            if math.sqrt(rs_new) < _CG_TOLERANCE:
                break
            p = r + (rs_new / rs_old) * p
            rs_old = rs_new
        return x