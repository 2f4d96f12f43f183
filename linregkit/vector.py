"""Dense real vectors with 0-based indexing and 1-based calls."""

from __future__ import annotations

import operator
from numbers import Real
from typing import Iterable, Iterator


class Vector:
    """A fixed-size vector of floats.

    ``v[i]`` reads or writes with 0-based indices, and ``v(i)`` reads with
    1-based indices.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._data = [float(value) for value in values]

    @classmethod
    def zeros(cls, size: int) -> "Vector":
        """Return a vector of ``size`` zeros."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        return cls([0.0] * size)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def _position(self, index: int, base: int) -> int:
        position = operator.index(index) - base
        if not 0 <= position < len(self._data):
            last = len(self._data) - 1 + base
            raise IndexError(
                f"index {index} out of range {base}..{last} for vector of size {len(self._data)}"
            )
        return position

    def __getitem__(self, index: int) -> float:
        return self._data[self._position(index, 0)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._position(index, 0)] = float(value)

    def __call__(self, index: int) -> float:
        """Read the element at the 1-based ``index``."""
        return self._data[self._position(index, 1)]

    def _check_same_size(self, other: "Vector", action: str) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"cannot {action} vectors of sizes {len(self)} and {len(other)}"
            )

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "add")
        return Vector(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other, "subtract")
        return Vector(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, scalar: object) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(value * scalar for value in self._data)

    def __rmul__(self, scalar: object) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(scalar * value for value in self._data)

    def __neg__(self) -> "Vector":
        return Vector(-value for value in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return ", ".join(f"{value:g}" for value in self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def copy(self) -> "Vector":
        """Return an independent copy."""
        return Vector(self._data)