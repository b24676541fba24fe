"""Dense row-major matrices of floats and a monotonic stopwatch."""

from __future__ import annotations

import time
from collections.abc import Iterator


class MatrixError(ValueError):
    """Raised when a matrix is created or combined with invalid sizes."""


class Matrix:
    """An ``m`` x ``n`` matrix of floats, initialised to zero."""

    __slots__ = ("_m", "_n", "_data")

    def __init__(self, m: int, n: int) -> None:
        if m <= 0 or n <= 0:
            raise MatrixError("Matrix size invalid.")
        self._m = m
        self._n = n
        self._data = [0.0] * (m * n)

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._m

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._n

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        if not (0 <= i < self._m and 0 <= j < self._n):
            raise IndexError(f"index {index!r} out of range for {self._m}x{self._n} matrix")
        return i * self._n + j

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._data[self._offset(index)] = float(value)

    def fill(self) -> None:
        """Fill the matrix with consecutive values in row-major order."""
        self._data = [float(i) for i in range(self._m * self._n)]

    def set_diagonal(self, value: float) -> None:
        """Write ``value`` on every (n + 1)-th element starting at the first."""
        for offset in range(0, self._m * self._n, self._n + 1):
            self._data[offset] = float(value)

    def copy_from(self, other: Matrix) -> None:
        """Copy every element of ``other``, which must have the same size."""
        if other.m != self._m or other.n != self._n:
            raise MatrixError("matrices size does not match.")
        self._data = [value for row in other.rows() for value in row]

    def rows(self) -> Iterator[list[float]]:
        """Yield a copy of each row in turn."""
        for start in range(0, self._m * self._n, self._n):
            yield self._data[start:start + self._n]

    def format(self) -> str:
        """Render the matrix as text, one line per row."""
        return "".join(
            "".join(f"  {value:5.1f}" for value in row) + "\n" for row in self.rows()
        )


def stopwatch() -> float:
    """Return the current monotonic time in seconds."""
    return time.monotonic()