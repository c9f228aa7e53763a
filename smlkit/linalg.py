"""Single-precision vectors and matrices."""

from __future__ import annotations

import itertools
from array import array
from collections.abc import Iterator
from dataclasses import dataclass

from smlkit.allocators import alloc, calloc

__all__ = ["Vector", "Matrix", "new_vec", "new_vec_zeroes", "new_mat"]

_FLOAT_SIZE = array("f").itemsize


def _floats(buffer: bytearray) -> array:
    data = array("f")
    data.frombytes(buffer)
    return data


@dataclass
class Vector:
    """A vector of 32-bit floats; an empty vector has no data."""

    size: int
    data: array | None = None

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.data if self.data is not None else ())

    def __str__(self) -> str:
        if self.size == 0 or self.data is None:
            return "[]"
        return "[" + ", ".join(f"{value:.2f}" for value in self.data) + "]"


@dataclass
class Matrix:
    """A row-major matrix of 32-bit floats."""

    width: int
    height: int
    data: array | None = None


def new_vec(size: int, *args: float) -> Vector:
    """Create a vector of *size* elements starting with the given values.

    Values beyond *size* are ignored; unfilled elements are zero.
    Raises ``MemoryError`` if the storage cannot be allocated.
    """
    if size == 0:
        return Vector(0)
    buffer = alloc(size, _FLOAT_SIZE)
    assert buffer is not None
    data = _floats(buffer)
    given = args[:size]
    data[: len(given)] = array("f", given)
    return Vector(size, data)


def new_vec_zeroes(size: int) -> Vector:
    """Create a vector of *size* zeroes.

    Raises ``MemoryError`` if the storage cannot be allocated.
    """
    if size == 0:
        return Vector(0)
    buffer = calloc(size, _FLOAT_SIZE)
    assert buffer is not None
    return Vector(size, _floats(buffer))


def new_mat(
    width: int,
    height: int,
    initial_rows: int,
    initial_cols: int,
    default: float,
    *args: float,
) -> Matrix:
    """Create a *width* by *height* matrix.

    The top-left *initial_rows* by *initial_cols* block is filled row by row
    from *args*; every other cell holds *default*. Raises ``ValueError`` when
    too few values are given and ``MemoryError`` if allocation fails.
    """
    needed = min(initial_rows, height) * min(initial_cols, width)
    if len(args) < needed:
        raise ValueError(
            f"{needed} initial values are needed for the "
            f"{initial_rows}x{initial_cols} block, got {len(args)}"
        )
    buffer = alloc(width * height, _FLOAT_SIZE)
    if buffer is None:
        return Matrix(width, height)
    data = _floats(buffer)
    values = iter(args)
    cells = itertools.product(range(height), range(width))
    for index, (row, col) in enumerate(cells):
        if row < initial_rows and col < initial_cols:
            data[index] = next(values)
        else:
            data[index] = default
    return Matrix(width, height, data)