"""Tensor dimensions, strides and memory layouts."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Sequence

from adamant.errors import ShapeError, TensorIndexError


class MemoryLayout(Enum):
    """How multi-dimensional data is laid out in flat memory."""

    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"


def _row_major_strides(dims: Sequence[int]) -> tuple[int, ...]:
    strides = []
    step = 1
    for dim in reversed(dims):
        strides.append(step)
        step *= dim
    return tuple(reversed(strides))


def _column_major_strides(dims: Sequence[int]) -> tuple[int, ...]:
    strides = []
    step = 1
    for dim in dims:
        strides.append(step)
        step *= dim
    return tuple(strides)


class TensorShape:
    """Dimensions of a tensor together with the strides of its layout."""

    __slots__ = ("_dims", "_strides", "_layout")

    def __init__(
        self,
        dims: Iterable[int],
        layout: MemoryLayout = MemoryLayout.ROW_MAJOR,
    ) -> None:
        dims = tuple(dims)
        for dim in dims:
            if not isinstance(dim, int) or dim < 0:
                raise ShapeError(f"Invalid dimension size {dim!r} in shape {list(dims)}")
        self._dims = dims
        self._layout = MemoryLayout(layout)
        if self._layout is MemoryLayout.ROW_MAJOR:
            self._strides = _row_major_strides(dims)
        else:
            self._strides = _column_major_strides(dims)

    @property
    def dims(self) -> tuple[int, ...]:
        """The size of each dimension."""
        return self._dims

    @property
    def strides(self) -> tuple[int, ...]:
        """The flat-memory step for each dimension."""
        return self._strides

    @property
    def layout(self) -> MemoryLayout:
        """The memory layout the strides were computed for."""
        return self._layout

    @property
    def size(self) -> int:
        """Total number of elements (product of the dimensions)."""
        return math.prod(self._dims)

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._dims)

    def get_flat_index(self, indices: Sequence[int]) -> int:
        """Return the flat position of the element at ``indices``."""
        indices = tuple(indices)
        if len(indices) != self.rank:
            raise TensorIndexError(
                f"Expected {self.rank} indices, got {len(indices)}"
            )
        for axis, (idx, dim) in enumerate(zip(indices, self._dims)):
            if idx < 0 or idx >= dim:
                raise TensorIndexError(
                    f"Index {idx} is out of bounds for dimension {axis} with size {dim}"
                )
        flat = sum(idx * stride for idx, stride in zip(indices, self._strides))
        if flat >= self.size:
            raise TensorIndexError(
                f"Computed flat index {flat} is out of bounds for tensor with size {self.size}"
            )
        return flat

    def is_broadcast_compatible_with(self, other: TensorShape) -> bool:
        """Whether the two shapes can be broadcast against each other."""
        longest = max(self.rank, other.rank)
        mine = (1,) * (longest - self.rank) + self._dims
        theirs = (1,) * (longest - other.rank) + other.dims
        return all(a == b or a == 1 or b == 1 for a, b in zip(mine, theirs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TensorShape):
            return NotImplemented
        return (
            self._dims == other._dims
            and self._strides == other._strides
            and self._layout is other._layout
        )

    def __hash__(self) -> int:
        return hash((self._dims, self._strides, self._layout))

    def __repr__(self) -> str:
        return f"TensorShape(dims={list(self._dims)}, layout={self._layout.name})"