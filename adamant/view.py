"""Lightweight read-only views into tensor data."""

from __future__ import annotations

import itertools
from typing import Any, Iterator, Sequence

from adamant.errors import TensorError, TensorIndexError
from adamant.shape import TensorShape

_MAX_DISPLAY = 8


class TensorView:
    """A shaped window onto a flat sequence of elements, starting at ``offset``.

    The view references the data without copying it.
    """

    __slots__ = ("_data", "_shape", "_offset")

    def __init__(self, data: Sequence[Any], shape: TensorShape, offset: int = 0) -> None:
        required = offset + shape.size
        if offset < 0 or required > len(data):
            raise TensorIndexError(
                f"View would access {required} elements, "
                f"but tensor only has {len(data)} elements"
            )
        self._data = data
        self._shape = shape
        self._offset = offset

    @property
    def shape(self) -> TensorShape:
        """The shape of the view."""
        return self._shape

    @property
    def dims(self) -> tuple[int, ...]:
        """The size of each dimension of the view."""
        return self._shape.dims

    @property
    def size(self) -> int:
        """Total number of elements in the view."""
        return self._shape.size

    @property
    def rank(self) -> int:
        """Number of dimensions of the view."""
        return self._shape.rank

    @property
    def offset(self) -> int:
        """Starting position of the view in the underlying data."""
        return self._offset

    def get(self, indices: Sequence[int]) -> Any:
        """Return the element at the multi-dimensional ``indices``."""
        absolute = self._offset + self._shape.get_flat_index(indices)
        if absolute >= len(self._data):
            raise TensorIndexError(
                f"Computed absolute index {absolute} is out of bounds "
                f"for tensor data with length {len(self._data)}"
            )
        return self._data[absolute]

    def _logical_indices(self) -> Iterator[tuple[int, ...]]:
        return itertools.product(*(range(dim) for dim in self._shape.dims))

    def __repr__(self) -> str:
        shown = []
        for indices in itertools.islice(self._logical_indices(), _MAX_DISPLAY):
            try:
                shown.append(repr(self.get(indices)))
            except TensorError:
                shown.append("<?>")
        body = ", ".join(shown)
        if self.size > _MAX_DISPLAY:
            body += f", ... ({self.size - _MAX_DISPLAY} more elements)"
        return f"TensorView {list(self._shape.dims)} [{body}]"