"""The n-dimensional tensor type and its operations."""

from __future__ import annotations

import copy
import itertools
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence

from adamant.errors import OperationError, ShapeError, TensorIndexError
from adamant.shape import MemoryLayout, TensorShape
from adamant.storage import TensorStorage
from adamant.view import TensorView

_MAX_DISPLAY = 10

_LAYOUT_NAMES = {
    MemoryLayout.ROW_MAJOR: "RowMajor",
    MemoryLayout.COLUMN_MAJOR: "ColumnMajor",
}


def _indices_in_order(dims: Sequence[int], layout: MemoryLayout) -> Iterator[tuple[int, ...]]:
    """Yield every logical index of ``dims`` in the memory order of ``layout``."""
    if layout is MemoryLayout.ROW_MAJOR:
        yield from itertools.product(*(range(dim) for dim in dims))
    else:
        for reversed_index in itertools.product(*(range(dim) for dim in reversed(dims))):
            yield tuple(reversed(reversed_index))


class Tensor:
    """An n-dimensional array of elements stored in a flat, strided buffer."""

    __slots__ = ("_shape", "_storage")

    def __init__(
        self,
        dims: Iterable[int],
        layout: MemoryLayout = MemoryLayout.ROW_MAJOR,
        fill: Any = 0.0,
    ) -> None:
        self._shape = TensorShape(dims, layout)
        self._storage = TensorStorage.owned([fill] * self._shape.size)

    @classmethod
    def _from_parts(cls, shape: TensorShape, storage: TensorStorage) -> Tensor:
        tensor = cls.__new__(cls)
        tensor._shape = shape
        tensor._storage = storage
        return tensor

    @classmethod
    def filled_with(
        cls,
        dims: Iterable[int],
        value: Any,
        layout: MemoryLayout = MemoryLayout.ROW_MAJOR,
    ) -> Tensor:
        """Create a tensor with every element set to ``value``."""
        return cls(dims, layout, fill=value)

    @classmethod
    def from_list(
        cls,
        data: Iterable[Any],
        dims: Iterable[int],
        layout: MemoryLayout = MemoryLayout.ROW_MAJOR,
    ) -> Tensor:
        """Create a tensor from elements already laid out in ``layout`` order."""
        dims = tuple(dims)
        shape = TensorShape(dims, layout)
        storage = TensorStorage.owned(data)
        if len(storage) != shape.size:
            raise ShapeError(
                f"Data length {len(storage)} does not match expected size "
                f"{shape.size} for shape {list(dims)}"
            )
        return cls._from_parts(shape, storage)

    @property
    def shape(self) -> TensorShape:
        """The shape of the tensor."""
        return self._shape

    @property
    def dims(self) -> tuple[int, ...]:
        """The size of each dimension."""
        return self._shape.dims

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._shape.size

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return self._shape.rank

    @property
    def layout(self) -> MemoryLayout:
        """The memory layout of the underlying data."""
        return self._shape.layout

    @property
    def data(self) -> Sequence[Any]:
        """The raw elements in memory order."""
        return self._storage.data

    @property
    def is_shared(self) -> bool:
        """Whether the tensor's storage is shared and read-only."""
        return self._storage.is_shared

    def to_layout(self, layout: MemoryLayout) -> Tensor:
        """Return a tensor with the same logical contents stored in ``layout``."""
        layout = MemoryLayout(layout)
        if layout is self.layout:
            return copy.copy(self)
        if self.rank <= 1:
            return Tensor.from_list(self.data, self.dims, layout)
        old_data = self.data
        strides = self._shape.strides
        new_data = [
            old_data[sum(i * s for i, s in zip(indices, strides))]
            for indices in _indices_in_order(self.dims, layout)
        ]
        return Tensor.from_list(new_data, self.dims, layout)

    def reshape(self, new_dims: Iterable[int]) -> Tensor:
        """Return a tensor with the same data viewed with different dimensions."""
        new_shape = TensorShape(new_dims, self.layout)
        if new_shape.size != self.size:
            raise ShapeError(
                f"Cannot reshape tensor of size {self.size} "
                f"to new shape with size {new_shape.size}"
            )
        return Tensor._from_parts(new_shape, copy.copy(self._storage))

    def view(self) -> TensorView:
        """Return a view over the whole tensor."""
        return TensorView(self.data, self._shape, 0)

    def slice(self, start_indices: Sequence[int], sizes: Sequence[int] = ()) -> TensorView:
        """Return a view of a sub-region of the tensor.

        When fewer start indices than dimensions are given and no more sizes
        than start indices, the selected leading dimensions of size one are dropped.
        """
        starts = tuple(start_indices)
        sizes = tuple(sizes)
        rank = self.rank
        dims = self.dims
        if len(starts) > rank:
            raise TensorIndexError(
                f"Too many start indices: got {len(starts)}, but tensor rank is {rank}"
            )
        if len(sizes) > rank:
            raise TensorIndexError(
                f"Too many size values: got {len(sizes)}, but tensor rank is {rank}"
            )

        full_starts = starts + (0,) * (rank - len(starts))
        if len(starts) < rank and len(sizes) <= len(starts):
            full_sizes = sizes + dims[len(sizes):]
            result_dims = tuple(size for size in sizes if size > 1) + dims[len(starts):]
        else:
            full_sizes = sizes + tuple(
                dim - start
                for dim, start in zip(dims[len(sizes):], full_starts[len(sizes):])
            )
            result_dims = full_sizes

        for axis, (start, size, dim) in enumerate(zip(full_starts, full_sizes, dims)):
            if start < 0 or start >= dim:
                raise TensorIndexError(
                    f"Start index {start} is out of bounds for dimension {axis} with size {dim}"
                )
            if start + size > dim:
                raise TensorIndexError(
                    f"Slice exceeds bounds: start={start} + size={size} > "
                    f"dimension_size={dim} for dimension {axis}"
                )

        offset = sum(start * stride for start, stride in zip(full_starts, self._shape.strides))
        return TensorView(self.data, TensorShape(result_dims, self.layout), offset)

    def get(self, indices: Sequence[int]) -> Any:
        """Return the element at the logical ``indices``."""
        return self.data[self._shape.get_flat_index(indices)]

    def set(self, indices: Sequence[int], value: Any) -> None:
        """Store ``value`` at the logical ``indices``.

        Raises OperationError if the storage is shared.
        """
        flat = self._shape.get_flat_index(indices)
        if self._storage.is_shared:
            raise OperationError("Cannot modify tensor with shared storage")
        self._storage.mutable_data()[flat] = value

    def to_owned(self) -> Tensor:
        """Return a copy of this tensor with private, mutable storage."""
        return Tensor._from_parts(self._shape, copy.copy(self._storage).into_owned())

    def to_shared(self) -> Tensor:
        """Return a copy of this tensor with shared, read-only storage."""
        if self._storage.is_shared:
            return copy.copy(self)
        return Tensor._from_parts(self._shape, TensorStorage.shared_from(self.data))

    def _element_wise(self, other: Tensor, op: Callable[[Any, Any], Any]) -> Tensor:
        if not self._shape.is_broadcast_compatible_with(other.shape):
            raise ShapeError(
                "Cannot perform element-wise operation with incompatible shapes "
                f"{list(self.dims)} and {list(other.dims)}"
            )
        if self.dims != other.dims:
            raise OperationError("Broadcasting not yet implemented")
        return Tensor.from_list(map(op, self.data, other.data), self.dims)

    def add(self, other: Tensor) -> Tensor:
        """Element-wise sum."""
        return self._element_wise(other, operator.add)

    def sub(self, other: Tensor) -> Tensor:
        """Element-wise difference."""
        return self._element_wise(other, operator.sub)

    def mul(self, other: Tensor) -> Tensor:
        """Element-wise product."""
        return self._element_wise(other, operator.mul)

    def div(self, other: Tensor) -> Tensor:
        """Element-wise quotient."""
        return self._element_wise(other, operator.truediv)

    def map(self, func: Callable[[Any], Any]) -> Tensor:
        """Return a tensor of the same shape with ``func`` applied to each element."""
        return Tensor.from_list(map(func, self.data), self.dims, self.layout)

    def clone_deep(self) -> Tensor:
        """Return a copy with its own owned storage."""
        return Tensor._from_parts(self._shape, TensorStorage.owned(self.data))

    def matmul(self, other: Tensor) -> Tensor:
        """Matrix product of two rank-2 tensors."""
        if self.rank != 2 or other.rank != 2:
            raise ShapeError(
                "Matrix multiplication requires both tensors to be matrices, "
                f"got ranks {self.rank} and {other.rank}"
            )
        rows, inner = self.dims
        other_rows, cols = other.dims
        if inner != other_rows:
            raise ShapeError(
                "Inner dimensions for matrix multiplication must match, "
                f"got {rows}×{inner} and {other_rows}×{cols}"
            )
        result = Tensor((rows, cols))
        for i, j in itertools.product(range(rows), range(cols)):
            total = 0
            for k in range(inner):
                total = total + self.get((i, k)) * other.get((k, j))
            result.set((i, j), total)
        return result

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __matmul__ = matmul

    def __copy__(self) -> Tensor:
        return Tensor._from_parts(self._shape, copy.copy(self._storage))

    def __repr__(self) -> str:
        data = self.data
        body = ", ".join(repr(value) for value in data[:_MAX_DISPLAY])
        if len(data) > _MAX_DISPLAY:
            body += f", ... ({len(data) - _MAX_DISPLAY} more elements)"
        return f"Tensor {list(self.dims)} ({_LAYOUT_NAMES[self.layout]}) [{body}]"