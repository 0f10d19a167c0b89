# adamant

A small n-dimensional tensor library written in plain Python, with no
third-party dependencies.

## Features

- Tensors of any rank (`adamant.tensor.Tensor`), stored in row-major
  (C-style) or column-major (Fortran-style) order
  (`adamant.shape.MemoryLayout.ROW_MAJOR` / `COLUMN_MAJOR`).
- Logical indexing with `get` and `set` that is the same whatever the layout.
- Layout conversion (`to_layout`), `reshape`, views (`view`) and
  sub-region views (`slice`), both returning a read-only
  `adamant.view.TensorView`.
- Owned storage and shared, read-only storage (`to_shared`, `to_owned`,
  `clone_deep`), backed by `adamant.storage.TensorStorage`.
- Element-wise `add`, `sub`, `mul`, `div` (also available as `+`, `-`,
  `*`, `/`), `map`, and matrix multiplication with `matmul` or `a @ b`.
- Shapes (`adamant.shape.TensorShape`) expose `dims`, `strides`, `layout`,
  `size`, `rank`, `get_flat_index` and `is_broadcast_compatible_with`.
- Errors raised as subclasses of `adamant.errors.TensorError`.

## Installation

```
pip install .
```

## Usage

```python
from adamant.tensor import Tensor
from adamant.shape import MemoryLayout

t = Tensor.from_list([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], [2, 3])
t.get([1, 2])            # 6.0
t.set([0, 0], 10.0)

col = t.to_layout(MemoryLayout.COLUMN_MAJOR)
col.data                 # [10.0, 4.0, 2.0, 5.0, 3.0, 6.0]
r = t.reshape([3, 2])

a = Tensor.from_list([1.0, 2.0, 3.0, 4.0], [2, 2])
b = Tensor.from_list([5.0, 6.0, 7.0, 8.0], [2, 2])
(a @ b).get([0, 0])      # 19.0
a.add(b).get([1, 1])     # 12.0

first_row = t.slice([0, 0], [1, 3])
first_row.get([0, 2])    # 3.0
```

`Tensor(dims)` creates a tensor filled with `0.0` (pass `fill=` to change
that); `Tensor.filled_with(dims, value)` does the same with a given value.
`Tensor.from_list(data, dims, layout)` expects the data already in the
memory order of `layout`.

Shared tensors made with `to_shared()` cannot be changed; calling `set` on
one raises `OperationError`. Use `to_owned()` to get a copy you can change.

Indexing outside the tensor raises `TensorIndexError` (also an
`IndexError`), and shape mismatches raise `ShapeError` (also a
`ValueError`). These classes are found in `adamant.errors`.

## Limitations

- Broadcasting is not implemented: element-wise operations on tensors of
  different but broadcast-compatible shapes raise `OperationError`, and
  incompatible shapes raise `ShapeError`.
- Element-wise operations pair elements in storage order and return a
  row-major tensor, so both operands should use the row-major layout.
- `matmul` works on rank-2 tensors only.
- Views and slices are read-only.

## Demo

To build a small tensor, fill it and reshape it, printing each step, run:

```
adamant-demo
```

## Tests

```
pip install .[test]
pytest
```