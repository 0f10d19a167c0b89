import pytest

from adamant.errors import ShapeError, TensorIndexError
from adamant.shape import MemoryLayout, TensorShape


def test_default_layout_is_row_major():
    shape = TensorShape([2, 3])
    assert shape.dims == (2, 3)
    assert shape.strides == (3, 1)
    assert shape.layout is MemoryLayout.ROW_MAJOR


def test_row_major_strides():
    shape = TensorShape([2, 3], MemoryLayout.ROW_MAJOR)
    assert shape.strides == (3, 1)


def test_column_major_strides():
    shape = TensorShape([2, 3], MemoryLayout.COLUMN_MAJOR)
    assert shape.strides == (1, 2)


def test_size_and_rank():
    shape = TensorShape([2, 3])
    assert shape.size == 6
    assert shape.rank == 2


def test_empty_dims_is_scalar():
    shape = TensorShape([])
    assert shape.strides == ()
    assert shape.rank == 0
    assert shape.size == 1
    assert shape.get_flat_index([]) == 0


def test_flat_index_row_major():
    shape = TensorShape([2, 3])
    assert [shape.get_flat_index([i, j]) for i in range(2) for j in range(3)] == [
        0, 1, 2, 3, 4, 5,
    ]


def test_flat_index_column_major():
    shape = TensorShape([2, 3], MemoryLayout.COLUMN_MAJOR)
    assert [shape.get_flat_index([i, j]) for i in range(2) for j in range(3)] == [
        0, 2, 4, 1, 3, 5,
    ]


@pytest.mark.parametrize("indices", [[0, 0, 0], [0], [2, 0], [0, 3], [-1, 0]])
def test_index_errors(indices):
    shape = TensorShape([2, 3])
    with pytest.raises(TensorIndexError):
        shape.get_flat_index(indices)


def test_index_error_message():
    shape = TensorShape([2, 3])
    with pytest.raises(TensorIndexError, match="Expected 2 indices, got 3"):
        shape.get_flat_index([0, 0, 0])


def test_broadcast_compatibility():
    shape1 = TensorShape([2, 3])
    shape2 = TensorShape([3])
    shape3 = TensorShape([4, 3])
    assert shape1.is_broadcast_compatible_with(shape2)
    assert not shape1.is_broadcast_compatible_with(shape3)


def test_broadcast_with_ones_is_symmetric():
    a = TensorShape([4, 1, 3])
    b = TensorShape([5, 1])
    assert a.is_broadcast_compatible_with(b)
    assert b.is_broadcast_compatible_with(a)


def test_equality_depends_on_layout():
    assert TensorShape([2, 3]) == TensorShape([2, 3])
    assert TensorShape([2, 3]) != TensorShape([2, 3], MemoryLayout.COLUMN_MAJOR)
    assert hash(TensorShape([2, 3])) == hash(TensorShape((2, 3)))


def test_negative_dimension_rejected():
    with pytest.raises(ShapeError):
        TensorShape([2, -1])


def test_every_index_maps_to_distinct_flat_position():
    for layout in MemoryLayout:
        shape = TensorShape([2, 3, 4], layout)
        positions = {
            shape.get_flat_index([i, j, k])
            for i in range(2)
            for j in range(3)
            for k in range(4)
        }
        assert positions == set(range(shape.size))