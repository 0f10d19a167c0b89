import copy

import pytest

from adamant.errors import OperationError
from adamant.storage import TensorStorage


def test_owned_storage_round_trip():
    storage = TensorStorage.owned([1.0, 2.0, 3.0])
    assert list(storage.data) == [1.0, 2.0, 3.0]
    assert not storage.is_shared
    assert len(storage) == 3


def test_owned_storage_copies_input():
    source = [1, 2, 3]
    storage = TensorStorage.owned(source)
    source[0] = 99
    assert list(storage.data) == [1, 2, 3]


def test_mutable_data_modifies_owned_storage():
    storage = TensorStorage.owned([1, 2, 3])
    storage.mutable_data()[1] = 7
    assert list(storage.data) == [1, 7, 3]


def test_shared_storage_is_read_only():
    storage = TensorStorage.shared_from([1, 2, 3])
    assert storage.is_shared
    with pytest.raises(OperationError):
        storage.mutable_data()


def test_empty_storage_is_falsy():
    storage = TensorStorage.owned([])
    assert len(storage) == 0
    assert not storage


def test_into_owned_from_owned_returns_same_object():
    storage = TensorStorage.owned([1, 2])
    assert storage.into_owned() is storage


def test_into_owned_from_shared_is_mutable_copy():
    shared = TensorStorage.shared_from([1, 2, 3])
    owned = shared.into_owned()
    assert not owned.is_shared
    owned.mutable_data()[0] = 10
    assert list(owned.data) == [10, 2, 3]
    assert list(shared.data) == [1, 2, 3]


def test_copy_of_shared_shares_data():
    shared = TensorStorage.shared_from([4, 5])
    clone = copy.copy(shared)
    assert clone.is_shared
    assert clone.data is shared.data


def test_copy_of_owned_is_independent():
    owned = TensorStorage.owned([4, 5])
    clone = copy.copy(owned)
    clone.mutable_data()[0] = 0
    assert list(owned.data) == [4, 5]
    assert list(clone.data) == [0, 5]


def test_constructor_flag_selects_kind():
    assert TensorStorage([1], shared=True).is_shared
    assert not TensorStorage([1]).is_shared