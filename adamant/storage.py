"""Owned and shared backing storage for tensor elements."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from adamant.errors import OperationError


class TensorStorage:
    """A flat sequence of elements, either owned (mutable) or shared (read-only).

    Shared storage holds an immutable tuple that several storages may reference;
    owned storage holds a private list.
    """

    __slots__ = ("_data", "_shared")

    def __init__(self, data: Iterable[Any], shared: bool = False) -> None:
        self._shared = bool(shared)
        self._data: list | tuple = tuple(data) if self._shared else list(data)

    @classmethod
    def owned(cls, data: Iterable[Any]) -> TensorStorage:
        """Create owned storage holding a copy of ``data``."""
        return cls(data, shared=False)

    @classmethod
    def shared_from(cls, data: Iterable[Any]) -> TensorStorage:
        """Create shared, read-only storage holding ``data``."""
        return cls(data, shared=True)

    @property
    def data(self) -> Sequence[Any]:
        """The stored elements."""
        return self._data

    @property
    def is_shared(self) -> bool:
        """Whether the storage is shared and therefore read-only."""
        return self._shared

    def mutable_data(self) -> list:
        """Return the element list for in-place modification.

        Raises OperationError if the storage is shared.
        """
        if self._shared:
            raise OperationError("Cannot modify shared storage")
        return self._data  # type: ignore[return-value]

    def into_owned(self) -> TensorStorage:
        """Return owned storage: ``self`` if already owned, else a private copy."""
        if not self._shared:
            return self
        return TensorStorage.owned(self._data)

    def __copy__(self) -> TensorStorage:
        if self._shared:
            clone = TensorStorage.__new__(TensorStorage)
            clone._data = self._data
            clone._shared = True
            return clone
        return TensorStorage.owned(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        kind = "shared" if self._shared else "owned"
        return f"TensorStorage({list(self._data)!r}, {kind})"