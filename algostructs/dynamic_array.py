"""A growable array with an explicit capacity that doubles when full."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

_DEFAULT_CAPACITY = 5
_GROWTH_FACTOR = 2


class DynamicArray:
    """An ordered sequence whose storage grows by doubling.

    Indices must lie in ``0 <= index < len(array)``; negative indices are
    rejected rather than counted from the end.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None, capacity: Optional[int] = None) -> None:
        if items is not None:
            self._items = list(items)
            self._capacity = len(self._items) if capacity is None else capacity
            if self._capacity < len(self._items):
                raise ValueError("capacity is smaller than the number of items")
        else:
            self._items = []
            self._capacity = _DEFAULT_CAPACITY if capacity is None else capacity
        if self._capacity < 0:
            raise ValueError("capacity must be non-negative")

    @staticmethod
    def default_capacity() -> int:
        """Return the capacity an array starts with when none is given."""
        return _DEFAULT_CAPACITY

    @property
    def capacity(self) -> int:
        """The number of elements the array holds before it must grow."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = max(self._capacity * _GROWTH_FACTOR, 1)

    def _check_index(self, index: int, where: str) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Index out of bounds in DynamicArray.{where}")

    def append(self, item: Any) -> None:
        """Add ``item`` at the end, doubling the capacity if the array is full."""
        self._grow_if_full()
        self._items.append(item)

    def insert(self, item: Any, pos: int) -> int:
        """Insert ``item`` at ``pos``, shifting later elements right; return ``pos``.

        ``pos`` may equal the length, which appends.
        """
        if not 0 <= pos <= len(self._items):
            raise IndexError("Index out of bounds in DynamicArray.insert")
        self._grow_if_full()
        self._items.insert(pos, item)
        return pos

    def erase(self, pos: int) -> int:
        """Remove the element at ``pos``; return the index now holding its successor."""
        if not self._items:
            raise IndexError("The array is empty in DynamicArray.erase")
        self._check_index(pos, "erase")
        del self._items[pos]
        return pos

    def __getitem__(self, index: int) -> Any:
        self._check_index(index, "__getitem__")
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index, "__setitem__")
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"