"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any


class Queue:
    """Elements enter at the back and leave from the front."""

    def __init__(self) -> None:
        self._data: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._data.append(value)

    def pop(self) -> Any:
        """Remove and return the front element."""
        if not self._data:
            raise IndexError("Queue.pop() called on empty queue")
        return self._data.popleft()

    def front(self) -> Any:
        """Return the front element without removing it."""
        if not self._data:
            raise IndexError("Queue.front() Empty queue")
        return self._data[0]

    def back(self) -> Any:
        """Return the back element without removing it."""
        if not self._data:
            raise IndexError("Queue.back() Empty queue")
        return self._data[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Queue({list(self._data)!r})"