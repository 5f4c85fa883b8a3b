"""A hash map with byte keys and a fixed number of chained buckets."""

from __future__ import annotations

from typing import Any, Optional

_KEY_LIMIT = 256


class UnorderedMap:
    """Maps keys in ``range(256)`` to values, hashing by key modulo the bucket count."""

    def __init__(self, buckets: int = 16) -> None:
        if buckets <= 0:
            raise ValueError("the number of buckets must be positive")
        self._bucket_count = buckets
        self._buckets: list[list[list[Any]]] = [[] for _ in range(buckets)]
        self._size = 0

    def _bucket(self, key: int) -> list[list[Any]]:
        if not 0 <= key < _KEY_LIMIT:
            raise ValueError(f"key must be in range 0..{_KEY_LIMIT - 1}, got {key}")
        return self._buckets[key % self._bucket_count]

    def insert(self, key: int, value: Any) -> None:
        """Set the value for ``key``, replacing any value it already has."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def erase(self, key: int) -> None:
        """Remove ``key`` if present; do nothing otherwise."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._size -= 1
                return

    def find(self, key: int) -> Optional[Any]:
        """Return the value for ``key``, or None if it is absent."""
        return next((value for k, value in self._bucket(key) if k == key), None)

    def load_factor(self) -> float:
        """Return the number of entries divided by the number of buckets."""
        return self._size / self._bucket_count

    def __len__(self) -> int:
        return self._size