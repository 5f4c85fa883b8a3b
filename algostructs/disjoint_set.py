"""Union-find over the integers 0 .. n-1, with path compression."""

from __future__ import annotations


class DisjointSet:
    """Partition of ``range(n)`` into disjoint sets, each element starting alone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is not in the disjoint set")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already the same set.

        The root of ``a``'s set becomes the root of the merged set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True