"""Disjoint set union with union by size and path compression."""

from __future__ import annotations


class DSU:
    """Disjoint sets over the elements ``0 .. n-1``."""

    __slots__ = ("_n", "_parent_or_size")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        # root: -(component size); otherwise: parent
        self._parent_or_size = [-1] * n

    def __len__(self) -> int:
        return self._n

    def _check(self, a: int) -> None:
        if not 0 <= a < self._n:
            raise IndexError(f"element {a} out of range")

    def merge(self, a: int, b: int) -> int:
        """Join the sets of ``a`` and ``b``; return the new leader."""
        x, y = self.leader(a), self.leader(b)
        if x == y:
            return x
        ps = self._parent_or_size
        if -ps[x] < -ps[y]:
            x, y = y, x
        ps[x] += ps[y]
        ps[y] = x
        return x

    def same(self, a: int, b: int) -> bool:
        return self.leader(a) == self.leader(b)

    def leader(self, a: int) -> int:
        self._check(a)
        ps = self._parent_or_size
        root = a
        while ps[root] >= 0:
            root = ps[root]
        while ps[a] >= 0 and ps[a] != root:
            ps[a], a = root, ps[a]
        return root

    def size(self, a: int) -> int:
        return -self._parent_or_size[self.leader(a)]

    def groups(self) -> list[list[int]]:
        """Return the sets, ordered by leader, each in ascending order."""
        buckets: list[list[int]] = [[] for _ in range(self._n)]
        for i in range(self._n):
            buckets[self.leader(i)].append(i)
        return [group for group in buckets if group]