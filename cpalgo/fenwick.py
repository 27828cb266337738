"""Fenwick (binary indexed) tree for prefix sums."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point additions and half-open range sums over ``n`` slots."""

    __slots__ = ("_n", "_data")

    def __init__(self, n: int | Iterable = 0) -> None:
        if isinstance(n, int):
            if n < 0:
                raise ValueError("n must be non-negative")
            self._n = n
            self._data = [0] * n
        else:
            values = list(n)
            self._n = len(values)
            self._data = [0] * self._n
            for p, x in enumerate(values):
                self.add(p, x)

    def __len__(self) -> int:
        return self._n

    def add(self, p: int, x) -> None:
        """Add ``x`` to slot ``p``."""
        if not 0 <= p < self._n:
            raise IndexError(f"position {p} out of range")
        p += 1
        while p <= self._n:
            self._data[p - 1] += x
            p += p & -p

    def sum(self, l: int, r: int):
        """Return the sum of slots ``l .. r-1``."""
        if not 0 <= l <= r <= self._n:
            raise IndexError(f"range [{l}, {r}) out of bounds")
        return self._prefix(r) - self._prefix(l)

    def _prefix(self, r: int):
        s = 0
        while r > 0:
            s += self._data[r - 1]
            r -= r & -r
        return s