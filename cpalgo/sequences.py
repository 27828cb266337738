"""Longest increasing subsequence and Gray-code ordered combinations."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


def lis(a: Iterable) -> int:
    """Return the length of the longest strictly increasing subsequence of ``a``."""
    tails: list = []
    for x in a:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
    return len(tails)


def gray_combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every ``k``-subset of ``1..n`` so that neighbours differ by one swap."""
    if n < 0:
        raise ValueError("n must be non-negative")
    chosen = [False] * n

    def gen(rest: int, k: int, idx: int, rev: bool) -> Iterator[tuple[int, ...]]:
        if k > rest or k < 0:
            return
        if rest == 0:
            yield tuple(i + 1 for i in range(idx) if chosen[i])
            return
        chosen[idx] = rev
        yield from gen(rest - 1, k - int(rev), idx + 1, False)
        chosen[idx] = not rev
        yield from gen(rest - 1, k - int(not rev), idx + 1, True)

    yield from gen(n, k, 0, False)