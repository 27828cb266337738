"""Suffix arrays, LCP arrays and the Z-algorithm."""

from __future__ import annotations

from collections.abc import Sequence

_THRESHOLD_NAIVE = 10
_THRESHOLD_DOUBLING = 40


def sa_naive(s: Sequence) -> list[int]:
    """Suffix array by sorting the suffixes directly."""
    seq = list(s)
    return sorted(range(len(seq)), key=lambda i: seq[i:])


def sa_doubling(s: Sequence[int]) -> list[int]:
    """Suffix array by prefix doubling."""
    n = len(s)
    sa = list(range(n))
    rnk = list(s)
    k = 1
    while k < n:
        keys = [(rnk[x], rnk[x + k] if x + k < n else -1) for x in range(n)]
        sa.sort(key=keys.__getitem__)
        tmp = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            tmp[cur] = tmp[prev] + (1 if keys[prev] < keys[cur] else 0)
        rnk = tmp
        k *= 2
    return sa


def sa_is(s: Sequence[int], upper: int) -> list[int]:
    """Suffix array by SA-IS; every element of ``s`` must lie in ``[0, upper]``."""
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1] if s[0] < s[1] else [1, 0]
    if n < _THRESHOLD_NAIVE:
        return sa_naive(s)
    if n < _THRESHOLD_DOUBLING:
        return sa_doubling(s)

    sa = [0] * n
    ls = [False] * n
    for i in range(n - 2, -1, -1):
        ls[i] = ls[i + 1] if s[i] == s[i + 1] else s[i] < s[i + 1]
    sum_l = [0] * (upper + 1)
    sum_s = [0] * (upper + 1)
    for c, is_s in zip(s, ls):
        if not is_s:
            sum_s[c] += 1
        else:
            sum_l[c + 1] += 1
    for i in range(upper + 1):
        sum_s[i] += sum_l[i]
        if i < upper:
            sum_l[i + 1] += sum_s[i]

    def induce(lms: list[int]) -> None:
        sa[:] = [-1] * n
        buf = sum_s[:]
        for d in lms:
            if d == n:
                continue
            sa[buf[s[d]]] = d
            buf[s[d]] += 1
        buf = sum_l[:]
        sa[buf[s[n - 1]]] = n - 1
        buf[s[n - 1]] += 1
        for i in range(n):
            v = sa[i]
            if v >= 1 and not ls[v - 1]:
                sa[buf[s[v - 1]]] = v - 1
                buf[s[v - 1]] += 1
        buf = sum_l[:]
        for i in range(n - 1, -1, -1):
            v = sa[i]
            if v >= 1 and ls[v - 1]:
                buf[s[v - 1] + 1] -= 1
                sa[buf[s[v - 1] + 1]] = v - 1

    lms_map = [-1] * (n + 1)
    lms: list[int] = []
    for i in range(1, n):
        if not ls[i - 1] and ls[i]:
            lms_map[i] = len(lms)
            lms.append(i)
    m = len(lms)

    induce(lms)

    if m:
        sorted_lms = [v for v in sa if lms_map[v] != -1]
        rec_s = [0] * m
        rec_upper = 0
        rec_s[lms_map[sorted_lms[0]]] = 0
        for prev, cur in zip(sorted_lms, sorted_lms[1:]):
            l, r = prev, cur
            end_l = lms[lms_map[l] + 1] if lms_map[l] + 1 < m else n
            end_r = lms[lms_map[r] + 1] if lms_map[r] + 1 < m else n
            same = True
            if end_l - l != end_r - r:
                same = False
            else:
                while l < end_l and s[l] == s[r]:
                    l += 1
                    r += 1
                if l == n or r == n or s[l] != s[r]:
                    same = False
            if not same:
                rec_upper += 1
            rec_s[lms_map[cur]] = rec_upper

        rec_sa = sa_is(rec_s, rec_upper)
        induce([lms[x] for x in rec_sa])
    return sa


def suffix_array(s: Sequence | str | bytes, upper: int | None = None) -> list[int]:
    """Return the suffix array of ``s``.

    Strings use their code points, bytes their values. Integer sequences with
    ``upper`` given must hold values in ``[0, upper]``; any other sequence of
    comparable items is compressed to ranks first.
    """
    if isinstance(s, str):
        values = [ord(c) for c in s]
        return sa_is(values, max(255, max(values, default=0)))
    if isinstance(s, (bytes, bytearray)):
        return sa_is(list(s), 255)
    if upper is not None:
        if upper < 0:
            raise ValueError("upper must be non-negative")
        values = list(s)
        for d in values:
            if not 0 <= d <= upper:
                raise ValueError(f"element {d} outside [0, {upper}]")
        return sa_is(values, upper)
    n = len(s)
    idx = sorted(range(n), key=s.__getitem__)
    ranks = [0] * n
    now = 0
    for pos, i in enumerate(idx):
        if pos and s[idx[pos - 1]] != s[i]:
            now += 1
        ranks[i] = now
    return sa_is(ranks, now)


def lcp_array(s: Sequence, sa: Sequence[int]) -> list[int]:
    """Return the longest common prefix of each pair of adjacent suffixes in ``sa``."""
    n = len(s)
    if n < 1:
        raise ValueError("sequence must not be empty")
    if len(sa) != n:
        raise ValueError("suffix array length does not match the sequence")
    rnk = [0] * n
    for i, p in enumerate(sa):
        rnk[p] = i
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rnk[i] == 0:
            continue
        j = sa[rnk[i] - 1]
        while j + h < n and i + h < n and s[j + h] == s[i + h]:
            h += 1
        lcp[rnk[i] - 1] = h
    return lcp


def z_algorithm(s: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    j = 0
    for i in range(1, n):
        k = 0 if j + z[j] <= i else min(j + z[j] - i, z[i - j])
        while i + k < n and s[k] == s[i + k]:
            k += 1
        z[i] = k
        if j + z[j] < i + z[i]:
            j = i
    z[0] = n
    return z