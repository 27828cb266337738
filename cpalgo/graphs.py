"""Classic graph algorithms: bridges, cut points, shortest paths and matchings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_INF = 1_000_000_000


def find_bridges(adj: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the bridges of an undirected graph as ``(v, to)`` pairs.

    Parallel edges are honoured: only one copy of the edge to the parent is
    skipped, so a doubled edge is never a bridge.
    """
    n = len(adj)
    tin = [-1] * n
    low = [-1] * n
    timer = 0
    bridges: list[tuple[int, int]] = []
    for start in range(n):
        if tin[start] != -1:
            continue
        tin[start] = low[start] = timer
        timer += 1
        stack = [[start, -1, iter(adj[start]), False]]
        while stack:
            frame = stack[-1]
            v, p, it = frame[0], frame[1], frame[2]
            for to in it:
                if to == p and not frame[3]:
                    frame[3] = True
                    continue
                if tin[to] != -1:
                    low[v] = min(low[v], tin[to])
                else:
                    tin[to] = low[to] = timer
                    timer += 1
                    stack.append([to, v, iter(adj[to]), False])
                    break
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[v])
                    if low[v] > tin[parent]:
                        bridges.append((parent, v))
    return bridges


def find_cutpoints(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the articulation points of an undirected graph, in order of discovery."""
    n = len(adj)
    tin = [-1] * n
    low = [-1] * n
    timer = 0
    found: dict[int, None] = {}
    for start in range(n):
        if tin[start] != -1:
            continue
        tin[start] = low[start] = timer
        timer += 1
        # frame: vertex, parent, neighbour iterator, number of DFS children
        stack = [[start, -1, iter(adj[start]), 0]]
        while stack:
            frame = stack[-1]
            v, p, it = frame[0], frame[1], frame[2]
            for to in it:
                if to == p:
                    continue
                if tin[to] != -1:
                    low[v] = min(low[v], tin[to])
                else:
                    tin[to] = low[to] = timer
                    timer += 1
                    stack.append([to, v, iter(adj[to]), 0])
                    break
            else:
                stack.pop()
                if p == -1 and frame[3] > 1:
                    found[v] = None
                if stack:
                    parent_frame = stack[-1]
                    parent = parent_frame[0]
                    low[parent] = min(low[parent], low[v])
                    if low[v] >= tin[parent] and parent_frame[1] != -1:
                        found[parent] = None
                    parent_frame[3] += 1
    return list(found)


def find_negative_cycle(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int] | None:
    """Find a negative cycle reachable from ``source`` by Bellman-Ford.

    Returns the cycle as a vertex list whose first and last entries coincide,
    or None when no negative cycle is reachable.
    """
    if not 0 <= source < n:
        raise IndexError(f"vertex {source} out of range")
    edge_list = [(a, b, cost) for a, b, cost in edges]
    for a, b, _ in edge_list:
        if not (0 <= a < n and 0 <= b < n):
            raise IndexError(f"edge ({a}, {b}) out of range")
    d = [_INF] * n
    d[source] = 0
    p = [-1] * n
    x = -1
    for _ in range(n):
        x = -1
        for a, b, cost in edge_list:
            if d[a] < _INF and d[b] > d[a] + cost:
                d[b] = max(-_INF, d[a] + cost)
                p[b] = a
                x = b
    if x == -1:
        return None
    y = x
    for _ in range(n):
        y = p[y]
    path = [y]
    cur = p[y]
    while True:
        path.append(cur)
        if cur == y:
            break
        cur = p[cur]
    path.reverse()
    return path


def floyd_warshall(d: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances; ``math.inf`` marks a missing edge."""
    dist = [list(row) for row in d]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for row_i in dist:
            dik = row_i[k]
            if dik == math.inf:
                continue
            for j, dkj in enumerate(row_k):
                if dkj < math.inf and dik + dkj < row_i[j]:
                    row_i[j] = dik + dkj
    return dist


def _try_kuhn(root: int, g: Sequence[Sequence[int]], mt: list[int], used: list[bool]) -> bool:
    if used[root]:
        return False
    used[root] = True
    stack = [[root, 0]]
    while stack:
        frame = stack[-1]
        v, i = frame
        if i == len(g[v]):
            stack.pop()
            if stack:
                stack[-1][1] += 1
            continue
        to = g[v][i]
        if mt[to] == -1:
            for fv, fi in stack:
                mt[g[fv][fi]] = fv
            return True
        u = mt[to]
        if used[u]:
            frame[1] += 1
            continue
        used[u] = True
        stack.append([u, 0])
    return False


def kuhn_matching(n: int, k: int, g: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Maximum bipartite matching by Kuhn's algorithm.

    ``g[v]`` lists the right vertices ``0..k-1`` adjacent to left vertex ``v``.
    Returns the matched ``(left, right)`` pairs ordered by right vertex.
    """
    if len(g) != n:
        raise ValueError("adjacency list must have n entries")
    for row in g:
        for to in row:
            if not 0 <= to < k:
                raise IndexError(f"right vertex {to} out of range")
    mt = [-1] * k
    greedy = [False] * n
    for v, row in enumerate(g):
        for to in row:
            if mt[to] == -1:
                mt[to] = v
                greedy[v] = True
                break
    for v in range(n):
        if greedy[v]:
            continue
        _try_kuhn(v, g, mt, [False] * n)
    return [(left, right) for right, left in enumerate(mt) if left != -1]


def hungarian(a: Sequence[Sequence[float]]) -> tuple[float, list[int]]:
    """Solve the assignment problem for an ``n x m`` cost matrix with ``n <= m``.

    Returns ``(cost, assignment)`` where ``assignment[i]`` is the column given to row ``i``.
    """
    n = len(a)
    if n == 0:
        return 0, []
    m = len(a[0])
    if any(len(row) != m for row in a):
        raise ValueError("cost matrix rows must have equal length")
    if n > m:
        raise ValueError("need at most as many rows as columns")
    inf = math.inf
    u = [0] * (n + 1)
    v = [0] * (m + 1)
    p = [0] * (m + 1)
    way = [0] * (m + 1)
    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = [inf] * (m + 1)
        used = [False] * (m + 1)
        while True:
            used[j0] = True
            i0 = p[j0]
            row = a[i0 - 1]
            delta = inf
            j1 = 0
            for j in range(1, m + 1):
                if not used[j]:
                    cur = row[j - 1] - u[i0] - v[j]
                    if cur < minv[j]:
                        minv[j] = cur
                        way[j] = j0
                    if minv[j] < delta:
                        delta = minv[j]
                        j1 = j
            for j in range(m + 1):
                if used[j]:
                    u[p[j]] += delta
                    v[j] -= delta
                else:
                    minv[j] -= delta
            j0 = j1
            if p[j0] == 0:
                break
        while j0:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1
    assignment = [0] * n
    for j in range(1, m + 1):
        if p[j]:
            assignment[p[j] - 1] = j - 1
    return -v[0], assignment