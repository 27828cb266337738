"""Maximum flow by Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class FlowEdge:
    """An edge of a flow network with its capacity and current flow."""

    from_: int
    to: int
    cap: int
    flow: int


class _Edge:
    __slots__ = ("to", "rev", "cap")

    def __init__(self, to: int, rev: int, cap) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap


class MFGraph:
    """A directed flow network on ``n`` vertices."""

    __slots__ = ("_n", "_pos", "_g")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._pos: list[tuple[int, int]] = []
        self._g: list[list[_Edge]] = [[] for _ in range(n)]

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def _check_edge(self, i: int) -> None:
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range")

    def add_edge(self, from_: int, to: int, cap) -> int:
        """Add an edge ``from_ -> to`` with capacity ``cap``; return its index."""
        self._check_vertex(from_)
        self._check_vertex(to)
        if cap < 0:
            raise ValueError("capacity must be non-negative")
        g = self._g
        m = len(self._pos)
        from_id = len(g[from_])
        to_id = len(g[to])
        if from_ == to:
            to_id += 1
        self._pos.append((from_, from_id))
        g[from_].append(_Edge(to, to_id, cap))
        g[to].append(_Edge(from_, from_id, 0))
        return m

    def get_edge(self, i: int) -> FlowEdge:
        self._check_edge(i)
        f, k = self._pos[i]
        e = self._g[f][k]
        re = self._g[e.to][e.rev]
        return FlowEdge(f, e.to, e.cap + re.cap, re.cap)

    def edges(self) -> list[FlowEdge]:
        return [self.get_edge(i) for i in range(len(self._pos))]

    def change_edge(self, i: int, new_cap, new_flow) -> None:
        """Reset edge ``i`` to capacity ``new_cap`` carrying ``new_flow``."""
        self._check_edge(i)
        if not 0 <= new_flow <= new_cap:
            raise ValueError("need 0 <= new_flow <= new_cap")
        f, k = self._pos[i]
        e = self._g[f][k]
        re = self._g[e.to][e.rev]
        e.cap = new_cap - new_flow
        re.cap = new_flow

    def flow(self, s: int, t: int, flow_limit=None):
        """Push as much flow from ``s`` to ``t`` as possible, up to ``flow_limit``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        limit = math.inf if flow_limit is None else flow_limit
        level = [-1] * self._n
        total = 0
        while total < limit:
            self._bfs(s, t, level)
            if level[t] == -1:
                break
            it = [0] * self._n
            while total < limit:
                d = self._augment(s, t, level, it, limit - total)
                if not d:
                    break
                total += d
        return total

    def _bfs(self, s: int, t: int, level: list[int]) -> None:
        for i in range(self._n):
            level[i] = -1
        level[s] = 0
        que = deque([s])
        while que:
            v = que.popleft()
            for e in self._g[v]:
                if e.cap == 0 or level[e.to] >= 0:
                    continue
                level[e.to] = level[v] + 1
                if e.to == t:
                    return
                que.append(e.to)

    def _augment(self, s: int, t: int, level: list[int], it: list[int], up):
        """Find one path from ``t`` back to ``s`` in the level graph and push along it."""
        g = self._g
        stack = [t]
        while stack:
            v = stack[-1]
            if v == s:
                path = [g[u][it[u]] for u in stack[:-1]]
                d = up
                for e in path:
                    d = min(d, g[e.to][e.rev].cap)
                for e in path:
                    e.cap += d
                    g[e.to][e.rev].cap -= d
                return d
            adj = g[v]
            lv = level[v]
            while it[v] < len(adj):
                e = adj[it[v]]
                if lv > level[e.to] and g[e.to][e.rev].cap > 0:
                    break
                it[v] += 1
            if it[v] < len(adj):
                stack.append(adj[it[v]].to)
            else:
                stack.pop()
                if stack:
                    it[stack[-1]] += 1
        return 0

    def min_cut(self, s: int) -> list[bool]:
        """Return which vertices are reachable from ``s`` in the residual network."""
        self._check_vertex(s)
        visited = [False] * self._n
        visited[s] = True
        que = deque([s])
        while que:
            p = que.popleft()
            for e in self._g[p]:
                if e.cap and not visited[e.to]:
                    visited[e.to] = True
                    que.append(e.to)
        return visited