"""Minimum-cost flow by successive shortest paths with potentials."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CostFlowEdge:
    """An edge of a cost flow network with its capacity, flow and unit cost."""

    from_: int
    to: int
    cap: int
    flow: int
    cost: int


class _Edge:
    __slots__ = ("to", "rev", "cap", "cost")

    def __init__(self, to: int, rev: int, cap, cost) -> None:
        self.to = to
        self.rev = rev
        self.cap = cap
        self.cost = cost


class MCFGraph:
    """A directed network on ``n`` vertices with non-negative edge costs."""

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

    def add_edge(self, from_: int, to: int, cap, cost) -> int:
        """Add an edge ``from_ -> to``; return its index."""
        self._check_vertex(from_)
        self._check_vertex(to)
        g = self._g
        m = len(self._pos)
        from_id = len(g[from_])
        to_id = len(g[to])
        if from_ == to:
            to_id += 1
        self._pos.append((from_, from_id))
        g[from_].append(_Edge(to, to_id, cap, cost))
        g[to].append(_Edge(from_, from_id, 0, -cost))
        return m

    def get_edge(self, i: int) -> CostFlowEdge:
        if not 0 <= i < len(self._pos):
            raise IndexError(f"edge {i} out of range")
        f, k = self._pos[i]
        e = self._g[f][k]
        re = self._g[e.to][e.rev]
        return CostFlowEdge(f, e.to, e.cap + re.cap, re.cap, e.cost)

    def edges(self) -> list[CostFlowEdge]:
        return [self.get_edge(i) for i in range(len(self._pos))]

    def flow(self, s: int, t: int, flow_limit=None) -> tuple:
        """Send up to ``flow_limit`` from ``s`` to ``t``; return ``(flow, cost)``."""
        return self.slope(s, t, flow_limit)[-1]

    def slope(self, s: int, t: int, flow_limit=None) -> list[tuple]:
        """Return the breakpoints ``(flow, cost)`` of the convex min-cost curve."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        limit = math.inf if flow_limit is None else flow_limit
        g = self._g
        dual = [0] * self._n
        flow = 0
        cost = 0
        prev_cost_per_flow = None
        result = [(flow, cost)]
        while flow < limit:
            found = self._dual_ref(s, t, dual)
            if found is None:
                break
            pv, pe = found
            c = limit - flow
            v = t
            while v != s:
                c = min(c, g[pv[v]][pe[v]].cap)
                v = pv[v]
            v = t
            while v != s:
                e = g[pv[v]][pe[v]]
                e.cap -= c
                g[v][e.rev].cap += c
                v = pv[v]
            d = -dual[s]
            flow += c
            cost += c * d
            if prev_cost_per_flow == d:
                result.pop()
            result.append((flow, cost))
            prev_cost_per_flow = d
        return result

    def _dual_ref(self, s: int, t: int, dual: list):
        n = self._n
        g = self._g
        dist = [math.inf] * n
        pv = [-1] * n
        pe = [-1] * n
        vis = [False] * n
        dist[s] = 0
        heap = [(0, s)]
        while heap:
            _, v = heapq.heappop(heap)
            if vis[v]:
                continue
            vis[v] = True
            if v == t:
                break
            dv = dist[v]
            for i, e in enumerate(g[v]):
                if vis[e.to] or not e.cap:
                    continue
                reduced = e.cost - dual[e.to] + dual[v]
                if dist[e.to] - dv > reduced:
                    dist[e.to] = dv + reduced
                    pv[e.to] = v
                    pe[e.to] = i
                    heapq.heappush(heap, (dist[e.to], e.to))
        if not vis[t]:
            return None
        for v in range(n):
            if vis[v]:
                dual[v] -= dist[t] - dist[v]
        return pv, pe