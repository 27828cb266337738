"""Strongly connected components by Tarjan's algorithm."""

from __future__ import annotations


class SCCGraph:
    """A directed graph on ``n`` vertices that can be split into strongly connected components."""

    __slots__ = ("_n", "_edges")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._edges: list[tuple[int, int]] = []

    def num_vertices(self) -> int:
        return self._n

    def add_edge(self, from_: int, to: int) -> None:
        """Add the directed edge ``from_ -> to``."""
        for v in (from_, to):
            if not 0 <= v < self._n:
                raise IndexError(f"vertex {v} out of range")
        self._edges.append((from_, to))

    def _csr(self) -> tuple[list[int], list[int]]:
        n = self._n
        start = [0] * (n + 1)
        for f, _ in self._edges:
            start[f + 1] += 1
        for i in range(1, n + 1):
            start[i] += start[i - 1]
        counter = start[:]
        elist = [0] * len(self._edges)
        for f, to in self._edges:
            elist[counter[f]] = to
            counter[f] += 1
        return start, elist

    def scc_ids(self) -> tuple[int, list[int]]:
        """Return the number of components and each vertex's component id.

        Ids are in topological order: an edge never leads to a smaller id.
        """
        n = self._n
        start, elist = self._csr()
        now_ord = 0
        group_num = 0
        visited: list[int] = []
        low = [0] * n
        order = [-1] * n
        ids = [0] * n
        it = [0] * n

        for root in range(n):
            if order[root] != -1:
                continue
            low[root] = order[root] = now_ord
            now_ord += 1
            visited.append(root)
            it[root] = start[root]
            call_stack = [root]
            while call_stack:
                v = call_stack[-1]
                if it[v] < start[v + 1]:
                    to = elist[it[v]]
                    it[v] += 1
                    if order[to] == -1:
                        low[to] = order[to] = now_ord
                        now_ord += 1
                        visited.append(to)
                        it[to] = start[to]
                        call_stack.append(to)
                    elif order[to] < low[v]:
                        low[v] = order[to]
                    continue
                if low[v] == order[v]:
                    while True:
                        u = visited.pop()
                        order[u] = n
                        ids[u] = group_num
                        if u == v:
                            break
                    group_num += 1
                call_stack.pop()
                if call_stack:
                    parent = call_stack[-1]
                    if low[v] < low[parent]:
                        low[parent] = low[v]

        return group_num, [group_num - 1 - x for x in ids]

    def scc(self) -> list[list[int]]:
        """Return the components in topological order, each listing its vertices ascending."""
        group_num, ids = self.scc_ids()
        groups: list[list[int]] = [[] for _ in range(group_num)]
        for v, gid in enumerate(ids):
            groups[gid].append(v)
        return groups