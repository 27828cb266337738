"""Lowest common ancestors in rooted trees."""

from __future__ import annotations

from collections.abc import Sequence

from .bits import ceil_pow2
from .segtree import SegTree


def _check_root(n: int, root: int) -> None:
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")


class EulerTourLCA:
    """LCA queries answered by a range minimum over an Euler tour of the tree."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        _check_root(n, root)
        height = [0] * n
        first = [-1] * n
        euler: list[int] = []
        visited = [False] * n

        visited[root] = True
        first[root] = 0
        euler.append(root)
        stack = [(root, iter(adj[root]))]
        while stack:
            node, it = stack[-1]
            for to in it:
                if not visited[to]:
                    visited[to] = True
                    height[to] = height[node] + 1
                    first[to] = len(euler)
                    euler.append(to)
                    stack.append((to, iter(adj[to])))
                    break
            else:
                stack.pop()
                if stack:
                    euler.append(stack[-1][0])

        self._height = height
        self._first = first

        def shallower(left: int, right: int) -> int:
            if left == -1:
                return right
            if right == -1:
                return left
            return left if height[left] < height[right] else right

        self._tree = SegTree(shallower, lambda: -1, euler)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._first):
            raise IndexError(f"vertex {v} out of range")
        if self._first[v] == -1:
            raise ValueError(f"vertex {v} is not reachable from the root")

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        left, right = sorted((self._first[u], self._first[v]))
        return self._tree.prod(left, right + 1)


class BinaryLiftingLCA:
    """LCA queries answered by jumping through ancestors at powers of two."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        _check_root(n, root)
        self._log = ceil_pow2(n)
        self._tin = [0] * n
        self._tout = [0] * n
        self._up: list[list[int]] = [[0] * (self._log + 1) for _ in range(n)]
        timer = 0

        def enter(v: int, p: int) -> None:
            nonlocal timer
            timer += 1
            self._tin[v] = timer
            row = self._up[v]
            row[0] = p
            for i in range(1, self._log + 1):
                row[i] = self._up[row[i - 1]][i - 1]

        enter(root, root)
        stack = [(root, root, iter(adj[root]))]
        while stack:
            v, p, it = stack[-1]
            for u in it:
                if u != p:
                    enter(u, v)
                    stack.append((u, v, iter(adj[u])))
                    break
            else:
                stack.pop()
                timer += 1
                self._tout[v] = timer

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._tin):
            raise IndexError(f"vertex {v} out of range")
        if self._tin[v] == 0:
            raise ValueError(f"vertex {v} is not reachable from the root")

    def is_ancestor(self, u: int, v: int) -> bool:
        """Return whether ``u`` is an ancestor of ``v`` (a vertex is its own ancestor)."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self._log, -1, -1):
            if not self.is_ancestor(self._up[u][i], v):
                u = self._up[u][i]
        return self._up[u][0]