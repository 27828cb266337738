"""2-satisfiability by strongly connected components."""

from __future__ import annotations

from .scc import SCCGraph


class TwoSat:
    """Clauses over ``n`` boolean variables, each of the form ``(x_i == f) or (x_j == g)``."""

    __slots__ = ("_n", "_answer", "_scc")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._answer = [False] * n
        self._scc = SCCGraph(2 * n)

    def add_clause(self, i: int, f: bool, j: int, g: bool) -> None:
        """Add the clause ``(x_i == f) or (x_j == g)``."""
        for v in (i, j):
            if not 0 <= v < self._n:
                raise IndexError(f"variable {v} out of range")
        self._scc.add_edge(2 * i + (0 if f else 1), 2 * j + (1 if g else 0))
        self._scc.add_edge(2 * j + (0 if g else 1), 2 * i + (1 if f else 0))

    def satisfiable(self) -> bool:
        """Decide satisfiability; on success :meth:`answer` holds an assignment."""
        ids = self._scc.scc_ids()[1]
        for i in range(self._n):
            if ids[2 * i] == ids[2 * i + 1]:
                return False
            self._answer[i] = ids[2 * i] < ids[2 * i + 1]
        return True

    def answer(self) -> list[bool]:
        """Return the assignment found by the last successful :meth:`satisfiable`."""
        return list(self._answer)