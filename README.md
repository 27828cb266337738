# cpalgo

A collection of classic algorithms and data structures for competitive
programming, written in plain Python with no runtime dependencies.

## Installation

```
pip install cpalgo
```

To run the test suite:

```
pip install "cpalgo[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpalgo.bits` | `ceil_pow2`, `bsf` |
| `cpalgo.numtheory` | `safe_mod`, `is_prime`, `inv_gcd`, `primitive_root`, `pow_mod`, `inv_mod`, `crt`, `floor_sum`, `Barrett` |
| `cpalgo.dsu` | `DSU`: disjoint-set union |
| `cpalgo.fenwick` | `FenwickTree`: prefix sums with point updates |
| `cpalgo.segtree` | `SegTree`: monoid segment tree with `max_right` / `min_left` binary search |
| `cpalgo.lazysegtree` | `LazySegTree`: segment tree with lazy range updates (`apply`, `apply_range`) |
| `cpalgo.scc` | `SCCGraph`: strongly connected components in topological order |
| `cpalgo.twosat` | `TwoSat`: 2-SAT solver |
| `cpalgo.maxflow` | `MFGraph`, `FlowEdge`: maximum flow (Dinic) and minimum cut |
| `cpalgo.mincostflow` | `MCFGraph`, `CostFlowEdge`: minimum-cost flow and its slope |
| `cpalgo.strings` | `suffix_array`, `lcp_array`, `z_algorithm`, with `sa_naive`, `sa_doubling`, `sa_is` |
| `cpalgo.diophantine` | `extended_gcd`, `find_any_solution`, `find_all_solutions` |
| `cpalgo.sequences` | `lis`, `gray_combinations` |
| `cpalgo.lca` | `EulerTourLCA`, `BinaryLiftingLCA` |
| `cpalgo.graphs` | `find_bridges`, `find_cutpoints`, `find_negative_cycle`, `floyd_warshall`, `kuhn_matching`, `hungarian` |

## Examples

Disjoint-set union:

```python
from cpalgo.dsu import DSU

d = DSU(4)
d.merge(0, 1)
d.merge(2, 3)
assert d.same(0, 1)
assert not d.same(1, 2)
print(d.groups())  # [[0, 1], [2, 3]]
```

Chinese remainder theorem:

```python
from cpalgo.numtheory import crt

print(crt([2, 3, 2], [3, 5, 7]))  # (23, 105)
```

`crt` returns `(0, 0)` when the congruences have no common solution.

Maximum flow:

```python
from cpalgo.maxflow import MFGraph

g = MFGraph(4)
g.add_edge(0, 1, 3)
g.add_edge(0, 2, 2)
g.add_edge(1, 3, 2)
g.add_edge(2, 3, 3)
print(g.flow(0, 3))  # 4
```

Minimum-cost flow returns a `(flow, cost)` pair:

```python
from cpalgo.mincostflow import MCFGraph

g = MCFGraph(3)
g.add_edge(0, 1, 2, 1)
g.add_edge(1, 2, 2, 2)
print(g.flow(0, 2))  # (2, 6)
```

Suffix array and LCP array:

```python
from cpalgo.strings import suffix_array, lcp_array

sa = suffix_array("abaab")
print(sa)                     # [2, 3, 0, 4, 1]
print(lcp_array("abaab", sa)) # [1, 2, 0, 1]
```

Lowest common ancestor:

```python
from cpalgo.lca import EulerTourLCA

adj = [[1, 2, 3], [], [4, 5, 6], [], [], [], []]
tree = EulerTourLCA(adj, 0)
print(tree.lca(4, 6))  # 2
```

Assignment problem:

```python
from cpalgo.graphs import hungarian

print(hungarian([[4, 1], [2, 3]]))  # (3, [1, 0])
```

Contract violations, such as an index out of range or an unsatisfiable
precondition, raise `ValueError` or `IndexError` instead of failing silently.

## What is not included

The package is a library only; it has no command-line interface. It offers no
modular-integer number type and no polynomial convolution (number-theoretic
transform); for modular arithmetic use the plain-integer functions in
`cpalgo.numtheory` such as `pow_mod` and `inv_mod`.