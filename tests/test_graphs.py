import math

import pytest

from cpalgo.graphs import (
    find_bridges,
    find_cutpoints,
    find_negative_cycle,
    floyd_warshall,
    hungarian,
    kuhn_matching,
)


def _graph(n, edges):
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _normalize(pairs):
    return sorted(tuple(sorted(p)) for p in pairs)


@pytest.mark.parametrize(
    "n, edges, expected",
    [
        (5, [(0, 1), (0, 1), (2, 3), (3, 4)], [(2, 3), (3, 4)]),
        (
            7,
            [(0, 1), (1, 2), (2, 3), (3, 1), (3, 4), (0, 4), (4, 5), (1, 6)],
            [(4, 5), (1, 6)],
        ),
        (4, [(0, 1), (0, 1), (1, 2), (2, 3), (2, 3)], [(1, 2)]),
    ],
)
def test_bridges_source_cases(n, edges, expected):
    assert _normalize(find_bridges(_graph(n, edges))) == _normalize(expected)


def test_bridges_none_in_cycle():
    assert find_bridges(_graph(3, [(0, 1), (1, 2), (2, 0)])) == []


def test_cutpoints_path():
    assert find_cutpoints(_graph(3, [(0, 1), (1, 2)])) == [1]


def test_cutpoints_star_root():
    assert find_cutpoints(_graph(4, [(0, 1), (0, 2), (0, 3)])) == [0]


def test_cutpoints_cycle_and_tail():
    adj = _graph(5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)])
    assert sorted(find_cutpoints(adj)) == [2, 3]


def test_cutpoints_none_in_cycle():
    assert find_cutpoints(_graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])) == []


def test_negative_cycle_found():
    edges = [(0, 1, 1), (1, 2, -1), (2, 1, -1), (2, 3, 5)]
    cycle = find_negative_cycle(4, edges, 0)
    assert cycle[0] == cycle[-1]
    assert sorted(set(cycle)) == [1, 2]
    weights = {(a, b): c for a, b, c in edges}
    assert sum(weights[(a, b)] for a, b in zip(cycle, cycle[1:])) < 0


def test_negative_cycle_absent():
    edges = [(0, 1, 4), (1, 2, -2), (0, 2, 5)]
    assert find_negative_cycle(3, edges, 0) is None


def test_negative_cycle_unreachable():
    edges = [(1, 2, -1), (2, 1, -1)]
    assert find_negative_cycle(3, edges, 0) is None


def test_negative_cycle_bad_source():
    with pytest.raises(IndexError):
        find_negative_cycle(2, [], 3)


def test_floyd_warshall():
    inf = math.inf
    d = [
        [0, 3, inf, 7],
        [8, 0, 2, inf],
        [5, inf, 0, 1],
        [2, inf, inf, 0],
    ]
    assert floyd_warshall(d) == [
        [0, 3, 5, 6],
        [5, 0, 2, 3],
        [3, 6, 0, 1],
        [2, 5, 7, 0],
    ]
    assert d[0][2] == inf


def test_floyd_warshall_unreachable_stays_inf():
    inf = math.inf
    result = floyd_warshall([[0, -1], [inf, 0]])
    assert result == [[0, -1], [inf, 0]]


def test_floyd_warshall_not_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1]])


def test_kuhn_needs_augmenting_path():
    g = [[0, 1], [0], [1, 2]]
    assert kuhn_matching(3, 3, g) == [(1, 0), (0, 1), (2, 2)]


def test_kuhn_limited_by_right_side():
    g = [[0], [0], [0]]
    assert kuhn_matching(3, 1, g) == [(0, 0)]


def test_kuhn_bad_vertex():
    with pytest.raises(IndexError):
        kuhn_matching(1, 1, [[3]])


def test_hungarian_source_matrix():
    a = [
        [9, 5, 5, 6, 5],
        [1, 9, 4, 7, 3],
        [1, 2, 7, 4, 9],
        [8, 1, 4, 4, 4],
        [1, 6, 4, 9, 4],
    ]
    cost, assignment = hungarian(a)
    assert cost == 14
    assert assignment == [2, 4, 3, 1, 0]
    assert sum(a[i][j] for i, j in enumerate(assignment)) == cost


def test_hungarian_rectangular():
    a = [[4, 1, 3], [2, 0, 5]]
    cost, assignment = hungarian(a)
    assert cost == 3
    assert assignment == [1, 0]


def test_hungarian_too_many_rows():
    with pytest.raises(ValueError):
        hungarian([[1], [2]])


def test_hungarian_empty():
    assert hungarian([]) == (0, [])