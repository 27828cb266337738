import pytest

from cpalgo.fenwick import FenwickTree


def _check_all_ranges(tree, a):
    for i in range(len(a)):
        expected_sum = 0
        for j in range(i, len(a)):
            expected_sum += a[j]
            assert tree.sum(i, j + 1) == expected_sum


def test_fenwick_sum():
    a = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    tree = FenwickTree(a)
    _check_all_ranges(tree, a)
    for k in range(len(a)):
        tree.add(k, 100)
        a[k] += 100
        _check_all_ranges(tree, a)


def test_built_from_size_starts_empty():
    tree = FenwickTree(5)
    assert tree.sum(0, 5) == 0
    tree.add(2, 7)
    tree.add(4, -3)
    assert tree.sum(0, 5) == 4
    assert tree.sum(3, 5) == -3
    assert tree.sum(2, 2) == 0


def test_out_of_range():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.sum(2, 1)
    with pytest.raises(IndexError):
        tree.sum(0, 4)