import math

import pytest

from cpalgo.diophantine import extended_gcd, find_all_solutions, find_any_solution


@pytest.mark.parametrize(
    "args, expected",
    [
        ((-10, -8, -80, -100, 100, -90, 90), 37),
        ((-389, 6, 836, 326, 777, 3, 926), 0),
        ((-239, -138, 65, 786, 945, 218, 647), 0),
        ((2, 3, 7, 0, 10, 0, 10), 1),
        ((2, 3, 7, -10, 10, -10, 10), 7),
        ((2, 4, 3, -10, 10, -10, 10), 0),
    ],
)
def test_find_all_solutions(args, expected):
    assert find_all_solutions(*args) == expected


def test_find_all_solutions_rejects_zero_coefficient():
    with pytest.raises(ValueError):
        find_all_solutions(0, 3, 6, 0, 10, 0, 10)


def test_extended_gcd_value():
    assert extended_gcd(30, 20) == (10, 1, -1)


def test_extended_gcd_bezout():
    numbers = [11, 30, 24, 32, 50, 23, 11, 40, 47, 15, 30, 31, 0, 19, 23, 37, 48, 29, 37, 22]
    for a, b in zip(numbers, numbers[1:]):
        g, x, y = extended_gcd(a, b)
        assert g == math.gcd(a, b)
        assert x * a + y * b == g


@pytest.mark.parametrize("a, b, c", [(6, 9, 15), (-6, 9, 15), (6, -9, -15), (-6, -9, 21), (7, 0, 14)])
def test_find_any_solution_satisfies_equation(a, b, c):
    x, y, g = find_any_solution(a, b, c)
    assert g == math.gcd(a, b)
    assert a * x + b * y == c


def test_find_any_solution_none_when_not_divisible():
    assert find_any_solution(2, 4, 3) is None


def test_find_any_solution_rejects_zero_pair():
    with pytest.raises(ValueError):
        find_any_solution(0, 0, 5)