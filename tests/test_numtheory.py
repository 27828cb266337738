import math

import pytest

from cpalgo.numtheory import (
    Barrett,
    crt,
    floor_sum,
    inv_gcd,
    inv_mod,
    is_prime,
    pow_mod,
    primitive_root,
    safe_mod,
)


def _naive_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_safe_mod_range_and_congruence():
    for x in range(-60, 60):
        for m in range(1, 12):
            r = safe_mod(x, m)
            assert 0 <= r < m
            assert (x - r) % m == 0


def test_safe_mod_rejects_bad_modulus():
    with pytest.raises(ValueError):
        safe_mod(3, 0)


def test_barrett_exhaustive_small():
    for m in range(1, 30):
        bt = Barrett(m)
        for a in range(m):
            for b in range(m):
                assert bt.mul(a, b) == a * b % m


def test_barrett_rejects_out_of_range():
    with pytest.raises(ValueError):
        Barrett(0)
    with pytest.raises(ValueError):
        Barrett(2**31)


def test_is_prime_matches_trial_division():
    for n in range(0, 3000):
        assert is_prime(n) == _naive_prime(n)


def test_is_prime_known_moduli():
    for p in (998244353, 1_000_000_007, 167772161, 469762049, 754974721):
        assert is_prime(p)
    assert not is_prime(998244353 * 3)
    assert not is_prime(2**31 - 3)  # 2147483645 is divisible by 5


def test_inv_gcd_invariants():
    for a in range(-30, 30):
        for b in range(1, 30):
            g, x = inv_gcd(a, b)
            assert g == math.gcd(a, b)
            assert 0 <= x < b // g or (b // g == 1 and x == 0)
            assert (x * a - g) % b == 0


def test_inv_gcd_rejects_bad_b():
    with pytest.raises(ValueError):
        inv_gcd(3, 0)


@pytest.mark.parametrize(
    "p, g",
    [(998244353, 3), (167772161, 3), (469762049, 3), (754974721, 11)],
)
def test_primitive_root_known(p, g):
    assert primitive_root(p) == g


def test_primitive_root_generates_group():
    for p in range(3, 400):
        if not _naive_prime(p):
            continue
        g = primitive_root(p)
        assert len({pow(g, k, p) for k in range(p - 1)}) == p - 1
        for smaller in range(2, g):
            assert len({pow(smaller, k, p) for k in range(p - 1)}) < p - 1


def test_primitive_root_rejects_composite():
    with pytest.raises(ValueError):
        primitive_root(15)


def test_pow_mod_matches_builtin():
    for x in range(-6, 7):
        for n in range(0, 12):
            for m in range(1, 16):
                assert pow_mod(x, n, m) == pow(x, n, m)


def test_pow_mod_errors():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 5)
    with pytest.raises(ValueError):
        pow_mod(2, 3, 0)


def test_inv_mod_is_inverse():
    for m in range(2, 40):
        for x in range(-40, 40):
            if math.gcd(x, m) != 1:
                continue
            y = inv_mod(x, m)
            assert 0 <= y < m
            assert x * y % m == 1


def test_inv_mod_not_invertible():
    with pytest.raises(ValueError):
        inv_mod(2, 4)
    with pytest.raises(ValueError):
        inv_mod(3, 0)


def test_crt_sunzi_problem():
    assert crt([2, 3, 2], [3, 5, 7]) == (23, 3 * 5 * 7)


def test_crt_non_coprime_moduli():
    x, lcm = crt([3, 3, 4], [7, 5, 12])
    assert x == 388
    assert lcm == 7 * 5 * 12


def test_crt_empty_and_no_solution():
    assert crt([], []) == (0, 1)
    assert crt([0, 1], [2, 4]) == (0, 0)


def test_crt_against_search():
    for m1 in range(1, 10):
        for m2 in range(1, 10):
            lcm = m1 * m2 // math.gcd(m1, m2)
            for r1 in range(-3, m1):
                for r2 in range(-3, m2):
                    x, m = crt([r1, r2], [m1, m2])
                    found = [y for y in range(lcm) if (y - r1) % m1 == 0 and (y - r2) % m2 == 0]
                    if found:
                        assert (x, m) == (found[0], lcm)
                    else:
                        assert (x, m) == (0, 0)


def test_crt_errors():
    with pytest.raises(ValueError):
        crt([1, 2], [3])
    with pytest.raises(ValueError):
        crt([1], [0])


def test_floor_sum_against_direct_sum():
    for n in range(0, 15):
        for m in range(1, 15):
            for a in range(0, 25):
                for b in range(0, 25):
                    expected = sum((a * i + b) // m for i in range(n))
                    assert floor_sum(n, m, a, b) == expected


def test_floor_sum_errors():
    with pytest.raises(ValueError):
        floor_sum(-1, 3, 1, 1)
    with pytest.raises(ValueError):
        floor_sum(3, 0, 1, 1)
    with pytest.raises(ValueError):
        floor_sum(3, 2, -1, 1)