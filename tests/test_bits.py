import pytest

from cpalgo.bits import bsf, ceil_pow2


def test_ceil_pow2_small_values():
    assert ceil_pow2(0) == 0
    assert ceil_pow2(1) == 0


@pytest.mark.parametrize("n", range(2, 2000))
def test_ceil_pow2_is_minimal_exponent(n):
    x = ceil_pow2(n)
    assert n <= 2**x
    assert 2 ** (x - 1) < n


@pytest.mark.parametrize("x", range(0, 40))
def test_ceil_pow2_of_exact_powers(x):
    assert ceil_pow2(2**x) == x


def test_ceil_pow2_rejects_negative():
    with pytest.raises(ValueError):
        ceil_pow2(-1)


@pytest.mark.parametrize("n", range(1, 2000))
def test_bsf_finds_lowest_set_bit(n):
    x = bsf(n)
    assert n & (1 << x)
    assert n & ((1 << x) - 1) == 0


@pytest.mark.parametrize("x", range(0, 40))
def test_bsf_of_powers(x):
    assert bsf(2**x) == x
    assert bsf(3 * 2**x) == x


def test_bsf_rejects_zero():
    with pytest.raises(ValueError):
        bsf(0)