"""Small bit-twiddling helpers."""


def ceil_pow2(n: int) -> int:
    """Return the smallest non-negative ``x`` such that ``n <= 2**x``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return 0
    return (n - 1).bit_length()


def bsf(n: int) -> int:
    """Return the index of the lowest set bit of ``n`` (``n >= 1``)."""
    if n < 1:
        raise ValueError("n must be positive")
    return (n & -n).bit_length() - 1