"""Modular arithmetic and elementary number theory."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def safe_mod(x: int, m: int) -> int:
    """Return ``x mod m`` in ``[0, m)``."""
    if m < 1:
        raise ValueError("modulus must be at least 1")
    return x % m


class Barrett:
    """Modular multiplication by Barrett reduction for ``1 <= m < 2**31``."""

    __slots__ = ("m", "im")

    def __init__(self, m: int) -> None:
        if not 1 <= m < (1 << 31):
            raise ValueError("modulus must satisfy 1 <= m < 2**31")
        self.m = m
        self.im = (_MASK64 // m + 1) & _MASK64

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b % m`` for ``0 <= a, b < m``."""
        z = a * b
        x = (z * self.im) >> 64
        v = z - x * self.m
        if v < 0:
            v += self.m
        return v

    def __repr__(self) -> str:
        return f"Barrett({self.m})"


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for ``n < 2**32``."""
    if n <= 1:
        return False
    if n in (2, 7, 61):
        return True
    if n % 2 == 0:
        return False
    d = n - 1
    while d % 2 == 0:
        d //= 2
    for a in (2, 7, 61):
        t = d
        y = pow(a, t, n)
        while t != n - 1 and y != 1 and y != n - 1:
            y = y * y % n
            t <<= 1
        if y != n - 1 and t % 2 == 0:
            return False
    return True


def inv_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(g, x)`` with ``g = gcd(a, b)``, ``x*a = g (mod b)``, ``0 <= x < b/g``."""
    if b < 1:
        raise ValueError("b must be at least 1")
    a %= b
    if a == 0:
        return b, 0
    s, t = b, a
    m0, m1 = 0, 1
    while t:
        u = s // t
        s -= t * u
        m0 -= m1 * u
        s, t = t, s
        m0, m1 = m1, m0
    if m0 < 0:
        m0 += b // s
    return s, m0


_KNOWN_ROOTS = {
    2: 1,
    167772161: 3,
    469762049: 3,
    754974721: 11,
    998244353: 3,
}


def primitive_root(m: int) -> int:
    """Return the smallest primitive root of the prime ``m``."""
    if m in _KNOWN_ROOTS:
        return _KNOWN_ROOTS[m]
    if not is_prime(m):
        raise ValueError("modulus must be prime")
    divs = [2]
    x = (m - 1) // 2
    while x % 2 == 0:
        x //= 2
    i = 3
    while i * i <= x:
        if x % i == 0:
            divs.append(i)
            while x % i == 0:
                x //= i
        i += 2
    if x > 1:
        divs.append(x)
    g = 2
    while True:
        if all(pow(g, (m - 1) // d, m) != 1 for d in divs):
            return g
        g += 1


def pow_mod(x: int, n: int, m: int) -> int:
    """Return ``x**n mod m`` for ``n >= 0`` and ``m >= 1``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if m < 1:
        raise ValueError("modulus must be at least 1")
    if m == 1:
        return 0
    return pow(x % m, n, m)


def inv_mod(x: int, m: int) -> int:
    """Return the inverse of ``x`` modulo ``m``; ``gcd(x, m)`` must be 1."""
    if m < 1:
        raise ValueError("modulus must be at least 1")
    g, inv = inv_gcd(x, m)
    if g != 1:
        raise ValueError(f"{x} is not invertible modulo {m}")
    return inv


def crt(r: list[int], m: list[int]) -> tuple[int, int]:
    """Solve ``x = r[i] (mod m[i])``; return ``(x, lcm)``, or ``(0, 0)`` if none exists."""
    if len(r) != len(m):
        raise ValueError("r and m must have the same length")
    r0, m0 = 0, 1
    for ri, mi in zip(r, m):
        if mi < 1:
            raise ValueError("moduli must be at least 1")
        r1, m1 = ri % mi, mi
        if m0 < m1:
            r0, r1 = r1, r0
            m0, m1 = m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g, im = inv_gcd(m0, m1)
        u1 = m1 // g
        if (r1 - r0) % g:
            return 0, 0
        x = (r1 - r0) // g % u1 * im % u1
        r0 += x * m0
        m0 *= u1
        if r0 < 0:
            r0 += m0
    return r0, m0


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """Return ``sum(floor((a*i + b) / m) for i in range(n))`` for non-negative ``a``, ``b``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if m < 1:
        raise ValueError("m must be at least 1")
    if a < 0 or b < 0:
        raise ValueError("a and b must be non-negative")
    ans = 0
    while True:
        if a >= m:
            ans += (n - 1) * n * (a // m) // 2
            a %= m
        if b >= m:
            ans += n * (b // m)
            b %= m
        y_max = (a * n + b) // m
        if y_max == 0:
            return ans
        x_max = y_max * m - b
        ans += (n - (x_max + a - 1) // a) * y_max
        n, m, a, b = y_max, a, m, (a - x_max % a) % a