"""Linear Diophantine equations ``a*x + b*y = c``."""

from __future__ import annotations


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y = g``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def find_any_solution(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """Return ``(x, y, g)`` with ``a*x + b*y = c`` and ``g = gcd(|a|, |b|)``, or None."""
    if a == 0 and b == 0:
        raise ValueError("a and b must not both be zero")
    g, x0, y0 = extended_gcd(abs(a), abs(b))
    if c % g:
        return None
    x0 *= c // g
    y0 *= c // g
    if a < 0:
        x0 = -x0
    if b < 0:
        y0 = -y0
    return x0, y0, g


def find_all_solutions(
    a: int, b: int, c: int, minx: int, maxx: int, miny: int, maxy: int
) -> int:
    """Count solutions of ``a*x + b*y = c`` with ``minx <= x <= maxx`` and ``miny <= y <= maxy``."""
    if a == 0 or b == 0:
        raise ValueError("a and b must both be non-zero")
    solution = find_any_solution(a, b, c)
    if solution is None:
        return 0
    x, y, g = solution
    a //= g
    b //= g

    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    def shift(x: int, y: int, cnt: int) -> tuple[int, int]:
        return x + cnt * b, y - cnt * a

    x, y = shift(x, y, _tdiv(minx - x, b))
    if x < minx:
        x, y = shift(x, y, sign_b)
    if x > maxx:
        return 0
    lx1 = x

    x, y = shift(x, y, _tdiv(maxx - x, b))
    if x > maxx:
        x, y = shift(x, y, -sign_b)
    rx1 = x

    x, y = shift(x, y, -_tdiv(miny - y, a))
    if y < miny:
        x, y = shift(x, y, -sign_a)
    if y > maxy:
        return 0
    lx2 = x

    x, y = shift(x, y, -_tdiv(maxy - y, a))
    if y > maxy:
        x, y = shift(x, y, sign_a)
    rx2 = x

    if lx2 > rx2:
        lx2, rx2 = rx2, lx2
    lx = max(lx1, lx2)
    rx = min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1