"""Integer helpers for modular arithmetic: fast powers, extended gcd, inverses."""

from __future__ import annotations


def quick_mod(a: int, b: int, p: int) -> int:
    """Return ``a ** b mod p`` by repeated squaring; a non-positive ``b`` gives 1."""
    result = 1
    base = a % p
    while b > 0:
        if b & 1:
            result = result * base % p
        base = base * base % p
        b >>= 1
    return result


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def modinv(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError("modular inverse does not exist")
    return x % m