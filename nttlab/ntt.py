"""Number theoretic transform, recursive and iterative, and polynomial products."""

from __future__ import annotations

from collections.abc import Sequence

from .arith import quick_mod


def _require_power_of_two(n: int) -> None:
    if n <= 0 or n & (n - 1):
        raise ValueError(f"transform length must be a positive power of two, got {n}")


def _twiddles(p: int, root: int, length: int, invert: bool) -> list[int]:
    """Return ``[1, w, w^2, ...]`` (``length // 2`` entries) for a block of ``length``."""
    wn = quick_mod(root, (p - 1) // length, p)
    if invert:
        wn = quick_mod(wn, p - 2, p)
    powers = [1] * (length // 2)
    for j in range(1, len(powers)):
        powers[j] = powers[j - 1] * wn % p
    return powers


def transform_length(n: int) -> int:
    """Return the smallest power of two that is at least ``2 * n``."""
    length = 1
    while length < 2 * n:
        length <<= 1
    return length


def bit_reverse(values: Sequence[int]) -> list[int]:
    """Return ``values`` reordered by bit-reversed index; the length must be a power of two."""
    n = len(values)
    _require_power_of_two(n)
    bits = n.bit_length() - 1
    if bits == 0:
        return list(values)
    return [values[int(format(i, f"0{bits}b")[::-1], 2)] for i in range(n)]


def ntt_recursive(
    values: Sequence[int], p: int, root: int = 3, invert: bool = False
) -> list[int]:
    """Transform ``values`` modulo the prime ``p`` by even/odd splitting.

    The inverse transform is left unscaled: divide by the length afterwards.
    """
    n = len(values)
    _require_power_of_two(n)
    if n == 1:
        return list(values)
    even = ntt_recursive(values[0::2], p, root, invert)
    odd = ntt_recursive(values[1::2], p, root, invert)
    half = n // 2
    result = [0] * n
    for i, (u, o, w) in enumerate(zip(even, odd, _twiddles(p, root, n, invert))):
        v = o * w % p
        result[i] = (u + v) % p
        result[i + half] = (u - v) % p
    return result


def ntt_iterative(
    values: Sequence[int], p: int, root: int = 3, invert: bool = False
) -> list[int]:
    """Transform ``values`` modulo the prime ``p`` in place-order butterfly stages.

    Gives the same result as :func:`ntt_recursive`; the inverse is unscaled.
    """
    a = bit_reverse(values)
    n = len(a)
    length = 2
    while length <= n:
        half = length // 2
        twiddles = _twiddles(p, root, length, invert)
        for start in range(0, n, length):
            for j, w in enumerate(twiddles, start):
                u = a[j]
                v = a[j + half] * w % p
                a[j] = (u + v) % p
                a[j + half] = (u - v) % p
        length <<= 1
    return a


def multiply(a: Sequence[int], b: Sequence[int], p: int, root: int = 3) -> list[int]:
    """Return the ``2n - 1`` coefficients of ``a * b`` modulo ``p``.

    ``n`` is the length of the longer input; the shorter one is padded with zeros.
    """
    n = max(len(a), len(b))
    if n == 0:
        return []
    length = transform_length(n)
    fa = ntt_recursive([x % p for x in a] + [0] * (length - len(a)), p, root, False)
    fb = ntt_recursive([x % p for x in b] + [0] * (length - len(b)), p, root, False)
    product = [x * y % p for x, y in zip(fa, fb)]
    c = ntt_recursive(product, p, root, True)
    inv_len = quick_mod(length, p - 2, p)
    return [x * inv_len % p for x in c[: 2 * n - 1]]