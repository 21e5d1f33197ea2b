"""Decimation-in-time transform with a reversal trick for the inverse."""

from __future__ import annotations

from collections.abc import Sequence

from .arith import quick_mod
from .ntt import transform_length


def _check(values: Sequence[int], log_len: int) -> int:
    if log_len < 0:
        raise ValueError("log_len must be non-negative")
    size = 1 << log_len
    if len(values) != size:
        raise ValueError(f"expected {size} values, got {len(values)}")
    return size


def butterfly_permute(values: Sequence[int], log_len: int) -> list[int]:
    """Return ``values`` (length ``2 ** log_len``) in bit-reversed index order."""
    size = _check(values, log_len)
    table = [0] * size
    for i in range(1, size):
        table[i] = table[i >> 1] >> 1 | (i & 1) << (log_len - 1)
    return [values[j] for j in table]


def dit(
    values: Sequence[int], log_len: int, p: int, gen: int = 3, inverse: bool = False
) -> list[int]:
    """Transform ``2 ** log_len`` values modulo ``p`` using generator ``gen``.

    The inverse is fully scaled: ``dit(dit(x, l, p), l, p, inverse=True) == x``
    for reduced inputs.
    """
    size = _check(values, log_len)
    f = butterfly_permute(values, log_len)
    length = 2
    while length <= size:
        half = length // 2
        w_n = quick_mod(gen, (p - 1) // length, p)
        for start in range(0, size, length):
            w = 1
            for i in range(start, start + half):
                g = f[i]
                h = f[i + half] * w % p
                f[i] = (g + h) % p
                f[i + half] = (g - h) % p
                w = w * w_n % p
        length <<= 1
    if inverse:
        inv_size = quick_mod(size, p - 2, p)
        f = [x * inv_size % p for x in f]
        f[1:] = f[:0:-1]
    return f


def multiply_dit(a: Sequence[int], b: Sequence[int], p: int, gen: int = 3) -> list[int]:
    """Return the ``2n - 1`` coefficients of ``a * b`` modulo ``p`` via :func:`dit`."""
    n = max(len(a), len(b))
    if n == 0:
        return []
    length = transform_length(n)
    log_len = length.bit_length() - 1
    fa = dit([x % p for x in a] + [0] * (length - len(a)), log_len, p, gen)
    fb = dit([x % p for x in b] + [0] * (length - len(b)), log_len, p, gen)
    product = [x * y % p for x, y in zip(fa, fb)]
    return dit(product, log_len, p, gen, inverse=True)[: 2 * n - 1]