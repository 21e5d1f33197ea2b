"""Number theoretic transform carried out on values in Montgomery form."""

from __future__ import annotations

from collections.abc import Sequence

from .arith import quick_mod
from .montgomery import MontgomeryContext
from .ntt import bit_reverse, transform_length

DEFAULT_RADIX_BITS = 30


def _context(p: int, ctx: MontgomeryContext | None) -> MontgomeryContext:
    """Return ``ctx`` after checking its modulus, or build one for ``p``."""
    if ctx is None:
        return MontgomeryContext(1 << max(DEFAULT_RADIX_BITS, p.bit_length()), p)
    if ctx.n != p:
        raise ValueError(f"context modulus {ctx.n} does not match p = {p}")
    return ctx


def _root_of_unity(p: int, root: int, length: int, invert: bool) -> int:
    wn = quick_mod(root, (p - 1) // length, p)
    if invert:
        wn = quick_mod(wn, p - 2, p)
    return wn


def ntt_montgomery(
    values: Sequence[int],
    p: int,
    root: int = 3,
    invert: bool = False,
    ctx: MontgomeryContext | None = None,
) -> list[int]:
    """Transform Montgomery-form ``values`` modulo ``p``; the result is in Montgomery form.

    The inverse transform is left unscaled: divide by the length afterwards.
    """
    ctx = _context(p, ctx)
    a = bit_reverse(values)
    n = len(a)
    one = ctx.to_mont(1)
    length = 2
    while length <= n:
        half = length // 2
        wn_r = ctx.to_mont(_root_of_unity(p, root, length, invert))
        for start in range(0, n, length):
            w = one
            for j in range(start, start + half):
                u = a[j]
                v = ctx.mul(w, a[j + half])
                a[j] = (u + v) % p
                a[j + half] = (u - v) % p
                w = ctx.mul(w, wn_r)
        length <<= 1
    return a


def ntt_montgomery_twiddled(
    values: Sequence[int],
    p: int,
    root: int = 3,
    invert: bool = False,
    ctx: MontgomeryContext | None = None,
) -> list[int]:
    """Same transform as :func:`ntt_montgomery`, with each stage's twiddles precomputed.

    Every block of a stage is handled as a whole: the twiddles are multiplied
    into the upper half in one pass, then both halves are combined.
    """
    ctx = _context(p, ctx)
    a = bit_reverse(values)
    n = len(a)
    length = 2
    while length <= n:
        half = length // 2
        wn_r = ctx.to_mont(_root_of_unity(p, root, length, invert))
        twiddles = [ctx.to_mont(1)]
        for _ in range(1, half):
            twiddles.append(ctx.mul(twiddles[-1], wn_r))
        for start in range(0, n, length):
            mid, end = start + half, start + length
            lower = a[start:mid]
            upper = ctx.mul_all(twiddles, a[mid:end])
            a[start:mid] = [(u + v) % p for u, v in zip(lower, upper)]
            a[mid:end] = [(u - v) % p for u, v in zip(lower, upper)]
        length <<= 1
    return a


def multiply_montgomery(
    a: Sequence[int],
    b: Sequence[int],
    p: int,
    root: int = 3,
    ctx: MontgomeryContext | None = None,
) -> list[int]:
    """Return the ``2n - 1`` coefficients of ``a * b`` modulo ``p``.

    Inputs and output are ordinary residues; all work in between is done in
    Montgomery form. ``n`` is the length of the longer input.
    """
    ctx = _context(p, ctx)
    n = max(len(a), len(b))
    if n == 0:
        return []
    length = transform_length(n)
    va = ctx.to_mont_all([x % p for x in a] + [0] * (length - len(a)))
    vb = ctx.to_mont_all([x % p for x in b] + [0] * (length - len(b)))
    fa = ntt_montgomery(va, p, root, False, ctx)
    fb = ntt_montgomery(vb, p, root, False, ctx)
    c = ntt_montgomery(ctx.mul_all(fa, fb), p, root, True, ctx)
    inv_r = ctx.to_mont(quick_mod(length, p - 2, p))
    return ctx.from_mont_all(ctx.mul(x, inv_r) for x in c[: 2 * n - 1])