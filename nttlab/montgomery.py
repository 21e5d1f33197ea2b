"""Montgomery modular multiplication with a power-of-two radix."""

from __future__ import annotations

from collections.abc import Iterable

from .arith import modinv


class MontgomeryContext:
    """Montgomery arithmetic modulo an odd ``n`` with radix ``r`` (a power of two)."""

    __slots__ = ("n", "r", "log_r", "n_inv_neg", "r2", "_mask")

    def __init__(self, r: int, n: int) -> None:
        if r <= 0 or r & (r - 1):
            raise ValueError("R must be a power of two")
        self.r = r
        self.n = n
        self.log_r = r.bit_length() - 1
        self._mask = r - 1
        self.n_inv_neg = r - modinv(n, r)
        self.r2 = r * r % n

    def __repr__(self) -> str:
        return f"MontgomeryContext(r={self.r}, n={self.n})"

    def reduce(self, t: int) -> int:
        """Return ``t * R^-1 mod n`` (REDC) for ``0 <= t < n * r``."""
        m = ((t & self._mask) * self.n_inv_neg) & self._mask
        result = (t + m * self.n) >> self.log_r
        return result - self.n if result >= self.n else result

    def to_mont(self, a: int) -> int:
        """Map ``a`` to its Montgomery form ``a * r mod n``."""
        return self.reduce(a * self.r2)

    def from_mont(self, a_r: int) -> int:
        """Map a Montgomery form back to the ordinary residue."""
        return self.reduce(a_r)

    def mul(self, a_r: int, b_r: int) -> int:
        """Multiply two values in Montgomery form, giving a Montgomery form."""
        return self.reduce(a_r * b_r)

    def mod_mul(self, a: int, b: int) -> int:
        """Return ``a * b mod n`` for ordinary residues ``0 <= a, b < n``."""
        if not (0 <= a < self.n and 0 <= b < self.n):
            raise ValueError("input must be smaller than modulus N")
        return self.from_mont(self.mul(self.to_mont(a), self.to_mont(b)))

    def to_mont_all(self, values: Iterable[int]) -> list[int]:
        """Map every value to Montgomery form."""
        return [self.to_mont(v) for v in values]

    def from_mont_all(self, values: Iterable[int]) -> list[int]:
        """Map every Montgomery form back to an ordinary residue."""
        return [self.from_mont(v) for v in values]

    def mul_all(self, a: Iterable[int], b: Iterable[int]) -> list[int]:
        """Multiply two equal-length sequences of Montgomery forms pointwise."""
        return [self.mul(x, y) for x, y in zip(a, b, strict=True)]