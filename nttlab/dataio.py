"""Reading problem files, checking results against expected output, writing results.

A problem file holds whitespace-separated integers: ``n p``, then ``n``
coefficients of the first polynomial and ``n`` of the second. Expected and
written result files hold one coefficient per line.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from pathlib import Path

PathLike = str | os.PathLike[str]


@dataclass(frozen=True)
class Problem:
    """Two polynomials of ``n`` coefficients each, to be multiplied modulo ``p``."""

    n: int
    p: int
    a: tuple[int, ...]
    b: tuple[int, ...]

    @property
    def result_length(self) -> int:
        """Number of coefficients in the product, ``2n - 1``."""
        return max(2 * self.n - 1, 0)


def _integers(path: PathLike) -> Iterator[int]:
    for token in Path(path).read_text().split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"{path}: not an integer: {token!r}") from None


def _take(numbers: Iterator[int], count: int, path: PathLike, what: str) -> tuple[int, ...]:
    taken = tuple(islice(numbers, count))
    if len(taken) != count:
        raise ValueError(f"{path}: expected {count} {what}, found {len(taken)}")
    return taken


def read_problem(path: PathLike) -> Problem:
    """Read a problem file.

    Raises OSError when the file cannot be opened and ValueError when its
    contents are malformed or too short.
    """
    numbers = _integers(path)
    n, p = _take(numbers, 2, path, "header values")
    if n < 0:
        raise ValueError(f"{path}: polynomial length must be non-negative, got {n}")
    a = _take(numbers, n, path, "coefficients of the first polynomial")
    b = _take(numbers, n, path, "coefficients of the second polynomial")
    return Problem(n=n, p=p, a=a, b=b)


def read_expected(path: PathLike, count: int) -> list[int]:
    """Read the first ``count`` integers of an expected-result file."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return list(_take(_integers(path), count, path, "result values"))


def check_result(path: PathLike, values: Iterable[int]) -> bool:
    """Return whether ``values`` match the leading integers of the file at ``path``.

    A file that is too short or holds a non-integer counts as a mismatch;
    a missing file raises OSError.
    """
    values = list(values)
    try:
        expected = read_expected(path, len(values))
    except ValueError:
        return False
    return expected == values


def write_result(path: PathLike, values: Iterable[int]) -> None:
    """Write ``values`` to ``path``, one per line."""
    with open(path, "w", encoding="utf-8") as out:
        out.writelines(f"{v}\n" for v in values)