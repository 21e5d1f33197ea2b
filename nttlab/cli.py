"""Command line driver: multiply the polynomials of numbered test cases and check them."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from .arith import quick_mod
from .dataio import Problem, check_result, read_problem, write_result
from .dit import multiply_dit
from .mont_ntt import DEFAULT_RADIX_BITS, multiply_montgomery, ntt_montgomery_twiddled
from .montgomery import MontgomeryContext
from .ntt import multiply, transform_length

MSG_CORRECT = "多项式乘法结果正确"
MSG_WRONG = "多项式乘法结果错误"

Multiplier = Callable[[Sequence[int], Sequence[int], int, int], list[int]]


def _multiply_twiddled(a: Sequence[int], b: Sequence[int], p: int, root: int) -> list[int]:
    ctx = MontgomeryContext(1 << max(DEFAULT_RADIX_BITS, p.bit_length()), p)
    n = max(len(a), len(b))
    if n == 0:
        return []
    length = transform_length(n)
    va = ctx.to_mont_all([x % p for x in a] + [0] * (length - len(a)))
    vb = ctx.to_mont_all([x % p for x in b] + [0] * (length - len(b)))
    fa = ntt_montgomery_twiddled(va, p, root, False, ctx)
    fb = ntt_montgomery_twiddled(vb, p, root, False, ctx)
    c = ntt_montgomery_twiddled(ctx.mul_all(fa, fb), p, root, True, ctx)
    inv_r = ctx.to_mont(quick_mod(length, p - 2, p))
    return ctx.from_mont_all(ctx.mul(x, inv_r) for x in c[: 2 * n - 1])


METHODS: dict[str, Multiplier] = {
    "recursive": multiply,
    "dit": multiply_dit,
    "montgomery": multiply_montgomery,
    "twiddled": _multiply_twiddled,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nttlab",
        description="Multiply polynomials modulo a prime for numbered test cases.",
    )
    parser.add_argument("--data-dir", type=Path, default=Path("/nttdata"),
                        help="directory holding <id>.in and <id>.out (default: /nttdata)")
    parser.add_argument("--out-dir", type=Path, default=Path("files"),
                        help="directory to write <id>.out results to (default: files)")
    parser.add_argument("--begin", type=int, default=0, help="first case id (default: 0)")
    parser.add_argument("--end", type=int, default=1, help="last case id, inclusive (default: 1)")
    parser.add_argument("--method", choices=sorted(METHODS), default="montgomery",
                        help="multiplication algorithm (default: montgomery)")
    parser.add_argument("--root", type=int, default=3, help="primitive root (default: 3)")
    return parser


def _solve(problem: Problem, method: Multiplier, root: int) -> tuple[list[int], float]:
    start = time.perf_counter()
    result = method(problem.a, problem.b, problem.p, root)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result[: problem.result_length], elapsed_ms


def _run_case(case_id: int, args: argparse.Namespace) -> int:
    in_path = args.data_dir / f"{case_id}.in"
    try:
        problem = read_problem(in_path)
    except OSError:
        print(f"无法打开输入文件: {in_path}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"invalid input file: {exc}", file=sys.stderr)
        return 1

    try:
        result, elapsed_ms = _solve(problem, METHODS[args.method], args.root)
    except ValueError as exc:
        print(f"case {case_id}: {exc}", file=sys.stderr)
        return 1

    status = 0
    expected_path = args.data_dir / f"{case_id}.out"
    try:
        correct = check_result(expected_path, result)
    except OSError:
        print(f"无法打开输出文件: {expected_path}", file=sys.stderr)
        status = 1
    else:
        print(MSG_CORRECT if correct else MSG_WRONG)
        if not correct:
            status = 1

    print(f"average latency for n = {problem.n} p = {problem.p} : {elapsed_ms} (us)")

    out_path = args.out_dir / f"{case_id}.out"
    try:
        args.out_dir.mkdir(parents=True, exist_ok=True)
        write_result(out_path, result)
    except OSError:
        print(f"无法打开输出文件用于写入: {out_path}", file=sys.stderr)
        status = 1
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Run every case from ``--begin`` to ``--end``; return 0 when all succeed."""
    args = _parser().parse_args(argv)
    status = 0
    for case_id in range(args.begin, args.end + 1):
        status |= _run_case(case_id, args)
    return status


if __name__ == "__main__":
    sys.exit(main())