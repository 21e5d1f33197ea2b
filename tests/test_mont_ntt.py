import random

import pytest

from nttlab.dit import multiply_dit
from nttlab.mont_ntt import (
    multiply_montgomery,
    ntt_montgomery,
    ntt_montgomery_twiddled,
)
from nttlab.montgomery import MontgomeryContext
from nttlab.ntt import multiply, ntt_iterative

P = 998244353
P2 = 469762049


@pytest.fixture
def ctx():
    return MontgomeryContext(1 << 30, P)


def _random(n, p, seed):
    rng = random.Random(seed)
    return [rng.randrange(p) for _ in range(n)]


@pytest.mark.parametrize("n", [1, 2, 4, 8, 32])
@pytest.mark.parametrize("invert", [False, True])
def test_matches_plain_transform(ctx, n, invert):
    values = _random(n, P, n)
    result = ntt_montgomery(ctx.to_mont_all(values), P, 3, invert, ctx)
    assert ctx.from_mont_all(result) == ntt_iterative(values, P, 3, invert)


@pytest.mark.parametrize("n", [1, 2, 4, 16, 64])
@pytest.mark.parametrize("invert", [False, True])
def test_twiddled_matches_plain(ctx, n, invert):
    values = ctx.to_mont_all(_random(n, P, 100 + n))
    assert ntt_montgomery_twiddled(values, P, 3, invert, ctx) == ntt_montgomery(
        values, P, 3, invert, ctx
    )


def test_forward_then_inverse_scales_by_length(ctx):
    values = _random(16, P, 7)
    mont = ctx.to_mont_all(values)
    back = ntt_montgomery(ntt_montgomery(mont, P, 3, False, ctx), P, 3, True, ctx)
    assert ctx.from_mont_all(back) == [v * 16 % P for v in values]


def test_input_is_not_modified(ctx):
    values = ctx.to_mont_all([1, 2, 3, 4])
    copy = list(values)
    ntt_montgomery(values, P, 3, False, ctx)
    ntt_montgomery_twiddled(values, P, 3, False, ctx)
    assert values == copy


def test_multiply_small_example():
    assert multiply_montgomery([1, 2], [3, 4], P) == [3, 10, 8]


@pytest.mark.parametrize("n", [1, 3, 10, 50])
def test_multiply_agrees_with_other_methods(n):
    a = _random(n, P, 2 * n)
    b = _random(n, P, 2 * n + 1)
    expected = multiply(a, b, P)
    assert multiply_montgomery(a, b, P) == expected
    assert multiply_dit(a, b, P) == expected


def test_multiply_with_other_prime():
    ctx = MontgomeryContext(1 << 30, P2)
    a = _random(20, P2, 5)
    b = _random(20, P2, 6)
    assert multiply_montgomery(a, b, P2, 3, ctx) == multiply(a, b, P2)


def test_multiply_result_length_and_range():
    a = _random(7, P, 11)
    b = _random(4, P, 12)
    result = multiply_montgomery(a, b, P)
    assert len(result) == 13
    assert all(0 <= x < P for x in result)
    assert result == multiply(a, b, P)


def test_multiply_empty():
    assert multiply_montgomery([], [], P) == []


def test_multiply_by_one_is_identity():
    a = _random(9, P, 21)
    result = multiply_montgomery(a, [1], P)
    assert result[:9] == a
    assert result[9:] == [0] * 8


def test_context_mismatch_rejected(ctx):
    with pytest.raises(ValueError):
        ntt_montgomery([1, 2], P2, 3, False, ctx)
    with pytest.raises(ValueError):
        multiply_montgomery([1], [1], P2, 3, ctx)


def test_non_power_of_two_length_rejected(ctx):
    with pytest.raises(ValueError):
        ntt_montgomery([1, 2, 3], P, 3, False, ctx)
    with pytest.raises(ValueError):
        ntt_montgomery_twiddled([1, 2, 3], P, 3, False, ctx)