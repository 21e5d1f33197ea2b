# nttlab

Multiply polynomials modulo a prime using the number-theoretic transform (NTT),
with several interchangeable implementations written in plain Python.

## Modules

- `nttlab.arith` — `quick_mod(a, b, p)` (fast modular power), `egcd(a, b)`
  returning `(g, x, y)` with `a*x + b*y == g`, and `modinv(a, m)`, which raises
  `ValueError` when no inverse exists.
- `nttlab.montgomery` — `MontgomeryContext(r, n)`: Montgomery arithmetic
  modulo `n` with a power-of-two radix `r` (a `ValueError` is raised if `r` is
  not a power of two, or if `n` has no inverse modulo `r`). It offers
  `reduce`, `to_mont`, `from_mont`, `mul`, `mod_mul` (which requires
  `0 <= a, b < n`) and the list forms `to_mont_all`, `from_mont_all` and
  `mul_all`.
- `nttlab.ntt` — `transform_length(n)` (smallest power of two `>= 2n`),
  `bit_reverse(values)`, the recursive and iterative radix-2 transforms
  `ntt_recursive` and `ntt_iterative` (their inverse is left unscaled), and
  `multiply(a, b, p, root=3)` for the full product.
- `nttlab.dit` — a decimation-in-time transform: `butterfly_permute(values,
  log_len)`, `dit(values, log_len, p, gen=3, inverse=False)` whose inverse is
  fully scaled, and `multiply_dit(a, b, p, gen=3)`.
- `nttlab.mont_ntt` — the transform carried out on Montgomery-form values:
  `ntt_montgomery`, `ntt_montgomery_twiddled` (the same transform with each
  stage's twiddle factors precomputed), and `multiply_montgomery(a, b, p,
  root=3, ctx=None)`. Without a context, one is built with radix
  `2 ** max(30, p.bit_length())`; a context whose modulus is not `p` is
  rejected with `ValueError`.
- `nttlab.dataio` — the `Problem` dataclass, `read_problem`, `read_expected`,
  `check_result` and `write_result`.
- `nttlab.cli` — the command-line driver behind `nttlab`.

Every `multiply*` function returns the `2n - 1` coefficients of the product,
where `n` is the length of the longer input (the shorter one is padded with
zeros); empty inputs give an empty list. The modulus should be an NTT-friendly
prime such as 998244353 or 7340033, for which 3 is a primitive root; another
root can be passed in.

## Installation

```
pip install .
```

## Library use

```python
from nttlab.ntt import multiply
from nttlab.montgomery import MontgomeryContext
from nttlab.mont_ntt import multiply_montgomery

p = 998244353
print(multiply([1, 2, 3], [4, 5, 6], p, 3))
# [4, 13, 28, 27, 18]

ctx = MontgomeryContext(1 << 30, p)
print(ctx.mod_mul(123456, 654321))
print(multiply_montgomery([1, 2, 3], [4, 5, 6], p, 3, ctx))
```

## Problem files

An input file holds `n` and `p`, followed by the `n` coefficients of the
first polynomial and the `n` coefficients of the second, separated by
whitespace. The matching expected-output file holds the `2n - 1`
coefficients of the product; `write_result` writes one per line.

`read_problem` raises `OSError` for a file that cannot be opened and
`ValueError` for one that is malformed or too short. `check_result` treats a
short or malformed expected file as a mismatch and raises `OSError` if the
file is missing.

## Command line

```
nttlab --help
```

For each case id from `--begin` to `--end` (inclusive, default 0 to 1), the
`nttlab` command reads `<id>.in` from `--data-dir` (default `/nttdata`),
multiplies the polynomials with the algorithm chosen by `--method`
(`recursive`, `dit`, `montgomery` or `twiddled`; default `montgomery`) and
primitive root `--root` (default 3), compares the product with `<id>.out` in
the data directory, prints whether it is correct, prints a latency line with
the elapsed time, and writes the product to `<id>.out` in `--out-dir`
(default `files`, created if needed). Problems with files are reported on
standard error. The exit status is 0 only when every case was read, checked
as correct and written.

## Limitations

Everything is pure Python integer arithmetic: there is no vectorised or
multi-threaded code path, so large transforms are slow. The transforms
assume a prime modulus and a power-of-two length.

## Running the tests

```
pip install .[test]
pytest
```