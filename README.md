# gfmul128

Arithmetic in the binary field GF(2^128), reduced by the polynomial
x^128 + x^7 + x^2 + x + 1, which is the field used by GCM/GHASH, LRW and XTS.

Field elements are 16-byte `bytes` blocks. Two layouts are supported for
multiplication:

- **lle** (little-endian bits and bytes): the layout used by GCM.
- **bbe** (big-endian bits and bytes): the layout used by LRW.

XTS tweak updates use a third layout, **ble** (big-endian bits,
little-endian bytes). Only multiplication by `x` is provided for it.

Every function that takes a block checks it. A block that is not
bytes-like raises `TypeError`. A block that is not 16 bytes long raises
`ValueError`.

## Multipliers

The package has several ways to compute a product, so that they can be
compared with each other and timed:

| Module                | What it offers |
|-----------------------|----------------|
| `gfmul128.shift`      | `xor_blocks(a, b)`, and multiplication by `x` and `x^8`: `mul_x_lle`, `mul_x_bbe`, `mul_x_ble`, `mul_x8_lle`, `mul_x8_bbe` |
| `gfmul128.schoolbook` | `mul_lle(a, b)` and `mul_bbe(a, b)`, bit-by-bit multiplication with no precomputation |
| `gfmul128.tables`     | `Table4K` and `Table64K`, built for a fixed element with `build_4k_lle`, `build_4k_bbe`, `build_64k_lle` and `build_64k_bbe` |
| `gfmul128.karatsuba`  | `koa_lle(a, b)` and `koa_bbe(a, b)`, plus their building blocks `clmul32`, `gf64mul_koa`, `reduce_lle` and `reduce_bbe` |
| `gfmul128.hybrid`     | `Hybrid4K` and `Hybrid64K` (lle only), which use table lookups for bytes 8–15 and a Karatsuba product for bytes 0–7 |

The table-driven multipliers precompute the multiples of one fixed element
`g`. They can then multiply any block by that element:

```python
from gfmul128.schoolbook import mul_lle
from gfmul128.tables import build_4k_lle, build_64k_lle

g = bytes.fromhex("0123456789abcdeffedcba9876543210")
msg = bytes.fromhex("0f1e2d3c4b5a69788070605040302010")

expected = mul_lle(msg, g)

assert build_4k_lle(g).multiply(msg) == expected
assert build_64k_lle(g).multiply(msg) == expected
```

The Karatsuba multipliers take both operands directly. The word-level
helpers work on plain integers. `clmul32` takes 32-bit words. `gf64mul_koa`
takes 64-bit words and returns a `(high, low)` pair. Each of `reduce_lle`
and `reduce_bbe` takes four 64-bit words and returns a block. Words that
are out of range raise `ValueError`.

```python
from gfmul128.karatsuba import gf64mul_koa, koa_lle

product = koa_lle(msg, g)
high, low = gf64mul_koa(0x0123456789ABCDEF, 0xFEDCBA9876543210)
```

The hybrid multipliers are built from the element, in the same way as the
tables:

```python
from gfmul128.hybrid import Hybrid4K, Hybrid64K

print(Hybrid4K(g).multiply(msg).hex())
print(Hybrid64K(g).multiply(msg).hex())
```

## Benchmark

A micro-benchmark times every lle multiplier on a fixed element and
message:

```
gfmul128-bench
gfmul128-bench --rounds 10000
```

`-n` / `--rounds` sets the number of multiplications per multiplier. The
default is 1,000,000.

The command first prints a start line. It then prints one line for each of
`school`, `koa`, `lut-4k`, `lut-64k`, `hybrid-4k` and `hybrid-64k`. Each line
gives the total time in nanoseconds and the whole nanoseconds per
operation. For `lut-64k`, the time to build the table is counted in the
total.

The same run is available from Python. `run_benchmarks` returns
`BenchResult` objects. Each one holds `name`, `total_ns`, `rounds`, `ns_per_op`
and the last `product`:

```python
from gfmul128.bench import format_result, run_benchmarks

for result in run_benchmarks(10_000):
    print(format_result(result))
```

## What it does not do

The package multiplies field elements, and nothing more. It does not
implement GHASH, GCM, LRW or XTS themselves. It has no encryption and no
block-cipher modes.

## Running the tests

```
pip install -e ".[test]"
pytest
```