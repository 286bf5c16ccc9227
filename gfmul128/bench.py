"""Micro-benchmark of the GF(2^128) lle multipliers."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gfmul128.hybrid import Hybrid4K, Hybrid64K
from gfmul128.karatsuba import koa_lle
from gfmul128.schoolbook import mul_lle
from gfmul128.tables import build_4k_lle, build_64k_lle

DEFAULT_ROUNDS = 1_000_000
PREFIX = "gf128mul-bench"

KEY = bytes.fromhex("0123456789abcdef") + bytes.fromhex("fedcba9876543210")
MESSAGE = bytes.fromhex("0f1e2d3c4b5a6978") + bytes.fromhex("8070605040302010")

BENCHMARK_NAMES = ("school", "koa", "lut-4k", "lut-64k", "hybrid-4k", "hybrid-64k")


@dataclass(frozen=True)
class BenchResult:
    """Timing of one multiplier over a number of rounds."""

    name: str
    total_ns: int
    rounds: int
    product: bytes

    @property
    def ns_per_op(self) -> int:
        """Whole nanoseconds per multiplication."""
        return self.total_ns // self.rounds


def _repeat(operation: Callable[[], bytes], rounds: int) -> bytes:
    product = b""
    for _ in range(rounds):
        product = operation()
    return product


def _time(name: str, operation: Callable[[], bytes], rounds: int) -> BenchResult:
    start = time.perf_counter_ns()
    product = _repeat(operation, rounds)
    elapsed = time.perf_counter_ns() - start
    return BenchResult(name, elapsed, rounds, product)


def _time_lut64k(rounds: int) -> BenchResult:
    # The 64 KB table is built inside the timed region, as its setup cost
    # is part of what this variant measures.
    start = time.perf_counter_ns()
    table = build_64k_lle(KEY)
    product = _repeat(lambda: table.multiply(MESSAGE), rounds)
    elapsed = time.perf_counter_ns() - start
    return BenchResult("lut-64k", elapsed, rounds, product)


def run_benchmarks(rounds: int = DEFAULT_ROUNDS) -> list[BenchResult]:
    """Time every multiplier over ``rounds`` multiplications of a fixed message by a fixed key."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise TypeError(f"rounds must be an integer, not {type(rounds).__name__}")
    if rounds < 1:
        raise ValueError(f"rounds must be positive, got {rounds}")

    table_4k = build_4k_lle(KEY)
    hybrid_4k = Hybrid4K(KEY)
    hybrid_64k = Hybrid64K(KEY)

    return [
        _time("school", lambda: mul_lle(MESSAGE, KEY), rounds),
        _time("koa", lambda: koa_lle(MESSAGE, KEY), rounds),
        _time("lut-4k", lambda: table_4k.multiply(MESSAGE), rounds),
        _time_lut64k(rounds),
        _time("hybrid-4k", lambda: hybrid_4k.multiply(MESSAGE), rounds),
        _time("hybrid-64k", lambda: hybrid_64k.multiply(MESSAGE), rounds),
    ]


def format_result(result: BenchResult) -> str:
    """Render one result as a report line."""
    return f"{PREFIX}: {result.name:<13}{result.total_ns} ns  ({result.ns_per_op} ns/op)"


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark and print one line per multiplier."""
    parser = argparse.ArgumentParser(prog="gfmul128-bench", description=__doc__)
    parser.add_argument(
        "-n",
        "--rounds",
        type=_positive_int,
        default=DEFAULT_ROUNDS,
        help=f"multiplications per multiplier (default {DEFAULT_ROUNDS})",
    )
    args = parser.parse_args(argv)

    print(f"{PREFIX}: Starting benchmark with {args.rounds} iterations")
    for result in run_benchmarks(args.rounds):
        print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())