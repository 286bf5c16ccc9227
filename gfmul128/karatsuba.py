"""Karatsuba-Ofman multiplication in GF(2^128)."""

from __future__ import annotations

from gfmul128.shift import _MASK64, _to_block, _to_int, _x8_bbe, _x8_lle

_MASK32 = (1 << 32) - 1


def _check_word(value: int, bits: int, name: str) -> None:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value}")


def clmul32(a: int, b: int) -> int:
    """Carry-less product of two 32-bit integers."""
    _check_word(a, 32, "a")
    _check_word(b, 32, "b")
    result = 0
    for i in range(32):
        if b >> i & 1:
            result ^= a << i
    return result


def _gf64mul(a: int, b: int) -> tuple[int, int]:
    a_hi, a_lo = a >> 32, a & _MASK32
    b_hi, b_lo = b >> 32, b & _MASK32
    p0 = clmul32(a_lo, b_lo)
    p2 = clmul32(a_hi, b_hi)
    p1 = clmul32(a_lo ^ a_hi, b_lo ^ b_hi) ^ p0 ^ p2
    low = p0 ^ ((p1 << 32) & _MASK64)
    high = p2 ^ (p1 >> 32)
    return high, low


def gf64mul_koa(a: int, b: int) -> tuple[int, int]:
    """Carry-less 64x64 product, returned as ``(high, low)`` 64-bit words."""
    _check_word(a, 64, "a")
    _check_word(b, 64, "b")
    return _gf64mul(a, b)


def _reduce(r3: int, r2: int, low: int, shift) -> int:
    upper = (r3 << 64) | r2
    for _ in range(15):
        upper = shift(upper)
    return low ^ upper


def _check_words(*words: int) -> None:
    for name, word in zip(("r3", "r2", "r1", "r0"), words):
        _check_word(word, 64, name)


def reduce_lle(r3: int, r2: int, r1: int, r0: int) -> bytes:
    """Fold a 256-bit product, given as four 64-bit words, into an lle block."""
    _check_words(r3, r2, r1, r0)
    return _to_block(_reduce(r3, r2, (r1 << 64) | r0, _x8_lle))


def reduce_bbe(r3: int, r2: int, r1: int, r0: int) -> bytes:
    """Fold a 256-bit product, given as four 64-bit words, into a bbe block."""
    _check_words(r3, r2, r1, r0)
    return _to_block(_reduce(r3, r2, (r0 << 64) | r1, _x8_bbe))


def _koa_words(a_hi: int, a_lo: int, b_hi: int, b_lo: int) -> tuple[int, int, int, int]:
    p0_hi, p0_lo = _gf64mul(a_lo, b_lo)
    p2_hi, p2_lo = _gf64mul(a_hi, b_hi)
    p1_hi, p1_lo = _gf64mul(a_lo ^ a_hi, b_lo ^ b_hi)
    p1_hi ^= p0_hi ^ p2_hi
    p1_lo ^= p0_lo ^ p2_lo
    return p2_hi, p1_hi ^ p2_lo, p0_hi ^ p1_lo, p0_lo


def _koa_lle_int(a: int, b: int) -> int:
    r3, r2, r1, r0 = _koa_words(a >> 64, a & _MASK64, b >> 64, b & _MASK64)
    return _reduce(r3, r2, (r1 << 64) | r0, _x8_lle)


def _koa_bbe_int(a: int, b: int) -> int:
    r3, r2, r1, r0 = _koa_words(a & _MASK64, a >> 64, b & _MASK64, b >> 64)
    return _reduce(r3, r2, (r0 << 64) | r1, _x8_bbe)


def koa_lle(a: bytes, b: bytes) -> bytes:
    """Karatsuba product of two lle blocks."""
    return _to_block(_koa_lle_int(_to_int(a), _to_int(b)))


def koa_bbe(a: bytes, b: bytes) -> bytes:
    """Karatsuba product of two bbe blocks."""
    return _to_block(_koa_bbe_int(_to_int(a), _to_int(b)))