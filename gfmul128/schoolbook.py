"""Bit-by-bit (schoolbook) multiplication in GF(2^128)."""

from __future__ import annotations

from gfmul128.shift import _as_block, _to_block, _to_int, _x8_bbe, _x8_lle, _x_bbe, _x_lle


def _powers(value: int, shift) -> list[int]:
    powers = [value]
    for _ in range(7):
        powers.append(shift(powers[-1]))
    return powers


def mul_lle(a: bytes, b: bytes) -> bytes:
    """Return the product of two lle blocks."""
    powers = _powers(_to_int(a), _x_lle)
    acc = 0
    for position, byte in enumerate(reversed(_as_block(b))):
        if position:
            acc = _x8_lle(acc)
        for bit, power in zip(range(7, -1, -1), powers):
            if byte >> bit & 1:
                acc ^= power
    return _to_block(acc)


def mul_bbe(a: bytes, b: bytes) -> bytes:
    """Return the product of two bbe blocks."""
    powers = _powers(_to_int(a), _x_bbe)
    acc = 0
    for position, byte in enumerate(_as_block(b)):
        if position:
            acc = _x8_bbe(acc)
        for bit, power in enumerate(powers):
            if byte >> bit & 1:
                acc ^= power
    return _to_block(acc)