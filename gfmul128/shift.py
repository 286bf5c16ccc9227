"""Block helpers and multiplication by x in GF(2^128).

A block is 16 bytes. The three bit/byte orders are:

* ``lle`` - little-endian bits and bytes (GCM),
* ``bbe`` - big-endian bits and bytes (LRW),
* ``ble`` - big-endian bits, little-endian bytes (XTS).
"""

from __future__ import annotations

BLOCK_SIZE = 16

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

# Reduction term contributed by each bit (index = bit number) of the byte
# that is shifted out of the block.
_LLE_TERMS = (0x01C2, 0x0384, 0x0708, 0x0E10, 0x1C20, 0x3840, 0x7080, 0xE100)
_BBE_TERMS = (0x0087, 0x010E, 0x021C, 0x0438, 0x0870, 0x10E0, 0x21C0, 0x4380)


def _reduction_table(terms: tuple[int, ...]) -> tuple[int, ...]:
    table = []
    for index in range(256):
        value = 0
        for bit, term in enumerate(terms):
            if index >> bit & 1:
                value ^= term
        table.append(value)
    return tuple(table)


_TABLE_LLE = _reduction_table(_LLE_TERMS)
_TABLE_BBE = _reduction_table(_BBE_TERMS)


def _as_block(block: bytes | bytearray | memoryview) -> bytes:
    if not isinstance(block, (bytes, bytearray, memoryview)):
        raise TypeError(f"block must be bytes-like, not {type(block).__name__}")
    data = bytes(block)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(data)}")
    return data


def _to_int(block: bytes | bytearray | memoryview) -> int:
    return int.from_bytes(_as_block(block), "big")


def _to_block(value: int) -> bytes:
    return value.to_bytes(BLOCK_SIZE, "big")


def _x_lle(value: int) -> int:
    return (value >> 1) ^ (_TABLE_LLE[(value & 1) << 7] << 112)


def _x_bbe(value: int) -> int:
    return ((value << 1) & _MASK128) ^ _TABLE_BBE[value >> 127]


def _x8_lle(value: int) -> int:
    return (value >> 8) ^ (_TABLE_LLE[value & 0xFF] << 112)


def _x8_bbe(value: int) -> int:
    return ((value << 8) & _MASK128) ^ _TABLE_BBE[value >> 120]


def xor_blocks(a: bytes, b: bytes) -> bytes:
    """Return the bytewise XOR of two blocks."""
    return _to_block(_to_int(a) ^ _to_int(b))


def mul_x_lle(x: bytes) -> bytes:
    """Multiply an lle block by x."""
    return _to_block(_x_lle(_to_int(x)))


def mul_x_bbe(x: bytes) -> bytes:
    """Multiply a bbe block by x."""
    return _to_block(_x_bbe(_to_int(x)))


def mul_x_ble(x: bytes) -> bytes:
    """Multiply a ble block by x (the XTS tweak update)."""
    value = int.from_bytes(_as_block(x), "little")
    value = ((value << 1) & _MASK128) ^ _TABLE_BBE[value >> 127]
    return value.to_bytes(BLOCK_SIZE, "little")


def mul_x8_lle(x: bytes) -> bytes:
    """Multiply an lle block by x^8."""
    return _to_block(_x8_lle(_to_int(x)))


def mul_x8_bbe(x: bytes) -> bytes:
    """Multiply a bbe block by x^8."""
    return _to_block(_x8_bbe(_to_int(x)))