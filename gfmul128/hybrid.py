"""Multipliers combining lookup tables for the high bytes with Karatsuba for the low bytes."""

from __future__ import annotations

from functools import reduce
from operator import xor

from gfmul128.karatsuba import _koa_lle_int
from gfmul128.shift import _MASK64, _as_block, _to_block, _to_int, _x8_lle
from gfmul128.tables import _fill, _lle_powers, _next_powers, build_4k_lle


class Hybrid4K:
    """lle multiplier by a fixed element using one 4 KB table plus Karatsuba."""

    def __init__(self, g: bytes) -> None:
        self.table = build_4k_lle(g)

    def multiply(self, a: bytes) -> bytes:
        """Combine the table result for bytes 8-15 with a Karatsuba product for bytes 0-7."""
        data = _as_block(a)
        entries = self.table.entries
        acc = entries[data[15]]
        for byte in reversed(data[8:15]):
            acc = _x8_lle(acc) ^ entries[byte]

        low = data[:8]
        if any(low):
            lower = int.from_bytes(low, "little") << 64
            carried = acc >> 64
            acc = (acc & _MASK64) << 64
            acc ^= carried ^ _koa_lle_int(lower, entries[1])
        return _to_block(acc)


class Hybrid64K:
    """lle multiplier by a fixed element using eight 4 KB tables plus Karatsuba."""

    def __init__(self, g: bytes) -> None:
        self.g = _to_int(g)
        g_x64 = self.g
        for _ in range(8):
            g_x64 = _x8_lle(g_x64)
        tables = [_fill(_lle_powers(g_x64))]
        for _ in range(7):
            tables.append(_fill(_next_powers(tables[-1], _x8_lle)))
        self.tables = tuple(tables)

    def multiply(self, a: bytes) -> bytes:
        """Combine table lookups for bytes 8-15 with a Karatsuba product for bytes 0-7."""
        data = _as_block(a)
        upper = reduce(xor, (table[byte] for table, byte in zip(self.tables, data[8:])), 0)

        lower = int.from_bytes(data[:8], "little")
        if lower:
            lower = _koa_lle_int(lower, self.g)

        result = lower ^ ((upper & _MASK64) << 64)
        top = upper >> 64
        if top:
            folded = top << 64
            for _ in range(15):
                folded = _x8_lle(folded)
            result ^= folded
        return _to_block(result)