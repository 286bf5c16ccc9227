"""Lookup-table multipliers by a fixed element (4 KB and 64 KB variants)."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import reduce
from operator import xor

from gfmul128.shift import _as_block, _to_block, _to_int, _x8_bbe, _x8_lle, _x_bbe, _x_lle

_POWERS_OF_TWO = (128, 64, 32, 16, 8, 4, 2, 1)


class BitOrder(enum.Enum):
    """Bit and byte order of the blocks a table works on."""

    LLE = "lle"
    BBE = "bbe"


def _fill(entries: list[int]) -> tuple[int, ...]:
    """Complete a table whose power-of-two slots are set by XOR combination."""
    j = 2
    while j < 256:
        for k in range(1, j):
            entries[j + k] = entries[j] ^ entries[k]
        j *= 2
    return tuple(entries)


def _lle_powers(g: int) -> list[int]:
    entries = [0] * 256
    entries[128] = g
    for j in _POWERS_OF_TWO[1:]:
        entries[j] = _x_lle(entries[j + j])
    return entries


def _bbe_powers(g: int) -> list[int]:
    entries = [0] * 256
    entries[1] = g
    for j in reversed(_POWERS_OF_TWO[1:]):
        entries[j + j] = _x_bbe(entries[j])
    return entries


def _next_powers(previous: tuple[int, ...], shift) -> list[int]:
    entries = [0] * 256
    for j in _POWERS_OF_TWO:
        entries[j] = shift(previous[j])
    return entries


@dataclass(frozen=True)
class Table4K:
    """256 byte multiples of a fixed element."""

    order: BitOrder
    entries: tuple[int, ...] = field(repr=False)

    def multiply(self, a: bytes) -> bytes:
        """Return ``a`` times the table's element."""
        data = _as_block(a)
        entries = self.entries
        if self.order is BitOrder.LLE:
            acc = entries[data[15]]
            for byte in reversed(data[:15]):
                acc = _x8_lle(acc) ^ entries[byte]
        else:
            acc = entries[data[0]]
            for byte in data[1:]:
                acc = _x8_bbe(acc) ^ entries[byte]
        return _to_block(acc)


@dataclass(frozen=True)
class Table64K:
    """Sixteen 4 KB tables, one per byte position."""

    order: BitOrder
    tables: tuple[tuple[int, ...], ...] = field(repr=False)

    def multiply(self, a: bytes) -> bytes:
        """Return ``a`` times the table's element."""
        data = _as_block(a)
        ordered = data if self.order is BitOrder.LLE else reversed(data)
        return _to_block(
            reduce(xor, (table[byte] for table, byte in zip(self.tables, ordered)), 0)
        )


def build_4k_lle(g: bytes) -> Table4K:
    """Build a 4 KB table for multiplying lle blocks by ``g``."""
    return Table4K(BitOrder.LLE, _fill(_lle_powers(_to_int(g))))


def build_4k_bbe(g: bytes) -> Table4K:
    """Build a 4 KB table for multiplying bbe blocks by ``g``."""
    return Table4K(BitOrder.BBE, _fill(_bbe_powers(_to_int(g))))


def _build_64k(first: list[int], shift) -> tuple[tuple[int, ...], ...]:
    tables = [_fill(first)]
    for _ in range(15):
        tables.append(_fill(_next_powers(tables[-1], shift)))
    return tuple(tables)


def build_64k_lle(g: bytes) -> Table64K:
    """Build a 64 KB table for multiplying lle blocks by ``g``."""
    return Table64K(BitOrder.LLE, _build_64k(_lle_powers(_to_int(g)), _x8_lle))


def build_64k_bbe(g: bytes) -> Table64K:
    """Build a 64 KB table for multiplying bbe blocks by ``g``."""
    return Table64K(BitOrder.BBE, _build_64k(_bbe_powers(_to_int(g)), _x8_bbe))