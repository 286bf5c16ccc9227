"""GF(2^128) multiplication by schoolbook, table, Karatsuba and hybrid methods, with a benchmark."""

__version__ = "0.1.0"

__all__ = ["bench", "hybrid", "karatsuba", "schoolbook", "shift", "tables"]