"""
Core foundation: parameter registry, hashing, receipts.

Frozen constants and deterministic evidence records.
"""

from .registry import param_registry, RegistryError, FLAG_WIDTH, FLAG_MASK
from .hashing import blake3_hash
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",
    "FLAG_WIDTH",
    "FLAG_MASK",

    # Hashing
    "blake3_hash",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
