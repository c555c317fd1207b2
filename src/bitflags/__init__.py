"""
bitflags: a 32-bit set of boolean flags.

One value type (Flag) with set, clear, toggle and has operations, their
variadic forms, and a binary display string.
"""

__version__ = "1.0.0"

from .flag import Flag, new, new_all

__all__ = [
    "Flag",
    "new",
    "new_all",
]
