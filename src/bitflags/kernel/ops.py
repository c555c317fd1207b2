"""
Kernel Ops: 32-bit flag arithmetic (SET, CLEAR, TOGGLE, HAS, NOT, BINARY)

Pure functions on plain ints. Every input is reduced to 32 bits before it is
combined, and every result fits in 32 bits.
"""

import operator

from ..core.registry import FLAG_MASK


# ============================================================================
# MASK (reduce to the 32-bit domain)
# ============================================================================

def mask32(value) -> int:
    """
    Reduce any integer-like value to its unsigned 32-bit pattern.

    Args:
        value: Anything operator.index() accepts (int, Flag, IntFlag member).

    Returns:
        int: value modulo 2**32. Negative ints map to their two's-complement
        pattern, so mask32(-1) == 0xFFFFFFFF.

    Raises:
        TypeError: If value is not integer-like.
    """
    return operator.index(value) & FLAG_MASK


# ============================================================================
# MUTATORS (OR / AND-NOT / XOR / NOT)
# ============================================================================

def set_bits(value, flag) -> int:
    """Bitwise OR: value | flag."""
    return mask32(value) | mask32(flag)


def clear_bits(value, flag) -> int:
    """
    Bitwise AND-NOT: value & ~flag.

    Clears every bit of flag, leaves all other bits untouched.
    """
    return mask32(value) & ~mask32(flag) & FLAG_MASK


def toggle_bits(value, flag) -> int:
    """Bitwise XOR: value ^ flag."""
    return mask32(value) ^ mask32(flag)


def complement(value) -> int:
    """32-bit NOT. complement(0) == 0xFFFFFFFF."""
    return ~mask32(value) & FLAG_MASK


# ============================================================================
# QUERY
# ============================================================================

def has_bits(value, flag) -> bool:
    """
    True iff every bit set in flag is also set in value.

    For a multi-bit flag all of its bits must be present. A zero flag is
    always contained.
    """
    flag = mask32(flag)
    return mask32(value) & flag == flag


# ============================================================================
# DISPLAY
# ============================================================================

def to_binary(value) -> str:
    """
    Render value in base 2, most significant set bit first.

    No prefix, no padding, no separators. to_binary(0) == "0".
    """
    return format(mask32(value), "b")
