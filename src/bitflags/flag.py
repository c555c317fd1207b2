"""
Flag: a mutable 32-bit set of boolean flags.

Flag constants are caller-defined, usually successive powers of two:

    >>> FLAG_A, FLAG_B, FLAG_C = 1 << 0, 1 << 1, 1 << 2
    >>> f = new()
    >>> str(f.set(FLAG_B))
    '10'
    >>> f.clear_all_bits().toggle_all(FLAG_C, FLAG_A).has(FLAG_A)
    True

Mutators work in place and return self so calls chain. Operators |, &, ^
and ~ leave both operands alone and return a new Flag.

The variadic *_all(*flags) forms behave exactly like calling the singular
form once per flag in order.
"""

from .core.registry import FLAG_MASK
from .kernel.ops import (
    mask32,
    set_bits,
    clear_bits,
    toggle_bits,
    complement,
    has_bits,
    to_binary,
)


class Flag:
    """
    32 independent on/off values packed into one unsigned 32-bit integer.

    Any integer-like argument (int, Flag, IntFlag member) is accepted as a
    flag and reduced to 32 bits. Multi-bit arguments are legal everywhere.
    Not safe for unsynchronized mutation from several threads.
    """

    __slots__ = ("_value",)

    def __init__(self, value=0):
        self._value = mask32(value)

    @classmethod
    def of(cls, *flags) -> "Flag":
        """Return a Flag with every given flag set (OR of all, from zero)."""
        return cls().set_all(*flags)

    @property
    def value(self) -> int:
        return self._value

    def copy(self) -> "Flag":
        return self.__class__(self._value)

    # ------------------------------------------------------------------
    # set
    # ------------------------------------------------------------------

    def set(self, flag) -> "Flag":
        """Turn on every bit of flag."""
        self._value = set_bits(self._value, flag)
        return self

    def set_all(self, *flags) -> "Flag":
        """Variadic form of set()."""
        value = self._value
        for flag in _normalize(flags):
            value = set_bits(value, flag)
        self._value = value
        return self

    def set_all_bits(self) -> "Flag":
        """Turn on all 32 bits (value becomes 0xFFFFFFFF)."""
        self._value = FLAG_MASK
        return self

    # ------------------------------------------------------------------
    # toggle
    # ------------------------------------------------------------------

    def toggle(self, flag) -> "Flag":
        """Flip every bit of flag: off bits turn on, on bits turn off."""
        self._value = toggle_bits(self._value, flag)
        return self

    def toggle_all(self, *flags) -> "Flag":
        """Variadic form of toggle()."""
        value = self._value
        for flag in _normalize(flags):
            value = toggle_bits(value, flag)
        self._value = value
        return self

    def toggle_all_bits(self) -> "Flag":
        self._value = complement(self._value)
        return self

    # ------------------------------------------------------------------
    # clear
    # ------------------------------------------------------------------

    def clear(self, flag) -> "Flag":
        """Turn off every bit of flag."""
        self._value = clear_bits(self._value, flag)
        return self

    def clear_all(self, *flags) -> "Flag":
        """Variadic form of clear()."""
        value = self._value
        for flag in _normalize(flags):
            value = clear_bits(value, flag)
        self._value = value
        return self

    def clear_all_bits(self) -> "Flag":
        self._value = 0
        return self

    # ------------------------------------------------------------------
    # query
    # ------------------------------------------------------------------

    def has(self, flag) -> bool:
        """
        True iff every bit of flag is on.

        Example:
            >>> Flag().set(0b10).has(0b10)
            True
            >>> Flag(0b10).has(0b11)
            False
        """
        return has_bits(self._value, flag)

    def has_all(self, *flags) -> bool:
        """True iff has() holds for each flag. Stops at the first miss."""
        return all(self.has(flag) for flag in flags)

    def __contains__(self, flag) -> bool:
        return self.has(flag)

    # ------------------------------------------------------------------
    # display
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Binary rendering with no prefix and no padding."""
        return to_binary(self._value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0b{self.to_string()})"

    # ------------------------------------------------------------------
    # int protocol and comparison
    # ------------------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other) -> bool:
        if isinstance(other, Flag):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == mask32(other)
        return NotImplemented

    # Mutable value; equal Flags may not stay equal
    __hash__ = None

    # ------------------------------------------------------------------
    # operators
    # ------------------------------------------------------------------

    def __or__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        return self.__class__(set_bits(self._value, other))

    __ror__ = __or__

    def __and__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        return self.__class__(self._value & mask32(other))

    __rand__ = __and__

    def __xor__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        return self.__class__(toggle_bits(self._value, other))

    __rxor__ = __xor__

    def __invert__(self) -> "Flag":
        return self.__class__(complement(self._value))

    def __ior__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        return self.set(other)

    def __iand__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        self._value &= mask32(other)
        return self

    def __ixor__(self, other) -> "Flag":
        if not _is_flag_like(other):
            return NotImplemented
        return self.toggle(other)


def new() -> Flag:
    """Return a Flag with all bits off."""
    return Flag()


def new_all(*flags) -> Flag:
    """Return a Flag with all the given flags on."""
    return Flag.of(*flags)


def _is_flag_like(value) -> bool:
    return isinstance(value, (Flag, int))


def _normalize(flags) -> list[int]:
    # Every argument is validated before any is applied, so a TypeError
    # leaves the Flag unchanged.
    return [mask32(flag) for flag in flags]
