"""
Core Component: Parameter Registry

Frozen constants for the 32-bit flag type.
Width, mask and display format are defined here and nowhere else.

No environment leakage, no optionals.
"""

FLAG_WIDTH = 32
FLAG_MASK = (1 << FLAG_WIDTH) - 1  # 0xFFFFFFFF


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the flag kernel.

    Keys and values are JSON-serializable primitives.
    This registry is hashed into every receipt to prove parametric consistency.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing or the mask does not
            match the width.
    """
    registry = {
        "version": "1.0",

        # Fixed width; no other widths are supported
        "flag_width": FLAG_WIDTH,
        "flag_mask": FLAG_MASK,

        # Display string: base 2, no prefix, no padding
        "string_base": 2,
        "string_prefix": "",
        "string_padding": "none",

        # Hashing
        "hash_algo": "BLAKE3",
    }

    required_keys = {
        "version", "flag_width", "flag_mask", "string_base",
        "string_prefix", "string_padding", "hash_algo"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    if registry["flag_mask"] != (1 << registry["flag_width"]) - 1:
        raise RegistryError(
            f"flag_mask {registry['flag_mask']:#x} does not cover "
            f"flag_width {registry['flag_width']}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing, unexpected or inconsistent keys."""
    pass
