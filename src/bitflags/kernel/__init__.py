"""
Kernel: pure 32-bit flag arithmetic and its receipts.

Components:
  - ops: MASK, SET (OR), CLEAR (AND-NOT), TOGGLE (XOR), NOT, HAS, BINARY
"""

from .ops import (
    mask32,
    set_bits,
    clear_bits,
    toggle_bits,
    complement,
    has_bits,
    to_binary
)

__all__ = [
    # Ops
    "mask32",
    "set_bits",
    "clear_bits",
    "toggle_bits",
    "complement",
    "has_bits",
    "to_binary",

    # Receipts
    "flag_receipts",
]


def flag_receipts(section_label: str, fixtures: list[dict]) -> dict:
    """
    Generate receipts proving the flag algebra on fixed fixtures.

    Args:
        section_label: ASCII identifier (e.g., "flag-algebra").
        fixtures: List of dicts with keys:
            - "label": str (description)
            - "start": int (initial value)
            - "flags": list[int] (caller-defined flag constants)

    Returns:
        dict: Receipt digest. Payload keys:
            - "fixtures": per-fixture evidence
            - "set_has_ok", "set_idempotent_ok", "toggle_involution_ok",
              "clear_all_bits_ok", "set_all_bits_ok", "has_all_ok",
              "order_independent_ok": True iff the property holds for
              every fixture
    """
    from ..core import Receipts
    from ..flag import Flag

    receipts = Receipts(section_label)

    results = []
    for fix in fixtures:
        label = fix["label"]
        start = mask32(fix["start"])
        flags = [mask32(f) for f in fix["flags"]]

        combined = Flag.of(*flags)

        # set(a).has(a)
        set_has = all(Flag(start).set(f).has(f) for f in flags)

        # set(a) twice == set(a) once
        set_idempotent = all(
            Flag(start).set(f).set(f) == Flag(start).set(f) for f in flags
        )

        # toggle(a) twice restores the start value
        toggle_involution = all(
            Flag(start).toggle(f).toggle(f) == start for f in flags
        )

        # after clear_all_bits only zero is contained
        cleared = Flag(start).clear_all_bits()
        clear_all_bits = all(cleared.has(f) == (f == 0) for f in flags)

        # after set_all_bits everything is contained
        full = Flag(start).set_all_bits()
        set_all_bits = all(full.has(f) for f in flags)

        # has_all agrees with individual has
        probe = Flag(start)
        has_all = probe.has_all(*flags) == all(probe.has(f) for f in flags)

        # construction from a list ignores list order
        order_independent = Flag.of(*reversed(flags)) == combined

        results.append({
            "label": label,
            "start": start,
            "combined": int(combined),
            "combined_binary": str(combined),
            "start_binary": to_binary(start),
            "set_has": set_has,
            "set_idempotent": set_idempotent,
            "toggle_involution": toggle_involution,
            "clear_all_bits": clear_all_bits,
            "set_all_bits": set_all_bits,
            "has_all": has_all,
            "order_independent": order_independent,
        })

    receipts.put("fixtures", results)

    for prop in (
        "set_has", "set_idempotent", "toggle_involution", "clear_all_bits",
        "set_all_bits", "has_all", "order_independent"
    ):
        receipts.put(f"{prop}_ok", all(r[prop] for r in results))

    return receipts.digest()
