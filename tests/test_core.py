"""
CORE VERIFICATION SUITE - registry, hashing, receipts

  ✓ param_registry() completeness and frozen values
  ✓ BLAKE3 digest shape and sensitivity
  ✓ Receipts ordering, duplicate keys, type validation
  ✓ Double-run determinism checker
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitflags.core import (
    param_registry,
    blake3_hash,
    Receipts,
    assert_double_run_equal,
    FLAG_WIDTH,
    FLAG_MASK,
    ReceiptError,
    DeterminismError,
)


# ═══════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════

def test_param_registry_completeness():
    reg = param_registry()
    required = {
        "version", "flag_width", "flag_mask", "string_base",
        "string_prefix", "string_padding", "hash_algo"
    }
    assert set(reg.keys()) == required


def test_param_registry_frozen_values():
    reg = param_registry()

    assert reg["flag_width"] == 32
    assert reg["flag_mask"] == 0xFFFFFFFF
    assert reg["string_base"] == 2
    assert reg["string_prefix"] == ""
    assert reg["hash_algo"] == "BLAKE3"

    assert FLAG_WIDTH == reg["flag_width"]
    assert FLAG_MASK == reg["flag_mask"]


def test_param_registry_is_fresh_each_call():
    reg = param_registry()
    reg["flag_width"] = 64
    assert param_registry()["flag_width"] == 32


# ═══════════════════════════════════════════════════════════════════════
# Hashing
# ═══════════════════════════════════════════════════════════════════════

def test_blake3_hash_shape():
    h = blake3_hash(b"flag")
    assert len(h) == 64
    assert h == h.lower()
    int(h, 16)


def test_blake3_hash_sensitivity():
    assert blake3_hash(b"10") == blake3_hash(b"10")
    assert blake3_hash(b"10") != blake3_hash(b"11")
    assert blake3_hash(b"") != blake3_hash(b"0")


# ═══════════════════════════════════════════════════════════════════════
# Receipts
# ═══════════════════════════════════════════════════════════════════════

def test_receipts_digest_structure():
    r = Receipts("test-digest")
    r.put("value", 0b1010)
    r.put("binary", "1010")
    digest = r.digest()

    assert digest["section"] == "test-digest"
    assert digest["version"] == param_registry()["version"]
    assert list(digest["payload"].keys()) == ["value", "binary"]
    assert len(digest["section_hash"]) == 64
    assert len(digest["param_registry_hash"]) == 64


def test_receipts_payload_changes_hash():
    a = Receipts("s")
    a.put("value", 1)
    b = Receipts("s")
    b.put("value", 2)
    assert a.digest()["section_hash"] != b.digest()["section_hash"]


def test_receipts_duplicate_key_rejected():
    r = Receipts("test-dup")
    r.put("k", 1)
    with pytest.raises(ReceiptError, match="Duplicate"):
        r.put("k", 2)


@pytest.mark.parametrize("bad", [
    1.5,
    [1, 2.0],
    {"nested": {"x": 0.1}},
    {1: "int key"},
    object(),
])
def test_receipts_forbidden_values(bad):
    r = Receipts("test-types")
    with pytest.raises(ReceiptError):
        r.put("bad", bad)


def test_receipts_allowed_values():
    r = Receipts("test-types")
    r.put("none", None)
    r.put("nested", {"bits": [1, 2, (3, True)], "name": "A"})
    assert r.digest()["payload"]["none"] is None


# ═══════════════════════════════════════════════════════════════════════
# Double run
# ═══════════════════════════════════════════════════════════════════════

def test_double_run_equal_passes():
    def build():
        r = Receipts("flag-set")
        r.put("value", 0b101010)
        return r

    assert_double_run_equal(build)


def test_double_run_mismatch_reports_first_key():
    calls = []

    def build():
        calls.append(1)
        r = Receipts("flaky")
        r.put("stable", 7)
        r.put("counter", len(calls))
        return r

    with pytest.raises(DeterminismError) as exc_info:
        assert_double_run_equal(build)

    err = exc_info.value
    assert err.section == "flaky"
    assert err.first_differing_key == "counter"
    assert (err.value_a, err.value_b) == (1, 2)
    assert err.hash_a != err.hash_b
