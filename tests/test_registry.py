#!/usr/bin/env python3
"""
Tests for the trusted root registry.

Verifies that:
- Every bundled root is trusted via both the byte and the hex query
- Altered, empty and foreign keys are rejected
- The hex query matches verbatim (no case folding or separators)
- Malformed tables are rejected when the registry is built
- The process-wide registry is built once and shared
"""
import logging
import threading

import pytest

from rootpin import (
    InvalidTrustedKeyError,
    RootpinError,
    TrustedRoot,
    TrustedRootRegistry,
    canonical_hex,
    get_registry,
    is_trusted_key,
    is_trusted_key_hex,
)


pytestmark = pytest.mark.core


# --- Canonical encoding ---


class TestCanonicalHex:
    def test_uppercase_no_separators(self):
        assert canonical_hex(b"\x0a\xbc\xff\x00") == "0ABCFF00"

    def test_empty(self):
        assert canonical_hex(b"") == ""

    def test_accepts_bytearray_and_memoryview(self):
        assert canonical_hex(bytearray(b"\xde\xad")) == "DEAD"
        assert canonical_hex(memoryview(b"\xbe\xef")) == "BEEF"


# --- Bundled table ---


class TestBundledRoots:
    def test_table_size(self, bundled_roots):
        assert len(bundled_roots) == 18
        assert len(get_registry()) == 18

    def test_every_root_trusted_by_hex(self, bundled_roots):
        for subject, key_hex in bundled_roots:
            assert is_trusted_key_hex(key_hex), subject

    def test_every_root_trusted_by_bytes(self, bundled_roots):
        for subject, key_hex in bundled_roots:
            assert is_trusted_key(bytes.fromhex(key_hex)), subject

    def test_mixed_encodings_present(self, bundled_roots):
        prefixes = {key_hex[:2] for _, key_hex in bundled_roots}
        assert prefixes == {"30", "04"}

    def test_digicert_global_root(self, digicert_global_hex):
        key = bytes.fromhex(digicert_global_hex)
        assert is_trusted_key(key)
        assert get_registry().find(key).subject.startswith("CN=DigiCert Global Root CA")

    def test_last_byte_altered(self, digicert_global_hex):
        key = bytearray.fromhex(digicert_global_hex)
        key[-1] ^= 0x01
        assert not is_trusted_key(bytes(key))
        assert not is_trusted_key_hex(canonical_hex(key))

    def test_truncated_key(self, digicert_global_hex):
        key = bytes.fromhex(digicert_global_hex)
        assert not is_trusted_key(key[:-1])
        assert not is_trusted_key(key + b"\x00")


# --- Fail-closed queries ---


class TestQueries:
    def test_empty_inputs(self):
        assert is_trusted_key(b"") is False
        assert is_trusted_key_hex("") is False

    def test_lowercase_hex_rejected_but_bytes_accepted(self, digicert_global_hex):
        lower = digicert_global_hex.lower()
        assert is_trusted_key_hex(lower) is False
        assert is_trusted_key(bytes.fromhex(lower)) is True

    @pytest.mark.parametrize("transform", [
        lambda h: "0x" + h,
        lambda h: ":".join(h[i:i + 2] for i in range(0, len(h), 2)),
        lambda h: " " + h,
        lambda h: h + "\n",
    ])
    def test_non_canonical_hex_rejected(self, digicert_global_hex, transform):
        assert is_trusted_key_hex(transform(digicert_global_hex)) is False

    @pytest.mark.parametrize("value", [None, 42, 3.5, ["30"], object()])
    def test_wrong_types_return_false(self, value):
        assert is_trusted_key(value) is False
        assert is_trusted_key_hex(value) is False

    def test_str_passed_to_byte_query(self, digicert_global_hex):
        assert is_trusted_key(digicert_global_hex) is False

    def test_bytes_passed_to_hex_query(self, digicert_global_hex):
        assert is_trusted_key_hex(digicert_global_hex.encode()) is False

    def test_bytearray_and_memoryview(self, digicert_global_hex):
        key = bytes.fromhex(digicert_global_hex)
        assert is_trusted_key(bytearray(key))
        assert is_trusted_key(memoryview(key))

    def test_released_memoryview(self, digicert_global_hex):
        view = memoryview(bytes.fromhex(digicert_global_hex))
        view.release()
        assert is_trusted_key(view) is False
        assert get_registry().find(view) is None
        assert view not in get_registry()

    def test_repeated_calls_stable(self, digicert_global_hex):
        key = bytes.fromhex(digicert_global_hex)
        results = {is_trusted_key(key) for _ in range(50)}
        assert results == {True}

    def test_contains(self, digicert_global_hex):
        registry = get_registry()
        assert digicert_global_hex in registry
        assert bytes.fromhex(digicert_global_hex) in registry
        assert digicert_global_hex.lower() not in registry
        assert None not in registry


class TestChain:
    def test_root_is_last(self, digicert_global_hex):
        root = bytes.fromhex(digicert_global_hex)
        registry = get_registry()
        assert registry.is_trusted_chain([b"\x01leaf", b"\x02intermediate", root])
        assert not registry.is_trusted_chain([root, b"\x02intermediate"])

    def test_empty_chain(self):
        assert get_registry().is_trusted_chain([]) is False

    def test_find_unknown(self):
        assert get_registry().find(b"\x30\x00") is None
        assert get_registry().find("30") is None


# --- Construction ---


class TestRegistryConstruction:
    def test_accepts_tuples_and_roots(self):
        registry = TrustedRootRegistry([
            ("CN=A", "0A0B"),
            TrustedRoot(subject="CN=B", public_key_hex="0C0D"),
        ])
        assert len(registry) == 2
        assert registry.is_trusted(b"\x0a\x0b")
        assert registry.is_trusted_hex("0C0D")
        assert [r.subject for r in registry.roots] == ["CN=A", "CN=B"]

    def test_empty_registry_trusts_nothing(self):
        registry = TrustedRootRegistry([])
        assert len(registry) == 0
        assert not registry.is_trusted(b"")
        assert not registry.is_trusted_hex("")

    @pytest.mark.parametrize("key_hex,reason", [
        ("", "empty"),
        ("ABC", "odd"),
        ("0a0b", "uppercase"),
        ("ZZ", "non-hex"),
        ("0A-B", "non-hex"),
    ])
    def test_rejects_malformed(self, key_hex, reason):
        with pytest.raises(InvalidTrustedKeyError) as exc_info:
            TrustedRootRegistry([("CN=Good", "AABB"), ("CN=Bad", key_hex)])
        assert exc_info.value.index == 1
        assert exc_info.value.subject == "CN=Bad"
        assert reason in exc_info.value.reason

    def test_rejects_non_string_key(self):
        with pytest.raises(InvalidTrustedKeyError, match="expected str"):
            TrustedRootRegistry([("CN=Bytes", b"\xaa")])

    def test_error_hierarchy(self):
        assert issubclass(InvalidTrustedKeyError, RootpinError)

    def test_duplicates_collapsed_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="rootpin.registry"):
            registry = TrustedRootRegistry([
                ("CN=First", "AABB"),
                ("CN=Second", "AABB"),
            ])
        assert len(registry) == 1
        assert registry.roots[0].subject == "CN=First"
        assert "Duplicate trusted root" in caplog.text

    def test_trusted_root_public_key(self):
        root = TrustedRoot(subject="CN=A", public_key_hex="00FF")
        assert root.public_key == b"\x00\xff"


# --- Process-wide registry ---


class TestDefaultRegistry:
    def test_singleton(self, fresh_registry):
        first = fresh_registry.get_registry()
        assert fresh_registry.get_registry() is first

    def test_concurrent_first_use(self, fresh_registry):
        seen = []

        def worker():
            seen.append(fresh_registry.get_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 8
        assert all(r is seen[0] for r in seen)
