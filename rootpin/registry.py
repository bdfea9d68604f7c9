#!/usr/bin/env python3
"""
Rootpin Trusted Root Registry

Membership check for root certificate public keys. Meant to be called from
a TLS client's certificate validation callback, after the TLS stack has
built and validated the chain:

    def verify_callback(chain_public_keys):
        return is_trusted_key(chain_public_keys[-1])

Canonical form: keys are compared as uppercase hex with no separators.

- is_trusted(bytes): the registry canonicalizes the bytes itself.
- is_trusted_hex(str): the string is matched verbatim. Callers must already
  use the canonical form; lowercase or separated hex does NOT match.

Queries never raise. Anything that is not a trusted key is rejected, so
callers can fail closed on a plain False.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789ABCDEF")
_BYTES_TYPES = (bytes, bytearray, memoryview)


class RootpinError(Exception):
    """Base class for rootpin errors."""


class InvalidTrustedKeyError(RootpinError):
    """Raised when a registry is built from a malformed trusted key entry."""

    def __init__(self, index: int, reason: str, subject: str = ""):
        self.index = index
        self.reason = reason
        self.subject = subject
        label = f" ({subject})" if subject else ""
        super().__init__(f"Trusted root #{index}{label}: {reason}")


@dataclass(frozen=True)
class TrustedRoot:
    """A pinned root certificate public key."""
    subject: str
    public_key_hex: str

    @property
    def public_key(self) -> bytes:
        return bytes.fromhex(self.public_key_hex)


def canonical_hex(data: Union[bytes, bytearray, memoryview]) -> str:
    """Encode raw bytes as uppercase hex with no separators."""
    return bytes(data).hex().upper()


def check_key_hex(key_hex: str) -> Optional[str]:
    """Return the reason a hex string is not a valid canonical key, or None."""
    if not isinstance(key_hex, str):
        return f"expected str, got {type(key_hex).__name__}"
    if not key_hex:
        return "empty public key"
    if len(key_hex) % 2:
        return f"odd number of hex digits ({len(key_hex)})"
    if not set(key_hex) <= _HEX_DIGITS:
        if set(key_hex.upper()) <= _HEX_DIGITS:
            return "hex must be uppercase"
        return "contains non-hex characters"
    return None


class TrustedRootRegistry:
    """
    Immutable set of trusted root public keys.

    The registry is built once and never mutated, so it can be shared by
    any number of threads without locking. Malformed entries are rejected
    when the registry is built, never when it is queried.
    """

    def __init__(self, roots: Iterable[Union[TrustedRoot, Tuple[str, str]]]):
        entries: List[TrustedRoot] = []
        by_key = {}

        for index, root in enumerate(roots):
            if not isinstance(root, TrustedRoot):
                subject, key_hex = root
                root = TrustedRoot(subject=subject, public_key_hex=key_hex)

            reason = check_key_hex(root.public_key_hex)
            if reason:
                raise InvalidTrustedKeyError(index, reason, root.subject)

            if root.public_key_hex in by_key:
                logger.warning(
                    "Duplicate trusted root #%d (%s), same key as %s",
                    index, root.subject, by_key[root.public_key_hex].subject,
                )
                continue

            by_key[root.public_key_hex] = root
            entries.append(root)

        self._roots: Tuple[TrustedRoot, ...] = tuple(entries)
        self._by_key = by_key
        self._keys: FrozenSet[str] = frozenset(by_key)
        logger.debug("Trusted root registry built with %d keys", len(self._keys))

    @classmethod
    def from_file(cls, path: Path) -> "TrustedRootRegistry":
        """Build a registry from a roots YAML file (see rootpin.config.loader)."""
        from rootpin.config.loader import load_roots_file
        return cls(load_roots_file(path))

    @property
    def roots(self) -> Tuple[TrustedRoot, ...]:
        return self._roots

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, item) -> bool:
        if isinstance(item, str):
            return self.is_trusted_hex(item)
        return self.is_trusted(item)

    @staticmethod
    def _canonical_or_none(public_key) -> Optional[str]:
        if not isinstance(public_key, _BYTES_TYPES):
            return None
        try:
            return canonical_hex(public_key)
        except ValueError:
            # released memoryview
            return None

    def is_trusted(self, public_key: bytes) -> bool:
        """
        Check raw public key bytes against the trusted set.

        Args:
            public_key: Key bytes as taken from the root certificate.

        Returns:
            True only if the canonical hex of the bytes is a trusted key.
            Empty input and non-bytes input return False.
        """
        key_hex = self._canonical_or_none(public_key)
        return key_hex is not None and key_hex in self._keys

    def is_trusted_hex(self, public_key_hex: str) -> bool:
        """
        Check an already-encoded key against the trusted set.

        The string is compared exactly as given: uppercase hex, no
        separators, no 0x prefix. It is not normalized, so any other
        spelling of a trusted key returns False.
        """
        if not isinstance(public_key_hex, str):
            return False
        return public_key_hex in self._keys

    def is_trusted_chain(self, public_keys: Sequence[bytes]) -> bool:
        """Check the root (last) key of a leaf-to-root ordered chain."""
        if not public_keys:
            return False
        return self.is_trusted(public_keys[-1])

    def find(self, public_key: bytes) -> Optional[TrustedRoot]:
        """Return the trusted root entry for the given key bytes, if any."""
        key_hex = self._canonical_or_none(public_key)
        return self._by_key.get(key_hex) if key_hex is not None else None


# Process-wide registry, built from the bundled table on first use
_registry: Optional[TrustedRootRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> TrustedRootRegistry:
    """Get the singleton registry of bundled trusted roots."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from rootpin.config.trusted_roots import TRUSTED_ROOTS
                _registry = TrustedRootRegistry(TRUSTED_ROOTS)
    return _registry


def is_trusted_key(public_key: bytes) -> bool:
    """Check raw root public key bytes against the bundled trusted roots."""
    return get_registry().is_trusted(public_key)


def is_trusted_key_hex(public_key_hex: str) -> bool:
    """Check a canonical (uppercase, unseparated) hex key against the bundled trusted roots."""
    return get_registry().is_trusted_hex(public_key_hex)
