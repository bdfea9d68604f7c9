"""
Rootpin - certificate pinning against a fixed set of trusted roots.

Rootpin answers one question for a TLS certificate validation callback:
is the public key of this chain's root certificate one of the pinned roots?

    from rootpin import is_trusted_key

    def on_verify(chain_public_keys):
        return is_trusted_key(chain_public_keys[-1])

It does not parse certificates or build chains; the TLS stack does that.
"""

__version__ = "0.1.0"

from rootpin.registry import (
    InvalidTrustedKeyError,
    RootpinError,
    TrustedRoot,
    TrustedRootRegistry,
    canonical_hex,
    get_registry,
    is_trusted_key,
    is_trusted_key_hex,
)

__all__ = [
    "__version__",
    "InvalidTrustedKeyError",
    "RootpinError",
    "TrustedRoot",
    "TrustedRootRegistry",
    "canonical_hex",
    "get_registry",
    "is_trusted_key",
    "is_trusted_key_hex",
]
