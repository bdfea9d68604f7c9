"""Pytest configuration and fixtures for rootpin tests."""

import pytest

from rootpin.config.trusted_roots import TRUSTED_ROOTS


@pytest.fixture
def bundled_roots():
    """The bundled (subject, public_key_hex) table."""
    return TRUSTED_ROOTS


@pytest.fixture
def digicert_global_hex():
    """Canonical hex of the DigiCert Global Root CA key."""
    for subject, key_hex in TRUSTED_ROOTS:
        if subject.startswith("CN=DigiCert Global Root CA,"):
            return key_hex
    raise AssertionError("DigiCert Global Root CA missing from bundled table")


@pytest.fixture
def fresh_registry(monkeypatch):
    """Force the process-wide registry to be rebuilt on next use."""
    import rootpin.registry as registry_mod
    monkeypatch.setattr(registry_mod, "_registry", None)
    return registry_mod


@pytest.fixture
def roots_file(tmp_path):
    """Write a roots YAML file and return its path."""
    def _write(content: str, name: str = "roots.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
