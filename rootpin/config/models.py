"""
Pydantic models for rootpin roots files.

A roots file carries an out-of-band update of the trusted root table:

    version: 1
    root_count: 2
    roots:
      - subject: "CN=DigiCert Global Root CA, ..."
        public_key: "3082010A..."

Duplicate keys are accepted here and reported by `rootpin audit`, so a
file with curation mistakes can still be inspected.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from rootpin.registry import check_key_hex


class RootEntry(BaseModel):
    """A single trusted root in a roots file."""
    subject: str = ""
    public_key: str

    @field_validator("public_key", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        # YAML folded scalars may carry line breaks inside long keys
        if isinstance(v, str):
            return "".join(v.split())
        return v

    @field_validator("public_key")
    @classmethod
    def validate_public_key(cls, v: str) -> str:
        reason = check_key_hex(v)
        if reason:
            raise ValueError(reason)
        return v


def root_count_mismatch(root_count: int, actual: int) -> Optional[str]:
    """Return the mismatch message when a declared root_count is wrong."""
    if root_count > 0 and actual != root_count:
        return (
            f"root_count ({root_count}) does not match "
            f"actual number of roots ({actual})"
        )
    return None


class RootsFileHeader(BaseModel):
    """File-level fields of a roots file."""
    version: int = Field(ge=1)
    root_count: int = 0


class RootsFile(RootsFileHeader):
    """Root model for a roots file."""
    roots: List[RootEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_root_count(self) -> "RootsFile":
        message = root_count_mismatch(self.root_count, len(self.roots))
        if message:
            raise ValueError(message)
        return self
