"""
Rootpin Root Table Audit — curation checks for trusted root tables.

Walks a table of (subject, public key hex) entries and reports every
problem instead of stopping at the first one, so a maintainer can fix a
root update in a single pass before it is redeployed.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple, Union

from rootpin.registry import TrustedRoot, check_key_hex

# Leading byte of the key encodings found in pinned roots
_ENCODING_PREFIXES = {
    "30": "rsa",    # DER SEQUENCE (RSAPublicKey)
    "04": "ec",     # uncompressed EC point
}


@dataclass
class AuditFinding:
    """A single problem found in a root table."""
    index: int
    subject: str
    severity: str           # error, warning
    code: str
    message: str


@dataclass
class AuditResult:
    """Result of auditing a root table."""
    source: str
    entry_count: int
    findings: List[AuditFinding] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "warning")

    @property
    def ok(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> Dict:
        return {
            "source": self.source,
            "entry_count": self.entry_count,
            "ok": self.ok,
            "findings": [vars(f) for f in self.findings],
        }


def key_encoding(public_key_hex: str) -> str:
    """Classify a key by its leading byte: "rsa", "ec" or "unknown". Display only."""
    return _ENCODING_PREFIXES.get(public_key_hex[:2].upper(), "unknown")


def _error_code(reason: str) -> str:
    if reason.startswith("empty"):
        return "empty"
    if reason.startswith("odd"):
        return "odd_length"
    if "uppercase" in reason:
        return "lowercase"
    return "not_hex"


def audit_roots(
    roots: Iterable[Union[TrustedRoot, Tuple[str, str]]],
    source: str = "bundled",
    file_errors: Iterable[str] = (),
) -> AuditResult:
    """
    Audit a root table for curation mistakes.

    Args:
        roots: TrustedRoot entries or (subject, public_key_hex) tuples
        source: Label for the table (file path or "bundled")
        file_errors: File-level problems (version, root_count), reported
            as errors with index -1

    Returns:
        AuditResult listing errors (entry would be rejected by the
        registry) and warnings (entry is accepted but suspicious)
    """
    result = AuditResult(source=source, entry_count=0)
    for message in file_errors:
        result.findings.append(AuditFinding(-1, "", "error", "file", message))
    first_seen: Dict[str, int] = {}

    for index, root in enumerate(roots):
        if isinstance(root, TrustedRoot):
            subject, key_hex = root.subject, root.public_key_hex
        else:
            subject, key_hex = root
        result.entry_count += 1

        reason = check_key_hex(key_hex)
        if reason:
            result.findings.append(AuditFinding(
                index, subject, "error", _error_code(reason), reason,
            ))
            continue

        if key_hex in first_seen:
            result.findings.append(AuditFinding(
                index, subject, "warning", "duplicate",
                f"same key as entry #{first_seen[key_hex]}",
            ))
        else:
            first_seen[key_hex] = index

        if key_encoding(key_hex) == "unknown":
            result.findings.append(AuditFinding(
                index, subject, "warning", "unknown_encoding",
                f"unexpected leading byte {key_hex[:2]}",
            ))

    return result
