"""
Rootpin roots file loader.

Reads a roots YAML file, validates it against rootpin.config.models and
turns it into TrustedRoot entries. Also renders a table back into the
same format so `rootpin export` can seed the next update.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

import yaml
from pydantic import ValidationError

from rootpin.config.models import RootsFile, RootsFileHeader, root_count_mismatch
from rootpin.registry import RootpinError, TrustedRoot

ROOTS_FILE_VERSION = 1


class RootsFileError(RootpinError):
    """Raised when a roots file cannot be read or fails validation."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid roots file {path}: {reason}")


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid')}" if location else err.get("msg", "invalid"))
    return "; ".join(parts)


def parse_roots(data, path: Path) -> List[TrustedRoot]:
    """Validate already-parsed YAML data and return its trusted roots."""
    if not isinstance(data, dict):
        raise RootsFileError(path, "top level must be a mapping")

    try:
        roots_file = RootsFile.model_validate(data)
    except ValidationError as e:
        raise RootsFileError(path, _format_validation_error(e)) from e

    return [
        TrustedRoot(subject=entry.subject, public_key_hex=entry.public_key)
        for entry in roots_file.roots
    ]


def load_roots_file(path: Path) -> List[TrustedRoot]:
    """
    Load trusted roots from a YAML roots file.

    Args:
        path: Path to the roots file

    Returns:
        List of TrustedRoot entries in file order

    Raises:
        RootsFileError: If the file is missing, is not valid YAML, or
            does not match the roots file schema
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RootsFileError(path, f"cannot read file ({e})") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RootsFileError(path, f"invalid YAML ({e})") from e

    return parse_roots(data, path)


def check_roots_header(data: dict) -> List[str]:
    """
    Check the file-level fields of parsed roots file data.

    Applies the same version and root_count rules as load_roots_file,
    but returns the problems instead of raising.
    """
    errors = []
    try:
        header = RootsFileHeader.model_validate({
            k: data[k] for k in ("version", "root_count") if k in data
        })
        root_count = header.root_count
    except ValidationError as e:
        errors.append(_format_validation_error(e))
        root_count = data.get("root_count", 0)

    roots = data.get("roots")
    if isinstance(root_count, int):
        mismatch = root_count_mismatch(
            root_count, len(roots) if isinstance(roots, list) else 0,
        )
        if mismatch:
            errors.append(mismatch)
    return errors


def load_raw_roots_file(path: Path) -> Tuple[List[TrustedRoot], List[str]]:
    """
    Load roots without schema validation, for auditing.

    Only the file structure is enforced. Keys are returned as written,
    including non-string values, so the audit can report every problem
    instead of stopping at the first.

    Returns:
        (roots, file_errors) where file_errors lists version and
        root_count problems that load_roots_file would reject
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise RootsFileError(path, str(e)) from e

    if not isinstance(data, dict) or not isinstance(data.get("roots"), list):
        raise RootsFileError(path, "expected a mapping with a 'roots' list")

    roots = []
    for entry in data["roots"]:
        if not isinstance(entry, dict):
            raise RootsFileError(path, "each root must be a mapping")
        key = entry.get("public_key", "")
        if isinstance(key, str):
            key = "".join(key.split())
        roots.append(TrustedRoot(
            subject=str(entry.get("subject") or ""),
            public_key_hex=key,
        ))
    return roots, check_roots_header(data)


def load_raw_roots(path: Path) -> List[TrustedRoot]:
    """Load roots without schema validation; see load_raw_roots_file."""
    return load_raw_roots_file(path)[0]


def dump_roots(roots: Iterable[TrustedRoot]) -> str:
    """Render trusted roots as roots file YAML."""
    entries = [
        {"subject": root.subject, "public_key": root.public_key_hex}
        for root in roots
    ]
    document = {
        "version": ROOTS_FILE_VERSION,
        "root_count": len(entries),
        "roots": entries,
    }
    return yaml.safe_dump(document, sort_keys=False, width=4096)
