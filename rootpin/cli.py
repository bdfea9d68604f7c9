#!/usr/bin/env python3
"""
Rootpin CLI - maintenance tool for the pinned root table.

Usage:
    rootpin check HEX [--exact] [--roots FILE] [--json]
    rootpin check --file KEY.der [--roots FILE] [--json]
    rootpin list [--roots FILE] [--json]
    rootpin audit [--roots FILE] [--json]
    rootpin export [--output FILE]
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from rootpin import __version__
from rootpin.cli_helpers import (
    configure_logging,
    console,
    print_error,
    print_json,
    print_success,
    print_warning,
    shorten_key,
)
from rootpin.registry import RootpinError, TrustedRootRegistry, get_registry

logger = logging.getLogger(__name__)

_HEX_SEPARATORS = (" ", ":", "-", "\n", "\t")


def _load_registry(roots_path: Optional[str]) -> TrustedRootRegistry:
    """Bundled registry, or one built from a roots file. Exits on a bad file."""
    if not roots_path:
        return get_registry()
    try:
        return TrustedRootRegistry.from_file(Path(roots_path))
    except RootpinError as e:
        print_error(escape(str(e)), fix_hint="Run 'rootpin audit --roots FILE' for details")
        sys.exit(1)


def _decode_hex(text: str) -> Optional[bytes]:
    """Decode loosely formatted hex (separators, 0x prefix, any case)."""
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    for sep in _HEX_SEPARATORS:
        cleaned = cleaned.replace(sep, "")
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        return None


@click.group()
@click.version_option(version=__version__, prog_name="rootpin")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Rootpin - certificate pinning against a fixed set of trusted roots."""
    configure_logging(verbose)


@main.command("check")
@click.argument("key_hex", required=False)
@click.option("--file", "-f", "key_file", type=click.Path(exists=True, dir_okay=False),
              help="Read raw public key bytes from a file")
@click.option("--exact", is_flag=True,
              help="Match the hex string verbatim (no decoding or case folding)")
@click.option("--roots", "roots_path", type=click.Path(exists=True, dir_okay=False),
              help="Roots file to check against (default: bundled)")
@click.option("--json", "json_out", is_flag=True, help="Output as JSON")
def check(key_hex: Optional[str], key_file: Optional[str], exact: bool,
          roots_path: Optional[str], json_out: bool):
    """Check whether a root public key is trusted.

    Exit code 0 if trusted, 1 otherwise.
    """
    if bool(key_hex) == bool(key_file):
        raise click.UsageError("Give exactly one of KEY_HEX or --file")
    if exact and key_file:
        raise click.UsageError("--exact only applies to KEY_HEX")

    registry = _load_registry(roots_path)

    if key_file:
        key_bytes = Path(key_file).read_bytes()
        trusted = registry.is_trusted(key_bytes)
    elif exact:
        trusted = registry.is_trusted_hex(key_hex)
        key_bytes = bytes.fromhex(key_hex) if trusted else None
    else:
        key_bytes = _decode_hex(key_hex)
        if key_bytes is None:
            logger.debug("Could not decode key argument as hex")
        trusted = key_bytes is not None and registry.is_trusted(key_bytes)

    root = registry.find(key_bytes) if trusted else None
    subject = root.subject if root else None

    if json_out:
        print_json({"trusted": trusted, "subject": subject})
    elif trusted:
        print_success(f"Trusted root: {escape(subject or '(no subject)')}")
    elif key_bytes is None and not exact:
        print_error("Not a trusted root key", fix_hint="Argument is not valid hex")
    else:
        print_error("Not a trusted root key")

    if not trusted:
        sys.exit(1)


@main.command("list")
@click.option("--roots", "roots_path", type=click.Path(exists=True, dir_okay=False),
              help="Roots file to list (default: bundled)")
@click.option("--json", "json_out", is_flag=True, help="Output as JSON")
def list_roots(roots_path: Optional[str], json_out: bool):
    """List the trusted root keys."""
    from rootpin.audit import key_encoding

    registry = _load_registry(roots_path)

    if json_out:
        print_json([
            {
                "subject": root.subject,
                "encoding": key_encoding(root.public_key_hex),
                "length": len(root.public_key_hex) // 2,
                "public_key": root.public_key_hex,
            }
            for root in registry.roots
        ])
        return

    table = Table(title=f"Trusted roots ({len(registry)})")
    table.add_column("#", justify="right")
    table.add_column("Subject")
    table.add_column("Type")
    table.add_column("Bytes", justify="right")
    table.add_column("Key")
    for index, root in enumerate(registry.roots):
        table.add_row(
            str(index),
            escape(root.subject),
            key_encoding(root.public_key_hex),
            str(len(root.public_key_hex) // 2),
            shorten_key(root.public_key_hex),
        )
    console.print(table)


@main.command("audit")
@click.option("--roots", "roots_path", type=click.Path(exists=True, dir_okay=False),
              help="Roots file to audit (default: bundled)")
@click.option("--json", "json_out", is_flag=True, help="Output as JSON")
def audit(roots_path: Optional[str], json_out: bool):
    """Audit a root table for malformed or duplicate entries.

    Exit code 1 if any entry would be rejected.
    """
    from rootpin.audit import audit_roots
    from rootpin.config.loader import load_raw_roots_file

    if roots_path:
        try:
            roots, file_errors = load_raw_roots_file(Path(roots_path))
        except RootpinError as e:
            print_error(escape(str(e)))
            sys.exit(1)
        result = audit_roots(roots, source=roots_path, file_errors=file_errors)
    else:
        from rootpin.config.trusted_roots import TRUSTED_ROOTS
        result = audit_roots(TRUSTED_ROOTS)

    if json_out:
        print_json(result.to_dict())
    else:
        for finding in result.findings:
            if finding.index < 0:
                label = "file"
            else:
                label = f"#{finding.index} {finding.subject}".strip()
            text = escape(f"{label}: {finding.message} [{finding.code}]")
            if finding.severity == "error":
                print_error(text)
            else:
                print_warning(text)

        summary = (
            f"{result.entry_count} entries, {result.error_count} errors, "
            f"{result.warning_count} warnings ({result.source})"
        )
        if result.ok:
            print_success(escape(summary))
        else:
            print_error(escape(summary))

    if not result.ok:
        sys.exit(1)


@main.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False),
              help="Write to a file instead of stdout")
def export(output: Optional[str]):
    """Export the bundled roots as a roots file.

    Use the output as the starting point for an out-of-band root update.
    """
    from rootpin.config.loader import dump_roots

    text = dump_roots(get_registry().roots)
    if not output:
        click.echo(text, nl=False)
        return

    Path(output).write_text(text, encoding="utf-8")
    print_success(escape(f"Wrote {len(get_registry())} roots to {output}"))


if __name__ == "__main__":
    main()
