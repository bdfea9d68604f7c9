#!/usr/bin/env python3
"""
Rootpin CLI Helpers

Shared formatting utilities for consistent CLI output across all commands.
"""

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console

# Single shared Console instance for the entire CLI
console = Console()


def print_success(message: str) -> None:
    """Print a success message with green checkmark."""
    console.print(f"[green]\u2713[/green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]\u26a0[/yellow]  {message}")


def print_error(message: str, fix_hint: str = "") -> None:
    """Print an error message with red X and optional fix hint."""
    console.print(f"[red]\u2717[/red] {message}")
    if fix_hint:
        console.print(f"  [white]Hint: {fix_hint}[/white]")


def print_json(data: Any) -> None:
    """Print data as indented JSON, bypassing Rich markup."""
    click.echo(json.dumps(data, indent=2))


def configure_logging(verbose: bool = False) -> None:
    """Send library log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def shorten_key(public_key_hex: str, keep: int = 12) -> str:
    """Abbreviate a long hex key for table display."""
    if len(public_key_hex) <= keep * 2 + 3:
        return public_key_hex
    return f"{public_key_hex[:keep]}...{public_key_hex[-keep:]}"
