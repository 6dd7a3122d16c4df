"""Shared helpers for reading stylesheet files from CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from graffiti.config import GraffitiConfig


def read_source(path: str, config: GraffitiConfig | None) -> str:
    """Read *path* with the configured encoding, exiting with code 1 on failure."""
    config = config or GraffitiConfig()
    try:
        return Path(path).read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        click.echo(f"Read error: {exc}", err=True)
        sys.exit(1)
