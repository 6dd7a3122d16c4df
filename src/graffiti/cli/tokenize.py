"""CLI command: graffiti tokenize -- print the token stream of a stylesheet."""

from __future__ import annotations

import click

from graffiti.cli._io import read_source
from graffiti.config import GraffitiConfig
from graffiti.css import tokenize as tokenize_source


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.pass_obj
def tokenize(config: GraffitiConfig | None, cssfile: str) -> None:
    """Print one token per line, quoted so whitespace tokens stay visible."""
    tokens = tokenize_source(read_source(cssfile, config))
    for token in tokens:
        click.echo(repr(token))
    click.echo(f"{len(tokens)} token(s)", err=True)
