"""CLI command: graffiti inspect -- display the rules of a stylesheet."""

from __future__ import annotations

import click

from graffiti.cli._io import read_source
from graffiti.config import GraffitiConfig
from graffiti.css import parse_stylesheet, specificity


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.pass_obj
def inspect(config: GraffitiConfig | None, cssfile: str) -> None:
    """Parse a stylesheet and display its rules.

    Shows each rule's selector, specificity and expanded longhand
    declarations.  Unsupported selectors are flagged since they never match.
    """
    sheet = parse_stylesheet(read_source(cssfile, config))

    click.echo(f"Rules: {len(sheet)}")
    click.echo()

    for index, rule in enumerate(sheet):
        ids, classes, names = specificity(rule.selector)
        header = f"[{index}] {rule.selector}  specificity=({ids},{classes},{names})"
        if not rule.selector.is_supported:
            header += "  (unsupported)"
        click.echo(header)
        if not len(rule.style):
            click.echo("    (no declarations)")
        for prop in rule.style:
            click.echo(f"    {prop.css_text}")
