"""CLI command: graffiti style -- resolve the style of an element chain."""

from __future__ import annotations

import re
import sys

import click

from graffiti.cascade import StyleResolver
from graffiti.cli._io import read_source
from graffiti.config import GraffitiConfig
from graffiti.css import parse_stylesheet
from graffiti.dom import Document, NodeId

_COMPOUND_RE = re.compile(r"^([A-Za-z0-9-]+)((?:[.#][A-Za-z0-9-]+)*)$")
_SUFFIX_RE = re.compile(r"([.#])([A-Za-z0-9-]+)")


def build_chain(document: Document, chain: str) -> NodeId:
    """Build ``a>b.c#d`` as nested elements under the root; return the innermost.

    Raises ValueError on a malformed step.
    """
    parent = document.root
    for step in chain.split(">"):
        step = step.strip()
        match = _COMPOUND_RE.match(step)
        if match is None:
            raise ValueError(f"Invalid element step {step!r}; expected name(.class|#id)*")
        local_name, suffixes = match.groups()

        element = document.create_element(local_name)
        classes = []
        for sigil, value in _SUFFIX_RE.findall(suffixes):
            if sigil == "#":
                document.set_attribute(element, "id", value)
            else:
                classes.append(value)
        if classes:
            document.set_attribute(element, "class", " ".join(classes))

        document.append_child(parent, element)
        parent = element
    return parent


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--element", "-e", "element_spec", required=True, help="Element chain, e.g. body>div.card#main.")
@click.option("--inline", default="", help="Inline style attribute for the innermost element.")
@click.pass_obj
def style(config: GraffitiConfig | None, cssfile: str, element_spec: str, inline: str) -> None:
    """Resolve the style an element chain would get from CSSFILE.

    Prints one longhand declaration per line in cascade order.
    """
    config = config or GraffitiConfig()
    sheet = parse_stylesheet(read_source(cssfile, config))

    document = Document.from_config(config)
    try:
        element = build_chain(document, element_spec)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if inline:
        document.set_attribute(element, "style", inline)

    resolved = StyleResolver(document, [sheet]).computed_style(element)
    if not len(resolved):
        click.echo("(no declarations)")
        return
    for prop in resolved:
        click.echo(f"{prop.css_text};")
