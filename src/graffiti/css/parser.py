"""Hand-written, forgiving parser for stylesheets and declaration blocks.

Grammar::

    stylesheet   := (rule | at-rule | unknown-block)*
    rule         := selector '{' declarations '}'
    declarations := (ident ':' value ';'*)*
    at-rule      := '@' ... (';' | balanced '{' ... '}')
    unknown      := anything up to and including the next '}'

Nothing here raises on malformed input.  A bad declaration is dropped on its
own, a bad rule is skipped as an unknown block, and at-rules are skipped
whole, so well-formed rules elsewhere in the sheet always survive.
"""

from __future__ import annotations

import logging
from typing import Sequence

from graffiti.css.errors import ParseError
from graffiti.css.model import Rule, StyleSheet
from graffiti.css.properties import parse_property_into
from graffiti.css.selector import read_selector
from graffiti.css.style import Style
from graffiti.css.tokenizer import is_ident_start, tokenize
from graffiti.css.value_parser import TokenCursor

__all__ = ["parse_stylesheet", "parse_declarations"]

log = logging.getLogger(__name__)


def _tokens(source: str | bytes | Sequence[str]) -> list[str]:
    if isinstance(source, (str, bytes)):
        return tokenize(source)
    return list(source)


def _skip_until(cursor: TokenCursor, stops: tuple[str, ...]) -> None:
    """Advance to the next token in *stops* without consuming it."""
    while not cursor.at_end() and cursor.peek() not in stops:
        cursor.next()


def _skip_balanced(cursor: TokenCursor) -> None:
    """Consume a ``{ ... }`` block including any nested blocks."""
    depth = 0
    while not cursor.at_end():
        token = cursor.next()
        if token == "{":
            depth += 1
        elif token == "}":
            depth -= 1
            if depth <= 0:
                return


def _skip_at_rule(cursor: TokenCursor) -> None:
    start = cursor.mark()
    cursor.literal("@")
    _skip_until(cursor, (";", "{"))
    if cursor.accept(";"):
        pass
    elif cursor.peek() == "{":
        _skip_balanced(cursor)
    log.debug("Skipped at-rule %r", "".join(cursor.tokens[start:cursor.i]))


def _skip_unknown(cursor: TokenCursor) -> None:
    start = cursor.mark()
    _skip_until(cursor, ("}",))
    cursor.accept("}")
    log.debug("Skipped unparseable block %r", "".join(cursor.tokens[start:cursor.i]))


def _declaration(cursor: TokenCursor) -> tuple[str, list[str]]:
    name = cursor.next()
    if not is_ident_start(name):
        raise ParseError(f"expected property name, got {name!r}", cursor.i - 1)
    cursor.literal(":")
    value: list[str] = []
    while cursor.peek() not in (None, ";", "}"):
        value.append(cursor.next())
    if not value:
        raise ParseError(f"empty value for {name!r}", cursor.i)
    return name, value


def _declarations(cursor: TokenCursor) -> Style:
    """Read declarations up to (not including) the closing ``}``."""
    style = Style()
    while not cursor.at_end() and cursor.peek() != "}":
        if cursor.accept(";"):
            continue
        start = cursor.mark()
        try:
            name, value = _declaration(cursor)
        except ParseError as exc:
            _skip_until(cursor, (";", "}"))
            log.debug(
                "Skipped malformed declaration %r: %s",
                "".join(cursor.tokens[start:cursor.i]),
                exc,
            )
            continue
        parse_property_into(name, value, style)
    return style


def _rule(cursor: TokenCursor) -> Rule:
    selector = read_selector(cursor)
    cursor.literal("{")
    style = _declarations(cursor)
    # A missing '}' at the very end of the input closes the rule.
    if not cursor.at_end():
        cursor.literal("}")
    return Rule(selector=selector, style=style)


def parse_stylesheet(source: str | bytes | Sequence[str]) -> StyleSheet:
    """Parse stylesheet source (text, bytes or tokens) into a StyleSheet.

    Returns every well-formed rule in source order; anything else is
    skipped.
    """
    cursor = TokenCursor(_tokens(source))
    rules: list[Rule] = []
    while not cursor.at_end():
        if cursor.peek() == "@":
            _skip_at_rule(cursor)
            continue
        start = cursor.mark()
        try:
            rules.append(_rule(cursor))
        except ParseError as exc:
            cursor.reset(start)
            log.debug("Not a rule at token %d: %s", start, exc)
            _skip_unknown(cursor)
    return StyleSheet(rules=rules)


def parse_declarations(source: str | bytes | Sequence[str]) -> Style:
    """Parse a bare declaration block, e.g. an element's ``style`` attribute."""
    cursor = TokenCursor(_tokens(source))
    style = _declarations(cursor)
    while cursor.accept("}"):
        style.update(_declarations(cursor))
    return style
