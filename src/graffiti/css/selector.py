"""Selector model and parser.

Selectors are stored subject-first: the parts of ``body > div.test`` come
out as ``ClassName(test), LocalName(div), Parent, LocalName(body)`` because
matching walks outward from the element being tested.  A comma group is
flattened into the same part list with ``Or`` markers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from graffiti.css.errors import ParseError
from graffiti.css.tokenizer import SPACE, is_ident_start, tokenize
from graffiti.css.value_parser import TokenCursor

__all__ = [
    "Combinator",
    "Component",
    "ComponentKind",
    "Selector",
    "SelectorPart",
    "parse_selector",
    "read_selector",
]

log = logging.getLogger(__name__)


class Combinator(Enum):
    PARENT = ">"
    ANCESTOR = " "
    OR = ","
    UNIVERSAL = "*"


class ComponentKind(Enum):
    UNIVERSAL = "universal"
    LOCAL_NAME = "local_name"
    IDENTIFIER = "identifier"
    CLASS_NAME = "class_name"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Component:
    """A simple selector: tag name, ``#id``, ``.class`` or an inert placeholder."""

    kind: ComponentKind
    name: str = ""

    @classmethod
    def universal(cls) -> Component:
        return cls(ComponentKind.UNIVERSAL)

    @classmethod
    def local_name(cls, name: str) -> Component:
        return cls(ComponentKind.LOCAL_NAME, name)

    @classmethod
    def identifier(cls, name: str) -> Component:
        return cls(ComponentKind.IDENTIFIER, name)

    @classmethod
    def class_name(cls, name: str) -> Component:
        return cls(ComponentKind.CLASS_NAME, name)

    @classmethod
    def unsupported(cls) -> Component:
        return cls(ComponentKind.UNSUPPORTED)

    def __str__(self) -> str:
        if self.kind is ComponentKind.LOCAL_NAME:
            return self.name
        if self.kind is ComponentKind.IDENTIFIER:
            return f"#{self.name}"
        if self.kind is ComponentKind.CLASS_NAME:
            return f".{self.name}"
        if self.kind is ComponentKind.UNIVERSAL:
            return "*"
        return "?"


SelectorPart = Union[Component, Combinator]


@dataclass(frozen=True)
class Selector:
    """An ordered, subject-first sequence of selector parts."""

    parts: tuple[SelectorPart, ...]

    @classmethod
    def parse(cls, source: str | Sequence[str]) -> Selector:
        return parse_selector(source)

    @property
    def is_supported(self) -> bool:
        """False if any part can never match."""
        return Component.unsupported() not in self.parts

    def alternatives(self) -> list[tuple[SelectorPart, ...]]:
        """Split on ``Or`` markers; each alternative is still subject-first."""
        groups: list[tuple[SelectorPart, ...]] = []
        current: list[SelectorPart] = []
        for part in self.parts:
            if part is Combinator.OR:
                groups.append(tuple(current))
                current = []
            else:
                current.append(part)
        groups.append(tuple(current))
        return groups

    def __str__(self) -> str:
        out: list[str] = []
        for alternative in reversed(self.alternatives()):
            text = ""
            for part in reversed(alternative):
                if part is Combinator.PARENT:
                    text += " > "
                elif part is Combinator.ANCESTOR:
                    text += " "
                else:
                    text += str(part.value if isinstance(part, Combinator) else part)
            out.append(text)
        return ", ".join(out)


_UNSUPPORTED = Selector((Component.unsupported(),))

_COMBINATORS = {">": Combinator.PARENT, SPACE: Combinator.ANCESTOR, ",": Combinator.OR}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _ident(cursor: TokenCursor) -> str:
    token = cursor.next()
    if not is_ident_start(token):
        raise ParseError(f"expected identifier, got {token!r}", cursor.i - 1)
    return token


def _component(cursor: TokenCursor) -> Component | None:
    """Read one simple selector, or return None (cursor untouched)."""
    start = cursor.mark()
    token = cursor.peek()
    try:
        if token == "#":
            cursor.next()
            return Component.identifier(_ident(cursor))
        if token == ".":
            cursor.next()
            return Component.class_name(_ident(cursor))
        if token == "[":
            cursor.next()
            if cursor.peek() == "]":
                raise ParseError("empty attribute selector", cursor.i)
            while cursor.next() != "]":
                pass
            return Component.unsupported()
        if token == ":":
            cursor.next()
            cursor.accept(":")
            _ident(cursor)
            return Component.unsupported()
        if token is not None and is_ident_start(token):
            cursor.next()
            return Component.local_name(token)
    except ParseError:
        cursor.reset(start)
    return None


def _tag(cursor: TokenCursor) -> list[SelectorPart]:
    """``*`` or one or more simple selectors, in source order."""
    if cursor.accept("*"):
        return [Combinator.UNIVERSAL]
    parts: list[SelectorPart] = []
    while (component := _component(cursor)) is not None:
        parts.append(component)
    if not parts:
        raise ParseError(f"expected selector, got {cursor.peek()!r}", cursor.i)
    return parts


def _combinator(cursor: TokenCursor) -> SelectorPart | None:
    token = cursor.peek()
    if token in _COMBINATORS:
        cursor.next()
        return _COMBINATORS[token]
    if token in ("+", "~"):
        cursor.next()
        return Component.unsupported()
    return None


def read_selector(cursor: TokenCursor) -> Selector:
    """Read ``tag (combinator? tag)*`` and stop at the first token that fits neither.

    Raises :class:`ParseError` if no selector starts at the cursor or a
    combinator is not followed by a tag.
    """
    head = _tag(cursor)
    tail: list[tuple[SelectorPart | None, list[SelectorPart]]] = []
    while True:
        start = cursor.mark()
        comb = _combinator(cursor)
        try:
            tag = _tag(cursor)
        except ParseError:
            cursor.reset(start)
            if comb is not None:
                raise
            break
        tail.append((comb, tag))

    parts: list[SelectorPart] = []
    for comb, tag in reversed(tail):
        parts.extend(reversed(tag))
        if comb is not None:
            parts.append(comb)
    parts.extend(reversed(head))
    return Selector(tuple(parts))


def parse_selector(source: str | Sequence[str]) -> Selector:
    """Parse a selector; malformed input yields a selector that matches nothing."""
    tokens = tokenize(source) if isinstance(source, str) else list(source)
    cursor = TokenCursor(tokens)
    try:
        selector = read_selector(cursor)
        cursor.finish()
    except ParseError as exc:
        log.debug("Unsupported selector %r: %s", "".join(tokens), exc)
        return _UNSUPPORTED
    return selector
