"""Value parsers: read typed CSS values from token slices.

Every reader takes a :class:`TokenCursor` and either returns a value or
raises :class:`ParseError` with the cursor left wherever it failed.  Callers
that try alternatives use :meth:`TokenCursor.mark` / :meth:`TokenCursor.reset`
to backtrack.  :func:`parse_value` runs a reader over a complete slice and
rejects leftovers, so ``padding-left: 10px 20px`` fails instead of silently
taking the first value.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence, TypeVar

from graffiti.css.colors import NAMED_COLORS
from graffiti.css.errors import ParseError
from graffiti.css.tokenizer import SPACE, is_ident_start
from graffiti.css.values import BorderStyle, Color, Dimension, FlexDirection, FlexWrap, Keyword, Overflow

__all__ = [
    "TokenCursor",
    "parse_value",
    "number",
    "dimension",
    "color",
    "background",
    "keyword",
    "sides",
    "flex",
    "flex_flow",
    "overflow",
    "outline",
    "font_family",
]

T = TypeVar("T")
K = TypeVar("K", bound=Keyword)
Reader = Callable[["TokenCursor"], T]

_NUMBER_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_U8_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


class TokenCursor:
    """Read position over a token slice."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        self.i = 0

    def at_end(self) -> bool:
        return self.i >= len(self.tokens)

    def peek(self) -> str | None:
        return None if self.at_end() else self.tokens[self.i]

    def next(self) -> str:
        if self.at_end():
            raise ParseError("unexpected end of value", self.i)
        token = self.tokens[self.i]
        self.i += 1
        return token

    def literal(self, expected: str) -> None:
        if self.peek() != expected:
            raise ParseError(f"expected {expected!r}, got {self.peek()!r}", self.i)
        self.i += 1

    def accept(self, expected: str) -> bool:
        """Consume *expected* if it is next; report whether it was."""
        if self.peek() == expected:
            self.i += 1
            return True
        return False

    def mark(self) -> int:
        return self.i

    def reset(self, mark: int) -> None:
        self.i = mark

    def finish(self) -> None:
        if not self.at_end():
            raise ParseError(f"unexpected trailing token {self.peek()!r}", self.i)


def parse_value(reader: Reader[T], tokens: Sequence[str]) -> T:
    """Run *reader* over the whole of *tokens*; leftovers are an error."""
    cursor = TokenCursor(tokens)
    value = reader(cursor)
    cursor.finish()
    return value


def optional(cursor: TokenCursor, reader: Reader[T]) -> T | None:
    """Run ``" " reader``; rewind and return None if it does not match."""
    start = cursor.mark()
    try:
        cursor.literal(SPACE)
        return reader(cursor)
    except ParseError:
        cursor.reset(start)
        return None


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def number(cursor: TokenCursor) -> float:
    token = cursor.next()
    if not _NUMBER_RE.fullmatch(token):
        raise ParseError(f"expected number, got {token!r}", cursor.i - 1)
    return float(token)


def _u8(cursor: TokenCursor) -> int:
    token = cursor.next()
    if not _U8_RE.fullmatch(token) or int(token) > 255:
        raise ParseError(f"expected integer 0-255, got {token!r}", cursor.i - 1)
    return int(token)


def ident(cursor: TokenCursor) -> str:
    token = cursor.next()
    if not is_ident_start(token):
        raise ParseError(f"expected identifier, got {token!r}", cursor.i - 1)
    return token


def keyword(enum_cls: type[K]) -> Reader[K]:
    """Reader for a keyword enum; lookup is exact and case-sensitive."""

    def read(cursor: TokenCursor) -> K:
        name = ident(cursor)
        try:
            return enum_cls(name)
        except ValueError:
            raise ParseError(f"unknown {enum_cls.__name__} keyword {name!r}", cursor.i - 1) from None

    read.__name__ = f"keyword_{enum_cls.__name__}"
    return read


def dimension(cursor: TokenCursor) -> Dimension:
    """``<number>px``, ``<number>%``, ``auto`` or a bare ``0``."""
    start = cursor.mark()
    token = cursor.next()
    if token == "auto":
        return Dimension.AUTO
    if _NUMBER_RE.fullmatch(token):
        if cursor.accept("px"):
            return Dimension.px(float(token))
        if cursor.accept("%"):
            return Dimension.percent(float(token))
        if token == "0":
            return Dimension.ZERO
    cursor.reset(start)
    raise ParseError(f"expected dimension, got {token!r}", start)


def font_family(cursor: TokenCursor) -> str:
    token = cursor.next()
    if token[:1] in ("'", '"') and len(token) >= 2:
        return token[1:-1]
    if not is_ident_start(token):
        raise ParseError(f"expected font family, got {token!r}", cursor.i - 1)
    return token


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


def _hex_color(digits: str) -> Color:
    if not _HEX_RE.fullmatch(digits):
        raise ParseError(f"invalid hex color {digits!r}")
    if len(digits) in (6, 8):
        num = int(digits, 16)
        if len(digits) == 6:
            num = num << 8 | 0xFF
        return Color.from_hex(num)
    if len(digits) in (3, 4):
        channels = [int(c, 16) * 17 for c in digits]
        if len(channels) == 3:
            channels.append(255)
        return Color(*channels)
    raise ParseError(f"invalid hex color length {len(digits)}")


def color(cursor: TokenCursor) -> Color:
    """Hex, ``rgb()``, ``rgba()`` or a named color."""
    token = cursor.next()

    if token == "#":
        return _hex_color(cursor.next())

    if token in ("rgb", "rgba"):
        cursor.literal("(")
        r = _u8(cursor)
        cursor.literal(",")
        g = _u8(cursor)
        cursor.literal(",")
        b = _u8(cursor)
        a = 255
        if token == "rgba":
            cursor.literal(",")
            alpha = number(cursor)
            a = int(min(max(alpha, 0.0), 1.0) * 255)
        cursor.literal(")")
        return Color(r, g, b, a)

    named = NAMED_COLORS.get(token)
    if named is None:
        raise ParseError(f"unknown color {token!r}", cursor.i - 1)
    return named


def background(cursor: TokenCursor) -> Color:
    if cursor.accept("none"):
        return Color.TRANSPARENT
    return color(cursor)


# ---------------------------------------------------------------------------
# Multi-value forms
# ---------------------------------------------------------------------------


def sides(reader: Reader[T]) -> Reader[tuple[T, T, T, T]]:
    """1-4 space separated values expanded to (top, right, bottom, left)."""

    def read(cursor: TokenCursor) -> tuple[T, T, T, T]:
        values = [reader(cursor)]
        while cursor.accept(SPACE):
            values.append(reader(cursor))

        if len(values) == 1:
            (a,) = values
            return a, a, a, a
        if len(values) == 2:
            v, h = values
            return v, h, v, h
        if len(values) == 3:
            t, h, b = values
            return t, h, b, h
        if len(values) == 4:
            t, r, b, left = values
            return t, r, b, left
        raise ParseError(f"expected 1-4 values, got {len(values)}", cursor.i)

    return read


def _unitless_number(cursor: TokenCursor) -> float:
    """A number not followed by a unit (so ``10px`` is left for the basis)."""
    value = number(cursor)
    if cursor.peek() in ("px", "%"):
        raise ParseError("number has a unit", cursor.i)
    return value


def flex(cursor: TokenCursor) -> tuple[float, float, Dimension]:
    """``<grow> [<shrink>] [<basis>]`` with shrink 1 and basis auto by default.

    The keywords ``none`` (0 0 auto) and ``auto`` (1 1 auto) are accepted too.
    """
    if cursor.accept("none"):
        return 0.0, 0.0, Dimension.AUTO
    if cursor.accept("auto"):
        return 1.0, 1.0, Dimension.AUTO
    grow = number(cursor)
    shrink = optional(cursor, _unitless_number)
    basis = optional(cursor, dimension)
    return grow, 1.0 if shrink is None else shrink, Dimension.AUTO if basis is None else basis


def flex_flow(cursor: TokenCursor) -> tuple[FlexDirection, FlexWrap | None]:
    direction = keyword(FlexDirection)(cursor)
    wrap = optional(cursor, keyword(FlexWrap))
    return direction, wrap


def overflow(cursor: TokenCursor) -> tuple[Overflow, Overflow]:
    read = keyword(Overflow)
    x = read(cursor)
    y = optional(cursor, read)
    return x, x if y is None else y


def outline(cursor: TokenCursor) -> tuple[Dimension, BorderStyle, Color]:
    """``<width> <style> <color>`` in that fixed order."""
    width = dimension(cursor)
    cursor.literal(SPACE)
    style = keyword(BorderStyle)(cursor)
    cursor.literal(SPACE)
    return width, style, color(cursor)
