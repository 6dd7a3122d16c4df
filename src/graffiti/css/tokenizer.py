"""Hand-written tokenizer for the supported CSS subset.

Tokens are plain strings sliced from the input. There is no token type tag;
parsers infer the class of a token from its first character or its literal
value::

    tokenize("parent .btn { /**/ padding: 10px }")
    # ["parent", " ", ".", "btn", "{", "padding", ":", "10", "px", "}"]
"""

from __future__ import annotations

import re

__all__ = ["tokenize", "is_ident_start", "SPACE"]

SPACE = " "

# Alternatives are tried in priority order at each position.
_TOKEN_RE = re.compile(
    r"""
      (?P<comment>/\*.*?\*/)                    # dropped
    | (?P<space>[ \t\r\n]+)                     # collapsed to one space
    | (?<=\#)(?P<hash>[A-Za-z0-9]+)             # hex color or id after '#'
    | (?P<number>-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))
    | (?P<ident>[A-Za-z0-9-]+)
    | (?P<string>'[^']*'|"[^"]*")
    | (?P<special>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_COMPONENT_END = {"*", "]"}
_COMPONENT_START = {".", "#", "*"}


def is_ident_start(token: str) -> bool:
    """Return True if *token* starts with an ASCII alphanumeric or ``-``."""
    c = token[:1]
    return c == "-" or (c.isascii() and c.isalnum())


def _raw_tokens(text: str) -> list[str]:
    tokens: list[str] = []
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        if kind == "comment":
            continue
        if kind == "space":
            tokens.append(SPACE)
        else:
            tokens.append(match.group())
    return tokens


def tokenize(data: str | bytes) -> list[str]:
    """Split stylesheet source into tokens.

    Never fails: anything unrecognized becomes a single-character token.
    Spaces are kept only between two tokens that can end and start a
    selector or value component (descendant selectors, multi-value
    properties) and dropped everywhere else.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    raw = _raw_tokens(data)
    result: list[str] = []
    keep_space = False
    for i, token in enumerate(raw):
        if token == SPACE:
            if not keep_space:
                continue
            nxt = raw[i + 1] if i + 1 < len(raw) else None
            if nxt is None or not (is_ident_start(nxt) or nxt in _COMPONENT_START):
                continue
        result.append(token)
        keep_space = is_ident_start(token) or token in _COMPONENT_END
    return result
