"""Property resolver: property name + value tokens -> canonical longhands.

Longhands map one name to one value reader.  Shorthands map one name to an
expander that emits the longhands it stands for, so overriding is always
decided on longhand identity no matter which form produced a value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from graffiti.css import value_parser as v
from graffiti.css.errors import ParseError
from graffiti.css.style import Style, StyleProp
from graffiti.css.values import (
    Align,
    BorderStyle,
    Display,
    FlexDirection,
    FlexWrap,
    Justify,
    Overflow,
    Position,
    TextAlign,
    Visibility,
)

__all__ = [
    "LONGHANDS",
    "SHORTHANDS",
    "longhands_of",
    "parse_property",
    "parse_property_into",
]

log = logging.getLogger(__name__)

SIDES = ("top", "right", "bottom", "left")
CORNERS = ("top-left", "top-right", "bottom-right", "bottom-left")

Expander = Callable[[Sequence[str]], list[StyleProp]]


# ---------------------------------------------------------------------------
# Longhands
# ---------------------------------------------------------------------------

LONGHANDS: dict[str, v.Reader[Any]] = {
    **{
        name: v.dimension
        for name in (
            "width", "height",
            "min-width", "min-height",
            "max-width", "max-height",
            "top", "right", "bottom", "left",
            "flex-basis",
            "outline-width",
            "font-size", "line-height",
        )
    },
    **{f"margin-{side}": v.dimension for side in SIDES},
    **{f"padding-{side}": v.dimension for side in SIDES},
    **{f"border-{side}-width": v.dimension for side in SIDES},
    **{f"border-{side}-style": v.keyword(BorderStyle) for side in SIDES},
    **{f"border-{side}-color": v.color for side in SIDES},
    **{f"border-{corner}-radius": v.dimension for corner in CORNERS},
    "flex-grow": v.number,
    "flex-shrink": v.number,
    "flex-direction": v.keyword(FlexDirection),
    "flex-wrap": v.keyword(FlexWrap),
    "align-content": v.keyword(Align),
    "align-items": v.keyword(Align),
    "align-self": v.keyword(Align),
    "justify-content": v.keyword(Justify),
    "display": v.keyword(Display),
    "position": v.keyword(Position),
    "overflow-x": v.keyword(Overflow),
    "overflow-y": v.keyword(Overflow),
    "opacity": v.number,
    "color": v.color,
    "background-color": v.color,
    "outline-style": v.keyword(BorderStyle),
    "outline-color": v.color,
    "text-align": v.keyword(TextAlign),
    "visibility": v.keyword(Visibility),
    "font-family": v.font_family,
}


# ---------------------------------------------------------------------------
# Shorthands
# ---------------------------------------------------------------------------

# Longhands each shorthand writes, in the order its reader yields values.
# Expansion and Style.remove_property() both read this table.
_SHORTHAND_LONGHANDS: dict[str, tuple[str, ...]] = {
    "padding": tuple(f"padding-{s}" for s in SIDES),
    "margin": tuple(f"margin-{s}" for s in SIDES),
    "border-width": tuple(f"border-{s}-width" for s in SIDES),
    "border-style": tuple(f"border-{s}-style" for s in SIDES),
    "border-color": tuple(f"border-{s}-color" for s in SIDES),
    "border-radius": tuple(f"border-{c}-radius" for c in CORNERS),
    "flex": ("flex-grow", "flex-shrink", "flex-basis"),
    "flex-flow": ("flex-direction", "flex-wrap"),
    "overflow": ("overflow-x", "overflow-y"),
    "outline": ("outline-width", "outline-style", "outline-color"),
    "border": tuple(
        f"border-{s}-{part}" for part in ("width", "style", "color") for s in SIDES
    ),
    "background": ("background-color",),
}


def _per_side(values: Sequence[Any]) -> list[Any]:
    """Repeat each of (width, style, color) once per side."""
    return [value for value in values for _ in SIDES]


def _expander(
    name: str,
    reader: v.Reader[Any],
    spread: Callable[[Any], Sequence[Any]] = tuple,
) -> Expander:
    """Pair the values *reader* yields with *name*'s longhands.

    A None value (an omitted optional part) emits nothing for its longhand.
    """
    names = _SHORTHAND_LONGHANDS[name]

    def expand(tokens: Sequence[str]) -> list[StyleProp]:
        values = spread(v.parse_value(reader, tokens))
        return [StyleProp(n, value) for n, value in zip(names, values) if value is not None]

    return expand


SHORTHANDS: dict[str, Expander] = {
    "padding": _expander("padding", v.sides(v.dimension)),
    "margin": _expander("margin", v.sides(v.dimension)),
    "border-width": _expander("border-width", v.sides(v.dimension)),
    "border-style": _expander("border-style", v.sides(v.keyword(BorderStyle))),
    "border-color": _expander("border-color", v.sides(v.color)),
    "border-radius": _expander("border-radius", v.sides(v.dimension)),
    "flex": _expander("flex", v.flex),
    "flex-flow": _expander("flex-flow", v.flex_flow),
    "overflow": _expander("overflow", v.overflow),
    "outline": _expander("outline", v.outline),
    "border": _expander("border", v.outline, _per_side),
    "background": _expander("background", v.background, lambda color: (color,)),
}


def longhands_of(name: str) -> tuple[str, ...]:
    """Return the longhands *name* stands for (itself for a longhand)."""
    if name in LONGHANDS:
        return (name,)
    return _SHORTHAND_LONGHANDS.get(name, ())


def parse_property(name: str, tokens: Sequence[str]) -> list[StyleProp]:
    """Resolve one declaration into zero or more longhand properties.

    Unknown names and values that fail to parse resolve to an empty list;
    the declaration is simply dropped.
    """
    try:
        reader = LONGHANDS.get(name)
        if reader is not None:
            return [StyleProp(name, v.parse_value(reader, tokens))]

        expander = SHORTHANDS.get(name)
        if expander is not None:
            return expander(tokens)
    except ParseError as exc:
        log.debug("Dropping declaration %s: %s (%s)", name, "".join(tokens), exc)
        return []

    log.debug("Ignoring unknown property %r", name)
    return []


def parse_property_into(name: str, tokens: Sequence[str], style: Style) -> bool:
    """Resolve a declaration and add the result to *style*."""
    props = parse_property(name, tokens)
    for prop in props:
        style.add_prop(prop)
    return bool(props)
