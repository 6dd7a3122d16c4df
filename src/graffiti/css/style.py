"""Style model: resolved longhand properties with last-write-wins semantics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator


def format_value(value: Any) -> str:
    """Serialize a typed property value back to CSS text."""
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class StyleProp:
    """A single longhand property with its typed value.

    ``name`` is always the canonical longhand (``padding-left``, never
    ``padding``), which is what override resolution keys on.
    """

    name: str
    value: Any

    @property
    def css_text(self) -> str:
        return f"{self.name}: {format_value(self.value)}"

    def __str__(self) -> str:
        return self.css_text


class Style:
    """An ordered declaration block holding at most one entry per longhand.

    Adding a property that is already present replaces the existing entry
    in place, whether it came from a longhand or from a shorthand
    expansion.
    """

    def __init__(self, props: Iterable[StyleProp] = ()) -> None:
        self._props: list[StyleProp] = []
        for prop in props:
            self.add_prop(prop)

    @classmethod
    def parse(cls, text: str | bytes) -> Style:
        """Parse declaration text such as ``"color: #fff; padding: 0"``."""
        from graffiti.css.parser import parse_declarations

        return parse_declarations(text)

    # --- read -----------------------------------------------------------------

    @property
    def props(self) -> list[StyleProp]:
        """Return a copy of the effective properties in order."""
        return list(self._props)

    def get(self, name: str, default: Any = None) -> Any:
        """Return the typed value of longhand *name*, or *default*."""
        for prop in self._props:
            if prop.name == name:
                return prop.value
        return default

    def property_value(self, name: str) -> str:
        """Return the CSS text of longhand *name*, empty if unset."""
        value = self.get(name)
        return "" if value is None else format_value(value)

    @property
    def css_text(self) -> str:
        return " ".join(f"{prop.css_text};" for prop in self._props)

    # --- write ----------------------------------------------------------------

    def add_prop(self, prop: StyleProp) -> None:
        for i, existing in enumerate(self._props):
            if existing.name == prop.name:
                self._props[i] = prop
                return
        self._props.append(prop)

    def update(self, other: Style) -> None:
        """Add every property of *other*, overriding ours."""
        for prop in other:
            self.add_prop(prop)

    def set_property(self, name: str, value: str) -> bool:
        """Parse *value* for property *name* and add the result.

        *name* may be a longhand or a shorthand.  Returns False (leaving the
        style untouched) if the name is unknown or the value does not parse.
        """
        from graffiti.css.properties import parse_property
        from graffiti.css.tokenizer import tokenize

        props = parse_property(name, tokenize(value))
        for prop in props:
            self.add_prop(prop)
        return bool(props)

    def remove_property(self, name: str) -> bool:
        """Remove a longhand, or every longhand a shorthand expands to."""
        from graffiti.css.properties import longhands_of

        names = set(longhands_of(name))
        before = len(self._props)
        self._props = [p for p in self._props if p.name not in names]
        return len(self._props) != before

    def copy(self) -> Style:
        return Style(self._props)

    # --- dunder helpers -------------------------------------------------------

    def __iter__(self) -> Iterator[StyleProp]:
        return iter(list(self._props))

    def __len__(self) -> int:
        return len(self._props)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._props)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._props == other._props

    def __repr__(self) -> str:
        return f"Style({self.css_text!r})"
