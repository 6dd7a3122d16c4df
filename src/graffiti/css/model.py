"""Stylesheet model: Rule and StyleSheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from graffiti.css.selector import Selector
from graffiti.css.style import Style


@dataclass(frozen=True)
class Rule:
    """A single rule pairing a selector with its declaration block.

    The fields cannot be reassigned, but ``style`` is a mutable block, so
    rules compare by value and are not hashable.
    """

    selector: Selector
    style: Style

    __hash__ = None  # type: ignore[assignment]

    @property
    def css_text(self) -> str:
        return f"{self.selector} {{ {self.style.css_text} }}"


@dataclass
class StyleSheet:
    """Rules in source order; later rules win ties in the cascade."""

    rules: list[Rule] = field(default_factory=list)

    @classmethod
    def parse(cls, source: str | bytes) -> StyleSheet:
        from graffiti.css.parser import parse_stylesheet

        return parse_stylesheet(source)

    def insert_rule(self, text: str, index: int | None = None) -> int:
        """Parse *text* as one rule and insert it; returns its index.

        Raises ValueError if *text* does not contain exactly one rule.
        """
        parsed = StyleSheet.parse(text).rules
        if len(parsed) != 1:
            raise ValueError(f"Expected exactly one rule, got {len(parsed)}: {text!r}")
        if index is None:
            index = len(self.rules)
        if not 0 <= index <= len(self.rules):
            raise IndexError(f"Rule index {index} out of range")
        self.rules.insert(index, parsed[0])
        return index

    def delete_rule(self, index: int) -> None:
        del self.rules[index]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
