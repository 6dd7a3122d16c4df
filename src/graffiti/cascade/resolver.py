"""Cascade: compute an element's style from stylesheets and its inline style."""

from __future__ import annotations

import logging
from typing import Iterable

from graffiti.css.matching import match_specificity
from graffiti.css.model import StyleSheet
from graffiti.css.parser import parse_declarations
from graffiti.css.style import Style
from graffiti.dom.document import Document
from graffiti.dom.node import NodeId
from graffiti.events import EventBus
from graffiti.events import types as events

log = logging.getLogger(__name__)

# Events after which a cached style may be wrong.  Creation and text edits
# never change which rules match an existing element.
_INVALIDATING_EVENTS = (
    events.NodeInserted,
    events.NodeRemoved,
    events.NodeDestroyed,
    events.AttributesChanged,
)


class StyleResolver:
    """Resolve the declared style of document elements.

    Matching rules are applied in ascending ``(specificity, sheet index,
    rule index)`` order so the most specific, latest rule wins each
    longhand.  The element's ``style`` attribute is applied last.

    Results are cached per node.  When a *bus* is given, the resolver
    subscribes to it and drops the cache on any change that can affect
    matching; without one, call :meth:`invalidate` after mutating the
    document.
    """

    def __init__(
        self,
        document: Document,
        sheets: Iterable[StyleSheet] = (),
        bus: EventBus | None = None,
    ) -> None:
        self.document = document
        self.sheets: list[StyleSheet] = list(sheets)
        self._cache: dict[NodeId, Style] = {}
        self._bus = bus
        if bus is not None:
            for event_type in _INVALIDATING_EVENTS:
                bus.subscribe(event_type, self._on_change)

    def close(self) -> None:
        """Stop listening to the bus given at construction."""
        if self._bus is None:
            return
        for event_type in _INVALIDATING_EVENTS:
            self._bus.unsubscribe(event_type, self._on_change)
        self._bus = None

    def add_sheet(self, sheet: StyleSheet) -> None:
        self.sheets.append(sheet)
        self.invalidate()

    def invalidate(self) -> None:
        if self._cache:
            log.debug("Dropping %d cached styles", len(self._cache))
        self._cache.clear()

    def _on_change(self, event: events.DocumentEvent) -> None:
        log.debug("Style cache invalidated by %s", type(event).__name__)
        self.invalidate()

    def computed_style(self, node: NodeId) -> Style:
        """Return a fresh copy of *node*'s resolved style.

        Text nodes have no declarations of their own and get an empty style.
        Raises InvalidNodeError for a freed node even if it is still cached.
        """
        is_element = self.document.is_element(node)
        cached = self._cache.get(node)
        if cached is None:
            cached = self._resolve(node, is_element)
            self._cache[node] = cached
        return cached.copy()

    def _resolve(self, node: NodeId, is_element: bool) -> Style:
        style = Style()
        if not is_element:
            return style

        matched = []
        for sheet_index, sheet in enumerate(self.sheets):
            for rule_index, rule in enumerate(sheet.rules):
                spec = match_specificity(rule.selector, self.document, node)
                if spec is not None:
                    matched.append((spec, sheet_index, rule_index, rule))

        matched.sort(key=lambda entry: entry[:3])
        for _spec, _sheet_index, _rule_index, rule in matched:
            style.update(rule.style)

        inline = self.document.attribute(node, "style")
        if inline:
            style.update(parse_declarations(inline))

        log.debug("Resolved %d rule(s) for %r", len(matched), node)
        return style
