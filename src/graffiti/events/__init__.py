"""Event system: document change events and a synchronous bus."""

from graffiti.events.bus import EventBus
from graffiti.events.types import (
    AttributesChanged,
    DocumentEvent,
    ElementCreated,
    NodeDestroyed,
    NodeInserted,
    NodeRemoved,
    ParentChanged,
    TextChanged,
    TextNodeCreated,
)

__all__ = [
    "EventBus",
    "DocumentEvent",
    "AttributesChanged",
    "ElementCreated",
    "NodeDestroyed",
    "NodeInserted",
    "NodeRemoved",
    "ParentChanged",
    "TextChanged",
    "TextNodeCreated",
]
