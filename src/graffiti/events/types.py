"""Change events emitted by a Document, one per observable mutation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from graffiti.dom.node import NodeId


@dataclass(frozen=True)
class ElementCreated:
    node: NodeId


@dataclass(frozen=True)
class TextNodeCreated:
    node: NodeId


@dataclass(frozen=True)
class NodeInserted:
    parent: NodeId
    child: NodeId
    index: int


@dataclass(frozen=True)
class NodeRemoved:
    parent: NodeId
    child: NodeId


@dataclass(frozen=True)
class ParentChanged:
    """Emitted right after an insert or remove; ``parent`` is None once detached."""

    node: NodeId
    parent: NodeId | None


@dataclass(frozen=True)
class NodeDestroyed:
    node: NodeId


@dataclass(frozen=True)
class TextChanged:
    node: NodeId


@dataclass(frozen=True)
class AttributesChanged:
    node: NodeId
    name: str


DocumentEvent = Union[
    ElementCreated,
    TextNodeCreated,
    NodeInserted,
    NodeRemoved,
    ParentChanged,
    NodeDestroyed,
    TextChanged,
    AttributesChanged,
]
