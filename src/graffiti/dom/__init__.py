"""Arena-backed document tree with synchronous change notification."""

from graffiti.dom.document import ChangeListener, Document
from graffiti.dom.errors import (
    DocumentError,
    HierarchyError,
    InvalidNodeError,
    NodeKindError,
    ReentrantMutationError,
)
from graffiti.dom.node import NodeId

__all__ = [
    "ChangeListener",
    "Document",
    "NodeId",
    "DocumentError",
    "HierarchyError",
    "InvalidNodeError",
    "NodeKindError",
    "ReentrantMutationError",
]
