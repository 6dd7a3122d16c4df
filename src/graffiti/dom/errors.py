"""Document contract errors.

These signal caller bugs (a stale handle, the wrong node kind, an illegal
tree edit), not recoverable conditions.
"""


class DocumentError(Exception):
    """Base error for all document tree contract violations."""


class InvalidNodeError(DocumentError, LookupError):
    """The handle is out of range or refers to a freed (stale) slot."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Invalid or stale node handle: {node!r}")


class NodeKindError(DocumentError, TypeError):
    """An element-only or text-only accessor was used on the other kind."""

    def __init__(self, node: object, expected: str) -> None:
        self.node = node
        self.expected = expected
        super().__init__(f"{node!r} is not {expected}")


class HierarchyError(DocumentError, ValueError):
    """The requested insert, remove or free would break the tree's invariants."""


class ReentrantMutationError(DocumentError, RuntimeError):
    """The document was mutated from inside its own change listener."""
