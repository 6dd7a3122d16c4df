"""Observable document tree backed by an arena of slots.

The document owns every node; nodes refer to each other only through
:class:`NodeId` handles, so there is no direct node-to-node ownership.  Each
mutating call reports exactly what changed to the single listener given at
construction, synchronously, before it returns.  That listener is the only
way a layout or rendering driver learns about changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator

from graffiti.dom.errors import HierarchyError, InvalidNodeError, NodeKindError, ReentrantMutationError
from graffiti.dom.node import ElementData, NodeId, Slot, TextData
from graffiti.events import types as events

if TYPE_CHECKING:
    from graffiti.config import GraffitiConfig

__all__ = ["ChangeListener", "Document"]

ChangeListener = Callable[[events.DocumentEvent], None]


class Document:
    """A tree of element and text nodes under a permanent root element.

    Listeners must not mutate the document they are notified by; doing so
    raises :class:`ReentrantMutationError`.  Reading from inside the
    listener is fine.
    """

    def __init__(self, listener: ChangeListener | None = None, *, root_name: str = ":root") -> None:
        self._listener = listener
        self._slots: list[Slot] = []
        self._free: list[int] = []
        self._notifying = False

        self._root = self._alloc(ElementData(root_name))
        self._emit(events.ElementCreated(self._root))

    @classmethod
    def from_config(cls, config: GraffitiConfig, listener: ChangeListener | None = None) -> Document:
        return cls(listener, root_name=config.root_name)

    @property
    def root(self) -> NodeId:
        return self._root

    # --- arena ----------------------------------------------------------------

    def _alloc(self, data: ElementData | TextData) -> NodeId:
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
            slot.generation += 1
            slot.data = data
        else:
            index = len(self._slots)
            slot = Slot(data=data)
            self._slots.append(slot)
        return NodeId(index, slot.generation)

    def _slot(self, node: NodeId) -> Slot:
        if not isinstance(node, NodeId) or not 0 <= node.index < len(self._slots):
            raise InvalidNodeError(node)
        slot = self._slots[node.index]
        if slot.data is None or slot.generation != node.generation:
            raise InvalidNodeError(node)
        return slot

    def _id(self, index: int) -> NodeId:
        return NodeId(index, self._slots[index].generation)

    def _element(self, node: NodeId) -> ElementData:
        data = self._slot(node).data
        if not isinstance(data, ElementData):
            raise NodeKindError(node, "an element")
        return data

    def _text(self, node: NodeId) -> TextData:
        data = self._slot(node).data
        if not isinstance(data, TextData):
            raise NodeKindError(node, "a text node")
        return data

    # --- notification ---------------------------------------------------------

    def _check_writable(self) -> None:
        if self._notifying:
            raise ReentrantMutationError("Document mutated from inside its change listener")

    def _emit(self, event: events.DocumentEvent) -> None:
        if self._listener is None:
            return
        self._notifying = True
        try:
            self._listener(event)
        finally:
            self._notifying = False

    # --- shared for all node types --------------------------------------------

    def is_alive(self, node: NodeId) -> bool:
        """Return True if *node* refers to a live (not freed) node."""
        try:
            self._slot(node)
        except InvalidNodeError:
            return False
        return True

    def is_element(self, node: NodeId) -> bool:
        return isinstance(self._slot(node).data, ElementData)

    def is_text(self, node: NodeId) -> bool:
        return isinstance(self._slot(node).data, TextData)

    def parent(self, node: NodeId) -> NodeId | None:
        parent = self._slot(node).parent
        return None if parent is None else self._id(parent)

    def children(self, node: NodeId) -> list[NodeId]:
        return [self._id(i) for i in self._slot(node).children]

    def descendants(self, node: NodeId) -> Iterator[NodeId]:
        """Yield every node below *node*, depth-first, in document order."""
        for child in self.children(node):
            yield child
            yield from self.descendants(child)

    def insert_child(self, parent: NodeId, child: NodeId, index: int) -> None:
        """Insert detached *child* into *parent*'s children at *index*."""
        self._check_writable()
        parent_slot = self._slot(parent)
        child_slot = self._slot(child)

        if not isinstance(parent_slot.data, ElementData):
            raise HierarchyError(f"Cannot insert into text node {parent!r}")
        if child == self._root:
            raise HierarchyError("The root node cannot be inserted")
        if child_slot.parent is not None:
            raise HierarchyError(f"{child!r} already has a parent; remove it first")
        ancestor: NodeId | None = parent
        while ancestor is not None:
            if ancestor == child:
                raise HierarchyError(f"Inserting {child!r} into {parent!r} would create a cycle")
            ancestor = self.parent(ancestor)
        if not 0 <= index <= len(parent_slot.children):
            raise HierarchyError(
                f"Index {index} out of range for {len(parent_slot.children)} children"
            )

        parent_slot.children.insert(index, child.index)
        child_slot.parent = parent.index

        self._emit(events.NodeInserted(parent, child, index))
        self._emit(events.ParentChanged(child, parent))

    def append_child(self, parent: NodeId, child: NodeId) -> None:
        self.insert_child(parent, child, len(self._slot(parent).children))

    def remove_child(self, parent: NodeId, child: NodeId) -> None:
        """Detach *child* from *parent*; the child stays alive."""
        self._check_writable()
        parent_slot = self._slot(parent)
        child_slot = self._slot(child)
        if child_slot.parent != parent.index:
            raise HierarchyError(f"{child!r} is not a child of {parent!r}")

        parent_slot.children.remove(child.index)
        child_slot.parent = None

        self._emit(events.NodeRemoved(parent, child))
        self._emit(events.ParentChanged(child, None))

    def free_node(self, node: NodeId) -> None:
        """Release a detached, childless node; its handle becomes stale.

        Not recursive: detach and free children first, or use
        :meth:`free_subtree`.
        """
        self._check_writable()
        slot = self._slot(node)
        if node == self._root:
            raise HierarchyError("The root node cannot be freed")
        if slot.parent is not None:
            raise HierarchyError(f"{node!r} is still attached; remove it first")
        if slot.children:
            raise HierarchyError(f"{node!r} still has {len(slot.children)} children")

        slot.data = None
        self._free.append(node.index)

        self._emit(events.NodeDestroyed(node))

    def free_subtree(self, node: NodeId) -> None:
        """Detach *node* if needed, then free it and everything below it."""
        self._check_writable()
        if node == self._root:
            raise HierarchyError("The root node cannot be freed")
        parent = self.parent(node)
        if parent is not None:
            self.remove_child(parent, node)
        for child in self.children(node):
            self.free_subtree(child)
        self.free_node(node)

    # --- text node ------------------------------------------------------------

    def create_text_node(self, text: str) -> NodeId:
        self._check_writable()
        node = self._alloc(TextData(text))
        self._emit(events.TextNodeCreated(node))
        return node

    def text(self, text_node: NodeId) -> str:
        return self._text(text_node).text

    def set_text(self, text_node: NodeId, text: str) -> None:
        self._check_writable()
        self._text(text_node).text = text
        self._emit(events.TextChanged(text_node))

    # --- element --------------------------------------------------------------

    def create_element(self, local_name: str) -> NodeId:
        self._check_writable()
        node = self._alloc(ElementData(local_name))
        self._emit(events.ElementCreated(node))
        return node

    def local_name(self, element: NodeId) -> str:
        return self._element(element).local_name

    def attribute(self, element: NodeId, name: str) -> str | None:
        return self._element(element).attributes.get(name)

    def attributes(self, element: NodeId) -> dict[str, str]:
        """Return a copy of the element's attributes."""
        return dict(self._element(element).attributes)

    def set_attribute(self, element: NodeId, name: str, value: str) -> None:
        self._check_writable()
        self._element(element).attributes[name] = value
        self._emit(events.AttributesChanged(element, name))

    def remove_attribute(self, element: NodeId, name: str) -> None:
        """Remove attribute *name*; nothing is emitted if it was not set."""
        self._check_writable()
        attributes = self._element(element).attributes
        if name not in attributes:
            return
        del attributes[name]
        self._emit(events.AttributesChanged(element, name))

    # --- dunder helpers -------------------------------------------------------

    def __len__(self) -> int:
        """Number of live nodes, the root included."""
        return len(self._slots) - len(self._free)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, NodeId) and self.is_alive(node)

    def __repr__(self) -> str:
        return f"<Document root={self._root!r} nodes={len(self)}>"
