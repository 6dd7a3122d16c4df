"""Tests for the arena-backed Document tree and its change events."""

import pytest

from graffiti.config import GraffitiConfig
from graffiti.dom import (
    Document,
    DocumentError,
    HierarchyError,
    InvalidNodeError,
    NodeId,
    NodeKindError,
    ReentrantMutationError,
)
from graffiti.events import (
    AttributesChanged,
    ElementCreated,
    NodeDestroyed,
    NodeInserted,
    NodeRemoved,
    ParentChanged,
    TextChanged,
    TextNodeCreated,
)


@pytest.fixture
def seen():
    return []


@pytest.fixture
def doc(seen):
    document = Document(seen.append)
    seen.clear()
    return document


# ---------------------------------------------------------------------------
# Construction and creation
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_root_is_created_and_announced(self):
        seen = []
        doc = Document(seen.append)
        assert seen == [ElementCreated(doc.root)]
        assert doc.local_name(doc.root) == ":root"
        assert doc.parent(doc.root) is None
        assert len(doc) == 1

    def test_custom_root_name(self):
        doc = Document(root_name="html")
        assert doc.local_name(doc.root) == "html"

    def test_from_config(self):
        doc = Document.from_config(GraffitiConfig(root_name="body"))
        assert doc.local_name(doc.root) == "body"

    def test_without_listener(self):
        doc = Document()
        doc.append_child(doc.root, doc.create_element("div"))
        assert len(doc.children(doc.root)) == 1


class TestCreation:
    def test_create_element(self, doc, seen):
        el = doc.create_element("div")
        assert seen == [ElementCreated(el)]
        assert doc.is_element(el) and not doc.is_text(el)
        assert doc.parent(el) is None
        assert doc.children(el) == []

    def test_create_text_node(self, doc, seen):
        text = doc.create_text_node("hi")
        assert seen == [TextNodeCreated(text)]
        assert doc.is_text(text)
        assert doc.text(text) == "hi"

    def test_handles_are_distinct(self, doc):
        assert doc.create_element("a") != doc.create_element("a")


# ---------------------------------------------------------------------------
# Insertion and removal
# ---------------------------------------------------------------------------


class TestInsertRemove:
    def test_insert_emits_inserted_then_parent_changed(self, doc, seen):
        el = doc.create_element("div")
        seen.clear()
        doc.insert_child(doc.root, el, 0)
        assert seen == [NodeInserted(doc.root, el, 0), ParentChanged(el, doc.root)]
        assert doc.parent(el) == doc.root

    def test_insert_positions(self, doc):
        a, b, c = (doc.create_element(n) for n in "abc")
        doc.append_child(doc.root, a)
        doc.append_child(doc.root, c)
        doc.insert_child(doc.root, b, 1)
        assert doc.children(doc.root) == [a, b, c]

    def test_append_reports_end_index(self, doc, seen):
        doc.append_child(doc.root, doc.create_element("a"))
        b = doc.create_element("b")
        seen.clear()
        doc.append_child(doc.root, b)
        assert seen[0] == NodeInserted(doc.root, b, 1)

    def test_remove_emits_removed_then_parent_changed(self, doc, seen):
        el = doc.create_element("div")
        doc.append_child(doc.root, el)
        seen.clear()
        doc.remove_child(doc.root, el)
        assert seen == [NodeRemoved(doc.root, el), ParentChanged(el, None)]
        assert doc.parent(el) is None
        assert doc.is_alive(el)

    def test_text_child(self, doc):
        p = doc.create_element("p")
        text = doc.create_text_node("x")
        doc.append_child(p, text)
        assert doc.children(p) == [text]


class TestHierarchyErrors:
    def test_insert_into_text_node(self, doc):
        text = doc.create_text_node("x")
        with pytest.raises(HierarchyError):
            doc.append_child(text, doc.create_element("a"))

    def test_insert_attached_child(self, doc):
        el = doc.create_element("a")
        doc.append_child(doc.root, el)
        other = doc.create_element("b")
        with pytest.raises(HierarchyError):
            doc.append_child(other, el)

    def test_insert_root(self, doc):
        with pytest.raises(HierarchyError):
            doc.append_child(doc.create_element("a"), doc.root)

    def test_insert_creating_cycle(self, doc):
        a = doc.create_element("a")
        b = doc.create_element("b")
        doc.append_child(a, b)
        with pytest.raises(HierarchyError):
            doc.append_child(b, a)
        with pytest.raises(HierarchyError):
            doc.append_child(a, a)

    def test_index_out_of_range(self, doc):
        el = doc.create_element("a")
        with pytest.raises(HierarchyError):
            doc.insert_child(doc.root, el, 1)
        with pytest.raises(HierarchyError):
            doc.insert_child(doc.root, el, -1)

    def test_remove_non_child(self, doc):
        el = doc.create_element("a")
        with pytest.raises(HierarchyError):
            doc.remove_child(doc.root, el)

    def test_failed_mutation_emits_nothing(self, doc, seen):
        el = doc.create_element("a")
        seen.clear()
        with pytest.raises(HierarchyError):
            doc.insert_child(doc.root, el, 5)
        assert seen == []
        assert doc.parent(el) is None

    def test_errors_share_a_base(self):
        assert issubclass(HierarchyError, DocumentError)
        assert issubclass(HierarchyError, ValueError)


# ---------------------------------------------------------------------------
# Freeing and stale handles
# ---------------------------------------------------------------------------


class TestFree:
    def test_free_detached_node(self, doc, seen):
        el = doc.create_element("a")
        seen.clear()
        doc.free_node(el)
        assert seen == [NodeDestroyed(el)]
        assert not doc.is_alive(el)
        assert el not in doc
        assert len(doc) == 1

    def test_free_root(self, doc):
        with pytest.raises(HierarchyError):
            doc.free_node(doc.root)
        with pytest.raises(HierarchyError):
            doc.free_subtree(doc.root)

    def test_free_attached(self, doc):
        el = doc.create_element("a")
        doc.append_child(doc.root, el)
        with pytest.raises(HierarchyError):
            doc.free_node(el)

    def test_free_with_children(self, doc):
        a = doc.create_element("a")
        doc.append_child(a, doc.create_element("b"))
        with pytest.raises(HierarchyError):
            doc.free_node(a)

    def test_slot_reuse_bumps_generation(self, doc):
        old = doc.create_element("a")
        doc.free_node(old)
        new = doc.create_element("b")
        assert new.index == old.index
        assert new != old
        assert doc.local_name(new) == "b"
        with pytest.raises(InvalidNodeError):
            doc.local_name(old)

    def test_out_of_range_handle(self, doc):
        with pytest.raises(InvalidNodeError):
            doc.parent(NodeId(99))
        assert not doc.is_alive(NodeId(99))

    def test_free_subtree_event_order(self, doc, seen):
        a = doc.create_element("a")
        b = doc.create_element("b")
        doc.append_child(doc.root, a)
        doc.append_child(a, b)
        seen.clear()
        doc.free_subtree(a)
        assert seen == [
            NodeRemoved(doc.root, a),
            ParentChanged(a, None),
            NodeRemoved(a, b),
            ParentChanged(b, None),
            NodeDestroyed(b),
            NodeDestroyed(a),
        ]
        assert doc.children(doc.root) == []
        assert len(doc) == 1


# ---------------------------------------------------------------------------
# Text and attributes
# ---------------------------------------------------------------------------


class TestTextAndAttributes:
    def test_set_text(self, doc, seen):
        text = doc.create_text_node("a")
        seen.clear()
        doc.set_text(text, "b")
        assert seen == [TextChanged(text)]
        assert doc.text(text) == "b"

    def test_set_and_remove_attribute(self, doc, seen):
        el = doc.create_element("div")
        seen.clear()
        doc.set_attribute(el, "id", "main")
        assert doc.attribute(el, "id") == "main"
        doc.remove_attribute(el, "id")
        assert doc.attribute(el, "id") is None
        assert seen == [AttributesChanged(el, "id"), AttributesChanged(el, "id")]

    def test_remove_missing_attribute_is_silent(self, doc, seen):
        el = doc.create_element("div")
        seen.clear()
        doc.remove_attribute(el, "id")
        assert seen == []

    def test_attributes_returns_copy(self, doc):
        el = doc.create_element("div")
        doc.set_attribute(el, "class", "x")
        attrs = doc.attributes(el)
        attrs["class"] = "y"
        assert doc.attribute(el, "class") == "x"

    def test_wrong_kind_accessors(self, doc):
        el = doc.create_element("div")
        text = doc.create_text_node("x")
        with pytest.raises(NodeKindError):
            doc.text(el)
        with pytest.raises(NodeKindError):
            doc.local_name(text)
        with pytest.raises(NodeKindError):
            doc.set_attribute(text, "id", "x")
        with pytest.raises(NodeKindError):
            doc.set_text(el, "x")


# ---------------------------------------------------------------------------
# Traversal and reentrancy
# ---------------------------------------------------------------------------


class TestTraversal:
    def test_descendants_in_document_order(self, doc):
        a, b, c, d = (doc.create_element(n) for n in "abcd")
        doc.append_child(doc.root, a)
        doc.append_child(a, b)
        doc.append_child(a, c)
        doc.append_child(doc.root, d)
        assert list(doc.descendants(doc.root)) == [a, b, c, d]
        assert list(doc.descendants(b)) == []


class TestReentrancy:
    def test_mutating_from_listener_raises(self):
        holder = {}

        def listener(event):
            if isinstance(event, NodeInserted):
                holder["doc"].create_element("x")

        doc = Document(listener)
        holder["doc"] = doc
        el = doc.create_element("a")
        with pytest.raises(ReentrantMutationError):
            doc.append_child(doc.root, el)

    def test_reading_from_listener_is_allowed(self):
        names = []
        holder = {}

        def listener(event):
            if isinstance(event, ParentChanged) and event.parent is not None:
                names.append(holder["doc"].local_name(event.parent))

        doc = Document(listener)
        holder["doc"] = doc
        doc.append_child(doc.root, doc.create_element("a"))
        assert names == [":root"]

    def test_document_usable_after_listener_error(self):
        holder = {"fail": False}

        def listener(event):
            if holder["fail"]:
                holder["fail"] = False
                raise RuntimeError("boom")

        doc = Document(listener)
        holder["fail"] = True
        with pytest.raises(RuntimeError):
            doc.create_element("a")
        assert doc.local_name(doc.create_element("b")) == "b"
