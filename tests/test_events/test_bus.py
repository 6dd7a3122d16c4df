"""Tests for the synchronous event bus."""

from graffiti.dom import Document
from graffiti.events import ElementCreated, EventBus, NodeInserted, ParentChanged


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        got = []
        bus.subscribe(NodeInserted, got.append)
        bus.emit(ElementCreated(None))
        bus.emit(NodeInserted(None, None, 0))
        assert got == [NodeInserted(None, None, 0)]

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(ElementCreated, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(ElementCreated(None))
        assert order == ["all", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        got = []
        bus.subscribe(ElementCreated, got.append)
        bus.unsubscribe(ElementCreated, got.append)
        bus.unsubscribe(NodeInserted, got.append)
        bus.emit(ElementCreated(None))
        assert got == []

    def test_on_all_returns_undo(self):
        bus = EventBus()
        got = []
        undo = bus.on_all(got.append)
        bus.emit(ElementCreated(None))
        undo()
        undo()
        bus.emit(ElementCreated(None))
        assert got == [ElementCreated(None)]

    def test_subscribe_returns_undo(self):
        bus = EventBus()
        got = []
        undo = bus.subscribe(ElementCreated, got.append)
        undo()
        bus.emit(ElementCreated(None))
        assert got == []

    def test_callback_may_unsubscribe_during_emit(self):
        bus = EventBus()
        got = []

        def once(event):
            got.append(event)
            bus.unsubscribe(ElementCreated, once)

        bus.subscribe(ElementCreated, once)
        bus.emit(ElementCreated(None))
        bus.emit(ElementCreated(None))
        assert len(got) == 1


class TestBusAsDocumentListener:
    def test_fans_out_document_events(self):
        bus = EventBus()
        created, moved = [], []
        bus.subscribe(ElementCreated, created.append)
        bus.subscribe(ParentChanged, moved.append)

        doc = Document(bus.emit)
        el = doc.create_element("div")
        doc.append_child(doc.root, el)

        assert created == [ElementCreated(doc.root), ElementCreated(el)]
        assert moved == [ParentChanged(el, doc.root)]

    def test_bus_itself_is_a_listener(self):
        bus = EventBus()
        seen = []
        bus.on_all(seen.append)
        doc = Document(bus)
        assert seen == [ElementCreated(doc.root)]
