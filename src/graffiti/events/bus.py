"""Fan-out of document change events to many subscribers."""

from __future__ import annotations

from typing import Callable

from graffiti.events.types import DocumentEvent

Handler = Callable[[DocumentEvent], None]


class EventBus:
    """Synchronous publish-subscribe hub for :mod:`graffiti.events.types`.

    A Document reports to exactly one listener; hand it ``bus.emit`` (or the
    bus itself, which is callable) and subscribe any number of handlers
    here instead.  Catch-all handlers run before typed ones, each group in
    subscription order.  Handlers may subscribe or unsubscribe while an
    event is being delivered; the change applies from the next event on.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Handler]] = {}
        self._catch_all: list[Handler] = []

    def subscribe(self, event_type: type, handler: Handler) -> Callable[[], None]:
        """Deliver events of exactly *event_type* to *handler*.

        Returns a zero-argument function that undoes the subscription.
        """
        self._by_type.setdefault(event_type, []).append(handler)
        return lambda: self.unsubscribe(event_type, handler)

    def unsubscribe(self, event_type: type, handler: Handler) -> None:
        handlers = self._by_type.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def on_all(self, handler: Handler) -> Callable[[], None]:
        """Deliver every event to *handler*; returns an undo function like :meth:`subscribe`."""
        self._catch_all.append(handler)
        return lambda: self.off_all(handler)

    def off_all(self, handler: Handler) -> None:
        if handler in self._catch_all:
            self._catch_all.remove(handler)

    def emit(self, event: DocumentEvent) -> None:
        for handler in [*self._catch_all, *self._by_type.get(type(event), ())]:
            handler(event)

    __call__ = emit
