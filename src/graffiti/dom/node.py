"""Node handles and payloads stored in the document arena."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class NodeId:
    """Handle into a Document arena.

    ``generation`` changes every time a slot is reused, so a handle kept
    after its node was freed is detected instead of silently aliasing the
    slot's next occupant.
    """

    index: int
    generation: int = 0

    def __repr__(self) -> str:
        if self.generation:
            return f"NodeId({self.index}@{self.generation})"
        return f"NodeId({self.index})"


@dataclass
class ElementData:
    local_name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class TextData:
    text: str


NodeData = ElementData | TextData


@dataclass
class Slot:
    """One arena entry; ``data`` is None while the slot is free."""

    generation: int = 0
    data: NodeData | None = None
    parent: int | None = None
    children: list[int] = field(default_factory=list)
