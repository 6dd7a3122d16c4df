"""Selector matching against any element tree, plus specificity.

Matching only needs four read accessors, described by :class:`ElementTree`.
:class:`graffiti.dom.Document` satisfies the protocol as-is, but so would any
other tree exposing the same methods.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from graffiti.css.selector import Combinator, Component, ComponentKind, Selector, SelectorPart

__all__ = ["ElementTree", "Specificity", "matches", "match_specificity", "specificity"]

Specificity = tuple[int, int, int]


class ElementTree(Protocol):
    """Read-only view of a tree that selectors can be matched against."""

    def is_element(self, node: Any) -> bool: ...

    def local_name(self, node: Any) -> str: ...

    def attribute(self, node: Any, name: str) -> str | None: ...

    def parent(self, node: Any) -> Any | None: ...


def _compounds(alternative: Sequence[SelectorPart]) -> tuple[list[list[SelectorPart]], list[Combinator]]:
    """Split a subject-first alternative into compounds and the relations between them."""
    compounds: list[list[SelectorPart]] = [[]]
    relations: list[Combinator] = []
    for part in alternative:
        if part in (Combinator.PARENT, Combinator.ANCESTOR):
            relations.append(part)
            compounds.append([])
        else:
            compounds[-1].append(part)
    return compounds, relations


def _matches_component(tree: ElementTree, node: Any, part: SelectorPart) -> bool:
    if part is Combinator.UNIVERSAL:
        return True
    if not isinstance(part, Component):
        return False
    kind = part.kind
    if kind is ComponentKind.UNIVERSAL:
        return True
    if kind is ComponentKind.LOCAL_NAME:
        return tree.local_name(node) == part.name
    if kind is ComponentKind.IDENTIFIER:
        return tree.attribute(node, "id") == part.name
    if kind is ComponentKind.CLASS_NAME:
        return part.name in (tree.attribute(node, "class") or "").split()
    return False


def _matches_compound(tree: ElementTree, node: Any, compound: list[SelectorPart]) -> bool:
    if node is None or not tree.is_element(node):
        return False
    return all(_matches_component(tree, node, part) for part in compound)


def _matches_from(
    tree: ElementTree,
    node: Any,
    compounds: list[list[SelectorPart]],
    relations: list[Combinator],
    index: int,
) -> bool:
    if not _matches_compound(tree, node, compounds[index]):
        return False
    if index == len(relations):
        return True

    if relations[index] is Combinator.PARENT:
        return _matches_from(tree, tree.parent(node), compounds, relations, index + 1)

    # Ancestor: try every ancestor, backtracking if the rest of the chain fails.
    ancestor = tree.parent(node)
    while ancestor is not None:
        if _matches_from(tree, ancestor, compounds, relations, index + 1):
            return True
        ancestor = tree.parent(ancestor)
    return False


def _alternative_specificity(alternative: Sequence[SelectorPart]) -> Specificity:
    ids = classes = names = 0
    for part in alternative:
        if not isinstance(part, Component):
            continue
        if part.kind is ComponentKind.IDENTIFIER:
            ids += 1
        elif part.kind in (ComponentKind.CLASS_NAME, ComponentKind.UNSUPPORTED):
            classes += 1
        elif part.kind is ComponentKind.LOCAL_NAME:
            names += 1
    return ids, classes, names


def specificity(selector: Selector) -> Specificity:
    """Return the highest specificity among the selector's alternatives.

    Specificity is ``(ids, classes, local names)``, compared as a tuple.
    """
    return max(_alternative_specificity(alt) for alt in selector.alternatives())


def match_specificity(selector: Selector, tree: ElementTree, node: Any) -> Specificity | None:
    """Return the specificity of the best matching alternative, or None."""
    best: Specificity | None = None
    for alternative in selector.alternatives():
        compounds, relations = _compounds(alternative)
        if _matches_from(tree, node, compounds, relations, 0):
            spec = _alternative_specificity(alternative)
            if best is None or spec > best:
                best = spec
    return best


def matches(selector: Selector, tree: ElementTree, node: Any) -> bool:
    """Return True if *node* matches any alternative of *selector*."""
    return match_specificity(selector, tree, node) is not None
