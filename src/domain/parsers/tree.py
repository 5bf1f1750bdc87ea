"""Generic traversal helpers for tree-shaped documents.

Both helpers take accessor callables instead of relying on a specific
document binding, so they work on BeautifulSoup trees as well as on plain
in-memory trees. The BeautifulSoup accessors live at the bottom.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from bs4 import PageElement, Tag

N = TypeVar("N")


def walk_depth_first(root: N, children: Callable[[N], Iterable[N]]) -> Iterator[N]:
    """
    Yield ``root`` and all its descendants in pre-order.

    Every node is yielded exactly once. Children are read lazily, right
    before they are visited, so visitors may mutate attributes of the
    yielded node.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(children(node))))


class SiblingSequence(Generic[N]):
    """
    Lazy sequence of the nodes following ``start``.

    Each iteration starts again from ``start``, the starting node itself is
    not included.
    """

    def __init__(self, start: N, next_sibling: Callable[[N], N | None]):
        self.start = start
        self.next_sibling = next_sibling

    def __iter__(self) -> Iterator[N]:
        node = self.next_sibling(self.start)
        while node is not None:
            yield node
            node = self.next_sibling(node)


def element_children(tag: Tag) -> list[Tag]:
    """Child elements of a BeautifulSoup tag, text nodes excluded."""
    return [child for child in tag.children if isinstance(child, Tag)]


def next_node(node: PageElement) -> PageElement | None:
    """Next sibling of a BeautifulSoup node, text nodes included."""
    return node.next_sibling


def first_element_child(tag: Tag) -> Tag | None:
    for child in tag.children:
        if isinstance(child, Tag):
            return child
    return None
