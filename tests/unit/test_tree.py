"""Unit tests for generic tree traversal helpers."""

from dataclasses import dataclass, field

from bs4 import BeautifulSoup

from domain.parsers.tree import SiblingSequence, element_children, walk_depth_first


@dataclass
class Node:
    name: str
    children: list["Node"] = field(default_factory=list)


def test_walk_depth_first_visits_each_node_once_in_preorder():
    tree = Node("root", [Node("a", [Node("a1"), Node("a2")]), Node("b", [Node("b1")])])

    names = [node.name for node in walk_depth_first(tree, lambda n: n.children)]

    assert names == ["root", "a", "a1", "a2", "b", "b1"]


def test_walk_depth_first_single_node():
    assert [n.name for n in walk_depth_first(Node("x"), lambda n: n.children)] == ["x"]


def test_walk_depth_first_over_soup_elements():
    soup = BeautifulSoup("<div><p>t<b>x</b></p><span></span></div>", "lxml")

    names = [tag.name for tag in walk_depth_first(soup.div, element_children)]

    assert names == ["div", "p", "b", "span"]


def test_sibling_sequence_is_restartable():
    items = ["title", "a", "b", "c"]

    def next_sibling(item):
        position = items.index(item) + 1
        return items[position] if position < len(items) else None

    sequence = SiblingSequence("title", next_sibling)

    assert list(sequence) == ["a", "b", "c"]
    assert list(sequence) == ["a", "b", "c"]


def test_sibling_sequence_without_siblings():
    assert list(SiblingSequence("last", lambda item: None)) == []
