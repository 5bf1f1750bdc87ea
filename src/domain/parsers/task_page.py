"""Parser for extracting a single task from a shared assignment/solution page.

One KSP page holds all tasks of a series. A task starts at its title block
(the element with id ``task-<id>``) and continues with the following
siblings until the next story, the next ``<h3>`` or the "Řešení" heading.
"""

import re
from enum import Enum, auto

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from loguru import logger

from domain.exceptions import AnchorNotFoundError
from domain.models import TaskAssignmentData

from .links import document_base_url, fix_all_links, html_encode
from .tree import SiblingSequence, first_element_child, next_node

TITLE_PATTERN = re.compile(r"(\d+-Z?\d+-\d+) (.*?)( \((\d+) bod.*\))?")

UNKNOWN_TASK_NAME = "Neznámé jméno úlohy"
SOLUTION_HEADING = "Řešení"

# Shown above KSP-H open-data tasks, useless outside the series page.
OPEN_DATA_NOTICE = (
    "Toto je praktická open-data úloha. V odevzdávacím systému si necháte "
    "vygenerovat vstupy a odevzdáte příslušné výstupy. Záleží jen na vás, "
    "jak výstupy vyrobíte."
)


class ScanState(Enum):
    SKIPPING_SEPARATORS = auto()
    COPYING = auto()
    DONE = auto()


class NodeKind(Enum):
    SEPARATOR = auto()
    BOUNDARY = auto()
    NOTICE = auto()
    CONTENT = auto()
    TEXT = auto()
    IGNORED = auto()


class Action(Enum):
    IGNORE = auto()
    # first content element: strip the practical-task marker, then emit
    START = auto()
    EMIT_ELEMENT = auto()
    EMIT_TEXT = auto()
    STOP = auto()


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def is_boundary(tag: Tag) -> bool:
    """True for elements that start the next task or the solution."""
    return (
        "story" in (tag.get("class") or [])
        or tag.name == "h3"
        or tag.get_text().strip() == SOLUTION_HEADING
    )


def classify_node(node: PageElement) -> NodeKind:
    """Classify a sibling node for the scanning state machine."""
    if isinstance(node, Tag):
        if is_boundary(node):
            return NodeKind.BOUNDARY
        if node.name == "hr":
            return NodeKind.SEPARATOR
        if normalize_whitespace(node.get_text()) == OPEN_DATA_NOTICE:
            return NodeKind.NOTICE
        return NodeKind.CONTENT

    # Comments, CDATA and doctypes are NavigableString subclasses
    if type(node) is NavigableString and node.strip():
        return NodeKind.TEXT
    return NodeKind.IGNORED


def transition(state: ScanState, kind: NodeKind) -> tuple[ScanState, Action]:
    """Pure transition function of the content scanner."""
    if state is ScanState.DONE or kind is NodeKind.BOUNDARY:
        return ScanState.DONE, Action.STOP

    if state is ScanState.SKIPPING_SEPARATORS:
        if kind is NodeKind.CONTENT:
            return ScanState.COPYING, Action.START
        if kind is NodeKind.NOTICE:
            return ScanState.COPYING, Action.IGNORE
        return ScanState.SKIPPING_SEPARATORS, Action.IGNORE

    if kind in (NodeKind.CONTENT, NodeKind.SEPARATOR):
        return ScanState.COPYING, Action.EMIT_ELEMENT
    if kind is NodeKind.TEXT:
        return ScanState.COPYING, Action.EMIT_TEXT
    return ScanState.COPYING, Action.IGNORE


def remove_practical_marker(tag: Tag) -> None:
    """
    Remove the leading ``<img class="leftfloat">`` marking a practical task.

    Only some tasks carry it, dropping it keeps extracted tasks consistent.
    """
    first = first_element_child(tag)
    if first is not None and first.name == "img" and "leftfloat" in (first.get("class") or []):
        first.decompose()


class TaskPageParser:
    """Extracts one task from a parsed KSP assignment or solution page."""

    def __init__(self, base_url: str | None = None):
        """
        Initialize parser.

        Args:
            base_url: URL to resolve relative links against. Defaults to the
                ``<base>`` element of each parsed document.
        """
        self.base_url = base_url

    def parse(self, anchor_id: str, document: BeautifulSoup) -> TaskAssignmentData:
        """
        Extract the task whose title block has id ``anchor_id``.

        Raises:
            AnchorNotFoundError: If the document does not contain the anchor
        """
        title = document.find(id=anchor_id)
        if not isinstance(title, Tag):
            raise AnchorNotFoundError(anchor_id)

        base_url = self.base_url or document_base_url(document)
        fix_all_links(title, base_url)

        task_id, name, points = self._parse_title(anchor_id, title)
        description = self._extract_description(title, base_url)

        return TaskAssignmentData(
            id=task_id,
            name=name,
            points=points,
            description=description,
            title_html=str(title),
        )

    def _parse_title(self, anchor_id: str, title: Tag) -> tuple[str, str, int | None]:
        """Parse id, name and points from the title block text."""
        text = title.get_text().strip()
        match = TITLE_PATTERN.fullmatch(text)
        if not match:
            logger.warning(f"Unrecognized title of {anchor_id}: {text!r}")
            return anchor_id, UNKNOWN_TASK_NAME, None

        task_id, name, _, points = match.groups()
        return task_id.strip(), name.strip(), int(points) if points else None

    def _extract_description(self, title: Tag, base_url: str | None) -> str:
        """Copy the siblings following the title block up to the next boundary."""
        chunks: list[str] = []
        state = ScanState.SKIPPING_SEPARATORS

        for node in SiblingSequence(title, next_node):
            state, action = transition(state, classify_node(node))

            if action is Action.STOP:
                break
            if action is Action.START:
                remove_practical_marker(node)
            if action in (Action.START, Action.EMIT_ELEMENT):
                fix_all_links(node, base_url)
                chunks.append(str(node) + "\n")
            elif action is Action.EMIT_TEXT:
                chunks.append(html_encode(str(node)))

        logger.debug(f"Extracted {len(chunks)} chunk(s) after {title.get('id')}")
        return "".join(chunks)


def extract_task(
    anchor_id: str, document: BeautifulSoup, base_url: str | None = None
) -> TaskAssignmentData:
    """Convenience function to extract one task from a document."""
    return TaskPageParser(base_url).parse(anchor_id, document)
