"""Rewriting of resource references and escaping of raw text."""

from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution

from .tree import element_children, walk_depth_first

LINK_ATTRIBUTES = ("src", "href")


def fix_all_links(element: Tag, base_url: str | None) -> None:
    """
    Make every ``src`` and ``href`` in ``element`` and its descendants absolute.

    References are resolved against ``base_url``, the location of the page the
    element came from. Without a base URL nothing is changed.
    """
    if not base_url:
        return

    for node in walk_depth_first(element, element_children):
        for attribute in LINK_ATTRIBUTES:
            value = node.get(attribute)
            if isinstance(value, str):
                node[attribute] = urljoin(base_url, value.strip())


def document_base_url(document: BeautifulSoup) -> str | None:
    """Return href of the document's <base> element, if any."""
    base = document.find("base", href=True)
    if base is None:
        return None
    href = base["href"]
    return href if isinstance(href, str) else None


def html_encode(text: str) -> str:
    """Escape raw text so it can be embedded into markup."""
    return EntitySubstitution.substitute_xml(text)
