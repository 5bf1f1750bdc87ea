"""Unit tests for link rewriting and text encoding."""

from bs4 import BeautifulSoup

from domain.parsers.links import document_base_url, fix_all_links, html_encode

BASE = "https://ksp.mff.cuni.cz/h/ulohy/32/zadani2.html"


def test_fix_all_links_rewrites_nested_references():
    soup = BeautifulSoup(
        '<div><a href="reseni2.html">r</a><p><img src="../obr/a.png">'
        '<a href="https://example.org/x">x</a></p><span>no links</span></div>',
        "lxml",
    )

    fix_all_links(soup.div, BASE)

    assert [a["href"] for a in soup.find_all("a")] == [
        "https://ksp.mff.cuni.cz/h/ulohy/32/reseni2.html",
        "https://example.org/x",
    ]
    assert soup.img["src"] == "https://ksp.mff.cuni.cz/h/ulohy/obr/a.png"
    assert not soup.span.attrs


def test_fix_all_links_rewrites_root_element():
    soup = BeautifulSoup('<a href="/cviciste/">c</a>', "lxml")

    fix_all_links(soup.a, BASE)

    assert soup.a["href"] == "https://ksp.mff.cuni.cz/cviciste/"


def test_fix_all_links_without_base_keeps_values():
    soup = BeautifulSoup('<a href="x.html">x</a>', "lxml")

    fix_all_links(soup.a, None)

    assert soup.a["href"] == "x.html"


def test_document_base_url():
    soup = BeautifulSoup(f'<html><head><base href="{BASE}"></head><body></body></html>', "lxml")

    assert document_base_url(soup) == BASE
    assert document_base_url(BeautifulSoup("<p>x</p>", "lxml")) is None


def test_html_encode():
    assert html_encode('a < b && c > "d"') == 'a &lt; b &amp;&amp; c &gt; "d"'
