from urllib.parse import urlsplit

import pytest

from doc_scout.crawler.link_extractor import discover_links, is_supported_country_link
from doc_scout.parser.html_parser import parse_html

PAGE = "https://learn.microsoft.com/en-us/dynamics365/a"
DOMAIN = "learn.microsoft.com"


def links_of(html: str):
    return discover_links(parse_html(html, PAGE), PAGE, DOMAIN)


def test_searches_only_navigation_regions():
    html = (
        '<nav data-bi-name="toc"><a href="/toc-link">T</a></nav>'
        '<nav role="navigation"><a href="nav-link">N</a></nav>'
        '<aside><a href="https://learn.microsoft.com/side">S</a></aside>'
        '<main><a href="/in-content">C</a></main>'
        '<nav><a href="/plain-nav">P</a></nav>'
    )
    assert links_of(html) == [
        "https://learn.microsoft.com/toc-link",
        "https://learn.microsoft.com/en-us/dynamics365/nav-link",
        "https://learn.microsoft.com/side",
    ]


def test_skips_fragments_empty_and_foreign_links():
    html = (
        "<aside>"
        '<a href="#section">frag</a>'
        '<a href="">empty</a>'
        '<a href="https://other.com/c">other</a>'
        '<a href="mailto:a@b.com">mail</a>'
        '<a href="javascript:void(0)">js</a>'
        '<a href="http://[::1">broken</a>'
        '<a href="/b">ok</a>'
        "</aside>"
    )
    assert links_of(html) == ["https://learn.microsoft.com/b"]


def test_dedupes_without_canonicalizing():
    html = (
        '<aside><a href="/b/#x">1</a><a href="/b/#x">2</a></aside>'
        '<nav role="navigation"><a href="/b/#x">3</a><a href="/c">4</a></nav>'
    )
    assert links_of(html) == ["https://learn.microsoft.com/b/#x", "https://learn.microsoft.com/c"]


@pytest.mark.parametrize(
    "anchor",
    [
        '<a href="/d">Supported countries/regions</a>',
        '<a href="/d">supported regions</a>',
        '<a href="/d">See supported country list</a>',
        '<a href="/d">Country/Region availability</a>',
        '<a href="/docs/country-region-list">list</a>',
        '<a href="/availability/by-country">list</a>',
    ],
)
def test_excludes_country_links(anchor):
    assert links_of(f"<aside><ul><li>{anchor}</li></ul></aside>") == []


def test_excludes_by_text_regardless_of_href():
    html = '<aside><a href="/totally/unrelated">Supported countries/regions</a></aside>'
    anchor = parse_html(html, PAGE).select("a")[0]
    assert is_supported_country_link(anchor)
    assert links_of(html) == []


def test_excludes_links_inside_country_container():
    html = (
        "<aside>"
        '<div><h3>Supported regions</h3><a href="/fr">France</a><a href="/de">Germany</a></div>'
        '<ul><li><a href="/keep">Overview</a></li></ul>'
        "</aside>"
    )
    assert links_of(html) == ["https://learn.microsoft.com/keep"]


def test_never_returns_foreign_host():
    html = "<aside>" + "".join(
        f'<a href="{href}">x</a>'
        for href in (
            "/a", "https://other.com/b", "//cdn.example.net/c",
            "https://learn.microsoft.com.evil.io/d", "HTTPS://LEARN.MICROSOFT.COM/e",
        )
    ) + "</aside>"
    links = links_of(html)
    assert links
    assert all(urlsplit(u).hostname == DOMAIN for u in links)


def test_only_https_links_without_explicit_port():
    html = (
        "<aside>"
        '<a href="http://learn.microsoft.com/b">plain http</a>'
        '<a href="https://learn.microsoft.com:8443/z">other port</a>'
        '<a href="https://learn.microsoft.com:443/y">default port spelled out</a>'
        '<a href="/b">ok</a>'
        "</aside>"
    )
    assert links_of(html) == ["https://learn.microsoft.com/b"]


def test_allowed_schemes_and_port_are_configurable():
    html = '<aside><a href="http://localhost:8080/b">b</a><a href="https://localhost:8080/c">c</a></aside>'
    page_url = "http://localhost:8080/a"
    links = discover_links(parse_html(html, page_url), page_url, "localhost:8080", ("http",))
    assert links == ["http://localhost:8080/b"]
