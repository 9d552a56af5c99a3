"""Harvest the HTML element names the parser accepts into a C++ header.

The list is scraped from the MDN element reference, cleaned up and
written as a sorted `constexpr const char *tags[]` array. Any failure
aborts before the header text exists, so a stale tags.hpp is never
half-overwritten.
"""

from __future__ import annotations

from sptgen.errors import HarvestError, HarvestNetworkError, HarvestNoMatchError

DEFAULT_TAGS_URL = "https://developer.mozilla.org/en/docs/Web/HTML/Element"
DEFAULT_TIMEOUT = 30.0

TAG_XPATH = (
    "//table[contains(concat(' ', normalize-space(@class), ' '), ' standard-table ')]"
    "//a//code"
)

# MDN lists the heading elements as a single "h1–h6" entry.
BLACKLIST_TAGS = frozenset({"h1–h6"})
SUPPLEMENTAL_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

HEADER_GUARD = "SEE_PHIT_TAGS_HPP"


def fetch_page(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET `url` and return the body. Raises HarvestNetworkError on any failure."""
    try:
        import requests
    except ImportError as e:
        raise HarvestError(
            "requests is required for tag harvesting. "
            "Install with: pip install 'sptgen[harvest]'"
        ) from e

    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise HarvestNetworkError(f"fetching {url} failed: {e}") from e
    if resp.status_code >= 300:
        raise HarvestNetworkError(f"fetching {url} failed: HTTP {resp.status_code}")
    return resp.text


def extract_tags(html: str) -> list[str]:
    """Return the tag names listed in the page's reference tables, in page order."""
    try:
        from lxml import etree
        from lxml import html as lxml_html
    except ImportError as e:
        raise HarvestError(
            "lxml is required for tag harvesting. "
            "Install with: pip install 'sptgen[harvest]'"
        ) from e

    try:
        doc = lxml_html.fromstring(html)
    except (etree.ParserError, ValueError) as e:
        raise HarvestNoMatchError(f"page could not be parsed: {e}") from e

    # A cell may hold several tags ("<h1>–<h6>"); keep what follows each "<".
    names: list[str] = []
    for code in doc.xpath(TAG_XPATH):
        for piece in code.text_content().split(">"):
            name = piece.split("<")[-1].strip()
            if name:
                names.append(name)

    if not names:
        raise HarvestNoMatchError("no tag names found in reference tables")
    return names


def collect_tags(names: list[str]) -> list[str]:
    """Dedupe, drop blacklisted entries, add the heading tags, sort."""
    seen: dict[str, None] = {}
    for name in names:
        if name not in BLACKLIST_TAGS:
            seen.setdefault(name, None)
    for name in SUPPLEMENTAL_TAGS:
        seen.setdefault(name, None)
    return sorted(seen)


def render_tags_header(tags: list[str]) -> str:
    lines = [
        f"#ifndef {HEADER_GUARD}",
        f"#define {HEADER_GUARD}",
        "",
        "constexpr const char *tags[] = {",
        *[f'  "{tag}",' for tag in tags],
        "};",
        "",
        "#endif",
    ]
    return "\n".join(lines) + "\n"


def harvest_tags(url: str = DEFAULT_TAGS_URL, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch, extract and render the tag header text."""
    return render_tags_header(collect_tags(extract_tags(fetch_page(url, timeout=timeout))))
