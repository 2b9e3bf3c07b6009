"""Page ``<meta>`` tag collection."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from contentpipe.dom import safe_str


def collect_meta(soup: BeautifulSoup) -> dict[str, str]:
    """Map each meta tag's ``property`` / ``name`` to its ``content``.

    Keys keep document order.  When a key repeats, the first occurrence wins
    (the earliest tag in ``<head>`` is the authoritative one).  A tag carrying
    both attributes is recorded under both keys.  Tags with neither (charset,
    http-equiv) are ignored.
    """
    meta: dict[str, str] = {}
    for tag in soup.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        content = safe_str(tag.get("content"), "").strip()
        for attr in ("property", "name"):
            key = safe_str(tag.get(attr), "").strip()
            if key and key not in meta:
                meta[key] = content
    return meta
