"""Syndication fields beyond the title: description, canonical URL, site name
and publication date.

Each field walks its own priority chain over JSON-LD, Open Graph, Twitter
Card and plain HTML signals.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urljoin, urlparse

import dateparser
from bs4 import BeautifulSoup, Tag

from contentpipe.dom import first_non_empty, safe_str
from contentpipe.extractors.schemas import expand_schema

logger = logging.getLogger(__name__)

_ISO_CLEANUP_RE = re.compile(r"\s+")

_PRIMARY_TYPES: frozenset[str] = frozenset(
    {
        "article",
        "blogposting",
        "newsarticle",
        "techarticle",
        "scholarlyarticle",
        "liveblogposting",
        "reportage",
        "webpage",
    },
)


def parse_date(raw: str | None) -> str | None:
    """Parse a date string to ISO 8601.

    Returns None on failure or when the year falls outside 1990-2099
    (catches epoch defaults like 1970-01-01 and far-future typos).
    """
    if not raw:
        return None
    raw = _ISO_CLEANUP_RE.sub(" ", str(raw).strip())
    try:
        parsed = dateparser.parse(
            raw,
            settings={
                "RETURN_AS_TIMEZONE_AWARE": True,
                "PREFER_DAY_OF_MONTH": "first",
                "PREFER_LOCALE_DATE_ORDER": False,
            },
        )
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("Date parse failed for %r: %s", raw, exc)
        return None
    if parsed is None or not (1990 <= parsed.year <= 2099):
        return None
    return parsed.isoformat()


def _text(value: Any) -> str | None:
    """*value* stripped when it is a non-empty string, else None."""
    if isinstance(value, str):
        return value.strip() or None
    return None


def primary_schema(schemas: Sequence[Any]) -> dict:
    """First article-like JSON-LD node, else the first WebPage node, else ``{}``.

    Array and ``@graph`` blocks are searched whether or not *schemas* was
    flattened.
    """
    fallback: dict = {}
    for node in (n for value in schemas for n in expand_schema(value)):
        if not isinstance(node, dict):
            continue
        types = node.get("@type")
        names = types if isinstance(types, list) else [types]
        lowered = {str(t).lower() for t in names if t}
        if not lowered & _PRIMARY_TYPES:
            continue
        if lowered == {"webpage"}:
            fallback = fallback or node
            continue
        return node
    return fallback


def _canonical_link(soup: BeautifulSoup, page_url: str) -> str | None:
    # rel is a multi-valued list in BS4
    for link in soup.find_all("link"):
        if not isinstance(link, Tag):
            continue
        rel_val = link.get("rel")
        if isinstance(rel_val, list) and "canonical" in rel_val:
            href = safe_str(link.get("href"), "").strip()
            if href:
                return href if href.startswith("http") else urljoin(page_url, href)
    return None


def _publisher_name(node: Mapping[str, Any]) -> str | None:
    publisher = node.get("publisher")
    if isinstance(publisher, dict):
        return _text(publisher.get("name"))
    return None


def extract_published(
    soup: BeautifulSoup,
    meta: Mapping[str, str],
    schemas: Sequence[Any],
    page_url: str = "",
) -> dict[str, str | None]:
    """Return ``description``, ``canonical_url``, ``site_name`` and ``published_at``."""
    node = primary_schema(schemas)

    description = first_non_empty(
        _text(node.get("description")),
        meta.get("og:description"),
        meta.get("twitter:description"),
        meta.get("description"),
    )

    canonical_url = first_non_empty(
        _canonical_link(soup, page_url),
        meta.get("og:url"),
        _text(node.get("url")),
    )

    netloc = urlparse(page_url).netloc if page_url.startswith("http") else ""
    site_name = first_non_empty(
        meta.get("og:site_name"),
        _publisher_name(node),
        netloc.replace("www.", "") or None,
    )

    time_tag = soup.find("time")
    time_raw = safe_str(time_tag.get("datetime"), "").strip() if isinstance(time_tag, Tag) else None
    published_at = parse_date(
        first_non_empty(
            _text(node.get("datePublished")),
            meta.get("article:published_time"),
            meta.get("pubdate"),
            time_raw,
        ),
    )

    return {
        "description": description.strip() if description else None,
        "canonical_url": canonical_url,
        "site_name": site_name,
        "published_at": published_at,
    }
