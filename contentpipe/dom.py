"""HTML document parsing and small BeautifulSoup helpers."""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound

from contentpipe import settings
from contentpipe.content import ContentError

logger = logging.getLogger(__name__)


class ParseFailure(ContentError):
    """Raised when an HTML source cannot be turned into a document at all.

    Attributes:
        uri -- the content item whose source failed to parse
    """

    def __init__(self, message: str, uri: str = "") -> None:
        super().__init__(message)
        self.uri = uri


def safe_str(val: Any, default: str = "") -> str:
    """Safely convert a BeautifulSoup attribute value (str | list | None) to str."""
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def first_non_empty(*values: Any) -> Any:
    """Return the first non-empty, non-None value."""
    for v in values:
        if v:
            return v
    return None


def parse_document(html: str, uri: str = "", parser: str = settings.HTML_PARSER) -> BeautifulSoup:
    """Parse *html* into a queryable BeautifulSoup tree.

    A document with no elements (or no matching ones) is not an error;
    only markup the parser rejects outright raises.

    Raises:
        ParseFailure: When the parser rejects the markup.
        bs4.FeatureNotFound: When *parser* is not installed.
    """
    try:
        soup = BeautifulSoup(html, parser)
    except FeatureNotFound:
        raise
    except Exception as exc:
        raise ParseFailure(f"Could not parse HTML for {uri or '<unknown>'}: {exc}", uri=uri) from exc

    logger.debug("Parsed %d chars of HTML for %s", len(html), uri)
    return soup
