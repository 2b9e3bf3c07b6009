"""Content records passed through the pipeline, and capability type guards.

Each pipeline stage returns a *new* record that is at least as capable as
its input::

    GovernedContent                 html_source, uri, content_type, mime_type
      └─ QueryableHtmlContent       + document, meta(), untyped_schemas()
           └─ CuratableContent      + title, social_graph

Records are frozen dataclasses.  Every class declares a ``capability``
discriminant; the guards below compare it rather than probing attributes.
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from contentpipe.mimetype import MimeType

if TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from contentpipe.extractors.schemas import SchemaErrorContext
    from contentpipe.items import SocialGraph


class ContentError(ValueError):
    """Raised when a content record (or its source) is structurally invalid."""


class Capability(enum.IntEnum):
    """Capability levels, ordered: a higher level includes all lower ones."""

    GOVERNED = 0
    QUERYABLE = 1
    CURATABLE = 2


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GovernedContent:
    """Raw HTML source plus where it came from and what it claims to be."""

    capability: ClassVar[Capability] = Capability.GOVERNED

    html_source: str
    uri: str
    content_type: str
    mime_type: MimeType

    def __post_init__(self) -> None:
        if not isinstance(self.html_source, str):
            raise ContentError(f"html_source must be a string, got {type(self.html_source).__name__}")
        if not isinstance(self.uri, str):
            raise ContentError(f"uri must be a string, got {type(self.uri).__name__}")

    def base_fields(self) -> dict[str, Any]:
        """Field values of this record, for building a richer one from it."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}


@dataclass(frozen=True)
class QueryableHtmlContent(GovernedContent):
    """Governed content with a parsed document and query helpers."""

    capability: ClassVar[Capability] = Capability.QUERYABLE

    document: BeautifulSoup = field(repr=False, compare=False, kw_only=True)
    jsonld_script_type: str = field(default="application/ld+json", kw_only=True)

    def select(self, css: str) -> list[Tag]:
        return list(self.document.select(css))

    def select_one(self, css: str) -> Tag | None:
        return self.document.select_one(css)

    def document_title(self) -> str:
        """Stripped text of the ``<title>`` element, or ``""``."""
        tag = self.document.find("title")
        return tag.get_text().strip() if tag else ""

    def meta(self) -> dict[str, str]:
        """Meta tags by ``name``/``property``; first occurrence wins."""
        from contentpipe.extractors.meta import collect_meta
        return collect_meta(self.document)

    def untyped_schemas(
        self,
        flatten: bool,
        filter: Callable[[Any, int], bool] | None = None,  # noqa: A002
        on_error: Callable[[SchemaErrorContext, int], None] | None = None,
    ) -> list[Any]:
        """Return every JSON-LD block's parsed value in document order.

        See :func:`contentpipe.extractors.schemas.untyped_schemas`.
        """
        from contentpipe.extractors.schemas import untyped_schemas
        return untyped_schemas(
            self.document,
            flatten,
            filter=filter,
            on_error=on_error,
            uri=self.uri,
            script_type=self.jsonld_script_type,
        )


@dataclass(frozen=True)
class CuratableContent(QueryableHtmlContent):
    """Queryable content with a curated title and social-graph metadata."""

    capability: ClassVar[Capability] = Capability.CURATABLE

    title: str = field(default="", kw_only=True)
    social_graph: SocialGraph | None = field(default=None, kw_only=True)


# ---------------------------------------------------------------------------
# Type guards
# ---------------------------------------------------------------------------

def capability_of(content: Any) -> Capability:
    """Capability level of *content*; anything without one is ``GOVERNED``."""
    level = getattr(content, "capability", Capability.GOVERNED)
    try:
        return Capability(level)
    except ValueError:
        return Capability.GOVERNED


def is_queryable_html_content(content: Any) -> bool:
    return capability_of(content) >= Capability.QUERYABLE


def is_curatable_content(content: Any) -> bool:
    return capability_of(content) >= Capability.CURATABLE
