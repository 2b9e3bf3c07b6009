"""Stateless pipeline stages.

Each transformer is a plain object exposing ``transform(content, context)``
and a shared ``singleton`` instance; none of them hold per-run state, so one
instance serves any number of concurrent runs.  A stage never mutates its
input: it returns either the same record (pass-through) or a new, richer one.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from contentpipe.content import (
    ContentError,
    CuratableContent,
    GovernedContent,
    QueryableHtmlContent,
    is_curatable_content,
    is_queryable_html_content,
)
from contentpipe.dom import parse_document
from contentpipe.extractors.social import extract_social_graph
from contentpipe.extractors.title import resolve_title, standardize_title

if TYPE_CHECKING:
    from contentpipe.pipeline import InitContext

logger = logging.getLogger(__name__)


@runtime_checkable
class ContentTransformer(Protocol):
    """One pipeline stage."""

    def transform(
        self, content: GovernedContent, context: InitContext,
    ) -> GovernedContent | Awaitable[GovernedContent]:
        """Return *content* or a richer record built from it."""
        ...


class _SingletonTransformer:
    singleton: ClassVar[Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.singleton = cls()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Stage 1: HTML query capability
# ---------------------------------------------------------------------------

class EnrichQueryableHtmlContent(_SingletonTransformer):
    """Parse HTML sources into :class:`QueryableHtmlContent`.

    Non-HTML content types pass through untouched.
    """

    def transform(self, content: GovernedContent, context: InitContext) -> GovernedContent:
        if is_queryable_html_content(content):
            return content

        essence = context.mime_type.essence
        if not context.settings.is_html(essence):
            logger.info("Skipping HTML enrichment of %s: content type %s", content.uri, essence)
            return content

        if not content.html_source.strip():
            raise ContentError(f"Empty HTML source for {content.uri or '<unknown>'}")

        document = parse_document(content.html_source, content.uri, context.settings.html_parser)
        return QueryableHtmlContent(
            **content.base_fields(),
            document=document,
            jsonld_script_type=context.settings.jsonld_script_type,
        )


# ---------------------------------------------------------------------------
# Stage 2: curatable content
# ---------------------------------------------------------------------------

class BuildCuratableContent(_SingletonTransformer):
    """Attach the social graph and a provisional title."""

    def transform(self, content: GovernedContent, context: InitContext) -> GovernedContent:
        if not is_queryable_html_content(content):
            logger.info("Skipping curation of %s: no HTML query capability", content.uri)
            return content

        social_graph = extract_social_graph(content.meta())
        title = resolve_title(social_graph, content.document_title())
        fields = content.base_fields()
        fields.pop("title", None)
        fields.pop("social_graph", None)
        return CuratableContent(**fields, title=title, social_graph=social_graph)


# ---------------------------------------------------------------------------
# Stage 3: curated title
# ---------------------------------------------------------------------------

class StandardizeCurationTitle(_SingletonTransformer):
    """Resolve the final title from the complete social graph.

    Running it twice yields the same title.
    """

    def transform(self, content: GovernedContent, context: InitContext) -> GovernedContent:
        if not is_curatable_content(content):
            return content

        title = standardize_title(resolve_title(content.social_graph, content.document_title()))
        if title == content.title:
            return content
        logger.debug("Title for %s standardized: %r -> %r", content.uri, content.title, title)
        fields = content.base_fields()
        fields["title"] = title
        return CuratableContent(**fields)
