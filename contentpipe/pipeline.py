"""Sequential composition of content transformers.

Usage::

    from contentpipe.pipeline import InitContext, standard_pipe

    content = standard_pipe().run(
        {"html_source": html, "uri": "https://example.com/post"},
        InitContext.from_content_type("text/html; charset=utf-8"),
    )

``Pipe.flow`` is the coroutine form; stages may return plain values or
awaitables and are awaited strictly one after another.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from contentpipe.content import ContentError, GovernedContent
from contentpipe.items import ContentSource
from contentpipe.mimetype import MimeType
from contentpipe.settings import PipelineSettings
from contentpipe.transformers import (
    BuildCuratableContent,
    ContentTransformer,
    EnrichQueryableHtmlContent,
    StandardizeCurationTitle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitContext:
    """Shared, read-only context handed to every stage of one run."""

    content_type: str
    mime_type: MimeType
    settings: PipelineSettings = field(default_factory=PipelineSettings)

    @classmethod
    def from_content_type(
        cls, content_type: str, settings: PipelineSettings | None = None,
    ) -> InitContext:
        """Build a context by parsing *content_type*.

        Raises:
            :class:`~contentpipe.mimetype.MimeTypeError`: On an invalid type.
        """
        return cls(
            content_type=content_type,
            mime_type=MimeType.parse(content_type),
            settings=settings or PipelineSettings(),
        )


def _governed(source: ContentSource | Mapping[str, Any], context: InitContext) -> GovernedContent:
    if not isinstance(source, ContentSource):
        try:
            source = ContentSource.model_validate(source)
        except ValidationError as exc:
            raise ContentError(f"Invalid content source: {exc}") from exc
    return GovernedContent(
        html_source=source.html_source,
        uri=source.uri,
        content_type=context.content_type,
        mime_type=context.mime_type,
    )


class Pipe:
    """A fixed, ordered chain of transformers.  Holds no run state."""

    def __init__(self, *transformers: ContentTransformer) -> None:
        for t in transformers:
            if not isinstance(t, ContentTransformer):
                raise TypeError(f"{t!r} does not implement transform(content, context)")
        self._transformers = tuple(transformers)

    @property
    def transformers(self) -> tuple[ContentTransformer, ...]:
        return self._transformers

    async def flow(
        self,
        source: ContentSource | Mapping[str, Any],
        context: InitContext,
    ) -> GovernedContent:
        """Run every stage over *source* and return the final record.

        Any stage exception aborts the run and propagates unchanged.
        """
        content = _governed(source, context)
        for transformer in self._transformers:
            logger.debug("Running %r on %s", transformer, content.uri)
            result = transformer.transform(content, context)
            if inspect.isawaitable(result):
                result = await result
            content = result
        return content

    def run(
        self,
        source: ContentSource | Mapping[str, Any],
        context: InitContext,
    ) -> GovernedContent:
        """Synchronous wrapper around :meth:`flow` (not usable inside a running loop)."""
        return asyncio.run(self.flow(source, context))

    def __repr__(self) -> str:
        return f"Pipe({', '.join(repr(t) for t in self._transformers)})"


def pipe(*transformers: ContentTransformer) -> Pipe:
    return Pipe(*transformers)


def standard_pipe() -> Pipe:
    """Enrich → build curatable content → standardize title."""
    return pipe(
        EnrichQueryableHtmlContent.singleton,
        BuildCuratableContent.singleton,
        StandardizeCurationTitle.singleton,
    )
