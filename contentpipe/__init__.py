"""contentpipe - curate structured metadata out of raw HTML documents.

Quick usage::

    from contentpipe import InitContext, is_curatable_content, standard_pipe

    content = standard_pipe().run(
        {"html_source": html, "uri": "https://example.com/post"},
        InitContext.from_content_type("text/html"),
    )
    if is_curatable_content(content):
        print(content.title)
        print(content.social_graph)
        print(content.untyped_schemas(True))

Serialisable output::

    from contentpipe import to_curation_record

    print(to_curation_record(content).model_dump_json(indent=2))
"""

from contentpipe.content import (
    Capability,
    ContentError,
    CuratableContent,
    GovernedContent,
    QueryableHtmlContent,
    is_curatable_content,
    is_queryable_html_content,
)
from contentpipe.dom import ParseFailure
from contentpipe.extractors.schemas import SchemaErrorContext
from contentpipe.items import ContentSource, CurationRecord, SocialGraph, to_curation_record
from contentpipe.mimetype import MimeType, MimeTypeError
from contentpipe.pipeline import InitContext, Pipe, pipe, standard_pipe
from contentpipe.transformers import (
    BuildCuratableContent,
    ContentTransformer,
    EnrichQueryableHtmlContent,
    StandardizeCurationTitle,
)

__version__ = "0.1.0"
__all__ = [
    "BuildCuratableContent",
    "Capability",
    "ContentError",
    "ContentSource",
    "ContentTransformer",
    "CuratableContent",
    "CurationRecord",
    "EnrichQueryableHtmlContent",
    "GovernedContent",
    "InitContext",
    "MimeType",
    "MimeTypeError",
    "ParseFailure",
    "Pipe",
    "QueryableHtmlContent",
    "SchemaErrorContext",
    "SocialGraph",
    "StandardizeCurationTitle",
    "is_curatable_content",
    "is_queryable_html_content",
    "pipe",
    "standard_pipe",
    "to_curation_record",
]
