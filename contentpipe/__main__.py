"""CLI entry point: python -m contentpipe FILE [options]"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

import yaml

from contentpipe import settings
from contentpipe.content import ContentError
from contentpipe.items import to_curation_record
from contentpipe.mimetype import MimeTypeError
from contentpipe.pipeline import InitContext, standard_pipe

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contentpipe",
        description=(
            "Curate a saved HTML document: JSON-LD schemas, Open Graph / Twitter\n"
            "Card metadata, meta tags and a single curated title, as JSON."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE",
                        help="Path to the HTML document")
    parser.add_argument("--uri", default=None, metavar="URI",
                        help="Originating URI of the document (default: FILE)")
    parser.add_argument("--content-type", default="text/html", metavar="TYPE",
                        help="Declared content type (default: text/html)")
    parser.add_argument("--config", default=None, metavar="YAML",
                        help="YAML file overriding pipeline settings")
    parser.add_argument("--no-flatten", action="store_true", default=False,
                        help="Keep @graph / array JSON-LD blocks nested")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        pipeline_settings = (
            settings.load_settings(args.config) if args.config else settings.PipelineSettings()
        )
    except (OSError, yaml.YAMLError) as exc:
        print(f"error: cannot read config {args.config}: {exc}", file=sys.stderr)
        return 1
    if args.no_flatten:
        pipeline_settings = dataclasses.replace(pipeline_settings, flatten_schemas=False)

    logging.basicConfig(
        level=getattr(logging, args.log_level or pipeline_settings.log_level.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
    )

    try:
        html = Path(args.file).read_text(encoding="utf-8", errors="replace")
        context = InitContext.from_content_type(args.content_type, pipeline_settings)
        content = standard_pipe().run(
            {"html_source": html, "uri": args.uri or args.file},
            context,
        )
    except (ContentError, MimeTypeError, OSError) as exc:
        logger.error("Could not curate %s: %s", args.file, exc)
        return 1

    record = to_curation_record(content, flatten=pipeline_settings.flatten_schemas)
    print(record.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
