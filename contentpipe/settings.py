"""Project settings for contentpipe.

Module-level constants hold the defaults; :class:`PipelineSettings` bundles
them for a pipeline run and :func:`load_settings` overlays a YAML file.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# HTML parsing
# ---------------------------------------------------------------------------
HTML_PARSER = "lxml"

# Content types whose essence enables the HTML query capability
HTML_MIME_ESSENCES: tuple[str, ...] = ("text/html", "application/xhtml+xml")

# ---------------------------------------------------------------------------
# Structured data
# ---------------------------------------------------------------------------
JSONLD_SCRIPT_TYPE = "application/ld+json"

# Curation records expand @graph / array blocks unless told otherwise
FLATTEN_SCHEMAS = True

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


@dataclass(frozen=True)
class PipelineSettings:
    """Per-run configuration handed to every transformer via the init context."""

    html_parser: str = HTML_PARSER
    html_mime_essences: tuple[str, ...] = field(default=HTML_MIME_ESSENCES)
    jsonld_script_type: str = JSONLD_SCRIPT_TYPE
    flatten_schemas: bool = FLATTEN_SCHEMAS
    log_level: str = LOG_LEVEL

    def is_html(self, essence: str) -> bool:
        return essence.lower() in self.html_mime_essences


def load_settings(path: str | Path) -> PipelineSettings:
    """Load a YAML file and merge it over the default settings.

    Unknown keys are ignored (with a warning) so one file can be shared with
    other tools.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a mapping; using defaults", path)
        return PipelineSettings()

    known = {f.name for f in dataclasses.fields(PipelineSettings)}
    overrides: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        overrides[key] = value

    essences = overrides.get("html_mime_essences")
    if essences is not None:
        if isinstance(essences, str):
            essences = [essences]
        overrides["html_mime_essences"] = tuple(str(e).strip().lower() for e in essences)

    return PipelineSettings(**overrides)
