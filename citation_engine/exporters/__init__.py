"""Format registry, dispatch, batch and file export helpers."""

import json
import logging
from pathlib import Path
from typing import Callable, Iterable

from pydantic import BaseModel

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, ExportDefaults
from citation_engine.core.errors import UnsupportedFormatError
from citation_engine.core.models import Citation
from citation_engine.core.validator import validate
from citation_engine.exporters.bibtex import to_bibtex
from citation_engine.exporters.csl_json import build_csl_item, to_csl_json
from citation_engine.exporters.plain_text import to_plain_text
from citation_engine.exporters.ris import to_ris

logger = logging.getLogger(__name__)


class ExportFormat(BaseModel):
    """Metadata for one output format."""

    key: str
    label: str
    extension: str
    mime_type: str


FORMATS: dict[str, ExportFormat] = {
    "bibtex": ExportFormat(
        key="bibtex", label="BibTeX", extension="bib", mime_type="application/x-bibtex"
    ),
    "ris": ExportFormat(
        key="ris", label="RIS", extension="ris",
        mime_type="application/x-research-info-systems",
    ),
    "csl": ExportFormat(
        key="csl", label="CSL-JSON", extension="json", mime_type="application/json"
    ),
    "text": ExportFormat(
        key="text", label="Plain Text", extension="txt", mime_type="text/plain"
    ),
}

_ALIASES = {
    "bib": "bibtex",
    "csl-json": "csl",
    "csljson": "csl",
    "json": "csl",
    "plain": "text",
    "txt": "text",
}

_RENDERERS: dict[str, Callable[[Citation, ExportDefaults], str]] = {
    "bibtex": to_bibtex,
    "ris": to_ris,
    "csl": to_csl_json,
    "text": to_plain_text,
}


def get_format(name: str) -> ExportFormat:
    """Look up a format by key or alias (case-insensitive)."""
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in FORMATS:
        raise UnsupportedFormatError(name, list(FORMATS))
    return FORMATS[key]


def export_citation(
    citation: Citation,
    fmt: str = "bibtex",
    defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS,
) -> str:
    """Render one citation in the requested format."""
    export_format = get_format(fmt)
    return _RENDERERS[export_format.key](citation, defaults)


def export_filename(
    citation: Citation,
    fmt: str,
    defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS,
) -> str:
    """Download name for a citation, e.g. ``citation-smith2024.bib``."""
    validate(citation)
    export_format = get_format(fmt)
    return f"{defaults.filename_prefix}-{citation.id}.{export_format.extension}"


def export_citations(
    citations: Iterable[Citation],
    fmt: str = "bibtex",
    defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS,
) -> str:
    """Render several citations and join them the way each format expects."""
    export_format = get_format(fmt)
    citations = list(citations)

    if export_format.key == "csl":
        items = [
            build_csl_item(c, defaults).model_dump(by_alias=True, exclude_none=True)
            for c in citations
        ]
        return json.dumps(items, indent=2, ensure_ascii=False)

    rendered = [_RENDERERS[export_format.key](c, defaults) for c in citations]
    if export_format.key == "bibtex":
        return "\n\n".join(rendered)
    if export_format.key == "ris":
        # Each RIS record already ends with a newline
        return "".join(rendered)
    return "\n".join(rendered)


def export_all(
    citation: Citation,
    output_dir: str | Path,
    defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS,
) -> dict[str, str]:
    """Write the citation in every format and return dict of file paths created."""
    # Render everything first so an invalid citation writes nothing
    rendered = {
        key: (export_filename(citation, key, defaults), export_citation(citation, key, defaults))
        for key in FORMATS
    }

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    paths = {}
    for key, (filename, text) in rendered.items():
        path = out / filename
        path.write_text(text, encoding="utf-8")
        paths[key] = str(path)
        logger.info("%s export written to %s", FORMATS[key].label, path)

    logger.info("All exports for %s written to %s", citation.id, output_dir)
    return paths
