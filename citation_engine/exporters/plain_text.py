"""Single-line plain-text reference with ORCID annotations."""

import logging

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, ExportDefaults
from citation_engine.core.models import Citation
from citation_engine.core.validator import validate
from citation_engine.exporters.authors import render_authors

logger = logging.getLogger(__name__)


def _journal_clause(citation: Citation) -> str:
    # No default journal here: an absent journal drops the whole clause
    if not citation.journal:
        return ""
    clause = citation.journal
    if citation.volume:
        clause += f", {citation.volume}"
    if citation.issue:
        clause += f"({citation.issue})"
    return clause + ". "


def _link(citation: Citation, defaults: ExportDefaults) -> str:
    if citation.doi:
        return f"{defaults.doi_resolver}{citation.doi}"
    return citation.url or ""


def to_plain_text(
    citation: Citation, defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS
) -> str:
    """Render ``Authors (Year). Title. Journal, Vol(Issue). Link``.

    The DOI link takes precedence over the URL.
    """
    validate(citation)

    names = []
    for author in render_authors(citation):
        name = author.initial
        if author.orcid:
            name += f" (ORCID: {author.orcid})"
        names.append(name)

    text = f"{', '.join(names)} ({citation.year}). {citation.title}. "
    text += _journal_clause(citation)
    text += _link(citation, defaults)

    logger.debug("Rendered plain text for %s", citation.id)
    return text
