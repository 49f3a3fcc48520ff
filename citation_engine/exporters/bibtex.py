"""BibTeX export for a single citation."""

import logging

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, ExportDefaults
from citation_engine.core.models import Citation
from citation_engine.core.validator import validate
from citation_engine.exporters.authors import AuthorName, render_authors

logger = logging.getLogger(__name__)


def _bibtex_author(author: AuthorName) -> str:
    if author.orcid:
        return f"{author.sort_name}, orcid = {{{author.orcid}}}"
    return author.sort_name


def to_bibtex(
    citation: Citation, defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS
) -> str:
    """Render a citation as a BibTeX entry.

    Field order is fixed; optional fields without a value produce no line and
    the last emitted field carries no trailing comma.
    """
    validate(citation)

    authors = " and ".join(_bibtex_author(a) for a in render_authors(citation))
    fields = [
        ("author", authors),
        ("title", citation.title),
        ("journal", citation.journal or defaults.default_journal),
        ("year", str(citation.year)),
        ("volume", citation.volume),
        ("issue", citation.issue),
        ("doi", citation.doi),
        ("url", citation.url),
    ]
    body = ",\n".join(f"  {key} = {{{value}}}" for key, value in fields if value)
    entry_type = (citation.type or "article").lower()

    logger.debug("Rendered BibTeX for %s", citation.id)
    return f"@{entry_type}{{{citation.id},\n{body}\n}}"
