"""RIS export (EndNote, Zotero, Mendeley) for a single citation.

Tags used:
- TY: Type of reference (always JOUR)
- AU: Author (Family, Given), one line per author
- AI: Author identifier (ORCID), directly after its author
- TI: Title
- JO: Journal
- PY: Publication year
- VL / IS: Volume / Issue
- DO: DOI
- UR: URL
- PB: Publisher
- ER: End of record
"""

import logging

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, ExportDefaults
from citation_engine.core.models import Citation
from citation_engine.core.validator import validate
from citation_engine.exporters.authors import render_authors

logger = logging.getLogger(__name__)


def _tag(tag: str, value: str) -> str:
    return f"{tag}  - {value}"


def to_ris(citation: Citation, defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS) -> str:
    """Render a citation as one RIS record, terminated by ``ER  - `` and a newline."""
    validate(citation)

    lines = [_tag("TY", "JOUR")]

    for author in render_authors(citation):
        lines.append(_tag("AU", author.sort_name))
        if author.orcid:
            lines.append(_tag("AI", author.orcid))

    lines.extend([
        _tag("TI", citation.title),
        _tag("JO", citation.journal or defaults.default_journal),
        _tag("PY", str(citation.year)),
    ])

    optional = [
        ("VL", citation.volume),
        ("IS", citation.issue),
        ("DO", citation.doi),
        ("UR", citation.url),
    ]
    lines.extend(_tag(tag, value) for tag, value in optional if value)

    lines.append(_tag("PB", citation.publisher or defaults.default_publisher))
    lines.append(_tag("ER", ""))

    logger.debug("Rendered RIS for %s", citation.id)
    return "\n".join(lines) + "\n"
