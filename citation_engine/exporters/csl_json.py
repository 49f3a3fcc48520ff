"""CSL-JSON export (Citation Style Language item) for a single citation."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, ExportDefaults
from citation_engine.core.models import Citation
from citation_engine.core.validator import validate
from citation_engine.exporters.authors import render_authors

logger = logging.getLogger(__name__)


class CslName(BaseModel):
    """CSL name variable; ORCID is dropped from the JSON when unset."""

    family: str
    given: str
    orcid: Optional[str] = Field(default=None, serialization_alias="ORCID")


class CslItem(BaseModel):
    """The CSL-JSON subset produced for a journal article."""

    id: str
    type: str = "article-journal"
    title: str
    container_title: str = Field(serialization_alias="container-title")
    issued: dict[str, list[list[int]]]
    author: list[CslName]
    volume: Optional[str] = None
    issue: Optional[str] = None
    doi: Optional[str] = Field(default=None, serialization_alias="DOI")
    url: Optional[str] = Field(default=None, serialization_alias="URL")
    publisher: str


def build_csl_item(
    citation: Citation, defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS
) -> CslItem:
    """Map a validated citation onto a CslItem; empty optional strings become None."""
    validate(citation)
    return CslItem(
        id=citation.id,
        title=citation.title,
        container_title=citation.journal or defaults.default_journal,
        issued={"date-parts": [[citation.year]]},
        author=[
            CslName(family=a.family, given=a.given, orcid=a.orcid)
            for a in render_authors(citation)
        ],
        volume=citation.volume or None,
        issue=citation.issue or None,
        doi=citation.doi or None,
        url=citation.url or None,
        publisher=citation.publisher or defaults.default_publisher,
    )


def to_csl_json(
    citation: Citation, defaults: ExportDefaults = DEFAULT_EXPORT_DEFAULTS
) -> str:
    """Render a citation as a pretty-printed CSL-JSON document.

    Absent ORCID, volume, issue, DOI and URL keys are omitted, not null.
    """
    item = build_csl_item(citation, defaults)
    logger.debug("Rendered CSL-JSON for %s", citation.id)
    return item.model_dump_json(indent=2, by_alias=True, exclude_none=True)
