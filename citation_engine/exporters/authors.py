"""Structured author names shared by every export format."""

from typing import Optional

from pydantic import BaseModel

from citation_engine.core.models import Citation


class AuthorName(BaseModel):
    """One author, pre-split into the pieces the serializers need."""

    family: str
    given: str
    orcid: Optional[str] = None

    @property
    def sort_name(self) -> str:
        """``Family, Given`` as used by BibTeX and RIS."""
        return f"{self.family}, {self.given}"

    @property
    def initial(self) -> str:
        """``Family, G.`` as used by the plain-text style."""
        return f"{self.family}, {self.given[:1]}."


def render_authors(citation: Citation) -> list[AuthorName]:
    """Return the citation's authors in input order; empty ORCIDs become None."""
    return [
        AuthorName(family=a.family, given=a.given, orcid=a.orcid or None)
        for a in citation.authors
    ]
