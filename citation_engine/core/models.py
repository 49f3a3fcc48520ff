"""Citation and author data models shared by the validator and exporters."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """A single citation author, optionally carrying an ORCID iD."""

    model_config = ConfigDict(frozen=True)

    given: str = ""
    family: str
    orcid: Optional[str] = Field(
        default=None, description="ORCID iD (NNNN-NNNN-NNNN-NNNN), rendered verbatim"
    )


class Citation(BaseModel):
    """A bibliographic record handed to the exporters.

    Required fields are optional at the model level so incomplete candidates
    can be built and then rejected by ``validate`` with a MissingFieldError.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    authors: Optional[tuple[Author, ...]] = ()
    year: Optional[int] = None
    journal: Optional[str] = None
    volume: Optional[str] = None
    issue: Optional[str] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    publisher: Optional[str] = None
    type: Optional[str] = "article"
    added_at: Optional[float] = Field(default=None, alias="addedAt")
