"""Exception hierarchy for citation export.

    CitationError
    ├── MissingFieldError       kind "invalid-citation"
    └── UnsupportedFormatError  kind "unsupported-format"
"""

from typing import Any


class CitationError(Exception):
    """Base class for all citation export errors."""

    kind = "citation-error"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict for surfacing to a caller or UI."""
        return {"error": str(self), "kind": self.kind}


class MissingFieldError(CitationError, ValueError):
    """A required citation field is absent or empty."""

    kind = "invalid-citation"

    def __init__(self, field: str, citation_id: str | None = None) -> None:
        self.field = field
        self.citation_id = citation_id
        if field == "authors":
            message = "Citation must have at least one author"
        else:
            message = f"Citation must have a {field}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        if self.citation_id:
            result["citation_id"] = self.citation_id
        return result


class UnsupportedFormatError(CitationError, ValueError):
    """An export format name is not registered."""

    kind = "unsupported-format"

    def __init__(self, format_name: str, supported: list[str]) -> None:
        self.format = format_name
        self.supported = supported
        super().__init__(
            f"Unsupported format: {format_name}. Supported: {', '.join(supported)}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["format"] = self.format
        result["supported"] = list(self.supported)
        return result
