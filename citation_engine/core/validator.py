"""Required-field checks run before every export."""

import logging

from citation_engine.core.errors import MissingFieldError
from citation_engine.core.models import Citation

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "title", "year", "authors")


def validate(citation: Citation) -> None:
    """Raise MissingFieldError for the first required field that is absent or empty."""
    for name in REQUIRED_FIELDS:
        if not getattr(citation, name):
            logger.warning("Rejected citation %r: missing %s", citation.id, name)
            raise MissingFieldError(name, citation.id)
