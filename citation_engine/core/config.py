"""Export defaults: branding strings injected into each exporter, loadable from YAML."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class ExportDefaults(BaseModel):
    """Fallback values and naming used when a citation leaves a field empty."""

    model_config = ConfigDict(frozen=True)

    default_journal: str = "DecentraJournal"
    default_publisher: str = "DecentraJournal Publishing"
    doi_resolver: str = "https://doi.org/"
    filename_prefix: str = "citation"

    @field_validator("default_journal", "default_publisher", "doi_resolver", "filename_prefix")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Export defaults must not be blank")
        return v


DEFAULT_EXPORT_DEFAULTS = ExportDefaults()


def load_export_defaults(path: str | Path) -> ExportDefaults:
    """Load export defaults from a YAML file; missing keys keep built-in values."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    defaults = ExportDefaults.model_validate(raw)
    logger.info("Loaded export defaults from %s", path)
    return defaults
