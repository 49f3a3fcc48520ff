#!/usr/bin/env python3
"""Export citations from a JSON or YAML file."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from citation_engine.core.config import DEFAULT_EXPORT_DEFAULTS, load_export_defaults
from citation_engine.core.errors import CitationError
from citation_engine.core.models import Citation
from citation_engine.exporters import FORMATS, export_all, export_citations

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("export")


# ── Loading ──────────────────────────────────────────────────────────


def load_citations(path: str | Path) -> list[Citation]:
    """Read one citation object or a list of them from JSON or YAML."""
    path = Path(path)
    with open(path) as f:
        if path.suffix.lower() == ".json":
            raw = json.load(f)
        else:
            raw = yaml.safe_load(f)
    if isinstance(raw, dict):
        raw = [raw]
    return [Citation.model_validate(item) for item in raw]


# ── CLI ──────────────────────────────────────────────────────────────


def main():
    parser = argparse.ArgumentParser(description="Export citations to BibTeX, RIS, CSL-JSON or text")
    parser.add_argument("input", help="Path to a citation JSON or YAML file")
    parser.add_argument(
        "--format",
        default="bibtex",
        help=f"Output format ({', '.join(FORMATS)}); printed to stdout",
    )
    parser.add_argument("--config", default=None, help="Path to export defaults YAML file")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Write every format for each citation into this directory instead",
    )
    args = parser.parse_args()

    defaults = load_export_defaults(args.config) if args.config else DEFAULT_EXPORT_DEFAULTS
    try:
        citations = load_citations(args.input)
        logger.info("Loaded %d citation(s) from %s", len(citations), args.input)
        if args.output_dir:
            for citation in citations:
                export_all(citation, args.output_dir, defaults)
        else:
            print(export_citations(citations, args.format, defaults))
    except (CitationError, ValidationError) as e:
        logger.error("Export failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
