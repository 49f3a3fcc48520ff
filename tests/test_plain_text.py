"""Tests for plain-text export."""

from citation_engine.core.config import ExportDefaults
from citation_engine.core.models import Citation
from citation_engine.exporters.plain_text import to_plain_text


# ── Factories ────────────────────────────────────────────────────────


def _cit(**kw):
    data = dict(
        id="test-citation-123",
        title="Test Citation Title",
        authors=[
            {"given": "John", "family": "Doe", "orcid": "0000-0002-1825-0097"},
            {"given": "Jane", "family": "Smith"},
        ],
        year=2025,
        journal="Journal of Testing",
        volume="42",
        issue="3",
        doi="10.1234/test.5678",
        url="https://example.com/test-article",
    )
    data.update(kw)
    return Citation(**data)


# ── Assembly ─────────────────────────────────────────────────────────


def test_full_text_exact():
    assert to_plain_text(_cit()) == (
        "Doe, J. (ORCID: 0000-0002-1825-0097), Smith, J. (2025). "
        "Test Citation Title. Journal of Testing, 42(3). "
        "https://doi.org/10.1234/test.5678"
    )


def test_no_line_breaks():
    assert "\n" not in to_plain_text(_cit())


def test_journal_without_volume():
    result = to_plain_text(_cit(volume=None))
    assert "Journal of Testing(3). " in result


def test_journal_without_issue():
    result = to_plain_text(_cit(issue=None))
    assert "Journal of Testing, 42. " in result


def test_absent_journal_skips_clause():
    result = to_plain_text(_cit(journal=None))
    assert "DecentraJournal" not in result
    assert "42" not in result
    assert result == (
        "Doe, J. (ORCID: 0000-0002-1825-0097), Smith, J. (2025). "
        "Test Citation Title. https://doi.org/10.1234/test.5678"
    )


# ── Link precedence ──────────────────────────────────────────────────


def test_doi_takes_precedence_over_url():
    result = to_plain_text(_cit())
    assert "https://doi.org/10.1234/test.5678" in result
    assert "https://example.com/test-article" not in result


def test_url_when_no_doi():
    result = to_plain_text(_cit(doi=None))
    assert result.endswith("https://example.com/test-article")
    assert "https://doi.org" not in result


def test_no_link():
    result = to_plain_text(_cit(doi=None, url=None))
    assert result.endswith("Journal of Testing, 42(3). ")


def test_custom_doi_resolver():
    defaults = ExportDefaults(doi_resolver="https://dx.doi.org/")
    assert to_plain_text(_cit(), defaults).endswith("https://dx.doi.org/10.1234/test.5678")


# ── Authors ──────────────────────────────────────────────────────────


def test_single_author_initial():
    cit = _cit(authors=[{"given": "Ada", "family": "Lovelace"}], journal=None, doi=None, url=None)
    assert to_plain_text(cit) == "Lovelace, A. (2025). Test Citation Title. "


def test_deterministic():
    cit = _cit()
    assert to_plain_text(cit) == to_plain_text(cit)
