"""Tests for the export_citation.py runner."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parent.parent / "scripts" / "export_citation.py"


@pytest.fixture(scope="module")
def runner():
    spec = importlib.util.spec_from_file_location("export_citation", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _write(tmp_path, data):
    path = tmp_path / "citation.json"
    path.write_text(json.dumps(data))
    return path


# ── Happy path ───────────────────────────────────────────────────────


def test_prints_bibtex(runner, tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, {
        "id": "m1", "title": "T", "authors": [{"given": "A", "family": "B"}], "year": 2025,
    })
    monkeypatch.setattr(sys, "argv", ["export_citation.py", str(path)])
    runner.main()
    assert "@article{m1," in capsys.readouterr().out


# ── Malformed input ──────────────────────────────────────────────────


@pytest.mark.parametrize(
    "data",
    [
        {"id": "m1", "title": "T", "authors": None, "year": 2025},
        {"id": "m1", "title": "T", "authors": [{"given": "A"}], "year": 2025},
        {"id": "m1", "title": "T", "authors": [{"given": "A", "family": "B"}], "year": "soon"},
    ],
)
def test_bad_citation_file_exits_with_status_1(runner, tmp_path, monkeypatch, data):
    path = _write(tmp_path, data)
    monkeypatch.setattr(sys, "argv", ["export_citation.py", str(path)])
    with pytest.raises(SystemExit) as exc:
        runner.main()
    assert exc.value.code == 1
