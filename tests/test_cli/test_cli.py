"""Tests for the command line front end."""

from __future__ import annotations

import io
import json

from hullkit.cli import main
from hullkit.config import Settings
from tests.conftest import CHEVRON, SQUARE, SQUARE_WITH_CENTER


def _write_points(tmp_path, points) -> str:
    path = tmp_path / "points.json"
    path.write_text(json.dumps([list(p) for p in points]), encoding="utf-8")
    return str(path)


def test_convex_from_file(tmp_path, capsys):
    code = main(["convex", _write_points(tmp_path, SQUARE_WITH_CENTER)])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["method"] == "convex"
    assert [tuple(p) for p in out["hull"]] == SQUARE
    assert out["hull_count"] == 4


def test_concave_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(CHEVRON)))
    code = main(["concave", "-", "-k", "3"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["k"] == 3
    assert out["complete"] is True
    assert len(out["hull"]) == 4


def test_missing_file(tmp_path, capsys):
    assert main(["convex", str(tmp_path / "nope.json")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_json(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("[[0, 0], [1,", encoding="utf-8")
    assert main(["convex", str(path)]) == 1
    assert "Invalid input" in capsys.readouterr().err


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("HULLKIT_DEFAULT_K", "7")
    monkeypatch.setenv("HULLKIT_LOG_LEVEL", "warning")
    s = Settings()
    assert s.hullkit_default_k == 7
    assert s.hullkit_log_level == "warning"
