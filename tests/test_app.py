import json
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")


def _run(monkeypatch, path):
    monkeypatch.setenv("PROMISE_DATA_SOURCE", str(path))
    monkeypatch.setenv("PROMISE_SUBJECT", "Mayor")
    monkeypatch.setenv("SCORE_SCALE_FACTOR", "1")
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    return at


def test_load_failure_renders_only_an_error(monkeypatch, tmp_path):
    bad = tmp_path / "broken.json"
    bad.write_text("{ not json", encoding="utf-8")
    at = _run(monkeypatch, bad)
    assert not at.exception
    assert len(at.error) == 1
    assert "Error loading site data" in at.error[0].value
    assert len(at.tabs) == 0
    assert len(at.metric) == 0
    assert len(at.title) == 0


def test_dashboard_renders_cards_and_escaped_title(monkeypatch, tmp_path):
    good = tmp_path / "ok.json"
    good.write_text(
        json.dumps(
            {
                "subject": "Mayor *Smith*",
                "promises": [
                    {"promise": "Build a bridge", "category": "Infrastructure", "status": "broken"},
                    {"promise": "Fund schools", "category": "Education", "status": "completed"},
                ],
            }
        ),
        encoding="utf-8",
    )
    at = _run(monkeypatch, good)
    assert not at.exception
    assert len(at.error) == 0
    assert at.title[0].value == r"Mayor \*Smith\* Promise Tracker"
    assert len(at.tabs) == 2
    assert [at.metric[i].value for i in range(4)] == ["2", "0", "1", "1"]
