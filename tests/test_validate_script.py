import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "validate_dataset.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("validate_dataset", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_malformed_document_exits_with_error(tmp_path, capsys):
    bad = tmp_path / "data.json"
    bad.write_text("{ not json", encoding="utf-8")
    assert _load_script().main([str(bad)]) == 1
    assert "Validation failed" in capsys.readouterr().err


def test_valid_document_prints_summary(tmp_path, capsys):
    good = tmp_path / "data.json"
    good.write_text(
        json.dumps({"subject": "Mayor", "promises": [{"promise": "Fund schools", "status": "completed"}]}),
        encoding="utf-8",
    )
    assert _load_script().main([str(good)]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["title"] == "Mayor Promise Tracker"
    assert summary["cards"]["Completed"] == 1
