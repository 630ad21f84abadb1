from promise_tracker.data.quality import build_quality_overview, missing_values_summary
from promise_tracker.data.records import Dataset, PromiseRecord


def _dataset():
    return Dataset(
        promises=(
            PromiseRecord(promise="a", category="X", status="completed", deadline="2025", source_url="https://a"),
            PromiseRecord(promise="b", status="on_hold"),
            PromiseRecord(promise=" ", category="Y", status="on_hold", deadline="2026"),
            PromiseRecord(promise="d", category="Y", status="mystery"),
        )
    )


def test_quality_overview_counts():
    overview = build_quality_overview(_dataset())
    assert overview["row_count"] == 4
    assert overview["blank_promise_count"] == 1
    assert overview["missing"] == {"source_url": 3, "deadline": 2, "category": 1}
    assert overview["unknown_statuses"] == {"mystery": 1, "on_hold": 2}


def test_missing_summary_for_empty_dataset():
    summary = missing_values_summary(Dataset())
    assert summary["missing_count"].tolist() == [0, 0, 0]
    assert summary["missing_pct"].tolist() == [0.0, 0.0, 0.0]
