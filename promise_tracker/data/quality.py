from __future__ import annotations

from collections import Counter
from typing import Any, Dict

import pandas as pd

from promise_tracker.config import STATUS_LABELS
from promise_tracker.data.records import Dataset

OPTIONAL_FIELDS = ["category", "deadline", "source_url"]


def missing_values_summary(dataset: Dataset) -> pd.DataFrame:
    rows = []
    total = len(dataset)
    for name in OPTIONAL_FIELDS:
        count = sum(1 for p in dataset.promises if not getattr(p, name))
        rows.append(
            {
                "field": name,
                "missing_count": count,
                "missing_pct": count / total * 100 if total else 0.0,
            }
        )
    return pd.DataFrame(rows, columns=["field", "missing_count", "missing_pct"]).sort_values(
        "missing_pct", ascending=False, kind="stable"
    )


def unknown_statuses(dataset: Dataset) -> Dict[str, int]:
    counts = Counter(p.status for p in dataset.promises if p.status not in STATUS_LABELS)
    return dict(sorted(counts.items()))


def build_quality_overview(dataset: Dataset) -> Dict[str, Any]:
    missing = missing_values_summary(dataset)
    return {
        "row_count": len(dataset),
        "blank_promise_count": sum(1 for p in dataset.promises if not p.promise.strip()),
        "missing": {name: int(count) for name, count in zip(missing["field"], missing["missing_count"])},
        "unknown_statuses": unknown_statuses(dataset),
    }
