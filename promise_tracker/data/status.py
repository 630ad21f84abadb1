from __future__ import annotations

from typing import List, Tuple

from promise_tracker.config import ALL, STATUS_LABELS


def status_label(status: str) -> str:
    """Human-readable label for a status code; unknown codes pass through."""
    return STATUS_LABELS.get(status, status)


def status_options() -> List[Tuple[str, str]]:
    """(code, label) pairs for the status selector, "all" first."""
    return [(ALL, "All statuses")] + [(code, status_label(code)) for code in STATUS_LABELS]
