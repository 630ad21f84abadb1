"""
Typed records for the promise document and the parsing that builds them.

A document looks like::

    {"subject": "Mayor", "promises": [{"promise": ..., "category": ...,
      "status": ..., "target_deadline": ..., "deadline": ..., "source_url": ...}]}

Missing optional fields are tolerated by substituting empty values; unknown
status codes are kept verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import pandas as pd

from promise_tracker.config import DEFAULT_SUBJECT
from promise_tracker.errors import LoadFailure

# Checked in order; the first non-empty value wins.
DEADLINE_FIELDS: Tuple[str, ...] = ("target_deadline", "deadline")

TABLE_COLUMNS = ["promise", "category", "status", "deadline", "source_url"]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class PromiseRecord:
    promise: str = ""
    category: str = ""
    status: str = ""
    deadline: str = ""
    source_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PromiseRecord":
        deadline = next((_text(raw.get(name)) for name in DEADLINE_FIELDS if _text(raw.get(name))), "")
        source_url = _text(raw.get("source_url")).strip() or None
        return cls(
            promise=_text(raw.get("promise")),
            category=_text(raw.get("category")),
            status=_text(raw.get("status")),
            deadline=deadline,
            source_url=source_url,
        )

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {
            "promise": self.promise,
            "category": self.category,
            "status": self.status,
            "deadline": self.deadline,
            "source_url": self.source_url,
        }


@dataclass(frozen=True)
class Dataset:
    subject: str = DEFAULT_SUBJECT
    promises: Tuple[PromiseRecord, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return f"{self.subject} Promise Tracker"

    def __len__(self) -> int:
        return len(self.promises)


def parse_document(doc: Any, source: Optional[str] = None, default_subject: str = DEFAULT_SUBJECT) -> Dataset:
    """Build a Dataset from a decoded JSON document.

    Raises LoadFailure when the document is not shaped like
    ``{"promises": [ {...}, ... ]}``.
    """
    if not isinstance(doc, Mapping):
        raise LoadFailure(f"Expected a JSON object, got {type(doc).__name__}", source)

    raw_promises = doc.get("promises")
    if raw_promises is None:
        raw_promises = []
    if not isinstance(raw_promises, list):
        raise LoadFailure("'promises' must be a list", source)

    records = []
    for idx, raw in enumerate(raw_promises):
        if not isinstance(raw, Mapping):
            raise LoadFailure(f"Promise #{idx} is not an object", source)
        records.append(PromiseRecord.from_mapping(raw))

    subject = _text(doc.get("subject")).strip() or default_subject
    return Dataset(subject=subject, promises=tuple(records))


def records_to_frame(promises: Sequence[PromiseRecord]) -> pd.DataFrame:
    """Tabular view of records for display and CSV export, order preserved."""
    return pd.DataFrame([p.as_dict() for p in promises], columns=TABLE_COLUMNS)
