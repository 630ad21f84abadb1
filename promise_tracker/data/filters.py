"""
Filter utilities that narrow the promise list to the dashboard's search,
category and status selections.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Sequence

from promise_tracker.config import ALL
from promise_tracker.data.records import PromiseRecord


@dataclass(frozen=True)
class FilterCriteria:
    query: str = ""
    category: str = ALL
    status: str = ALL

    def normalized(self) -> "FilterCriteria":
        return replace(self, query=(self.query or "").strip().lower())

    @property
    def is_empty(self) -> bool:
        return not self.normalized().query and self.category == ALL and self.status == ALL


DEFAULT_CRITERIA = FilterCriteria()


def _matches(promise: PromiseRecord, criteria: FilterCriteria) -> bool:
    q = criteria.query
    matches_query = (
        not q
        or q in promise.promise.lower()
        or q in promise.category.lower()
    )
    matches_category = criteria.category == ALL or promise.category == criteria.category
    matches_status = criteria.status == ALL or promise.status == criteria.status
    return matches_query and matches_category and matches_status


def apply_filters(promises: Sequence[PromiseRecord], criteria: FilterCriteria) -> List[PromiseRecord]:
    """
    Return the promises matching every clause of ``criteria``, in input order.

    The query is trimmed and matched case-insensitively against the promise
    text and the category; category and status must match exactly unless
    set to "all". Always a new list; the input is left untouched.
    """
    criteria = criteria.normalized()
    return [p for p in promises if _matches(p, criteria)]


def category_options(promises: Sequence[PromiseRecord]) -> List[str]:
    """Distinct categories, sorted ascending, for the category selector."""
    return sorted({p.category for p in promises})


def serialize_criteria(criteria: FilterCriteria) -> Dict[str, Any]:
    """
    Convert the criteria to a JSON-serialisable dictionary to be stored in
    session_state or used for logging/debugging.
    """
    return {
        "query": criteria.query,
        "category": criteria.category,
        "status": criteria.status,
    }
