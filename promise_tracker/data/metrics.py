"""
Card metrics and the accountability score.

The score counts completed promises as +1 and broken ones as -1, divides by
the number of promises and rescales ``raw + 1`` (range [0, 2]) by a scale
factor, clamped to [0, 100]:

    pct = round(((completed - broken) / max(total, 1) + 1) * scale_factor)

The legacy score uses a factor of 1 (``REFERENCE_SCALE_FACTOR``),
which keeps ``pct`` in {0, 1, 2}. ``NORMALIZED_SCALE_FACTOR`` (50) spans the
full 0-100 range and is selected with the ``SCORE_SCALE_FACTOR`` setting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from promise_tracker.config import (
    MODERATE_THRESHOLD,
    REFERENCE_SCALE_FACTOR,
    STRONG_THRESHOLD,
)
from promise_tracker.data.records import PromiseRecord

STRONG = "Strong"
MODERATE = "Moderate"
WEAK = "Weak"


@dataclass(frozen=True)
class CardMetrics:
    total: int = 0
    in_progress: int = 0
    completed: int = 0
    broken: int = 0

    def as_cards(self) -> List[Tuple[str, int]]:
        return [
            ("Total Promises", self.total),
            ("In Progress", self.in_progress),
            ("Completed", self.completed),
            ("Broken", self.broken),
        ]


@dataclass(frozen=True)
class ScoreResult:
    pct: int
    label: str
    completed_count: int
    broken_count: int
    total_count: int

    @property
    def description(self) -> str:
        return (
            f"Based on {self.completed_count} completed and {self.broken_count} broken "
            f"promises out of {self.total_count} total commitments."
        )


def count_status(promises: Sequence[PromiseRecord], status: str) -> int:
    return sum(1 for p in promises if p.status == status)


def aggregate(promises: Sequence[PromiseRecord]) -> CardMetrics:
    return CardMetrics(
        total=len(promises),
        in_progress=count_status(promises, "in_progress"),
        completed=count_status(promises, "completed"),
        broken=count_status(promises, "broken"),
    )


def classify_score(pct: float) -> str:
    """Qualitative label for a score; the only place thresholds are applied."""
    if pct >= STRONG_THRESHOLD:
        return STRONG
    if pct >= MODERATE_THRESHOLD:
        return MODERATE
    return WEAK


def round_half_up(value: float) -> int:
    # Matches JavaScript Math.round: .5 goes toward +infinity, even for negatives.
    return int(math.floor(value + 0.5))


def compute_score(
    promises: Sequence[PromiseRecord],
    scale_factor: Optional[float] = None,
) -> ScoreResult:
    if scale_factor is None:
        scale_factor = REFERENCE_SCALE_FACTOR
    total = len(promises) or 1
    completed = count_status(promises, "completed")
    broken = count_status(promises, "broken")

    raw = (completed - broken) / total
    pct = round_half_up((raw + 1) * scale_factor)
    pct = max(0, min(100, pct))

    return ScoreResult(
        pct=pct,
        label=classify_score(pct),
        completed_count=completed,
        broken_count=broken,
        total_count=total,
    )
