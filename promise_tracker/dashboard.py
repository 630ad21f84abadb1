"""
Session model that ties the loaded dataset to the derived view-models.

The dataset is loaded once; cards, score and category options are computed
once from it, and only the visible list is recomputed when filter inputs
change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from promise_tracker.config import Settings, get_settings
from promise_tracker.data.filters import (
    DEFAULT_CRITERIA,
    FilterCriteria,
    apply_filters,
    category_options,
    serialize_criteria,
)
from promise_tracker.data.loader import load_dataset
from promise_tracker.data.metrics import CardMetrics, ScoreResult, aggregate, compute_score
from promise_tracker.data.records import Dataset, PromiseRecord

log = logging.getLogger(__name__)


@dataclass
class DashboardModel:
    dataset: Dataset
    cards: CardMetrics
    score: ScoreResult
    categories: List[str]
    criteria: FilterCriteria = DEFAULT_CRITERIA
    visible: List[PromiseRecord] = field(default_factory=list)

    @classmethod
    def from_dataset(cls, dataset: Dataset, scale_factor: Optional[float] = None) -> "DashboardModel":
        promises = dataset.promises
        return cls(
            dataset=dataset,
            cards=aggregate(promises),
            score=compute_score(promises, scale_factor),
            categories=category_options(promises),
            visible=list(promises),
        )

    @classmethod
    async def load(
        cls,
        source: Optional[str] = None,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "DashboardModel":
        settings = settings or get_settings()
        dataset = await load_dataset(source, settings, client)
        return cls.from_dataset(dataset, settings.score_scale_factor)

    @property
    def title(self) -> str:
        return self.dataset.title

    def update(self, criteria: FilterCriteria) -> List[PromiseRecord]:
        """Recompute the visible promises for new filter inputs."""
        self.criteria = criteria
        self.visible = apply_filters(self.dataset.promises, criteria)
        log.debug("Filters %s matched %d promises", serialize_criteria(criteria), len(self.visible))
        return self.visible
