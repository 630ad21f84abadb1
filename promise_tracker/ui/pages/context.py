from __future__ import annotations

from dataclasses import dataclass

from promise_tracker.config import Settings
from promise_tracker.dashboard import DashboardModel


@dataclass
class PageContext:
    model: DashboardModel
    settings: Settings
