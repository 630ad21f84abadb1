"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Dict, List

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("tracker", "Promise Tracker"),
    TabConfig("data_quality", "Data Quality"),
]

DEFAULT_SUBJECT = "Mayor"
DEFAULT_DATA_SOURCE = "data.json"

STATUS_LABELS: Dict[str, str] = {
    "in_progress": "In progress",
    "completed": "Completed",
    "broken": "Broken",
    "stalled": "Stalled",
    "pending": "Pending",
}

# Sentinel used by the category and status selectors for "no restriction".
ALL = "all"

# Score thresholds (inclusive lower bounds)
STRONG_THRESHOLD = 67
MODERATE_THRESHOLD = 34

# The legacy score scales (raw + 1) by 1, so scores land in {0, 1, 2}.
# 50 maps the [-1, 1] raw range onto [0, 100]; opt in via SCORE_SCALE_FACTOR.
REFERENCE_SCALE_FACTOR = 1.0
NORMALIZED_SCALE_FACTOR = 50.0

SCORE_COLORS: Dict[str, str] = {
    "Strong": "#27ae60",
    "Moderate": "#1e95d6",
    "Weak": "#ef4b5a",
}

# Background / foreground pairs for the score label pill
SCORE_PILL_COLORS: Dict[str, tuple] = {
    "Strong": ("#dcfce7", "#166534"),
    "Moderate": ("#dbeafe", "#1e40af"),
    "Weak": ("#fee2e2", "#b4232d"),
}


@dataclass(frozen=True)
class Settings:
    data_source: str = DEFAULT_DATA_SOURCE
    subject: str = DEFAULT_SUBJECT
    score_scale_factor: float = REFERENCE_SCALE_FACTOR
    credentials_file: str = "google-credentials.json"
    http_timeout: float = 10.0
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        log.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    return value


def get_settings() -> Settings:
    """Resolve settings from the environment (populated by bootstrap_env)."""
    return Settings(
        data_source=os.getenv("PROMISE_DATA_SOURCE") or DEFAULT_DATA_SOURCE,
        subject=os.getenv("PROMISE_SUBJECT") or DEFAULT_SUBJECT,
        score_scale_factor=_float_env("SCORE_SCALE_FACTOR", REFERENCE_SCALE_FACTOR),
        credentials_file=os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or "google-credentials.json",
        http_timeout=_float_env("HTTP_TIMEOUT", 10.0),
        log_level=os.getenv("LOG_LEVEL") or "INFO",
    )
