"""Quick validation script for a promise data document.

Run with `python scripts/validate_dataset.py [path-or-url]` to check that the
document loads and to print the metrics the dashboard would show.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import List, Optional

from promise_tracker.config import get_settings
from promise_tracker.dashboard import DashboardModel
from promise_tracker.data.quality import build_quality_overview
from promise_tracker.errors import LoadFailure
from promise_tracker.log import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.log_level)
    source = argv[0] if argv else settings.data_source

    try:
        model = asyncio.run(DashboardModel.load(source, settings))
    except LoadFailure as exc:
        print(f"Validation failed: {exc}", file=sys.stderr)
        return 1

    summary = {
        "title": model.title,
        "cards": dict(model.cards.as_cards()),
        "score": {"pct": model.score.pct, "label": model.score.label, "description": model.score.description},
        "categories": model.categories,
        "quality": build_quality_overview(model.dataset),
    }
    print(json.dumps(summary, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
