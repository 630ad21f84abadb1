from promise_tracker.config import SCORE_COLORS
from promise_tracker.data.filters import FilterCriteria
from promise_tracker.data.metrics import CardMetrics, ScoreResult
from promise_tracker.data.records import PromiseRecord
from promise_tracker.ui.components.charts import score_color, score_gauge
from promise_tracker.ui.components.formatting import escape_markdown, format_number, format_percent
from promise_tracker.ui.components.kpi import cards_from_metrics
from promise_tracker.ui.components.tables import promises_display_frame
from promise_tracker.ui.layout import active_filter_summary


def test_gauge_color_follows_score_label():
    assert score_color(80) == SCORE_COLORS["Strong"]
    assert score_color(50) == SCORE_COLORS["Moderate"]
    assert score_color(1) == SCORE_COLORS["Weak"]


def test_gauge_figure_carries_pct():
    fig = score_gauge(ScoreResult(pct=67, label="Strong", completed_count=2, broken_count=1, total_count=3))
    indicator = fig.data[0]
    assert indicator.value == 67
    assert indicator.gauge.bar.color == SCORE_COLORS["Strong"]


def test_cards_from_metrics():
    cards = cards_from_metrics(CardMetrics(total=3, in_progress=1, completed=1, broken=1))
    assert [(c.label, c.value, c.icon) for c in cards] == [
        ("Total Promises", 3, "◎"),
        ("In Progress", 1, "◷"),
        ("Completed", 1, "✓"),
        ("Broken", 1, "✕"),
    ]


def test_display_frame_labels_statuses():
    frame = promises_display_frame(
        [
            PromiseRecord(promise="a", status="in_progress"),
            PromiseRecord(promise="b", status="on_hold"),
        ]
    )
    assert frame["status"].tolist() == ["In progress", "on_hold"]


def test_formatting():
    assert format_number(1234) == "1,234"
    assert format_number(None) == "–"
    assert format_percent(12.345, decimals=1) == "12.3%"


def test_escape_markdown():
    assert escape_markdown("Mayor *Smith*") == r"Mayor \*Smith\*"
    assert escape_markdown("# _Council_") == r"\# \_Council\_"
    assert escape_markdown("Plain words") == "Plain words"
    assert escape_markdown(None) == ""


def test_active_filter_summary():
    assert active_filter_summary(FilterCriteria(query="  ")) == "Active Filters: All promises"
    assert active_filter_summary(FilterCriteria(query=" Bridge", status="in_progress")) == (
        'Active Filters: Search: "bridge" | Status: In progress'
    )
    assert active_filter_summary(FilterCriteria(category="")) == "Active Filters: Category: (none)"
