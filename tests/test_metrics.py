import pytest

from promise_tracker.config import NORMALIZED_SCALE_FACTOR, REFERENCE_SCALE_FACTOR
from promise_tracker.data.metrics import (
    CardMetrics,
    aggregate,
    classify_score,
    compute_score,
    round_half_up,
)

from tests.conftest import make


def test_aggregate_empty():
    assert aggregate([]) == CardMetrics(total=0, in_progress=0, completed=0, broken=0)


def test_aggregate_counts_tracked_statuses(mixed_promises):
    cards = aggregate(mixed_promises)
    assert cards.total == len(mixed_promises) == 7
    assert cards.in_progress == 1
    assert cards.completed == 2
    assert cards.broken == 1
    assert cards.in_progress + cards.completed + cards.broken <= cards.total


def test_card_view_models_in_display_order():
    cards = CardMetrics(total=4, in_progress=1, completed=2, broken=1).as_cards()
    assert cards == [("Total Promises", 4), ("In Progress", 1), ("Completed", 2), ("Broken", 1)]


@pytest.mark.parametrize(
    "pct, label",
    [(0, "Weak"), (33, "Weak"), (34, "Moderate"), (66, "Moderate"), (67, "Strong"), (100, "Strong")],
)
def test_classify_score_thresholds(pct, label):
    assert classify_score(pct) == label


def test_round_half_up_matches_js_math_round():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(1.4999) == 1


def test_empty_collection_uses_guarded_total():
    score = compute_score([])
    assert (score.completed_count, score.broken_count, score.total_count) == (0, 0, 1)
    # raw = 0 -> (0 + 1) * 1
    assert score.pct == 1
    assert score.label == "Weak"


def test_empty_collection_with_normalized_factor():
    score = compute_score([], NORMALIZED_SCALE_FACTOR)
    assert score.pct == 50
    assert score.label == "Moderate"


def test_two_completed_one_broken_reference_factor():
    promises = [make("completed"), make("completed"), make("broken")]
    score = compute_score(promises, REFERENCE_SCALE_FACTOR)
    assert (score.completed_count, score.broken_count, score.total_count) == (2, 1, 3)
    # (1/3 + 1) * 1 = 1.33
    assert score.pct == 1
    assert score.label == "Weak"


def test_two_completed_one_broken_normalized_factor():
    promises = [make("completed"), make("completed"), make("broken")]
    score = compute_score(promises, NORMALIZED_SCALE_FACTOR)
    # (1/3 + 1) * 50 = 66.67
    assert score.pct == 67
    assert score.label == "Strong"


def test_reference_factor_is_default():
    promises = [make("completed")] * 4
    assert compute_score(promises) == compute_score(promises, REFERENCE_SCALE_FACTOR)
    assert compute_score(promises).pct == 2


def test_all_broken_floor_and_all_completed_ceiling():
    assert compute_score([make("broken")] * 3, NORMALIZED_SCALE_FACTOR).pct == 0
    assert compute_score([make("completed")] * 3, NORMALIZED_SCALE_FACTOR).pct == 100


@pytest.mark.parametrize("factor", [1, 50, 75, 1000, -10])
def test_pct_always_clamped(factor, mixed_promises):
    for promises in ([], mixed_promises, [make("completed")] * 5, [make("broken")] * 5):
        pct = compute_score(promises, factor).pct
        assert isinstance(pct, int)
        assert 0 <= pct <= 100


def test_unknown_statuses_dilute_score():
    promises = [make("completed"), make("mystery"), make("mystery"), make("mystery")]
    score = compute_score(promises, NORMALIZED_SCALE_FACTOR)
    # (1/4 + 1) * 50 = 62.5 -> 63
    assert score.pct == 63
    assert score.total_count == 4


def test_score_description():
    promises = [make("completed"), make("completed"), make("broken")]
    assert compute_score(promises).description == (
        "Based on 2 completed and 1 broken promises out of 3 total commitments."
    )
