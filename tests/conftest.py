import pytest

from promise_tracker.data.records import PromiseRecord


def make(status, promise="A promise", category="General", **kw):
    return PromiseRecord(promise=promise, category=category, status=status, **kw)


@pytest.fixture
def bridge_and_schools():
    return [
        PromiseRecord(promise="Build a bridge", category="Infrastructure", status="broken"),
        PromiseRecord(promise="Fund schools", category="Education", status="completed"),
    ]


@pytest.fixture
def mixed_promises():
    return [
        make("completed", "Open a clinic", "Health"),
        make("in_progress", "Repave Main Street", "Infrastructure"),
        make("broken", "Freeze property taxes", "Finance"),
        make("stalled", "New bike lanes", "Transport"),
        make("pending", "Hire 50 teachers", "Education"),
        make("on_hold", "Rebuild the pier", "Infrastructure"),
        make("completed", "Free wifi downtown", "Technology"),
    ]
