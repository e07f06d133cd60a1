"""
Host tracker - clock injection, drift callback and change subscriptions.
"""

import pytest
from unittest.mock import MagicMock

from semantic_state import StateEngine, DimensionMismatchError
from semantic_state.api.tracker import SemanticStateTracker, wall_clock_ms


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(1000.0)


@pytest.fixture
def tracker(clock):
    return SemanticStateTracker(StateEngine(alpha=0.5, drift_threshold=0.5), clock=clock)


def test_update_uses_tracker_clock(tracker, clock):
    tracker.update([1.0, 0.0])
    assert tracker.engine.last_updated_at == 1000.0

    clock.now = 2500.0
    tracker.update([1.0, 0.0])
    assert tracker.engine.last_updated_at == 2500.0


def test_explicit_timestamp_wins(tracker):
    tracker.update([1.0, 0.0], now_ms=42.0)
    assert tracker.engine.last_updated_at == 42.0


def test_snapshot_uses_tracker_clock(tracker, clock):
    tracker.update([1.0, 0.0])
    clock.now = 2000.0

    snapshot = tracker.get_snapshot()
    assert snapshot.health_score == pytest.approx(0.9)


def test_drift_callback_fires_on_drift(clock):
    callback = MagicMock()
    tracker = SemanticStateTracker(StateEngine(0.5, 0.5), on_drift_detected=callback, clock=clock)

    tracker.update([1.0, 0.0])
    callback.assert_not_called()

    tracker.update([0.0, 1.0])
    callback.assert_called_once()
    vector, drift_score = callback.call_args[0]
    assert vector.tolist() == [0.0, 1.0]
    assert drift_score == pytest.approx(1.0)


def test_raising_drift_callback_still_notifies_subscribers(clock):
    """The update is committed before the callback runs, so listeners hear about it and the error propagates."""
    callback = MagicMock(side_effect=RuntimeError("alert sink down"))
    listener = MagicMock()
    tracker = SemanticStateTracker(StateEngine(0.5, 0.5), on_drift_detected=callback, clock=clock)
    tracker.subscribe(listener)

    tracker.update([1.0, 0.0])
    with pytest.raises(RuntimeError, match="alert sink down"):
        tracker.update([0.0, 1.0])

    callback.assert_called_once()
    assert listener.call_count == 2
    assert tracker.engine.update_count == 2


def test_drift_callback_silent_without_drift(clock):
    callback = MagicMock()
    tracker = SemanticStateTracker(StateEngine(0.5, 0.5), on_drift_detected=callback, clock=clock)

    tracker.update([1.0, 0.0])
    tracker.update([1.0, 0.1])
    callback.assert_not_called()


def test_subscribers_notified_on_update_and_reset(tracker):
    listener = MagicMock()
    unsubscribe = tracker.subscribe(listener)

    tracker.update([1.0, 0.0])
    tracker.reset()
    assert listener.call_count == 2

    unsubscribe()
    tracker.update([1.0, 0.0])
    assert listener.call_count == 2


def test_failed_update_does_not_notify(tracker):
    listener = MagicMock()
    tracker.subscribe(listener)
    tracker.update([1.0, 0.0])

    with pytest.raises(DimensionMismatchError):
        tracker.update([1.0])

    assert listener.call_count == 1


def test_wall_clock_is_milliseconds():
    assert wall_clock_ms() > 1_600_000_000_000
