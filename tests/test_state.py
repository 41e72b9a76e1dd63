"""Tests for the shared beat state."""

import pytest
import threading
import time
from datetime import datetime

from gvm.beat_clock import BeatClock, ValidationError
from gvm.state import BeatState


@pytest.fixture
def state(beat_clock):
    return BeatState(clock=beat_clock)


class TestBeatState:
    """Tests for BeatState class."""

    def test_default_clock(self):
        """Should create a default clock when none is given."""
        state = BeatState()
        assert isinstance(state.clock, BeatClock)
        assert isinstance(state.last_updated, datetime)

    def test_set_bpm(self, state):
        """Should update BPM and timestamp."""
        old_timestamp = state.last_updated
        time.sleep(0.01)
        state.set_bpm(90)
        assert state.clock.get_bpm() == 90
        assert state.last_updated > old_timestamp

    def test_set_bpm_invalid(self, state):
        """Should propagate validation errors and keep the timestamp."""
        old_timestamp = state.last_updated
        with pytest.raises(ValidationError):
            state.set_bpm(0)
        assert state.last_updated == old_timestamp

    def test_tap(self, state, fake_clock):
        """Should report BPM and tap count after each tap."""
        results = []
        for t in (0, 500, 1000, 1500, 2000):
            fake_clock.now = t
            results.append(state.tap())
        assert results[0] == (60, 1)
        assert results[-1] == (120, 5)

    def test_with_clock(self, state, fake_clock):
        """Should run the callable against the clock."""
        fake_clock.now = 7000
        assert state.with_clock(lambda c: c.count()) == 7.0

    def test_snapshot(self, state, fake_clock):
        """Should capture bpm, count, phase and taps."""
        fake_clock.now = 8000
        snapshot = state.get_snapshot()
        assert snapshot["bpm"] == 60
        assert snapshot["count"] == 8.0
        assert snapshot["phase"] == pytest.approx(1.0)
        assert snapshot["tap_count"] == 0
        assert "last_updated" in snapshot

    def test_thread_safe_taps(self):
        """Should handle concurrent taps without errors."""
        state = BeatState()
        errors = []

        def tap_many():
            try:
                for _ in range(100):
                    state.tap()
            except ValidationError:
                # identical millisecond readings imply infinite BPM
                pass
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=tap_many) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not errors
        assert state.clock.tap_count <= 32
