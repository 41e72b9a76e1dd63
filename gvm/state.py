"""
Shared beat clock for multi-threaded callers.

BeatClock itself has no locking. BeatState owns one clock and
serializes every access to it, so tap input from the HTTP API can
interleave safely with frame queries.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, TypeVar

from gvm.beat_clock import BeatClock

T = TypeVar("T")


@dataclass
class BeatState:
    """
    Lock-guarded BeatClock.

    All clock operations should go through with_clock() or the helpers.
    """

    clock: BeatClock = field(default_factory=BeatClock)

    # Last BPM change (set_bpm or tap)
    last_updated: datetime = field(default_factory=datetime.now)

    # Thread-safe access lock
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def with_clock(self, fn: Callable[[BeatClock], T]) -> T:
        """
        Run fn with exclusive access to the clock.

        Example:
            phase = beat_state.with_clock(lambda c: c.get_phase(4, 1))
        """
        with self._lock:
            return fn(self.clock)

    def set_bpm(self, bpm: float) -> None:
        with self._lock:
            self.clock.set_bpm(bpm)
            self.last_updated = datetime.now()

    def tap(self) -> tuple[float, int]:
        """Register a tap; returns (bpm, retained tap count)."""
        with self._lock:
            before = self.clock.get_bpm()
            self.clock.tap_tempo()
            if self.clock.get_bpm() != before:
                self.last_updated = datetime.now()
            return self.clock.get_bpm(), self.clock.tap_count

    def get_snapshot(self) -> dict[str, Any]:
        """
        Get thread-safe snapshot of current state.

        Returns:
            dict: bpm, count, phase, tap_count, last_updated
        """
        with self._lock:
            return {
                "bpm": self.clock.get_bpm(),
                "count": self.clock.count(),
                "phase": self.clock.get_phase(),
                "tap_count": self.clock.tap_count,
                "last_updated": self.last_updated.isoformat(),
            }


# Global state instance
beat_state = BeatState()
