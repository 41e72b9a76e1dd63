"""
BPM-driven beat clock with eased phase and noise interpolation.

The phase holds at an integer for most of each cycle, then eases into
the next integer during the final ease window ("settle, then leap").
leap_noise() uses the same shape to blend between noise samples taken
at consecutive cycle indices.

Not thread-safe: share an instance across threads only behind a lock
(see gvm.state.BeatState).
"""

import math
import numbers
import statistics
from collections import deque
from typing import Callable, Optional, Sequence, Union

from gvm.config import (
    DEFAULT_BPM,
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_EASE_DURATION,
    TAP_RECORD_INTERVAL,
    TAP_MAX_TIME_DIFF,
    TAP_HISTORY_SIZE,
)
from gvm.easing import EasingFn, ease_in_out_sine, get_easing
from gvm.logger import logger
from gvm.sketch_math import millis, noise as default_noise, lerp as default_lerp, fract


class ValidationError(ValueError):
    """Invalid argument passed to a BeatClock operation."""


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _validate_cycle(cycle_length: float, ease_duration: float) -> None:
    if not _is_real(cycle_length) or not math.isfinite(cycle_length) or cycle_length <= 0:
        raise ValidationError("Cycle length must be positive")
    if not _is_real(ease_duration) or not 0 < ease_duration <= cycle_length:
        raise ValidationError("Ease duration must be positive and not greater than cycle length")


class BeatClock:
    """
    Tracks tempo and converts clock readings into beat counts.

    Args:
        bpm: Beats per minute, in (0, 1000]
        clock: Returns a monotonic reading in milliseconds
        noise: Deterministic noise(a, b, c) sampler
        lerp: Linear interpolation lerp(a, b, t)
        record_interval: Taps required before tap_tempo() updates BPM
        max_time_diff: Taps older than this (ms, relative to newest) are dropped

    Example:
        clock = BeatClock(120)
        x = map_range(clock.leap_noise(11, 3, (i, 0)), 0, 1, 0, width)
    """

    MIN_BPM = 0
    MAX_BPM = 1000

    def __init__(
        self,
        bpm: float = DEFAULT_BPM,
        clock: Callable[[], float] = millis,
        noise: Callable[[float, float, float], float] = default_noise,
        lerp: Callable[[float, float, float], float] = default_lerp,
        record_interval: int = TAP_RECORD_INTERVAL,
        max_time_diff: float = TAP_MAX_TIME_DIFF,
    ):
        self.validate_bpm(bpm)
        if not isinstance(record_interval, int) or isinstance(record_interval, bool):
            raise ValidationError("Tap record interval must be an integer")
        if record_interval < 2:
            raise ValidationError("Tap record interval must be at least 2")
        if max_time_diff <= 0:
            raise ValidationError("Tap max time difference must be positive")

        self._bpm = bpm
        self._clock = clock
        self._noise = noise
        self._lerp = lerp

        # Count cache, keyed by clock reading
        self._last_count: Optional[float] = None
        self._last_count_time: Optional[float] = None

        self.record_interval = record_interval
        self.max_time_diff = max_time_diff
        self._taps: deque[float] = deque(maxlen=max(TAP_HISTORY_SIZE, record_interval))

    # ------------------------------------------------------------------
    # Tempo
    # ------------------------------------------------------------------

    @classmethod
    def validate_bpm(cls, bpm: float) -> None:
        """
        Raises:
            ValidationError: If bpm is not a finite number in (MIN_BPM, MAX_BPM]
        """
        if not _is_real(bpm) or not math.isfinite(bpm) or not cls.MIN_BPM < bpm <= cls.MAX_BPM:
            raise ValidationError(f"BPM must be greater than {cls.MIN_BPM} and at most {cls.MAX_BPM}")

    def set_bpm(self, bpm: float) -> None:
        self.validate_bpm(bpm)
        logger.debug(f"BPM set: {self._bpm} -> {bpm}")
        self._bpm = bpm

    def get_bpm(self) -> float:
        return self._bpm

    @property
    def bpm(self) -> float:
        return self._bpm

    # ------------------------------------------------------------------
    # Beat count and phase
    # ------------------------------------------------------------------

    def count(self) -> float:
        """
        Current fractional beat count.

        Repeated calls at the same clock reading return the cached value.
        """
        current_time = self._clock()

        if self._last_count is not None and self._last_count_time == current_time:
            return self._last_count

        beat_interval_ms = (60 / self._bpm) * 1000
        self._last_count = current_time / beat_interval_ms
        self._last_count_time = current_time

        return self._last_count

    def get_phase(
        self,
        cycle_length: float = DEFAULT_CYCLE_LENGTH,
        ease_duration: float = DEFAULT_EASE_DURATION,
        ease_fn: Union[str, EasingFn] = ease_in_out_sine,
    ) -> float:
        """
        Eased phase: integer cycle index plus an eased fraction in [0, 1).

        The fraction stays at ease_fn(0) until the last ease_duration beats
        of the cycle, then ramps through ease_fn towards the next integer.

        Args:
            cycle_length: Beats per cycle (> 0)
            ease_duration: Beats at the end of each cycle spent easing,
                in (0, cycle_length]
            ease_fn: Easing function or catalog name

        Raises:
            ValidationError: On invalid cycle parameters
        """
        _validate_cycle(cycle_length, ease_duration)
        try:
            ease = get_easing(ease_fn)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        beats = self.count()
        ease_start = cycle_length - ease_duration
        base_phase = math.floor(beats / cycle_length)
        cycle_position = beats % cycle_length
        ease_progress = (max(ease_start, cycle_position) - ease_start) / ease_duration

        return base_phase + ease(fract(ease_progress))

    def leap_noise(
        self,
        cycle_length: float = DEFAULT_CYCLE_LENGTH,
        ease_duration: float = DEFAULT_EASE_DURATION,
        seed: Sequence[float] = (0, 0),
        ease_fn: Union[str, EasingFn] = ease_in_out_sine,
    ) -> float:
        """
        Noise value that holds, then eases to the next cycle's sample.

        Args:
            seed: Two numbers selecting the noise lane, e.g. (i, 0) per object

        Raises:
            ValidationError: If seed is not exactly two numbers, or on
                invalid cycle parameters
        """
        if (
            isinstance(seed, (str, bytes))
            or not isinstance(seed, Sequence)
            or len(seed) != 2
            or not all(_is_real(s) and math.isfinite(s) for s in seed)
        ):
            raise ValidationError("Seed must be a sequence of two finite numbers")
        _validate_cycle(cycle_length, ease_duration)

        current_phase = math.floor(self.count() / cycle_length)
        next_phase = current_phase + 1

        current_noise = self._noise(current_phase, seed[0], seed[1])
        next_noise = self._noise(next_phase, seed[0], seed[1])

        ease_progress = fract(self.get_phase(cycle_length, ease_duration, ease_fn))

        return self._lerp(current_noise, next_noise, ease_progress)

    # ------------------------------------------------------------------
    # Tap tempo
    # ------------------------------------------------------------------

    def tap_tempo(self) -> None:
        """
        Register a tap at the current clock reading.

        Once record_interval taps fall within max_time_diff of the newest
        one, BPM becomes 60000 / mean gap of the last record_interval taps.
        Nothing is committed if the resulting BPM fails validation.

        Raises:
            ValidationError: If the taps imply an out-of-range BPM
        """
        now = self._clock()

        taps = deque(self._taps, maxlen=self._taps.maxlen)
        taps.append(now)
        while taps and taps[0] < now - self.max_time_diff:
            taps.popleft()

        new_bpm = None
        if len(taps) >= self.record_interval:
            recent = list(taps)[-self.record_interval:]
            average_interval = statistics.mean(b - a for a, b in zip(recent, recent[1:]))
            new_bpm = 60000 / average_interval if average_interval > 0 else math.inf
            self.validate_bpm(new_bpm)

        self._taps = taps
        if new_bpm is not None:
            logger.info(f"Tap tempo: {self._bpm} -> {new_bpm:.2f} BPM ({len(taps)} taps)")
            self._bpm = new_bpm

    @property
    def tap_count(self) -> int:
        return len(self._taps)

    def reset_taps(self) -> None:
        self._taps.clear()
