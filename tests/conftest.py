"""Shared pytest fixtures for all tests."""

import pytest

from gvm.beat_clock import BeatClock


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def linear_noise(a: float, b: float, c: float) -> float:
    """Deterministic stand-in for Perlin noise, easy to reason about."""
    return a * 0.1 + b * 0.01 + c * 0.001


@pytest.fixture
def fake_clock():
    """Clock starting at 0 ms."""
    return FakeClock()


@pytest.fixture
def beat_clock(fake_clock):
    """BeatClock at 60 BPM: one beat per 1000 ms of fake clock."""
    return BeatClock(60, clock=fake_clock, noise=linear_noise)


@pytest.fixture
def noise_fn():
    """The deterministic noise used by the beat_clock fixture."""
    return linear_noise
