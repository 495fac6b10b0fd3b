"""Shared test fixtures for rhythm grouping tests."""

import pytest
from fastapi.testclient import TestClient

from rhythmchain.analysis.models import TimedEvent
from rhythmchain.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


def make_events(intervals: list[float], start: float = 0.0) -> list[TimedEvent]:
    """Create events whose delta times are *intervals*.

    The first event starts at *start*; each later event starts its own
    interval after the one before it.
    """
    events = []
    time = start
    for i, dt in enumerate(intervals):
        if i > 0:
            time += dt
        events.append(TimedEvent(start_time=time, delta_time=dt, index=i))
    return events


def burst_start_times(n_bursts: int = 4, notes: int = 3, spacing: float = 50.0,
                      period: float = 400.0) -> list[float]:
    """Start times of evenly repeated bursts, e.g. 0, 50, 100, 400, 450, 500, ..."""
    return [b * period + n * spacing for b in range(n_bursts) for n in range(notes)]


@pytest.fixture
def bursts():
    """Four three-note bursts at 50ms spacing, one every 400ms."""
    return burst_start_times()
