"""Timed event construction from raw onset times."""

import numpy as np

from rhythmchain.analysis.models import RhythmDescriptor, TimedEvent

# (numerator, denominator, difficulty)
COMMON_RHYTHMS: list[tuple[int, int, float]] = [
    (1, 1, 0.0),
    (2, 1, 0.3),
    (1, 2, 0.5),
    (3, 1, 0.3),
    (1, 3, 0.35),
    (3, 2, 0.6),
    (2, 3, 0.4),
    (5, 4, 0.5),
    (4, 5, 0.7),
]


def closest_rhythm(ratio: float) -> RhythmDescriptor:
    """Snap a raw delta-time ratio to the nearest common rhythm."""
    numerator, denominator, difficulty = min(
        COMMON_RHYTHMS, key=lambda r: abs(r[0] / r[1] - ratio)
    )
    return RhythmDescriptor(numerator=numerator, denominator=denominator, difficulty=difficulty)


def build_events(start_times) -> list[TimedEvent]:
    """Build TimedEvents from onset start times in milliseconds.

    Start times must be finite and non-decreasing. The first event has a delta
    time of 0; events without a usable previous delta get the 1/1 rhythm.
    """
    times = np.asarray(start_times, dtype=float)
    if times.ndim != 1:
        raise ValueError(f"Expected a flat sequence of start times, got shape {times.shape}")
    if len(times) == 0:
        return []
    if not np.all(np.isfinite(times)):
        raise ValueError("Start times must be finite")

    deltas = np.diff(times, prepend=times[0])
    if np.any(deltas < 0):
        first_bad = int(np.argmax(deltas < 0))
        raise ValueError(f"Start times must be non-decreasing (index {first_bad})")

    events = []
    for i, (t, dt) in enumerate(zip(times, deltas)):
        prev_dt = float(deltas[i - 1]) if i >= 2 else 0.0
        rhythm = closest_rhythm(dt / prev_dt) if prev_dt > 0 else RhythmDescriptor()
        events.append(TimedEvent(start_time=float(t), delta_time=float(dt), rhythm=rhythm, index=i))
    return events
