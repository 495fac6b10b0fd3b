"""Flat patterns: evenly spaced runs of events, chained to their predecessor."""

import math
from collections.abc import Sequence

from rhythmchain.analysis.models import TimedEvent
from rhythmchain.analysis.segmenter import DEFAULT_MARGIN_OF_ERROR, extract_run

REPETITION_TOLERANCE = 3.0


def _safe_ratio(numerator: float, denominator: float) -> float:
    """IEEE division: stacked events give a zero denominator."""
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


class FlatPattern:
    """A run of events with effectively no variation in rhythm.

    All events within have rhythm ratios of almost 1, except possibly the first
    two. Metrics relative to the previous pattern are computed once, on
    construction.
    """

    def __init__(
        self,
        members: Sequence[TimedEvent],
        previous: "FlatPattern | None" = None,
        index: int | None = None,
    ):
        if not members:
            raise ValueError("A flat pattern needs at least one event")

        self.members: tuple[TimedEvent, ...] = tuple(members)
        self.previous = previous
        # Defaults to the slot right after the previous pattern
        if index is None:
            index = previous.index + 1 if previous is not None else 0
        self.index = index

        # Interval between the first two events, undefined for a single event
        self.hit_object_interval: float | None = None
        # hit_object_interval relative to the previous pattern, 1 if either is undefined
        self.hit_object_interval_ratio: float = 1.0
        # Start time spacing from the previous pattern, +inf for the first pattern
        self.start_time_interval: float = math.inf
        # Position within a run of patterns with even start time intervals
        self.even_start_time_index: int = 0

        for event in self.members:
            event.rhythm.flat_pattern_index = index

        self._calculate_intervals()

    @property
    def first_event(self) -> TimedEvent:
        return self.members[0]

    @property
    def start_time(self) -> float:
        return self.members[0].start_time

    @property
    def duration(self) -> float:
        """Time between the first and last event."""
        return self.members[-1].start_time - self.members[0].start_time

    @property
    def ratio(self) -> float:
        """Rhythm ratio of the first event."""
        return self.members[0].rhythm.ratio

    @property
    def interval(self) -> float:
        return self.start_time_interval

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return (f"FlatPattern(index={self.index}, start_time={self.start_time}, "
                f"size={len(self.members)}, hit_object_interval={self.hit_object_interval})")

    def _calculate_intervals(self) -> None:
        if len(self.members) >= 2:
            self.hit_object_interval = self.members[1].start_time - self.members[0].start_time

        previous = self.previous
        if previous is not None and previous.hit_object_interval is not None \
                and self.hit_object_interval is not None:
            self.hit_object_interval_ratio = _safe_ratio(self.hit_object_interval, previous.hit_object_interval)

        if previous is None:
            return

        self.start_time_interval = self.start_time - previous.start_time

    def is_repetition_of(
        self,
        other: "FlatPattern | None",
        tolerance: float = REPETITION_TOLERANCE,
    ) -> bool:
        """Whether *other* repeats this pattern.

        Two patterns repeat each other if they have the same number of events
        and the same interval between their first two events. Single-event
        patterns compare the delta time of their only event.
        """
        if other is None or len(self.members) != len(other.members):
            return False

        if len(self.members) <= 1:
            return abs(self.members[0].delta_time - other.members[0].delta_time) < tolerance

        return abs(self.members[1].delta_time - other.members[1].delta_time) < tolerance


def group_hit_objects(
    events: Sequence[TimedEvent],
    margin_of_error: float = DEFAULT_MARGIN_OF_ERROR,
) -> list[FlatPattern]:
    """Partition *events* into a chain of flat patterns.

    Each pattern links to the one before it, and every event's rhythm
    descriptor receives the index of the pattern it belongs to.
    """
    if not events:
        raise ValueError("Cannot group an empty event sequence")

    patterns: list[FlatPattern] = []
    current: FlatPattern | None = None
    cursor = 0
    while cursor < len(events):
        members, cursor = extract_run(events, cursor, margin_of_error)
        current = FlatPattern(members, previous=current, index=len(patterns))
        patterns.append(current)
    return patterns
