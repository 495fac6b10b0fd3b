"""Core data models for rhythm grouping."""

from dataclasses import dataclass, field
from typing import Protocol


class HasInterval(Protocol):
    """Anything exposing a single spacing value that can be grouped by the segmenter."""

    @property
    def interval(self) -> float: ...


@dataclass
class RhythmDescriptor:
    """Snapped note-duration ratio of an event relative to its predecessor."""
    numerator: int = 1
    denominator: int = 1
    difficulty: float = 0.0
    # Index into the owning chain's pattern list, filled in by the chain builder.
    flat_pattern_index: int | None = None

    @property
    def ratio(self) -> float:
        return self.numerator / self.denominator


@dataclass
class TimedEvent:
    """A single note onset."""
    start_time: float  # ms
    delta_time: float = 0.0  # ms since the previous event, 0 for the first
    rhythm: RhythmDescriptor = field(default_factory=RhythmDescriptor)
    index: int = 0  # position in the source sequence

    @property
    def interval(self) -> float:
        return self.delta_time


@dataclass
class RhythmAnalysis:
    """Complete grouping result for one onset sequence."""
    events: list[TimedEvent]
    patterns: list  # list[FlatPattern]
    pattern_runs: list = field(default_factory=list)  # list[PatternRun]
    duration: float = 0.0
