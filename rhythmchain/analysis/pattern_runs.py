"""Second-level grouping: runs of flat patterns with even start time spacing."""

from collections.abc import Sequence
from dataclasses import dataclass

from rhythmchain.analysis.patterns import REPETITION_TOLERANCE, FlatPattern
from rhythmchain.analysis.segmenter import DEFAULT_MARGIN_OF_ERROR, extract_run


@dataclass
class PatternRun:
    """Consecutive flat patterns whose start time intervals are near-equal."""
    patterns: list[FlatPattern]
    index: int = 0

    @property
    def start_time(self) -> float:
        return self.patterns[0].start_time

    @property
    def interval(self) -> float:
        # Start time spacing between the first two patterns, inf for a single pattern
        if len(self.patterns) < 2:
            return float("inf")
        return self.patterns[1].start_time_interval

    def repetition_count(self, tolerance: float = REPETITION_TOLERANCE) -> int:
        """Number of patterns that repeat the pattern right before them."""
        return sum(
            1 for prev, cur in zip(self.patterns, self.patterns[1:])
            if cur.is_repetition_of(prev, tolerance)
        )


def group_flat_patterns(
    patterns: Sequence[FlatPattern],
    margin_of_error: float = DEFAULT_MARGIN_OF_ERROR,
) -> list[PatternRun]:
    """Group a pattern chain by start time interval.

    Sets each pattern's even_start_time_index to its position within its run.
    """
    runs: list[PatternRun] = []
    cursor = 0
    while cursor < len(patterns):
        members, cursor = extract_run(patterns, cursor, margin_of_error)
        for i, pattern in enumerate(members):
            pattern.even_start_time_index = i
        runs.append(PatternRun(patterns=members, index=len(runs)))
    return runs
