"""Analysis orchestrator - onset times to a linked chain of flat patterns."""

import logging

from rhythmchain.analysis.models import RhythmAnalysis, TimedEvent
from rhythmchain.analysis.pattern_runs import group_flat_patterns
from rhythmchain.analysis.patterns import group_hit_objects
from rhythmchain.analysis.rhythm import build_events
from rhythmchain.config import settings

logger = logging.getLogger(__name__)


class RhythmEngine:
    """Runs event construction, pattern grouping and pattern-run grouping."""

    def __init__(self, margin_of_error: float | None = None):
        self.margin_of_error = settings.margin_of_error if margin_of_error is None else margin_of_error

    def analyze(self, start_times) -> RhythmAnalysis:
        """Analyze a sequence of onset start times (ms)."""
        logger.info("Step 1: Building timed events")
        events = build_events(start_times)
        return self.analyze_events(events)

    def analyze_events(self, events: list[TimedEvent]) -> RhythmAnalysis:
        """Analyze already-built timed events."""
        if not events:
            raise ValueError("No events to analyze")

        duration = events[-1].start_time - events[0].start_time
        logger.info(f"Analyzing {len(events)} events over {duration:.1f}ms "
                    f"(margin {self.margin_of_error}ms)")

        logger.info("Step 2: Grouping flat patterns")
        patterns = group_hit_objects(events, self.margin_of_error)
        repeats = sum(1 for p in patterns if p.is_repetition_of(p.previous, settings.repetition_tolerance))
        logger.info(f"  {len(patterns)} patterns, {repeats} repeating their predecessor")

        logger.info("Step 3: Grouping pattern runs")
        runs = group_flat_patterns(patterns, self.margin_of_error)
        logger.info(f"  {len(runs)} pattern runs")

        return RhythmAnalysis(events=events, patterns=patterns, pattern_runs=runs, duration=duration)
