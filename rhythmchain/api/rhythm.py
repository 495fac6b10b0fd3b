"""Rhythm grouping endpoint."""

import logging
import math

from fastapi import APIRouter, HTTPException

from rhythmchain.analysis.engine import RhythmEngine
from rhythmchain.analysis.models import RhythmAnalysis
from rhythmchain.api.schemas import (
    FlatPatternResponse,
    PatternRunResponse,
    RhythmRequest,
    RhythmResponse,
)
from rhythmchain.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _finite_or_none(value: float) -> float | None:
    # JSON has no inf/nan
    return value if math.isfinite(value) else None


def result_to_response(result: RhythmAnalysis) -> RhythmResponse:
    """Convert RhythmAnalysis to a JSON-safe response model."""
    return RhythmResponse(
        patterns=[
            FlatPatternResponse(
                index=p.index,
                previous_index=p.previous.index if p.previous is not None else None,
                start_time=p.start_time,
                duration=p.duration,
                ratio=p.ratio,
                hit_object_interval=p.hit_object_interval,
                hit_object_interval_ratio=_finite_or_none(p.hit_object_interval_ratio),
                start_time_interval=_finite_or_none(p.start_time_interval),
                even_start_time_index=p.even_start_time_index,
                member_indices=[e.index for e in p.members],
                repeats_previous=p.is_repetition_of(p.previous, settings.repetition_tolerance),
            )
            for p in result.patterns
        ],
        pattern_runs=[
            PatternRunResponse(
                index=r.index,
                start_time=r.start_time,
                pattern_indices=[p.index for p in r.patterns],
                repetition_count=r.repetition_count(settings.repetition_tolerance),
            )
            for r in result.pattern_runs
        ],
        event_count=len(result.events),
        duration=result.duration,
    )


@router.post("/rhythm", response_model=RhythmResponse)
async def group_rhythm(request: RhythmRequest):
    """Group onset start times into flat patterns."""
    if not request.start_times:
        raise HTTPException(400, "start_times must not be empty")
    if len(request.start_times) > settings.max_events:
        raise HTTPException(400, f"Too many events (max {settings.max_events})")

    engine = RhythmEngine(margin_of_error=request.margin_of_error)
    try:
        result = engine.analyze(request.start_times)
    except ValueError as e:
        logger.warning(f"Rejected rhythm request: {e}")
        raise HTTPException(400, str(e))

    return result_to_response(result)
