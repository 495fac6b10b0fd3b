"""Pydantic request/response models for API."""

from pydantic import BaseModel


class RhythmRequest(BaseModel):
    start_times: list[float]  # ms, non-decreasing
    margin_of_error: float | None = None


class FlatPatternResponse(BaseModel):
    index: int
    previous_index: int | None = None
    start_time: float
    duration: float
    ratio: float
    hit_object_interval: float | None = None
    hit_object_interval_ratio: float | None = 1.0  # null if not finite
    start_time_interval: float | None = None  # null for the first pattern
    even_start_time_index: int = 0
    member_indices: list[int]
    repeats_previous: bool = False


class PatternRunResponse(BaseModel):
    index: int
    start_time: float
    pattern_indices: list[int]
    repetition_count: int = 0


class RhythmResponse(BaseModel):
    patterns: list[FlatPatternResponse]
    pattern_runs: list[PatternRunResponse] = []
    event_count: int
    duration: float = 0.0
