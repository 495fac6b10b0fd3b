"""Interval-based run extraction.

Splits any sequence of interval-bearing items into maximal "flat" runs, where
successive intervals differ by no more than a margin of error. Where the
interval changes, the item on the edge goes to the run with the smaller
interval: a widening gap closes the current run after the edge item, a
narrowing gap leaves the edge item to start the next run.
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from rhythmchain.analysis.models import HasInterval

logger = logging.getLogger(__name__)

DEFAULT_MARGIN_OF_ERROR = 3.0

T = TypeVar("T", bound=HasInterval)


def is_flat(current: HasInterval, previous: HasInterval, margin_of_error: float) -> bool:
    """True if the two intervals are equal within the margin of error."""
    return abs(current.interval - previous.interval) <= margin_of_error


def extract_run(
    items: Sequence[T],
    cursor: int,
    margin_of_error: float = DEFAULT_MARGIN_OF_ERROR,
) -> tuple[list[T], int]:
    """Extract one flat run starting at *cursor*.

    Returns (run, next_cursor). The item at *cursor* is always part of the run;
    *next_cursor* points just past the last consumed item and is the cursor for
    the following call.
    """
    if not items:
        raise ValueError("Cannot extract a run from an empty sequence")
    if not 0 <= cursor < len(items):
        raise ValueError(f"Cursor {cursor} out of range for sequence of length {len(items)}")

    run = [items[cursor]]
    i = cursor + 1

    while i < len(items) - 1:
        current, following = items[i], items[i + 1]
        if not is_flat(current, following, margin_of_error):
            # Edge item belongs to the side with the smaller interval
            if following.interval > current.interval + margin_of_error:
                run.append(current)
                i += 1
            logger.debug(f"Run boundary at {i} ({current.interval} -> {following.interval})")
            return run, i

        run.append(current)
        i += 1

    # Trailing item: appended whenever the last two items are flat
    if len(items) > 2 and i < len(items) and is_flat(items[-1], items[-2], margin_of_error):
        run.append(items[i])
        i += 1

    return run, i


def segment(
    items: Sequence[T],
    margin_of_error: float = DEFAULT_MARGIN_OF_ERROR,
) -> list[list[T]]:
    """Split the whole sequence into consecutive flat runs."""
    runs = []
    cursor = 0
    while cursor < len(items):
        run, cursor = extract_run(items, cursor, margin_of_error)
        runs.append(run)
    return runs
