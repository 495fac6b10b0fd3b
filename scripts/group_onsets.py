#!/usr/bin/env python3
"""Group onset start times into flat patterns and print the chain.

Usage:
    uv run python scripts/group_onsets.py onsets.json          # table
    uv run python scripts/group_onsets.py onsets.txt --json    # API-shaped JSON
    uv run python scripts/group_onsets.py onsets.json --margin 5
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rhythmchain.analysis.engine import RhythmEngine
from rhythmchain.api.rhythm import result_to_response

logger = logging.getLogger("group_onsets")


def load_start_times(path: Path) -> list[float]:
    """Read a JSON list of start times, or one number per line."""
    text = path.read_text(encoding="utf-8")
    if text.lstrip().startswith("["):
        return [float(t) for t in json.loads(text)]
    return [float(line) for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]


def fmt(value: float | None) -> str:
    return "-" if value is None else f"{value:.1f}"


def main():
    parser = argparse.ArgumentParser(description="Group onsets into flat patterns")
    parser.add_argument("path", type=Path, help="JSON list or text file of start times (ms)")
    parser.add_argument("--margin", type=float, default=None,
                        help="Interval change tolerance in ms (default: settings)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(name)s %(levelname)s: %(message)s")

    try:
        start_times = load_start_times(args.path)
        if not start_times:
            print(f"No start times in {args.path}", file=sys.stderr)
            sys.exit(1)
        result = RhythmEngine(margin_of_error=args.margin).analyze(start_times)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    response = result_to_response(result)
    if args.json:
        print(response.model_dump_json(indent=2))
        return

    print(f"{'#':>4} {'start':>10} {'size':>5} {'interval':>9} {'ratio':>7} {'st_int':>9} {'rep':>4}")
    for p in response.patterns:
        print(f"{p.index:>4} {p.start_time:>10.1f} {len(p.member_indices):>5} "
              f"{fmt(p.hit_object_interval):>9} {fmt(p.hit_object_interval_ratio):>7} "
              f"{fmt(p.start_time_interval):>9} {'yes' if p.repeats_previous else '':>4}")
    print(f"\n{response.event_count} events, {len(response.patterns)} patterns, "
          f"{len(response.pattern_runs)} pattern runs")


if __name__ == "__main__":
    main()
