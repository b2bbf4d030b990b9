"""
Run a pre-shift fatigue assessment from the terminal.

Example:
    python scripts/assess_fatigue.py --sleep-last-24 6 --sleep-previous-24 7 --wake 05:00 --start 22:00
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.domain.schemas.fatigue import FatigueInputRequest, FatigueResultResponse  # noqa: E402
from app.domain.services.fatigue_engine import FatigueScorer, projection_segments  # noqa: E402
from app.domain.strategy.action_guidelines import get_guideline  # noqa: E402

# Configure logging
logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def print_report(result):
    guideline = get_guideline(result.level)

    print(f"Fatigue score : {result.score}/10 ({result.level.value})")
    print(f"Sleep (48h)   : {result.total_sleep_48:g} h")
    print(f"Hours awake   : {result.hours_awake:.1f} h")
    print(f"Action        : {guideline['action']}")
    print()
    for s in projection_segments(result.projections):
        print(f"{s.level.value:<9}{s.start}-{s.end}  ({s.hours} h)")
    print()
    print("Time   Score  Level")
    for p in result.projections:
        print(f"{p.time}  {p.score:>5}  {p.level.value}")


def main():
    parser = argparse.ArgumentParser(description="Pre-shift fatigue assessment")
    parser.add_argument("--sleep-last-24", type=float, required=True, help="Hours slept in the last 24h")
    parser.add_argument("--sleep-previous-24", type=float, required=True, help="Hours slept in the 24h before that")
    parser.add_argument("--wake", type=str, required=True, help="Wake time HH:MM (24h)")
    parser.add_argument("--start", type=str, required=True, help="Work start time HH:MM (24h)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args()

    try:
        request = FatigueInputRequest(
            sleep_last_24=args.sleep_last_24,
            sleep_previous_24=args.sleep_previous_24,
            wake_time=args.wake,
            work_start_time=args.start,
        )
    except ValidationError as e:
        parser.error(f"Invalid input: {e.errors()[0]['loc'][0]}: {e.errors()[0]['msg']}")

    result = FatigueScorer().compute_score(request.to_domain())

    if args.json:
        response = FatigueResultResponse.from_result(result)
        print(json.dumps(response.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    else:
        print_report(result)


if __name__ == "__main__":
    main()
