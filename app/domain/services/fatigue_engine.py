"""
FATIGUE SCORING ENGINE
Sleep history + shift timing → fatigue score, level and 24h outlook

RESPONSIBILITIES:
- Score fatigue at the work-start instant
- Classify the score into a fatigue level
- Project fatigue hour by hour for 24 hours from work start

RULES:
❌ No I/O, no persistence
❌ No input range validation (done by the request layer)
✅ Deterministic, integer minute arithmetic only
✅ Projection never decreases (no recovery without sleep)
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from app.domain.models import (
    FatigueInput,
    FatigueLevel,
    FatigueResult,
    ProjectionSegment,
    TimeProjection,
)
from app.domain.strategy import fatigue_rules
from app.utils.time import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    format_clock_time,
    hour_of_day,
    minutes_until,
    parse_clock_time,
)

logger = logging.getLogger(__name__)

PROJECTION_HOURS = 24


class FatigueScorer:
    """
    Fatigue Scorer
    Pure point-rule scoring; safe to share across requests
    """

    def compute_score(self, fatigue_input: FatigueInput) -> FatigueResult:
        """
        Score fatigue at the work-start instant and build the projection.

        Args:
            fatigue_input: Validated sleep history and shift timing

        Returns:
            FatigueResult

        Raises:
            ValueError: If a clock time is malformed
        """
        wake_minutes = parse_clock_time(fatigue_input.wake_time)
        work_start_minutes = parse_clock_time(fatigue_input.work_start_time)

        total_sleep_48 = fatigue_input.sleep_last_24 + fatigue_input.sleep_previous_24
        awake_minutes = minutes_until(wake_minutes, work_start_minutes)

        score = self._score_at(fatigue_input, wake_minutes, work_start_minutes)
        level = self.classify(score)

        logger.debug(
            f"Fatigue at {fatigue_input.work_start_time}: score={score} level={level.value} "
            f"(sleep48={total_sleep_48}, awake_min={awake_minutes})"
        )

        return FatigueResult(
            score=score,
            level=level,
            total_sleep_48=total_sleep_48,
            hours_awake=self._round_hours(awake_minutes),
            projections=tuple(self.compute_projection(fatigue_input, work_start_minutes)),
        )

    def compute_projection(
        self,
        fatigue_input: FatigueInput,
        work_start_minutes: int
    ) -> List[TimeProjection]:
        """
        Hourly fatigue outlook for 24 hours starting at work start.

        Each slot is re-scored at its own clock time; the emitted score is
        the running maximum so the series is non-decreasing.
        """
        wake_minutes = parse_clock_time(fatigue_input.wake_time)

        projections = []
        running_max = fatigue_rules.MIN_SCORE

        for offset in range(PROJECTION_HOURS):
            slot_minutes = (work_start_minutes + offset * MINUTES_PER_HOUR) % MINUTES_PER_DAY
            raw_score = self._score_at(fatigue_input, wake_minutes, slot_minutes)

            running_max = max(running_max, raw_score)

            projections.append(
                TimeProjection(
                    time=format_clock_time(slot_minutes),
                    level=self.classify(running_max),
                    score=running_max,
                )
            )

        return projections

    @staticmethod
    def _round_hours(minutes: int) -> float:
        """Minutes to hours, one decimal, half-up"""
        hours = Decimal(minutes) / Decimal(MINUTES_PER_HOUR)
        return float(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    @staticmethod
    def classify(score: int) -> FatigueLevel:
        return fatigue_rules.classify_score(score)

    @staticmethod
    def _score_at(
        fatigue_input: FatigueInput,
        wake_minutes: int,
        eval_minutes: int
    ) -> int:
        """Clamped point total with the evaluation instant at eval_minutes"""
        total_sleep_48 = fatigue_input.sleep_last_24 + fatigue_input.sleep_previous_24
        hours_awake = minutes_until(wake_minutes, eval_minutes) / MINUTES_PER_HOUR
        hour = hour_of_day(eval_minutes)

        score = (
            fatigue_rules.sleep_last_24_points(fatigue_input.sleep_last_24)
            + fatigue_rules.sleep_48_points(total_sleep_48)
            + fatigue_rules.hours_awake_points(hours_awake)
            + fatigue_rules.night_shift_points(hour)
            + fatigue_rules.early_start_points(hour)
        )
        return fatigue_rules.clamp_score(score)


def projection_segments(projections: Sequence[TimeProjection]) -> List[ProjectionSegment]:
    """
    Group consecutive projection slots with the same level.

    Each segment runs from its first slot time to its last slot time and
    carries its share of the whole projection as a percentage.
    """
    segments = []
    if not projections:
        return segments

    total = len(projections)
    first = 0
    for i in range(1, total + 1):
        if i < total and projections[i].level == projections[first].level:
            continue
        hours = i - first
        segments.append(
            ProjectionSegment(
                level=projections[first].level,
                start=projections[first].time,
                end=projections[i - 1].time,
                hours=hours,
                share_pct=round(hours / total * 100, 2),
            )
        )
        first = i

    return segments
