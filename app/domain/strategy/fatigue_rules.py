"""
FATIGUE POINT RULES

Fixed point table used to score fatigue risk before a shift.

Each rule is a step function over one factor; the total is the sum of
all rule points clamped to [MIN_SCORE, MAX_SCORE]:
- Sleep in the last 24 hours
- Cumulative sleep over 48 hours
- Hours awake at the evaluation instant
- Circadian low (night shift window)
- Early morning start

The table is fixed; it is not meant to be tuned at runtime.
"""

from app.domain.models import FatigueLevel

# -------------------------------------------------------------------
# Score bounds
# -------------------------------------------------------------------

MIN_SCORE = 0
MAX_SCORE = 10

# -------------------------------------------------------------------
# Sleep thresholds: (upper bound exclusive, points), checked in order
# -------------------------------------------------------------------

SLEEP_LAST_24_POINTS = (
    (5.0, 4),
    (6.0, 3),
    (7.0, 2),
    (8.0, 1),
)

SLEEP_48_POINTS = (
    (12.0, 3),
    (14.0, 2),
    (16.0, 1),
)

# -------------------------------------------------------------------
# Hours awake: (lower bound exclusive, points), checked in order
# -------------------------------------------------------------------

HOURS_AWAKE_POINTS = (
    (18.0, 4),
    (16.0, 3),
    (14.0, 2),
    (12.0, 1),
)

# -------------------------------------------------------------------
# Time-of-day penalties
# -------------------------------------------------------------------

# 23:00 through 05:59
NIGHT_SHIFT_START_HOUR = 23
NIGHT_SHIFT_END_HOUR = 5
NIGHT_SHIFT_POINTS = 2

# 01:00 through 05:59; stacks with the night shift penalty
EARLY_START_FIRST_HOUR = 1
EARLY_START_LAST_HOUR = 5
EARLY_START_POINTS = 1

# -------------------------------------------------------------------
# Level bands: (inclusive upper score, level)
# -------------------------------------------------------------------

LEVEL_BANDS = (
    (3, FatigueLevel.LOW),
    (6, FatigueLevel.MODERATE),
    (8, FatigueLevel.HIGH),
)


def sleep_last_24_points(hours: float) -> int:
    for upper, points in SLEEP_LAST_24_POINTS:
        if hours < upper:
            return points
    return 0


def sleep_48_points(total_hours: float) -> int:
    for upper, points in SLEEP_48_POINTS:
        if total_hours < upper:
            return points
    return 0


def hours_awake_points(hours_awake: float) -> int:
    for lower, points in HOURS_AWAKE_POINTS:
        if hours_awake > lower:
            return points
    return 0


def night_shift_points(hour: int) -> int:
    if hour >= NIGHT_SHIFT_START_HOUR or hour <= NIGHT_SHIFT_END_HOUR:
        return NIGHT_SHIFT_POINTS
    return 0


def early_start_points(hour: int) -> int:
    if EARLY_START_FIRST_HOUR <= hour <= EARLY_START_LAST_HOUR:
        return EARLY_START_POINTS
    return 0


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def classify_score(score: int) -> FatigueLevel:
    """Map a clamped score to its fatigue level."""
    for upper, level in LEVEL_BANDS:
        if score <= upper:
            return level
    return FatigueLevel.EXTREME
