"""
DOMAIN MODELS — FATIGUE ASSESSMENT

Immutable structures representing fatigue inputs and results.
Pure domain logic only; no database or service imports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class FatigueLevel(str, Enum):
    """Qualitative fatigue level, ordered from least to most severe"""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    EXTREME = "Extreme"


@dataclass(frozen=True)
class FatigueInput:
    """
    Pre-validated worker input for a pre-shift check.

    Sleep values are hours in [0, 24]; times are 24h ``HH:MM`` local clock times.
    """
    sleep_last_24: float
    sleep_previous_24: float
    wake_time: str
    work_start_time: str


@dataclass(frozen=True)
class TimeProjection:
    """Projected fatigue for one hour slot"""
    time: str
    level: FatigueLevel
    score: int


@dataclass(frozen=True)
class FatigueResult:
    """
    Fatigue assessment at the work-start instant plus the 24 hour outlook.
    """
    score: int
    level: FatigueLevel
    total_sleep_48: float
    hours_awake: float
    projections: Tuple[TimeProjection, ...]


@dataclass(frozen=True)
class ProjectionSegment:
    """Run of consecutive projection slots sharing one level"""
    level: FatigueLevel
    start: str
    end: str
    hours: int
    share_pct: float
