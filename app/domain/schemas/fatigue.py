"""
Fatigue API schemas.

Request models validate shape and ranges before the scorer runs; response
models use the camelCase wire names of the assessment form.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.domain.models import FatigueInput, FatigueLevel, FatigueResult
from app.domain.services.fatigue_engine import projection_segments
from app.utils.time import CLOCK_TIME_PATTERN


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FatigueInputRequest(_WireModel):
    """Worker input for a pre-shift fatigue check"""
    sleep_last_24: float = Field(..., alias="sleepLast24", strict=True, ge=0, le=24, description="Hours slept in the last 24h")
    sleep_previous_24: float = Field(..., alias="sleepPrevious24", strict=True, ge=0, le=24, description="Hours slept in the 24h before that")
    wake_time: str = Field(..., alias="wakeTime", pattern=CLOCK_TIME_PATTERN, description="Wake time, HH:MM (24h)")
    work_start_time: str = Field(..., alias="workStartTime", pattern=CLOCK_TIME_PATTERN, description="Work start time, HH:MM (24h)")

    def to_domain(self) -> FatigueInput:
        return FatigueInput(
            sleep_last_24=self.sleep_last_24,
            sleep_previous_24=self.sleep_previous_24,
            wake_time=self.wake_time,
            work_start_time=self.work_start_time,
        )


class TimeProjectionResponse(_WireModel):
    time: str
    level: FatigueLevel
    score: int


class ProjectionSegmentResponse(_WireModel):
    level: FatigueLevel
    start: str
    end: str
    hours: int
    share_pct: float = Field(..., alias="sharePct")


class FatigueResultResponse(_WireModel):
    score: int = Field(..., ge=0, le=10)
    level: FatigueLevel
    total_sleep_48: float = Field(..., alias="totalSleep48")
    hours_awake: float = Field(..., alias="hoursAwake")
    projections: List[TimeProjectionResponse]
    segments: List[ProjectionSegmentResponse]
    assessment_id: Optional[int] = Field(None, alias="assessmentId")

    @classmethod
    def from_result(cls, result: FatigueResult, assessment_id: Optional[int] = None) -> "FatigueResultResponse":
        return cls(
            score=result.score,
            level=result.level,
            total_sleep_48=result.total_sleep_48,
            hours_awake=result.hours_awake,
            projections=[
                TimeProjectionResponse(time=p.time, level=p.level, score=p.score)
                for p in result.projections
            ],
            segments=[
                ProjectionSegmentResponse(
                    level=s.level,
                    start=s.start,
                    end=s.end,
                    hours=s.hours,
                    share_pct=s.share_pct,
                )
                for s in projection_segments(result.projections)
            ],
            assessment_id=assessment_id,
        )


class FatigueAssessmentResponse(_WireModel):
    """Stored audit record (instantaneous fields only)"""
    id: int
    sleep_last_24: float = Field(..., alias="sleepLast24")
    sleep_previous_24: float = Field(..., alias="sleepPrevious24")
    wake_time: str = Field(..., alias="wakeTime")
    work_start_time: str = Field(..., alias="workStartTime")
    score: int
    level: FatigueLevel
    total_sleep_48: float = Field(..., alias="totalSleep48")
    hours_awake: float = Field(..., alias="hoursAwake")
    created_at: str = Field(..., alias="createdAt")


class ActionGuidelineResponse(_WireModel):
    level: FatigueLevel
    stop_work: bool = Field(..., alias="stopWork")
    action: str


class TimeOptionResponse(BaseModel):
    value: str
    display: str
