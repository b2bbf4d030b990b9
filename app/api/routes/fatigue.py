"""
Fatigue API Routes
Pre-shift fatigue assessment, audit history and action guidelines
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from app.config import settings
from app.domain.models import FatigueLevel
from app.domain.schemas.fatigue import (
    ActionGuidelineResponse,
    FatigueAssessmentResponse,
    FatigueInputRequest,
    FatigueResultResponse,
    TimeOptionResponse,
)
from app.domain.strategy.action_guidelines import get_guideline, list_guidelines
from app.infrastructure.db.database import get_db
from app.infrastructure.db.models import FatigueAssessmentModel
from app.infrastructure.db.repositories.fatigue_assessment_repository import FatigueAssessmentRepository
from app.services.assessment_service import FatigueAssessmentService
from app.utils.time import format_clock_display, format_clock_time, to_local_iso_db

router = APIRouter()

TIME_OPTION_STEP_MINUTES = 30


# -------------------------------------------------------------------
# Helper utilities
# -------------------------------------------------------------------

def to_assessment_response(record: FatigueAssessmentModel) -> FatigueAssessmentResponse:
    return FatigueAssessmentResponse(
        id=record.id,
        sleep_last_24=float(record.sleep_last_24),
        sleep_previous_24=float(record.sleep_previous_24),
        wake_time=record.wake_time,
        work_start_time=record.work_start_time,
        score=record.score,
        level=record.level,
        total_sleep_48=float(record.total_sleep_48),
        hours_awake=float(record.hours_awake),
        created_at=to_local_iso_db(record.created_at),
    )


def resolve_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.RECENT_ASSESSMENTS_DEFAULT_LIMIT
    if limit < 1 or limit > settings.RECENT_ASSESSMENTS_MAX_LIMIT:
        raise HTTPException(
            status_code=400,
            detail=f"limit must be between 1 and {settings.RECENT_ASSESSMENTS_MAX_LIMIT}"
        )
    return limit


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------

@router.post("/calculate", response_model=FatigueResultResponse, response_model_exclude_none=True)
async def calculate_fatigue(
    request: FatigueInputRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Score fatigue at work start and project it for the next 24 hours.

    The assessment is recorded in the audit log when auditing is enabled.
    """
    service = FatigueAssessmentService(db)
    result, assessment_id = await service.assess(request.to_domain())
    return FatigueResultResponse.from_result(result, assessment_id=assessment_id)


@router.get("/assessments", response_model=List[FatigueAssessmentResponse])
async def get_recent_assessments(
    limit: Optional[int] = Query(None, description="Number of records (default from settings)"),
    db: AsyncSession = Depends(get_db)
):
    """Most recent audit records, newest first"""
    repo = FatigueAssessmentRepository(db)
    records = await repo.get_recent(resolve_limit(limit))
    return [to_assessment_response(r) for r in records]


@router.get("/assessments/{assessment_id}", response_model=FatigueAssessmentResponse)
async def get_assessment(assessment_id: int, db: AsyncSession = Depends(get_db)):
    repo = FatigueAssessmentRepository(db)
    record = await repo.get_by_id(assessment_id)
    if not record:
        raise HTTPException(status_code=404, detail=f"Assessment {assessment_id} not found")
    return to_assessment_response(record)


@router.get("/guidelines", response_model=List[ActionGuidelineResponse])
async def get_guidelines():
    """Required actions for every fatigue level, least to most severe"""
    return [ActionGuidelineResponse(**g) for g in list_guidelines()]


@router.get("/guidelines/{level}", response_model=ActionGuidelineResponse)
async def get_level_guideline(level: str):
    try:
        fatigue_level = FatigueLevel(level.capitalize())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown fatigue level: {level}")
    return ActionGuidelineResponse(**get_guideline(fatigue_level))


@router.get("/time-options", response_model=List[TimeOptionResponse])
async def get_time_options():
    """Clock times offered by the assessment form, every 30 minutes"""
    return [
        TimeOptionResponse(value=format_clock_time(m), display=format_clock_display(m))
        for m in range(0, 24 * 60, TIME_OPTION_STEP_MINUTES)
    ]
