"""
Fatigue Assessment Repository
Insert-only audit log of pre-shift fatigue assessments
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import FatigueInput, FatigueResult
from app.infrastructure.db.models import FatigueAssessmentModel


class FatigueAssessmentRepository:
    """Repository for fatigue assessment audit records"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        fatigue_input: FatigueInput,
        result: FatigueResult
    ) -> FatigueAssessmentModel:
        """Record the submitted input alongside the work-start result"""
        model = FatigueAssessmentModel(
            sleep_last_24=fatigue_input.sleep_last_24,
            sleep_previous_24=fatigue_input.sleep_previous_24,
            wake_time=fatigue_input.wake_time,
            work_start_time=fatigue_input.work_start_time,
            score=result.score,
            level=result.level,
            total_sleep_48=result.total_sleep_48,
            hours_awake=result.hours_awake,
        )
        self.session.add(model)
        await self.session.flush()
        return model

    async def get_by_id(self, assessment_id: int) -> Optional[FatigueAssessmentModel]:
        result = await self.session.execute(
            select(FatigueAssessmentModel).where(FatigueAssessmentModel.id == assessment_id)
        )
        return result.scalar_one_or_none()

    async def get_recent(self, limit: int = 100) -> List[FatigueAssessmentModel]:
        """Most recent assessments, newest first"""
        result = await self.session.execute(
            select(FatigueAssessmentModel)
            .order_by(
                FatigueAssessmentModel.created_at.desc(),
                FatigueAssessmentModel.id.desc()
            )
            .limit(limit)
        )
        return list(result.scalars().all())
