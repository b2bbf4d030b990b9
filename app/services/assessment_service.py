"""
SERVICE — PRE-SHIFT FATIGUE ASSESSMENT

Scores a worker's fatigue and records the assessment in the audit log.

• Scoring is pure (FatigueScorer)
• Audit write is insert-only, one row per assessment
• Projection is returned to the caller but not stored
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.domain.models import FatigueInput, FatigueResult
from app.domain.services.fatigue_engine import FatigueScorer
from app.infrastructure.db.repositories.fatigue_assessment_repository import FatigueAssessmentRepository

logger = logging.getLogger(__name__)


class FatigueAssessmentService:

    def __init__(
        self,
        session: AsyncSession,
        scorer: Optional[FatigueScorer] = None,
        audit_enabled: Optional[bool] = None
    ):
        self.repo = FatigueAssessmentRepository(session)
        self.scorer = scorer or FatigueScorer()
        self.audit_enabled = settings.AUDIT_ENABLED if audit_enabled is None else audit_enabled

    async def assess(self, fatigue_input: FatigueInput) -> Tuple[FatigueResult, Optional[int]]:
        """
        Score the input and, when auditing is on, persist it.

        Returns:
            (result, assessment_id); assessment_id is None when not persisted
        """
        result = self.scorer.compute_score(fatigue_input)

        assessment_id = None
        if self.audit_enabled:
            try:
                record = await self.repo.create(fatigue_input, result)
            except SQLAlchemyError as e:
                logger.error(f"❌ Failed to record fatigue assessment: {e}")
                raise
            assessment_id = record.id

        logger.info(
            f"Fatigue assessment: score={result.score} level={result.level.value} "
            f"start={fatigue_input.work_start_time} id={assessment_id}"
        )
        return result, assessment_id
