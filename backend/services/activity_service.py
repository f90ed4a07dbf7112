"""
Activity Service - Question attempts and daily check-ins
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.schemas import AttemptCreate, CheckInCreate
from db.models import QuestionAttempt, DailyCheckIn


class ActivityService:

    async def record_question_attempt(self, db: AsyncSession, data: AttemptCreate) -> QuestionAttempt:
        attempt = QuestionAttempt(**data.model_dump())
        db.add(attempt)
        await db.flush()
        return attempt

    async def get_student_question_attempts(self, db: AsyncSession, student_id: str) -> List[QuestionAttempt]:
        result = await db.execute(
            select(QuestionAttempt)
            .where(QuestionAttempt.student_id == student_id)
            .order_by(QuestionAttempt.attempted_at.desc())
        )
        return list(result.scalars().all())

    async def create_daily_check_in(self, db: AsyncSession, data: CheckInCreate) -> DailyCheckIn:
        check_in = DailyCheckIn(**data.model_dump())
        db.add(check_in)
        await db.flush()
        return check_in

    async def get_student_check_ins(self, db: AsyncSession, student_id: str, limit: int = 30) -> List[DailyCheckIn]:
        result = await db.execute(
            select(DailyCheckIn)
            .where(DailyCheckIn.student_id == student_id)
            .order_by(DailyCheckIn.date.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


# Global instance
activity_service = ActivityService()
