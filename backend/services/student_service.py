"""
Student Service - Student accounts, targets and streak counters
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.logging_config import logger
from core.schemas import StudentCreate, StudentUpdate
from db.models import Student


class StudentService:

    async def get_student(self, db: AsyncSession, student_id: str) -> Optional[Student]:
        result = await db.execute(select(Student).where(Student.id == student_id))
        return result.scalar_one_or_none()

    async def get_student_by_email(self, db: AsyncSession, email: str) -> Optional[Student]:
        result = await db.execute(select(Student).where(Student.email == email))
        return result.scalar_one_or_none()

    async def create_student(self, db: AsyncSession, data: StudentCreate) -> Student:
        student = Student(**data.model_dump())
        db.add(student)
        await db.flush()
        await db.refresh(student)
        logger.info(f"Created student {student.id} ({student.email})")
        return student

    async def update_student(self, db: AsyncSession, student_id: str, data: StudentUpdate) -> Optional[Student]:
        """Apply a partial update; returns None when the student does not exist"""
        student = await self.get_student(db, student_id)
        if not student:
            return None

        for field, value in data.changes().items():
            setattr(student, field, value)
        await db.flush()
        return student

    async def get_or_create_demo_student(self, db: AsyncSession) -> Student:
        student = await self.get_student_by_email(db, settings.DEMO_STUDENT_EMAIL)
        if student:
            return student

        return await self.create_student(db, StudentCreate(
            name="Demo Student",
            email=settings.DEMO_STUDENT_EMAIL,
            target_score=1400,
            current_projected_score=1180,
            study_streak=5,
            last_study_date=datetime.now(timezone.utc)
        ))


# Global instance
student_service = StudentService()
