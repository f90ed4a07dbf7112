"""
Progress Service - Reads and writes per-student topic progress
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from core.logging_config import logger
from core.schemas import ProgressUpdate
from db.models import StudentTopicProgress, Topic
from services.catalog_service import catalog_service
from services.recommendation_engine import progress_index

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


@dataclass
class TopicWithProgress:
    topic: Topic
    progress: Optional[StudentTopicProgress]


class ProgressService:
    """Progress store for StudentTopicProgress rows"""

    async def get_student_topic_progress(
        self,
        db: AsyncSession,
        student_id: str,
        topic_id: str
    ) -> Optional[StudentTopicProgress]:
        result = await db.execute(
            select(StudentTopicProgress)
            .where(StudentTopicProgress.student_id == student_id)
            .where(StudentTopicProgress.topic_id == topic_id)
        )
        return result.scalar_one_or_none()

    async def get_all_student_progress(self, db: AsyncSession, student_id: str) -> List[StudentTopicProgress]:
        result = await db.execute(
            select(StudentTopicProgress).where(StudentTopicProgress.student_id == student_id)
        )
        return list(result.scalars().all())

    async def get_topics_with_progress(self, db: AsyncSession, student_id: str) -> List[TopicWithProgress]:
        """Every catalog topic paired with the student's progress record, if any"""
        topics = await catalog_service.get_all_topics(db)
        by_topic = progress_index(await self.get_all_student_progress(db, student_id))
        return [TopicWithProgress(topic=topic, progress=by_topic.get(topic.id)) for topic in topics]

    async def upsert_student_topic_progress(
        self,
        db: AsyncSession,
        student_id: str,
        topic_id: str,
        update: ProgressUpdate
    ) -> StudentTopicProgress:
        """
        Create or update the single progress row for (student, topic).

        Runs as one INSERT ... ON CONFLICT DO UPDATE statement so concurrent
        submissions for the same topic cannot lose a practice count. Only the
        fields set on `update` are written; last_practiced is always bumped.
        """
        dialect = db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Progress upsert is not supported on {dialect}")

        now = datetime.now(timezone.utc)
        changes = update.changes()

        stmt = insert(StudentTopicProgress).values(
            id=str(uuid.uuid4()),
            student_id=student_id,
            topic_id=topic_id,
            last_practiced=now,
            practice_count=1,
            **changes
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["student_id", "topic_id"],
            set_={
                **changes,
                "last_practiced": now,
                "practice_count": StudentTopicProgress.practice_count + 1,
            }
        ).returning(StudentTopicProgress).execution_options(populate_existing=True)

        result = await db.execute(stmt)
        progress = result.scalar_one()

        logger.info(
            f"Progress upserted: student={student_id} topic={topic_id} "
            f"state={progress.mastery_state.value} practice_count={progress.practice_count}"
        )
        return progress


# Global instance
progress_service = ProgressService()
