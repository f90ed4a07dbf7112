"""
Catalog Service - SAT topics, assessment questions and lesson videos
"""
from typing import Dict, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from core.logging_config import logger
from core.mastery_states import SatSection
from core.schemas import TopicCreate, QuestionCreate
from data.sat_catalog import SAT_TOPICS, questions_for_topic
from db.models import Topic, Question, VideoContent


class CatalogService:
    """Read access to the static topic catalog plus catalog seeding"""

    async def get_all_topics(self, db: AsyncSession) -> List[Topic]:
        result = await db.execute(select(Topic).order_by(Topic.section, Topic.order))
        return list(result.scalars().all())

    async def get_topics_by_section(self, db: AsyncSession, section: SatSection) -> List[Topic]:
        result = await db.execute(
            select(Topic).where(Topic.section == section).order_by(Topic.order)
        )
        return list(result.scalars().all())

    async def get_topic(self, db: AsyncSession, topic_id: str) -> Optional[Topic]:
        result = await db.execute(select(Topic).where(Topic.id == topic_id))
        return result.scalar_one_or_none()

    async def create_topic(self, db: AsyncSession, data: TopicCreate) -> Topic:
        topic = Topic(**data.model_dump())
        db.add(topic)
        await db.flush()
        return topic

    async def get_questions_by_topic(self, db: AsyncSession, topic_id: str) -> List[Question]:
        """Pre-assessment questions, easiest first; the capstone is excluded"""
        result = await db.execute(
            select(Question)
            .where(Question.topic_id == topic_id)
            .where(Question.is_capstone.is_(False))
            .order_by(Question.difficulty)
        )
        return list(result.scalars().all())

    async def get_question(self, db: AsyncSession, question_id: str) -> Optional[Question]:
        result = await db.execute(select(Question).where(Question.id == question_id))
        return result.scalar_one_or_none()

    async def get_capstone_question(self, db: AsyncSession, topic_id: str) -> Optional[Question]:
        result = await db.execute(
            select(Question)
            .where(Question.topic_id == topic_id)
            .where(Question.is_capstone.is_(True))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create_question(self, db: AsyncSession, data: QuestionCreate) -> Question:
        question = Question(**data.model_dump())
        db.add(question)
        await db.flush()
        return question

    async def get_video_by_topic(self, db: AsyncSession, topic_id: str) -> Optional[VideoContent]:
        result = await db.execute(
            select(VideoContent).where(VideoContent.topic_id == topic_id).limit(1)
        )
        return result.scalar_one_or_none()

    async def seed_catalog(self, db: AsyncSession) -> Dict:
        """Create the SAT topic roadmap and its questions if the catalog is empty"""
        existing = await db.execute(select(func.count(Topic.id)))
        topic_count = existing.scalar() or 0
        if topic_count > 0:
            logger.info(f"Catalog already seeded ({topic_count} topics)")
            return {"message": "Data already seeded", "topics": topic_count}

        sections: Dict[str, int] = {}
        question_count = 0
        for topic_data in SAT_TOPICS:
            topic = await self.create_topic(db, TopicCreate(**topic_data))
            sections[topic.section.value] = sections.get(topic.section.value, 0) + 1

            for question_data in questions_for_topic(topic.name):
                await self.create_question(db, QuestionCreate(topic_id=topic.id, **question_data))
                question_count += 1

        logger.info(f"Seeded {len(SAT_TOPICS)} topics and {question_count} questions")
        return {
            "message": "Seed data created successfully",
            "topics": len(SAT_TOPICS),
            "questions": question_count,
            "sections": sections
        }


# Global instance
catalog_service = CatalogService()
