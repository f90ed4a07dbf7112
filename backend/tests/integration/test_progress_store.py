import asyncio

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.mastery_states import MasteryState, SatSection
from core.schemas import ProgressUpdate, StudentCreate, TopicCreate
from db.database import Base, get_db_context
from db.models import StudentTopicProgress
from services.catalog_service import catalog_service
from services.student_service import student_service
from services.progress_service import progress_service


async def count_rows(db, student_id, topic_id):
    result = await db.execute(
        select(func.count(StudentTopicProgress.id))
        .where(StudentTopicProgress.student_id == student_id)
        .where(StudentTopicProgress.topic_id == topic_id)
    )
    return result.scalar()


async def test_first_upsert_creates_record(db, student, three_topics):
    topic = three_topics[0]

    progress = await progress_service.upsert_student_topic_progress(
        db, student.id, topic.id,
        ProgressUpdate(mastery_state=MasteryState.IN_PROGRESS, pre_assessment_score=60)
    )

    assert progress.practice_count == 1
    assert progress.mastery_state == MasteryState.IN_PROGRESS
    assert progress.pre_assessment_score == 60
    assert progress.last_practiced is not None
    assert not progress.capstone_completed
    assert await count_rows(db, student.id, topic.id) == 1


async def test_repeat_upsert_updates_same_record(db, student, three_topics):
    topic = three_topics[0]

    first = await progress_service.upsert_student_topic_progress(
        db, student.id, topic.id,
        ProgressUpdate(mastery_state=MasteryState.IN_PROGRESS, pre_assessment_score=60)
    )
    first_id = first.id
    first_practiced = first.last_practiced

    second = await progress_service.upsert_student_topic_progress(
        db, student.id, topic.id,
        ProgressUpdate(mastery_state=MasteryState.SOLID, capstone_completed=True)
    )

    assert second.id == first_id
    assert second.practice_count == 2
    assert second.mastery_state == MasteryState.SOLID
    assert second.capstone_completed
    # fields not in the update keep their previous values
    assert second.pre_assessment_score == 60
    assert second.last_practiced >= first_practiced
    assert await count_rows(db, student.id, topic.id) == 1


async def test_upsert_without_mastery_state_defaults_to_unseen(db, student, three_topics):
    progress = await progress_service.upsert_student_topic_progress(
        db, student.id, three_topics[1].id, ProgressUpdate(pre_assessment_score=20)
    )

    assert progress.mastery_state == MasteryState.UNSEEN


async def test_get_student_topic_progress(db, student, three_topics):
    topic = three_topics[2]
    assert await progress_service.get_student_topic_progress(db, student.id, topic.id) is None

    await progress_service.upsert_student_topic_progress(
        db, student.id, topic.id, ProgressUpdate(mastery_state=MasteryState.SHAKY)
    )

    progress = await progress_service.get_student_topic_progress(db, student.id, topic.id)
    assert progress.mastery_state == MasteryState.SHAKY


async def test_topics_with_progress_covers_whole_catalog(db, student, three_topics):
    await progress_service.upsert_student_topic_progress(
        db, student.id, three_topics[1].id, ProgressUpdate(mastery_state=MasteryState.SHAKY)
    )

    entries = await progress_service.get_topics_with_progress(db, student.id)

    assert [entry.topic.name for entry in entries] == ["T1", "T2", "T3"]
    assert entries[0].progress is None
    assert entries[1].progress.mastery_state == MasteryState.SHAKY
    assert entries[2].progress is None


async def test_concurrent_upserts_lose_no_practice_count(tmp_path):
    submissions = 12
    file_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}",
        connect_args={"timeout": 30}
    )
    try:
        async with file_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(file_engine, class_=AsyncSession, expire_on_commit=False)

        async with get_db_context(factory) as session:
            student = await student_service.create_student(session, StudentCreate(
                name="Racer", email="racer@example.com"
            ))
            topic = await catalog_service.create_topic(session, TopicCreate(
                section=SatSection.MATH, name="Systems of Equations", order=1
            ))

        async def submit(score):
            # Each submission runs in its own session and transaction
            async with get_db_context(factory) as session:
                await progress_service.upsert_student_topic_progress(
                    session, student.id, topic.id,
                    ProgressUpdate(mastery_state=MasteryState.IN_PROGRESS, pre_assessment_score=score)
                )

        await asyncio.gather(*(submit(score) for score in range(submissions)))

        async with factory() as session:
            rows = (await session.execute(
                select(StudentTopicProgress)
                .where(StudentTopicProgress.student_id == student.id)
                .where(StudentTopicProgress.topic_id == topic.id)
            )).scalars().all()

        assert len(rows) == 1
        assert rows[0].practice_count == submissions
    finally:
        await file_engine.dispose()
