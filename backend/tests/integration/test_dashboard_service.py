from datetime import datetime, timedelta, timezone

from core.mastery_states import MasteryState, ReadinessState, SatSection
from core.schemas import ProgressUpdate, StudentUpdate, TopicCreate
from services.catalog_service import catalog_service
from services.learning_dashboard_service import learning_dashboard_service
from services.progress_service import progress_service
from services.student_service import student_service


async def test_unknown_student_has_no_dashboard(db):
    assert await learning_dashboard_service.get_student_dashboard(db, "missing") is None


async def test_dashboard_composition(db, student, three_topics):
    t1, t2, t3 = three_topics
    await progress_service.upsert_student_topic_progress(
        db, student.id, t1.id, ProgressUpdate(mastery_state=MasteryState.SHAKY)
    )
    await progress_service.upsert_student_topic_progress(
        db, student.id, t3.id, ProgressUpdate(mastery_state=MasteryState.SOLID)
    )

    dashboard = await learning_dashboard_service.get_student_dashboard(db, student.id)

    assert dashboard.student.id == student.id
    assert dashboard.readiness_state == ReadinessState.BORDERLINE
    assert dashboard.score_gap == 100
    assert [(r.topic.name, r.priority, r.score_impact) for r in dashboard.top_recommendations] == [
        ("T1", 1, 25), ("T2", 3, 30)
    ]
    assert [p.topic_id for p in dashboard.recent_activity] == [t3.id, t1.id]


async def test_streak_recovery_uses_now(db, student, three_topics):
    now = datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)
    await student_service.update_student(db, student.id, StudentUpdate(
        study_streak=5, last_study_date=now - timedelta(days=2)
    ))

    lapsed = await learning_dashboard_service.get_student_dashboard(db, student.id, now=now)
    assert lapsed.streak_info.current == 5
    assert lapsed.streak_info.needs_recovery is True

    fresh = await learning_dashboard_service.get_student_dashboard(
        db, student.id, now=now - timedelta(days=2, hours=-1)
    )
    assert fresh.streak_info.needs_recovery is False


async def test_recent_activity_is_bounded_and_newest_first(db, student):
    topics = []
    for order in range(7):
        topics.append(await catalog_service.create_topic(db, TopicCreate(
            section=SatSection.READING, name=f"R{order}", order=order, score_impact=5
        )))

    for topic in topics:
        await progress_service.upsert_student_topic_progress(
            db, student.id, topic.id, ProgressUpdate(mastery_state=MasteryState.IN_PROGRESS)
        )

    dashboard = await learning_dashboard_service.get_student_dashboard(db, student.id)

    assert [p.topic_id for p in dashboard.recent_activity] == [t.id for t in reversed(topics)][:5]
    practiced = [p.last_practiced for p in dashboard.recent_activity]
    assert practiced == sorted(practiced, reverse=True)


async def test_recommended_focus_for_unknown_student(db, three_topics):
    recommendations = await learning_dashboard_service.get_recommended_focus(db, "nobody")

    assert [r.topic.name for r in recommendations] == ["T2", "T1", "T3"]
    assert all(r.priority == 3 for r in recommendations)
