"""
Learning Dashboard Service - Composes readiness, recommendations, streak and
recent activity into a single student dashboard
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from core.logging_config import logger, performance_logger
from core.mastery_states import ReadinessState, RECENT_ACTIVITY_LIMIT
from db.models import Student, StudentTopicProgress
from services.progress_service import progress_service, TopicWithProgress
from services.readiness_calculator import assess_readiness, compute_streak, StreakInfo
from services.recommendation_engine import recommend_focus, RecommendedFocus
from services.student_service import student_service


@dataclass
class StudentDashboard:
    student: Student
    readiness_state: ReadinessState
    score_gap: int
    top_recommendations: List[RecommendedFocus]
    recent_activity: List[StudentTopicProgress]
    streak_info: StreakInfo


def _recommendations_for(topics_with_progress: List[TopicWithProgress]) -> List[RecommendedFocus]:
    topics = [entry.topic for entry in topics_with_progress]
    progress_by_topic = {
        entry.topic.id: entry.progress
        for entry in topics_with_progress
        if entry.progress is not None
    }
    return recommend_focus(topics, progress_by_topic)


def select_recent_activity(
    topics_with_progress: List[TopicWithProgress],
    limit: int = RECENT_ACTIVITY_LIMIT
) -> List[StudentTopicProgress]:
    """Most recently practiced progress records, newest first"""
    practiced = [
        entry.progress for entry in topics_with_progress
        if entry.progress is not None and entry.progress.last_practiced is not None
    ]
    practiced.sort(key=lambda progress: progress.last_practiced, reverse=True)
    return practiced[:limit]


class LearningDashboardService:
    """
    Read-only composition over the progress store. Nothing is cached: every
    call recomputes from the current rows and the current time.
    """

    async def get_recommended_focus(self, db: AsyncSession, student_id: str) -> List[RecommendedFocus]:
        topics_with_progress = await progress_service.get_topics_with_progress(db, student_id)
        return _recommendations_for(topics_with_progress)

    async def get_student_dashboard(
        self,
        db: AsyncSession,
        student_id: str,
        now: Optional[datetime] = None
    ) -> Optional[StudentDashboard]:
        """Build the dashboard, or None when the student does not exist"""
        timer_id = performance_logger.start_timer("dashboard")

        student = await student_service.get_student(db, student_id)
        if not student:
            logger.info(f"Dashboard requested for unknown student {student_id}")
            return None

        topics_with_progress = await progress_service.get_topics_with_progress(db, student_id)

        readiness_state, score_gap = assess_readiness(
            student.current_projected_score, student.target_score
        )

        dashboard = StudentDashboard(
            student=student,
            readiness_state=readiness_state,
            score_gap=score_gap,
            top_recommendations=_recommendations_for(topics_with_progress),
            recent_activity=select_recent_activity(topics_with_progress),
            streak_info=compute_streak(student.last_study_date, student.study_streak, now)
        )

        performance_logger.end_timer(timer_id, f"student={student_id}")
        logger.debug(
            f"Dashboard for {student_id}: {readiness_state.value}, gap={score_gap}, "
            f"{len(dashboard.top_recommendations)} recommendations"
        )
        return dashboard


# Global instance
learning_dashboard_service = LearningDashboardService()
