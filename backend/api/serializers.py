"""
JSON shapes returned by the API routes
"""
from datetime import datetime
from typing import Dict, Optional

from db.models import (
    Student, Topic, StudentTopicProgress, Question, QuestionAttempt,
    DailyCheckIn, ChatMessage, VideoContent
)
from services.learning_dashboard_service import StudentDashboard
from services.progress_service import TopicWithProgress
from services.recommendation_engine import RecommendedFocus


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _value(enum_or_str):
    return getattr(enum_or_str, "value", enum_or_str)


def student_to_dict(student: Student) -> Dict:
    return {
        "id": student.id,
        "name": student.name,
        "email": student.email,
        "target_score": student.target_score,
        "current_projected_score": student.current_projected_score,
        "study_streak": student.study_streak,
        "last_study_date": _iso(student.last_study_date),
        "created_at": _iso(student.created_at)
    }


def topic_to_dict(topic: Topic) -> Dict:
    return {
        "id": topic.id,
        "section": _value(topic.section),
        "name": topic.name,
        "description": topic.description,
        "order": topic.order,
        "score_impact": topic.score_impact,
        "test_frequency": topic.test_frequency
    }


def progress_to_dict(progress: Optional[StudentTopicProgress]) -> Optional[Dict]:
    if progress is None:
        return None
    return {
        "id": progress.id,
        "student_id": progress.student_id,
        "topic_id": progress.topic_id,
        "mastery_state": _value(progress.mastery_state),
        "pre_assessment_score": progress.pre_assessment_score,
        "post_assessment_score": progress.post_assessment_score,
        "capstone_completed": bool(progress.capstone_completed),
        "last_practiced": _iso(progress.last_practiced),
        "practice_count": progress.practice_count
    }


def topic_with_progress_to_dict(entry: TopicWithProgress) -> Dict:
    data = topic_to_dict(entry.topic)
    data["progress"] = progress_to_dict(entry.progress)
    return data


def recommendation_to_dict(recommendation: RecommendedFocus) -> Dict:
    return {
        "topic": topic_to_dict(recommendation.topic),
        "reason": recommendation.reason,
        "score_impact": recommendation.score_impact,
        "priority": recommendation.priority
    }


def dashboard_to_dict(dashboard: StudentDashboard) -> Dict:
    return {
        "student": student_to_dict(dashboard.student),
        "readiness_state": dashboard.readiness_state.value,
        "score_gap": dashboard.score_gap,
        "top_recommendations": [recommendation_to_dict(r) for r in dashboard.top_recommendations],
        "recent_activity": [progress_to_dict(p) for p in dashboard.recent_activity],
        "streak_info": {
            "current": dashboard.streak_info.current,
            "needs_recovery": dashboard.streak_info.needs_recovery
        }
    }


def question_to_dict(question: Optional[Question]) -> Optional[Dict]:
    if question is None:
        return None
    return {
        "id": question.id,
        "topic_id": question.topic_id,
        "question_text": question.question_text,
        "question_type": question.question_type,
        "options": question.options or [],
        "correct_answer": question.correct_answer,
        "explanation": question.explanation,
        "difficulty": question.difficulty,
        "is_capstone": bool(question.is_capstone),
        "video_timestamp": question.video_timestamp
    }


def attempt_to_dict(attempt: QuestionAttempt) -> Dict:
    return {
        "id": attempt.id,
        "student_id": attempt.student_id,
        "question_id": attempt.question_id,
        "selected_answer": attempt.selected_answer,
        "is_correct": attempt.is_correct,
        "error_type": _value(attempt.error_type),
        "time_spent": attempt.time_spent,
        "attempted_at": _iso(attempt.attempted_at)
    }


def check_in_to_dict(check_in: DailyCheckIn) -> Dict:
    return {
        "id": check_in.id,
        "student_id": check_in.student_id,
        "date": _iso(check_in.date),
        "studied_topics": check_in.studied_topics or [],
        "confidence_level": check_in.confidence_level,
        "notes": check_in.notes
    }


def chat_message_to_dict(message: ChatMessage) -> Dict:
    return {
        "id": message.id,
        "student_id": message.student_id,
        "role": message.role,
        "content": message.content,
        "context": message.context,
        "created_at": _iso(message.created_at)
    }


def video_to_dict(video: Optional[VideoContent]) -> Optional[Dict]:
    if video is None:
        return None
    return {
        "id": video.id,
        "topic_id": video.topic_id,
        "title": video.title,
        "url": video.url,
        "duration": video.duration,
        "checkpoints": video.checkpoints or []
    }
