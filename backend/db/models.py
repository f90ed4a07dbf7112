import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON, DateTime, Text, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db.database import Base
from core.mastery_states import MasteryState, SatSection, ErrorType

def _uuid() -> str:
    return str(uuid.uuid4())

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _enum(enum_cls, name):
    # Persist the lowercase values ("in_progress"), not the member names
    return Enum(enum_cls, name=name, values_callable=lambda members: [m.value for m in members])

class Student(Base):
    __tablename__ = "students"

    id = Column(String, primary_key=True, default=_uuid)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    target_score = Column(Integer, nullable=False, default=1400)
    current_projected_score = Column(Integer, nullable=False, default=1000)
    study_streak = Column(Integer, nullable=False, default=0)
    last_study_date = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    topic_progress = relationship("StudentTopicProgress", back_populates="student")

class Topic(Base):
    __tablename__ = "topics"

    id = Column(String, primary_key=True, default=_uuid)
    section = Column(_enum(SatSection, "sat_section"), nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text)
    order = Column(Integer, nullable=False)
    score_impact = Column(Integer, nullable=False, default=10)  # projected-score points
    test_frequency = Column(Integer, nullable=False, default=5)

    # Relationships
    questions = relationship("Question", back_populates="topic")

class StudentTopicProgress(Base):
    __tablename__ = "student_topic_progress"
    __table_args__ = (
        UniqueConstraint("student_id", "topic_id", name="uq_student_topic_progress"),
    )

    id = Column(String, primary_key=True, default=_uuid)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    topic_id = Column(String, ForeignKey("topics.id"), nullable=False)
    mastery_state = Column(_enum(MasteryState, "mastery_state"), nullable=False, default=MasteryState.UNSEEN)
    pre_assessment_score = Column(Integer)  # percent 0-100
    post_assessment_score = Column(Integer)  # percent 0-100
    capstone_completed = Column(Boolean, default=False)
    last_practiced = Column(DateTime(timezone=True))
    practice_count = Column(Integer, nullable=False, default=0)

    # Relationships
    student = relationship("Student", back_populates="topic_progress")
    topic = relationship("Topic")

class Question(Base):
    __tablename__ = "questions"

    id = Column(String, primary_key=True, default=_uuid)
    topic_id = Column(String, ForeignKey("topics.id"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    question_type = Column(String, nullable=False, default="multiple_choice")
    options = Column(JSON)  # For multiple choice
    correct_answer = Column(Text, nullable=False)
    explanation = Column(Text)
    difficulty = Column(Integer, nullable=False, default=2)
    is_capstone = Column(Boolean, default=False)
    video_timestamp = Column(Integer)  # seconds into the lesson video

    # Relationships
    topic = relationship("Topic", back_populates="questions")

class QuestionAttempt(Base):
    __tablename__ = "question_attempts"

    id = Column(String, primary_key=True, default=_uuid)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    question_id = Column(String, ForeignKey("questions.id"), nullable=False)
    selected_answer = Column(Text, nullable=False)
    is_correct = Column(Boolean, nullable=False)
    error_type = Column(_enum(ErrorType, "error_type"))
    time_spent = Column(Integer)  # seconds
    attempted_at = Column(DateTime(timezone=True), default=_utcnow)

class DailyCheckIn(Base):
    __tablename__ = "daily_check_ins"

    id = Column(String, primary_key=True, default=_uuid)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), default=_utcnow)
    studied_topics = Column(JSON)  # List of topic IDs
    confidence_level = Column(Integer, nullable=False)  # 1-5
    notes = Column(Text)

class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(String, primary_key=True, default=_uuid)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    role = Column(String, nullable=False)  # user, assistant
    content = Column(Text, nullable=False)
    context = Column(Text)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

class VideoContent(Base):
    __tablename__ = "video_content"

    id = Column(String, primary_key=True, default=_uuid)
    topic_id = Column(String, ForeignKey("topics.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    url = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)  # seconds
    checkpoints = Column(JSON)  # [{"time": 120, "question_id": "..."}]
