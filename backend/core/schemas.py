"""
Validated input records shared by the API routes and services
"""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from core.mastery_states import MasteryState, SatSection, ErrorType


class StudentCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    target_score: int = 1400
    current_projected_score: int = 1000
    study_streak: int = Field(0, ge=0)
    last_study_date: Optional[datetime] = None


class StudentUpdate(BaseModel):
    """Partial student update; None leaves a field unchanged"""
    name: Optional[str] = None
    target_score: Optional[int] = None
    current_projected_score: Optional[int] = None
    study_streak: Optional[int] = Field(None, ge=0)
    last_study_date: Optional[datetime] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TopicCreate(BaseModel):
    section: SatSection
    name: str
    description: Optional[str] = None
    order: int
    score_impact: int = 10
    test_frequency: int = 5


class ProgressUpdate(BaseModel):
    """Partial topic-progress update; None leaves a field unchanged"""
    mastery_state: Optional[MasteryState] = None
    pre_assessment_score: Optional[int] = Field(None, ge=0, le=100)
    post_assessment_score: Optional[int] = Field(None, ge=0, le=100)
    capstone_completed: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ProgressUpsertRequest(ProgressUpdate):
    student_id: str
    topic_id: str

    def to_update(self) -> ProgressUpdate:
        return ProgressUpdate(**self.changes())

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True, exclude={"student_id", "topic_id"})


class QuestionCreate(BaseModel):
    topic_id: str
    question_text: str
    question_type: str = "multiple_choice"
    options: Optional[List[str]] = None
    correct_answer: str
    explanation: Optional[str] = None
    difficulty: int = Field(2, ge=1, le=3)
    is_capstone: bool = False
    video_timestamp: Optional[int] = None


class AttemptCreate(BaseModel):
    student_id: str
    question_id: str
    selected_answer: str
    is_correct: bool
    error_type: Optional[ErrorType] = None
    time_spent: Optional[int] = Field(None, ge=0)


class CheckInCreate(BaseModel):
    student_id: str
    studied_topics: Optional[List[str]] = None
    confidence_level: int = Field(ge=1, le=5)
    notes: Optional[str] = None


class ChatMessageCreate(BaseModel):
    student_id: str
    role: Literal["user", "assistant"]
    content: str = Field(min_length=1)
    context: Optional[str] = None


class ChatReplyRequest(BaseModel):
    student_id: str
    content: str = Field(min_length=1)
    context: Optional[str] = None
