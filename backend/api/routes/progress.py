from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.mastery_states import MasteryState, MASTERY_DESCRIPTIONS, RECOMMENDATION_PRIORITY
from core.schemas import ProgressUpsertRequest
from services.catalog_service import catalog_service
from services.progress_service import progress_service
from services.student_service import student_service
from api.serializers import progress_to_dict

router = APIRouter()

@router.get("/states")
async def get_mastery_states():
    """All mastery states with their descriptions, in learning order"""
    return {
        "states": {state.value: MASTERY_DESCRIPTIONS[state] for state in MasteryState},
        "progression": [state.value for state in MasteryState],
        "recommendation_priority": {state.value: priority for state, priority in RECOMMENDATION_PRIORITY.items()}
    }

@router.get("/{student_id}/{topic_id}")
async def get_topic_progress(student_id: str, topic_id: str, db: AsyncSession = Depends(get_db)):
    """Progress for one topic, or null if the student has never practiced it"""
    progress = await progress_service.get_student_topic_progress(db, student_id, topic_id)
    return progress_to_dict(progress)

@router.post("")
async def upsert_progress(request: ProgressUpsertRequest, db: AsyncSession = Depends(get_db)):
    """Record a learning-zone step (pre-assessment, capstone, review)"""
    if not await student_service.get_student(db, request.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    if not await catalog_service.get_topic(db, request.topic_id):
        raise HTTPException(status_code=404, detail="Topic not found")

    progress = await progress_service.upsert_student_topic_progress(
        db, request.student_id, request.topic_id, request.to_update()
    )
    return progress_to_dict(progress)
