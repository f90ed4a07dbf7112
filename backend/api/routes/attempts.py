from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.schemas import AttemptCreate
from services.activity_service import activity_service
from services.catalog_service import catalog_service
from services.student_service import student_service
from api.serializers import attempt_to_dict

router = APIRouter()

@router.post("", status_code=201)
async def record_attempt(request: AttemptCreate, db: AsyncSession = Depends(get_db)):
    if not await student_service.get_student(db, request.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    if not await catalog_service.get_question(db, request.question_id):
        raise HTTPException(status_code=404, detail="Question not found")

    attempt = await activity_service.record_question_attempt(db, request)
    return attempt_to_dict(attempt)

@router.get("/{student_id}")
async def get_attempts(student_id: str, db: AsyncSession = Depends(get_db)):
    attempts = await activity_service.get_student_question_attempts(db, student_id)
    return [attempt_to_dict(a) for a in attempts]
