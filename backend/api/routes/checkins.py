from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.schemas import CheckInCreate
from services.activity_service import activity_service
from services.student_service import student_service
from api.serializers import check_in_to_dict

router = APIRouter()

@router.post("", status_code=201)
async def create_check_in(request: CheckInCreate, db: AsyncSession = Depends(get_db)):
    if not await student_service.get_student(db, request.student_id):
        raise HTTPException(status_code=404, detail="Student not found")
    check_in = await activity_service.create_daily_check_in(db, request)
    return check_in_to_dict(check_in)

@router.get("/{student_id}")
async def get_check_ins(student_id: str, limit: int = Query(30, ge=1, le=365), db: AsyncSession = Depends(get_db)):
    check_ins = await activity_service.get_student_check_ins(db, student_id, limit)
    return [check_in_to_dict(c) for c in check_ins]
