from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.schemas import StudentCreate, StudentUpdate
from services.student_service import student_service
from api.serializers import student_to_dict

router = APIRouter()

@router.get("/demo/current")
async def get_demo_student(db: AsyncSession = Depends(get_db)):
    """Get or create the demo student used by the web app"""
    student = await student_service.get_or_create_demo_student(db)
    return student_to_dict(student)

@router.get("/{student_id}")
async def get_student(student_id: str, db: AsyncSession = Depends(get_db)):
    student = await student_service.get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student_to_dict(student)

@router.post("", status_code=201)
async def create_student(request: StudentCreate, db: AsyncSession = Depends(get_db)):
    if await student_service.get_student_by_email(db, request.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    try:
        student = await student_service.create_student(db, request)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        await db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    return student_to_dict(student)

@router.patch("/{student_id}")
async def update_student(student_id: str, request: StudentUpdate, db: AsyncSession = Depends(get_db)):
    """Partial update, e.g. streak counter and last study date after a study session"""
    student = await student_service.update_student(db, student_id, request)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student_to_dict(student)
