from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from services.learning_dashboard_service import learning_dashboard_service
from api.serializers import dashboard_to_dict

router = APIRouter()

@router.get("/{student_id}")
async def get_student_dashboard(student_id: str, db: AsyncSession = Depends(get_db)):
    """Readiness, top recommendations, recent activity and streak for a student"""
    dashboard = await learning_dashboard_service.get_student_dashboard(db, student_id)
    if not dashboard:
        raise HTTPException(status_code=404, detail="Student not found")
    return dashboard_to_dict(dashboard)
