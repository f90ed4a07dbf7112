from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from services.learning_dashboard_service import learning_dashboard_service
from api.serializers import recommendation_to_dict

router = APIRouter()

@router.get("/{student_id}")
async def get_recommended_focus(student_id: str, db: AsyncSession = Depends(get_db)):
    """Up to three topics to focus on next"""
    recommendations = await learning_dashboard_service.get_recommended_focus(db, student_id)
    return [recommendation_to_dict(r) for r in recommendations]
