from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from services.catalog_service import catalog_service
from api.serializers import video_to_dict

router = APIRouter()

@router.get("/{topic_id}")
async def get_topic_video(topic_id: str, db: AsyncSession = Depends(get_db)):
    """Lesson video for a topic, or null if none exists"""
    video = await catalog_service.get_video_by_topic(db, topic_id)
    return video_to_dict(video)
