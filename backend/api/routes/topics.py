from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from core.mastery_states import SatSection
from services.catalog_service import catalog_service
from services.progress_service import progress_service
from api.serializers import topic_to_dict, topic_with_progress_to_dict

router = APIRouter()

@router.get("")
async def get_topics(db: AsyncSession = Depends(get_db)):
    """Full SAT topic catalog ordered by section and roadmap order"""
    topics = await catalog_service.get_all_topics(db)
    return [topic_to_dict(topic) for topic in topics]

@router.get("/section/{section}")
async def get_topics_by_section(section: SatSection, db: AsyncSession = Depends(get_db)):
    topics = await catalog_service.get_topics_by_section(db, section)
    return [topic_to_dict(topic) for topic in topics]

@router.get("/progress/{student_id}")
async def get_topics_with_progress(student_id: str, db: AsyncSession = Depends(get_db)):
    """Every topic with the student's progress record (null when never practiced)"""
    entries = await progress_service.get_topics_with_progress(db, student_id)
    return [topic_with_progress_to_dict(entry) for entry in entries]

@router.get("/{topic_id}")
async def get_topic(topic_id: str, db: AsyncSession = Depends(get_db)):
    topic = await catalog_service.get_topic(db, topic_id)
    if not topic:
        raise HTTPException(status_code=404, detail="Topic not found")
    return topic_to_dict(topic)
