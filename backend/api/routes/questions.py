from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from services.catalog_service import catalog_service
from api.serializers import question_to_dict

router = APIRouter()

@router.get("/topic/{topic_id}")
async def get_topic_questions(topic_id: str, db: AsyncSession = Depends(get_db)):
    """Pre-assessment questions for a topic"""
    questions = await catalog_service.get_questions_by_topic(db, topic_id)
    return [question_to_dict(q) for q in questions]

@router.get("/capstone/{topic_id}")
async def get_capstone_question(topic_id: str, db: AsyncSession = Depends(get_db)):
    question = await catalog_service.get_capstone_question(db, topic_id)
    return question_to_dict(question)
