from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, text
from db.database import get_db, is_postgresql
from db.models import Student, Topic
from core.config import is_vercel
from core.logging_config import logger
import time

router = APIRouter()

@router.get("/")
@router.get("")
async def health_check():
    return {
        "status": "healthy",
        "service": "satprep-api",
        "version": "0.1.0",
        "timestamp": time.time(),
        "environment": "vercel" if is_vercel else "local"
    }

@router.get("/db-check")
async def database_check(db: AsyncSession = Depends(get_db)):
    """Check database connectivity and whether the catalog is seeded"""
    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()

        topic_count = (await db.execute(select(func.count(Topic.id)))).scalar() or 0
        student_count = (await db.execute(select(func.count(Student.id)))).scalar() or 0

        return {
            "status": "connected",
            "database_type": "PostgreSQL" if is_postgresql else "SQLite",
            "topics_count": topic_count,
            "students_count": student_count
        }
    except Exception as e:
        logger.error(f"Database check failed: {e}")
        return {
            "status": "error",
            "error": str(e)
        }
