from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from db.database import get_db
from services.catalog_service import catalog_service

router = APIRouter()

@router.post("")
async def seed_catalog(db: AsyncSession = Depends(get_db)):
    """Seed the topic catalog and questions (development helper)"""
    return await catalog_service.seed_catalog(db)
