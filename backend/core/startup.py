"""
Startup tasks for the SAT prep backend
Ensures database tables exist and the topic catalog is seeded
"""
from db.database import engine, Base, get_db_context
from core.config import settings
from core.logging_config import logger
from services.catalog_service import catalog_service

async def ensure_database_initialized():
    """Create tables and seed the catalog on an empty database"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created/verified")

    if not settings.SEED_ON_STARTUP:
        return

    async with get_db_context() as session:
        result = await catalog_service.seed_catalog(session)
    logger.info(f"Catalog check: {result['message']} ({result['topics']} topics)")
