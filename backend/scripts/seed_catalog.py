"""
Script to seed the database with the SAT topic catalog
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from db.database import engine, Base, get_db_context
from services.catalog_service import catalog_service

async def seed_database():
    """Main seeding function"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with get_db_context() as session:
        result = await catalog_service.seed_catalog(session)

    print(f"{result['message']}: {result['topics']} topics")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed_database())
