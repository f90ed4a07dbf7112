from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from core.config import settings, is_vercel
from core.logging_config import logger
import time
from contextlib import asynccontextmanager

# Configure database URL and engine options
database_url = settings.DATABASE_URL

Base = declarative_base()

is_postgresql = database_url.startswith("postgresql") or database_url.startswith("postgres")

logger.info(f"Database configuration: postgresql={is_postgresql}, vercel={is_vercel}")

if is_postgresql and is_vercel:
    from sqlalchemy.pool import NullPool

    engine_kwargs = {
        "echo": False,
        "pool_pre_ping": False,  # Disable for serverless
        "poolclass": NullPool,
        "connect_args": {
            "server_settings": {
                "jit": "off",
                "application_name": "satprep_backend"
            },
            "command_timeout": 5,
            "statement_cache_size": 0,
        }
    }
    logger.info("Using serverless PostgreSQL configuration")
else:
    engine_kwargs = {
        "echo": False,
        "pool_pre_ping": is_postgresql,
    }

engine = create_async_engine(database_url, **engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

@asynccontextmanager
async def get_db_context(session_factory=None):
    """Context manager version of get_db for better control"""
    session = (session_factory or AsyncSessionLocal)()
    start_time = time.time()

    try:
        yield session
        await session.commit()
        logger.debug(f"DB session committed in {(time.time() - start_time)*1000:.2f}ms")
    except Exception as e:
        await session.rollback()
        logger.error(f"DB session rolled back after {(time.time() - start_time)*1000:.2f}ms: {e}")
        raise
    finally:
        await session.close()

async def get_db():
    """FastAPI dependency for database sessions"""
    async with get_db_context() as session:
        yield session
