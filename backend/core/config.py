from pydantic_settings import BaseSettings
from typing import List
import os

# Check if running on Vercel
is_vercel = os.environ.get("VERCEL", "0") == "1"

# Get database URL from environment
postgres_url = os.environ.get("POSTGRES_URL")

# Convert postgresql:// to postgresql+asyncpg:// for async support
if postgres_url:
    if postgres_url.startswith("postgres://"):
        postgres_url = postgres_url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif postgres_url.startswith("postgresql://"):
        postgres_url = postgres_url.replace("postgresql://", "postgresql+asyncpg://", 1)

# Determine database URL based on environment
if is_vercel and not postgres_url:
    default_database_url = "sqlite+aiosqlite:////tmp/satprep.db"
else:
    default_database_url = "sqlite+aiosqlite:///./satprep.db"

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = postgres_url or default_database_url

    # Seed the SAT topic catalog when the database is empty
    SEED_ON_STARTUP: bool = True

    # Student returned by /students/demo/current
    DEMO_STUDENT_EMAIL: str = "demo@satprep.com"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = not is_vercel

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ]

    class Config:
        env_file = ".env"

settings = Settings()
