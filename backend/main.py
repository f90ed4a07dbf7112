from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import time

from api.routes import (
    health, students, dashboard, topics, progress, questions,
    attempts, checkins, chat, recommendations, video, seed
)
from core.config import settings
from core.logging_config import logger
from core.startup import ensure_database_initialized
from db.database import engine

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting SAT prep backend server")
    await ensure_database_initialized()
    yield
    # Shutdown
    logger.info("Shutting down SAT prep backend server")
    await engine.dispose()

app = FastAPI(
    title="SAT Prep API",
    description="SAT readiness, topic roadmap and learning zone API",
    version="0.1.0",
    lifespan=lifespan
)

# API request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    api_logger = logger.getChild("api")
    api_logger.info(f"→ {request.method} {request.url.path} | Query: {dict(request.query_params)}")

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000
    api_logger.info(f"← {request.method} {request.url.path} | {response.status_code} | {duration_ms:.1f}ms")

    # Log slow requests
    if duration_ms > 1000:
        perf_logger = logger.getChild("performance")
        perf_logger.warning(f"SLOW REQUEST: {request.method} {request.url.path} took {duration_ms:.1f}ms")

    return response

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1/health", tags=["health"])
app.include_router(students.router, prefix="/api/v1/students", tags=["students"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["dashboard"])
app.include_router(topics.router, prefix="/api/v1/topics", tags=["topics"])
app.include_router(progress.router, prefix="/api/v1/progress", tags=["progress"])
app.include_router(questions.router, prefix="/api/v1/questions", tags=["questions"])
app.include_router(attempts.router, prefix="/api/v1/attempts", tags=["attempts"])
app.include_router(checkins.router, prefix="/api/v1/checkins", tags=["checkins"])
app.include_router(chat.router, prefix="/api/v1/chat", tags=["chat"])
app.include_router(recommendations.router, prefix="/api/v1/recommendations", tags=["recommendations"])
app.include_router(video.router, prefix="/api/v1/video", tags=["video"])
app.include_router(seed.router, prefix="/api/v1/seed", tags=["seed"])

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
