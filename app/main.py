"""
FastAPI Main Application
Pre-shift fatigue risk assessment service
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from app.config import settings
from app.core.logging import setup_logging, get_logger
from app.infrastructure.db.database import init_db, close_db

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Handles startup and shutdown of the database
    """
    logger.info("="*60)
    logger.info("🚀 Starting Fatigue Risk Assistant")
    logger.info("="*60)

    logger.info("📊 Initializing database...")
    await init_db()
    logger.info("✅ Database initialized")

    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"   ✅ API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")
    logger.info(f"   ✅ Audit trail: {'Enabled' if settings.AUDIT_ENABLED else 'Disabled'}")

    yield

    logger.info("🛑 Shutting down Fatigue Risk Assistant...")
    await close_db()
    logger.info("✅ Database connections closed")


app = FastAPI(
    title="Fatigue Risk Assistant",
    description="Pre-shift fatigue scoring from sleep history and shift timing",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Fatigue Risk Assistant",
        "version": VERSION,
        "levels": ["Low", "Moderate", "High", "Extreme"],
        "docs": "/docs"
    }


# Import and include routers
from app.api.routes import fatigue, health  # noqa: E402

app.include_router(health.router, tags=["Health"])
app.include_router(fatigue.router, prefix="/api/v1/fatigue", tags=["Fatigue"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
