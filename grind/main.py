"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI

from grind.api.v1.router import api_router
from grind.core.config import settings
from grind.core.logging_config import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Workout programming, session tracking and load monitoring.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

logger.info("Application configured", extra={"ctx_version": settings.VERSION})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Grind API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "service": "grind-api",
        "version": settings.VERSION
    }
