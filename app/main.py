"""Internship lifecycle service - application and task workflow API."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.storage import init_models
from app.routers import applications_router, tasks_router

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    if settings.store_backend == "database":
        await init_models()
    logger.info(f"Application initialized (store backend: {settings.store_backend})")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="Internship Lifecycle",
    description="Application and task lifecycle engine for the internship marketplace",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(applications_router)
app.include_router(tasks_router)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "message": "Internship Lifecycle API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "active",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "internship-lifecycle",
        "store_backend": settings.store_backend,
        "notifications": bool(settings.notification_enabled and settings.notification_url),
    }
