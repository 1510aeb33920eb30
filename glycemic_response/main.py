"""Glycemic Response FastAPI application."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from glycemic_response.config import settings
from glycemic_response.database import close_database
from glycemic_response.logging_config import get_logger, setup_logging
from glycemic_response.middleware import CorrelationIdMiddleware
from glycemic_response.routers import health, meal_impact

setup_logging(
    log_format=settings.log_format,
    log_level=settings.log_level,
    service_name=settings.service_name,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Glycemic Response API started")

    yield

    logger.info("Shutting down Glycemic Response API...")
    await close_database()
    logger.info("Glycemic Response API shutdown complete")


app = FastAPI(
    title="Glycemic Response API",
    description="Descriptive glucose-meal response analytics",
    version="0.1.0",
    lifespan=lifespan,
)

# First added = last executed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router)
app.include_router(meal_impact.router)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint."""
    return {
        "name": "Glycemic Response API",
        "version": "0.1.0",
        "docs": "/docs",
    }
