"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from src.api.dependencies import get_check_service
from src.api.v1 import router as v1_router

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "URI Scheme Defanging API v1 - Defang, refang and verify URI schemes",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup:
    - Loads the scheme registry once on startup
    - Verifies the defang rule set against it
    """
    service = get_check_service()

    logger.info("Starting application...")
    logger.info("Loading scheme registry...")
    registry = service.load_registry()

    # Store registry in app state for dependency injection
    app.state.registry = registry

    logger.info("Verifying defang rule set...")
    report = service.check(registry)
    if not report.passed:
        logger.error("Defang rule set needs revision: %d violation(s)", len(report.violations))

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="defang-schemes",
    description="URI Scheme Defanging API - Render URI schemes safely and recover them by registry lookup",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint with registry validation.

    Returns 200 OK with the number of loaded schemes.
    """
    registry = request.app.state.registry
    return {"status": "healthy", "schemes": len(registry)}
