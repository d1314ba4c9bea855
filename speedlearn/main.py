"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from speedlearn import __version__
from speedlearn.api.dependencies import get_passage_catalog
from speedlearn.api.routes import assessment, health, rsvp
from speedlearn.config import get_settings
from speedlearn.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler; loads the passage catalog up front."""
    catalog = get_passage_catalog()
    logger.info("Serving %d passages", len(catalog))
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance with routes, middleware, and error handlers.
    """
    settings = get_settings()
    setup_logging(settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        description="RSVP speed reading and reading assessment API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(rsvp.router, prefix="/api", tags=["rsvp"])
    app.include_router(assessment.router, prefix="/api", tags=["assessment"])

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "service": "SpeedLearn API",
            "version": __version__,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()
