"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from lumbar.api.v1.router import api_router
from lumbar.core.config import settings
from lumbar.core.errors import (
    ForbiddenError,
    InvalidArgumentError,
    LumbarError,
    NotFoundError,
    StorageFailureError,
)
from lumbar.core.logger import setup_logger
from lumbar.db.init_db import init_db
from lumbar.db.session import create_db_engine

_STATUS_BY_KIND = {
    NotFoundError.kind: status.HTTP_404_NOT_FOUND,
    InvalidArgumentError.kind: status.HTTP_400_BAD_REQUEST,
    ForbiddenError.kind: status.HTTP_403_FORBIDDEN,
    StorageFailureError.kind: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def lumbar_error_handler(request: Request, exc: LumbarError) -> JSONResponse:
    """Translate a domain error into its HTTP response."""
    status_code = _STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, StorageFailureError):
        # Storage internals stay in the log
        body = {"error": exc.kind, "reason": exc.reason, "detail": "Storage failure"}
    else:
        body = exc.to_dict()
    logger.debug(f"{request.method} {request.url.path} -> {status_code} ({exc.kind}: {exc.message})")
    return JSONResponse(status_code=status_code, content=body)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the application.

    Args:
        database_url: Overrides ``settings.DATABASE_URL`` (tests use
            ``sqlite:///:memory:``)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
        engine = create_db_engine(database_url or settings.DATABASE_URL, echo=settings.DEBUG)
        init_db(engine, seed=settings.SEED_ON_STARTUP)
        app.state.engine = engine
        logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
        yield
        engine.dispose()
        logger.info(f"{settings.PROJECT_NAME} stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Daily lower-back and posture routines with adherence tracking.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.add_exception_handler(LumbarError, lumbar_error_handler)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": "Lumbar Routines API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "lumbar-api",
            "version": settings.VERSION
        }

    @app.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
        }

    return app


app = create_app()
