"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.config import Settings, get_settings
from shared.exceptions import (
    AuthenticationError,
    DatabaseError,
    JourneyboardError,
)
from .dependencies import ServiceContainer
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.journeys.routes import router as journeys_router
from modules.scores.routes import router as scores_router, leaderboard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the shared resources on startup and releases them on shutdown.
    """
    # Startup
    settings: Settings = app.state.settings
    container = ServiceContainer(settings)
    container.startup()
    app.state.container = container
    logger.info(
        "Starting %s on %s:%s (%s)",
        settings.app_name, settings.host, settings.port, settings.environment,
    )
    try:
        yield
    finally:
        # Shutdown
        logger.info("Shutting down %s", settings.app_name)
        container.close()


async def authentication_error_handler(request: Request, exc: AuthenticationError):
    """Answer every authentication failure the same way, without details."""
    return PlainTextResponse("Unauthorized", status_code=403)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON and invalid fields are client errors (400)."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def database_error_handler(request: Request, exc: DatabaseError):
    """Store failures are logged in full and reported without internals."""
    logger.error(
        "Database error in %s %s", request.method, request.url.path,
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse(status_code=500, content=ErrorResponse(**exc.to_dict()).model_dump())


async def application_error_handler(request: Request, exc: JourneyboardError):
    logger.error("Unhandled %s in %s %s", exc.code, request.method, request.url.path, exc_info=exc)
    body = ErrorResponse(error=exc.code, message="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Daily journeys and high-score leaderboard for the game client",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Map domain errors to HTTP responses
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(JourneyboardError, application_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(journeys_router, prefix="/api/journey", tags=["journeys"])
    app.include_router(scores_router, prefix="/api/scores", tags=["scores"])
    app.include_router(leaderboard_router, prefix="/api/leaderboard", tags=["scores"])

    return app


# Application instance for uvicorn
app = create_app()
