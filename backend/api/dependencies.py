"""
Dependency injection setup for FastAPI.

This module provides the "container" that owns the long-lived resources
(connection pool and token verifier) and the dependency functions that
hand them, and the per-request repositories and services built on them,
to route handlers.

The container is built once by the application lifespan and stored on
app.state. Tests swap any piece through app.dependency_overrides.
"""

import logging
from typing import TYPE_CHECKING

from fastapi import Depends, Request

from shared.config import Settings
from shared.database import Database, create_database
from modules.journeys.repository import JourneyRepository
from modules.journeys.service import JourneyService
from modules.scores.repository import ScoreRepository
from modules.scores.service import ScoreService

# Type checking imports for interfaces (avoids importing firebase eagerly)
if TYPE_CHECKING:
    from modules.auth.interfaces import ITokenVerifier

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for the application's shared resources.

    Resources are created lazily on first access and cached for the
    lifetime of the container. close() releases them; it is called once
    on application shutdown.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._database: "Database | None" = None
        self._token_verifier: "ITokenVerifier | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def database(self) -> Database:
        """Get the connection pool."""
        if self._database is None:
            self._database = create_database(self._settings)
        return self._database

    @property
    def token_verifier(self) -> "ITokenVerifier":
        """Get the Firebase token verifier."""
        if self._token_verifier is None:
            from modules.auth.credentials import initialize_firebase_app
            from modules.auth.service import FirebaseTokenVerifier
            app = initialize_firebase_app(self._settings.firebase_service_account)
            self._token_verifier = FirebaseTokenVerifier(app)
        return self._token_verifier

    def startup(self) -> None:
        """Build every resource up front so configuration errors surface at boot."""
        _ = self.database
        _ = self.token_verifier

    def close(self) -> None:
        """Release the connection pool and the Firebase app."""
        try:
            if self._database is not None:
                self._database.close()
                self._database = None
        finally:
            if self._token_verifier is not None:
                close = getattr(self._token_verifier, "close", None)
                if close is not None:
                    close()
                self._token_verifier = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the application was created with."""
    return request.app.state.settings


def get_database(container: ServiceContainer = Depends(get_container)) -> Database:
    """FastAPI dependency for the connection pool."""
    return container.database


def get_token_verifier(
    container: ServiceContainer = Depends(get_container),
) -> "ITokenVerifier":
    """FastAPI dependency for the token verifier."""
    return container.token_verifier


def get_journey_repository(db: Database = Depends(get_database)) -> JourneyRepository:
    """FastAPI dependency for the journey repository."""
    return JourneyRepository(db)


def get_score_repository(db: Database = Depends(get_database)) -> ScoreRepository:
    """FastAPI dependency for the score repository."""
    return ScoreRepository(db)


def get_journey_service(
    repository: JourneyRepository = Depends(get_journey_repository),
    settings: Settings = Depends(get_app_settings),
) -> JourneyService:
    """FastAPI dependency for the journey service."""
    return JourneyService(repository, timezone=settings.journey_timezone)


def get_score_service(
    repository: ScoreRepository = Depends(get_score_repository),
) -> ScoreService:
    """FastAPI dependency for the score service."""
    return ScoreService(repository)
