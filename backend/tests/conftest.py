"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory token verifier and in-memory repositories that stand in for
Firebase and PostgreSQL behind the API's dependency functions.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_journey_repository,
    get_journey_service,
    get_score_repository,
    get_token_verifier,
)
from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError
from modules.journeys.service import JourneyService
from shared.config import Settings, get_settings
from shared.models import VerifiedIdentity

VALID_TOKEN = "valid-id-token"
EXPIRED_TOKEN = "expired-id-token"

# Fixed "now" used by journey route tests
FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeTokenVerifier:
    """Accepts tokens registered in `identities`, rejects everything else."""

    def __init__(self) -> None:
        self.identities: dict[str, VerifiedIdentity] = {
            VALID_TOKEN: VerifiedIdentity(uid="test-user-123", name="Test Player", email="test@example.com"),
        }
        self.seen_tokens: list[str] = []

    async def verify_token(self, token: str) -> VerifiedIdentity:
        self.seen_tokens.append(token)
        if token == EXPIRED_TOKEN:
            raise ExpiredTokenError()
        if token not in self.identities:
            raise InvalidTokenError("Could not decode token")
        return self.identities[token]


class InMemoryJourneyRepository:
    """Dict-backed stand-in for JourneyRepository."""

    def __init__(self) -> None:
        self.rows: dict[str, date] = {}
        self.calls: list[str] = []

    def get_last_completed_date(self, user_id: str) -> Optional[date]:
        self.calls.append("get_last_completed_date")
        return self.rows.get(user_id)

    def mark_completed(self, user_id: str, day: date) -> None:
        self.calls.append("mark_completed")
        self.rows[user_id] = day


class InMemoryScoreRepository:
    """Dict-backed stand-in for ScoreRepository, one row per user."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    def get_best_score(self, user_id: str) -> Optional[int]:
        self.calls.append("get_best_score")
        row = self.rows.get(user_id)
        return row["score"] if row else None

    def upsert_high_score(self, user_id: str, score: int, display_name: Optional[str]) -> Optional[dict[str, Any]]:
        self.calls.append("upsert_high_score")
        existing = self.rows.get(user_id)
        if existing is not None and existing["score"] >= score:
            return None
        row = {
            "user_id": user_id,
            "score": score,
            "display_name": display_name,
            "timestamp": datetime.now(timezone.utc),
        }
        self.rows[user_id] = row
        return dict(row)

    def top_scores(self, limit: int = 10) -> list[dict[str, Any]]:
        self.calls.append("top_scores")
        ordered = sorted(self.rows.values(), key=lambda row: row["score"], reverse=True)
        return [dict(row) for row in ordered[:limit]]

    def add(self, user_id: str, score: int, display_name: Optional[str] = None) -> None:
        self.rows[user_id] = {
            "user_id": user_id,
            "score": score,
            "display_name": display_name or user_id,
            "timestamp": datetime.now(timezone.utc),
        }


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def token_verifier() -> FakeTokenVerifier:
    return FakeTokenVerifier()


@pytest.fixture
def journey_repository() -> InMemoryJourneyRepository:
    return InMemoryJourneyRepository()


@pytest.fixture
def score_repository() -> InMemoryScoreRepository:
    return InMemoryScoreRepository()


@pytest.fixture
def app(token_verifier, journey_repository, score_repository):
    """Create a fresh app wired to in-memory collaborators."""
    app = create_app(Settings())
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier
    app.dependency_overrides[get_journey_repository] = lambda: journey_repository
    app.dependency_overrides[get_score_repository] = lambda: score_repository
    app.dependency_overrides[get_journey_service] = lambda: JourneyService(
        journey_repository, timezone="UTC", clock=lambda tz: FIXED_NOW.astimezone(tz)
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header carrying a valid raw ID token."""
    return {"Authorization": VALID_TOKEN}


@pytest.fixture
def valid_token() -> str:
    return VALID_TOKEN


@pytest.fixture
def expired_token() -> str:
    return EXPIRED_TOKEN
