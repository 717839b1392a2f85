"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field


class VerifiedIdentity(BaseModel):
    """
    Represents the caller of a protected route.

    This model is populated from verified ID token claims and made available
    to route handlers via dependency injection. It lives for one request
    and is never cached.
    """

    uid: str = Field(..., description="Stable user ID from the identity provider")
    name: Optional[str] = Field(None, description="Display name, if the provider has one")
    email: Optional[str] = Field(None, description="Email address, if the provider has one")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra claims
    }

    @property
    def display_label(self) -> Optional[str]:
        """Name shown on the leaderboard: the display name, else the email."""
        return self.name or self.email

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "VerifiedIdentity":
        """Build an identity from a decoded ID token."""
        return cls(
            uid=claims.get("uid") or claims["sub"],
            name=claims.get("name"),
            email=claims.get("email"),
        )
