"""
Authentication module interface.

Route dependencies should depend on ITokenVerifier, not the concrete
Firebase implementation. This enables testing with fakes.
"""

from typing import Protocol, runtime_checkable

from shared.models import VerifiedIdentity


@runtime_checkable
class ITokenVerifier(Protocol):
    """
    Interface for ID token verification.

    Implementations must provide all these methods.
    """

    async def verify_token(self, token: str) -> VerifiedIdentity:
        """
        Verify an ID token and return the caller's identity.

        Args:
            token: Raw ID token, exactly as the client sent it

        Returns:
            VerifiedIdentity with the user ID and display fields

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or the identity provider cannot be reached
        """
        ...
