"""
ID token authentication dependency.

Verifies the Firebase ID token in the Authorization header and exposes
the caller's identity to route handlers.
"""

import logging
from typing import Optional
from fastapi import Depends, Header, Request

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import ITokenVerifier
from shared.exceptions import AuthenticationError
from shared.models import VerifiedIdentity

from ..dependencies import get_token_verifier

logger = logging.getLogger(__name__)


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    verifier: ITokenVerifier = Depends(get_token_verifier),
) -> VerifiedIdentity:
    """
    Dependency that requires authentication.

    The header value is handed to the verifier verbatim; clients send
    the raw ID token, without a "Bearer " prefix. On success the
    identity is also stored on request.state.identity.

    Any AuthenticationError propagates to the application's error
    handler, which answers 403 before the route handler runs.

    Usage:
        @router.get("/protected")
        def protected_route(user: VerifiedIdentity = Depends(get_current_user)):
            return {"user_id": user.uid}
    """
    try:
        if authorization is None:
            raise MissingTokenError()
        identity = await verifier.verify_token(authorization)
    except AuthenticationError as e:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, e.code)
        raise

    request.state.identity = identity
    return identity
