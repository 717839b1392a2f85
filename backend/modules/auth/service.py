"""
Token verification service.

Verifies Firebase ID tokens against Google's public keys.
"""

import logging
from typing import Optional

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from starlette.concurrency import run_in_threadpool

from shared.models import VerifiedIdentity

from .interfaces import ITokenVerifier
from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    VerificationUnavailableError,
)

logger = logging.getLogger(__name__)


class FirebaseTokenVerifier(ITokenVerifier):
    """
    Implementation of the token verifier backed by firebase-admin.

    verify_id_token may fetch signing certificates over HTTP, so it
    runs in the threadpool to keep the event loop free.
    """

    def __init__(self, app: firebase_admin.App):
        self._app = app

    @property
    def app(self) -> firebase_admin.App:
        return self._app

    async def verify_token(self, token: Optional[str]) -> VerifiedIdentity:
        if not token:
            raise MissingTokenError()

        try:
            claims = await run_in_threadpool(auth.verify_id_token, token, app=self._app)
        except auth.ExpiredIdTokenError:
            raise ExpiredTokenError()
        except (auth.InvalidIdTokenError, ValueError) as e:
            raise InvalidTokenError(str(e))
        except FirebaseError as e:
            logger.warning("Firebase token verification failed: %r", e)
            raise VerificationUnavailableError()
        except Exception:
            logger.exception("Unexpected error verifying token")
            raise VerificationUnavailableError()

        return VerifiedIdentity.from_claims(claims)

    def close(self) -> None:
        """Release the Firebase app."""
        firebase_admin.delete_app(self._app)
