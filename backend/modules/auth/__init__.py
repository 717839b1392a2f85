"""
Authentication module.

Loads the Firebase service account and verifies ID tokens.

Public API:
- ITokenVerifier: Interface for token verification
- FirebaseTokenVerifier: firebase-admin implementation
- load_service_account / initialize_firebase_app: credential loading
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ITokenVerifier
from .credentials import load_service_account, initialize_firebase_app
from .service import FirebaseTokenVerifier
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    VerificationUnavailableError,
)

__all__ = [
    # Interface
    "ITokenVerifier",
    # Implementation
    "FirebaseTokenVerifier",
    "load_service_account",
    "initialize_firebase_app",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "VerificationUnavailableError",
]
