"""
Firebase service account loading.

The FIREBASE_SERVICE_ACCOUNT setting holds either the service account
JSON itself or a path to a file containing it. Content starting with
'{' is treated as JSON, anything else as a path.
"""

import json
import logging
from pathlib import Path
from typing import Any

import firebase_admin
from firebase_admin import credentials

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "journeyboard"


def load_service_account(source: str) -> dict[str, Any]:
    """
    Parse a service account from inline JSON or a file path.

    Raises:
        RuntimeError: If the source is empty, unreadable or not valid JSON
    """
    if not source:
        raise RuntimeError(
            "Firebase configuration missing. "
            "Set the FIREBASE_SERVICE_ACCOUNT environment variable."
        )

    if source.startswith("{"):
        origin = "inline FIREBASE_SERVICE_ACCOUNT"
        content = source
    else:
        origin = source
        try:
            content = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Cannot read service account file {source}: {e}") from e

    try:
        info = json.loads(content)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Service account in {origin} is not valid JSON: {e}") from e

    if not isinstance(info, dict):
        raise RuntimeError(f"Service account in {origin} must be a JSON object")
    return info


def initialize_firebase_app(source: str, name: str = DEFAULT_APP_NAME) -> firebase_admin.App:
    """Create a named Firebase app from the configured service account."""
    info = load_service_account(source)
    app = firebase_admin.initialize_app(credentials.Certificate(info), name=name)
    logger.info("Initialized Firebase app for project %s", info.get("project_id", "?"))
    return app
