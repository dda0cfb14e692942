"""HTTP Basic authentication for the candidate endpoints.

A single user is configured through ``settings.API_USERNAME`` /
``settings.API_PASSWORD``.  Requests are stateless: credentials are checked
on every call.
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.core.config import settings

logger = logging.getLogger(__name__)

# auto_error=False so missing credentials go through the same 401 path
_basic = HTTPBasic(auto_error=False)

UNAUTHORIZED_MESSAGE = "Invalid or missing credentials. HTTP Basic authentication is required."


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def require_basic_auth(
    credentials: HTTPBasicCredentials | None = Depends(_basic),
) -> str:
    """Dependency returning the authenticated username or raising 401."""
    if credentials is not None:
        # Evaluate both comparisons to keep timing independent of which one fails
        user_ok = _matches(credentials.username, settings.API_USERNAME)
        password_ok = _matches(credentials.password, settings.API_PASSWORD)
        if user_ok and password_ok:
            return credentials.username

    logger.warning("authentication_failed")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
        headers={"WWW-Authenticate": "Basic"},
    )
