"""Authentication dependencies for API endpoints."""

import secrets
from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import settings
from ..models.errors import AuthenticationError
from ..utils.id_generator import get_request_id

logger = structlog.get_logger(__name__)
security = HTTPBearer(auto_error=False)


def is_valid_api_key(api_key: str) -> bool:
    """Constant-time comparison against every configured key."""
    candidate = api_key.encode()
    return any(secrets.compare_digest(candidate, valid_key.encode()) for valid_key in settings.get_valid_api_keys())


async def verify_api_key(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Verify API key authentication.
    Accepts the key from the configured header or an Authorization bearer token.
    """
    api_key = request.headers.get(settings.api_key_header)

    if not api_key and credentials:
        api_key = credentials.credentials

    if not api_key:
        logger.warning("No API key provided in request", path=request.url.path)
        raise AuthenticationError(
            "API key required. Provide it in x-api-key header or Authorization header.",
            request_id=get_request_id(request),
        )

    if not is_valid_api_key(api_key):
        logger.warning("Invalid API key provided", path=request.url.path)
        raise AuthenticationError("Invalid API key", request_id=get_request_id(request))

    return api_key


class AuthenticatedUser:
    """Represents an authenticated API caller."""

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.key_prefix = api_key[:8] + "..." if len(api_key) > 8 else api_key

    def __str__(self):
        return f"AuthenticatedUser(key={self.key_prefix})"


async def get_current_user(api_key: str = Depends(verify_api_key)) -> AuthenticatedUser:
    """Get the current authenticated caller."""
    return AuthenticatedUser(api_key)
