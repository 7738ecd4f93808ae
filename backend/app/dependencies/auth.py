"""
Authentication dependencies for protected routes
Callers present the identity provider's JWT as a bearer token
"""

import logging
from typing import Optional

from fastapi import HTTPException, Request, status
from jose import jwt, JWTError

from app.config import settings

logger = logging.getLogger(__name__)


class AuthenticatedUser:
    """Represents an authenticated user"""

    def __init__(self, user_id: str):
        self.user_id = user_id


def extract_bearer_token(request: Request) -> Optional[str]:
    """Return the token from an 'Authorization: Bearer <token>' header"""
    header = request.headers.get("authorization") or ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def verify_token(token: str) -> Optional[AuthenticatedUser]:
    """
    Verify a bearer JWT
    Returns AuthenticatedUser if valid, None if invalid
    """
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE or None,
            options=options,
        )

        user_id = payload["sub"]
        if not isinstance(user_id, str) or not user_id.strip():
            return None

        return AuthenticatedUser(user_id=user_id)

    except (JWTError, KeyError, ValueError, TypeError):
        return None


async def get_current_user(request: Request) -> AuthenticatedUser:
    """
    Get current user from the Authorization header
    Used for REST API endpoints
    """
    token = extract_bearer_token(request)

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Missing or invalid token",
        )

    if not settings.JWT_SECRET:
        logger.error("auth_unavailable reason=verifier_not_configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service Unavailable: Authentication service not initialized",
        )

    user = verify_token(token)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid or expired token",
        )

    return user
