"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Checks its shape with the Token value object
- Verifies signature and claims with PyJWT (HS256, issuer, audience)
- Returns the acting user; handlers never trust a user id from the body

Config needed (from src.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.config.settings import Config
from src.domain.exceptions import ValidationError
from src.domain.value_objects.token import Token
from src.domain.value_objects.user_id import UserId
from src.presentation.errors import ErrorCode, error_body

logger = logging.getLogger(__name__)


@dataclass
class AuthUser:
    user_id: UserId
    roles: list[str] = field(default_factory=list)


security = HTTPBearer(auto_error=False)


def _unauthenticated(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error_body(ErrorCode.UNAUTHENTICATED, message),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is missing, malformed, expired, or has no user id
    """
    if credentials is None:
        raise _unauthenticated("Missing bearer token")

    try:
        token = Token(credentials.credentials)
    except ValidationError as e:
        raise _unauthenticated(f"Malformed token: {e.message}") from e

    try:
        jwt.decode(
            token.value,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise _unauthenticated("Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.info("Rejected token: %s", e)
        raise _unauthenticated(f"Invalid token: {e}") from e

    try:
        user_id = token.get_user_id()
    except ValidationError as e:
        raise _unauthenticated("Invalid user id claim") from e
    if user_id is None:
        raise _unauthenticated("Missing user id claim in token")

    return AuthUser(user_id=user_id, roles=token.get_roles())
