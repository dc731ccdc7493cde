"""
Shared-password admin authentication for the Portfolio Backend API.
A correct password is exchanged for a signed JWT; protected endpoints depend
on require_admin to check the bearer token.
"""

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from common import constants, errors

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(password: Optional[str]) -> bool:
    """Compare a candidate password with the configured admin password."""
    if not password:
        return False
    return hmac.compare_digest(password.encode('utf-8'), constants.get_admin_password().encode('utf-8'))


def create_access_token(role: str = constants.ADMIN_ROLE) -> str:
    """
    Issue a signed token for the admin role.

    Args:
        role: Role claim to embed

    Returns:
        Encoded JWT valid for JWT_EXPIRES_HOURS
    """
    now = datetime.now(timezone.utc)
    payload = {
        "role": role,
        "iat": now,
        "exp": now + timedelta(hours=constants.get_jwt_expires_hours())
    }
    return jwt.encode(payload, constants.get_jwt_secret(), algorithm=constants.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a token.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, tampered with or expired
    """
    return jwt.decode(token, constants.get_jwt_secret(), algorithms=[constants.JWT_ALGORITHM])


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Dict[str, Any]:
    """
    FastAPI dependency guarding admin-only endpoints.

    Returns:
        Decoded token claims

    Raises:
        HTTPException: 401 when no token is sent, 403 when it is invalid
    """
    if credentials is None or not credentials.credentials:
        errors.raise_missing_token()

    try:
        claims = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {str(e)}")
        errors.raise_invalid_token(str(e))

    if claims.get("role") != constants.ADMIN_ROLE:
        errors.raise_invalid_token("token does not carry the admin role")

    return claims
