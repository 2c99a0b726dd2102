# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Verifies Supabase access tokens:
# - ES256/RS256 (asymmetric signing keys) via the project's JWKS endpoint
# - HS256 (legacy JWT secret)
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
import time
from typing import Any
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from app.auth.models import AuthUser
from app.config import settings

logger = logging.getLogger(__name__)

security = HTTPBearer()

JWT_AUDIENCE = "authenticated"
JWKS_CACHE_TTL = 3600  # 1 hour

_jwks_cache: dict[str, Any] = {}
_jwks_fetched_at: float = 0.0


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _jwks_url() -> str:
    return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"


def _load_jwks() -> dict[str, Any]:
    """Fetch the project's signing keys, reusing them for JWKS_CACHE_TTL."""
    global _jwks_cache, _jwks_fetched_at

    now = time.time()
    if _jwks_cache and (now - _jwks_fetched_at) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        response = httpx.get(_jwks_url(), timeout=10)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # A stale key set beats rejecting every request
        return _jwks_cache or {"keys": []}

    _jwks_cache = response.json()
    _jwks_fetched_at = now
    logger.debug(f"Fetched JWKS from {_jwks_url()}")
    return _jwks_cache


def _resolve_key(token: str) -> tuple[Any, str]:
    """Pick the verification key and algorithm from the token header."""
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        raise _unauthorized("Invalid token: unreadable header")

    algorithm = header.get("alg", "HS256")
    if algorithm == "HS256":
        if not settings.SUPABASE_JWT_SECRET:
            raise _unauthorized("Invalid token: HS256 tokens are not accepted")
        return settings.SUPABASE_JWT_SECRET, algorithm

    kid = header.get("kid")
    for key in _load_jwks().get("keys", []):
        if key.get("kid") == kid:
            return key, algorithm

    logger.warning(f"No signing key found for alg={algorithm}, kid={kid}")
    raise _unauthorized("Invalid token: unknown signing key")


def decode_access_token(token: str) -> AuthUser:
    """
    Verify a Supabase access token and return the user it identifies.

    Raises:
        HTTPException: 401 if the token is invalid, expired or has no subject
    """
    key, algorithm = _resolve_key(token)

    try:
        payload = jwt.decode(token, key, algorithms=[algorithm], audience=JWT_AUDIENCE)
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {e}")

    subject = payload.get("sub")
    if not subject:
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user_id = UUID(subject)
    except ValueError:
        raise _unauthorized("Invalid token: malformed user ID")

    return AuthUser(id=user_id, email=payload.get("email"), access_token=token)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """Dependency: the authenticated user behind the Bearer token."""
    user = decode_access_token(credentials.credentials)
    logger.debug(f"Authenticated user: {user.id}")
    return user
