# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# JWT-based authentication against Supabase Auth. Sign-up and login happen
# client-side; the API only verifies the resulting access token.
# =============================================================================

from app.auth.dependencies import decode_access_token, get_current_user
from app.auth.models import AuthUser

__all__ = [
    "AuthUser",
    "decode_access_token",
    "get_current_user",
]
