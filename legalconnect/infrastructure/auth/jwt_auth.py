"""
JWT authentication provider.
"""

from __future__ import annotations

from jose import JWTError

from legalconnect.core.config import Settings
from legalconnect.core.exceptions import AuthenticationError
from legalconnect.core.security import decode_access_token
from legalconnect.interfaces.auth_provider import IAuthProvider, User
from legalconnect.models.enums import UserRole


class JwtAuthProvider(IAuthProvider):
    """Auth provider with HMAC JWT validation."""

    def __init__(self, settings: Settings):
        if not settings.JWT_SECRET:
            raise ValueError("JWT_SECRET must be set for jwt auth")
        self._settings = settings

    async def verify_token(self, token: str) -> User:
        try:
            claims = decode_access_token(token, self._settings)
        except JWTError as exc:
            raise AuthenticationError(f"Invalid token: {exc}") from exc

        subject = claims.get("sub")
        if not subject:
            raise AuthenticationError("Missing subject")
        try:
            role = UserRole(claims.get("role") or UserRole.USER.value)
        except ValueError as exc:
            raise AuthenticationError(f"Unknown role: {claims.get('role')}") from exc

        email = claims.get("email")
        return User(
            id=str(subject),
            role=role,
            email=str(email) if email else None,
            display_name=str(claims.get("name") or subject),
        )
