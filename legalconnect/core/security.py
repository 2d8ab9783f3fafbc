"""
Security helpers for JWT authentication.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import jwt

from legalconnect.core.config import Settings
from legalconnect.models.enums import UserRole


def create_access_token(
    user_id: str,
    role: UserRole,
    settings: Settings,
    expires_minutes: int | None = None,
) -> str:
    """Create a signed JWT carrying the identity and its role."""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload = {
        "sub": user_id,
        "role": role.value,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    if settings.JWT_ISSUER:
        payload["iss"] = settings.JWT_ISSUER
    return jwt.encode(payload, settings.JWT_SECRET, algorithm="HS256")


def decode_access_token(token: str, settings: Settings) -> dict[str, object]:
    """Validate signature, expiry and issuer and return the claims."""
    options = {"verify_iss": bool(settings.JWT_ISSUER)}
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=["HS256"],
        issuer=settings.JWT_ISSUER or None,
        options=options,
    )
