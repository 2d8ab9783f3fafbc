"""
Tests for mock and JWT authentication providers.
"""

import pytest

from legalconnect.core.config import Settings
from legalconnect.core.exceptions import AuthenticationError
from legalconnect.core.security import create_access_token
from legalconnect.infrastructure.auth.jwt_auth import JwtAuthProvider
from legalconnect.infrastructure.local.mock_auth import MockAuthProvider
from legalconnect.models.enums import UserRole


class TestMockAuthProvider:
    @pytest.mark.asyncio
    async def test_bare_token_is_seeker(self):
        user = await MockAuthProvider().verify_token("U1")

        assert user.id == "U1"
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_lawyer_prefix(self):
        user = await MockAuthProvider().verify_token("lawyer:L1")

        assert user.id == "L1"
        assert user.is_lawyer

    @pytest.mark.asyncio
    async def test_empty_token_rejected(self):
        with pytest.raises(AuthenticationError):
            await MockAuthProvider().verify_token("lawyer:")


class TestJwtAuthProvider:
    @pytest.fixture
    def settings(self):
        return Settings(JWT_SECRET="test-secret", JWT_ISSUER="legalconnect-test")

    @pytest.mark.asyncio
    async def test_round_trip(self, settings):
        token = create_access_token("L1", UserRole.LAWYER, settings)

        user = await JwtAuthProvider(settings).verify_token(token)

        assert user.id == "L1"
        assert user.role == UserRole.LAWYER

    @pytest.mark.asyncio
    async def test_wrong_secret(self, settings):
        token = create_access_token("U1", UserRole.USER, settings)
        other = Settings(JWT_SECRET="another-secret", JWT_ISSUER="legalconnect-test")

        with pytest.raises(AuthenticationError):
            await JwtAuthProvider(other).verify_token(token)

    @pytest.mark.asyncio
    async def test_expired_token(self, settings):
        token = create_access_token("U1", UserRole.USER, settings, expires_minutes=-5)

        with pytest.raises(AuthenticationError):
            await JwtAuthProvider(settings).verify_token(token)

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            JwtAuthProvider(Settings(JWT_SECRET=""))
