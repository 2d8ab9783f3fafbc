"""
Mock authentication provider for local development.
"""

from legalconnect.core.exceptions import AuthenticationError
from legalconnect.interfaces.auth_provider import IAuthProvider, User
from legalconnect.models.enums import UserRole


class MockAuthProvider(IAuthProvider):
    """
    Mock auth provider where the token names the caller.

    "lawyer:<id>" authenticates a lawyer, "user:<id>" or a bare "<id>" a seeker.
    """

    async def verify_token(self, token: str) -> User:
        """
        Verify token - in mock mode, token is treated as role-prefixed user_id.

        Args:
            token: "[role:]user_id"

        Returns:
            Mock user
        """
        role = UserRole.USER
        user_id = token.strip()
        prefix, sep, rest = user_id.partition(":")
        if sep and prefix in {r.value for r in UserRole}:
            role = UserRole(prefix)
            user_id = rest.strip()
        if not user_id:
            raise AuthenticationError("Empty mock token")
        return User(id=user_id, role=role, email=f"{user_id}@example.com", display_name=user_id)
