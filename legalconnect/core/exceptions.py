"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class LegalConnectError(Exception):
    """Base exception for legalconnect."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(LegalConnectError):
    """Resource not found."""

    pass


class DuplicateError(LegalConnectError):
    """Duplicate resource detected."""

    pass


class DuplicateRequestError(DuplicateError):
    """An active connection request already exists for the seeker/lawyer pair."""

    def __init__(self, seeker_id: str, lawyer_id: str):
        super().__init__(
            "A connection request already exists with this lawyer",
            details={"seeker_id": seeker_id, "lawyer_id": lawyer_id},
        )
        self.seeker_id = seeker_id
        self.lawyer_id = lawyer_id


class ValidationError(LegalConnectError):
    """Validation error."""

    pass


class EmptyMessageError(ValidationError):
    """Message has neither text nor attachment."""

    pass


class AuthenticationError(LegalConnectError):
    """Authentication failed."""

    pass


class AuthorizationError(LegalConnectError):
    """Authorization failed."""

    pass


class ForbiddenError(AuthorizationError):
    """Forbidden operation (authorization denied)."""

    pass


class InfrastructureError(LegalConnectError):
    """Infrastructure-related error (DB, external services, etc.)."""

    pass


class UpstreamUnavailableError(InfrastructureError):
    """External collaborator failed or timed out. Safe to retry once."""

    retryable = True


class BusinessLogicError(LegalConnectError):
    """Business logic constraint violation."""

    pass


class InvalidTransitionError(BusinessLogicError):
    """Connection request status change not allowed from its current state."""

    pass
