"""
Translation of domain exceptions into HTTP errors.
"""

from fastapi import HTTPException, status

from legalconnect.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessLogicError,
    DuplicateError,
    InfrastructureError,
    LegalConnectError,
    NotFoundError,
    ValidationError,
)

# Checked in order; subclasses resolve through their base.
STATUS_BY_ERROR: list[tuple[type[LegalConnectError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (BusinessLogicError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (InfrastructureError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_exception(error: LegalConnectError) -> HTTPException:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error.message,
    )
