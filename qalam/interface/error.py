"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import HTTPException, status

from qalam.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: Exception) -> HTTPException:
    """Translate an error raised by a use case into an HTTPException.

    Domain errors map to their status code. ValueError (malformed IDs,
    request model validation) maps to 400. Anything else is not handled
    here and should propagate.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException carrying the status and message

    Raises:
        Exception: The original error, if it is not a known client error
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            logfire.warn(
                "Request rejected", code=error_type.code, status=status_code, error=str(error)
            )
            return HTTPException(status_code=status_code, detail=str(error))

    if isinstance(error, ValueError):
        logfire.warn("Invalid request", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    raise error


def unauthenticated(detail: str = "Authentication required") -> HTTPException:
    """401 for requests without a valid session token."""
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
