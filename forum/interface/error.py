"""Interface layer errors and their HTTP mapping."""

import logfire
import pydantic
from fastapi import HTTPException, status

from forum.adapter.error import StorageError
from forum.domain.error import (
    BannedUserError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from forum.util.error import SignatureError
from forum.util.jwt import JWTError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Raised when a request carries no usable credentials."""

    pass


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised below the interface into an HTTP error.

    Expected errors are logged as warnings and keep their message. Anything
    else is logged as an error and answered with a generic 500.

    Args:
        error: The exception raised by a use case
        action: Short description of what failed, e.g. "like post"

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, HTTPException):
        return error

    if isinstance(error, (AuthenticationError, JWTError, SignatureError)):
        logfire.warn(f"Authentication failed: {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )

    if isinstance(error, (NotAuthorizedError, BannedUserError)):
        logfire.warn(f"Forbidden: {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    if isinstance(error, ConflictError):
        logfire.warn(f"Conflict: {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))

    if isinstance(error, (ValidationError, pydantic.ValidationError, ValueError)):
        logfire.warn(f"Invalid request: {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    if isinstance(error, StorageError):
        logfire.error(f"Storage failure: {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Object storage unavailable",
        )

    if isinstance(error, DomainError):
        logfire.warn(f"Domain error: {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    logfire.error(f"Unexpected error: {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
