"""Interface layer errors and their HTTP translation."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logfire

from kiiaren.domain.error import (
    AccessDeniedError,
    BusinessRuleViolationError,
    DomainError,
    JoinCodeDisabledError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class NotAuthenticatedError(InterfaceError):
    """Missing, invalid or expired session token."""

    pass


# Looked up along the exception MRO, most specific class first
ERROR_STATUS_CODES: dict[type[Exception], int] = {
    NotAuthenticatedError: status.HTTP_401_UNAUTHORIZED,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    JoinCodeDisabledError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    BusinessRuleViolationError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DomainError: status.HTTP_400_BAD_REQUEST,
}


async def _handle_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = status.HTTP_400_BAD_REQUEST
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            status_code = ERROR_STATUS_CODES[cls]
            break
    logfire.info(
        "Request failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain and interface errors to HTTP responses.

    Args:
        app: FastAPI application
    """
    for error_class in ERROR_STATUS_CODES:
        app.add_exception_handler(error_class, _handle_error)
