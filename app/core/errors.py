"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
app.main turn them into JSON responses of the form
{"detail": <message>, "error": <kind>}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced directly to the caller."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind = "service_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class AuthenticationRequired(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "authentication_required"

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(detail)


class AuthorizationError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    kind = "authorization_error"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "validation_error"


class OperationFailedError(ServiceError):
    """A persistence write failed; wraps the underlying cause via __cause__."""
    kind = "operation_failed"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"Operation failed: method={request.method}, path={request.url.path}, "
            f"detail={exc.detail}, cause={exc.__cause__!r}"
        )
    else:
        logger.info(
            f"Request rejected: method={request.method}, path={request.url.path}, "
            f"error={exc.kind}, detail={exc.detail}"
        )

    headers = None
    if isinstance(exc, AuthenticationRequired):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": exc.kind},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
