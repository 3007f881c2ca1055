# arm_backend/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra

class NotFoundError(BaseServiceError):
    """Raised when a requested row does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

class ConflictError(BaseServiceError):
    """Raised when a unique value is already taken."""
    status_code = status.HTTP_409_CONFLICT

class ValidationError(BaseServiceError):
    """Raised when data validation fails."""
    status_code = status.HTTP_400_BAD_REQUEST

class AuthenticationError(BaseServiceError):
    """Raised when a request carries no valid user session."""
    status_code = status.HTTP_401_UNAUTHORIZED

class AdminAuthError(BaseServiceError):
    """Raised when admin password / secret code verification fails."""
    status_code = status.HTTP_403_FORBIDDEN

class MediaTooLargeError(BaseServiceError):
    """Raised when an upload exceeds the configured size limit."""
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE

class ServiceUnavailableError(BaseServiceError):
    """Raised when an optional backing service is not configured."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

class AIServiceError(BaseServiceError):
    """Raised when the AI provider call fails."""
    pass


def _error_body(message: str, **extra) -> dict:
    return {"error": message, **extra}


async def service_error_handler(request: Request, exc: BaseServiceError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, **exc.extra))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    headers = getattr(exc, "headers", None)
    return JSONResponse(status_code=exc.status_code, content=_error_body(str(exc.detail)), headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request", details=details),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {"error": "..."} like the mobile client expects."""
    app.add_exception_handler(BaseServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
