"""
Global error handling for the FastAPI application.
Domain exceptions become JSON responses with a consistent shape;
anything unexpected is logged and reported as a 500.
"""

import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from timekeeper.config import settings
from timekeeper.domain.models.base import (
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    AuthorizationError
)

logger = logging.getLogger(__name__)


# Most specific classes first
STATUS_BY_EXCEPTION = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (DuplicateEntityError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (BusinessRuleViolation, status.HTTP_400_BAD_REQUEST, "Bad Request"),
)


def error_body(error: str, message: str, code: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """Build the JSON body shared by all error responses."""
    body = {"error": error, "message": message, "code": code}
    body.update(extra)
    return body


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Reduce pydantic error details to field/message pairs."""
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        formatted.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Translate a domain exception to its HTTP status."""
    status_code, error = status.HTTP_400_BAD_REQUEST, "Bad Request"
    for exception_class, mapped_status, mapped_error in STATUS_BY_EXCEPTION:
        if isinstance(exc, exception_class):
            status_code, error = mapped_status, mapped_error
            break

    extra = {}
    if isinstance(exc, ValidationError) and exc.field:
        extra["field"] = exc.field

    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None

    logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content=error_body(error, exc.message, exc.code, **extra),
        headers=headers
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations in path, query or body are reported as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Bad Request",
            "Request validation failed",
            "VALIDATION_ERROR",
            errors=format_validation_errors(exc.errors())
        )
    )


async def pydantic_validation_handler(request: Request, exc: PydanticValidationError) -> JSONResponse:
    """DTOs built inside endpoints fail with the same shape as request validation."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Bad Request",
            "Request validation failed",
            "VALIDATION_ERROR",
            errors=format_validation_errors(exc.errors())
        )
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and validation exception handlers on the app."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Log the exception with traceback and return a generic 500 response.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = error_body("Internal Server Error", "An unexpected error occurred", "INTERNAL_ERROR")

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response
        )
