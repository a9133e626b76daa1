"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from autoledger.application.dto.responses import ErrorResponse
from autoledger.config import get_logger
from autoledger.core.exceptions import (
    AutoLedgerError,
    ConfigurationError,
    DealerProfileNotFoundError,
    DuplicateRegistrationError,
    ExpenseNotFoundError,
    ReportError,
    StorageError,
    ValidationError,
    VehicleNotFoundError,
    VehicleStateError,
)

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred."

# Map exceptions to HTTP status codes; subclasses before their bases
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    VehicleNotFoundError: status.HTTP_404_NOT_FOUND,
    ExpenseNotFoundError: status.HTTP_404_NOT_FOUND,
    DealerProfileNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateRegistrationError: status.HTTP_409_CONFLICT,
    VehicleStateError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ReportError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Hint messages per error code
HINT_MAP: dict[str, str] = {
    "VEHICLE_NOT_FOUND": "Check the vehicle ID and try GET /api/vehicles to list vehicles.",
    "EXPENSE_NOT_FOUND": "Check the expense ID and try GET /api/vehicles/{id}/expenses.",
    "PROFILE_NOT_FOUND": "Save the dealer profile with PUT /api/settings/profile.",
    "DUPLICATE_REGISTRATION": "Another vehicle already uses this registration number.",
    "INVALID_VEHICLE_STATE": "Only AVAILABLE vehicles can be sold.",
    "VALIDATION_ERROR": "Check the request body fields and types.",
    "REPORT_FAILED": "The report could not be generated. Retry later.",
    "DATABASE_ERROR": "A database operation failed. Check server logs.",
    "CONFIGURATION_ERROR": "Check the environment variables and .env file.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    404: "The requested resource was not found. Verify the ID.",
    405: "The HTTP method is not allowed on this path.",
    409: "The request conflicts with the current state of the resource.",
    500: "An internal error occurred. Check server logs.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def status_for(exc: Exception) -> int:
    """HTTP status for an exception, 500 when unmapped."""
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """Render an exception as a standardized JSON error response."""
    status_code = status_for(exc)

    # Prefer AutoLedgerError.code, fall back to class name
    if isinstance(exc, AutoLedgerError):
        error_code = exc.code
    else:
        error_code = exc.__class__.__name__

    request_id = getattr(request.state, "request_id", None)

    if status_code >= 500:
        logger.error(
            "unhandled_exception",
            request_id=request_id,
            path=request.url.path,
            error_type=error_code,
            error=str(exc),
            traceback=traceback.format_exc(),
        )
        # Internal details stay in the logs
        message = INTERNAL_ERROR_MESSAGE
        detail = None
    else:
        logger.info(
            "request_rejected",
            request_id=request_id,
            path=request.url.path,
            error_type=error_code,
            error=str(exc),
        )
        message = exc.message if isinstance(exc, AutoLedgerError) else str(exc)
        detail = _detail_for(exc)

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=error_code,
            message=message,
            hint=_get_hint(error_code, status_code),
            detail=detail,
            path=request.url.path,
        ).model_dump(mode="json"),
    )


def _detail_for(exc: Exception) -> str | None:
    if isinstance(exc, ValidationError):
        return exc.field
    return None


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escape the route handlers to standardized
    JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            return error_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""

    @app.exception_handler(AutoLedgerError)
    async def domain_exception_handler(
        request: Request,
        exc: AutoLedgerError,
    ) -> JSONResponse:
        """Handle domain errors raised by use cases and stores."""
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors, naming every offending field."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint=HINT_MAP["VALIDATION_ERROR"],
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = _infer_error_code(exc.status_code, exc.detail or "")
        hint = _get_hint(error_code, exc.status_code)

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=hint,
                path=request.url.path,
            ).model_dump(mode="json"),
        )


def _infer_error_code(status_code: int, detail: str) -> str:
    """Infer a machine-readable error code from HTTPException detail."""
    detail_lower = detail.lower()

    if status_code == 404:
        if "vehicle" in detail_lower:
            return "VEHICLE_NOT_FOUND"
        if "expense" in detail_lower:
            return "EXPENSE_NOT_FOUND"
        return "NOT_FOUND"

    if status_code == 400:
        return "BAD_REQUEST"

    if status_code == 405:
        return "METHOD_NOT_ALLOWED"

    return "HTTP_ERROR"
