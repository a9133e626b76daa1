"""API middleware."""

from autoledger.api.middleware.error_handler import (
    ErrorHandlerMiddleware,
    setup_exception_handlers,
)
from autoledger.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware", "setup_exception_handlers"]
