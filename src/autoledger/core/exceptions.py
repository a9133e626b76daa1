"""
Domain exceptions for the AutoLedger application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class AutoLedgerError(Exception):
    """Base exception for all AutoLedger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(AutoLedgerError):
    """Base exception for storage operations."""

    pass


class VehicleNotFoundError(StorageError):
    """Vehicle not found in storage."""

    def __init__(self, vehicle_id: str):
        super().__init__(
            f"Vehicle not found: {vehicle_id}",
            code="VEHICLE_NOT_FOUND",
            details={"vehicle_id": vehicle_id},
        )


class ExpenseNotFoundError(StorageError):
    """Expense not found in storage."""

    def __init__(self, expense_id: str):
        super().__init__(
            f"Expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
            details={"expense_id": expense_id},
        )


class DuplicateRegistrationError(StorageError):
    """Another vehicle already uses the registration number."""

    def __init__(self, reg_number: str, existing_id: str | None = None):
        super().__init__(
            "Registration number already exists.",
            code="DUPLICATE_REGISTRATION",
            details={"reg_number": reg_number, "existing_id": existing_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class DealerProfileNotFoundError(StorageError):
    """No dealer profile has been saved yet."""

    def __init__(self):
        super().__init__("Dealer profile has not been set up.", code="PROFILE_NOT_FOUND")


# Lifecycle Exceptions
class VehicleStateError(AutoLedgerError):
    """Requested lifecycle transition is not allowed."""

    def __init__(self, vehicle_id: str, status: str, action: str):
        super().__init__(
            f"Cannot {action} vehicle {vehicle_id} in status {status}",
            code="INVALID_VEHICLE_STATE",
            details={"vehicle_id": vehicle_id, "status": status, "action": action},
        )


# Report Exceptions
class ReportError(AutoLedgerError):
    """Report generation failed."""

    def __init__(self, message: str = "Failed to generate report."):
        super().__init__(message, code="REPORT_FAILED")


# Validation Exceptions
class ValidationError(AutoLedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
        self.field = field


class ConfigurationError(AutoLedgerError):
    """Configuration error."""

    pass
