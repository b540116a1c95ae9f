"""
Custom exceptions for the application.
Provides specific exception types for different error scenarios.
"""
from typing import Optional, Any, Dict


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """
    Validation error (400).

    Carries the field -> message mapping produced by the rule table,
    so callers can correct each field and retry.
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        if message is None:
            message = "Validation failed: " + ", ".join(self.errors.values())
        super().__init__(message, status_code=400, details={"errors": self.errors})


class NotFoundError(AppError):
    """Resource not found error (404)."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        super().__init__(message, status_code=404, details={"resource": resource, "identifier": identifier})


class ConflictError(AppError):
    """
    Duplicate unique key (400).

    The wire contract reports conflicts with the same status as validation
    failures but with a distinct message.
    """

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        if message is None:
            message = f"{field.capitalize()} already exists"
        super().__init__(
            message,
            status_code=400,
            details={"field": field, "value": value}
        )


class UnavailableError(AppError):
    """Storage or transport failure (500)."""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppError):
    """Configuration/setup error (500)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
