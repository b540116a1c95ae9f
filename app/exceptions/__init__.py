"""
Custom exceptions package.
"""
from app.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
    UnavailableError,
    ConfigurationError
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "UnavailableError",
    "ConfigurationError"
]
