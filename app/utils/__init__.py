"""
Utilities package.
Provides logging helpers and the shared validation rules.
"""
from .logger import setup_logging, log_database_operation
from .validators import (
    DEPARTMENTS,
    STATUSES,
    DEFAULT_STATUS,
    EMPLOYEE_RULES,
    validate_employee,
    normalize_employee
)

__all__ = [
    "setup_logging",
    "log_database_operation",
    "DEPARTMENTS",
    "STATUSES",
    "DEFAULT_STATUS",
    "EMPLOYEE_RULES",
    "validate_employee",
    "normalize_employee"
]
