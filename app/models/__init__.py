"""
Models package.
Pydantic schemas for all entities.
"""
from .employee import (
    Department,
    EmployeeStatus,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeEnvelope,
    EmployeeListEnvelope,
    MessageEnvelope,
    ErrorEnvelope
)

__all__ = [
    "Department",
    "EmployeeStatus",
    "EmployeeCreate",
    "EmployeeResponse",
    "EmployeeEnvelope",
    "EmployeeListEnvelope",
    "MessageEnvelope",
    "ErrorEnvelope",
]
