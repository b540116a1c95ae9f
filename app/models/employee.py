"""
Employee models.
Wire schemas (camelCase) and the stored document shape (snake_case).
"""
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.utils.validators import DEFAULT_STATUS


class Department(str, Enum):
    """Fixed department enumeration."""

    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
    SALES = "Sales"
    HR = "HR"
    FINANCE = "Finance"
    OPERATIONS = "Operations"
    DESIGN = "Design"
    OTHER = "Other"


class EmployeeStatus(str, Enum):
    """Employment status enumeration."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"


class WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class EmployeeCreate(WireModel):
    """
    Normalized editable fields of an employee.

    Built from a payload that already passed the shared rule table, so the
    constraints here only restate the invariants of a stored record.
    """

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    department: Department
    position: str = Field(..., min_length=1)
    salary: float = Field(..., ge=0)
    joining_date: date
    status: EmployeeStatus = Field(default=EmployeeStatus(DEFAULT_STATUS), validate_default=True)

    def to_document(self) -> Dict[str, Any]:
        """Stored shape: snake_case keys, joining date as midnight UTC."""
        document = self.model_dump()
        document["joining_date"] = datetime.combine(
            self.joining_date, time.min, tzinfo=timezone.utc
        )
        return document


class EmployeeResponse(WireModel):
    """Employee as returned by the API."""

    id: str
    name: str
    email: str
    phone: str
    department: str
    position: str
    salary: float
    joining_date: datetime
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "EmployeeResponse":
        """Build from a repository document (``_id`` already mapped to ``id``)."""
        return cls.model_validate(document)


class EmployeeEnvelope(BaseModel):
    """`{success, data}` response for a single employee."""

    success: bool = True
    data: EmployeeResponse


class EmployeeListEnvelope(BaseModel):
    """`{success, count, data}` response for the employee list."""

    success: bool = True
    count: int
    data: List[EmployeeResponse]


class MessageEnvelope(BaseModel):
    """`{success, message}` response."""

    success: bool = True
    message: str


class ErrorEnvelope(BaseModel):
    """`{success: false, message, errors?}` error response."""

    success: bool = False
    message: str
    errors: Optional[Dict[str, str]] = None
