"""
Employee validation rules.

One rule table shared by the API service (authoritative check before
persistence) and the directory forms (pre-check before any network call).
Field names are the wire names used in JSON payloads.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
import math
import re

DEPARTMENTS: Tuple[str, ...] = (
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Operations",
    "Design",
    "Other",
)

STATUSES: Tuple[str, ...] = ("Active", "Inactive", "On Leave")

DEFAULT_STATUS = "Active"

# local-part@domain.tld, not RFC complete
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

EDITABLE_FIELDS: Tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "department",
    "position",
    "salary",
    "joiningDate",
    "status",
)

Check = Callable[[Any], Optional[str]]


def parse_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date.

    Accepts date/datetime objects, ISO dates ("2024-01-15") and ISO
    datetimes ("2024-01-15T00:00:00.000Z"). Returns None when unparsable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _text(label: str) -> Check:
    def check(value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return f"{label} must be text"
        return None
    return check


def _email_shape(value: Any) -> Optional[str]:
    if not EMAIL_PATTERN.fullmatch(value.strip()):
        return "Enter a valid email"
    return None


def _one_of(choices: Tuple[str, ...], message: str) -> Check:
    def check(value: Any) -> Optional[str]:
        if value not in choices:
            return message
        return None
    return check


def _salary(value: Any) -> Optional[str]:
    number = parse_number(value)
    if number is None:
        return "Salary must be a number"
    if number < 0:
        return "Salary cannot be negative"
    return None


def _joining_date(value: Any) -> Optional[str]:
    if parse_date(value) is None:
        return "Joining date must be a valid date"
    return None


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for one payload field."""

    field: str
    required_message: Optional[str]
    checks: Tuple[Check, ...] = ()

    @property
    def required(self) -> bool:
        return self.required_message is not None


EMPLOYEE_RULES: Tuple[FieldRule, ...] = (
    FieldRule("name", "Name is required", (_text("Name"),)),
    FieldRule("email", "Email is required", (_text("Email"), _email_shape)),
    FieldRule("phone", "Phone is required", (_text("Phone"),)),
    FieldRule(
        "department",
        "Department is required",
        (_one_of(DEPARTMENTS, "Select a valid department"),),
    ),
    FieldRule("position", "Position is required", (_text("Position"),)),
    FieldRule("salary", "Salary is required", (_salary,)),
    FieldRule("joiningDate", "Joining date is required", (_joining_date,)),
    # optional, defaults to DEFAULT_STATUS
    FieldRule("status", None, (_one_of(STATUSES, "Select a valid status"),)),
)


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after trimming."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_field(rule: FieldRule, value: Any) -> Optional[str]:
    """Apply a single rule and return its error message, if any."""
    if is_blank(value):
        return rule.required_message
    for check in rule.checks:
        message = check(value)
        if message:
            return message
    return None


def validate_employee(payload: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate a candidate employee payload.

    Args:
        payload: Mapping keyed by wire field names

    Returns:
        Empty dict when valid, otherwise field name -> error message
    """
    errors: Dict[str, str] = {}
    for rule in EMPLOYEE_RULES:
        message = validate_field(rule, payload.get(rule.field))
        if message:
            errors[rule.field] = message
    return errors


def normalize_employee(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Canonical editable fields of a payload that passed validate_employee.

    Strings are trimmed, email is lowercased, salary becomes a float,
    joiningDate a date, and a missing status becomes DEFAULT_STATUS.
    Fields outside EDITABLE_FIELDS are dropped.
    """
    status = payload.get("status")
    return {
        "name": payload["name"].strip(),
        "email": payload["email"].strip().lower(),
        "phone": payload["phone"].strip(),
        "department": payload["department"],
        "position": payload["position"].strip(),
        "salary": parse_number(payload["salary"]),
        "joiningDate": parse_date(payload["joiningDate"]),
        "status": DEFAULT_STATUS if is_blank(status) else status,
    }
