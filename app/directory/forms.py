"""
Add/edit employee form state machines.

    Editing -> Submitting -> Success
                          -> Editing (server error shown, values kept)

The edit form starts in Loading and moves to Editing, or to the terminal
LoadError when the record cannot be fetched.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional
import logging

from app.directory.client import ApiError, EmployeeApiClient
from app.utils.validators import DEFAULT_STATUS, EDITABLE_FIELDS, parse_number, validate_employee

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load employee data."


class FormPhase(str, Enum):
    LOADING = "loading"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    LOAD_ERROR = "load_error"


def empty_form() -> Dict[str, Any]:
    values: Dict[str, Any] = {field: "" for field in EDITABLE_FIELDS}
    values["status"] = DEFAULT_STATUS
    return values


def form_values_from(employee: Dict[str, Any]) -> Dict[str, Any]:
    """Form values for an employee returned by the API; joiningDate keeps only its date part."""
    values = empty_form()
    for field in EDITABLE_FIELDS:
        value = employee.get(field)
        if value is not None:
            values[field] = value
    if values["joiningDate"]:
        values["joiningDate"] = str(values["joiningDate"]).split("T")[0]
    return values


class EmployeeForm(ABC):
    """Shared behaviour of the add and edit forms."""

    # toast shown on the list after a successful submit
    success_message = ""
    # form-level message when the server gives none
    failure_message = ""

    def __init__(self, client: EmployeeApiClient):
        self.client = client
        self.values: Dict[str, Any] = empty_form()
        self.errors: Dict[str, str] = {}
        self.server_error = ""
        self.phase = FormPhase.EDITING
        self.saved: Optional[Dict[str, Any]] = None

    def set_field(self, field: str, value: Any) -> None:
        """Update a field and clear its error."""
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value
        self.errors.pop(field, None)

    def validate(self) -> Dict[str, str]:
        self.errors = validate_employee(self.values)
        return self.errors

    def payload(self) -> Dict[str, Any]:
        """Values as sent to the API, salary converted to a number."""
        payload = dict(self.values)
        number = parse_number(payload["salary"])
        if number is not None:
            payload["salary"] = number
        return payload

    @abstractmethod
    async def _send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create or update on the server; returns the saved employee."""

    async def submit(self) -> bool:
        """
        Validate, then submit a fully valid payload.

        Returns:
            True when the server accepted the employee (phase SUCCESS).
        """
        if self.phase != FormPhase.EDITING:
            return False
        if self.validate():
            return False

        self.phase = FormPhase.SUBMITTING
        self.server_error = ""
        try:
            self.saved = await self._send(self.payload())
        except ApiError as e:
            logger.info(f"{type(self).__name__} submission rejected: {e}")
            self.server_error = e.server_message or self.failure_message
            self.errors.update(e.errors)
            self.phase = FormPhase.EDITING
            return False

        self.phase = FormPhase.SUCCESS
        return True


class AddEmployeeForm(EmployeeForm):
    success_message = "Employee added successfully!"
    failure_message = "Failed to add employee. Please try again."

    async def _send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.create_employee(payload)


class EditEmployeeForm(EmployeeForm):
    success_message = "Employee updated successfully!"
    failure_message = "Failed to update employee. Please try again."

    def __init__(self, client: EmployeeApiClient, employee_id: str):
        super().__init__(client)
        self.employee_id = employee_id
        self.phase = FormPhase.LOADING

    async def load(self) -> bool:
        """Fetch the record being edited. No retry on failure."""
        if self.phase != FormPhase.LOADING:
            return self.phase == FormPhase.EDITING
        try:
            employee = await self.client.get_employee(self.employee_id)
        except ApiError as e:
            logger.warning(f"Loading employee {self.employee_id} failed: {e}")
            self.server_error = LOAD_FAILED
            self.phase = FormPhase.LOAD_ERROR
            return False

        self.values = form_values_from(employee)
        self.phase = FormPhase.EDITING
        return True

    async def _send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.update_employee(self.employee_id, payload)
