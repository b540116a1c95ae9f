"""
Employee service.
Business logic for the employee directory: validation, uniqueness and lookups.
"""
from typing import List, Dict, Any, Mapping
import logging

from app.repositories.employee_repository import EmployeeRepository
from app.exceptions import NotFoundError, ValidationError
from app.models.employee import EmployeeCreate, EmployeeResponse
from app.utils.validators import is_blank, normalize_employee, validate_employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, employee_repo: EmployeeRepository):
        """
        Initialize employee service.

        Args:
            employee_repo: Employee repository instance
        """
        self.employee_repo = employee_repo

    def _prepare(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate a payload with the shared rules and build the stored document.

        Raises:
            ValidationError: If any field fails its rule
        """
        errors = validate_employee(payload)
        if errors:
            logger.info(f"Rejected employee payload: {sorted(errors)}")
            raise ValidationError(errors)

        employee = EmployeeCreate.model_validate(normalize_employee(payload))
        return employee.to_document()

    async def list_employees(self) -> List[EmployeeResponse]:
        """All employees, newest-created first."""
        documents = await self.employee_repo.find_newest_first()
        return [EmployeeResponse.from_document(doc) for doc in documents]

    async def get_employee(self, employee_id: str) -> EmployeeResponse:
        """
        Get employee by ID.

        Raises:
            NotFoundError: If no employee has this id
        """
        document = await self.employee_repo.find_by_id(employee_id)
        if not document:
            raise NotFoundError("Employee", employee_id)
        return EmployeeResponse.from_document(document)

    async def create_employee(self, payload: Mapping[str, Any]) -> EmployeeResponse:
        """
        Create a new employee.

        Args:
            payload: Editable fields keyed by wire name

        Returns:
            The created employee with id and timestamps

        Raises:
            ValidationError: If data is invalid
            ConflictError: If the email already exists
        """
        document = self._prepare(payload)
        logger.info(f"Creating employee: {document['name']} <{document['email']}>")

        created = await self.employee_repo.create_employee(document)

        logger.info(f"Employee created: {created['id']}")
        return EmployeeResponse.from_document(created)

    async def update_employee(
        self,
        employee_id: str,
        payload: Mapping[str, Any]
    ) -> EmployeeResponse:
        """
        Replace every editable field of an employee.

        The payload is validated exactly as on create; the record is left
        untouched when anything is rejected. A payload without ``status``
        keeps the current status.

        Raises:
            NotFoundError: If no employee has this id
            ValidationError: If data is invalid
            ConflictError: If the email belongs to another employee
        """
        existing = await self.employee_repo.find_by_id(employee_id)
        if not existing:
            raise NotFoundError("Employee", employee_id)

        # status left out of the payload keeps the stored value
        if is_blank(payload.get("status")):
            payload = {**payload, "status": existing.get("status")}

        document = self._prepare(payload)
        updated = await self.employee_repo.update_employee(employee_id, document)

        # deleted between the lookup and the write
        if not updated:
            raise NotFoundError("Employee", employee_id)

        logger.info(f"Employee updated: {employee_id}")
        return EmployeeResponse.from_document(updated)

    async def delete_employee(self, employee_id: str) -> None:
        """
        Delete an employee permanently.

        Raises:
            NotFoundError: If no employee has this id
        """
        if not await self.employee_repo.delete(employee_id):
            raise NotFoundError("Employee", employee_id)
        logger.info(f"Employee deleted: {employee_id}")
