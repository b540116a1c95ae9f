"""
Employee repository.
Data access layer for employee operations.
"""
from typing import List, Dict, Any, Optional
import logging

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from .base_repository import BaseRepository, to_object_id
from app.exceptions import ConflictError

logger = logging.getLogger(__name__)

# Newest first; _id breaks ties between inserts in the same millisecond
NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""

    async def ensure_indexes(self) -> None:
        """Create the unique email index and the listing index."""
        try:
            await self.collection.create_index([("email", ASCENDING)], unique=True, name="uq_employees_email")
            await self.collection.create_index([("created_at", DESCENDING)], name="ix_employees_created_at")
        except PyMongoError as e:
            raise self._unavailable("create_index", e) from e
        logger.info(f"Indexes ensured on {self.collection.name}")

    async def email_exists(
        self,
        email: str,
        exclude_id: Optional[str] = None
    ) -> bool:
        """
        Check if an email is already used.

        Args:
            email: Normalized (lowercased) email
            exclude_id: Optional employee ID to exclude from check

        Returns:
            True if another employee has this email
        """
        query: Dict[str, Any] = {"email": email}

        object_id = to_object_id(exclude_id) if exclude_id else None
        if object_id is not None:
            query["_id"] = {"$ne": object_id}

        return await self.exists(query)

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create employee with duplicate check.

        Args:
            employee_data: Normalized employee document

        Returns:
            Created employee document

        Raises:
            ConflictError: If the email already exists
        """
        email = employee_data["email"]

        if await self.email_exists(email):
            raise ConflictError("email", email)

        try:
            return await self.create(employee_data)
        except DuplicateKeyError as e:
            # lost a race with a concurrent insert; the index is authoritative
            raise ConflictError("email", email) from e

    async def update_employee(
        self,
        employee_id: str,
        employee_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Replace the editable fields of an employee.

        Returns:
            Updated document, or None if the employee does not exist

        Raises:
            ConflictError: If the new email belongs to another employee
        """
        email = employee_data["email"]

        if await self.email_exists(email, exclude_id=employee_id):
            raise ConflictError("email", email)

        try:
            return await self.update(employee_id, employee_data)
        except DuplicateKeyError as e:
            raise ConflictError("email", email) from e

    async def find_newest_first(self) -> List[Dict[str, Any]]:
        """All employees, most recently created first."""
        return await self.find_all(sort=NEWEST_FIRST)
