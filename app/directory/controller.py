"""
Directory list page logic: fetch, search, filter, statistics, confirm-then-delete
and the toast shown on return from the add/edit forms.
"""
from typing import List, Optional
import logging

from app.directory.client import ApiError, EmployeeApiClient
from app.directory.formatting import format_salary
from app.directory.forms import EmployeeForm
from app.directory.state import (
    DeleteTarget,
    DirectoryState,
    DirectoryStats,
    Employee,
    Notification,
    compute_stats,
    department_options,
    filter_employees
)

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch employees"
DELETE_FAILED = "Failed to delete employee"
DELETE_SUCCEEDED = "Employee deleted successfully"


class DirectoryController:
    """
    Owns the cached employee list of one UI session.

    The cache is refreshed by load() and trimmed locally after a delete;
    nothing else mutates it.
    """

    def __init__(self, client: EmployeeApiClient, state: Optional[DirectoryState] = None):
        self.client = client
        self.state = state or DirectoryState()

    async def load(self) -> bool:
        """Fetch the full list; on failure show an error and leave the list empty."""
        self.state.loading = True
        try:
            self.state.employees = await self.client.list_employees()
        except ApiError as e:
            logger.warning(f"Employee list fetch failed: {e}")
            self.state.employees = []
            self.notify(FETCH_FAILED, "error")
            return False
        finally:
            self.state.loading = False
        return True

    async def form_saved(self, form: EmployeeForm) -> None:
        """Back from a successful add/edit: refresh the list and show the form's message."""
        if await self.load():
            self.notify(form.success_message)

    def set_search(self, term: str) -> None:
        self.state.search_term = term

    def set_department(self, department: Optional[str]) -> None:
        """Select a department; None or "" selects all departments."""
        self.state.department_filter = department or None

    def visible(self) -> List[Employee]:
        """Employees shown in the table."""
        return filter_employees(
            self.state.employees,
            self.state.search_term,
            self.state.department_filter
        )

    def stats(self) -> DirectoryStats:
        return compute_stats(self.state.employees)

    def average_salary_label(self) -> str:
        """Average salary card text, whole rupees."""
        return format_salary(self.stats().average_salary, rounded=True)

    def departments(self) -> List[str]:
        """Options of the department filter."""
        return department_options(self.state.employees)

    def request_delete(self, employee: Employee) -> DeleteTarget:
        """Open the confirmation step naming the employee."""
        self.state.delete_target = DeleteTarget(id=employee["id"], name=employee["name"])
        return self.state.delete_target

    def cancel_delete(self) -> None:
        self.state.delete_target = None

    async def confirm_delete(self) -> bool:
        """
        Delete the employee awaiting confirmation.

        Returns:
            True when the employee was deleted. On failure the cached list is
            unchanged and the confirmation stays open.
        """
        target = self.state.delete_target
        if target is None:
            return False

        try:
            await self.client.delete_employee(target.id)
        except ApiError as e:
            logger.warning(f"Delete of {target.id} failed: {e}")
            self.notify(DELETE_FAILED, "error")
            return False

        self.state.employees = [e for e in self.state.employees if e.get("id") != target.id]
        self.state.delete_target = None
        self.notify(DELETE_SUCCEEDED)
        return True

    def notify(self, message: str, kind: str = "success") -> None:
        self.state.notification = Notification(message=message, kind=kind)

    def dismiss_notification(self) -> None:
        self.state.notification = None
