"""
Directory view state and the pure functions deriving what the list page shows.
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

Employee = Dict[str, Any]

SEARCH_FIELDS = ("name", "email", "position")


class Notification(BaseModel):
    """Transient success/error toast."""

    message: str
    kind: Literal["success", "error"] = "success"


class DeleteTarget(BaseModel):
    """Employee awaiting delete confirmation."""

    id: str
    name: str


class DirectoryStats(BaseModel):
    """Figures shown above the employee table."""

    total: int
    active: int
    departments: int
    average_salary: Optional[float] = None


class DirectoryState(BaseModel):
    """Serializable state of one directory session."""

    employees: List[Employee] = Field(default_factory=list)
    search_term: str = ""
    # None means "all departments"
    department_filter: Optional[str] = None
    loading: bool = False
    delete_target: Optional[DeleteTarget] = None
    notification: Optional[Notification] = None


def matches_search(employee: Employee, search_term: str) -> bool:
    """Case-insensitive substring match on name, email or position."""
    term = search_term.lower()
    return any(term in str(employee.get(field) or "").lower() for field in SEARCH_FIELDS)


def filter_employees(
    employees: List[Employee],
    search_term: str = "",
    department: Optional[str] = None
) -> List[Employee]:
    """Employees matching the search term AND the department filter."""
    return [
        employee for employee in employees
        if matches_search(employee, search_term)
        and (not department or employee.get("department") == department)
    ]


def department_options(employees: List[Employee]) -> List[str]:
    """Distinct departments present in the list, in first-seen order."""
    seen: List[str] = []
    for employee in employees:
        department = employee.get("department")
        if department and department not in seen:
            seen.append(department)
    return seen


def compute_stats(employees: List[Employee]) -> DirectoryStats:
    """Totals over the cached (unfiltered) list."""
    total = len(employees)
    average = None
    if total:
        average = sum(float(e.get("salary") or 0) for e in employees) / total
    return DirectoryStats(
        total=total,
        active=sum(1 for e in employees if e.get("status") == "Active"),
        departments=len(department_options(employees)),
        average_salary=average,
    )
