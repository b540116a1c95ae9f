"""
Directory UI logic.
Client-side state, list controller, forms, display helpers and API client; rendering lives elsewhere.
"""
from .client import ApiError, EmployeeApiClient
from .controller import DirectoryController
from .formatting import avatar_color, format_joining_date, format_salary, initials, status_badge
from .forms import AddEmployeeForm, EditEmployeeForm, EmployeeForm, FormPhase
from .state import DirectoryState, DirectoryStats, compute_stats, filter_employees

__all__ = [
    "ApiError",
    "EmployeeApiClient",
    "DirectoryController",
    "avatar_color",
    "format_joining_date",
    "format_salary",
    "initials",
    "status_badge",
    "AddEmployeeForm",
    "EditEmployeeForm",
    "EmployeeForm",
    "FormPhase",
    "DirectoryState",
    "DirectoryStats",
    "compute_stats",
    "filter_employees",
]
