"""
Employees router.
API endpoints for the employee directory.

ENDPOINTS:
- GET    /               - List employees (newest first)
- GET    /{employee_id}  - Employee detail
- POST   /               - Create employee
- PUT    /{employee_id}  - Replace employee fields
- DELETE /{employee_id}  - Delete employee
"""
from fastapi import APIRouter, Body, Depends, Path, status
from typing import Dict, Any
import logging

from app.database import Database, Collections
from app.repositories.employee_repository import EmployeeRepository
from app.services.employee_service import EmployeeService
from app.models.employee import (
    EmployeeEnvelope,
    EmployeeListEnvelope,
    ErrorEnvelope,
    MessageEnvelope
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Employee not found"}}
REJECTED = {400: {"model": ErrorEnvelope, "description": "Validation failed or email already exists"}}


# Dependency to get employee service
async def get_employee_service() -> EmployeeService:
    """Get employee service with injected dependencies."""
    db = Database.get_db()
    employee_repo = EmployeeRepository(db[Collections.EMPLOYEES])
    return EmployeeService(employee_repo)


@router.get(
    "",
    response_model=EmployeeListEnvelope,
    summary="List employees",
    description="All employees, most recently created first"
)
@router.get("/", response_model=EmployeeListEnvelope, include_in_schema=False)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeListEnvelope:
    """List every employee."""
    employees = await service.list_employees()
    return EmployeeListEnvelope(count=len(employees), data=employees)


@router.get(
    "/{employee_id}",
    response_model=EmployeeEnvelope,
    responses=NOT_FOUND,
    summary="Get employee"
)
async def get_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeEnvelope:
    """Get a single employee by ID."""
    employee = await service.get_employee(employee_id)
    return EmployeeEnvelope(data=employee)


@router.post(
    "",
    response_model=EmployeeEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=REJECTED,
    summary="Create employee"
)
@router.post(
    "/",
    response_model=EmployeeEnvelope,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False
)
async def create_employee(
    payload: Dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeEnvelope:
    """
    Create a new employee.

    **Request Body:**
    - **name**, **email**, **phone**, **position**: non-empty text
    - **department**: Engineering, Marketing, Sales, HR, Finance, Operations, Design or Other
    - **salary**: number >= 0
    - **joiningDate**: ISO date (YYYY-MM-DD)
    - **status**: Active (default), Inactive or On Leave

    **Raises:**
    - 400: If a field is invalid or the email already exists
    """
    employee = await service.create_employee(payload)
    return EmployeeEnvelope(data=employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeEnvelope,
    responses={**NOT_FOUND, **REJECTED},
    summary="Update employee"
)
async def update_employee(
    employee_id: str = Path(..., description="Employee ID"),
    payload: Dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeEnvelope:
    """
    Replace all editable fields of an employee.

    Partial updates are not supported: send the complete set of fields.
    Only **status** may be left out, which keeps the current status.
    """
    employee = await service.update_employee(employee_id, payload)
    return EmployeeEnvelope(data=employee)


@router.delete(
    "/{employee_id}",
    response_model=MessageEnvelope,
    responses=NOT_FOUND,
    summary="Delete employee"
)
async def delete_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
) -> MessageEnvelope:
    """Delete an employee permanently."""
    await service.delete_employee(employee_id)
    return MessageEnvelope(message="Employee deleted successfully")
