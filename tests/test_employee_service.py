"""
Test the employee service rules on top of the repository.
"""
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from app.exceptions import ConflictError, NotFoundError, ValidationError
from app.services.employee_service import EmployeeService
from conftest import make_payload


@pytest.fixture
def service(employee_repo):
    return EmployeeService(employee_repo)


class TestCreateEmployee:

    async def test_defaults_status_to_active(self, service):
        employee = await service.create_employee(make_payload())

        assert employee.status == "Active"
        assert employee.created_at == employee.updated_at

    async def test_normalizes_email_and_text(self, service, employees):
        employee = await service.create_employee(
            make_payload(name="  Asha Rao ", email="  Asha@Example.COM ", position=" Engineer ")
        )

        assert employee.email == "asha@example.com"
        assert employee.name == "Asha Rao"
        assert employee.position == "Engineer"
        assert employees.data[0]["email"] == "asha@example.com"

    async def test_joining_date_stored_as_midnight_utc(self, service, employees):
        employee = await service.create_employee(make_payload(joiningDate="2024-01-15"))

        assert employee.joining_date == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert employees.data[0]["joining_date"] == datetime(2024, 1, 15, tzinfo=timezone.utc)

    async def test_salary_string_is_stored_as_number(self, service, employees):
        await service.create_employee(make_payload(salary="45000"))

        assert employees.data[0]["salary"] == 45000.0

    async def test_rejects_negative_salary(self, service, employees):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_employee(make_payload(salary=-1))

        assert exc_info.value.errors == {"salary": "Salary cannot be negative"}
        assert employees.data == []

    async def test_rejects_missing_fields(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.create_employee({"name": "Asha"})

        assert set(exc_info.value.errors) == {
            "email", "phone", "department", "position", "salary", "joiningDate"
        }
        assert exc_info.value.status_code == 400

    async def test_email_uniqueness_ignores_case(self, service, employees):
        await service.create_employee(make_payload(email="asha@example.com"))

        with pytest.raises(ConflictError):
            await service.create_employee(make_payload(name="Other", email="ASHA@example.com"))

        assert len(employees.data) == 1


class TestUpdateEmployee:

    async def test_replaces_fields(self, service):
        created = await service.create_employee(make_payload())

        updated = await service.update_employee(
            created.id, make_payload(position="Lead", status="On Leave")
        )

        assert updated.id == created.id
        assert updated.position == "Lead"
        assert updated.status == "On Leave"
        assert updated.created_at == created.created_at

    async def test_missing_status_keeps_stored_status(self, service, employees):
        created = await service.create_employee(make_payload(status="On Leave"))

        updated = await service.update_employee(created.id, make_payload(position="Lead"))

        assert updated.status == "On Leave"
        assert updated.position == "Lead"
        assert employees.data[0]["status"] == "On Leave"

    async def test_invalid_department_leaves_record_unchanged(self, service, employees):
        created = await service.create_employee(make_payload())
        before = dict(employees.data[0])

        with pytest.raises(ValidationError) as exc_info:
            await service.update_employee(created.id, make_payload(department="Legal"))

        assert exc_info.value.errors == {"department": "Select a valid department"}
        assert employees.data[0] == before

    async def test_rejects_negative_salary(self, service):
        created = await service.create_employee(make_payload())

        with pytest.raises(ValidationError):
            await service.update_employee(created.id, make_payload(salary=-1))

    async def test_email_of_another_employee_is_a_conflict(self, service):
        await service.create_employee(make_payload(email="a@x.com"))
        other = await service.create_employee(make_payload(email="b@x.com"))

        with pytest.raises(ConflictError):
            await service.update_employee(other.id, make_payload(email="A@X.com"))

    async def test_unknown_id_is_not_found_before_validation(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.update_employee(str(ObjectId()), {})

        assert exc_info.value.message == "Employee not found"
        assert exc_info.value.status_code == 404


class TestLookups:

    async def test_list_newest_first(self, service):
        first = await service.create_employee(make_payload(email="a@x.com"))
        second = await service.create_employee(make_payload(email="b@x.com"))

        employees = await service.list_employees()

        assert [e.id for e in employees] == [second.id, first.id]

    async def test_list_empty(self, service):
        assert await service.list_employees() == []

    async def test_get_unknown(self, service):
        with pytest.raises(NotFoundError):
            await service.get_employee(str(ObjectId()))

    async def test_get_malformed_id(self, service):
        with pytest.raises(NotFoundError):
            await service.get_employee("not-an-id")

    async def test_delete(self, service):
        created = await service.create_employee(make_payload())

        await service.delete_employee(created.id)

        with pytest.raises(NotFoundError):
            await service.get_employee(created.id)
        with pytest.raises(NotFoundError):
            await service.delete_employee(created.id)
