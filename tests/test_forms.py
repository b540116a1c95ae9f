"""
Test the add/edit employee forms.
"""
import httpx
import pytest
from bson import ObjectId

from app.directory.client import EmployeeApiClient
from app.directory.forms import (
    LOAD_FAILED,
    AddEmployeeForm,
    EditEmployeeForm,
    EmployeeForm,
    FormPhase,
    empty_form,
    form_values_from
)
from conftest import make_payload


class CountingTransport(httpx.MockTransport):
    """MockTransport that records every request it serves."""

    def __init__(self, status_code=201, body=None):
        self.requests = []
        body = body if body is not None else {"success": True, "data": {"id": "1"}}

        def handler(request):
            self.requests.append(request)
            return httpx.Response(status_code, json=body)

        super().__init__(handler)


def client_over(transport):
    return EmployeeApiClient(client=httpx.AsyncClient(transport=transport, base_url="http://api.test/api"))


def fill(form, **overrides):
    for field, value in make_payload(**overrides).items():
        form.set_field(field, value)


class TestAddEmployeeForm:

    def test_starts_empty_with_active_status(self):
        form = AddEmployeeForm(client_over(CountingTransport()))

        assert form.phase == FormPhase.EDITING
        assert form.values == empty_form()
        assert form.values["status"] == "Active"

    async def test_invalid_form_makes_no_request(self):
        transport = CountingTransport()
        form = AddEmployeeForm(client_over(transport))
        fill(form, email="nope", salary="-3")

        assert await form.submit() is False

        assert transport.requests == []
        assert form.phase == FormPhase.EDITING
        assert form.errors == {"email": "Enter a valid email", "salary": "Salary cannot be negative"}

    async def test_empty_form_reports_required_fields(self):
        transport = CountingTransport()
        form = AddEmployeeForm(client_over(transport))

        assert await form.submit() is False
        assert form.errors["name"] == "Name is required"
        assert form.errors["joiningDate"] == "Joining date is required"
        assert "status" not in form.errors
        assert transport.requests == []

    async def test_editing_a_field_clears_its_error(self):
        form = AddEmployeeForm(client_over(CountingTransport()))
        await form.submit()

        form.set_field("name", "Asha")

        assert "name" not in form.errors
        assert "email" in form.errors

    def test_base_form_is_abstract(self):
        with pytest.raises(TypeError):
            EmployeeForm(client_over(CountingTransport()))

    def test_success_messages(self):
        assert AddEmployeeForm.success_message == "Employee added successfully!"
        assert EditEmployeeForm.success_message == "Employee updated successfully!"

    def test_unknown_field(self):
        form = AddEmployeeForm(client_over(CountingTransport()))
        with pytest.raises(KeyError):
            form.set_field("role", "admin")

    async def test_submit_sends_numeric_salary(self):
        transport = CountingTransport()
        form = AddEmployeeForm(client_over(transport))
        fill(form, salary="52000")

        assert await form.submit() is True

        assert form.phase == FormPhase.SUCCESS
        assert form.saved == {"id": "1"}
        assert len(transport.requests) == 1
        request = transport.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/employees"
        assert b'"salary":52000.0' in request.content.replace(b" ", b"")

    async def test_server_rejection_keeps_values(self, api_client):
        await api_client.create_employee(make_payload())
        form = AddEmployeeForm(api_client)
        fill(form, name="Someone Else")

        assert await form.submit() is False

        assert form.phase == FormPhase.EDITING
        assert form.server_error == "Email already exists"
        assert form.values["name"] == "Someone Else"

    async def test_transport_failure_uses_generic_message(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        form = AddEmployeeForm(client_over(httpx.MockTransport(handler)))
        fill(form)

        assert await form.submit() is False
        assert form.server_error == "Failed to add employee. Please try again."
        assert form.phase == FormPhase.EDITING

    async def test_submit_creates_employee(self, api_client, employees):
        form = AddEmployeeForm(api_client)
        fill(form, email="new@x.com")

        assert await form.submit() is True
        assert form.saved["email"] == "new@x.com"
        assert len(employees.data) == 1

    async def test_no_resubmit_after_success(self):
        transport = CountingTransport()
        form = AddEmployeeForm(client_over(transport))
        fill(form)

        assert await form.submit() is True
        assert await form.submit() is False
        assert len(transport.requests) == 1


class TestEditEmployeeForm:

    def test_form_values_truncate_joining_date(self):
        values = form_values_from({**make_payload(), "id": "x", "joiningDate": "2024-01-15T00:00:00Z"})

        assert values["joiningDate"] == "2024-01-15"
        assert "id" not in values

    async def test_load_then_update(self, api_client):
        created = await api_client.create_employee(make_payload())
        form = EditEmployeeForm(api_client, created["id"])
        assert form.phase == FormPhase.LOADING
        assert await form.submit() is False

        assert await form.load() is True
        assert form.phase == FormPhase.EDITING
        assert form.values["joiningDate"] == "2024-01-15"
        assert form.values["salary"] == 50000

        form.set_field("position", "Lead")
        assert await form.submit() is True
        assert form.saved["position"] == "Lead"
        assert form.saved["id"] == created["id"]

    async def test_load_failure_is_terminal(self, api_client):
        form = EditEmployeeForm(api_client, str(ObjectId()))

        assert await form.load() is False

        assert form.phase == FormPhase.LOAD_ERROR
        assert form.server_error == LOAD_FAILED
        assert await form.submit() is False
        assert await form.load() is False

    async def test_update_rejection_shows_server_message(self, api_client):
        created = await api_client.create_employee(make_payload())
        form = EditEmployeeForm(api_client, created["id"])
        await form.load()
        # passes the local rules, rejected by the server as a duplicate
        other = await api_client.create_employee(make_payload(email="other@x.com"))
        form.set_field("email", other["email"])

        assert await form.submit() is False
        assert form.server_error == "Email already exists"
        assert form.phase == FormPhase.EDITING
