"""
HTTP client for the employee REST API, used by the directory UI logic.
"""
from typing import Any, Dict, List, Optional
import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8001/api"


class ApiError(Exception):
    """
    A rejected or failed API call.

    ``server_message`` is the ``message`` of the error envelope when the
    server answered; it is None for transport failures.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.server_message = server_message
        self.errors = errors or {}
        super().__init__(message)


class EmployeeApiClient:
    """Async client for the /employees endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0
    ):
        """
        Args:
            base_url: API root, e.g. http://localhost:8001/api
            client: Pre-built httpx client (its base_url is used as is)
            timeout: Request timeout in seconds for the default client
        """
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "EmployeeApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ApiError("Network error") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error or not body.get("success"):
            server_message = body.get("message")
            logger.info(f"{method} {path} rejected with {response.status_code}: {server_message}")
            raise ApiError(
                server_message or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                server_message=server_message,
                errors=body.get("errors")
            )
        return body

    async def list_employees(self) -> List[Dict[str, Any]]:
        """All employees, newest first."""
        body = await self._request("GET", "/employees")
        return body.get("data", [])

    async def get_employee(self, employee_id: str) -> Dict[str, Any]:
        body = await self._request("GET", f"/employees/{employee_id}")
        return body["data"]

    async def create_employee(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self._request("POST", "/employees", payload)
        return body["data"]

    async def update_employee(self, employee_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        body = await self._request("PUT", f"/employees/{employee_id}", payload)
        return body["data"]

    async def delete_employee(self, employee_id: str) -> str:
        body = await self._request("DELETE", f"/employees/{employee_id}")
        return body.get("message", "")
