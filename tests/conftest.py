"""
Test configuration and fixtures for pytest.

The API runs in-process over httpx.ASGITransport against an in-memory
MongoDB double that honours unique indexes.
"""
import copy
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.database import Database, Collections
from app.directory.client import EmployeeApiClient
from app.main import create_app
from app.repositories.employee_repository import EmployeeRepository


class MockCursor:
    """Mock Motor cursor"""

    def __init__(self, data):
        self.data = data

    def sort(self, keys):
        # stable sorts applied from the last key to the first
        for field, direction in reversed(keys):
            self.data.sort(key=lambda doc: doc.get(field), reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self.data[:length] if length else self.data


class MockCollection:
    """Mock MongoDB collection"""

    def __init__(self, name: str):
        self.name = name
        self.data: List[Dict[str, Any]] = []
        self.unique_fields: List[str] = []
        # set to an exception instance to simulate an unreachable server
        self.fail_with: Optional[Exception] = None

    def _check_available(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, doc, ignore_id=None):
        for field in self.unique_fields:
            for other in self.data:
                if other["_id"] != ignore_id and field in doc and other.get(field) == doc[field]:
                    raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} dup key: {{ {field}: \"{doc[field]}\" }}", 11000)

    def _matches(self, doc, query):
        for key, value in query.items():
            if isinstance(value, dict):
                for op, val in value.items():
                    if op == "$ne" and doc.get(key) == val:
                        return False
            elif doc.get(key) != value:
                return False
        return True

    async def create_index(self, keys, unique=False, name=None):
        self._check_available()
        if unique:
            self.unique_fields.append(keys[0][0])
        return name

    async def insert_one(self, doc):
        self._check_available()
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self._check_unique(doc)
        self.data.append(doc)
        return MagicMock(inserted_id=doc["_id"])

    async def find_one(self, query):
        self._check_available()
        for doc in self.data:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query):
        self._check_available()
        return MockCursor([copy.deepcopy(doc) for doc in self.data if self._matches(doc, query)])

    async def count_documents(self, query, limit=None):
        self._check_available()
        count = sum(1 for doc in self.data if self._matches(doc, query))
        return min(count, limit) if limit else count

    async def find_one_and_update(self, query, update, return_document=False):
        self._check_available()
        for doc in self.data:
            if self._matches(doc, query):
                self._check_unique(update["$set"], ignore_id=doc["_id"])
                before = copy.deepcopy(doc)
                doc.update(copy.deepcopy(update["$set"]))
                return copy.deepcopy(doc) if return_document else before
        return None

    async def delete_one(self, query):
        self._check_available()
        for i, doc in enumerate(self.data):
            if self._matches(doc, query):
                del self.data[i]
                return MagicMock(deleted_count=1)
        return MagicMock(deleted_count=0)


class MockDB:
    """Mock database: one MockCollection per name"""

    def __init__(self):
        self.collections: Dict[str, MockCollection] = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = MockCollection(name)
        return self.collections[name]


def make_payload(**overrides) -> Dict[str, Any]:
    """A valid employee payload in wire format."""
    payload = {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9999999999",
        "department": "Engineering",
        "position": "Engineer",
        "salary": 50000,
        "joiningDate": "2024-01-15",
    }
    payload.update(overrides)
    return payload


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def payload_factory():
    return make_payload


@pytest.fixture
async def db():
    mock_db = MockDB()
    await EmployeeRepository(mock_db[Collections.EMPLOYEES]).ensure_indexes()
    Database.use(mock_db)
    yield mock_db
    Database.close()


@pytest.fixture
def employees(db):
    """The employees MockCollection."""
    return db[Collections.EMPLOYEES]


@pytest.fixture
def employee_repo(employees):
    return EmployeeRepository(employees)


@pytest.fixture
async def client(db):
    """HTTP client bound to the in-process app, rooted at the API prefix."""
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver/api") as http_client:
        yield http_client


@pytest.fixture
def api_client(client):
    """Directory API client talking to the in-process app."""
    return EmployeeApiClient(client=client)
