"""Route test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeDatabase
    - get_db dependency overridden to return the fake handle
    - App exceptions are turned into responses (catch-all handler exercised)

Design Decisions:
    - ASGITransport does not run the lifespan: no real MongoDB is contacted
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contacts_api.core.domain_types import CONTACTS_COLLECTION
from contacts_api.infrastructure.database import get_db
from contacts_api.main import app
from tests.fake_store import FakeDatabase


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def contacts_collection(fake_db):
    return fake_db[CONTACTS_COLLECTION]


@pytest.fixture
async def client(fake_db):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_db] = lambda: fake_db

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def john_doe():
    return {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@x.com",
        "favoriteColor": "blue",
        "birthday": "1990-01-01",
    }


@pytest.fixture
async def created_id(client, john_doe):
    res = await client.post("/contacts", json=john_doe)
    assert res.status_code == 201
    return res.json()["id"]
