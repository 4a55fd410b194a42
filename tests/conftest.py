"""
Pytest configuration and fixtures.
"""

import asyncio
import os
import tempfile
from datetime import datetime, timedelta

import pytest

# Set test environment before the app builds its engine
os.environ["DB_BACKEND"] = "sqlite"
os.environ["SQLITE_PATH"] = os.path.join(tempfile.mkdtemp(), "tamagotchi_test.sqlite3")
os.environ["CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from tamagotchi_api.crud import DeleteData  # noqa: E402
from tamagotchi_api.db import engine  # noqa: E402
from tamagotchi_api.main import app  # noqa: E402


async def reset_database():
    await DeleteData.drop_table()
    await engine.dispose()


@pytest.fixture
def client():
    """Test client on an empty database; tables are dropped after each test."""
    with TestClient(app) as test_client:
        yield test_client
    asyncio.run(reset_database())


@pytest.fixture
def create_pet(client):
    """Create a pet through the API and return its JSON."""

    def _create_pet(name="Tama", **extra):
        response = client.post("/api/pets", json={"name": name, **extra})
        assert response.status_code == 201
        return response.json()

    return _create_pet


@pytest.fixture
def replace_pet(client):
    """PUT a modified copy of a pet and return the response JSON."""

    def _replace_pet(pet, **changes):
        body = {**pet, **changes}
        response = client.put(f"/api/pets/{pet['id']}", json=body)
        assert response.status_code == 200
        return response.json()

    return _replace_pet


@pytest.fixture
def neglected_date():
    """A last-interaction date just over the neglect window."""
    return (datetime.now() - timedelta(days=3, minutes=5)).isoformat()
