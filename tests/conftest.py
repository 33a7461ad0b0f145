# tests/conftest.py
# Environment is set before any project import, main.py builds an app on import.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_USERNAME"] = "tester"
os.environ["AUTH_PASSWORD"] = "s3cret"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

AUTH = ("tester", "s3cret")


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", AUTH_USERNAME="tester", AUTH_PASSWORD="s3cret")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def anonymous_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(anonymous_client):
    anonymous_client.auth = AUTH
    return anonymous_client


@pytest.fixture
def sample_expense():
    return {
        "title": "iPhone 17 Pro Max 2TB",
        "amount": 76900,
        "note": "birthday gift from my love",
        "tags": ["gadget"],
    }


@pytest.fixture
def seed_expense(client, sample_expense):
    response = client.post("/expenses", json=sample_expense)
    assert response.status_code == 201
    return response.json()
