"""
Shared fixtures: a fresh in-memory database per test and an API client.
"""
import os

# Must be set before core.db creates the engine
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from core import bulk_upload
from db_setup.init_db import reset_database


@pytest.fixture(autouse=True)
def fresh_database():
    reset_database()
    yield


@pytest.fixture(autouse=True)
def no_upload_delay(monkeypatch):
    monkeypatch.setattr(bulk_upload, "PROCESSING_DELAY_SECONDS", 0)


@pytest.fixture
def client():
    from api.main import app
    with TestClient(app) as test_client:
        yield test_client
