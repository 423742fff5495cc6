"""
Shared fixtures: an in-memory SQLite store, bootstrapped with the demo data.

Seeded ids are deterministic on a fresh store: users 1-3, properties 1-2,
units 1-3, tenants 1-2, associations 1-2, account types 1-4
(Asset, Liability, Income, Expense), accounts 1-2, transaction types 1-3
(Income, Expense, Transfer).
"""
import pytest
from fastapi.testclient import TestClient

from config import Settings
from database import Database
from main import create_app


@pytest.fixture
def settings():
     return Settings(
          database_url="sqlite://",
          jwt_secret="test-secret",
          bootstrap_retry_delay=0,
     )


@pytest.fixture
def db(settings):
     database = Database.from_settings(settings)
     yield database
     database.dispose()


@pytest.fixture
def client(settings, db):
     app = create_app(settings, db)
     with TestClient(app) as test_client:
          yield test_client


@pytest.fixture
def auth_headers(client):
     r = client.post("/login", json={"email": "owner@example.com", "password": "password123"})
     assert r.status_code == 200, r.text
     return {"Authorization": f"Bearer {r.json()['token']}"}
