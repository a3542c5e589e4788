# tests/conftest.py
"""
Shared fixtures for the API tests.

The app runs against a throw-away SQLite file opened through aiosqlite. The
environment is set before the app is imported because the async engine is
built at import time. A plain synchronous engine on the same file lets tests
reset tables, count rows and pin timestamps without going through the API.
"""

import os
import tempfile
from pathlib import Path

DB_PATH = Path(tempfile.mkdtemp(prefix="catalog-tests-")) / "catalog.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["TESTING"] = "1"
os.environ["AUTO_CREATE_TABLES"] = "1"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select, update

from main import app
from shared.db import Base

sync_engine = create_engine(f"sqlite:///{DB_PATH}")


class DirectDatabase:
    """Reads and pokes rows directly; every call commits and releases its connection."""

    def count(self, model, **filters) -> int:
        stmt = select(func.count()).select_from(model)
        for column, value in filters.items():
            stmt = stmt.where(getattr(model, column) == value)
        with sync_engine.connect() as conn:
            return conn.execute(stmt).scalar_one()

    def set_columns(self, model, row_id: int, **values) -> None:
        with sync_engine.begin() as conn:
            conn.execute(update(model).where(model.id == row_id).values(**values))

    def execute_sql(self, sql: str) -> None:
        with sync_engine.begin() as conn:
            conn.exec_driver_sql(sql)


@pytest.fixture
def client():
    # Tables are recreated by the app's startup hook
    Base.metadata.drop_all(sync_engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    return DirectDatabase()


def school_payload(**overrides):
    payload = {
        "name": "Harrow Hill School",
        "description": "A traditional boarding school with strong sport",
        "region": "england",
        "cost_range": "40000",
        "website_url": "https://harrowhill.example.com",
        "contact_email": "admissions@harrowhill.example.com",
        "contact_phone": "+44 20 7946 0000",
        "address": "1 Hill Road, London",
        "profile_content": "<p>Founded in 1572.</p>",
        "is_featured": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_school(client):
    def _create(**overrides):
        response = client.post("/schools/", json=school_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def create_user(client):
    def _create(email, role="user", name="Test User"):
        response = client.post("/users/", json={"email": email, "name": name, "role": role})
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def admin(create_user):
    return create_user("editor@example.com", role="admin", name="Site Editor")


@pytest.fixture
def create_post(client, admin):
    def _create(**overrides):
        payload = {
            "title": "Choosing a boarding school",
            "slug": "choosing-a-boarding-school",
            "content": "<p>Things to consider.</p>",
            "excerpt": "Things to consider",
            "featured_image_url": None,
            "is_published": True,
            "author_id": admin["id"],
        }
        payload.update(overrides)
        response = client.post("/blog/posts", json=payload)
        assert response.status_code == 200, response.text
        return response.json()
    return _create
