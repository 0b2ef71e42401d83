# ruff: noqa

import pytest
from fastapi.testclient import TestClient

from vendor_console.config import Settings
from vendor_console.main import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123!"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        secret_key="test-secret",
        log_level="WARNING",
        default_admin_email=ADMIN_EMAIL,
        default_admin_password=ADMIN_PASSWORD,
        default_admin_name="Root Admin",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    # client fixture has run startup, so tables exist
    return app.state.database


def create_department(client, **overrides) -> int:
    payload = {"department_name": "Engineering", "respective_manager": "Amy"}
    payload.update(overrides)
    response = client.post("/api/departments", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_user(client, **overrides) -> int:
    payload = {
        "name": "Bob Admin",
        "email": "bob@example.com",
        "joining_date": "2023-01-10",
        "password": "s3cret",
    }
    payload.update(overrides)
    response = client.post("/api/users", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_project(client, **overrides) -> int:
    payload = {"project_name": "Portal", "starting_date": "2024-03-01"}
    payload.update(overrides)
    response = client.post("/api/projects", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_employee(client, **overrides) -> int:
    payload = {"name": "Carol", "email": "carol@example.com", "joining_date": "2022-05-01"}
    payload.update(overrides)
    response = client.post("/api/employees", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["id"]
