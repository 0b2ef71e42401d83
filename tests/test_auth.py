# ruff: noqa

from datetime import timedelta

from vendor_console.services.auth import create_access_token, get_password_hash, verify_password
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, create_user


def test_login_with_seeded_admin(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == ADMIN_EMAIL
    assert body["user"]["name"] == "Root Admin"
    assert "password" not in body["user"]
    assert body["token_type"] == "bearer"
    assert body["access_token"]


def test_login_wrong_password_is_401(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_login_unknown_email_is_401(client):
    response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "x"})

    assert response.status_code == 401


def test_login_missing_fields_is_400(client):
    for payload in ({}, {"email": ADMIN_EMAIL}, {"password": ADMIN_PASSWORD}):
        response = client.post("/api/auth/login", json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": "Email and password are required"}


def test_created_user_can_log_in(client):
    create_user(client, email="new@example.com", password="hunter2")

    response = client.post("/api/auth/login", json={"email": "new@example.com", "password": "hunter2"})

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "new@example.com"


def test_update_without_password_keeps_login(client):
    user_id = create_user(client, email="keep@example.com", password="first")

    response = client.put(
        f"/api/users/{user_id}",
        json={"name": "Renamed", "email": "keep@example.com", "joining_date": "2023-01-10"},
    )
    assert response.status_code == 200

    login = client.post("/api/auth/login", json={"email": "keep@example.com", "password": "first"})
    assert login.status_code == 200
    assert login.json()["user"]["name"] == "Renamed"


def test_update_with_password_changes_login(client):
    user_id = create_user(client, email="swap@example.com", password="first")

    client.put(
        f"/api/users/{user_id}",
        json={"name": "Swap", "email": "swap@example.com", "joining_date": "2023-01-10", "password": "second"},
    )

    old = client.post("/api/auth/login", json={"email": "swap@example.com", "password": "first"})
    new = client.post("/api/auth/login", json={"email": "swap@example.com", "password": "second"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_passwords_are_stored_hashed(client, db):
    from vendor_console.repositories.users import UserRepository

    create_user(client, email="hash@example.com", password="plain-text")

    stored = UserRepository(db).get_credentials_by_email("hash@example.com")[0]["password"]
    assert stored != "plain-text"
    assert verify_password("plain-text", stored)


def test_me_with_bearer_token(client):
    token = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    ).json()["access_token"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == ADMIN_EMAIL


def test_me_without_token_is_401(client):
    client.cookies.clear()

    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_me_with_expired_token_is_401(client, settings):
    token = create_access_token({"sub": "1"}, settings, expires_delta=timedelta(minutes=-5))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_logout_clears_cookie(client):
    client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}


def test_verify_password_rejects_non_hash():
    assert verify_password("secret", "secret") is False
    assert verify_password("secret", get_password_hash("secret")) is True
