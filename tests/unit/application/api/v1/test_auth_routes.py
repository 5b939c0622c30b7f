"""API tests for registration, login, profile and token handling."""

from fastapi.testclient import TestClient

ROOT_EMAIL = "root@example.com"


def test_health(client: TestClient) -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"


def test_register_defaults_to_user_and_returns_token(client: TestClient, bearer) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "reader@example.com", "full_name": "Reader", "password": "secret123"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["role"] == "USER"
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 3600
    assert "password_hash" not in data["user"]

    profile = client.get("/api/v1/auth/profile", headers=bearer(data["access_token"]))
    assert profile.status_code == 200
    assert profile.json()["email"] == "reader@example.com"


def test_register_as_super_admin_forbidden_and_creates_nothing(client: TestClient) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={
            "email": "sneaky@example.com",
            "full_name": "Sneaky",
            "password": "secret123",
            "role": "SUPER_ADMIN",
        },
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Access denied"

    login = client.post(
        "/api/v1/auth/login", json={"email": "sneaky@example.com", "password": "secret123"}
    )
    assert login.status_code == 401


def test_register_unknown_role_is_validation_error(client: TestClient) -> None:
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "x@example.com", "full_name": "X", "password": "secret123", "role": "KING"},
    )
    assert response.status_code == 422


def test_register_duplicate_email_conflicts(client: TestClient, register) -> None:
    register("dup@example.com")
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "DUP@example.com", "full_name": "Dup", "password": "secret123"},
    )
    assert response.status_code == 409


def test_bad_login_responses_are_indistinguishable(client: TestClient, register) -> None:
    register("reader@example.com")

    wrong_password = client.post(
        "/api/v1/auth/login", json={"email": "reader@example.com", "password": "nope-nope"}
    )
    unknown_email = client.post(
        "/api/v1/auth/login", json={"email": "ghost@example.com", "password": "nope-nope"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_bootstrapped_super_admin_can_log_in(client: TestClient, root_headers: dict) -> None:
    profile = client.get("/api/v1/auth/profile", headers=root_headers)

    assert profile.status_code == 200
    assert profile.json()["email"] == ROOT_EMAIL
    assert profile.json()["role"] == "SUPER_ADMIN"


def test_profile_without_token_is_unauthenticated(client: TestClient) -> None:
    response = client.get("/api/v1/auth/profile")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["code"] == "unauthenticated"


def test_invalid_token_looks_like_missing_token(client: TestClient, bearer) -> None:
    missing = client.get("/api/v1/auth/profile")
    invalid = client.get("/api/v1/auth/profile", headers=bearer("not.a.token"))

    assert invalid.status_code == 401
    assert invalid.json() == missing.json()


def test_profile_update_cannot_change_role(client: TestClient, register) -> None:
    _, headers = register("reader@example.com")

    response = client.patch(
        "/api/v1/auth/profile",
        headers=headers,
        json={"full_name": "Renamed", "role": "ADMIN"},
    )

    assert response.status_code == 200
    assert response.json()["full_name"] == "Renamed"
    assert response.json()["role"] == "USER"
