"""Fixtures for API tests: a full app over in-memory SQLite with a bootstrapped SUPER_ADMIN."""

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from newsroom.application.api.rest.app import create_app
from newsroom.config import (
    AuthConfig,
    BootstrapConfig,
    Config,
    DatabaseConfig,
    JwtConfig,
    PasswordConfig,
)

ROOT_EMAIL = "root@example.com"
ROOT_PASSWORD = "root-pass-123"

Headers = dict[str, str]


def _bearer(token: str) -> Headers:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def config() -> Config:
    return Config(
        database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"),
        auth=AuthConfig(
            jwt=JwtConfig(secret="test-secret-for-unit-tests-min-32"),
            password=PasswordConfig(bcrypt_rounds=4),
            bootstrap=BootstrapConfig(
                super_admin_email=ROOT_EMAIL,
                super_admin_password=ROOT_PASSWORD,
            ),
        ),
    )


@pytest.fixture
def client(config: Config) -> Iterator[TestClient]:
    with TestClient(create_app(config)) as test_client:
        yield test_client


@pytest.fixture
def bearer() -> Callable[[str], Headers]:
    return _bearer


@pytest.fixture
def login(client: TestClient) -> Callable[[str, str], Headers]:
    def _login(email: str, password: str) -> Headers:
        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return _bearer(response.json()["access_token"])

    return _login


@pytest.fixture
def register(client: TestClient) -> Callable[..., tuple[dict, Headers]]:
    def _register(
        email: str, password: str = "secret123", role: str | None = None
    ) -> tuple[dict, Headers]:
        body = {"email": email, "full_name": email.split("@")[0], "password": password}
        if role is not None:
            body["role"] = role
        response = client.post("/api/v1/auth/register", json=body)
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], _bearer(data["access_token"])

    return _register


@pytest.fixture
def root_headers(login: Callable[[str, str], Headers]) -> Headers:
    return login(ROOT_EMAIL, ROOT_PASSWORD)


@pytest.fixture
def provision(
    client: TestClient, root_headers: Headers, login: Callable[[str, str], Headers]
) -> Callable[[str, str], tuple[dict, Headers]]:
    """Create an account through the SUPER_ADMIN and log in as it."""

    def _provision(email: str, role: str) -> tuple[dict, Headers]:
        response = client.post(
            "/api/v1/users",
            headers=root_headers,
            json={"email": email, "full_name": role.title(), "password": "secret123", "role": role},
        )
        assert response.status_code == 201, response.text
        return response.json(), login(email, "secret123")

    return _provision
