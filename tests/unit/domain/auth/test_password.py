"""Unit tests for bcrypt password hashing."""

import pytest

from newsroom.domain.auth.service.password import PasswordHasher
from newsroom.domain.shared.error import ValidationError


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(_rounds=4)


def test_hash_is_salted(hasher: PasswordHasher) -> None:
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert "secret123" not in first


def test_verify_accepts_correct_password(hasher: PasswordHasher) -> None:
    assert hasher.verify("secret123", hasher.hash("secret123")) is True


def test_verify_rejects_wrong_password(hasher: PasswordHasher) -> None:
    assert hasher.verify("wrong", hasher.hash("secret123")) is False


def test_malformed_hash_never_verifies(hasher: PasswordHasher) -> None:
    assert hasher.verify("secret123", "not-a-bcrypt-hash") is False


def test_overlong_password_rejected(hasher: PasswordHasher) -> None:
    with pytest.raises(ValidationError) as exc_info:
        hasher.hash("x" * 73)
    assert exc_info.value.field == "password"


def test_verify_dummy_returns_nothing(hasher: PasswordHasher) -> None:
    assert hasher.verify_dummy("anything") is None
