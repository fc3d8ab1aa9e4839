"""Token issuing, verification and expiry parsing tests."""

import time
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt
from pydantic import ValidationError

from src.config import SAMPLE_JWT_SECRET, Settings
from src.errors import AppError, ErrorKind
from src.schemas.auth import AuthenticatedIdentity
from src.services.tokens import DEFAULT_EXPIRES_IN_SECONDS, TokenService, parse_expires_in

SECRET = "unit-test-secret"  # noqa: S105


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("30s", 30),
        ("15m", 900),
        ("2h", 7200),
        ("7d", 604800),
        ("2w", 1209600),
        ("0s", 0),
    ],
)
def test_parse_expires_in_units(value, expected):
    """Test that each duration unit converts to seconds."""
    assert parse_expires_in(value) == expected


@pytest.mark.parametrize("value", [None, "", "7", "d", "10x", "7 d", "1.5h", "-1d", "7D"])
def test_parse_expires_in_falls_back_to_seven_days(value):
    """Test that unrecognized expressions fall back to the default."""
    assert parse_expires_in(value) == DEFAULT_EXPIRES_IN_SECONDS == 604800


def test_issue_then_verify_returns_same_identity():
    """Test that a verified token decodes to the identity it was issued for."""
    service = TokenService(SECRET)
    identity = AuthenticatedIdentity(id=42, email="ana@x.com", name="Ana")

    token = service.issue(identity)

    assert service.verify(token) == identity


def test_token_payload_contains_identity_claims():
    """Test that the raw payload carries id, email, name and exp."""
    service = TokenService(SECRET, expires_in="1h")
    token = service.issue(AuthenticatedIdentity(id=7, email="bob@x.com", name="Bob"))

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["id"] == 7
    assert payload["email"] == "bob@x.com"
    assert payload["name"] == "Bob"
    remaining = payload["exp"] - datetime.now(UTC).timestamp()
    assert 3500 < remaining <= 3600


def test_token_with_one_second_expiry_expires():
    """Test that a short-lived token is accepted, then rejected after its window."""
    service = TokenService(SECRET, expires_in="1s")
    identity = AuthenticatedIdentity(id=1, email="ana@x.com", name="Ana")
    token = service.issue(identity)

    assert service.verify(token) == identity

    time.sleep(2.1)

    with pytest.raises(AppError) as exc_info:
        service.verify(token)
    assert exc_info.value.kind is ErrorKind.INVALID_OR_EXPIRED_TOKEN


def test_verify_rejects_wrong_signature():
    """Test that a token signed with another secret is rejected."""
    token = TokenService("another-secret").issue(
        AuthenticatedIdentity(id=1, email="ana@x.com", name="Ana")
    )

    with pytest.raises(AppError) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.kind is ErrorKind.INVALID_OR_EXPIRED_TOKEN


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_verify_rejects_malformed_token(token):
    """Test that garbage strings are rejected."""
    with pytest.raises(AppError) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.kind is ErrorKind.INVALID_OR_EXPIRED_TOKEN


def test_verify_rejects_payload_without_identity():
    """Test that a correctly signed token missing identity claims is rejected."""
    expire = datetime.now(UTC) + timedelta(hours=1)
    token = jwt.encode({"sub": "1", "exp": expire}, SECRET, algorithm="HS256")

    with pytest.raises(AppError) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.kind is ErrorKind.INVALID_OR_EXPIRED_TOKEN


def test_verify_rejects_token_without_expiry():
    """Test that a correctly signed token with no exp claim is rejected."""
    token = jwt.encode(
        {"id": 1, "email": "ana@example.com", "name": "Ana"}, SECRET, algorithm="HS256"
    )

    with pytest.raises(AppError) as exc_info:
        TokenService(SECRET).verify(token)
    assert exc_info.value.kind is ErrorKind.INVALID_OR_EXPIRED_TOKEN


def test_empty_secret_is_rejected():
    """Test that a token service cannot be built without a secret."""
    with pytest.raises(ValueError):
        TokenService("")


def test_settings_require_jwt_secret(monkeypatch):
    """Test that missing JWT_SECRET is a configuration error."""
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_sample_secret_in_production(monkeypatch):
    """Test that production refuses the placeholder secret."""
    monkeypatch.setenv("JWT_SECRET", SAMPLE_JWT_SECRET)
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_token_service_from_settings(monkeypatch):
    """Test that the expiry expression is read from settings."""
    monkeypatch.setenv("JWT_SECRET", SECRET)
    monkeypatch.setenv("JWT_EXPIRES_IN", "12h")

    service = TokenService.from_settings(Settings(_env_file=None))

    assert service.secret == SECRET
    assert service.expires_in_seconds == 43200
