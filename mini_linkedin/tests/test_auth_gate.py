from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from mini_linkedin.application.services.auth_gate import (
    AuthGate,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    UnknownTokenUserError,
    extract_bearer_token,
)
from mini_linkedin.application.services.credentials import CredentialStore
from mini_linkedin.application.services.tokens import JwtTokenService
from mini_linkedin.shared.errors.base import UnauthenticatedError

from test_auth_use_cases import DeterministicHasher, InMemoryUserRepository

SECRET = "gate-test-secret-0123456789abcdefghijklm"


class FrozenClock:
    def __init__(self) -> None:
        self.now = datetime(2024, 6, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens(clock: FrozenClock) -> JwtTokenService:
    return JwtTokenService(secret=SECRET, clock=clock)


@pytest.fixture()
def gate(tokens: JwtTokenService, users: InMemoryUserRepository) -> AuthGate:
    return AuthGate(tokens=tokens, users=users)


@pytest.fixture()
def alice_id(users: InMemoryUserRepository) -> str:
    store = CredentialStore(users=users, password_hasher=DeterministicHasher())
    return store.register("Alice", "alice@x.com", "secret1").id


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, None),
        ("", None),
        ("Token abc", None),
        ("bearer abc", None),
        ("Bearer ", None),
        ("Bearer a b", None),
        ("Bearer abc.def.ghi", "abc.def.ghi"),
    ],
)
def test_extract_bearer_token(header: str | None, expected: str | None) -> None:
    assert extract_bearer_token(header) == expected


def test_authenticate_attaches_public_profile(
    gate: AuthGate, tokens: JwtTokenService, alice_id: str
) -> None:
    token = tokens.issue(alice_id).token

    profile = gate.authenticate(f"Bearer {token}")

    assert profile.id == alice_id
    assert profile.email == "alice@x.com"
    assert not hasattr(profile, "password_hash")


@pytest.mark.parametrize("header", [None, "Basic dXNlcjpwYXNz", "Bearer"])
def test_missing_token(gate: AuthGate, header: str | None) -> None:
    with pytest.raises(MissingTokenError) as exc_info:
        gate.authenticate(header)

    assert exc_info.value.message == "No token provided. Please login."
    assert exc_info.value.status == 401


def test_invalid_token(gate: AuthGate) -> None:
    with pytest.raises(InvalidTokenError) as exc_info:
        gate.authenticate("Bearer garbage")

    assert exc_info.value.message == "Invalid token. Please login again."


def test_token_signed_with_other_secret(gate: AuthGate, clock: FrozenClock, alice_id: str) -> None:
    foreign = JwtTokenService(secret=SECRET + "-other", clock=clock).issue(alice_id).token

    with pytest.raises(InvalidTokenError):
        gate.authenticate(f"Bearer {foreign}")


def test_expired_token(
    gate: AuthGate, tokens: JwtTokenService, clock: FrozenClock, alice_id: str
) -> None:
    token = tokens.issue(alice_id).token
    clock.now += timedelta(days=7)

    with pytest.raises(ExpiredTokenError) as exc_info:
        gate.authenticate(f"Bearer {token}")

    assert exc_info.value.message == "Token expired. Please login again."


def test_token_for_deleted_user(gate: AuthGate, tokens: JwtTokenService) -> None:
    token = tokens.issue("ghost").token

    with pytest.raises(UnknownTokenUserError) as exc_info:
        gate.authenticate(f"Bearer {token}")

    assert exc_info.value.message == "User not found. Please login again."
    assert isinstance(exc_info.value, UnauthenticatedError)
