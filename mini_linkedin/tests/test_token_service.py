from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from mini_linkedin.application.services.tokens import (
    JwtTokenService,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from mini_linkedin.shared.config import AuthConfig

SECRET = "token-test-secret-0123456789abcdefghijk"


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture()
def service(clock: FrozenClock) -> JwtTokenService:
    return JwtTokenService(secret=SECRET, clock=clock)


def _tamper_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    first = "A" if signature[0] != "A" else "B"
    return ".".join((header, payload, first + signature[1:]))


def test_issue_and_verify_round_trip(service: JwtTokenService) -> None:
    issued = service.issue("user-1")

    assert service.verify(issued.token) == "user-1"
    assert issued.expires_at - issued.issued_at == timedelta(days=7)


def test_claims_carry_subject_and_lifetime(service: JwtTokenService) -> None:
    issued = service.issue("user-1")

    claims = jwt.decode(
        issued.token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )

    assert claims["sub"] == "user-1"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_token_valid_one_second_before_expiry(
    service: JwtTokenService, clock: FrozenClock
) -> None:
    issued = service.issue("user-1")
    clock.now = issued.expires_at - timedelta(seconds=1)

    assert service.verify(issued.token) == "user-1"


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(seconds=1)])
def test_token_expired_at_and_after_exp(
    service: JwtTokenService, clock: FrozenClock, offset: timedelta
) -> None:
    issued = service.issue("user-1")
    clock.now = issued.expires_at + offset

    with pytest.raises(TokenExpiredError):
        service.verify(issued.token)


def test_tampered_signature_rejected(service: JwtTokenService) -> None:
    issued = service.issue("user-1")

    with pytest.raises(TokenSignatureError):
        service.verify(_tamper_signature(issued.token))


def test_other_secret_rejected(service: JwtTokenService, clock: FrozenClock) -> None:
    issued = service.issue("user-1")
    rotated = JwtTokenService(secret=SECRET + "-rotated", clock=clock)

    with pytest.raises(TokenSignatureError):
        rotated.verify(issued.token)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", "Bearer x"])
def test_malformed_tokens_rejected(service: JwtTokenService, token: str) -> None:
    with pytest.raises(TokenMalformedError):
        service.verify(token)


def test_token_without_exp_rejected(service: JwtTokenService) -> None:
    token = jwt.encode({"sub": "user-1"}, SECRET, algorithm="HS256")

    with pytest.raises(TokenMalformedError):
        service.verify(token)


def test_from_config_uses_configured_lifetime(clock: FrozenClock) -> None:
    config = AuthConfig(JWT_SECRET=SECRET, JWT_EXPIRES_DAYS=1)

    service = JwtTokenService.from_config(config, clock=clock)

    assert service.lifetime == timedelta(days=1)
    issued = service.issue("user-1")
    assert issued.expires_at == clock.now + timedelta(days=1)


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="")
