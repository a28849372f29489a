# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens.

Tokens are HMAC-signed JWTs carrying the user id in ``sub`` together with
``iat`` and ``exp``. There is no revocation list: a token stays valid until
``exp`` or until the signing secret changes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from mini_linkedin.shared.config import AuthConfig
from mini_linkedin.shared.logging import logger

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class TokenError(Exception):
    """Base exception for token verification failures."""


class TokenExpiredError(TokenError):
    pass


class TokenMalformedError(TokenError):
    pass


class TokenSignatureError(TokenError):
    pass


@dataclass(slots=True, frozen=True)
class IssuedToken:
    token: str
    user_id: str
    issued_at: datetime
    expires_at: datetime


class JwtTokenService:
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(days=7),
        clock: Clock = utc_now,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock

    @classmethod
    def from_config(cls, config: AuthConfig, *, clock: Clock = utc_now) -> JwtTokenService:
        return cls(
            secret=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            lifetime=timedelta(days=config.token_lifetime_days),
            clock=clock,
        )

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, user_id: str) -> IssuedToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._lifetime
        payload = {"sub": str(user_id), "iat": issued_at, "exp": expires_at}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: user={user_id} exp={expires_at.isoformat()}")
        return IssuedToken(
            token=token, user_id=str(user_id), issued_at=issued_at, expires_at=expires_at
        )

    def verify(self, token: str) -> str:
        """Return the user id embedded in ``token``.

        The signature is checked first; expiry is then compared against the
        service clock so that a token is rejected from ``exp`` onwards.
        """

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidSignatureError as exc:
            raise TokenSignatureError("signature verification failed") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenMalformedError(str(exc)) from exc

        exp = payload.get("exp")
        subject = payload.get("sub")
        if not isinstance(exp, (int, float)) or not isinstance(subject, str) or not subject:
            raise TokenMalformedError("token claims have unexpected types")

        if self._clock().timestamp() >= exp:
            raise TokenExpiredError("token has expired")
        return subject


__all__ = [
    "IssuedToken",
    "JwtTokenService",
    "TokenError",
    "TokenExpiredError",
    "TokenMalformedError",
    "TokenSignatureError",
    "utc_now",
]
