# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolve an ``Authorization`` header to an authenticated user."""

from __future__ import annotations

from mini_linkedin.application.services.tokens import (
    JwtTokenService,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from mini_linkedin.domain.users.entities import UserProfile
from mini_linkedin.domain.users.repositories import UserRepository
from mini_linkedin.shared.errors.base import UnauthenticatedError
from mini_linkedin.shared.logging import logger

BEARER_PREFIX = "Bearer "


class MissingTokenError(UnauthenticatedError):
    default_message = "No token provided. Please login."
    default_code = "token_missing"


class InvalidTokenError(UnauthenticatedError):
    default_message = "Invalid token. Please login again."
    default_code = "token_invalid"


class ExpiredTokenError(UnauthenticatedError):
    default_message = "Token expired. Please login again."
    default_code = "token_expired"


class UnknownTokenUserError(UnauthenticatedError):
    default_message = "User not found. Please login again."
    default_code = "token_user_not_found"


def extract_bearer_token(header: str | None) -> str | None:
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX):].strip()
    if not token or " " in token:
        return None
    return token


class AuthGate:
    def __init__(self, *, tokens: JwtTokenService, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def authenticate(self, authorization: str | None) -> UserProfile:
        token = extract_bearer_token(authorization)
        if token is None:
            raise MissingTokenError()

        try:
            user_id = self._tokens.verify(token)
        except TokenExpiredError as exc:
            logger.info("auth.gate: token expired")
            raise ExpiredTokenError() from exc
        except (TokenMalformedError, TokenSignatureError) as exc:
            logger.info(f"auth.gate: token rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth.gate: token for missing user_id={user_id}")
            raise UnknownTokenUserError()
        return user.profile()


__all__ = [
    "AuthGate",
    "ExpiredTokenError",
    "InvalidTokenError",
    "MissingTokenError",
    "UnknownTokenUserError",
    "extract_bearer_token",
]
