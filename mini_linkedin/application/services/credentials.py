# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.domain.exceptions import InvariantViolation
from mini_linkedin.domain.users.entities import (
    User,
    normalize_email,
    validate_email_format,
    validate_profile,
)
from mini_linkedin.domain.users.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from mini_linkedin.domain.users.repositories import PasswordHasher, UserRepository
from mini_linkedin.shared.logging import logger


class CredentialStore:
    """Registers users and checks email/password pairs."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        password_min_length: int = 6,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._password_min_length = password_min_length
        self._dummy_hash: str | None = None

    def register(self, name: str, email: str, raw_password: str) -> User:
        name = name.strip()
        validate_profile(name, None)
        validate_email_format(email)
        if len(raw_password) < self._password_min_length:
            raise InvariantViolation(
                f"Password must be at least {self._password_min_length} characters long",
                field="password",
            )

        normalized = normalize_email(email)
        if self._users.find_by_email(normalized) is not None:
            logger.info("credentials.register: duplicate email")
            raise EmailAlreadyRegisteredError()

        hashed = self._password_hasher.hash(raw_password)
        user = self._users.add(name=name, email=normalized, password_hash=hashed)
        logger.info(f"credentials.register: ok user_id={user.id}")
        return user

    def verify(self, email: str, raw_password: str) -> User:
        user = self._users.find_by_email(normalize_email(email))
        if user is None:
            # Spend the same hashing work as for a real account.
            self._password_hasher.verify(raw_password, self._get_dummy_hash())
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(raw_password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash("dummy-password-for-timing")
        return self._dummy_hash


__all__ = ["CredentialStore"]
