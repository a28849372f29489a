# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from email_validator import EmailNotValidError, validate_email

from mini_linkedin.domain.exceptions import InvariantViolation

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
BIO_MAX_LENGTH = 500


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_email_format(email: str) -> None:
    if not is_valid_email(email):
        raise InvariantViolation("Please enter a valid email", field="email")


def validate_profile(name: str | None, bio: str | None) -> None:
    """Check the editable profile fields, skipping those left as None."""

    if name is not None and not NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH:
        raise InvariantViolation(
            f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
            field="name",
        )
    if bio is not None and len(bio) > BIO_MAX_LENGTH:
        raise InvariantViolation(
            f"Bio cannot be more than {BIO_MAX_LENGTH} characters", field="bio"
        )


@dataclass(slots=True, frozen=True)
class UserProfile:
    """Public view of a user. Carries no credential material."""

    id: str
    name: str
    email: str
    bio: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    name: str
    email: str
    password_hash: str
    bio: str
    created_at: datetime
    updated_at: datetime

    def profile(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            bio=self.bio,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r})"
