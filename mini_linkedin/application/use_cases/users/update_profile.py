# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.domain.users.entities import UserProfile, validate_profile
from mini_linkedin.domain.users.exceptions import UserNotFoundError
from mini_linkedin.domain.users.repositories import UserRepository


class UpdateProfileUseCase:
    """Changes name and bio. Email and password are immutable here."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(
        self, user_id: str, *, name: str | None = None, bio: str | None = None
    ) -> UserProfile:
        if name is not None:
            name = name.strip()
            # An empty name means "leave unchanged".
            if not name:
                name = None
        validate_profile(name, bio)

        updated = self._users.update_profile(user_id, name=name, bio=bio)
        if updated is None:
            raise UserNotFoundError()
        return updated.profile()
