"""Use-case for reading a public user profile."""

from __future__ import annotations

from mini_linkedin.domain.users.entities import UserProfile
from mini_linkedin.domain.users.exceptions import UserNotFoundError
from mini_linkedin.domain.users.repositories import UserRepository


class GetProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: str) -> UserProfile:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user.profile()
