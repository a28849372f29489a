# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.application.services.credentials import CredentialStore
from mini_linkedin.application.services.tokens import JwtTokenService
from mini_linkedin.domain.users.entities import UserProfile


class RegisterUserUseCase:
    def __init__(self, *, credentials: CredentialStore, tokens: JwtTokenService) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, name: str, email: str, password: str) -> tuple[UserProfile, str]:
        user = self._credentials.register(name, email, password)
        token = self._tokens.issue(user.id)
        return user.profile(), token.token
