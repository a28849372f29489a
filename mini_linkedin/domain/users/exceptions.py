# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.shared.errors.base import ConflictError, DomainError, NotFoundError


class EmailAlreadyRegisteredError(ConflictError):
    default_message = "An account with this email already exists."
    default_code = "email_already_registered"


class InvalidCredentialsError(DomainError):
    # One message for unknown email and wrong password alike.
    default_message = "Invalid email or password."
    default_code = "invalid_credentials"


class UserNotFoundError(NotFoundError):
    default_message = "User not found."
    default_code = "user_not_found"
