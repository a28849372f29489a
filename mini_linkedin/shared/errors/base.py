# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True, eq=False)
class AppError(Exception):
    message: str
    status: HTTPStatus
    code: str = "app_error"
    errors: Sequence[Mapping[str, Any]] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "message": self.message}
        if self.errors:
            payload["errors"] = [dict(item) for item in self.errors]
        return payload


class DomainError(AppError):
    default_message: ClassVar[str] = "Request could not be completed."
    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        message: str | None = None,
        *,
        status: HTTPStatus | None = None,
        errors: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        super().__init__(
            message=message or self.default_message,
            status=status or self.default_status,
            code=self.default_code,
            errors=errors,
        )


class ValidationError(DomainError):
    default_message = "Please check your input and try again."
    default_code = "validation_error"


class ConflictError(DomainError):
    # Duplicate resources answer 400, matching the existing client contract.
    default_message = "Resource already exists."
    default_code = "conflict"


class UnauthenticatedError(DomainError):
    default_message = "Authentication failed. Please login again."
    default_code = "unauthenticated"
    default_status = HTTPStatus.UNAUTHORIZED


class ForbiddenError(DomainError):
    default_message = "You are not allowed to perform this action."
    default_code = "forbidden"
    default_status = HTTPStatus.UNAUTHORIZED


class NotFoundError(DomainError):
    default_message = "The requested resource was not found."
    default_code = "not_found"
    default_status = HTTPStatus.NOT_FOUND


__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthenticatedError",
    "ValidationError",
]
