# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.shared.errors.base import ValidationError


class InvariantViolationError(ValidationError):
    def __init__(self, message: str, *, field: str | None = None):
        errors = [{"field": field or "unknown", "message": message, "type": "value_error"}]
        super().__init__(errors=errors)
        self.field = field
        self.detail = message

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.detail}"
        return self.detail


InvariantViolation = InvariantViolationError
