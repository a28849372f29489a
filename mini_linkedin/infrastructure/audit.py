# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Audit trail for account and content changes, written to the application log."""

from __future__ import annotations

from enum import Enum
from typing import Any

from mini_linkedin.shared.logging import logger

_REDACTED_KEYS = ("password", "token", "secret", "hash", "email")


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    PROFILE_UPDATED = "profile_updated"
    POST_CREATED = "post_created"
    POST_UPDATED = "post_updated"
    POST_DELETED = "post_deleted"
    POST_LIKED = "post_liked"
    POST_UNLIKED = "post_unliked"
    POST_COMMENTED = "post_commented"
    OWNERSHIP_DENIED = "ownership_denied"


def redact_details(details: dict[str, Any]) -> dict[str, Any]:
    return {
        key: "***REDACTED***"
        if any(marker in key.lower() for marker in _REDACTED_KEYS)
        else value
        for key, value in details.items()
    }


def audit_log(
    action: AuditAction,
    user_id: str | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    message = f"AUDIT: {action.value} | user_id={user_id} | ip={ip_address} | success={success}"
    if details:
        message += f" | details={redact_details(details)}"

    log = logger.info if success else logger.warning
    log(message)


__all__ = ["AuditAction", "audit_log", "redact_details"]
