# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _clean_message(message: str) -> str:
    # pydantic prefixes custom ValueError messages
    prefix = "Value error, "
    if message.startswith(prefix):
        return message[len(prefix):]
    return message


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    errors_list = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "message": _clean_message(error.get("msg", "Invalid value")),
                "type": error.get("type", "value_error"),
            }
        )

    return errors_list


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(errors=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
