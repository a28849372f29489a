from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from mini_linkedin.domain.users.entities import is_valid_email
from mini_linkedin.interfaces.http.dto.users import UserDTO


def _check_email(value: str) -> str:
    value = value.strip()
    if not is_valid_email(value):
        raise ValueError("Please enter a valid email")
    return value.lower()


class RegisterRequestDTO(BaseModel):
    name: str
    email: str
    password: str

    model_config = ConfigDict(str_max_length=1024)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value.strip()

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class LoginRequestDTO(BaseModel):
    email: str
    password: str  # No strength check on login

    model_config = ConfigDict(str_max_length=1024)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class AuthSuccessDTO(BaseModel):
    success: bool = True
    message: str
    token: str
    user: UserDTO
