# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "changeme", "")
_MIN_PRODUCTION_SECRET_LENGTH = 32


class _EnvSection(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_by_name=True,
        extra="ignore",
    )


class DatabaseConfig(_EnvSection):
    url: str = Field("sqlite:///mini_linkedin.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    echo: bool = Field(False, alias="DATABASE_ECHO")


class AuthConfig(_EnvSection):
    jwt_secret: str = Field("dev", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_lifetime_days: int = Field(7, ge=1, alias="JWT_EXPIRES_DAYS")
    # Any method string accepted by werkzeug.security.generate_password_hash
    password_hash_method: str = Field("scrypt", alias="PASSWORD_HASH_METHOD")
    password_min_length: int = Field(6, ge=1, alias="PASSWORD_MIN_LENGTH")

    @field_validator("jwt_algorithm", mode="after")
    @classmethod
    def _hmac_only(cls, value: str) -> str:
        if value not in ("HS256", "HS384", "HS512"):
            raise ValueError("only HMAC algorithms are supported")
        return value


class UploadConfig(_EnvSection):
    directory: Path = Field(Path("uploads"), alias="UPLOAD_DIR")
    max_bytes: int = Field(5 * 1024 * 1024, ge=1, alias="MAX_UPLOAD_BYTES")
    allowed_extensions: Annotated[list[str], NoDecode] = Field(
        ["png", "jpg", "jpeg", "gif", "webp"], alias="UPLOAD_EXTENSIONS"
    )

    @field_validator("allowed_extensions", mode="before")
    @classmethod
    def _parse_extensions(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [ext.strip().lower().lstrip(".") for ext in value if ext.strip()]


class SecurityConfig(_EnvSection):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Status used when a user touches a post they do not own. 401 keeps
    # existing clients working, 403 is the semantically correct code.
    forbidden_status: int = Field(401, alias="FORBIDDEN_STATUS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("forbidden_status", mode="after")
    @classmethod
    def _check_forbidden_status(cls, value: int) -> int:
        if value not in (401, 403):
            raise ValueError("FORBIDDEN_STATUS must be 401 or 403")
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _upload_config_factory() -> UploadConfig:
    return UploadConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    uploads: UploadConfig = Field(default_factory=_upload_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        secret = self.auth.jwt_secret
        if secret in _INSECURE_SECRETS or len(secret) < _MIN_PRODUCTION_SECRET_LENGTH:
            print(
                "FATAL: JWT_SECRET must be a random value of at least "
                f"{_MIN_PRODUCTION_SECRET_LENGTH} characters when APP_ENV=production.",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.security.allowed_origins:
            print("WARNING: CORS allows any origin (ALLOWED_ORIGINS=*)", file=sys.stderr)
        if not self.security.enable_hsts:
            print("WARNING: HSTS is disabled (ENABLE_HSTS)", file=sys.stderr)
        if self.database.url.startswith("sqlite"):
            print("WARNING: SQLite is not meant for production traffic", file=sys.stderr)
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "SecurityConfig",
    "UploadConfig",
    "load_config",
]
