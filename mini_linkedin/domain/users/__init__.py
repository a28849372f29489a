from .entities import (
    User,
    UserProfile,
    is_valid_email,
    normalize_email,
    validate_email_format,
    validate_profile,
)
from .exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError, UserNotFoundError
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "User",
    "UserNotFoundError",
    "UserProfile",
    "UserRepository",
    "is_valid_email",
    "normalize_email",
    "validate_email_format",
    "validate_profile",
]
