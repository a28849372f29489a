from .entities import (
    Comment,
    Post,
    UserRef,
    validate_comment,
    validate_post_fields,
)
from .exceptions import NotPostOwnerError, PostNotFoundError
from .repositories import PostRepository

__all__ = [
    "Comment",
    "NotPostOwnerError",
    "Post",
    "PostNotFoundError",
    "PostRepository",
    "UserRef",
    "validate_comment",
    "validate_post_fields",
]
