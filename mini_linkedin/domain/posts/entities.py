# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Post aggregate: content, likes and comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from mini_linkedin.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 1000
COMMENT_MAX_LENGTH = 500


def validate_post_fields(
    title: str | None, content: str | None, *, partial: bool = False
) -> None:
    """Check title and content; with ``partial`` a None field is left unchanged."""

    for name, value, limit, label in (
        ("title", title, TITLE_MAX_LENGTH, "Title"),
        ("content", content, CONTENT_MAX_LENGTH, "Post"),
    ):
        if value is None:
            if partial:
                continue
            raise InvariantViolation(f"Post {name} is required", field=name)
        if not value.strip():
            raise InvariantViolation(f"Post {name} is required", field=name)
        if len(value.strip()) > limit:
            raise InvariantViolation(
                f"{label} cannot be more than {limit} characters", field=name
            )


def validate_comment(text: str) -> None:
    if not text or not text.strip():
        raise InvariantViolation("Comment text is required", field="text")
    if len(text.strip()) > COMMENT_MAX_LENGTH:
        raise InvariantViolation(
            f"Comment cannot be more than {COMMENT_MAX_LENGTH} characters", field="text"
        )


@dataclass(slots=True, frozen=True)
class UserRef:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class Comment:
    id: str
    user: UserRef
    text: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Post:
    id: str
    title: str
    content: str
    image: str
    author: UserRef
    created_at: datetime
    updated_at: datetime
    likes: tuple[UserRef, ...] = field(default_factory=tuple)
    comments: tuple[Comment, ...] = field(default_factory=tuple)

    @property
    def owner_id(self) -> str:
        return self.author.id

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def comment_count(self) -> int:
        return len(self.comments)
