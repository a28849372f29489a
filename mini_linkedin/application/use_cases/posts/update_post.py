# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from mini_linkedin.domain.ownership import OwnershipGuard
from mini_linkedin.domain.posts.entities import Post, validate_post_fields
from mini_linkedin.domain.posts.exceptions import PostNotFoundError
from mini_linkedin.domain.posts.repositories import PostRepository


class UpdatePostUseCase:
    def __init__(self, *, posts: PostRepository, guard: OwnershipGuard) -> None:
        self._posts = posts
        self._guard = guard

    def execute(
        self,
        post_id: str,
        acting_user_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        validate_post_fields(title, content, partial=True)

        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError()
        self._guard.assert_owner(post, acting_user_id, action="edit")

        updated = self._posts.update(
            post_id,
            title=title.strip() if title is not None else None,
            content=content.strip() if content is not None else None,
        )
        if updated is None:
            raise PostNotFoundError()
        return updated
